from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, BeforeValidator

from ..validators import required_number


class CreateOrderRequest(BaseModel):
    amount: Annotated[Decimal, BeforeValidator(required_number("amount is required"))] = None
    currency: str = "INR"
    receipt: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None

    class Config:
        validate_default = True


class VerifyPaymentRequest(BaseModel):
    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None
