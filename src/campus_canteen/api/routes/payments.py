import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Header, Request

from campus_canteen.api.deps import get_payment_gateway, get_settings
from campus_canteen.config import Settings
from campus_canteen.errors import GatewayError
from campus_canteen.schemas.payment import CreateOrderRequest, VerifyPaymentRequest
from campus_canteen.services.payments import (
    RazorpayClient,
    to_minor_units,
    verify_client_signature,
    verify_webhook_signature,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/create-order", status_code=201)
async def create_order_endpoint(
    order_in: CreateOrderRequest,
    gateway: RazorpayClient = Depends(get_payment_gateway),
):
    """
    Создаёт заказ в Razorpay. amount - в минимальных единицах валюты (пайсах),
    дробная часть округляется.
    """
    try:
        return await gateway.create_order(
            amount=to_minor_units(order_in.amount),
            currency=order_in.currency,
            receipt=order_in.receipt,
            notes=order_in.notes,
        )
    except (httpx.HTTPError, ValueError) as exc:
        logger.exception("Razorpay order creation failed")
        raise GatewayError("Failed to create order") from exc


@router.post("/verify")
async def verify_payment(
    payment_in: VerifyPaymentRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Проверка подписи платежа, присланной клиентом после checkout.
    """
    verify_client_signature(
        payment_in.razorpay_order_id,
        payment_in.razorpay_payment_id,
        payment_in.razorpay_signature,
        settings.RAZORPAY_KEY_ID,
        settings.RAZORPAY_KEY_SECRET,
    )
    logger.info("Payment %s verified for order %s", payment_in.razorpay_payment_id, payment_in.razorpay_order_id)
    return {"status": "verified"}


@router.post("/webhook")
async def payment_webhook(
    request: Request,
    x_razorpay_signature: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
):
    """
    Вебхук Razorpay. Подпись сверяется с сырым телом запроса, поэтому тело
    читается байтами, а не через pydantic-схему.
    """
    raw_body = await request.body()
    verify_webhook_signature(raw_body, x_razorpay_signature, settings.RAZORPAY_WEBHOOK_SECRET)
    logger.info("Razorpay webhook accepted (%d bytes)", len(raw_body))
    return {"status": "ok"}
