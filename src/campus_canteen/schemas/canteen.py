from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator

from ..validators import clean_name, optional_number


class CanteenCreate(BaseModel):
    name: Annotated[str, BeforeValidator(clean_name("name is required"))] = None
    ratings: Annotated[Optional[float], BeforeValidator(optional_number("ratings must be a number"))] = None

    class Config:
        validate_default = True


class CanteenRead(BaseModel):
    id: int
    name: str
    ratings: Optional[float] = None

    class Config:
        from_attributes = True
