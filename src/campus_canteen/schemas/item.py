from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from ..validators import clean_name, invalid, optional_number, required_number, strict_bool


Rating = Annotated[Optional[float], BeforeValidator(optional_number("rating must be a number"))]
IsVeg = Annotated[bool, BeforeValidator(strict_bool("isVeg must be boolean"))]


class ItemCreate(BaseModel):
    """
    Поля проверяются в порядке объявления: name, price, rating, isVeg.
    Отсутствующий rating сохраняется как null.
    """

    name: Annotated[str, BeforeValidator(clean_name("name is required"))] = None
    price: Annotated[Decimal, BeforeValidator(required_number("price is required"))] = None
    rating: Rating = None
    is_veg: IsVeg = Field(None, alias="isVeg")

    class Config:
        validate_default = True


class ItemUpdate(BaseModel):
    """
    Частичное обновление: в model_dump(exclude_unset=True) попадают только
    присланные поля. Явный rating: null очищает рейтинг.
    """

    name: Annotated[str, BeforeValidator(clean_name("name must be a non-empty string"))] = None
    price: Annotated[Decimal, BeforeValidator(required_number("price must be a number"))] = None
    rating: Rating = None
    is_veg: IsVeg = Field(None, alias="isVeg")

    @model_validator(mode="after")
    def check_has_fields(self):
        if not self.model_fields_set:
            raise invalid("no fields to update")
        return self


class ItemRead(BaseModel):
    id: int
    name: str
    price: float
    rating: Optional[float] = None
    is_veg: bool = Field(serialization_alias="isVeg")
    canteen_id: int = Field(serialization_alias="canteenId")

    class Config:
        from_attributes = True
