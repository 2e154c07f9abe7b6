import math
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from pydantic_core import PydanticCustomError

from .errors import ValidationError


def invalid(message: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_field", message)


def parse_id(value: Any, field: str) -> int:
    """
    Идентификатор из пути: целое число, иначе 400.
    "1.0" и " 7 " считаются целыми, "1.5" и "abc" нет.
    """
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field} must be an integer") from None
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"{field} must be an integer")
    return int(number)


def to_number(value: Any) -> Optional[Decimal]:
    """Число или числовая строка -> Decimal; всё остальное (включая bool) -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
    elif isinstance(value, str) and value.strip():
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite():
        return None
    return number


def clean_name(message: str) -> Callable[[Any], str]:
    def validate(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise invalid(message)
        return value.strip()

    return validate


def required_number(message: str) -> Callable[[Any], Decimal]:
    def validate(value: Any) -> Decimal:
        number = to_number(value)
        if number is None:
            raise invalid(message)
        return number

    return validate


def optional_number(message: str) -> Callable[[Any], Optional[float]]:
    """
    null допустим и сохраняется как null; нечисловое значение отклоняется.
    Значение за пределами float (например "1e400") тоже отклоняется.
    """

    def validate(value: Any) -> Optional[float]:
        if value is None:
            return None
        number = to_number(value)
        if number is None:
            raise invalid(message)
        result = float(number)
        if not math.isfinite(result):
            raise invalid(message)
        return result

    return validate


def strict_bool(message: str) -> Callable[[Any], bool]:
    def validate(value: Any) -> bool:
        if not isinstance(value, bool):
            raise invalid(message)
        return value

    return validate


def optional_text(value: Any) -> Optional[str]:
    """Приводит значение к строке без пробелов по краям; пустое -> None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
