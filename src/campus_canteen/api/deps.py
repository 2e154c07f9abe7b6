import logging
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..crud.canteen import get_canteen_by_id
from ..crud.student import get_student_by_id
from ..db.deps import get_async_session
from ..errors import AuthenticationError, ConfigurationError, NotFoundError, StoreError
from ..models import Student
from ..services.payments import RazorpayClient
from ..services.security import decode_access_token, require_secret
from ..validators import parse_id

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_gateway(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> RazorpayClient:
    """Клиент Razorpay; без ключей API запрос дальше не идёт."""
    if not settings.razorpay_ready:
        raise ConfigurationError("Razorpay keys not configured")
    return request.app.state.payment_gateway


def require_canteen(failure_message: str) -> Callable:
    """
    Зависимость для маршрутов /canteens/{canteen_id}/items.
    Проверяет, что столовая существует, на каждом запросе: её могли удалить
    между запросами. Сбой БД отдаём с сообщением конкретной операции.
    """

    async def dependency(canteen_id: str, db: AsyncSession = Depends(get_async_session)) -> int:
        parsed_id = parse_id(canteen_id, "canteenId")
        try:
            canteen = await get_canteen_by_id(db, parsed_id, lock=True)
        except SQLAlchemyError as exc:
            logger.exception("Canteen lookup failed for canteen_id=%s", parsed_id)
            raise StoreError(failure_message) from exc
        if canteen is None:
            raise NotFoundError("Canteen not found")
        return parsed_id

    return dependency


def get_item_id(item_id: str) -> int:
    return parse_id(item_id, "id")


async def get_current_student(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_async_session),
) -> Student:
    require_secret(settings.JWT_SECRET)
    if credentials is None:
        raise AuthenticationError("missing bearer token")

    claims = decode_access_token(credentials.credentials, settings.JWT_SECRET)
    try:
        student_id = int(claims["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("invalid token") from None

    try:
        student = await get_student_by_id(db, student_id)
    except SQLAlchemyError as exc:
        logger.exception("Student lookup failed for id=%s", student_id)
        raise StoreError("Failed to fetch student") from exc
    if student is None:
        raise AuthenticationError("invalid token")
    return student
