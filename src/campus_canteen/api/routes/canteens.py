import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_canteen.crud.canteen import create_canteen, delete_canteen, get_canteens
from campus_canteen.db.deps import get_async_session
from campus_canteen.errors import NotFoundError, StoreError
from campus_canteen.schemas.canteen import CanteenCreate, CanteenRead
from campus_canteen.validators import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/canteens", tags=["canteens"])


@router.get("", response_model=List[CanteenRead])
async def list_canteens(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает список столовых, отсортированный по id.
    """
    try:
        return await get_canteens(db)
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch canteens")
        raise StoreError("Failed to fetch canteens") from exc


@router.post("", response_model=CanteenRead, status_code=201)
async def create_canteen_endpoint(canteen_in: CanteenCreate, db: AsyncSession = Depends(get_async_session)):
    try:
        canteen = await create_canteen(db, canteen_in)
    except SQLAlchemyError as exc:
        logger.exception("Failed to create canteen")
        raise StoreError("Failed to create canteen") from exc

    logger.info("Canteen %s created", canteen.id)
    return canteen


@router.delete("/{canteen_id}", status_code=204)
async def remove_canteen(canteen_id: str, db: AsyncSession = Depends(get_async_session)):
    """
    Удаляет столовую вместе с её позициями меню.
    Нет такой строки -> 404, любой другой сбой БД -> 500.
    """
    parsed_id = parse_id(canteen_id, "id")
    try:
        deleted = await delete_canteen(db, parsed_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete canteen %s", parsed_id)
        raise StoreError("Failed to delete canteen") from exc

    if not deleted:
        raise NotFoundError("Canteen not found")
    logger.info("Canteen %s deleted", parsed_id)
