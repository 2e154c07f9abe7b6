import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_canteen.api.deps import get_item_id, require_canteen
from campus_canteen.crud.item import create_item, delete_item, get_items, update_item
from campus_canteen.db.deps import get_async_session
from campus_canteen.errors import NotFoundError, StoreError
from campus_canteen.schemas.item import ItemCreate, ItemRead, ItemUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/canteens/{canteen_id}/items", tags=["items"])


@router.get("", response_model=List[ItemRead])
async def list_items(
    canteen_id: int = Depends(require_canteen("Failed to fetch items")),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Позиции меню столовой, по возрастанию id.
    """
    try:
        return await get_items(db, canteen_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch items for canteen %s", canteen_id)
        raise StoreError("Failed to fetch items") from exc


@router.post("", response_model=ItemRead, status_code=201)
async def create_item_endpoint(
    item_in: ItemCreate,
    canteen_id: int = Depends(require_canteen("Failed to create item")),
    db: AsyncSession = Depends(get_async_session),
):
    try:
        item = await create_item(db, canteen_id, item_in)
    except IntegrityError as exc:
        # столовую удалили между проверкой и записью
        await db.rollback()
        logger.warning("Canteen %s vanished before item insert", canteen_id)
        raise NotFoundError("Canteen not found") from exc
    except SQLAlchemyError as exc:
        logger.exception("Failed to create item in canteen %s", canteen_id)
        raise StoreError("Failed to create item") from exc

    logger.info("Item %s created in canteen %s", item.id, canteen_id)
    return item


@router.put("/{item_id}", response_model=ItemRead)
async def update_item_endpoint(
    item_in: ItemUpdate,
    canteen_id: int = Depends(require_canteen("Failed to update item")),
    item_id: int = Depends(get_item_id),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление позиции.
    Поддерживаемые поля: name, price, rating, isVeg. canteenId не меняется.
    """
    fields = item_in.model_dump(exclude_unset=True)
    try:
        item = await update_item(db, canteen_id, item_id, fields)
    except SQLAlchemyError as exc:
        logger.exception("Failed to update item %s in canteen %s", item_id, canteen_id)
        raise StoreError("Failed to update item") from exc

    if item is None:
        raise NotFoundError("Item not found")
    return item


@router.delete("/{item_id}", status_code=204)
async def remove_item(
    canteen_id: int = Depends(require_canteen("Failed to delete item")),
    item_id: int = Depends(get_item_id),
    db: AsyncSession = Depends(get_async_session),
):
    try:
        deleted = await delete_item(db, canteen_id, item_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete item %s in canteen %s", item_id, canteen_id)
        raise StoreError("Failed to delete item") from exc

    if not deleted:
        raise NotFoundError("Item not found")
    logger.info("Item %s deleted from canteen %s", item_id, canteen_id)
