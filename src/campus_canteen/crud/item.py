from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus_canteen.models import CanteenItem
from campus_canteen.schemas.item import ItemCreate


async def get_items(db: AsyncSession, canteen_id: int) -> List[CanteenItem]:
    stmt = (
        select(CanteenItem)
        .where(CanteenItem.canteen_id == canteen_id)
        .order_by(CanteenItem.id)
    )
    result = await db.execute(stmt)
    return result.scalars().all()


async def get_item(db: AsyncSession, canteen_id: int, item_id: int) -> Optional[CanteenItem]:
    stmt = (
        select(CanteenItem)
        .where(CanteenItem.id == item_id, CanteenItem.canteen_id == canteen_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalars().first()


async def create_item(db: AsyncSession, canteen_id: int, item_in: ItemCreate) -> CanteenItem:
    item = CanteenItem(
        name=item_in.name,
        price=item_in.price,
        rating=item_in.rating,
        is_veg=item_in.is_veg,
        canteen_id=canteen_id,
    )
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def update_item(
    db: AsyncSession,
    canteen_id: int,
    item_id: int,
    fields: Dict[str, Any],
) -> Optional[CanteenItem]:
    """
    Частичное обновление позиции.
    WHERE по id и canteen_id: позицию чужой столовой обновить нельзя.
    UPDATE возвращает только число строк, поэтому строку перечитываем.
    """
    stmt = (
        update(CanteenItem)
        .where(CanteenItem.id == item_id, CanteenItem.canteen_id == canteen_id)
        .values(**fields)
    )
    result = await db.execute(stmt)
    if result.rowcount == 0:
        await db.rollback()
        return None
    await db.commit()

    return await get_item(db, canteen_id, item_id)


async def delete_item(db: AsyncSession, canteen_id: int, item_id: int) -> bool:
    stmt = delete(CanteenItem).where(CanteenItem.id == item_id, CanteenItem.canteen_id == canteen_id)
    result = await db.execute(stmt)
    if result.rowcount == 0:
        await db.rollback()
        return False
    await db.commit()
    return True
