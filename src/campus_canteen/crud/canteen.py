from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_canteen.models import Canteen
from campus_canteen.schemas.canteen import CanteenCreate


async def get_canteens(db: AsyncSession) -> List[Canteen]:
    result = await db.execute(select(Canteen).order_by(Canteen.id))
    return result.scalars().all()


async def get_canteen_by_id(db: AsyncSession, canteen_id: int, lock: bool = False) -> Optional[Canteen]:
    """
    Возвращает столовую по ID.
    lock=True берёт разделяемую блокировку строки (FOR SHARE) до конца транзакции:
    параллельное удаление столовой подождёт, пока запишутся её позиции.
    """
    stmt = select(Canteen).where(Canteen.id == canteen_id)
    if lock:
        stmt = stmt.with_for_update(read=True)
    result = await db.execute(stmt)
    return result.scalars().first()


async def create_canteen(db: AsyncSession, canteen_in: CanteenCreate) -> Canteen:
    canteen = Canteen(name=canteen_in.name, ratings=canteen_in.ratings)
    db.add(canteen)
    await db.commit()
    await db.refresh(canteen)
    return canteen


async def delete_canteen(db: AsyncSession, canteen_id: int) -> bool:
    """
    Удаляет столовую. Позиции меню удаляет сама БД (ON DELETE CASCADE).
    """
    canteen = await db.get(Canteen, canteen_id)
    if not canteen:
        return False
    await db.delete(canteen)
    await db.commit()
    return True
