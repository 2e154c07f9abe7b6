from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from ..db.base import Base


class Canteen(Base):
    __tablename__ = "canteens"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    ratings = Column(Float, nullable=True)

    # позиции меню удаляются вместе со столовой на уровне БД (ON DELETE CASCADE)
    items = relationship("CanteenItem", back_populates="canteen", passive_deletes=True)
