from sqlalchemy import Column, Integer, String, Numeric, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class CanteenItem(Base):
    __tablename__ = "canteen_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    rating = Column(Float, nullable=True)
    is_veg = Column(Boolean, nullable=False)
    canteen_id = Column(Integer, ForeignKey("canteens.id", ondelete="CASCADE"), nullable=False, index=True)

    canteen = relationship("Canteen", back_populates="items")
