from sqlalchemy import Column, Integer, String, DateTime, func
from ..db.base import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)  # всегда в нижнем регистре
    number = Column(String(32), nullable=False)
    branch = Column(String(128), nullable=True)
    roll_number = Column(String(64), nullable=True)
    password = Column(String(128), nullable=False)  # bcrypt-хеш, не сам пароль
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
