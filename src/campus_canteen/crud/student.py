from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_canteen.models import Student
from campus_canteen.schemas.student import RegisterRequest


async def get_student_by_email(db: AsyncSession, email: str) -> Optional[Student]:
    result = await db.execute(select(Student).where(Student.email == email))
    return result.scalars().first()


async def get_student_by_id(db: AsyncSession, student_id: int) -> Optional[Student]:
    return await db.get(Student, student_id)


async def create_student(db: AsyncSession, student_in: RegisterRequest, password_hash: str) -> Student:
    student = Student(
        name=student_in.name,
        email=student_in.email,
        number=student_in.number,
        branch=student_in.branch,
        roll_number=student_in.roll_number,
        password=password_hash,
    )
    db.add(student)
    await db.commit()
    await db.refresh(student)
    return student
