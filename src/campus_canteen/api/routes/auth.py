import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from campus_canteen.api.deps import get_current_student, get_settings
from campus_canteen.config import Settings
from campus_canteen.crud.student import create_student, get_student_by_email
from campus_canteen.db.deps import get_async_session
from campus_canteen.errors import AuthenticationError, ConflictError, StoreError
from campus_canteen.models import Student
from campus_canteen.schemas.student import AuthResponse, LoginRequest, RegisterRequest, StudentRead
from campus_canteen.services.security import (
    create_access_token,
    dummy_password_hash,
    hash_password,
    require_secret,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(student: Student, settings: Settings) -> str:
    return create_access_token(student.id, student.email, settings.JWT_SECRET, settings.JWT_EXPIRES_DAYS)


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    student_in: RegisterRequest,
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Регистрация студента. Email хранится в нижнем регистре и уникален.
    """
    require_secret(settings.JWT_SECRET)

    try:
        if await get_student_by_email(db, student_in.email):
            raise ConflictError("email already registered")

        password_hash = await run_in_threadpool(hash_password, student_in.password, settings.BCRYPT_ROUNDS)
        student = await create_student(db, student_in, password_hash)
    except IntegrityError as exc:
        # параллельная регистрация с тем же email
        await db.rollback()
        raise ConflictError("email already registered") from exc
    except SQLAlchemyError as exc:
        logger.exception("Failed to register student")
        raise StoreError("Failed to register") from exc
    except ValueError as exc:
        logger.exception("Password hashing failed")
        raise StoreError("Failed to register") from exc

    logger.info("Student %s registered", student.id)
    return {"token": _issue_token(student, settings), "student": student}


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Вход по email и паролю.
    Неизвестный email и неверный пароль дают один и тот же ответ 401.
    """
    require_secret(settings.JWT_SECRET)

    try:
        student = await get_student_by_email(db, credentials.email)
    except SQLAlchemyError as exc:
        logger.exception("Failed to look up student for login")
        raise StoreError("Failed to login") from exc

    try:
        # для неизвестного email тоже сверяем пароль: время ответа одинаковое
        if student is not None:
            password_hash = student.password
        else:
            password_hash = await run_in_threadpool(dummy_password_hash, settings.BCRYPT_ROUNDS)
        ok = await run_in_threadpool(verify_password, credentials.password, password_hash)
    except ValueError as exc:
        logger.exception("Stored password hash is malformed")
        raise StoreError("Failed to login") from exc

    if student is None or not ok:
        logger.warning("Failed login attempt")
        raise AuthenticationError("invalid credentials")

    return {"token": _issue_token(student, settings), "student": student}


@router.get("/me", response_model=StudentRead)
async def me(student: Student = Depends(get_current_student)):
    """
    Текущий студент по bearer-токену из /auth/login или /auth/register.
    """
    return student
