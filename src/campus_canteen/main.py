import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api import health
from .api.routes.auth import router as auth_router
from .api.routes.canteens import router as canteens_router
from .api.routes.items import router as items_router
from .api.routes.payments import router as payments_router
from .config import Settings, get_settings
from .db.base import Base
from .db.session import create_engine, create_session_factory
from .errors import register_exception_handlers
from .logging_config import configure_logging
from .services.payments import RazorpayClient

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, payment_gateway: Optional[RazorpayClient] = None) -> FastAPI:
    """
    Собирает приложение. Движок БД и клиент Razorpay создаются один раз в lifespan,
    лежат в app.state и закрываются при остановке.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings)
        if settings.DB_CREATE_ALL:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        gateway = payment_gateway or RazorpayClient(
            settings.RAZORPAY_KEY_ID,
            settings.RAZORPAY_KEY_SECRET,
            base_url=settings.RAZORPAY_API_URL,
            timeout=settings.RAZORPAY_TIMEOUT,
        )
        if not gateway.configured:
            logger.warning("Razorpay keys not configured, payment endpoints will fail")
        if not settings.JWT_SECRET:
            logger.warning("JWT_SECRET not configured, auth endpoints will fail")

        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.payment_gateway = gateway
        logger.info("Application started")
        try:
            yield
        finally:
            await gateway.aclose()
            await engine.dispose()
            logger.info("Application stopped")

    app = FastAPI(title="Campus Canteen API", lifespan=lifespan)
    app.state.settings = settings

    register_exception_handlers(app)

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(canteens_router)
    app.include_router(items_router)
    app.include_router(auth_router)
    app.include_router(payments_router)

    return app


app = create_app()
