from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", summary="Service status")
async def root():
    return {"status": "ok", "message": "Campus canteen API running"}


@router.get("/health", summary="Health check", response_class=PlainTextResponse)
async def health_check():
    """
    Простейший health-check эндпоинт для мониторинга.
    """
    return "OK"
