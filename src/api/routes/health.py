"""健康检查端点"""

from fastapi import APIRouter

from src.config.settings import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """健康检查端点

    Returns:
        服务状态信息
    """
    return {
        "status": "ok",
        "version": settings.API_VERSION,
        "service": settings.API_TITLE
    }
