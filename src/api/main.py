"""FastAPI 应用入口"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from src.api.routes import health, market
from src.core.logging import setup_logging, logger
from src.config.settings import settings

# 加载环境变量
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    setup_logging()
    logger.info(f"{settings.API_TITLE} 启动成功")
    if not settings.ALPHA_VANTAGE_API_KEY:
        logger.warning("未配置 ALPHA_VANTAGE_API_KEY，行情接口将返回 400")
    yield
    logger.info(f"{settings.API_TITLE} 已关闭")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# 配置 CORS，前端仪表盘单独部署
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(health.router, tags=["健康检查"])
app.include_router(market.router, prefix="/api", tags=["行情"])


def run() -> None:
    """命令行启动入口"""
    import uvicorn
    uvicorn.run("src.api.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
