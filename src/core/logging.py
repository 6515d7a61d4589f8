import sys
import logging
from typing import Optional

from src.config.settings import settings

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
JSON_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'

# 行情请求经 requests/urllib3 发出，连接池日志在 INFO 下过于嘈杂
QUIET_LOGGERS = {
    "urllib3": logging.WARNING,
    "requests": logging.WARNING,
    "uvicorn": logging.INFO,
}


def setup_logging(level: Optional[str] = None) -> None:
    """配置日志系统

    Args:
        level: 日志级别，默认读取 settings.LOG_LEVEL
    """
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    # 重复调用时不叠加 handler
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(JSON_FORMAT if settings.LOG_JSON_FORMAT else PLAIN_FORMAT))
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").handlers = []  # 避免 uvicorn 重复处理
    for name, lvl in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(lvl)

logger = logging.getLogger("essentialta")
