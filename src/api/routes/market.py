# src/api/routes/market.py
"""行情与 Heikin-Ashi 相关端点

- GET /api/quote        实时报价
- GET /api/historical   日线历史数据 + 元信息
- GET /api/heikin-ashi  Heikin-Ashi 蜡烛图数据 (按时间正序)
"""

import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.data import AlphaVantageClient, BaseMarketDataClient, analyze_historical_data
from src.indicators import calculate_heikin_ashi
from src.messages import ErrorMessage


router = APIRouter()
logger = logging.getLogger(__name__)


# === 依赖注入 ===

@lru_cache()
def get_market_data_client() -> BaseMarketDataClient:
    """获取行情客户端实例 (依赖注入)"""
    return AlphaVantageClient()


# === 响应模型 ===

class QuoteResponse(BaseModel):
    """实时报价响应"""
    symbol: str
    open: float
    high: float
    low: float
    price: float
    volume: int
    latest_trading_day: str
    previous_close: float
    change: float
    change_percent: str


class PriceBarResponse(BaseModel):
    """日线 K 线"""
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int


class HeikinAshiResponse(BaseModel):
    """Heikin-Ashi K 线 (蜡烛图组件格式)"""
    time: str
    open: float
    high: float
    low: float
    close: float


class MetadataResponse(BaseModel):
    """历史数据元信息"""
    symbol: str
    dataPoints: int
    oldestDate: str
    newestDate: str
    warnings: List[str]


class HistoricalResponse(BaseModel):
    """日线历史数据响应"""
    data: List[PriceBarResponse]
    metadata: MetadataResponse


class HeikinAshiSeriesResponse(BaseModel):
    """Heikin-Ashi 序列响应"""
    symbol: str
    data: List[HeikinAshiResponse]
    metadata: MetadataResponse


def _to_http_error(e: Exception) -> HTTPException:
    """数据层异常 -> HTTP 状态码"""
    if isinstance(e, ValueError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, LookupError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, TimeoutError):
        return HTTPException(status_code=504, detail=str(e))
    if isinstance(e, ConnectionError):
        return HTTPException(status_code=502, detail=str(e))
    logger.error(f"请求处理异常: {e!r}")
    return HTTPException(status_code=500, detail=ErrorMessage.HTTP_INTERNAL_ERROR.format(error=str(e)))


# === API 端点 ===

@router.get("/quote", response_model=QuoteResponse)
async def get_quote(
    symbol: str = Query(..., min_length=1, description="股票代码，如 IBM"),
    client: BaseMarketDataClient = Depends(get_market_data_client)
) -> dict:
    """获取实时报价

    Args:
        symbol: 股票代码

    Returns:
        报价数据
    """
    try:
        return client.get_global_quote(symbol).to_dict()
    except Exception as e:
        raise _to_http_error(e)


@router.get("/historical", response_model=HistoricalResponse)
async def get_historical(
    symbol: str = Query(..., min_length=1, description="股票代码，如 IBM"),
    outputsize: str = Query("full", pattern="^(compact|full)$", description="compact 或 full"),
    client: BaseMarketDataClient = Depends(get_market_data_client)
) -> dict:
    """获取日线历史数据

    返回按时间正序的日线及数据完整性元信息。
    """
    try:
        bars = client.get_daily_series(symbol, outputsize=outputsize)
        metadata = analyze_historical_data(symbol, bars)
        return {
            "data": [bar.to_dict() for bar in bars],
            "metadata": metadata.to_dict(),
        }
    except Exception as e:
        raise _to_http_error(e)


@router.get("/heikin-ashi", response_model=HeikinAshiSeriesResponse)
async def get_heikin_ashi(
    symbol: str = Query(..., min_length=1, description="股票代码，如 IBM"),
    outputsize: str = Query("full", pattern="^(compact|full)$", description="compact 或 full"),
    client: BaseMarketDataClient = Depends(get_market_data_client)
) -> dict:
    """获取 Heikin-Ashi 蜡烛图数据

    Returns:
        {symbol, data: [{time, open, high, low, close}], metadata}
    """
    try:
        bars = client.get_daily_series(symbol, outputsize=outputsize)
        candles = calculate_heikin_ashi(bars)
        metadata = analyze_historical_data(symbol, bars)
        return {
            "symbol": symbol,
            "data": [c.to_dict() for c in candles],
            "metadata": metadata.to_dict(),
        }
    except Exception as e:
        raise _to_http_error(e)
