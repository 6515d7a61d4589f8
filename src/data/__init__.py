"""数据层模块"""

from .models import PriceBar, GlobalQuote, HistoricalMetadata
from .base import BaseMarketDataClient
from .alphavantage import AlphaVantageClient
from .analysis import analyze_historical_data

__all__ = [
    "PriceBar",
    "GlobalQuote",
    "HistoricalMetadata",
    "BaseMarketDataClient",
    "AlphaVantageClient",
    "analyze_historical_data",
]
