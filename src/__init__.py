"""Essential TA - 股票行情与 Heikin-Ashi 技术分析"""

from .data import PriceBar, AlphaVantageClient, BaseMarketDataClient
from .indicators import HeikinAshiBar, calculate_heikin_ashi
from .messages import ErrorMessage, ProviderType

__version__ = "0.1.0"
__all__ = [
    "PriceBar",
    "AlphaVantageClient",
    "BaseMarketDataClient",
    "HeikinAshiBar",
    "calculate_heikin_ashi",
    "ErrorMessage",
    "ProviderType",
]
