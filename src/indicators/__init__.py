# src/indicators/__init__.py
"""技术指标库

Example:
    >>> from src.indicators import calculate_heikin_ashi
    >>>
    >>> candles = calculate_heikin_ashi(bars)
    >>> payload = [c.to_dict() for c in candles]
"""

from .errors import EmptySeriesError, MalformedBarError
from .heikin_ashi import HeikinAshi, HeikinAshiBar, calculate_heikin_ashi


__all__ = [
    "EmptySeriesError",
    "MalformedBarError",
    "HeikinAshi",
    "HeikinAshiBar",
    "calculate_heikin_ashi",
]
