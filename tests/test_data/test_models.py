# tests/test_data/test_models.py
"""数据模型测试"""

import pytest
from dataclasses import FrozenInstanceError, is_dataclass

from src.data.models import GlobalQuote, HistoricalMetadata, PriceBar


class TestPriceBar:
    """PriceBar 测试"""

    def test_is_dataclass(self):
        assert is_dataclass(PriceBar)

    def test_volume_defaults_to_zero(self):
        bar = PriceBar(date="2024-01-02", open=187.15, high=188.44, low=183.89, close=185.64)
        assert bar.volume == 0

    def test_is_immutable(self):
        bar = PriceBar(date="2024-01-02", open=1, high=2, low=0.5, close=1.5)
        with pytest.raises(FrozenInstanceError):
            bar.close = 3

    def test_to_dict(self):
        bar = PriceBar(date="2024-01-02", open=187.15, high=188.44, low=183.89,
                       close=185.64, volume=82488700)
        assert bar.to_dict() == {
            "date": "2024-01-02",
            "open": 187.15,
            "high": 188.44,
            "low": 183.89,
            "close": 185.64,
            "volume": 82488700,
        }


class TestGlobalQuote:
    """GlobalQuote 测试"""

    def test_to_dict_keys(self):
        quote = GlobalQuote(
            symbol="IBM", open=1.0, high=2.0, low=0.5, price=1.5, volume=100,
            latest_trading_day="2024-01-03", previous_close=1.4, change=0.1,
            change_percent="7.1429%",
        )
        data = quote.to_dict()

        assert data["symbol"] == "IBM"
        assert data["price"] == 1.5
        assert data["previous_close"] == 1.4
        assert data["change_percent"] == "7.1429%"


class TestHistoricalMetadata:
    """HistoricalMetadata 测试"""

    def test_warnings_default_empty(self):
        meta = HistoricalMetadata(symbol="IBM", data_points=1,
                                  oldest_date="2024-01-02", newest_date="2024-01-02")
        assert meta.warnings == []

    def test_to_dict_copies_warnings(self):
        meta = HistoricalMetadata(symbol="IBM", data_points=1, oldest_date="a",
                                  newest_date="b", warnings=["w"])
        data = meta.to_dict()
        data["warnings"].append("x")

        assert meta.warnings == ["w"]
