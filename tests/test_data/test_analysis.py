# tests/test_data/test_analysis.py
"""历史数据分析测试"""

import pytest
from datetime import date, timedelta

from src.data import PriceBar, HistoricalMetadata, analyze_historical_data
from src.data.analysis import TRADING_DAYS_PER_YEAR
from src.indicators import EmptySeriesError
from src.messages import ErrorMessage


def _bars(n: int, last: date) -> list:
    start = last - timedelta(days=n - 1)
    return [
        PriceBar(date=(start + timedelta(days=i)).isoformat(), open=1, high=2, low=0.5, close=1.5)
        for i in range(n)
    ]


TODAY = date(2024, 6, 30)


class TestAnalyzeHistoricalData:
    """analyze_historical_data 测试"""

    def test_basic_metadata(self):
        bars = _bars(3, TODAY)
        meta = analyze_historical_data("IBM", bars, today=TODAY)

        assert isinstance(meta, HistoricalMetadata)
        assert meta.symbol == "IBM"
        assert meta.data_points == 3
        assert meta.oldest_date == "2024-06-28"
        assert meta.newest_date == "2024-06-30"

    def test_full_recent_series_has_no_warnings(self):
        bars = _bars(TRADING_DAYS_PER_YEAR, TODAY)
        meta = analyze_historical_data("IBM", bars, today=TODAY)

        assert meta.warnings == []

    def test_short_series_warns(self):
        """测试不足一年数据时告警"""
        meta = analyze_historical_data("NEW", _bars(10, TODAY), today=TODAY)

        assert meta.warnings == [ErrorMessage.WARN_NOT_FULL_YEAR]

    def test_stale_series_warns(self):
        """测试最近数据超过一年时告警"""
        bars = _bars(TRADING_DAYS_PER_YEAR, date(2023, 1, 1))
        meta = analyze_historical_data("OLD", bars, today=TODAY)

        assert meta.warnings == [ErrorMessage.WARN_NOT_RECENT]

    def test_exactly_one_year_old_is_recent(self):
        bars = _bars(TRADING_DAYS_PER_YEAR, date(2023, 6, 30))
        meta = analyze_historical_data("IBM", bars, today=TODAY)

        assert ErrorMessage.WARN_NOT_RECENT not in meta.warnings

    def test_leap_day_today(self):
        """测试今天为 2 月 29 日"""
        bars = _bars(TRADING_DAYS_PER_YEAR, date(2023, 3, 1))
        meta = analyze_historical_data("IBM", bars, today=date(2024, 2, 29))

        assert meta.warnings == []

    def test_date_objects_supported(self):
        """测试 date 对象作为日期，与 calculate_heikin_ashi 一致"""
        bars = [
            PriceBar(date=date(2024, 6, 30), open=1, high=2, low=0.5, close=1.5),
            PriceBar(date=date(2024, 6, 28), open=1, high=2, low=0.5, close=1.5),
        ]
        meta = analyze_historical_data("IBM", bars, today=TODAY)

        assert meta.oldest_date == "2024-06-28"
        assert meta.newest_date == "2024-06-30"
        assert meta.warnings == [ErrorMessage.WARN_NOT_FULL_YEAR]

    def test_empty_raises(self):
        with pytest.raises(EmptySeriesError):
            analyze_historical_data("IBM", [], today=TODAY)

    def test_to_dict_uses_camel_case(self):
        meta = analyze_historical_data("IBM", _bars(2, TODAY), today=TODAY)
        data = meta.to_dict()

        assert data["dataPoints"] == 2
        assert data["oldestDate"] == "2024-06-29"
        assert data["newestDate"] == "2024-06-30"
        assert data["warnings"] == [ErrorMessage.WARN_NOT_FULL_YEAR]
