# src/data/alphavantage.py
"""Alpha Vantage API 客户端 - 支持链式语法"""

from __future__ import annotations
import logging
import math
import requests
from requests.exceptions import RequestException, Timeout
from typing import Any, List, Optional

from .base import BaseMarketDataClient
from .models import GlobalQuote, PriceBar
from src.config.settings import settings
from src.indicators.errors import MalformedBarError
from src.messages.errorMessage import ErrorMessage, ProviderType


logger = logging.getLogger(__name__)

OUTPUT_SIZES = ("compact", "full")

# TIME_SERIES_DAILY 中每根 K 线的字段键
DAILY_FIELDS = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}

# 频率限制时 Alpha Vantage 仍返回 200，正文中带以下键之一
THROTTLE_KEYS = ("Note", "Information")


class AlphaVantageClient(BaseMarketDataClient):
    """Alpha Vantage 数据客户端 - 支持链式语法

    API Key、地址与超时均通过构造参数注入，未传入时读取 Settings。

    支持两种使用方式:

    1. 传统方式:
        >>> client = AlphaVantageClient(api_key="demo")
        >>> bars = client.get_daily_series("IBM", outputsize="compact")

    2. 链式语法:
        >>> bars = (
        ...     AlphaVantageClient()
        ...     .symbol("IBM")
        ...     .outputsize("compact")
        ...     .fetch()
        ... )
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        """初始化客户端"""
        self._api_key = settings.ALPHA_VANTAGE_API_KEY if api_key is None else api_key
        self._base_url = base_url or settings.ALPHA_VANTAGE_BASE_URL
        self._timeout = timeout or settings.ALPHA_VANTAGE_TIMEOUT
        # 链式调用状态
        self._symbol: Optional[str] = None
        self._outputsize: str = "full"

    # ============ 链式配置方法 ============

    def symbol(self, symbol: str) -> AlphaVantageClient:
        """设置股票代码"""
        self._symbol = symbol
        return self

    def outputsize(self, outputsize: str) -> AlphaVantageClient:
        """设置数据量 (compact / full)"""
        self._outputsize = outputsize
        return self

    def timeout(self, timeout: int) -> AlphaVantageClient:
        """设置超时时间"""
        self._timeout = timeout
        return self

    def fetch(self) -> List[PriceBar]:
        """执行请求获取日线数据（链式调用终止方法）

        Raises:
            ValueError: 未设置 symbol
        """
        if not self._symbol:
            raise ValueError(ErrorMessage.CHAIN_MISSING_SYMBOL)

        return self.get_daily_series(self._symbol, outputsize=self._outputsize)

    # ============ 传统 API ============

    def _request(self, params: dict) -> dict:
        """发送请求并返回解析后的 JSON

        单次请求，不做重试。

        Raises:
            ValueError: 未配置 API Key、响应无法解析或 API 返回错误信息
            TimeoutError: 请求超时
            ConnectionError: 网络连接失败
            RuntimeError: HTTP 状态码异常或触发频率限制
        """
        if not self._api_key:
            raise ValueError(str(ErrorMessage.MISSING_API_KEY.provider(ProviderType.ALPHA_VANTAGE)))

        query = dict(params, apikey=self._api_key)
        logger.debug(f"请求 Alpha Vantage: function={params.get('function')} symbol={params.get('symbol')}")

        try:
            response = requests.get(self._base_url, params=query, timeout=self._timeout)
        except Timeout:
            logger.warning(f"Alpha Vantage 请求超时: symbol={params.get('symbol')}")
            raise TimeoutError(
                ErrorMessage.TIMEOUT.provider(ProviderType.ALPHA_VANTAGE).build(timeout=self._timeout)
            )
        except RequestException as e:
            logger.warning(f"Alpha Vantage 网络错误: {e}")
            raise ConnectionError(
                ErrorMessage.NETWORK_ERROR.provider(ProviderType.ALPHA_VANTAGE).build(error=str(e))
            )

        if not response.ok:
            raise RuntimeError(
                ErrorMessage.API_FAILED.provider(ProviderType.ALPHA_VANTAGE).build(status=response.status_code)
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ValueError(
                ErrorMessage.PARSE_ERROR.provider(ProviderType.ALPHA_VANTAGE).build(error=str(e))
            )

        if not isinstance(data, dict):
            raise ValueError(
                ErrorMessage.PARSE_ERROR.provider(ProviderType.ALPHA_VANTAGE).build(error="响应不是 JSON 对象")
            )

        if "Error Message" in data:
            raise ValueError(
                ErrorMessage.INVALID_SYMBOL.provider(ProviderType.ALPHA_VANTAGE).build(
                    symbol=params.get("symbol"), error=data["Error Message"]
                )
            )

        for key in THROTTLE_KEYS:
            if key in data:
                logger.warning(f"Alpha Vantage 频率限制: {data[key]}")
                raise RuntimeError(
                    ErrorMessage.RATE_LIMITED.provider(ProviderType.ALPHA_VANTAGE).build(detail=data[key])
                )

        return data

    def get_global_quote(self, symbol: str) -> GlobalQuote:
        """获取实时报价

        Args:
            symbol: 股票代码，如 "IBM"

        Returns:
            报价数据

        Raises:
            ValueError: 股票代码为空或无效
            LookupError: 该股票代码没有报价数据
            TimeoutError: 请求超时
            ConnectionError: 网络连接失败
            RuntimeError: API 请求失败
        """
        symbol = (symbol or "").strip()
        if not symbol:
            raise ValueError(str(ErrorMessage.SYMBOL_REQUIRED.provider(ProviderType.ALPHA_VANTAGE)))

        data = self._request({"function": "GLOBAL_QUOTE", "symbol": symbol})

        quote = data.get("Global Quote")
        if not quote:
            raise LookupError(
                ErrorMessage.NO_DATA.provider(ProviderType.ALPHA_VANTAGE).build(symbol=symbol)
            )

        return self._parse_quote(quote)

    def get_daily_series(
        self,
        symbol: str,
        outputsize: str = "full"
    ) -> List[PriceBar]:
        """获取日线历史数据

        Args:
            symbol: 股票代码，如 "IBM"
            outputsize: "compact" (最近 100 根) 或 "full" (全部历史)

        Returns:
            K 线数据列表（按时间正序）

        Raises:
            ValueError: 股票代码为空、无效或 outputsize 无效
            MalformedBarError: 某根 K 线数值无法解析
            LookupError: 该股票代码没有历史数据
            TimeoutError: 请求超时
            ConnectionError: 网络连接失败
            RuntimeError: API 请求失败

        Example:
            >>> client = AlphaVantageClient()
            >>> bars = client.get_daily_series("IBM")
            >>> print(f"获取 {len(bars)} 根 K 线")
        """
        symbol = (symbol or "").strip()
        if not symbol:
            raise ValueError(str(ErrorMessage.SYMBOL_REQUIRED.provider(ProviderType.ALPHA_VANTAGE)))
        if outputsize not in OUTPUT_SIZES:
            raise ValueError(ErrorMessage.INVALID_OUTPUTSIZE.format(outputsize=outputsize))

        data = self._request({
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": outputsize,
        })

        series = data.get("Time Series (Daily)")
        if not series:
            raise LookupError(
                ErrorMessage.NO_DATA.provider(ProviderType.ALPHA_VANTAGE).build(symbol=symbol)
            )

        bars = self._parse_daily(series)
        logger.info(f"{symbol}: 获取 {len(bars)} 根日线 ({bars[0].date} ~ {bars[-1].date})")
        return bars

    def _parse_daily(self, series: dict) -> List[PriceBar]:
        """解析按日期索引的日线数据，返回时间正序列表"""
        bars: List[PriceBar] = []
        for index, day in enumerate(sorted(series)):
            values = series[day]
            if not isinstance(values, dict):
                raise MalformedBarError(
                    ErrorMessage.HA_MISSING_FIELD.format(index=index, date=day, field="open"),
                    index=index, date=day, field="open",
                )

            parsed = {}
            for name in ("open", "high", "low", "close"):
                parsed[name] = _to_number(values.get(DAILY_FIELDS[name]), index, day, name)

            raw_volume = values.get(DAILY_FIELDS["volume"])
            volume = 0 if raw_volume is None else int(_to_number(raw_volume, index, day, "volume"))

            bars.append(PriceBar(date=day, volume=volume, **parsed))
        return bars

    def _parse_quote(self, quote: dict) -> GlobalQuote:
        """解析 GLOBAL_QUOTE 数据"""
        try:
            return GlobalQuote(
                symbol=quote["01. symbol"],
                open=float(quote["02. open"]),
                high=float(quote["03. high"]),
                low=float(quote["04. low"]),
                price=float(quote["05. price"]),
                volume=int(float(quote["06. volume"])),
                latest_trading_day=quote["07. latest trading day"],
                previous_close=float(quote["08. previous close"]),
                change=float(quote["09. change"]),
                change_percent=quote["10. change percent"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(
                ErrorMessage.PARSE_ERROR.provider(ProviderType.ALPHA_VANTAGE).build(error=repr(e))
            )


def _to_number(raw: Any, index: int, day: str, name: str) -> float:
    """把字符串数值转换为 float，无法解析时抛出 MalformedBarError"""
    if raw is None:
        raise MalformedBarError(
            ErrorMessage.HA_MISSING_FIELD.format(index=index, date=day, field=name),
            index=index, date=day, field=name,
        )
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = math.nan
    if not math.isfinite(value):
        raise MalformedBarError(
            ErrorMessage.HA_NON_NUMERIC.format(index=index, date=day, field=name, value=raw),
            index=index, date=day, field=name,
        )
    return value
