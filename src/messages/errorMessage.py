# src/messages/errorMessage.py
"""错误消息与数据源类型枚举 - 支持链式语法"""

from __future__ import annotations
from enum import Enum
from typing import Final


class ProviderType(Enum):
    """行情数据源类型枚举 - 用于错误消息前缀

    扩展方式：添加新数据源只需增加一行枚举值
    """
    ALPHA_VANTAGE = "AlphaVantageClient"


class MessageBuilder:
    """消息构建器 - 支持链式调用 (不可变模式)

    Example:
        >>> msg = MessageBuilder("无效的股票代码。symbol={symbol}").provider(ProviderType.ALPHA_VANTAGE).symbol("IBM").build()
        >>> print(msg)
        AlphaVantageClient: 无效的股票代码。symbol=IBM
    """

    def __init__(self, template: str, provider: ProviderType | None = None, context: dict | None = None) -> None:
        self._template = template
        self._provider = provider
        self._context = context or {}

    def provider(self, pv: ProviderType) -> MessageBuilder:
        """设置数据源类型 (返回新实例)"""
        return MessageBuilder(self._template, provider=pv, context=self._context)

    def ctx(self, **kwargs) -> MessageBuilder:
        """添加通用上下文变量 (返回新实例)"""
        new_context = self._context.copy()
        new_context.update(kwargs)
        return MessageBuilder(self._template, provider=self._provider, context=new_context)

    def symbol(self, value: str) -> MessageBuilder:
        """设置股票代码 (ctx Shortcut)"""
        return self.ctx(symbol=value)

    def build(self, **kwargs) -> str:
        """构建最终消息

        Args:
            **kwargs: 额外的模板变量 (优先级高于 context)

        Returns:
            格式化后的完整错误消息
        """
        final_kwargs = self._context.copy()
        final_kwargs.update(kwargs)

        msg = self._template.format(**final_kwargs)

        if self._provider:
            return f"{self._provider.value}: {msg}"
        return msg

    def __str__(self) -> str:
        """直接转字符串（用于无参数模板）"""
        if self._provider is None:
            return self._template
        return f"{self._provider.value}: {self._template}"


class ErrorMessage:
    """错误消息模板

    支持两种使用方式:

    1. 链式语法 (推荐):
        >>> ErrorMessage.INVALID_SYMBOL.provider(ProviderType.ALPHA_VANTAGE).build(symbol="XXX", error="...")

    2. 静态方法:
        >>> ErrorMessage.format(ErrorMessage.SYMBOL_REQUIRED, ProviderType.ALPHA_VANTAGE)
        'AlphaVantageClient: 必须提供股票代码 symbol'
    """

    # ============ API 请求相关 ============
    SYMBOL_REQUIRED: Final[MessageBuilder] = MessageBuilder("必须提供股票代码 symbol")
    MISSING_API_KEY: Final[MessageBuilder] = MessageBuilder("未配置 API Key，请设置 ALPHA_VANTAGE_API_KEY")
    INVALID_SYMBOL: Final[MessageBuilder] = MessageBuilder("无效的股票代码。symbol={symbol}, error={error}")
    API_FAILED: Final[MessageBuilder] = MessageBuilder("API 请求失败。status={status}")
    NO_DATA: Final[MessageBuilder] = MessageBuilder("未找到该股票代码的数据。symbol={symbol}")
    RATE_LIMITED: Final[MessageBuilder] = MessageBuilder("请求过于频繁，请稍后重试。detail={detail}")
    INVALID_OUTPUTSIZE: Final[str] = "无效的 outputsize: {outputsize} (仅支持 compact, full)"

    # ============ 网络相关 ============
    NETWORK_ERROR: Final[MessageBuilder] = MessageBuilder("网络连接失败。error={error}")
    TIMEOUT: Final[MessageBuilder] = MessageBuilder("请求超时。timeout={timeout}s")

    # ============ 数据解析相关 ============
    PARSE_ERROR: Final[MessageBuilder] = MessageBuilder("数据解析失败。error={error}")

    # ============ 链式语法相关 ============
    CHAIN_MISSING_SYMBOL: Final[str] = "必须先调用 .symbol() 设置股票代码"

    # ============ Heikin-Ashi 相关 ============
    HA_EMPTY_SERIES: Final[str] = "价格序列为空，无法计算 Heikin-Ashi"
    HA_MISSING_FIELD: Final[str] = "第 {index} 根 K 线 (date={date}) 缺少字段: {field}"
    HA_NON_NUMERIC: Final[str] = "第 {index} 根 K 线 (date={date}) 字段 {field} 不是有效数值: {value!r}"
    HA_DUPLICATE_DATE: Final[str] = "第 {index} 根 K 线日期重复: date={date}"

    # ============ 历史数据分析相关 ============
    WARN_NOT_FULL_YEAR: Final[str] = "Less than one year of historical data available."
    WARN_NOT_RECENT: Final[str] = "The most recent data point is more than a year old."

    # ============ HTTP 相关 ============
    HTTP_INTERNAL_ERROR: Final[str] = "内部错误: {error}"

    @staticmethod
    def format(template: MessageBuilder | str, provider: ProviderType | None = None, **kwargs) -> str:
        """格式化错误消息

        Args:
            template: 错误模板 (MessageBuilder 或 str)
            provider: 数据源类型枚举 (可选)
            **kwargs: 模板变量

        Returns:
            格式化后的完整错误消息
        """
        tpl = template._template if isinstance(template, MessageBuilder) else template
        msg = tpl.format(**kwargs)

        if provider:
            return f"{provider.value}: {msg}"
        return msg
