from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    # API 配置
    API_TITLE: str = "Essential TA API"
    API_VERSION: str = "0.1.0"
    API_DESCRIPTION: str = "股票行情与 Heikin-Ashi 技术分析 API"

    # Alpha Vantage 配置
    ALPHA_VANTAGE_API_KEY: str = ""
    ALPHA_VANTAGE_BASE_URL: str = "https://www.alphavantage.co/query"
    ALPHA_VANTAGE_TIMEOUT: int = 10

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_JSON_FORMAT: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

settings = Settings()
