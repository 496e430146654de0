"""Environment-based settings, loaded from SPARK_* variables or a .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .loader import DEFAULT_BASE_URI, ClientConfig


class SparkSettings(BaseSettings):
    """Settings for building a ClientConfig from the environment."""

    token: str = ""
    base_uri: str = DEFAULT_BASE_URI
    verify_ssl: bool = True
    timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="SPARK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def to_config(self) -> ClientConfig:
        return ClientConfig(
            base_uri=self.base_uri,
            token=self.token,
            verify_ssl=self.verify_ssl,
            timeout=self.timeout,
        )
