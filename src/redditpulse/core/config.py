"""Configuration management for RedditPulse."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from .constants import FetchConstants


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Reddit API
    reddit_client_id: str = Field("", description="Reddit client ID")
    reddit_client_secret: str = Field("", description="Reddit client secret")
    reddit_user_agent: str = Field("RedditPulse/1.0", description="Reddit user agent")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Fetch settings
    default_channel: str = Field("worldnews", description="Subreddit analyzed when none is given")
    default_sort: str = Field("top", description="Thread listing order")
    default_period: str = Field("week", description="Time window for top/controversial listings")
    default_max_threads: int = Field(10, ge=1, description="Maximum threads fetched per request")
    fetch_timeout: float = Field(16.0, gt=0, description="Per-request HTTP timeout in seconds")
    fetch_deadline: float = Field(120.0, gt=0, description="Time budget for a whole fetch in seconds")
    comment_expand_limit: int = Field(0, ge=0, description="replace_more() limit when loading comment trees")

    # Analysis settings
    top_words_n: int = Field(10, ge=1, description="Number of frequent words to report")
    top_comments_k: int = Field(5, ge=1, description="Number of extreme comments per side")

    @field_validator("default_sort")
    @classmethod
    def _check_sort(cls, v: str) -> str:
        if v not in FetchConstants.SORT_ORDERS:
            raise ValueError(f"default_sort must be one of {FetchConstants.SORT_ORDERS}")
        return v

    @field_validator("default_period")
    @classmethod
    def _check_period(cls, v: str) -> str:
        if v not in FetchConstants.PERIODS:
            raise ValueError(f"default_period must be one of {FetchConstants.PERIODS}")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    @property
    def has_reddit_credentials(self) -> bool:
        return bool(self.reddit_client_id and self.reddit_client_secret and self.reddit_user_agent)


# Global settings instance
settings = Settings()
