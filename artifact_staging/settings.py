"""Configuration settings for artifact staging.

Settings are loaded from environment variables (``ARTIFACT_STAGING_`` prefix)
with .env file support via pydantic-settings.

Environment variables:
    ARTIFACT_STAGING_HTTP_TIMEOUT: Timeout in seconds for the default HTTP client
    ARTIFACT_STAGING_SIGNED_URL_EXPIRY: Lifetime in seconds advertised by in-memory signed URLs
    ARTIFACT_STAGING_MEMORY_BUCKET_BASE_URL: Base URL used by in-memory buckets

Example:
    >>> from artifact_staging.settings import settings
    >>> print(settings.http_timeout)
    60.0

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for staging collaborators.

    Attributes:
        http_timeout: Timeout of the httpx client used to fetch staged objects.
                      Timeout policy belongs to the transport; the coordinators
                      impose none of their own.

        signed_url_expiry: Seconds a signed URL issued by MemoryBucket claims to
                           stay valid. Purely informational for in-memory buckets.

        memory_bucket_base_url: Scheme and host of URLs issued by MemoryBucket.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACT_STAGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    http_timeout: float = 60.0
    signed_url_expiry: int = 3600
    memory_bucket_base_url: str = "https://storage.local"


settings = Settings()
"""Global settings instance, created at import."""
