"""Client settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.mux.com"


class MuxSettings(BaseSettings):
    """API credentials and JWT signing defaults."""

    model_config = SettingsConfigDict(env_prefix="MUX_")

    token_id: str | None = None
    token_secret: str | None = None
    signing_key: str | None = None
    private_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
