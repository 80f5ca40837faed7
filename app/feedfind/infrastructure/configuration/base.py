"""Base settings class shared by the FeedFind settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Environment variables are read verbatim; unrelated variables are ignored.
ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class InfrastructureSettings(BaseSettings):
    """Settings section owned by an infrastructure component.

    Subclasses declare their fields with an ``alias`` naming the
    environment variable, e.g. ``Field(default="en", alias="I18N_DEFAULT_LOCALE")``.
    """

    model_config = ENV_SETTINGS_CONFIG
