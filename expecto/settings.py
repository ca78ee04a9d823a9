""" Library settings

Loaded from the environment on first use. Every variable has the `EXPECTO_` prefix:

    EXPECTO_MAX_REPR_LENGTH=200 pytest tests/
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .util.lazy_init import lazy_init_threadsafe


class Settings(BaseSettings):
    """ Settings: how values are rendered in failure messages """
    model_config = SettingsConfigDict(env_prefix='EXPECTO_', case_sensitive=True)

    # Serialized records longer than this are truncated with "..."
    MAX_REPR_LENGTH: int = Field(100, ge=4)

    # Sequences longer than this are rendered as `[a, b, ... (N items)]`
    MAX_SEQUENCE_ITEMS: int = Field(3, ge=0)


@lazy_init_threadsafe
def get_settings() -> Settings:
    """ Get the settings object """
    return Settings()
