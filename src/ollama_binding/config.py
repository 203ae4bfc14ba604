"""Configuration module for ollama-binding using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Connection settings for a model host.

    The client core never consults the environment: ``create_client``,
    ``Client`` and ``AsyncClient`` use only the host and port they are given.
    Environment variables are read only when an application creates
    ``ClientSettings()`` itself and passes it to ``from_settings``. For
    example, OLLAMA_BINDING_PORT overrides the port setting.
    """

    host: str = "localhost"
    port: int | None = None

    model_config = SettingsConfigDict(env_prefix="OLLAMA_BINDING_")
