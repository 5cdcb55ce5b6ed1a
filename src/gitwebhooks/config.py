"""
Application configuration using pydantic-settings.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the bundled receiver service."""

    # Application
    app_name: str = "gitwebhooks"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Provider credentials; an empty value disables verification
    github_secret: str = ""
    gitlab_secret: str = ""
    gitea_secret: str = ""
    gitee_secret: str = ""
    gogs_secret: str = ""
    bitbucket_uuid: str = ""  # Bitbucket Cloud is not mounted without one
    bitbucket_server_secret: str = ""
    azure_username: str = ""
    azure_password: str = ""
    dockerhub_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
