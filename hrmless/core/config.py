"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Connector configuration from environment variables."""

    # HRMLESS API
    base_url: str

    # Identity provider
    base_login_url: str
    oauth_client_id: str = "zapier"
    oauth_realm: str = "nervai"
    oauth_scope: str = "openid profile email"

    # Application
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"

    @property
    def token_url(self) -> str:
        """OpenID Connect token endpoint."""
        return f"{self.base_login_url}/realms/{self.oauth_realm}/protocol/openid-connect/token"

    @property
    def authorize_url(self) -> str:
        """OpenID Connect authorization endpoint."""
        return f"{self.base_login_url}/realms/{self.oauth_realm}/protocol/openid-connect/auth"


settings = Settings.model_validate({})

VERSION = "1.0.1"
