"""Settings for building a client from the environment."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from appy.domain.models import ClientConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    base_uri: str | None = Field(None, validation_alias="APPY_BASE_URI")
    client_id: str | None = Field(None, validation_alias="APPY_CLIENT_ID")
    api_version: str | None = Field(None, validation_alias="APPY_API_VERSION")

    transport_backend: str = Field("httpx", validation_alias="APPY_TRANSPORT_BACKEND")
    request_timeout_seconds: float = Field(30.0, validation_alias="APPY_REQUEST_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(True, validation_alias="APPY_FOLLOW_REDIRECTS")

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            base_uri=self.base_uri,
            id=self.client_id,
            version=self.api_version,
        )
