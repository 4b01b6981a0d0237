from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClientConfig(BaseModel):
    """Connection settings of a request client.

    Frozen once built: the engine created from it lives exactly as long as the
    client that owns both.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )

    base_url: str = Field(alias="url")
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    proxy_host: Optional[str] = Field(default=None, alias="proxyHost")
    proxy_port: Optional[int] = Field(default=None, alias="proxyPort", gt=0, lt=65536)
    strict_ssl: bool = Field(default=True, alias="strictSSL")

    @model_validator(mode="after")
    def _check_proxy_pairing(self) -> "ClientConfig":
        if (self.proxy_host is None) != (self.proxy_port is None):
            raise ValueError("proxy_host and proxy_port must be set together")
        return self

    @property
    def has_credentials(self) -> bool:
        return self.username is not None or self.password is not None

    @property
    def proxy_url(self) -> Optional[str]:
        if self.proxy_host is None or self.proxy_port is None:
            return None
        return f"http://{self.proxy_host}:{self.proxy_port}"
