"""Model with service configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
    FilePath,
    PositiveInt,
)

from typing_extensions import Self

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class TLSConfiguration(ConfigurationBase):
    """TLS configuration."""

    tls_certificate_path: Optional[FilePath] = None
    tls_key_path: Optional[FilePath] = None
    tls_key_password: Optional[FilePath] = None

    @model_validator(mode="after")
    def check_tls_configuration(self) -> Self:
        """Check that certificate and key are configured together."""
        if (self.tls_certificate_path is None) != (self.tls_key_path is None):
            raise ValueError(
                "Both TLS certificate and TLS key need to be specified to enable TLS"
            )
        return self


class CORSConfiguration(ConfigurationBase):
    """CORS configuration."""

    allow_origins: list[str] = [
        "*"
    ]  # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_credentials: bool = False
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins per CORS/Fetch spec.
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains '*' wildcard."
                "Use explicit origins or disable credential."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration."""

    host: str = "localhost"
    port: PositiveInt = 3000
    workers: PositiveInt = 1
    color_log: bool = True
    access_log: bool = True
    tls_config: TLSConfiguration = Field(default_factory=TLSConfiguration)
    cors: CORSConfiguration = Field(default_factory=CORSConfiguration)

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class JustificationConfiguration(ConfigurationBase):
    """Text justification configuration."""

    line_width: PositiveInt = constants.DEFAULT_LINE_WIDTH


class QuotaConfiguration(ConfigurationBase):
    """Daily word quota configuration.

    Attributes:
        daily_word_limit: Number of words one access token can justify per UTC day.
        lock_shards: Number of locks the quota ledger spreads tokens over.
    """

    daily_word_limit: PositiveInt = constants.DEFAULT_DAILY_WORD_LIMIT
    lock_shards: PositiveInt = constants.DEFAULT_LOCK_SHARDS


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = constants.DEFAULT_SERVICE_NAME
    service: ServiceConfiguration = Field(default_factory=ServiceConfiguration)
    justification: JustificationConfiguration = Field(
        default_factory=JustificationConfiguration
    )
    quota: QuotaConfiguration = Field(default_factory=QuotaConfiguration)

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
