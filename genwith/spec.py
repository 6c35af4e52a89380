"""
Genwith Spec Model - Pydantic model for a single generation request

Holds the feature switches and strings that fully determine the shape of
the generated file. Invalid switch combinations never produce a model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from genwith.errors import InvalidCombination, MissingRequiredField


# CLI flag name -> model field, in the order flags are reported
SWITCHES: dict[str, str] = {
    "do": "include_do",
    "token": "include_token",
    "config": "include_config",
    "endpoint": "include_endpoint",
    "endpoint-func": "include_endpoint_func",
    "client": "include_client",
    "ratelimit": "include_rate_limiter",
}

DEFAULT_DECODER = "json"


def validate_switches(endpoint: bool, endpoint_func: bool, config: bool) -> None:
    """Reject endpoint flags that are combined or used without a config."""
    if endpoint and endpoint_func:
        raise InvalidCombination("only one of --endpoint or --endpoint-func allowed")
    if (endpoint or endpoint_func) and not config:
        raise InvalidCombination("--endpoint or --endpoint-func requires --config")


class WithSpec(BaseModel):
    """Validated feature selection for one generated file"""

    include_do: bool = Field(False, alias="do")
    include_token: bool = Field(False, alias="token")
    include_config: bool = Field(False, alias="config")
    include_endpoint: bool = Field(False, alias="endpoint")
    include_endpoint_func: bool = Field(False, alias="endpoint-func")
    include_client: bool = Field(False, alias="client")
    include_rate_limiter: bool = Field(False, alias="ratelimit")

    package: str = ""
    decoder: str = DEFAULT_DECODER
    flags: str = ""  # Provenance: the invocation that produced this spec

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def check_invariants(self) -> "WithSpec":
        validate_switches(
            self.include_endpoint,
            self.include_endpoint_func,
            self.include_config,
        )
        if not self.package:
            raise MissingRequiredField("--package is required")
        return self

    def switches(self) -> dict[str, bool]:
        """Flag name to value, in canonical flag order."""
        return {flag: getattr(self, attr) for flag, attr in SWITCHES.items()}

    def output_filename(self) -> str:
        return f"{self.package}_with.go"
