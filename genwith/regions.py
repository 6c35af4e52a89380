"""
Template regions and the switches that gate them.

The template asks `region("name")` before emitting each conditional block,
so the table below is the single place that decides what ends up in the
generated file. A nested region is only active while its parent is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from genwith.errors import RenderExecutionError
from genwith.spec import WithSpec


@dataclass(frozen=True)
class Region:
    """A template block and its gating predicate."""

    name: str
    predicate: Callable[[WithSpec], bool]
    parent: str | None = None
    description: str = ""


REGIONS: tuple[Region, ...] = (
    Region(
        "client",
        lambda s: s.include_client,
        description="NewClient constructor and the Option type",
    ),
    Region(
        "client.token",
        lambda s: s.include_token,
        parent="client",
        description="token field initialization",
    ),
    Region(
        "client.config",
        lambda s: s.include_config,
        parent="client",
        description="oauth2 config field initialization",
    ),
    Region(
        "client.config.endpoint_func",
        lambda s: s.include_endpoint_func,
        parent="client.config",
        description="config endpoint from a function call",
    ),
    Region(
        "client.config.endpoint_value",
        lambda s: s.include_endpoint,
        parent="client.config",
        description="config endpoint from a package variable",
    ),
    Region(
        "config_options",
        lambda s: s.include_config,
        description="WithConfig and WithClientCredentials",
    ),
    Region(
        "config_options.auto_refresh",
        lambda s: s.include_endpoint or s.include_endpoint_func,
        parent="config_options",
        description="WithAutoRefresh",
    ),
    Region(
        "token_options",
        lambda s: s.include_token,
        description="WithToken and WithTokenCredentials",
    ),
    Region(
        "rate_limiter",
        lambda s: s.include_rate_limiter,
        description="WithRateLimiter",
    ),
    Region(
        "do",
        lambda s: s.include_do,
        description="the client do method",
    ),
)

_BY_NAME: dict[str, Region] = {r.name: r for r in REGIONS}


def get_region(name: str) -> Region:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise RenderExecutionError(f"unknown template region {name!r}") from None


def is_active(name: str, spec: WithSpec) -> bool:
    """True if the region and every enclosing region are enabled for spec."""
    region = get_region(name)
    if region.parent is not None and not is_active(region.parent, spec):
        return False
    return bool(region.predicate(spec))


def active_regions(spec: WithSpec) -> list[str]:
    """Names of all active regions, in template order."""
    return [r.name for r in REGIONS if is_active(r.name, spec)]
