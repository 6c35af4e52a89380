"""Shared fixtures for the genwith test suite."""

import itertools

import pytest

from genwith.generator import Renderer
from genwith.settings import get_settings
from genwith.spec import WithSpec

BOOLEAN_FIELDS = (
    "include_do",
    "include_token",
    "include_config",
    "include_endpoint",
    "include_endpoint_func",
    "include_client",
    "include_rate_limiter",
)


def all_combinations() -> list[dict[str, bool]]:
    """Every assignment of the seven switches."""
    return [
        dict(zip(BOOLEAN_FIELDS, values))
        for values in itertools.product([False, True], repeat=len(BOOLEAN_FIELDS))
    ]


def is_valid(combo: dict[str, bool]) -> bool:
    endpoint = combo["include_endpoint"]
    endpoint_func = combo["include_endpoint_func"]
    if endpoint and endpoint_func:
        return False
    if (endpoint or endpoint_func) and not combo["include_config"]:
        return False
    return True


VALID_COMBINATIONS = [c for c in all_combinations() if is_valid(c)]
INVALID_COMBINATIONS = [c for c in all_combinations() if not is_valid(c)]


def combo_id(combo: dict[str, bool]) -> str:
    on = [k.removeprefix("include_") for k, v in combo.items() if v]
    return "+".join(on) or "none"


def assert_well_formed_go(src: str, package: str) -> None:
    """Cheap structural checks on generated Go source."""
    assert src.startswith('// Code generated by "genwith')
    assert f"\npackage {package}\n" in src
    assert "{{" not in src and "{%" not in src
    # Bracket balance outside string literals and line comments
    pairs = {")": "(", "}": "{", "]": "["}
    stack: list[str] = []
    for line in src.splitlines():
        in_string = False
        i = 0
        while i < len(line):
            ch = line[i]
            if in_string:
                if ch == "\\":
                    i += 1
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif line.startswith("//", i):
                break
            elif ch in "({[":
                stack.append(ch)
            elif ch in ")}]":
                assert stack and stack[-1] == pairs[ch], f"unbalanced {ch!r} in: {line}"
                stack.pop()
            i += 1
        assert not in_string, f"unterminated string in: {line}"
    assert not stack, f"unclosed brackets: {stack}"


@pytest.fixture
def renderer() -> Renderer:
    return Renderer()


@pytest.fixture
def make_spec():
    """Factory fixture: build a WithSpec with a default package name."""
    def _make(package: str = "acme", **kwargs) -> WithSpec:
        return WithSpec(package=package, **kwargs)

    return _make


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set GENWITH_* env vars and clear settings cache.

    Usage:
        override_settings(GOFMT="/usr/local/go/bin/gofmt")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(f"GENWITH_{key.upper()}", str(value))
        get_settings.cache_clear()

    get_settings.cache_clear()
    yield _override

    get_settings.cache_clear()
