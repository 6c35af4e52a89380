"""
Genwith Errors - Exception taxonomy for the generation pipeline

Every error carries the pipeline stage it came from so the CLI can report
where a run failed. None of these subclass ValueError: pydantic only wraps
ValueError/AssertionError raised in validators, so ours propagate as-is.
"""

from __future__ import annotations


class GenwithError(Exception):
    """Base class for all genwith failures."""

    stage = "generate"


class InvalidCombination(GenwithError):
    """Mutually exclusive or dependent flags were misused."""

    stage = "validate"


class MissingRequiredField(GenwithError):
    """A required string input is absent or empty."""

    stage = "validate"


class TemplateParseError(GenwithError):
    """The template body itself is malformed."""

    stage = "render"


class RenderExecutionError(GenwithError):
    """Substitution failed while executing the template."""

    stage = "render"


class FileWriteError(GenwithError):
    """Generated text could not be persisted."""

    stage = "write"


class ExternalToolError(GenwithError):
    """A formatting tool exited non-zero."""

    stage = "format"

    def __init__(self, tool: str, returncode: int, output: str = ""):
        self.tool = tool
        self.returncode = returncode
        self.output = output
        super().__init__(f"{tool} exited with status {returncode}")
