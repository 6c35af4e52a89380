"""
Genwith - Functional options client generator

Renders a Go HTTP client scaffold from a handful of feature switches.
"""

__version__ = "0.1.0"

from genwith.errors import (
    ExternalToolError,
    FileWriteError,
    GenwithError,
    InvalidCombination,
    MissingRequiredField,
    RenderExecutionError,
    TemplateParseError,
)
from genwith.generator import GenerationResult, Renderer, generate_file
from genwith.spec import WithSpec

__all__ = [
    "WithSpec",
    "Renderer",
    "GenerationResult",
    "generate_file",
    "GenwithError",
    "InvalidCombination",
    "MissingRequiredField",
    "TemplateParseError",
    "RenderExecutionError",
    "FileWriteError",
    "ExternalToolError",
]
