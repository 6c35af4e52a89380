"""
Genwith Generator - Template-based Go functional-options client generation

Uses Jinja2 for templating. A validated WithSpec selects which template
regions are emitted; the result is written to `<package>_with.go` and handed
to the Go formatters.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Sequence

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from genwith.errors import FileWriteError, RenderExecutionError, TemplateParseError
from genwith.formatter import format_file
from genwith.regions import is_active
from genwith.settings import Settings, get_settings
from genwith.spec import WithSpec

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "with.go.j2"


# ═══════════════════════════════════════════════════════════════════════════
# TEMPLATE HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def invocation_summary(args: Sequence[str]) -> str:
    """
    Record the command-line arguments for the provenance comment.

    Arguments are kept exactly as supplied and in the order given.
    """
    return " ".join(args)


# ═══════════════════════════════════════════════════════════════════════════
# GENERATED FILE TRACKING
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class GenerationResult:
    """Result of generating one file."""

    path: Path
    content: str
    formatted: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# JINJA ENVIRONMENT SETUP
# ═══════════════════════════════════════════════════════════════════════════


def create_jinja_env(templates_dir: Path) -> Environment:
    """Create Jinja2 environment for Go source templates."""

    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


# ═══════════════════════════════════════════════════════════════════════════
# RENDERER
# ═══════════════════════════════════════════════════════════════════════════


class Renderer:
    """
    Renders a WithSpec into Go source.

    Rendering is pure: the same spec always yields the same text, and
    nothing is written or executed.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        template_name: str = TEMPLATE_NAME,
    ):
        """
        Args:
            templates_dir: Path to Jinja2 templates. Defaults to package templates.
            template_name: Template to render within templates_dir.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.template_name = template_name
        self.env = create_jinja_env(templates_dir)

    def render(self, spec: WithSpec) -> str:
        """Render the template for spec."""
        try:
            template = self.env.get_template(self.template_name)
        except TemplateSyntaxError as e:
            logger.error("parsing template %s: %s", self.template_name, e)
            raise TemplateParseError(
                f"{self.template_name}:{e.lineno}: {e.message}"
            ) from e
        except TemplateNotFound as e:
            logger.error("loading template %s: not found", self.template_name)
            raise TemplateParseError(f"template not found: {e.name}") from e

        try:
            content = template.render(w=spec, region=partial(is_active, spec=spec))
        except TemplateError as e:
            logger.error("executing template %s: %s", self.template_name, e)
            raise RenderExecutionError(str(e)) from e

        logger.debug(
            "rendered %s for package %s (%d bytes)",
            self.template_name,
            spec.package,
            len(content),
        )
        return content


# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT
# ═══════════════════════════════════════════════════════════════════════════


def write_output(content: str, path: Path, mode: int = 0o600) -> None:
    """Write generated source and restrict its permissions."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        os.chmod(path, mode)
    except OSError as e:
        logger.error("writing %s: %s", path, e)
        raise FileWriteError(f"cannot write {path}: {e.strerror or e}") from e
    logger.debug("wrote %s", path)


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════


def generate_file(
    spec: WithSpec,
    output_dir: str | Path,
    run_format: bool = True,
    settings: Settings | None = None,
    templates_dir: Path | None = None,
) -> GenerationResult:
    """
    Generate `<package>_with.go` for spec.

    Args:
        spec: Validated generation request
        output_dir: Directory to write the generated file into
        run_format: Run gofmt and goimports on the written file
        settings: Tool and file settings. Defaults to the environment.
        templates_dir: Optional custom templates directory

    Returns:
        GenerationResult with the written path and rendered content
    """
    settings = settings or get_settings()

    content = Renderer(templates_dir).render(spec)
    path = Path(output_dir) / spec.output_filename()
    write_output(content, path, settings.file_mode)

    if run_format:
        format_file(path, settings)

    return GenerationResult(path=path, content=content, formatted=run_format)
