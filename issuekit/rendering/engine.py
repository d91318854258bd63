"""Template rendering engine."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError

from ..core.errors import TemplateExecError, TemplateParseError
from ..filesystem.io import read_file
from ..settings import Settings
from .functions import as_filter, template_functions

logger = logging.getLogger(__name__)


def build_environment(settings: Settings | None = None) -> Environment:
    """Create a Jinja2 environment carrying the template function library.

    Args:
        settings: Settings used by the function library (cached settings when omitted)

    Returns:
        Configured Jinja2 environment
    """
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    functions = template_functions(settings)
    env.globals.update(functions)
    env.filters.update({name: as_filter(func) for name, func in functions.items()})
    return env


def compile_template(
    template_source: str,
    *,
    env: Environment | None = None,
    log: logging.Logger | None = None,
) -> Template:
    """Compile template source.

    Raises:
        TemplateParseError: if the source is not a valid template
    """
    env = env or build_environment()
    try:
        return env.from_string(template_source)
    except TemplateSyntaxError as e:
        (log or logger).error(f"Failed to parse template: {e}")
        raise TemplateParseError(f"Failed to parse template: {e}") from e


def _context(data: Any, log: logging.Logger) -> dict[str, Any]:
    # Mapping keys are reachable directly; the whole value is always ``data``.
    context: dict[str, Any] = {}
    if isinstance(data, Mapping):
        context.update({k: v for k, v in data.items() if isinstance(k, str)})
        if "data" in context:
            log.debug("Top-level key 'data' is shadowed by the whole template data")
    context["data"] = data
    return context


def render(
    template_source: str,
    data: Any,
    out: IO[str] | None = None,
    *,
    env: Environment | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Render ``template_source`` against ``data``, streaming to ``out``.

    Args:
        template_source: Template text
        data: Rendering context; mapping keys become top-level names and the
            whole value is ``data``, which shadows a top-level key named ``data``
        out: Text sink, standard output when omitted
        env: Jinja2 environment (a fresh one from ``build_environment`` when omitted)
        log: Logger to report through (module logger when omitted)

    Raises:
        TemplateParseError: if the template does not compile; nothing is written
        TemplateExecError: if rendering fails part-way
    """
    log = log or logger
    template = compile_template(template_source, env=env, log=log)
    if out is None:
        out = sys.stdout

    try:
        for chunk in template.generate(_context(data, log)):
            out.write(chunk)
    except Exception as e:
        log.error(f"Failed to execute template: {e}")
        raise TemplateExecError(f"Failed to execute template: {e}") from e


def render_file(
    template_path: Path,
    data: Any,
    out: IO[str] | None = None,
    *,
    env: Environment | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Render a template file. See ``render``."""
    log = log or logger
    log.debug(f"Rendering template: {template_path}")
    render(read_file(template_path, log=log), data, out, env=env, log=log)
