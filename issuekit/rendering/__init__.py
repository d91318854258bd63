"""Template rendering with the issuekit function library."""

from .colors import color_code
from .engine import build_environment, compile_template, render, render_file
from .functions import fuzzy_age, parse_timestamp, template_functions

__all__ = [
    "build_environment",
    "color_code",
    "compile_template",
    "fuzzy_age",
    "parse_timestamp",
    "render",
    "render_file",
    "template_functions",
]
