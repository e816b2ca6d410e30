"""Shared Jinja2 environment for the stylesheet, scripts, and emitted files.

Templates live under ``site_compiler/templates``. Markup templates
(``*.html.jinja``, ``*.xml.jinja``) are autoescaped; stylesheet, script, and
project-source templates are rendered verbatim because their content is
never HTML.

Examples
--------
>>> env = build_environment()
>>> env.filters["template_literal"]("a`b${c}")
'a\\\\`b\\\\${c}'
"""

from __future__ import annotations

import functools
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"


def template_literal(value: str) -> str:
    r"""Escape ``value`` for embedding inside a JavaScript template literal.

    Backslashes are doubled first so the later escapes are not themselves
    re-escaped; backticks and ``${`` sequences are then neutralised.

    >>> template_literal("price: ${cost} `x` \\n")
    'price: \\${cost} \\`x\\` \\\\n'
    """
    return (
        value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    )


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a configured Jinja2 environment rooted at ``templates_dir``."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "html.jinja", "xml.jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["template_literal"] = template_literal
    return env


@functools.cache
def default_environment() -> Environment:
    """Return the environment bound to the packaged templates."""
    return build_environment()


def render_template(template_name: str, /, **context: object) -> str:
    """Render the packaged template ``template_name`` with ``context``.

    The template name is positional-only so ``context`` may carry a ``name``
    variable of its own.
    """
    return default_environment().get_template(template_name).render(**context)


__all__ = [
    "TEMPLATES_DIR",
    "build_environment",
    "default_environment",
    "render_template",
    "template_literal",
]
