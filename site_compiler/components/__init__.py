"""Render website components to HTML.

Each component kind maps to one handler registered in
:data:`~site_compiler.components.registry.HANDLERS`. Importing this package
imports every handler module so the registry is complete.

Examples
--------
>>> from site_compiler.components import RenderContext, render_tree
>>> from site_compiler.config import Component, Theme
>>> html = render_tree(
...     [Component(kind="heading", props={"text": "Hello"})],
...     RenderContext(theme=Theme()),
... )
>>> "Hello" in html
True
"""

from . import (  # noqa: F401 - imported for handler registration
    commerce,
    content,
    forms,
    hero,
    layout,
    marketing,
    media,
    navigation,
    widgets,
)
from .context import RenderContext, RenderState
from .helpers import esc, to_list
from .registry import HANDLERS, register, render_component, render_tree

__all__ = [
    "HANDLERS",
    "RenderContext",
    "RenderState",
    "esc",
    "register",
    "render_component",
    "render_tree",
    "to_list",
]
