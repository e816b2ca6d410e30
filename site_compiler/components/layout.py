"""Structural containers and spacing blocks.

``section``, ``columns``, and ``sticky`` recurse into their children through
:func:`~site_compiler.components.registry.render_component`, so visibility
and responsive rules apply at every depth.
"""

from __future__ import annotations

import typing as typ

from .helpers import Block, bg_color
from .registry import register, render_component, render_tree

if typ.TYPE_CHECKING:
    from .context import RenderContext


@register("section")
def render_section(block: Block, ctx: RenderContext) -> str:
    children = render_tree(block.component.children, ctx)
    bg = bg_color(block.props)
    lead = f"{bg} " if bg else ""
    return (
        f'<section{block.anim} style="{lead}padding: 48px 24px; '
        f'font-family: {ctx.theme.body_font};{block.style}">'
        f'<div class="container">{children}</div></section>'
    )


@register("columns")
def render_columns(block: Block, ctx: RenderContext) -> str:
    """Render children in an equal-width CSS grid, one cell per child."""
    children = block.component.children
    count = block.get("columns", default=len(children) or 2)
    gap = block.get("gap", default=24)
    cells = "".join(f"<div>{render_component(child, ctx)}</div>" for child in children)
    return (
        f'<div{block.anim} class="wb-columns" style="display: grid; '
        f"grid-template-columns: repeat({count}, 1fr); gap: {gap}px; "
        f'padding: 24px;{block.style}">{cells}</div>'
    )


@register("sticky")
def render_sticky(block: Block, ctx: RenderContext) -> str:
    children = render_tree(block.component.children, ctx)
    return (
        f'<div{block.anim} style="position: sticky; top: 0; z-index: 40;{block.style}">'
        f"{children}</div>"
    )


@register("spacer")
def render_spacer(block: Block, ctx: RenderContext) -> str:
    height = block.get("height", default=48)
    return f'<div{block.anim} style="height: {height}px;{block.style}"></div>'


@register("divider")
def render_divider(block: Block, ctx: RenderContext) -> str:
    bg = block.props.get("bgColor")
    background = f" background-color: {bg};" if bg else ""
    return (
        f'<div{block.anim} class="wb-divider" style="padding: 16px 24px;{background}">'
        f'<hr style="border-color: {block.get("color", default="#e2e8f0")}; '
        f'border-width: {block.get("thickness", default=1)}px;" /></div>'
    )


__all__ = [
    "render_columns",
    "render_divider",
    "render_section",
    "render_spacer",
    "render_sticky",
]
