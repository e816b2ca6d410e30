"""Text and content blocks: headings, paragraphs, quotes, code, and lists."""

from __future__ import annotations

import typing as typ
from html import escape

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .helpers import Block, bg_color, esc, heading_block
from .icons import icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from .context import RenderContext

HEADING_SIZES = {"h1": 48, "h2": 36, "h3": 30, "h4": 24, "h5": 20, "h6": 18}
CALLOUT_COLORS = {
    "info": "#3b82f6",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "success": "#22c55e",
}
CALLOUT_ICONS = {
    "warning": "alert-circle",
    "error": "alert-circle",
    "success": "check-circle",
}

_CODE_FORMATTER = HtmlFormatter(style="monokai", nowrap=True, noclasses=True)


def _decoration(kind: str, color: str, alignment: str) -> str:
    match kind:
        case "underline":
            margin = {
                "center": "margin-left: auto; margin-right: auto;",
                "right": "margin-left: auto;",
            }.get(alignment, "")
            return (
                f'<div style="width: 60px; height: 4px; border-radius: 2px; '
                f'background-color: {color}; margin-top: 12px; {margin}"></div>'
            )
        case "gradient-underline":
            margin = "margin-left: auto; margin-right: auto;" if alignment == "center" else ""
            return (
                '<div style="width: 100px; height: 4px; border-radius: 2px; '
                f"background: linear-gradient(90deg, {color}, {color}40); "
                f'margin-top: 12px; {margin}"></div>'
            )
        case "dot":
            justify = "justify-content: center;" if alignment == "center" else ""
            dots = "".join(
                '<span style="width: 8px; height: 8px; border-radius: 50%; '
                f'background: {color}{alpha};"></span>'
                for alpha in ("", "60", "30")
            )
            return f'<div style="display: flex; gap: 6px; margin-top: 12px; {justify}">{dots}</div>'
        case _:
            return ""


@register("heading")
def render_heading(block: Block, ctx: RenderContext) -> str:
    """Render a heading with optional badge, icon, subtitle, and decoration."""
    theme = ctx.theme
    props = block.props
    level = str(props.get("level") or "h2")
    if level not in HEADING_SIZES:
        level = "h2"
    size = HEADING_SIZES[level]
    alignment = block.text("alignment", default="left")
    color = block.text("color", default=theme.text_color)
    font = block.text("font", default=theme.heading_font)

    badge = ""
    if props.get("badge"):
        badge_color = block.text("badgeColor", default=theme.primary_color)
        badge = (
            '<span style="display: inline-block; padding: 4px 12px; border-radius: 999px; '
            "font-size: 11px; font-weight: 600; text-transform: uppercase; "
            "letter-spacing: 0.05em; margin-bottom: 12px; "
            f'background-color: {badge_color}15; color: {badge_color};">'
            f"{esc(props['badge'])}</span>"
        )
    icon = ""
    if props.get("icon"):
        icon = (
            f'<span style="color: {theme.primary_color}; margin-right: 12px; '
            'display: inline-flex; vertical-align: middle;">'
            f"{icon_svg(props['icon'], 'icon-lg')}</span>"
        )
    subtitle = ""
    if props.get("subtitle"):
        subtitle = (
            f'<p style="margin-top: 8px; font-size: {round(size * 0.45)}px; '
            f'color: {color}; opacity: 0.6; font-family: {theme.body_font};">'
            f"{esc(props['subtitle'])}</p>"
        )
    decoration = _decoration(
        block.text("decoration", default="none"), theme.primary_color, alignment
    )
    return (
        f'<div{block.anim} style="padding: 24px; text-align: {alignment}; '
        f'font-family: {font};{block.style}">'
        '<div style="max-width: 1200px; margin: 0 auto;">'
        f"{badge}<{level} style=\"font-size: clamp({round(size * 0.7)}px, 3vw, {size}px); "
        f"font-weight: 700; color: {color}; line-height: 1.2; font-family: {font};\">"
        f"{icon}{esc(props.get('text'))}</{level}>{subtitle}{decoration}</div></div>"
    )


@register("paragraph")
def render_paragraph(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-paragraph" style="padding: 24px; '
        f"font-family: {theme.body_font}; color: {theme.text_color};"
        f'{block.style}">{block.text("text", "content")}</div>'
    )


@register("rich-text")
def render_rich_text(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-richtext" style="padding: 24px; '
        f"font-family: {theme.body_font}; color: {theme.text_color};"
        f'{block.style}">{block.text("content")}</div>'
    )


@register("blockquote")
def render_blockquote(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    props = block.props
    footer = ""
    if props.get("author"):
        source = f", <cite>{esc(props['source'])}</cite>" if props.get("source") else ""
        footer = (
            '<footer style="margin-top: 12px; font-style: normal; font-size: 14px; '
            f'font-weight: 500; color: {theme.secondary_color};">'
            f"— {esc(props['author'])}{source}</footer>"
        )
    return (
        f'<blockquote{block.anim} style="padding: 24px 48px; border-left: 4px solid '
        f"{theme.primary_color}; font-family: {theme.body_font}; font-style: italic; "
        f'color: {theme.text_color}; opacity: 0.8; margin: 24px;{block.style}">'
        f'{esc(block.get("quote", "text", "content"))}{footer}</blockquote>'
    )


def highlight_code(code: str, language: str | None) -> str:
    """Return ``code`` as inline-styled highlighted HTML, or escaped text.

    Examples
    --------
    >>> highlight_code("<b>", None)
    '&lt;b&gt;'
    """
    if not language:
        return esc(code)
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        return esc(code)
    return highlight(code, lexer, _CODE_FORMATTER).rstrip("\n")


@register("code-block")
def render_code_block(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    language = block.text("language") or None
    data_lang = f' data-language="{escape(language, quote=True)}"' if language else ""
    code = highlight_code(block.text("code", "content"), language)
    return (
        f'<pre{block.anim}{data_lang} style="padding: 24px; background: #1e293b; '
        f"color: #e2e8f0; border-radius: {theme.border_radius}px; overflow-x: auto; "
        "margin: 16px 24px; font-family: 'Fira Code', monospace; "
        f'font-size: 14px;{block.style}"><code>{code}</code></pre>'
    )


@register("list")
def render_list(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    ordered = bool(block.props.get("ordered"))
    tag = "ol" if ordered else "ul"
    if ordered:
        list_style = "decimal"
    else:
        list_style = "none" if block.props.get("icon") else "disc"
    items = []
    for item in block.list("items"):
        if isinstance(item, typ.Mapping):
            text = item.get("text") or ""
            icon = icon_svg(item["icon"], "icon-sm") if item.get("icon") else ""
        else:
            text, icon = item, ""
        items.append(
            '<li style="padding: 4px 0; display: flex; align-items: center; gap: 8px;">'
            f"{icon}{esc(text)}</li>"
        )
    padding = "0" if list_style == "none" else "20px"
    return (
        f'<div{block.anim} style="padding: 24px 48px; font-family: {theme.body_font}; '
        f'color: {theme.text_color};{block.style}"><{tag} style="list-style: {list_style}; '
        f'padding-left: {padding}; line-height: 1.8;">{"".join(items)}</{tag}></div>'
    )


@register("callout")
def render_callout(block: Block, ctx: RenderContext) -> str:
    """Render an info, warning, error, or success callout box."""
    theme = ctx.theme
    variant = block.text("variant", "type", default="info")
    color = CALLOUT_COLORS.get(variant, theme.primary_color)
    icon = block.text("icon", default=CALLOUT_ICONS.get(variant, "info"))
    title = block.text("title")
    title_html = (
        f'<h4 style="font-weight: 600; font-size: 14px; color: {theme.text_color}; '
        f'margin-bottom: 4px;">{esc(title)}</h4>'
        if title
        else ""
    )
    radius = theme.border_radius
    return (
        f'<div{block.anim} style="padding: 16px 24px; margin: 16px 24px; '
        f"border-left: 4px solid {color}; background: {color}08; "
        f"border-radius: 0 {radius}px {radius}px 0; font-family: {theme.body_font};"
        f'{block.style}"><div style="display: flex; gap: 12px; align-items: flex-start;">'
        f'<div style="color: {color}; flex-shrink: 0; margin-top: 2px;">'
        f"{icon_svg(icon, 'icon-sm')}</div><div>{title_html}"
        f'<div style="color: {theme.text_color}; font-size: 14px; line-height: 1.6; '
        f'opacity: 0.8;">{esc(block.get("text", "content"))}</div></div></div></div>'
    )


@register("icon-text")
def render_icon_text(block: Block, ctx: RenderContext) -> str:
    """Render a grid of icon items, or a single legacy icon with text."""
    theme = ctx.theme
    items = [item for item in block.list("items") if isinstance(item, typ.Mapping)]
    title_style = (
        f"font-weight: 600; color: {theme.text_color}; "
        f"font-family: {theme.heading_font}; margin-bottom: 4px;"
    )
    desc_style = (
        f"font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; line-height: 1.6;"
    )
    if not items:
        title = block.text("title")
        description = block.text("description")
        return (
            f'<div{block.anim} style="padding: 24px; display: flex; gap: 16px; '
            f'align-items: flex-start; font-family: {theme.body_font};{block.style}">'
            f'<div style="color: {theme.primary_color}; flex-shrink: 0;">'
            f'{icon_svg(block.text("icon", default="info"), "icon-lg")}</div><div>'
            + (f'<h4 style="{title_style}">{esc(title)}</h4>' if title else "")
            + (f'<p style="{desc_style}">{esc(description)}</p>' if description else "")
            + "</div></div>"
        )

    columns = block.get("columns", default=min(len(items), 3))
    vertical = block.text("layout", default="vertical") == "vertical"
    cells = []
    for item in items:
        icon = ""
        if item.get("icon"):
            icon = (
                f'<div style="color: {theme.primary_color}; flex-shrink: 0; '
                f'margin-bottom: {"12px" if vertical else "0"};">'
                f"{icon_svg(item['icon'], 'icon-lg')}</div>"
            )
        arrangement = (
            "flex-direction: column; align-items: center; text-align: center;"
            if vertical
            else "align-items: flex-start; gap: 16px;"
        )
        cell_title = (
            f'<h4 style="{title_style} font-size: 16px;">{esc(item["title"])}</h4>'
            if item.get("title")
            else ""
        )
        cell_desc = (
            f'<p style="{desc_style}">{esc(item["description"])}</p>'
            if item.get("description")
            else ""
        )
        cells.append(
            f'<div style="display: flex; {arrangement} padding: 24px;">'
            f"{icon}<div>{cell_title}{cell_desc}</div></div>"
        )
    return (
        f'<section{block.anim} class="wb-icon-text" style="padding: 48px 24px; '
        f'font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        f'<div class="container">{heading_block(theme, block.text("title"))}'
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); '
        f'gap: 24px;">{"".join(cells)}</div></div></section>'
    )


__all__ = [
    "highlight_code",
    "render_blockquote",
    "render_callout",
    "render_code_block",
    "render_heading",
    "render_icon_text",
    "render_list",
    "render_paragraph",
    "render_rich_text",
]
