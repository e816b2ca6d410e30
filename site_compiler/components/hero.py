"""Hero banners: centred, left-aligned, split, and slide carousel variants."""

from __future__ import annotations

import typing as typ

from .helpers import Block, btn_style, esc, first, overlay_alpha, to_list
from .icons import icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Theme

    from .context import RenderContext

HEIGHTS = {"small": "400px", "medium": "500px", "large": "600px", "full": "100vh"}


def _min_height(props: typ.Mapping[str, typ.Any]) -> str:
    return HEIGHTS.get(str(props.get("height") or "large"), "600px")


def _gradient(theme: Theme) -> str:
    return (
        f"background: linear-gradient(135deg, {theme.primary_color}, "
        f"{theme.secondary_color});"
    )


def _background(theme: Theme, image: str) -> str:
    if not image:
        return _gradient(theme)
    return (
        f"background-image: url('{esc(image)}'); background-size: cover; "
        "background-position: center;"
    )


def _ctas(block: Block, theme: Theme) -> str:
    props = block.props
    buttons = block.list("buttons")
    if buttons:
        return "".join(
            f'<a href="{esc(first(b.get("link"), b.get("url"), default="#"))}" '
            f'style="{btn_style(theme, b.get("variant") or "primary", b.get("color") or props.get("ctaColor"), b.get("textColor") or props.get("ctaTextColor"))}">'
            f'{esc(b.get("text"))}</a>'
            for b in buttons
            if isinstance(b, typ.Mapping)
        )
    primary = ""
    if props.get("ctaText"):
        primary = (
            f'<a href="{esc(block.get("ctaLink", default="#"))}" '
            f'style="{btn_style(theme, "primary", props.get("ctaColor"), props.get("ctaTextColor"))}">'
            f'{esc(props["ctaText"])}</a>'
        )
    secondary_text = block.text("cta2Text", "secondaryCtaText")
    secondary = ""
    if secondary_text:
        secondary = (
            f'<a href="{esc(block.get("cta2Link", "secondaryCtaLink", default="#"))}" '
            f'style="{btn_style(theme, "outline", props.get("cta2Color"))}">'
            f"{esc(secondary_text)}</a>"
        )
    return primary + secondary


def _render_split(block: Block, theme: Theme, title: str, subtitle: str, ctas: str) -> str:
    side = block.text("splitImage", "sideImage", "backgroundImage", "imageUrl")
    heading = (
        f'<h1 style="font-family: {theme.heading_font}; font-size: clamp(32px, 4vw, 56px); '
        f"font-weight: 800; color: {theme.text_color}; line-height: 1.1; "
        f'margin-bottom: 16px;">{esc(title)}</h1>'
        if title
        else ""
    )
    sub = (
        f'<p style="font-size: 18px; color: {theme.secondary_color}; opacity: 0.8; '
        f'line-height: 1.6;">{esc(subtitle)}</p>'
        if subtitle
        else ""
    )
    return (
        f'<section{block.anim} class="wb-hero wb-hero-split" style="display: grid; '
        f"grid-template-columns: 1fr 1fr; min-height: {_min_height(block.props)}; "
        f'font-family: {theme.body_font};{block.style}">'
        '<div style="display: flex; flex-direction: column; justify-content: center; '
        f'padding: 48px 64px; background-color: {theme.background_color};">'
        f"{heading}{sub}{ctas}</div>"
        f"<div style=\"background-image: url('{esc(side)}'); background-size: cover; "
        'background-position: center; min-height: 400px;"></div>'
        "</section>"
    )


def _render_slide(slide: typ.Mapping[str, typ.Any], index: int, theme: Theme, alignment: str) -> str:
    image = str(slide.get("backgroundImage") or "")
    overlay = overlay_alpha(slide.get("overlayOpacity"), 0.4)
    heading = str(slide.get("heading") or "")
    subheading = str(slide.get("subheading") or "")
    justify = "flex-start" if alignment == "left" else "center"
    buttons = "".join(
        f'<a href="{esc(b.get("link") or "#")}" '
        f'style="{btn_style(theme, b.get("variant") or "primary")}">{esc(b.get("text"))}</a>'
        for b in to_list(slide.get("buttons"))
        if isinstance(b, typ.Mapping)
    )
    buttons_html = (
        f'<div class="slide-buttons" style="display: flex; gap: 12px; '
        f'justify-content: {justify}; flex-wrap: wrap; margin-top: 24px;">{buttons}</div>'
        if buttons
        else ""
    )
    active = index == 0
    overlay_div = (
        f'<div style="position: absolute; inset: 0; background: rgba(0,0,0,{overlay});"></div>'
        if image
        else ""
    )
    centred = "margin: 0 auto; text-align: center;" if alignment == "center" else ""
    heading_html = (
        f'<h1 style="font-family: {theme.heading_font}; font-size: clamp(32px, 5vw, 56px); '
        "font-weight: 800; color: #ffffff; line-height: 1.1; margin-bottom: 16px;\">"
        f"{esc(heading)}</h1>"
        if heading
        else ""
    )
    sub_html = (
        '<p style="font-size: clamp(16px, 2vw, 20px); color: #ffffff; opacity: 0.9; '
        f'line-height: 1.6; max-width: 600px;">{esc(subheading)}</p>'
        if subheading
        else ""
    )
    return (
        f'<div class="carousel-slide" style="position: absolute; inset: 0; '
        f"{_background(theme, image)} opacity: {1 if active else 0}; "
        f"transition: opacity 0.8s ease; z-index: {2 if active else 1}; "
        f'pointer-events: {"auto" if active else "none"};">'
        f"{overlay_div}"
        '<div class="slide-content" style="position: relative; z-index: 1; display: flex; '
        f"flex-direction: column; align-items: {justify}; justify-content: center; "
        f'height: 100%; padding: 48px 64px; max-width: 900px; {centred}">'
        f"{heading_html}{sub_html}{buttons_html}</div></div>"
    )


def _render_carousel(block: Block, theme: Theme, slides: list[typ.Any]) -> str:
    props = block.props
    alignment = str(props.get("alignment") or "center")
    interval = props.get("autoPlayInterval") or 5
    slides = [slide for slide in slides if isinstance(slide, typ.Mapping)]
    slides_html = "".join(
        _render_slide(slide, index, theme, alignment) for index, slide in enumerate(slides)
    )
    arrows = ""
    dots = ""
    if len(slides) > 1 and props.get("showArrows") is not False:
        arrow = (
            '<button class="slide-arrow slide-arrow-{side}" aria-label="{label}" '
            'style="position: absolute; {side_pos}: 16px; top: 50%; transform: '
            "translateY(-50%); z-index: 10; width: 44px; height: 44px; border-radius: 50%; "
            "background: rgba(255,255,255,0.2); backdrop-filter: blur(4px); border: none; "
            "cursor: pointer; color: #ffffff; display: flex; align-items: center; "
            'justify-content: center;">{icon}</button>'
        )
        arrows = arrow.format(
            side="prev", label="Previous slide", side_pos="left",
            icon=icon_svg("chevron-left", "icon-md"),
        ) + arrow.format(
            side="next", label="Next slide", side_pos="right",
            icon=icon_svg("chevron-right", "icon-md"),
        )
    if len(slides) > 1 and props.get("showDots") is not False:
        buttons = "".join(
            '<button class="carousel-dot" style="width: 10px; height: 10px; '
            "border-radius: 50%; background: #ffffff; border: none; cursor: pointer; "
            f"opacity: {1 if index == 0 else 0.5}; transition: opacity 0.3s, transform 0.3s; "
            f'transform: {"scale(1.2)" if index == 0 else "scale(1)"}; padding: 0;"></button>'
            for index in range(len(slides))
        )
        dots = (
            '<div class="carousel-dots" style="position: absolute; bottom: 24px; left: 50%; '
            'transform: translateX(-50%); z-index: 10; display: flex; gap: 8px;">'
            f"{buttons}</div>"
        )
    return (
        f'<section{block.anim} class="wb-hero wb-hero-carousel" style="position: relative; '
        f"min-height: {_min_height(props)}; overflow: hidden; "
        f'font-family: {theme.body_font};{block.style}" '
        f'data-autoplay-interval="{esc(interval)}">'
        f"{slides_html}{arrows}{dots}</section>"
    )


@register("hero", "carousel")
def render_hero(block: Block, ctx: RenderContext) -> str:
    """Render a hero banner.

    The ``variant`` prop selects ``centered`` (default), ``left-aligned``,
    ``split``, or ``carousel``; a carousel without slides degrades to the
    centred layout.
    """
    theme = ctx.theme
    props = block.props
    variant = str(props.get("variant") or "centered")
    slides = block.list("slides")
    if variant == "carousel" and slides:
        return _render_carousel(block, theme, slides)

    title = block.text("heading", "title")
    subtitle = block.text("subheading", "subtitle")
    ctas = _ctas(block, theme)
    flush_left = variant in {"left-aligned", "split"}
    ctas_div = (
        '<div style="display: flex; gap: 12px; justify-content: '
        f'{"flex-start" if flush_left else "center"}; flex-wrap: wrap; '
        f'margin-top: 24px;">{ctas}</div>'
        if ctas
        else ""
    )
    if variant == "split":
        return _render_split(block, theme, title, subtitle, ctas_div)

    image = block.text("backgroundImage", "imageUrl")
    overlay = overlay_alpha(props.get("overlayOpacity"), 0.5)
    text_color = block.get("headingColor", "textColor", default="#ffffff")
    sub_color = block.get("subheadingColor", "textColor", default="#ffffff")
    left = variant == "left-aligned"
    overlay_div = (
        f'<div style="position: absolute; inset: 0; background: rgba(0,0,0,{overlay});"></div>'
        if image
        else ""
    )
    badge = (
        '<span style="display: inline-block; padding: 4px 16px; border-radius: 999px; '
        f"background: rgba(255,255,255,0.15); color: {text_color}; font-size: 13px; "
        'font-weight: 500; margin-bottom: 16px; backdrop-filter: blur(4px);">'
        f"{esc(props['badge'])}</span>"
        if props.get("badge")
        else ""
    )
    heading = (
        f'<h1 style="font-family: {theme.heading_font}; font-size: clamp(36px, 5vw, 64px); '
        f"font-weight: 800; color: {text_color}; line-height: 1.1; "
        f'margin-bottom: 16px;">{esc(title)}</h1>'
        if title
        else ""
    )
    sub = (
        f'<p style="font-size: clamp(16px, 2vw, 20px); color: {sub_color}; opacity: 0.9; '
        f'line-height: 1.6; max-width: 600px;">{esc(subtitle)}</p>'
        if subtitle
        else ""
    )
    return (
        f'<section{block.anim} class="wb-hero" style="position: relative; '
        f"min-height: {_min_height(props)}; display: flex; align-items: center; "
        f"justify-content: center; {_background(theme, image)} "
        f'font-family: {theme.body_font}; overflow: hidden;{block.style}">'
        f"{overlay_div}"
        '<div style="position: relative; z-index: 1; max-width: 800px; padding: 48px 24px; '
        f'text-align: {"left" if left else "center"}; display: flex; flex-direction: column; '
        f'align-items: {"flex-start" if left else "center"};">'
        f"{badge}{heading}{sub}{ctas_div}</div></section>"
    )


@register("parallax")
def render_parallax(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    image = block.text("imageUrl", "backgroundImage")
    height = {"small": "300", "medium": "400"}.get(str(block.props.get("height")), "500")
    overlay = overlay_alpha(block.props.get("overlayOpacity"), 0.4)
    title = block.text("heading", "title")
    subtitle = block.text("subheading", "subtitle")
    heading = (
        f'<h2 style="font-size: 36px; font-weight: bold; font-family: {theme.heading_font};">'
        f"{esc(title)}</h2>"
        if title
        else ""
    )
    sub = f'<p style="font-size: 18px; opacity: 0.9;">{esc(subtitle)}</p>' if subtitle else ""
    return (
        f"<div{block.anim} class=\"wb-parallax\" style=\"position: relative; background-image: url('{esc(image)}'); "
        "background-attachment: fixed; background-size: cover; background-position: center; "
        f"min-height: {height}px; display: flex; align-items: center; "
        f'justify-content: center;{block.style}">'
        f'<div style="position: absolute; inset: 0; background: rgba(0,0,0,{overlay});"></div>'
        '<div style="position: relative; text-align: center; color: #ffffff; '
        f'text-shadow: 0 2px 8px rgba(0,0,0,0.5);">{heading}{sub}</div></div>'
    )


__all__ = ["render_hero", "render_parallax"]
