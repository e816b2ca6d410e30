"""Images, galleries, video, audio, and map embeds."""

from __future__ import annotations

import typing as typ
from urllib.parse import parse_qs, urlparse

from .helpers import Block, bg_color, esc
from .registry import register

if typ.TYPE_CHECKING:
    from .context import RenderContext


def _image_src(image: object) -> str:
    if isinstance(image, typ.Mapping):
        return str(image.get("url") or image.get("src") or "")
    return str(image or "")


def embed_url(url: str, *, autoplay: bool = False) -> str:
    """Convert YouTube and Vimeo page URLs into their embeddable form.

    Examples
    --------
    >>> embed_url("https://www.youtube.com/watch?v=abc123")
    'https://www.youtube.com/embed/abc123'
    >>> embed_url("https://vimeo.com/42?x=1", autoplay=True)
    'https://player.vimeo.com/video/42?autoplay=1&muted=1'
    """
    if "youtube.com/watch" in url:
        video = parse_qs(urlparse(url).query).get("v", [""])[0]
        suffix = "?autoplay=1&mute=1" if autoplay else ""
        return f"https://www.youtube.com/embed/{video}{suffix}"
    if "youtu.be/" in url:
        video = url.split("youtu.be/", 1)[1].split("?", 1)[0]
        suffix = "?autoplay=1&mute=1" if autoplay else ""
        return f"https://www.youtube.com/embed/{video}{suffix}"
    if "vimeo.com/" in url and "player.vimeo.com" not in url:
        video = url.split("vimeo.com/", 1)[1].split("?", 1)[0]
        suffix = "?autoplay=1&muted=1" if autoplay else ""
        return f"https://player.vimeo.com/video/{video}{suffix}"
    return url


@register("image-text")
def render_image_text(block: Block, ctx: RenderContext) -> str:
    """Render an image beside a title and raw-markup description."""
    theme = ctx.theme
    title = block.text("title")
    image = block.text("imageUrl")
    radius = theme.border_radius
    if image:
        image_html = (
            f'<div style="border-radius: {radius}px; overflow: hidden; aspect-ratio: 16/9;">'
            f'<img src="{esc(image)}" alt="{esc(title)}" style="width: 100%; height: 100%; '
            'object-fit: cover;" /></div>'
        )
    else:
        image_html = (
            f'<div style="background: {theme.primary_color}08; border-radius: {radius}px; '
            'aspect-ratio: 16/9; display: flex; align-items: center; justify-content: center;">'
            f'<span style="color: {theme.secondary_color}; opacity: 0.5;">No image</span></div>'
        )
    text_html = (
        '<div style="display: flex; flex-direction: column; justify-content: center;">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {theme.text_color}; margin-bottom: 16px;">{esc(title)}</h2>'
        f'<div style="color: {theme.secondary_color}; opacity: 0.8; line-height: 1.7; '
        f'font-family: {theme.body_font};">{block.text("description")}</div></div>'
    )
    ordered = (
        text_html + image_html
        if block.text("imagePosition", default="left") == "right"
        else image_html + text_html
    )
    return (
        f'<section{block.anim} class="wb-image-text" style="padding: 64px 24px; '
        f'font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        '<div class="container" style="display: grid; grid-template-columns: 1fr 1fr; '
        f'gap: 48px; align-items: center;">{ordered}</div></section>'
    )


@register("image-gallery", "lightbox-gallery")
def render_image_gallery(block: Block, ctx: RenderContext) -> str:
    """Render a square-cell grid, or three placeholders when there are no images."""
    radius = ctx.theme.border_radius
    images = block.list("images")
    if images:
        cells = "".join(
            f'<div style="aspect-ratio: 1; border-radius: {radius}px; overflow: hidden;">'
            f'<img src="{esc(_image_src(image))}" alt="" style="width: 100%; height: 100%; '
            'object-fit: cover;" loading="lazy" /></div>'
            for image in images
        )
    else:
        cells = "".join(
            f'<div style="aspect-ratio: 1; border-radius: {radius}px; background: #f1f5f9; '
            'display: flex; align-items: center; justify-content: center;">'
            f'<span style="color: #94a3b8; font-size: 12px;">Image {index}</span></div>'
            for index in range(1, 4)
        )
    columns = block.get("columns", default=3)
    gap = block.get("gap", default=8)
    return (
        f'<section{block.anim} class="wb-gallery" style="padding: 32px 24px;{block.style}">'
        f'<div class="container" style="display: grid; grid-template-columns: '
        f'repeat({columns}, 1fr); gap: {gap}px;">{cells}</div></section>'
    )


@register("gallery-masonry")
def render_masonry(block: Block, ctx: RenderContext) -> str:
    radius = ctx.theme.border_radius
    cells = "".join(
        '<div style="break-inside: avoid; margin-bottom: 8px;">'
        f'<img src="{esc(_image_src(image))}" alt="" style="width: 100%; '
        f'border-radius: {radius}px;" loading="lazy" /></div>'
        for image in block.list("images")
    )
    return (
        f'<section{block.anim} style="padding: 32px 24px;{block.style}">'
        f'<div class="container" style="columns: {block.get("columns", default=3)}; '
        f'column-gap: 8px;">{cells}</div></section>'
    )


@register("video-embed")
def render_video_embed(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    src = embed_url(block.text("url"), autoplay=bool(block.props.get("autoplay")))
    title = block.text("title")
    title_html = (
        f'<h3 style="font-family: {theme.heading_font}; font-size: 20px; font-weight: 600; '
        f'color: {theme.text_color}; margin-bottom: 16px; text-align: center;">'
        f"{esc(title)}</h3>"
        if title
        else ""
    )
    return (
        f'<section{block.anim} style="padding: 32px 24px;{block.style}">'
        f'<div class="container" style="max-width: 900px;">{title_html}'
        f'<div style="aspect-ratio: {esc(block.get("aspectRatio", default="16/9"))}; '
        f'border-radius: {theme.border_radius}px; overflow: hidden;">'
        f'<iframe src="{esc(src)}" title="{esc(title or "Video")}" frameborder="0" '
        'allowfullscreen style="width: 100%; height: 100%;" '
        'allow="autoplay; encrypted-media"></iframe></div></div></section>'
    )


@register("background-video")
def render_background_video(block: Block, ctx: RenderContext) -> str:
    return (
        f'<div{block.anim} style="position: relative; overflow: hidden;{block.style}">'
        '<video autoplay loop muted playsinline style="width: 100%; height: 100%; '
        f'object-fit: cover;"><source src="{esc(block.get("url", "videoUrl"))}" '
        'type="video/mp4" /></video></div>'
    )


@register("audio-player")
def render_audio(block: Block, ctx: RenderContext) -> str:
    return (
        f'<div{block.anim} style="padding: 24px;{block.style}"><audio controls '
        'style="width: 100%; max-width: 600px; margin: 0 auto; display: block;">'
        f'<source src="{esc(block.get("url", "audioUrl"))}" /></audio></div>'
    )


def _coordinate(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


@register("map")
def render_map(block: Block, ctx: RenderContext) -> str:
    """Render an OpenStreetMap embed centred on ``lat``/``lng``."""
    lat = _coordinate(block.get("lat", "latitude", default=0))
    lng = _coordinate(block.get("lng", "longitude", default=0))
    height = block.get("height", default=400)
    bbox = "%2C".join(
        f"{value:g}"
        for value in (lng - 0.02, lat - 0.02, lng + 0.02, lat + 0.02)
    )
    return (
        f'<div{block.anim} class="wb-map" style="padding: 24px;{block.style}">'
        f'<iframe src="https://www.openstreetmap.org/export/embed.html?bbox={bbox}'
        f'&amp;layer=mapnik" title="Map" style="width: 100%; height: {height}px; '
        f'border: none; border-radius: {ctx.theme.border_radius}px;"></iframe></div>'
    )


@register("before-after")
def render_before_after(block: Block, ctx: RenderContext) -> str:
    radius = ctx.theme.border_radius
    return (
        f'<div{block.anim} class="wb-before-after" style="display: grid; '
        "grid-template-columns: 1fr 1fr; gap: 8px; padding: 24px; max-width: 800px; "
        f'margin: 0 auto;{block.style}">'
        f'<img src="{esc(block.get("beforeImage"))}" alt="Before" '
        f'style="width: 100%; border-radius: {radius}px;" />'
        f'<img src="{esc(block.get("afterImage"))}" alt="After" '
        f'style="width: 100%; border-radius: {radius}px;" /></div>'
    )


__all__ = [
    "embed_url",
    "render_audio",
    "render_background_video",
    "render_before_after",
    "render_image_gallery",
    "render_image_text",
    "render_map",
    "render_masonry",
    "render_video_embed",
]
