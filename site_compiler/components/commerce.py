"""Product, blog, and account blocks.

Blocks that need a backend (cart, checkout, comments, profiles) render an
inert placeholder so exported pages still lay out correctly.
"""

from __future__ import annotations

import typing as typ

from .helpers import Block, btn_style, esc, first, heading_block
from .registry import register

if typ.TYPE_CHECKING:
    from .context import RenderContext

BACKEND_COMMERCE_KINDS = (
    "product-carousel",
    "quick-view",
    "wishlist-grid",
    "cart",
    "product-filter",
    "checkout",
)


@register("product-card")
def render_product_card(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    name = block.text("name", "title")
    image = block.text("image", "imageUrl")
    if image:
        image_html = (
            f'<img src="{esc(image)}" alt="{esc(name)}" '
            'style="width: 100%; aspect-ratio: 1; object-fit: cover;" />'
        )
    else:
        image_html = (
            '<div style="width: 100%; aspect-ratio: 1; background: #f1f5f9; display: flex; '
            'align-items: center; justify-content: center;">'
            '<span style="color: #94a3b8;">Product Image</span></div>'
        )
    description = block.text("description")
    desc_html = (
        f'<p style="font-size: 13px; color: {theme.secondary_color}; opacity: 0.7; '
        f'margin-top: 4px;">{esc(description)}</p>'
        if description
        else ""
    )
    return (
        f'<div{block.anim} class="wb-product-card" style="padding: 24px; max-width: 320px; '
        f'margin: 0 auto;{block.style}"><div style="border-radius: {theme.border_radius}px; '
        f'border: 1px solid #e2e8f0; overflow: hidden;">{image_html}<div style="padding: 16px;">'
        f'<h3 style="font-family: {theme.heading_font}; font-size: 16px; font-weight: 600; '
        f'color: {theme.text_color};">{esc(name)}</h3>'
        f'<p style="font-size: 20px; font-weight: 700; color: {theme.primary_color}; '
        f'margin-top: 8px;">{esc(block.get("price"))}</p>{desc_html}'
        f'<button style="{btn_style(theme)} width: 100%; text-align: center; margin-top: 12px;">'
        "Add to Cart</button></div></div></div>"
    )


@register("product-detail")
def render_product_detail(block: Block, ctx: RenderContext) -> str:
    """Render a product page layout; the description is passed through as markup."""
    theme = ctx.theme
    name = block.text("name", "title")
    image = block.text("image", "imageUrl")
    if image:
        image_html = f'<img src="{esc(image)}" alt="{esc(name)}" style="width: 100%;" />'
    else:
        image_html = (
            '<div style="aspect-ratio: 1; background: #f1f5f9; display: flex; '
            'align-items: center; justify-content: center;">'
            '<span style="color: #94a3b8;">Product</span></div>'
        )
    description = block.text("description")
    desc_html = (
        f'<div style="color: {theme.secondary_color}; line-height: 1.7; '
        f'margin-bottom: 24px;">{description}</div>'
        if description
        else ""
    )
    return (
        f'<section{block.anim} class="wb-product-detail" style="padding: 64px 24px; '
        f'font-family: {theme.body_font};{block.style}">'
        '<div class="container" style="display: grid; grid-template-columns: 1fr 1fr; '
        'gap: 48px; align-items: start;">'
        f'<div style="border-radius: {theme.border_radius}px; overflow: hidden;">{image_html}</div>'
        f'<div><h1 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {theme.text_color};">{esc(name)}</h1>'
        f'<p style="font-size: 28px; font-weight: 700; color: {theme.primary_color}; '
        f'margin: 16px 0;">{esc(block.get("price"))}</p>{desc_html}'
        f'<button style="{btn_style(theme)} width: 100%; text-align: center;">Add to Cart</button>'
        "</div></div></section>"
    )


@register(*BACKEND_COMMERCE_KINDS)
def render_commerce_placeholder(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-ecommerce-placeholder" style="padding: 48px; '
        f"text-align: center; font-family: {theme.body_font}; color: {theme.secondary_color}; "
        f"background: {theme.primary_color}08; border-radius: {theme.border_radius}px; "
        f'margin: 24px;{block.style}"><p style="font-size: 14px; opacity: 0.6;">'
        f"E-commerce component ({esc(block.kind)}) requires backend integration</p></div>"
    )


@register("blog-grid")
def render_blog_grid(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    cards = []
    for post in block.list("posts"):
        if not isinstance(post, typ.Mapping):
            continue
        title = post.get("title") or ""
        image = (
            f'<img src="{esc(post["image"])}" alt="{esc(title)}" '
            'style="width: 100%; aspect-ratio: 16/9; object-fit: cover;" />'
            if post.get("image")
            else ""
        )
        excerpt = (
            f'<p style="font-size: 13px; color: {theme.secondary_color}; opacity: 0.7; '
            f'margin-top: 8px; line-height: 1.5;">{esc(post["excerpt"])}</p>'
            if post.get("excerpt")
            else ""
        )
        title_html = esc(title)
        if post.get("url"):
            title_html = (
                f'<a href="{esc(post["url"])}" style="color: inherit; text-decoration: none;">'
                f"{title_html}</a>"
            )
        cards.append(
            f'<article style="border-radius: {theme.border_radius}px; border: 1px solid #e2e8f0; '
            f'overflow: hidden;">{image}<div style="padding: 16px;">'
            f'<h3 style="font-size: 16px; font-weight: 600; color: {theme.text_color}; '
            f'font-family: {theme.heading_font};">{title_html}</h3>{excerpt}</div></article>'
        )
    return (
        f'<section{block.anim} class="wb-blog-grid" style="padding: 64px 24px; '
        f'font-family: {theme.body_font};{block.style}"><div class="container">'
        f'{heading_block(theme, block.text("title"))}'
        '<div style="display: grid; grid-template-columns: repeat(3, 1fr); gap: 24px;">'
        f'{"".join(cards)}</div></div></section>'
    )


@register("comments")
def render_comments(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-comments" style="padding: 24px; '
        f'font-family: {theme.body_font};{block.style}">'
        f'<h3 style="color: {theme.text_color}; margin-bottom: 16px;">'
        f'{esc(block.get("title", default="Comments"))}</h3>'
        f'<p style="color: {theme.secondary_color}; opacity: 0.6; font-size: 14px;">'
        "Comments require backend integration.</p></div>"
    )


@register("tags-cloud")
def render_tags_cloud(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    tags = "".join(
        f'<span style="padding: 4px 12px; border-radius: 999px; '
        f"background: {theme.primary_color}10; color: {theme.primary_color}; "
        f'font-size: 13px; font-weight: 500;">'
        f'{esc(first(tag.get("label"), tag.get("name")) if isinstance(tag, typ.Mapping) else tag)}</span>'
        for tag in block.list("tags")
    )
    return (
        f'<div{block.anim} class="wb-tags" style="padding: 24px; display: flex; '
        f'flex-wrap: wrap; gap: 8px; justify-content: center;{block.style}">{tags}</div>'
    )


@register("user-profile")
def render_user_profile(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-user-profile" style="padding: 48px; text-align: center; '
        f'font-family: {theme.body_font};{block.style}">'
        f'<p style="color: {theme.secondary_color}; opacity: 0.6;">'
        "User profile requires authentication.</p></div>"
    )


__all__ = [
    "BACKEND_COMMERCE_KINDS",
    "render_blog_grid",
    "render_commerce_placeholder",
    "render_comments",
    "render_product_card",
    "render_product_detail",
    "render_tags_cloud",
    "render_user_profile",
]
