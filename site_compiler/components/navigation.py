"""Navigation bars and footers."""

from __future__ import annotations

import typing as typ

from site_compiler._constants import FALLBACK_SLUG

from .helpers import Block, btn_style, esc, first, to_list
from .icons import icon_svg, social_icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from .context import RenderContext

_HOVER = "onmouseover=\"this.style.opacity='0.7'\" onmouseout=\"this.style.opacity='1'\""


def _page_links(ctx: RenderContext) -> list[dict[str, str]]:
    """Derive navigation links from the site's pages.

    The root link goes to the page the export writes at ``/``, which is the
    first page when none is flagged as home.
    """
    links = []
    for page in ctx.pages:
        slug = page.slug.strip("/") or FALLBACK_SLUG
        if ctx.home_page is not None:
            is_home = page is ctx.home_page
        else:
            is_home = page.is_home_page
        href = "/" if is_home else f"/{slug}"
        if ctx.language:
            href = f"/{ctx.language}" + ("" if href == "/" else href)
        links.append({"label": page.title, "url": href, "slug": slug})
    return links


@register("navbar", "mega-menu")
def render_navbar(block: Block, ctx: RenderContext) -> str:
    """Render a responsive navigation bar with an optional mobile menu."""
    theme = ctx.theme
    props = block.props
    links = block.list("links") or _page_links(ctx)
    bg = block.get("bgColor", default=theme.background_color)
    logo_url = block.text("logoUrl")
    logo_text = block.text("logo", "siteName", "title")
    transparent = block.get("variant", default="default") in {"transparent", "overlay"}
    link_color = "#ffffff" if transparent else theme.text_color

    nav_links = []
    for link in links:
        if not isinstance(link, typ.Mapping):
            continue
        href = first(link.get("url"), link.get("href"), default="#")
        current = (
            ' aria-current="page"'
            if link.get("slug") and link.get("slug") == ctx.current_slug
            else ""
        )
        nav_links.append(
            f'<a href="{esc(href)}" class="nav-link"{current} style="color: {link_color}; '
            "text-decoration: none; font-weight: 500; padding: 8px 16px; "
            f'transition: opacity 0.2s;" {_HOVER}>{esc(link.get("label"))}</a>'
        )
    links_html = "".join(nav_links)

    cta = ""
    if props.get("ctaText"):
        cta = (
            f'<a href="{esc(block.get("ctaLink", default="#"))}" '
            f'style="{btn_style(theme, "primary", props.get("ctaColor"))}">'
            f"{esc(props['ctaText'])}</a>"
        )

    is_image = logo_url or logo_text.startswith(("http", "data:"))
    if is_image:
        logo = (
            f'<img src="{esc(logo_url or logo_text)}" alt="Logo" '
            'style="height: 32px; object-fit: contain;" />'
        )
    elif logo_text:
        logo = (
            f'<span style="font-family: {theme.heading_font}; font-weight: 700; '
            f'font-size: 18px; color: {link_color};">{esc(logo_text)}</span>'
        )
    else:
        logo = ""

    position = "relative" if props.get("sticky") is False else "sticky"
    cta_block = f'<div class="nav-cta">{cta}</div>' if cta else ""
    mobile_cta = f'<div style="padding-top: 8px;">{cta}</div>' if cta else ""
    return (
        f'<nav{block.anim} class="wb-navbar" style="background-color: '
        f"{'transparent' if transparent else bg}; padding: 16px 24px; "
        f"font-family: {theme.body_font}; position: {position}; top: 0; "
        f'z-index: 50;{block.style}">'
        '<div class="container" style="display: flex; align-items: center; '
        'justify-content: space-between; max-width: 1200px; margin: 0 auto;">'
        f'<div style="display: flex; align-items: center; gap: 12px;">{logo}</div>'
        f'<div class="nav-links" style="display: flex; align-items: center; gap: 4px;">'
        f"{links_html}</div>{cta_block}"
        '<button class="mobile-menu-toggle" aria-label="Toggle menu" '
        "style=\"display: none; background: none; border: none; cursor: pointer; "
        f'padding: 8px; color: {link_color};">{icon_svg("menu", "icon-md")}</button>'
        "</div>"
        '<div class="mobile-menu" style="display: none; padding: 16px 0; '
        f'flex-direction: column; gap: 8px;">{links_html}{mobile_cta}</div>'
        "</nav>"
    )


def _footer_copyright(props: typ.Mapping[str, typ.Any]) -> str:
    if props.get("copyright"):
        return str(props["copyright"])
    company = props.get("companyName")
    if not company:
        return ""
    year = props.get("year")
    prefix = f"© {year} " if year else "© "
    return f"{prefix}{company}. All rights reserved."


@register("footer")
def render_footer(block: Block, ctx: RenderContext) -> str:
    """Render a footer with link columns, social icons, and a copyright line."""
    theme = ctx.theme
    props = block.props
    bg = block.get("bgColor", default="#1e293b")
    text_color = block.get("textColor", default="#94a3b8")
    company = block.text("companyName")
    description = block.text("description")
    columns = block.list("linkGroups", "columns", "sections")
    links = block.list("links")
    socials = block.list("socialLinks")
    copyright_text = _footer_copyright(props)

    link_style = (
        f"color: {text_color}; text-decoration: none; font-size: 14px; "
        "transition: opacity 0.2s;"
    )

    cols_html = ""
    if columns:
        items = []
        for column in columns:
            if not isinstance(column, typ.Mapping):
                continue
            col_links = "".join(
                f'<a href="{esc(first(link.get("url"), link.get("href"), default="#"))}" '
                f'style="{link_style} display: block; padding: 4px 0;" {_HOVER}>'
                f'{esc(first(link.get("label"), link.get("text")))}</a>'
                for link in to_list(column.get("links"))
                if isinstance(link, typ.Mapping)
            )
            items.append(
                f'<div><h4 style="color: #ffffff; font-family: {theme.heading_font}; '
                "font-weight: 600; margin-bottom: 16px; font-size: 14px; "
                'text-transform: uppercase; letter-spacing: 0.05em;">'
                f"{esc(column.get('title'))}</h4>{col_links}</div>"
            )
        cols_html = (
            '<div class="footer-columns" style="display: grid; grid-template-columns: '
            'repeat(auto-fit, minmax(200px, 1fr)); gap: 48px; margin-bottom: 32px;">'
            f"{''.join(items)}</div>"
        )

    links_html = ""
    if links and not columns:
        row = "".join(
            f'<a href="{esc(first(link.get("url"), link.get("href"), default="#"))}" '
            f'style="{link_style}" {_HOVER}>'
            f'{esc(first(link.get("label"), link.get("text")))}</a>'
            for link in links
            if isinstance(link, typ.Mapping)
        )
        links_html = (
            '<div style="display: flex; flex-wrap: wrap; justify-content: center; '
            f'gap: 24px; margin-bottom: 16px;">{row}</div>'
        )

    social_html = ""
    if socials and props.get("showSocial") is not False:
        icons = "".join(
            f'<a href="{esc(social.get("url") or "#")}" target="_blank" rel="noopener" '
            f'aria-label="{esc(first(social.get("platform"), social.get("icon"), default="link"))}" '
            f'style="color: {text_color}; transition: opacity 0.2s;" {_HOVER}>'
            f'{social_icon_svg(first(social.get("platform"), social.get("icon"), default="link"), "icon-sm")}</a>'
            for social in socials
            if isinstance(social, typ.Mapping)
        )
        social_html = (
            '<div style="display: flex; gap: 12px; justify-content: center; '
            f'margin-bottom: 16px;">{icons}</div>'
        )

    brand = ""
    if (company or description) and columns:
        desc = (
            f'<p style="font-size: 14px; color: {text_color}; opacity: 0.7; '
            f'max-width: 300px;">{esc(description)}</p>'
            if description
            else ""
        )
        brand = (
            f'<div style="margin-bottom: 32px;"><h3 style="font-family: '
            f"{theme.heading_font}; font-weight: 700; font-size: 18px; color: #ffffff; "
            f'margin-bottom: 8px;">{esc(company)}</h3>{desc}</div>'
        )

    copyright_html = (
        f'<p style="color: {text_color}; font-size: 13px; opacity: 0.6;">'
        f"{esc(copyright_text)}</p>"
        if copyright_text
        else ""
    )
    return (
        f'<footer{block.anim} style="background-color: {bg}; padding: 64px 24px 32px; '
        f'font-family: {theme.body_font};{block.style}">'
        '<div class="container" style="max-width: 1200px; margin: 0 auto;">'
        f"{brand}{cols_html}"
        '<div style="border-top: 1px solid rgba(255,255,255,0.1); padding-top: 24px; '
        f'text-align: center;">{links_html}{social_html}{copyright_html}</div>'
        "</div></footer>"
    )


@register("breadcrumb")
def render_breadcrumb(block: Block, ctx: RenderContext) -> str:
    """Render a breadcrumb trail; the last item is the current page."""
    theme = ctx.theme
    items = [item for item in block.list("items") if isinstance(item, typ.Mapping)]
    parts = []
    for index, item in enumerate(items):
        label = esc(first(item.get("label"), item.get("text")))
        if index == len(items) - 1:
            parts.append(
                f'<span aria-current="page" style="color: {theme.text_color}; '
                f'font-weight: 500;">{label}</span>'
            )
        else:
            href = esc(first(item.get("url"), item.get("href"), default="#"))
            parts.append(
                f'<a href="{href}" style="color: {theme.primary_color}; '
                f'text-decoration: none;">{label}</a>'
            )
    separator = f'<span style="color: {theme.secondary_color}; opacity: 0.5;">/</span>'
    return (
        f'<nav{block.anim} aria-label="Breadcrumb" style="padding: 16px 24px; '
        f"font-family: {theme.body_font}; font-size: 14px; display: flex; "
        f'gap: 8px; align-items: center;">{separator.join(parts)}</nav>'
    )


@register("pagination")
def render_pagination(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    radius = theme.border_radius
    try:
        total = max(1, int(block.get("totalPages", default=3)))
    except (TypeError, ValueError):
        total = 3
    spans = []
    for number in range(1, total + 1):
        if number == 1:
            style = f"background: {theme.primary_color}; color: #fff;"
        else:
            style = "border: 1px solid #e2e8f0;"
        spans.append(
            f'<span style="padding: 8px 16px; border-radius: {radius}px; {style}">'
            f"{number}</span>"
        )
    return (
        f'<nav{block.anim} style="padding: 24px; display: flex; justify-content: '
        f'center; gap: 8px; font-family: {theme.body_font};">{"".join(spans)}</nav>'
    )


__all__ = [
    "render_breadcrumb",
    "render_footer",
    "render_navbar",
    "render_pagination",
]
