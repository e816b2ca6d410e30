"""Floating widgets, third-party integrations, and raw markup."""

from __future__ import annotations

import typing as typ

from .helpers import Block, esc, first
from .icons import icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from .context import RenderContext

FACEBOOK_PIXEL_SNIPPET = (
    "!function(f,b,e,v,n,t,s){{if(f.fbq)return;n=f.fbq=function(){{n.callMethod?"
    "n.callMethod.apply(n,arguments):n.queue.push(arguments)}};if(!f._fbq)f._fbq=n;"
    "n.push=n;n.loaded=!0;n.version='2.0';n.queue=[];t=b.createElement(e);t.async=!0;"
    "t.src=v;s=b.getElementsByTagName(e)[0];s.parentNode.insertBefore(t,s)}}"
    "(window,document,'script','https://connect.facebook.net/en_US/fbevents.js');"
    "fbq('init','{pixel_id}');fbq('track','PageView');"
)


@register("custom-html")
def render_custom_html(block: Block, ctx: RenderContext) -> str:
    """Pass the author's markup through untouched."""
    return block.text("html")


@register("cookie-consent")
def render_cookie_consent(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    text = block.get("text", "message", default="We use cookies to improve your experience.")
    return (
        '<div class="wb-cookie-consent" role="dialog" aria-live="polite" style="position: fixed; '
        "bottom: 0; left: 0; right: 0; z-index: 9999; padding: 16px 24px; "
        f"background: {theme.text_color}; color: {theme.background_color}; display: flex; "
        "align-items: center; justify-content: space-between; gap: 16px; "
        f'font-family: {theme.body_font}; font-size: 14px;">'
        f'<p style="margin: 0;">{esc(text)}</p>'
        "<button onclick=\"this.parentElement.style.display='none'\" "
        f"style=\"padding: 8px 24px; border-radius: {theme.border_radius}px; "
        f"background: {theme.primary_color}; color: #ffffff; border: none; cursor: pointer; "
        f'font-weight: 600; white-space: nowrap;">{esc(block.get("buttonText", default="Accept"))}'
        "</button></div>"
    )


@register("whatsapp-button")
def render_whatsapp(block: Block, ctx: RenderContext) -> str:
    number = "".join(ch for ch in block.text("phone", "number") if ch.isdigit())
    return (
        f'<a href="https://wa.me/{number}" target="_blank" rel="noopener" '
        'aria-label="Chat on WhatsApp" class="wb-whatsapp" style="position: fixed; bottom: 24px; '
        "right: 24px; z-index: 999; width: 56px; height: 56px; border-radius: 50%; "
        "background: #25D366; display: flex; align-items: center; justify-content: center; "
        'box-shadow: 0 4px 12px rgba(0,0,0,0.2); color: white;">'
        f'{icon_svg("message-circle", "icon-md")}</a>'
    )


@register("floating-cta")
def render_floating_cta(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    right = "96px" if block.props.get("phone") else "24px"
    return (
        f'<a href="{esc(block.get("link", "url", default="#"))}" class="wb-floating-cta" '
        f'style="position: fixed; bottom: 24px; right: {right}; z-index: 998; '
        f"padding: 12px 24px; border-radius: {theme.border_radius}px; "
        f"background: {theme.primary_color}; color: #ffffff; text-decoration: none; "
        "font-weight: 600; box-shadow: 0 4px 12px rgba(0,0,0,0.2); "
        f'font-family: {theme.body_font};">{esc(block.get("text", default="Get Started"))}</a>'
    )


@register("scroll-to-top")
def render_scroll_to_top(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        '<button class="wb-scroll-top" aria-label="Scroll to top" style="position: fixed; '
        "bottom: 24px; right: 24px; z-index: 997; width: 44px; height: 44px; "
        f"border-radius: 50%; background: {theme.primary_color}; color: #ffffff; border: none; "
        "cursor: pointer; display: none; align-items: center; justify-content: center; "
        'box-shadow: 0 2px 8px rgba(0,0,0,0.15);">'
        f'{icon_svg("arrow-up", "icon-sm")}</button>'
    )


@register("facebook-pixel")
def render_facebook_pixel(block: Block, ctx: RenderContext) -> str:
    pixel_id = block.text("pixelId")
    if not pixel_id:
        return ""
    return f"<script>{FACEBOOK_PIXEL_SNIPPET.format(pixel_id=esc(pixel_id))}</script>"


@register("google-analytics")
def render_google_analytics(block: Block, ctx: RenderContext) -> str:
    tracking_id = esc(block.get("trackingId"))
    if not tracking_id:
        return ""
    return (
        f'<script async src="https://www.googletagmanager.com/gtag/js?id={tracking_id}"></script>'
        "<script>window.dataLayer=window.dataLayer||[];"
        "function gtag(){dataLayer.push(arguments);}gtag('js',new Date());"
        f"gtag('config','{tracking_id}');</script>"
    )


@register("language-switcher")
def render_language_switcher(block: Block, ctx: RenderContext) -> str:
    """Render flag links to the current page in each configured language."""
    theme = ctx.theme
    languages = [lang for lang in block.list("languages") if isinstance(lang, typ.Mapping)]
    if not languages:
        return ""
    page_suffix = "" if ctx.is_home_page or not ctx.current_slug else f"/{ctx.current_slug}"
    links = []
    for lang in languages:
        code = str(lang.get("code") or "")
        flag = str(first(lang.get("flag"), code, default="us")).lower()
        current = ' aria-current="true"' if code and code == ctx.language else ""
        links.append(
            f'<a href="/{esc(code)}{esc(page_suffix)}" hreflang="{esc(code)}"{current} '
            'style="display: flex; align-items: center; gap: 4px; padding: 4px 8px; '
            f"border-radius: 4px; text-decoration: none; font-size: 13px; "
            f'color: {theme.text_color}; border: 1px solid #e2e8f0;">'
            f'<img src="https://flagcdn.com/w40/{esc(flag)}.png" alt="" '
            'style="width: 20px; height: 14px; object-fit: cover; border-radius: 2px;" />'
            f'{esc(first(lang.get("label"), code))}</a>'
        )
    return (
        f'<div{block.anim} class="wb-language-switcher" style="display: flex; gap: 8px; '
        f'padding: 8px;{block.style}">{"".join(links)}</div>'
    )


__all__ = [
    "render_cookie_consent",
    "render_custom_html",
    "render_facebook_pixel",
    "render_floating_cta",
    "render_google_analytics",
    "render_language_switcher",
    "render_scroll_to_top",
    "render_whatsapp",
]
