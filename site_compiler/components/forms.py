"""Interactive blocks: forms, buttons, tabs, and accordions."""

from __future__ import annotations

import typing as typ

from .helpers import Block, bg_color, btn_style, esc, first, heading_block, render_stars, to_list
from .icons import icon_svg, social_icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Theme

    from .context import RenderContext

# Shorthand field names accepted by contact forms, mapped to (label, input type).
FIELD_TYPES: dict[str, tuple[str, str]] = {
    "name": ("Name", "text"),
    "email": ("Email", "email"),
    "message": ("Message", "textarea"),
    "phone": ("Phone", "tel"),
    "subject": ("Subject", "text"),
    "company": ("Company", "text"),
    "address": ("Address", "text"),
    "city": ("City", "text"),
    "country": ("Country", "text"),
    "website": ("Website", "url"),
}
REQUIRED_SHORTHAND = frozenset({"name", "email", "message"})
DEFAULT_CONTACT_FIELDS = ("name", "email", "message")


def _form_settings(props: typ.Mapping[str, typ.Any]) -> typ.Mapping[str, typ.Any]:
    settings = props.get("formSettings")
    return settings if isinstance(settings, typ.Mapping) else {}


def expand_field(field: object) -> dict[str, typ.Any]:
    """Expand a shorthand field name into a full field description.

    Examples
    --------
    >>> expand_field("email")
    {'name': 'email', 'label': 'Email', 'type': 'email', 'required': True}
    >>> expand_field("budget")["label"]
    'Budget'
    """
    if isinstance(field, typ.Mapping):
        return dict(field)
    name = str(field)
    label, kind = FIELD_TYPES.get(name.lower(), (name[:1].upper() + name[1:], "text"))
    return {
        "name": name,
        "label": label,
        "type": kind,
        "required": name.lower() in REQUIRED_SHORTHAND,
    }


def _input_style(theme: Theme) -> str:
    return (
        f"width: 100%; padding: 12px 16px; border: 1px solid #e2e8f0; "
        f"border-radius: {theme.border_radius}px; font-family: {theme.body_font}; "
        "font-size: 14px; outline: none; box-sizing: border-box;"
    )


def render_field(field: typ.Mapping[str, typ.Any], theme: Theme) -> str:
    """Render one labelled form control."""
    label = first(field.get("label"), field.get("name"))
    name = esc(first(field.get("name"), label))
    required = " required" if field.get("required") else ""
    kind = str(field.get("type") or "text")
    style = _input_style(theme)
    label_html = (
        '<label style="display: block; font-size: 13px; font-weight: 500; '
        f'color: {theme.text_color}; margin-bottom: 6px;">{esc(label)}</label>'
    )
    match kind:
        case "textarea":
            control = (
                f'<textarea name="{name}" rows="4" style="{style} resize: vertical;"'
                f"{required}></textarea>"
            )
        case "select":
            options = "".join(
                f'<option value="{esc(option)}">{esc(option)}</option>'
                for option in to_list(field.get("options"))
            )
            control = (
                f'<select name="{name}" style="{style}"{required}>'
                f'<option value="">Select...</option>{options}</select>'
            )
        case "checkbox":
            return (
                '<div style="display: flex; align-items: center; gap: 8px;">'
                f'<input type="checkbox" name="{name}"{required} />'
                f'<label style="font-size: 14px; color: {theme.text_color};">{esc(label)}</label></div>'
            )
        case _:
            control = f'<input type="{esc(kind)}" name="{name}" style="{style}"{required} />'
    return f"<div>{label_html}{control}</div>"


@register("contact-form")
def render_contact_form(block: Block, ctx: RenderContext) -> str:
    """Render a contact form.

    The action is, in order of preference, the block's webhook, the export's
    form endpoint, a ``mailto:`` address (posted as ``text/plain``), or ``#``.
    """
    theme = ctx.theme
    props = block.props
    settings = _form_settings(props)
    webhook = first(settings.get("webhookUrl"), props.get("webhookUrl"), ctx.form_action_url)
    email_to = first(settings.get("emailTo"), props.get("emailTo"))
    if webhook:
        action, enctype = webhook, ""
    elif email_to:
        action, enctype = f"mailto:{email_to}", ' enctype="text/plain"'
    else:
        action, enctype = "#", ""

    fields = [expand_field(field) for field in block.list("fields") or DEFAULT_CONTACT_FIELDS]
    fields_html = "".join(render_field(field, theme) for field in fields)
    title = block.text("title")
    subtitle = block.text("subtitle")
    sub_html = (
        f'<p style="color: {theme.secondary_color}; opacity: 0.7; text-align: center; '
        f'margin-bottom: 32px;">{esc(subtitle)}</p>'
        if subtitle
        else ""
    )
    button = esc(block.get("buttonText", "submitText", default="Send Message"))
    button_style = btn_style(theme, "primary", props.get("buttonColor"), props.get("buttonTextColor"))
    return (
        f'<section{block.anim} class="wb-contact-form" style="padding: 64px 24px; '
        f'font-family: {theme.body_font}; {bg_color(props)}{block.style}">'
        '<div class="container" style="max-width: 600px;">'
        f'{heading_block(theme, title, margin="8px")}{sub_html}'
        f'<form action="{esc(action)}" method="POST"{enctype} class="wb-form" '
        f'style="display: flex; flex-direction: column; gap: 16px;">{fields_html}'
        f'<button type="submit" style="{button_style} width: 100%; text-align: center; '
        f'cursor: pointer;">{button}</button></form></div></section>'
    )


@register("form")
def render_generic_form(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    props = block.props
    action = first(_form_settings(props).get("webhookUrl"), ctx.form_action_url, default="#")
    fields = "".join(
        render_field(expand_field(field), theme) for field in block.list("fields")
    )
    title = block.text("title")
    title_html = (
        f'<h2 style="font-family: {theme.heading_font}; font-size: 24px; font-weight: 700; '
        f'color: {theme.text_color}; margin-bottom: 24px; text-align: center;">{esc(title)}</h2>'
        if title
        else ""
    )
    return (
        f'<section{block.anim} class="wb-generic-form" style="padding: 64px 24px; '
        f'font-family: {theme.body_font}; {bg_color(props)}{block.style}">'
        f'<div class="container" style="max-width: 600px;">{title_html}'
        f'<form action="{esc(action)}" method="POST" class="wb-form" '
        f'style="display: flex; flex-direction: column; gap: 16px;">{fields}'
        f'<button type="submit" style="{btn_style(theme)} width: 100%; text-align: center;">'
        f'{esc(block.get("buttonText", default="Submit"))}</button></form></div></section>'
    )


@register("newsletter")
def render_newsletter(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    props = block.props
    action = first(_form_settings(props).get("webhookUrl"), default="#")
    title = esc(block.get("title"))
    subtitle = block.text("subtitle")
    button = esc(block.get("buttonText", default="Subscribe"))
    placeholder = esc(block.get("placeholder", default="Enter your email"))
    radius = theme.border_radius

    if block.text("variant", default="inline") == "banner":
        sub_html = (
            f'<p style="font-size: 14px; color: #ffffff; opacity: 0.8;">{esc(subtitle)}</p>'
            if subtitle
            else ""
        )
        return (
            f'<section{block.anim} class="wb-newsletter wb-newsletter-banner" '
            f"style=\"padding: 24px; background-color: {theme.primary_color}; "
            f'font-family: {theme.body_font};{block.style}">'
            '<div class="container" style="display: flex; align-items: center; '
            'justify-content: space-between; flex-wrap: wrap; gap: 16px;">'
            f'<div><h2 style="font-size: 18px; font-weight: 700; color: #ffffff; '
            f'font-family: {theme.heading_font};">{title}</h2>{sub_html}</div>'
            f'<form action="{esc(action)}" method="POST" class="wb-form" style="display: flex; gap: 12px;">'
            f'<input type="email" name="email" required placeholder="{placeholder}" '
            f'style="padding: 12px 16px; border: none; border-radius: {radius}px; '
            'font-size: 14px; width: 220px;" />'
            f'<button type="submit" style="padding: 12px 24px; border-radius: {radius}px; '
            f"background: #ffffff; color: {theme.primary_color}; font-weight: 600; "
            f'border: none; cursor: pointer;">{button}</button></form></div></section>'
        )

    sub_html = (
        f'<p style="color: {theme.secondary_color}; opacity: 0.7; margin-bottom: 24px; '
        f'font-size: 14px;">{esc(subtitle)}</p>'
        if subtitle
        else '<div style="margin-bottom: 24px;"></div>'
    )
    bg = block.get("bgColor", default=f"{theme.primary_color}08")
    return (
        f'<section{block.anim} class="wb-newsletter" style="padding: 64px 24px; '
        f"background-color: {bg}; text-align: center; font-family: {theme.body_font};"
        f'{block.style}"><div class="container" style="max-width: 500px;">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 24px; font-weight: 700; '
        f'color: {theme.text_color}; margin-bottom: 8px;">{title}</h2>{sub_html}'
        f'<form action="{esc(action)}" method="POST" class="wb-form" style="display: flex; '
        'gap: 12px; max-width: 400px; margin: 0 auto;">'
        f'<input type="email" name="email" required placeholder="{placeholder}" '
        f'style="flex: 1; padding: 12px 16px; border: 1px solid #e2e8f0; border-radius: {radius}px; '
        'font-size: 14px; outline: none;" />'
        f'<button type="submit" style="{btn_style(theme)} white-space: nowrap;">{button}</button>'
        "</form></div></section>"
    )


@register("button")
def render_button(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    props = block.props
    text = esc(block.get("text", default="Click me"))
    icon = icon_svg(props["icon"], "icon-sm") if props.get("icon") else ""
    if icon and block.text("iconPosition", default="left") == "right":
        content = f"{text} {icon}"
    elif icon:
        content = f"{icon} {text}"
    else:
        content = text
    full_width = bool(props.get("fullWidth"))
    style = btn_style(theme, block.text("variant", default="primary"), props.get("color"), props.get("textColor"))
    width = "width: 100%; text-align: center; box-sizing: border-box; " if full_width else ""
    justify = "" if full_width else "justify-content: center;"
    return (
        f'<div{block.anim} style="padding: 16px 24px; display: flex; {justify}{block.style}">'
        f'<a href="{esc(block.get("link", default="#"))}" class="wb-btn" style="{style} {width}'
        f'display: inline-flex; align-items: center; gap: 8px;">{content}</a></div>'
    )


@register("button-group")
def render_button_group(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    justify = {"center": "center", "right": "flex-end"}.get(
        block.text("alignment", default="center"), "flex-start"
    )
    buttons = "".join(
        f'<a href="{esc(first(b.get("link"), b.get("url"), default="#"))}" class="wb-btn" '
        f'style="{btn_style(theme, b.get("variant") or "primary", b.get("color"), b.get("textColor"))} '
        'display: inline-flex; align-items: center; gap: 8px;">'
        f'{icon_svg(b["icon"], "icon-sm") if b.get("icon") else ""}{esc(b.get("text"))}</a>'
        for b in block.list("buttons")
        if isinstance(b, typ.Mapping)
    )
    return (
        f'<div{block.anim} style="padding: 16px 24px; display: flex; gap: 12px; '
        f'justify-content: {justify}; flex-wrap: wrap;{block.style}">{buttons}</div>'
    )


@register("social-links")
def render_social_links(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    links = "".join(
        f'<a href="{esc(link.get("url") or "#")}" target="_blank" rel="noopener" '
        'style="width: 48px; height: 48px; border-radius: 50%; display: flex; '
        f"align-items: center; justify-content: center; background: {theme.primary_color}15; "
        f'color: {theme.primary_color}; transition: transform 0.2s;" '
        f'title="{esc(link.get("platform"))}">'
        f'{social_icon_svg(link.get("platform") or "link", "icon-sm")}</a>'
        for link in block.list("links")
        if isinstance(link, typ.Mapping)
    )
    title = block.text("title")
    title_html = (
        f'<h3 style="font-size: 18px; font-weight: 600; color: {theme.text_color}; '
        f'font-family: {theme.heading_font}; margin-bottom: 24px;">{esc(title)}</h3>'
        if title
        else ""
    )
    return (
        f'<section{block.anim} class="wb-social-links" style="padding: 48px 24px; '
        f'text-align: center; font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        f'<div class="container">{title_html}<div style="display: flex; flex-wrap: wrap; '
        f'justify-content: center; gap: 16px;">{links}</div></div></section>'
    )


@register("tabs")
def render_tabs(block: Block, ctx: RenderContext) -> str:
    """Render tab buttons and panels; the first tab starts active."""
    theme = ctx.theme
    tabs = [tab for tab in block.list("tabs") if isinstance(tab, typ.Mapping)]
    buttons = []
    panels = []
    for index, tab in enumerate(tabs):
        active = index == 0
        suffix = " active" if active else ""
        buttons.append(
            f'<button class="tab-button{suffix}" data-tab="{index}" style="padding: 10px 16px; '
            "font-size: 14px; font-weight: 500; border: none; border-bottom: 2px solid "
            f'{theme.primary_color if active else "transparent"}; background: none; cursor: pointer; '
            f"color: {theme.primary_color if active else theme.secondary_color}; "
            f'opacity: {1 if active else 0.6}; font-family: {theme.body_font};">'
            f'{esc(tab.get("label") or f"Tab {index + 1}")}</button>'
        )
        panels.append(
            f'<div class="tab-panel{suffix}" data-tab="{index}" style="display: '
            f'{"block" if active else "none"}; padding: 16px 0; color: {theme.text_color}; '
            f'font-size: 14px; line-height: 1.7;">{tab.get("content") or ""}</div>'
        )
    return (
        f'<section{block.anim} class="wb-tabs" style="padding: 48px 24px; '
        f'font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        '<div class="container" style="max-width: 800px;">'
        '<div class="tab-buttons" style="display: flex; border-bottom: 1px solid #e2e8f0; '
        f'gap: 4px; margin-bottom: 24px;">{"".join(buttons)}</div>'
        f'<div class="tab-panels" style="min-height: 100px;">{"".join(panels)}</div>'
        "</div></section>"
    )


@register("faq")
def render_faq(block: Block, ctx: RenderContext) -> str:
    """Render a collapsible question list; answers are passed through as markup."""
    theme = ctx.theme
    cards = block.text("variant", default="default") == "cards"
    inset = "20px" if cards else "0"
    card_style = (
        f"border: 1px solid #e2e8f0; border-radius: {theme.border_radius}px; "
        "margin-bottom: 8px; padding: 0;"
        if cards
        else ""
    )
    items = []
    for item in block.list("items", "faqs"):
        if not isinstance(item, typ.Mapping):
            continue
        question = first(item.get("question"), item.get("title"))
        answer = first(item.get("answer"), item.get("content"))
        items.append(
            f'<div class="faq-item" style="border-bottom: 1px solid #e2e8f0; {card_style}">'
            f'<button class="faq-toggle" aria-expanded="false" style="width: 100%; text-align: left; '
            f"padding: 16px {inset}; display: flex; align-items: center; "
            "justify-content: space-between; background: none; border: none; cursor: pointer; "
            f"font-family: {theme.body_font}; font-size: 16px; font-weight: 600; "
            f'color: {theme.text_color}; gap: 12px;"><span>{esc(question)}</span>'
            '<span class="faq-icon" style="transition: transform 0.3s; flex-shrink: 0;">'
            f'{icon_svg("chevron-down", "icon-sm")}</span></button>'
            '<div class="faq-answer" style="max-height: 0; overflow: hidden; '
            f'transition: max-height 0.3s ease; padding: 0 {inset};">'
            f'<div style="padding-bottom: 16px; color: {theme.secondary_color}; font-size: 14px; '
            f'line-height: 1.7;">{answer}</div></div></div>'
        )
    return (
        f'<section{block.anim} class="wb-faq" style="padding: 64px 24px; '
        f'font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        f'<div class="container" style="max-width: 800px;">'
        f'{heading_block(theme, block.text("title"))}{"".join(items)}</div></section>'
    )


@register("progress")
def render_progress(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    bars = []
    for item in block.list("items", "bars"):
        if not isinstance(item, typ.Mapping):
            continue
        value = esc(item.get("value") or 0)
        bars.append(
            '<div style="margin-bottom: 16px;"><div style="display: flex; '
            'justify-content: space-between; margin-bottom: 4px;">'
            f'<span style="font-size: 14px; font-weight: 500; color: {theme.text_color};">'
            f'{esc(item.get("label") or "")}</span>'
            f'<span style="font-size: 14px; color: {theme.secondary_color};">{value}%</span></div>'
            '<div style="height: 8px; border-radius: 4px; background: #e2e8f0; overflow: hidden;">'
            f'<div style="height: 100%; width: {value}%; background: {theme.primary_color}; '
            'border-radius: 4px; transition: width 1s;"></div></div></div>'
        )
    return (
        f'<section{block.anim} class="wb-progress" style="padding: 48px 24px; '
        f'font-family: {theme.body_font};{block.style}">'
        f'<div class="container" style="max-width: 600px;">{"".join(bars)}</div></section>'
    )


@register("login-form", "signup-form")
def render_auth_form(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    signup = block.kind == "signup-form"
    title = block.text("title", default="Create Account" if signup else "Sign In")
    field = f"padding: 12px; border: 1px solid #e2e8f0; border-radius: {theme.border_radius}px;"
    name_input = (
        f'<input type="text" name="name" placeholder="Full Name" style="{field}" />'
        if signup
        else ""
    )
    return (
        f'<section{block.anim} class="wb-auth-form" style="padding: 64px 24px; '
        f'font-family: {theme.body_font};{block.style}">'
        '<div style="max-width: 400px; margin: 0 auto; padding: 32px; '
        f'border: 1px solid #e2e8f0; border-radius: {theme.border_radius}px;">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 24px; font-weight: 700; '
        f'color: {theme.text_color}; text-align: center; margin-bottom: 24px;">{esc(title)}</h2>'
        '<form style="display: flex; flex-direction: column; gap: 16px;">'
        f'{name_input}<input type="email" name="email" placeholder="Email" style="{field}" />'
        f'<input type="password" name="password" placeholder="Password" style="{field}" />'
        f'<button type="submit" style="{btn_style(theme)} width: 100%; text-align: center;">'
        f'{"Sign Up" if signup else "Sign In"}</button></form>'
        f'<p style="text-align: center; margin-top: 16px; font-size: 13px; '
        f'color: {theme.secondary_color};">This form requires backend authentication.</p>'
        "</div></section>"
    )


@register("search-bar")
def render_search_bar(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} style="padding: 24px; max-width: 600px; margin: 0 auto;{block.style}">'
        f'<input type="search" placeholder="{esc(block.get("placeholder", default="Search..."))}" '
        f'aria-label="Search" style="width: 100%; padding: 12px 16px; border: 1px solid #e2e8f0; '
        f"border-radius: {theme.border_radius}px; font-family: {theme.body_font}; "
        'font-size: 16px; outline: none;" /></div>'
    )


@register("rating")
def render_rating(block: Block, ctx: RenderContext) -> str:
    stars = render_stars(
        block.get("value", "rating", default=5),
        block.text("color", default=ctx.theme.primary_color),
    )
    return (
        f'<div{block.anim} style="padding: 16px; text-align: center; display: flex; '
        f'justify-content: center; gap: 4px;{block.style}">{stars}</div>'
    )


@register("avatar")
def render_avatar(block: Block, ctx: RenderContext) -> str:
    size = esc(block.get("size", default=64))
    return (
        f'<div{block.anim} style="padding: 16px; text-align: center;{block.style}">'
        f'<img src="{esc(block.get("src", "imageUrl"))}" alt="{esc(block.get("name"))}" '
        f'style="width: {size}px; height: {size}px; border-radius: 50%; object-fit: cover;" />'
        "</div>"
    )


__all__ = [
    "FIELD_TYPES",
    "expand_field",
    "render_auth_form",
    "render_avatar",
    "render_button",
    "render_button_group",
    "render_contact_form",
    "render_faq",
    "render_field",
    "render_generic_form",
    "render_newsletter",
    "render_progress",
    "render_rating",
    "render_search_bar",
    "render_social_links",
    "render_tabs",
]
