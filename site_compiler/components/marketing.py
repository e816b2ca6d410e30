"""Business and marketing sections."""

from __future__ import annotations

import typing as typ

from .helpers import Block, bg_color, btn_style, esc, first, heading_block, render_stars
from .icons import icon_svg
from .registry import register

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Theme

    from .context import RenderContext

COUNTDOWN_UNITS = (
    ("days", "Days"),
    ("hours", "Hours"),
    ("minutes", "Minutes"),
    ("seconds", "Seconds"),
)
CHECK_VALUES = frozenset({"true", "✓"})
CROSS_VALUES = frozenset({"false", "✗"})


def _section(block: Block, theme: Theme, css_class: str, inner: str, *, padding: str = "64px 24px") -> str:
    """Wrap ``inner`` in the standard padded section used by marketing blocks."""
    class_attr = f' class="{css_class}"' if css_class else ""
    return (
        f'<section{block.anim}{class_attr} style="padding: {padding}; '
        f'font-family: {theme.body_font}; {bg_color(block.props)}{block.style}">'
        f"{inner}</section>"
    )


def _header(theme: Theme, title: str, subtitle: str) -> str:
    if not title:
        return ""
    sub = (
        f'<p style="color: {theme.secondary_color}; opacity: 0.7; margin-top: 8px; '
        f'max-width: 600px; margin-left: auto; margin-right: auto;">{esc(subtitle)}</p>'
        if subtitle
        else ""
    )
    return (
        '<div style="text-align: center; margin-bottom: 48px;">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {theme.text_color};">{esc(title)}</h2>{sub}</div>'
    )


def _initial(name: object) -> str:
    text = str(name or "?")
    return esc(text[0])


def _mappings(items: list[typ.Any]) -> list[typ.Mapping[str, typ.Any]]:
    return [item for item in items if isinstance(item, typ.Mapping)]


@register("about")
def render_about(block: Block, ctx: RenderContext) -> str:
    """Render an image and text split with optional headline stats."""
    theme = ctx.theme
    title = block.text("title")
    image = block.text("imageUrl")
    radius = theme.border_radius
    if image:
        image_html = (
            f'<div style="border-radius: {radius}px; overflow: hidden;">'
            f'<img src="{esc(image)}" alt="{esc(title)}" style="width: 100%; height: 100%; '
            'object-fit: cover; min-height: 300px;" /></div>'
        )
    else:
        image_html = (
            f'<div style="background: {theme.primary_color}12; border-radius: {radius}px; '
            'min-height: 300px; display: flex; align-items: center; justify-content: center;">'
            f'<span style="color: {theme.secondary_color}; opacity: 0.5;">Image</span></div>'
        )
    stats = _mappings(block.list("stats"))
    stats_html = ""
    if stats:
        stats_html = (
            '<div style="display: flex; gap: 32px; margin-top: 24px;">'
            + "".join(
                f'<div><div style="font-size: 24px; font-weight: 700; color: {theme.primary_color};">'
                f'{esc(first(stat.get("value"), stat.get("number")))}</div>'
                f'<div style="font-size: 13px; color: {theme.secondary_color}; opacity: 0.7;">'
                f'{esc(stat.get("label") or "")}</div></div>'
                for stat in stats
            )
            + "</div>"
        )
    text_html = (
        '<div style="display: flex; flex-direction: column; justify-content: center;">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {theme.text_color}; margin-bottom: 16px;">{esc(title)}</h2>'
        f'<div style="color: {theme.secondary_color}; line-height: 1.7; opacity: 0.8;">'
        f'{block.text("description")}</div>{stats_html}</div>'
    )
    layout = block.text("layout", "imagePosition", default="left")
    grid = text_html + image_html if layout == "right" else image_html + text_html
    return _section(
        block,
        theme,
        "wb-about",
        '<div class="container" style="display: grid; grid-template-columns: 1fr 1fr; '
        f'gap: 48px; align-items: center;">{grid}</div>',
    )


@register("features")
def render_features(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    cards_variant = block.text("variant", default="cards") == "cards"
    card_border = (
        f"border: 1px solid #e2e8f0; background: {theme.background_color};"
        if cards_variant
        else ""
    )
    cards = []
    for feature in _mappings(block.list("features")):
        icon = ""
        if feature.get("icon"):
            icon = (
                '<div style="width: 48px; height: 48px; border-radius: 12px; '
                f"background: {theme.primary_color}12; display: flex; align-items: center; "
                f'justify-content: center; color: {theme.primary_color}; margin-bottom: 16px;">'
                f"{icon_svg(feature['icon'], 'icon-md')}</div>"
            )
        cards.append(
            f'<div class="wb-card" style="padding: 24px; border-radius: {theme.border_radius}px; '
            f'{card_border}">{icon}'
            f'<h3 style="font-family: {theme.heading_font}; font-size: 18px; font-weight: 600; '
            f'color: {theme.text_color}; margin-bottom: 8px;">{esc(feature.get("title"))}</h3>'
            f'<p style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; '
            f'line-height: 1.6;">{esc(feature.get("description"))}</p></div>'
        )
    columns = block.get("columns", default=3)
    return _section(
        block,
        theme,
        "wb-features",
        f'<div class="container">{_header(theme, block.text("title"), block.text("subtitle"))}'
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); '
        f'gap: 24px;">{"".join(cards)}</div></div>',
    )


@register("service-card")
def render_service_card(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    cards = []
    for service in _mappings(block.list("services")):
        icon = (
            f'<div style="color: {theme.primary_color}; margin-bottom: 16px;">'
            f"{icon_svg(service['icon'], 'icon-lg')}</div>"
            if service.get("icon")
            else ""
        )
        price = (
            f'<p style="font-weight: 600; color: {theme.primary_color}; margin-top: 12px;">'
            f"{esc(service['price'])}</p>"
            if service.get("price")
            else ""
        )
        cards.append(
            f'<div class="wb-card" style="padding: 32px; border-radius: {theme.border_radius}px; '
            'border: 1px solid #e2e8f0; text-align: center; '
            f'transition: transform 0.2s, box-shadow 0.2s;">{icon}'
            f'<h3 style="font-family: {theme.heading_font}; font-size: 18px; font-weight: 600; '
            f'color: {theme.text_color}; margin-bottom: 8px;">{esc(service.get("title"))}</h3>'
            f'<p style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; '
            f'line-height: 1.6;">{esc(service.get("description"))}</p>{price}</div>'
        )
    columns = block.get("columns", default=3)
    return _section(
        block,
        theme,
        "wb-services",
        f'<div class="container">{_header(theme, block.text("title"), block.text("subtitle"))}'
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); '
        f'gap: 24px;">{"".join(cards)}</div></div>',
    )


def _plan_feature(feature: object, theme: Theme) -> str:
    if isinstance(feature, typ.Mapping):
        text = first(feature.get("text"), feature.get("name"))
        included = feature.get("included") is not False
    else:
        text, included = feature, True
    color = theme.text_color if included else theme.secondary_color
    return (
        '<li style="padding: 8px 0; display: flex; align-items: center; gap: 8px; '
        f'color: {color}; opacity: {1 if included else 0.4};">'
        f"{icon_svg('check' if included else 'x', 'icon-sm')} {esc(text)}</li>"
    )


@register("pricing")
def render_pricing(block: Block, ctx: RenderContext) -> str:
    """Render pricing plans; ``popular`` plans are highlighted and scaled."""
    theme = ctx.theme
    cards = []
    for plan in _mappings(block.list("plans")):
        popular = bool(plan.get("popular") or plan.get("highlighted"))
        border = (
            f"border: 2px solid {theme.primary_color};"
            if popular
            else "border: 1px solid #e2e8f0;"
        )
        lift = (
            "transform: scale(1.05); box-shadow: 0 20px 40px -12px rgba(0,0,0,0.15);"
            if popular
            else ""
        )
        badge = (
            '<div style="position: absolute; top: -12px; left: 50%; transform: translateX(-50%); '
            f"padding: 4px 16px; border-radius: 999px; background: {theme.primary_color}; "
            'color: #ffffff; font-size: 12px; font-weight: 600;">Popular</div>'
            if popular
            else ""
        )
        description = (
            f'<p style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; '
            f'margin-top: 4px;">{esc(plan["description"])}</p>'
            if plan.get("description")
            else ""
        )
        period = (
            f'<span style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.6;">'
            f"/{esc(plan['period'])}</span>"
            if plan.get("period")
            else ""
        )
        features = "".join(
            _plan_feature(feature, theme)
            for feature in (plan.get("features") if isinstance(plan.get("features"), list) else [])
        )
        cta_text = first(plan.get("ctaText"), plan.get("buttonText"), default="Get Started")
        cards.append(
            f'<div class="wb-card" style="padding: 32px; border-radius: {theme.border_radius}px; '
            f'{border} background: {theme.background_color}; position: relative; {lift}">'
            f"{badge}"
            f'<h3 style="font-family: {theme.heading_font}; font-size: 20px; font-weight: 600; '
            f'color: {theme.text_color};">{esc(first(plan.get("name"), plan.get("title")))}</h3>'
            f"{description}"
            '<div style="margin: 24px 0;">'
            f'<span style="font-size: 42px; font-weight: 800; color: {theme.text_color};">'
            f'{esc(plan.get("price") or "$0")}</span>{period}</div>'
            '<ul style="list-style: none; padding: 0; margin: 0 0 24px 0; font-size: 14px;">'
            f"{features}</ul>"
            f'<a href="{esc(plan.get("ctaLink") or "#")}" '
            f'style="{btn_style(theme, "primary" if popular else "outline")} width: 100%; '
            f'text-align: center; box-sizing: border-box;">{esc(cta_text)}</a></div>'
        )
    return _section(
        block,
        theme,
        "wb-pricing",
        f'<div class="container">{_header(theme, block.text("title"), block.text("subtitle"))}'
        '<div style="display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); '
        f'gap: 24px; align-items: start;">{"".join(cards)}</div></div>',
    )


@register("testimonials", "reviews")
def render_testimonials(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    cards = []
    for item in _mappings(block.list("testimonials", "reviews")):
        avatar = first(item.get("avatar"), item.get("image"))
        name = item.get("name") or ""
        if avatar:
            avatar_html = (
                f'<img src="{esc(avatar)}" alt="{esc(name)}" style="width: 40px; height: 40px; '
                'border-radius: 50%; object-fit: cover;" />'
            )
        else:
            avatar_html = (
                '<div style="width: 40px; height: 40px; border-radius: 50%; '
                f"background: {theme.primary_color}15; display: flex; align-items: center; "
                f'justify-content: center; font-weight: 600; color: {theme.primary_color};">'
                f"{_initial(name)}</div>"
            )
        role = first(item.get("role"), item.get("title"))
        company = item.get("company")
        meta = ""
        if role or company:
            suffix = f" · {esc(company)}" if company else ""
            meta = (
                f'<div style="font-size: 12px; color: {theme.secondary_color}; opacity: 0.7;">'
                f"{esc(role)}{suffix}</div>"
            )
        quote = first(item.get("text"), item.get("content"), item.get("quote"))
        cards.append(
            f'<div class="wb-card" style="padding: 24px; border-radius: {theme.border_radius}px; '
            f'border: 1px solid #e2e8f0; background: {theme.background_color};">'
            '<div style="display: flex; gap: 4px; margin-bottom: 12px;">'
            f'{render_stars(item.get("rating") or 5, theme.primary_color)}</div>'
            f'<p style="font-size: 14px; color: {theme.text_color}; line-height: 1.7; '
            f'margin-bottom: 16px; font-style: italic;">&quot;{esc(quote)}&quot;</p>'
            f'<div style="display: flex; align-items: center; gap: 12px;">{avatar_html}<div>'
            f'<div style="font-weight: 600; font-size: 14px; color: {theme.text_color};">'
            f"{esc(name)}</div>{meta}</div></div></div>"
        )
    try:
        columns = min(int(block.get("columns", default=3)), 3)
    except (TypeError, ValueError):
        columns = 3
    return _section(
        block,
        theme,
        "wb-testimonials",
        f'<div class="container">{heading_block(theme, block.text("title"))}'
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); '
        f'gap: 24px;">{"".join(cards)}</div></div>',
    )


@register("stats", "animated-stats")
def render_stats(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    stats = _mappings(block.list("stats"))
    cells = []
    for stat in stats:
        icon = (
            f'<div style="color: {theme.primary_color}; margin-bottom: 8px;">'
            f"{icon_svg(stat['icon'], 'icon-md')}</div>"
            if stat.get("icon")
            else ""
        )
        cells.append(
            f'<div style="text-align: center; padding: 24px;">{icon}'
            f'<div style="font-size: 36px; font-weight: 800; color: {theme.primary_color};">'
            f'{esc(first(stat.get("value"), stat.get("number"), default="0"))}</div>'
            f'<div style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; '
            f'margin-top: 4px;">{esc(stat.get("label"))}</div></div>'
        )
    columns = max(1, min(len(stats), 4))
    return _section(
        block,
        theme,
        "wb-stats",
        f'<div class="container">{heading_block(theme, block.text("title"))}'
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); '
        f'gap: 24px;">{"".join(cells)}</div></div>',
    )


@register("cta-banner")
def render_cta_banner(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    bg = block.text("bgColor", default=theme.primary_color)
    fg = block.text("textColor", default="#ffffff")
    subtitle = block.text("subheading", "subtitle", "description")
    cta_text = block.text("ctaText", "buttonText")
    sub_html = (
        f'<p style="color: {fg}; opacity: 0.9; margin-bottom: 24px; font-size: 16px;">'
        f"{esc(subtitle)}</p>"
        if subtitle
        else ""
    )
    cta_html = (
        f'<a href="{esc(block.get("ctaLink", "buttonLink", default="#"))}" '
        f'style="display: inline-block; padding: 14px 32px; background: #ffffff; color: {bg}; '
        f"border-radius: {theme.border_radius}px; font-weight: 600; text-decoration: none; "
        f'transition: transform 0.2s;">{esc(cta_text)}</a>'
        if cta_text
        else ""
    )
    return (
        f'<section{block.anim} class="wb-cta wb-cta-banner" style="padding: 64px 24px; '
        f"background: linear-gradient(135deg, {bg}, {bg}dd); text-align: center; "
        f'font-family: {theme.body_font};{block.style}"><div class="container">'
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {fg}; margin-bottom: 12px;">{esc(block.get("heading", "title"))}</h2>'
        f"{sub_html}{cta_html}</div></section>"
    )


@register("logo-cloud")
def render_logo_cloud(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    logos = block.list("logos")
    if logos:
        cells = "".join(
            f'<img src="{esc(logo.get("url") or logo.get("src") if isinstance(logo, typ.Mapping) else logo)}" '
            'alt="" style="height: 32px; object-fit: contain; opacity: 0.5; filter: grayscale(1); '
            'transition: opacity 0.2s, filter 0.2s;" />'
            for logo in logos
        )
    else:
        cells = "".join(
            '<div style="height: 40px; width: 96px; border-radius: 4px; background: #f1f5f9; '
            'display: flex; align-items: center; justify-content: center;">'
            f'<span style="font-size: 10px; color: #94a3b8;">Logo {index}</span></div>'
            for index in range(1, 6)
        )
    title = block.text("title")
    title_html = (
        '<p style="font-size: 11px; font-weight: 600; text-transform: uppercase; '
        f"letter-spacing: 0.1em; text-align: center; color: {theme.secondary_color}; "
        f'opacity: 0.5; margin-bottom: 32px;">{esc(title)}</p>'
        if title
        else ""
    )
    return _section(
        block,
        theme,
        "wb-logo-cloud",
        f'<div class="container">{title_html}<div style="display: flex; flex-wrap: wrap; '
        f'align-items: center; justify-content: center; gap: 32px;">{cells}</div></div>',
        padding="48px 24px",
    )


@register("team-grid")
def render_team_grid(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    title = block.text("title")
    subtitle = block.text("subtitle")
    members = []
    for member in _mappings(block.list("members")):
        name = member.get("name") or ""
        if member.get("avatar"):
            portrait = (
                f'<img src="{esc(member["avatar"])}" alt="{esc(name)}" '
                'style="width: 100%; height: 100%; object-fit: cover;" />'
            )
        else:
            portrait = (
                '<span style="font-weight: 700; font-size: 24px; '
                f'color: {theme.primary_color};">{_initial(name)}</span>'
            )
        bio = (
            f'<p style="font-size: 12px; color: {theme.secondary_color}; opacity: 0.5; '
            f'margin-top: 8px; line-height: 1.5;">{esc(member["bio"])}</p>'
            if member.get("bio")
            else ""
        )
        members.append(
            '<div style="text-align: center;"><div style="width: 96px; height: 96px; '
            "border-radius: 50%; margin: 0 auto 16px; overflow: hidden; "
            f"background: {theme.primary_color}15; display: flex; align-items: center; "
            f'justify-content: center;">{portrait}</div>'
            f'<h3 style="font-size: 14px; font-weight: 600; color: {theme.text_color}; '
            f'font-family: {theme.heading_font};">{esc(name)}</h3>'
            f'<p style="font-size: 12px; color: {theme.secondary_color}; opacity: 0.6; '
            f'margin-top: 2px;">{esc(member.get("role"))}</p>{bio}</div>'
        )
    header = heading_block(theme, title, margin="8px" if subtitle else "48px")
    if title and subtitle:
        header += (
            f'<p style="color: {theme.secondary_color}; opacity: 0.7; text-align: center; '
            "margin-bottom: 48px; max-width: 600px; margin-left: auto; margin-right: auto;\">"
            f"{esc(subtitle)}</p>"
        )
    columns = block.get("columns", default=4)
    return _section(
        block,
        theme,
        "wb-team",
        f'<div class="container">{header}<div style="display: grid; '
        f'grid-template-columns: repeat({columns}, 1fr); gap: 32px;">{"".join(members)}</div></div>',
    )


@register("trust-badges")
def render_trust_badges(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    badges = []
    for badge in _mappings(block.list("badges", "items")):
        label = first(badge.get("label"), badge.get("title"))
        icon = (
            f'<div style="color: {theme.primary_color};">{icon_svg(badge["icon"], "icon-lg")}</div>'
            if badge.get("icon")
            else ""
        )
        image = (
            f'<img src="{esc(badge["image"])}" alt="{esc(label)}" '
            'style="height: 40px; object-fit: contain;" />'
            if badge.get("image")
            else ""
        )
        badges.append(
            '<div style="text-align: center; display: flex; flex-direction: column; '
            f'align-items: center; gap: 8px;">{icon}{image}'
            f'<span style="font-size: 13px; font-weight: 500; color: {theme.text_color};">'
            f"{esc(label)}</span></div>"
        )
    return _section(
        block,
        theme,
        "wb-trust-badges",
        '<div class="container" style="display: flex; flex-wrap: wrap; '
        f'justify-content: center; gap: 32px;">{"".join(badges)}</div>',
        padding="48px 24px",
    )


@register("countdown")
def render_countdown(block: Block, ctx: RenderContext) -> str:
    """Render a countdown ticking towards ``targetDate``.

    The element id comes from the per-export counter and the target is taken
    verbatim; without a target date the attribute is left empty and the
    behavior script shows zeros.
    """
    theme = ctx.theme
    element_id = f"cd-{ctx.state.next_id()}"
    target = block.text("targetDate")
    title = block.text("title")
    title_html = (
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; font-weight: 700; '
        f'color: {theme.text_color}; margin-bottom: 32px;">{esc(title)}</h2>'
        if title
        else ""
    )
    boxes = "".join(
        '<div class="cd-box" style="text-align: center; min-width: 80px;">'
        f'<div class="cd-value" data-unit="{unit}" style="width: 80px; height: 80px; '
        f"border-radius: {theme.border_radius}px; background: {theme.primary_color}12; "
        f"color: {theme.primary_color}; display: flex; align-items: center; "
        'justify-content: center; font-size: 32px; font-weight: 700;">0</div>'
        f'<p style="font-size: 12px; color: {theme.secondary_color}; opacity: 0.6; '
        f'margin-top: 8px;">{label}</p></div>'
        for unit, label in COUNTDOWN_UNITS
    )
    return (
        f'<section{block.anim} class="wb-countdown" style="padding: 64px 24px; '
        f'text-align: center; font-family: {theme.body_font};{block.style}">'
        f'<div class="container" style="max-width: 800px;">{title_html}'
        f'<div id="{element_id}" style="display: flex; justify-content: center; gap: 16px;" '
        f'data-target="{esc(target)}">{boxes}</div></div></section>'
    )


@register("floating-header")
def render_floating_header(block: Block, ctx: RenderContext) -> str:
    """Render stat cards overlapping the previous section (cards, glass, or pills)."""
    theme = ctx.theme
    items = _mappings(block.list("items"))
    variant = block.text("variant", default="cards")
    offset = block.props.get("offsetY")
    offset = -60 if offset is None else offset
    cells = []
    for item in items:
        value = f'{esc(item.get("value") or "0")}{esc(item.get("suffix") or "")}'
        label = esc(item.get("label") or "")
        if variant == "pills":
            icon = (
                '<div style="width: 32px; height: 32px; border-radius: 50%; display: flex; '
                f"align-items: center; justify-content: center; background-color: {theme.primary_color}14; "
                f'color: {theme.primary_color};">{icon_svg(item["icon"], "icon-sm")}</div>'
                if item.get("icon")
                else ""
            )
            cells.append(
                '<div style="display: flex; align-items: center; gap: 12px; padding: 12px 24px; '
                "border-radius: 999px; background: rgba(255,255,255,0.85); "
                "box-shadow: 0 4px 12px rgba(0,0,0,0.1); backdrop-filter: blur(8px); "
                f'border: 1px solid rgba(255,255,255,0.3);">{icon}'
                f'<span style="font-size: 18px; font-weight: 700; color: {theme.primary_color}; '
                f'font-family: {theme.heading_font};">{value}</span>'
                '<span style="font-size: 12px; font-weight: 500; opacity: 0.6; '
                f'color: {theme.text_color};">{label}</span></div>'
            )
            continue
        icon = (
            f'<div style="width: 44px; height: 44px; border-radius: {theme.border_radius}px; '
            "margin: 0 auto 12px; display: flex; align-items: center; justify-content: center; "
            f'background-color: {theme.primary_color}14; color: {theme.primary_color};">'
            f'{icon_svg(item["icon"], "icon-md")}</div>'
            if item.get("icon")
            else ""
        )
        if variant == "glass":
            card_bg = (
                "background: linear-gradient(135deg, rgba(255,255,255,0.9), "
                "rgba(255,255,255,0.7)); backdrop-filter: blur(12px); "
                "border: 1px solid rgba(255,255,255,0.2);"
            )
            value_color = theme.primary_color
        else:
            card_bg = "background: #ffffff; border: 1px solid rgba(0,0,0,0.06);"
            value_color = theme.text_color
        cells.append(
            f'<div style="padding: 24px; border-radius: {theme.border_radius + 2}px; {card_bg} '
            "box-shadow: 0 8px 24px rgba(0,0,0,0.08); text-align: center; "
            f'transition: transform 0.3s, box-shadow 0.3s;">{icon}'
            '<div style="font-size: 28px; font-weight: 800; line-height: 1; margin-bottom: 4px; '
            f'color: {value_color}; font-family: {theme.heading_font};">{value}</div>'
            '<div style="font-size: 11px; font-weight: 500; text-transform: uppercase; '
            f"letter-spacing: 0.1em; opacity: 0.6; color: {theme.text_color}; "
            f'font-family: {theme.body_font};">{label}</div></div>'
        )
    if variant == "pills":
        grid = "display: flex; flex-wrap: wrap; justify-content: center; gap: 12px;"
    else:
        try:
            columns = min(int(block.get("columns", default=4)), len(items) or 4)
        except (TypeError, ValueError):
            columns = min(4, len(items) or 4)
        grid = f"display: grid; grid-template-columns: repeat({columns}, 1fr); gap: 20px;"
    return (
        f'<section{block.anim} class="wb-floating-header" style="position: relative; '
        f'z-index: 10; margin-top: {offset}px; margin-bottom: 16px; padding: 0 24px;{block.style}">'
        f'<div class="container" style="{grid}">{"".join(cells)}</div></section>'
    )


def _comparison_cell(cell: object) -> str:
    text = str(cell).lower() if isinstance(cell, bool) else str(cell)
    if text in CHECK_VALUES:
        return icon_svg("check", "icon-sm")
    if text in CROSS_VALUES:
        return icon_svg("x", "icon-sm")
    return esc(text)


@register("comparison-table")
def render_comparison_table(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    headers = block.list("headers") or ["Feature", "Basic", "Pro"]
    head = "".join(
        '<th style="padding: 12px 16px; text-align: left; border-bottom: 2px solid #e2e8f0; '
        f'font-size: 14px; font-weight: 600; color: {theme.text_color};">{esc(header)}</th>'
        for header in headers
    )
    body = "".join(
        "<tr>"
        + "".join(
            '<td style="padding: 12px 16px; border-bottom: 1px solid #f1f5f9; '
            f'font-size: 14px; color: {theme.secondary_color};">{_comparison_cell(cell)}</td>'
            for cell in (row if isinstance(row, list | tuple) else [])
        )
        + "</tr>"
        for row in block.list("rows")
    )
    title = block.text("title")
    title_html = heading_block(theme, title, margin="32px")
    return _section(
        block,
        theme,
        "wb-comparison",
        f'<div class="container" style="max-width: 900px;">{title_html}'
        '<table style="width: 100%; border-collapse: collapse;">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody></table></div>",
    )


@register("timeline")
def render_timeline(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    entries = "".join(
        '<div class="timeline-item" style="position: relative; padding-left: 48px; padding-bottom: 32px;">'
        '<div style="position: absolute; left: 10px; top: 4px; width: 12px; height: 12px; '
        f"border-radius: 50%; border: 2px solid {theme.primary_color}; "
        f'background: {theme.background_color};"></div>'
        '<span style="font-size: 12px; font-weight: 500; text-transform: uppercase; '
        f'letter-spacing: 0.05em; color: {theme.primary_color};">{esc(item.get("date") or "")}</span>'
        f'<h3 style="font-size: 18px; font-weight: 600; color: {theme.text_color}; '
        f'margin-top: 4px;">{esc(item.get("title") or "")}</h3>'
        f'<div style="font-size: 14px; color: {theme.secondary_color}; opacity: 0.7; '
        f'margin-top: 4px; line-height: 1.6;">{item.get("description") or ""}</div></div>'
        for item in _mappings(block.list("items"))
    )
    return _section(
        block,
        theme,
        "wb-timeline",
        f'<div class="container" style="max-width: 800px;">'
        f'{heading_block(theme, block.text("title"))}'
        '<div style="position: relative; padding-left: 0;">'
        '<div style="position: absolute; left: 16px; top: 0; bottom: 0; width: 2px; '
        f'background: {theme.primary_color}30;"></div>{entries}</div></div>',
    )


@register("banner", "announcement-bar")
def render_banner(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    return (
        f'<div{block.anim} class="wb-banner" style="background-color: '
        f'{block.get("bgColor", default=theme.primary_color)}; '
        f'color: {block.get("textColor", default="#ffffff")}; text-align: center; '
        f"padding: 12px 24px; font-family: {theme.body_font}; font-size: 14px;"
        f'{block.style}">{esc(block.get("text", "message"))}</div>'
    )


@register("marquee")
def render_marquee(block: Block, ctx: RenderContext) -> str:
    theme = ctx.theme
    text = esc(block.get("text"))
    repeated = "&nbsp;&nbsp;&nbsp;".join([text] * 3)
    return (
        f'<div{block.anim} class="wb-marquee" style="overflow: hidden; white-space: nowrap; '
        f"padding: 16px 0; font-family: {theme.body_font}; color: {theme.text_color};"
        f'{block.style}"><div class="marquee-inner">{repeated}</div></div>'
    )


@register("popup", "loading-screen")
def render_nothing(block: Block, ctx: RenderContext) -> str:
    """Client-only overlays have no static rendition."""
    return ""


__all__ = [
    "render_about",
    "render_banner",
    "render_comparison_table",
    "render_countdown",
    "render_cta_banner",
    "render_features",
    "render_floating_header",
    "render_logo_cloud",
    "render_marquee",
    "render_nothing",
    "render_pricing",
    "render_service_card",
    "render_stats",
    "render_team_grid",
    "render_testimonials",
    "render_timeline",
    "render_trust_badges",
]
