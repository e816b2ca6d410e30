"""Component dispatch: registry, visibility, and responsive class handling."""

from __future__ import annotations

import typing as typ

from site_compiler import _constants
from site_compiler.errors import RenderError

from .helpers import (
    Block,
    anim_attr,
    esc,
    inject_classes,
    inline_style,
    responsive_rules,
)

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Component

    from .context import RenderContext

Handler = typ.Callable[[Block, "RenderContext"], str]

HANDLERS: dict[str, Handler] = {}


def register(kind: str, *aliases: str) -> typ.Callable[[Handler], Handler]:
    """Register ``handler`` for ``kind`` and every alias.

    Examples
    --------
    >>> @register("spacer")  # doctest: +SKIP
    ... def render_spacer(block, ctx):
    ...     return "<div></div>"
    """

    def decorator(handler: Handler) -> Handler:
        for name in (kind, *aliases):
            HANDLERS[name] = handler
        return handler

    return decorator


def render_component(component: Component, ctx: RenderContext) -> str:
    """Render a single component, applying visibility and responsive rules.

    Parameters
    ----------
    component : Component
        Component to render.
    ctx : RenderContext
        Theme, navigation, and per-invocation state.

    Returns
    -------
    str
        Markup for the component, preceded by any responsive ``<style>``
        blocks. An empty string when the component is hidden on every
        breakpoint; an HTML comment when its kind is not recognised.

    Raises
    ------
    RenderError
        If the handler for the component's kind raises.
    """
    if component.hidden.hidden_everywhere:
        return ""

    handler = HANDLERS.get(component.kind)
    if handler is None:
        return f"<!-- Unknown component type: {esc(component.kind)} -->"

    styles = component.styles
    responsive_css = ""
    responsive_id = ""
    if styles.tablet or styles.mobile:
        responsive_id = f"wb-r{ctx.state.next_id()}"
        responsive_css = responsive_rules(
            responsive_id,
            styles.tablet,
            styles.mobile,
            tablet_max=_constants.TABLET_MAX_WIDTH,
            mobile_max=_constants.MOBILE_MAX_WIDTH,
        )

    block = Block(
        component=component,
        anim=anim_attr(component),
        style=inline_style(styles.desktop),
    )
    try:
        markup = handler(block, ctx)
    except RenderError:
        raise
    except Exception as exc:
        msg = f"Component '{component.kind}' failed to render: {exc}"
        raise RenderError(msg) from exc

    extra = component.hidden.marker_classes()
    if responsive_id:
        extra.append(responsive_id)
    return responsive_css + inject_classes(markup, extra)


def render_tree(components: typ.Iterable[Component], ctx: RenderContext) -> str:
    """Render ``components`` in order and concatenate the markup."""
    return "".join(render_component(component, ctx) for component in components)


__all__ = ["HANDLERS", "Handler", "register", "render_component", "render_tree"]
