"""Client-side behaviour scripts for exported sites.

One script body (``behavior_body.js.jinja``) drives every interactive
component. Two adapters wrap it:

* ``behavior.js.jinja`` runs it once as an immediately invoked function for
  the static target.
* ``behavior_module.ts.jinja`` exports ``initInteractivity`` for the project
  target. Each call first clears the intervals and window listeners created
  by the previous call, so navigating between routes never stacks timers.

The body calls two adapter hooks, ``every(fn, ms)`` and
``listen(target, type, handler)``, instead of ``setInterval`` and
``window.addEventListener``.
"""

from __future__ import annotations

from .templating import render_template


def generate_behavior_script() -> str:
    """Return the standalone script linked from every static page."""
    return render_template("behavior.js.jinja")


def generate_behavior_module() -> str:
    """Return the TypeScript module exporting ``initInteractivity``."""
    return render_template("behavior_module.ts.jinja")


__all__ = ["generate_behavior_module", "generate_behavior_script"]
