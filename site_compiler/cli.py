"""Cyclopts CLI entrypoint for exporting and previewing builder sites.

The ``site-compiler`` console script loads a site description (YAML or
JSON), runs the static or project export, and writes the resulting file set
to a directory or a ``.zip`` archive. Every option also reads a
``SITE_COMPILER_*`` environment variable, so CI jobs can configure exports
without long command lines.

Examples
--------
Export a static bundle into ``dist``:

>>> from site_compiler.cli import main
>>> main()  # doctest: +SKIP

Export a Netlify-ready project archive:

>>> from site_compiler.cli import app
>>> app(
...     ["export", "site.yaml", "--target", "project", "--platform", "netlify",
...      "--output", "site.zip"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import load_site
from .errors import SiteCompilerError
from .generator import (
    ExportOptions,
    generate,
    render_preview,
    write_directory,
    write_zip,
)
from .presets import PRESETS
from .progress import ProgressEvent, format_bytes

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("dist")

app = App(  # type: ignore[unknown-argument]
    name="site-compiler",
    help="Compile builder site descriptions into static sites or projects.",
    config=cyclopts.config.Env("SITE_COMPILER_", command=False),
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _log_progress(event: ProgressEvent) -> None:
    logger.info("[%s] %s", event.phase, event.message)


def _image_override(
    *,
    optimize: bool,
    quality: float | None,
    max_width: int | None,
    webp: bool | None,
) -> dict[str, typ.Any]:
    override: dict[str, typ.Any] = {
        "quality": quality,
        "max_width": max_width,
        "convert_to_webp": webp,
    }
    if not optimize:
        override["enabled"] = False
    return override


@app.command(help="Export a site as a static bundle or a Vite + React project.")
def export(
    site: typ.Annotated[Path, Parameter(help="Path to the site description")],
    *,
    target: typ.Annotated[
        typ.Literal["static", "project"], Parameter(help="Export target")
    ] = "static",
    platform: typ.Annotated[
        str | None, Parameter(help="Hosting preset, for example 'netlify'")
    ] = None,
    quality: typ.Annotated[
        float | None, Parameter(help="Image encoder quality between 0 and 1")
    ] = None,
    max_width: typ.Annotated[
        int | None, Parameter(help="Maximum image width in pixels")
    ] = None,
    webp: typ.Annotated[
        bool | None, Parameter(help="Convert raster images to WebP")
    ] = None,
    optimize: typ.Annotated[
        bool, Parameter(help="Transcode extracted images")
    ] = True,
    form_action: typ.Annotated[
        str | None, Parameter(help="Endpoint for contact forms without a webhook")
    ] = None,
    build_date: typ.Annotated[
        str | None, Parameter(help="ISO date written as the sitemap lastmod")
    ] = None,
    output: typ.Annotated[
        Path, Parameter(help="Output directory, or a path ending in .zip")
    ] = DEFAULT_OUTPUT,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Export ``site`` and write the file set to ``output``.

    Parameters
    ----------
    site : Path
        YAML or JSON site description.
    target : {"static", "project"}, optional
        Export target; defaults to ``static``.
    platform : str or None, optional
        Hosting preset identifier; platform config files are only written
        when one is given.
    quality, max_width, webp : optional
        Field overrides merged over the preset's image profile.
    optimize : bool, optional
        ``--no-optimize`` keeps every extracted image byte-for-byte.
    form_action : str or None, optional
        Form endpoint used by contact forms without their own webhook.
    build_date : str or None, optional
        Sitemap ``lastmod`` for the project target.
    output : Path, optional
        Destination directory; a ``.zip`` suffix writes an archive instead.
    verbose : bool, optional
        Log progress events and debug output.

    Raises
    ------
    SystemExit
        With the error message when loading or exporting fails.
    """
    _configure_logging(verbose=verbose)
    options = ExportOptions(
        image_optimization=_image_override(
            optimize=optimize, quality=quality, max_width=max_width, webp=webp
        ),
        hosting_platform=platform,
        form_action_url=form_action,
        build_date=build_date,
    )
    try:
        result = generate(
            load_site(site), options, on_progress=_log_progress, target=target
        )
        if output.suffix == ".zip":
            write_zip(result.files, output)
            print(f"wrote {_format_path(output)}")
        else:
            write_directory(result.files, output)
            for path in result.paths:
                print(f"wrote {_format_path(output / path)}")
    except (SiteCompilerError, OSError, YAMLError) as exc:
        raise SystemExit(str(exc)) from exc

    stats = result.stats
    print(
        f"{stats.page_count} pages, {stats.translation_count} translations, "
        f"{stats.image_count} images "
        f"({format_bytes(stats.original_image_size)} -> "
        f"{format_bytes(stats.optimized_image_size)})"
    )


@app.command(help="Write a single-document preview of the home page.")
def preview(
    site: typ.Annotated[Path, Parameter(help="Path to the site description")],
    *,
    output: typ.Annotated[
        Path, Parameter(help="Directory for the preview files")
    ] = Path("preview"),
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render the home page of ``site`` into ``output`` for a quick look."""
    _configure_logging(verbose=verbose)
    try:
        document = render_preview(load_site(site))
        index = document.materialize(output)
    except (SiteCompilerError, OSError, YAMLError) as exc:
        raise SystemExit(str(exc)) from exc
    print(f"wrote {_format_path(index)}")


@app.command(help="List the available hosting presets.")
def presets() -> None:
    """Print each hosting preset with its identifier and description."""
    for preset in PRESETS.values():
        print(f"{preset.id}: {preset.name} - {preset.description}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``site-compiler`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
