"""Emit a buildable Vite + React + TypeScript project.

Every page and translation becomes a lazily loaded route view that embeds
the rendered markup and calls ``initInteractivity`` when it mounts. All
files live under a directory named after the sanitised site slug. Images
are extracted page by page into ``public/assets/`` through one shared
:class:`~site_compiler.assets.AssetExtractor`, so numbering and
deduplication hold across the whole project.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from urllib.parse import quote

import msgspec

from site_compiler._constants import DEFAULT_PROJECT_PREFIX
from site_compiler.assets import AssetExtractor
from site_compiler.behavior import generate_behavior_module
from site_compiler.output import ExportedFile
from site_compiler.stylesheet import (
    DARK_BACKGROUND,
    generate_css_reset,
    generate_dark_mode_css,
    generate_stylesheet,
)
from site_compiler.templating import render_template

from .document import google_fonts_url
from .emitter import BaseEmitter
from .pages import PageVariant, page_variants, render_variant

if typ.TYPE_CHECKING:
    from .models import ExportResult

logger = logging.getLogger(__name__)

ROUTE_SAFE_CHARS = "-_.~!$&'()*+,;=:@/"
GITIGNORE = "node_modules\ndist\n.vite\n*.local\n.DS_Store\n"
NPMRC = "legacy-peer-deps=true\n"
REDIRECTS_HINT = (
    "# SPA fallback for Netlify and Cloudflare Pages; uncomment to enable\n"
    "# /*    /index.html   200\n"
)

PACKAGE_SCRIPTS = {
    "dev": "vite",
    "build": "tsc && vite build",
    "preview": "vite preview",
    "lint": "tsc --noEmit",
}
DEPENDENCIES = {
    "react": "^18.3.1",
    "react-dom": "^18.3.1",
    "react-router-dom": "^6.26.2",
}
DEV_DEPENDENCIES = {
    "@types/react": "^18.3.0",
    "@types/react-dom": "^18.3.0",
    "@vitejs/plugin-react": "^4.3.0",
    "typescript": "^5.4.0",
    "vite": "^5.3.0",
}
TSCONFIG = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": False,
        "noUnusedParameters": False,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
    "references": [{"path": "./tsconfig.node.json"}],
}
TSCONFIG_NODE = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
    },
    "include": ["vite.config.ts"],
}


def sanitize_slug(slug: str) -> str:
    """Return ``slug`` reduced to a safe lowercase directory name.

    >>> sanitize_slug("My Site!")
    'my-site'
    >>> sanitize_slug("***")
    'my-website'
    """
    cleaned = re.sub(r"[^a-z0-9_-]", "-", slug.lower())
    cleaned = re.sub(r"-+", "-", cleaned).strip("-")
    return cleaned or DEFAULT_PROJECT_PREFIX


def _pascal_case(text: str) -> str:
    words = re.split(r"[-_]+", re.sub(r"[^A-Za-z0-9_-]", "-", text))
    return "".join(word[:1].upper() + word[1:].lower() for word in words if word)


def view_identifier(variant: PageVariant) -> str:
    """Return the base component name for ``variant``.

    The home page is ``HomePage``; other pages are the PascalCase slug plus
    ``Page``, prefixed with ``Page`` when the slug does not start with a
    letter. Translations append the PascalCase language code.

    >>> from site_compiler.config import Page
    >>> view_identifier(PageVariant(Page(slug="about-us", title="About"), False))
    'AboutUsPage'
    >>> view_identifier(PageVariant(Page(slug="404", title="Gone"), False, "pt-br"))
    'Page404PagePtBr'
    """
    if variant.is_home:
        base = "HomePage"
    else:
        name = _pascal_case(variant.slug)
        if not name[:1].isalpha():
            name = f"Page{name}"
        base = f"{name}Page"
    if variant.language:
        base += _pascal_case(variant.language)
    return base


@dc.dataclass(frozen=True, slots=True)
class Route:
    """A client route and the view component that serves it."""

    path: str
    identifier: str
    variant: PageVariant


def build_routes(variants: typ.Iterable[PageVariant]) -> list[Route]:
    """Assign unique identifiers and URL-safe paths to ``variants``.

    Identifier collisions are resolved with a numeric suffix, so the result
    always holds distinct, valid identifiers.
    """
    routes: list[Route] = []
    taken: set[str] = set()
    for variant in variants:
        base = view_identifier(variant)
        identifier, counter = base, 2
        while identifier in taken:
            identifier = f"{base}{counter}"
            counter += 1
        taken.add(identifier)
        path = quote(variant.route, safe=ROUTE_SAFE_CHARS)
        routes.append(Route(path, identifier, variant))
    return routes


def _json(value: object) -> str:
    return msgspec.json.format(msgspec.json.encode(value), indent=2).decode() + "\n"


class ProjectEmitter(BaseEmitter):
    """Generate the application project for a site."""

    @property
    def prefix(self) -> str:
        """Return the project directory name."""
        return sanitize_slug(self.site.slug or DEFAULT_PROJECT_PREFIX)

    def run(self) -> ExportResult:
        """Generate the project.

        Returns
        -------
        ExportResult
            Scaffold files, route views, extracted assets, platform files,
            README, and SEO files, all under :attr:`prefix`.

        Raises
        ------
        ExportError
            If the site has no pages.
        ExportCancelled
            If the cancellation token fires between pages or assets.
        """
        routes = build_routes(page_variants(self.site))
        files = self._scaffold(routes)

        extractor = AssetExtractor(
            self.profile,
            layout="project",
            prefix=self.prefix,
            reporter=self.reporter,
            cancel=self.cancel,
            max_workers=self.options.max_workers,
        )
        total = len(routes)
        for index, route in enumerate(routes, start=1):
            self.enter("generating")
            self.cancel.raise_if_cancelled("generating", route.path)
            self.reporter.emit(
                "generating", index, total, f"Generating page: {route.variant.label}..."
            )
            view = self._view(route)
            self.enter("extracting-images")
            files.extend(extractor.process([view]))

        files.extend(extractor.assets)
        self.enter("packaging")
        files.extend(self._platform_files())
        files.extend(self._seo_files(routes))
        return self.finish(files, extractor.stats)

    def _file(self, path: str, content: str) -> ExportedFile:
        return ExportedFile(f"{self.prefix}/{path}", content)

    def _scaffold(self, routes: list[Route]) -> list[ExportedFile]:
        theme = self.site.theme
        home = self.site.home_page
        description = self.site.description or (home.seo.description if home else "")
        package = {
            "name": self.prefix,
            "private": True,
            "version": "1.0.0",
            "type": "module",
            "scripts": PACKAGE_SCRIPTS,
            "dependencies": DEPENDENCIES,
            "devDependencies": DEV_DEPENDENCIES,
        }
        index_html = render_template(
            "project/index.html.jinja",
            lang=self.site.default_language or "en",
            direction=theme.direction or "ltr",
            title=self.site.name or "My Website",
            description=description,
            theme_color=theme.primary_color,
            favicon=self.site.favicon,
            fonts_url=google_fonts_url(theme),
        )
        return [
            self._file("package.json", _json(package)),
            self._file(
                "vite.config.ts", render_template("project/vite.config.ts.jinja")
            ),
            self._file("tsconfig.json", _json(TSCONFIG)),
            self._file("tsconfig.node.json", _json(TSCONFIG_NODE)),
            self._file(".npmrc", NPMRC),
            self._file(".gitignore", GITIGNORE),
            self._file("index.html", index_html),
            self._file("src/main.tsx", render_template("project/main.tsx.jinja")),
            self._file("src/reset.css", generate_css_reset()),
            self._file(
                "src/styles.css",
                generate_stylesheet(theme) + "\n" + generate_dark_mode_css(theme),
            ),
            self._file("src/scripts.ts", generate_behavior_module()),
            self._file(
                "src/components/PageLoader.tsx",
                render_template("project/PageLoader.tsx.jinja"),
            ),
            self._file(
                "src/components/ThemeToggle.tsx",
                render_template("project/ThemeToggle.tsx.jinja"),
            ),
            self._file(
                "src/hooks/useTheme.tsx",
                render_template(
                    "project/useTheme.tsx.jinja",
                    primary_color=theme.primary_color,
                    dark_background=DARK_BACKGROUND,
                ),
            ),
            self._file(
                "src/pages/NotFound.tsx", render_template("project/NotFound.tsx.jinja")
            ),
            self._file(
                "src/App.tsx", render_template("project/App.tsx.jinja", routes=routes)
            ),
        ]

    def _view(self, route: Route) -> ExportedFile:
        variant = route.variant
        markup = render_variant(
            variant,
            self.site,
            self.state,
            form_action_url=self.options.form_action_url,
        )
        seo = variant.seo
        source = render_template(
            "project/Page.tsx.jinja",
            identifier=route.identifier,
            markup=markup,
            title=seo.title or variant.page.title or self.site.name,
            description=seo.description,
        )
        return self._file(f"src/pages/{route.identifier}.tsx", source)

    def _platform_files(self) -> list[ExportedFile]:
        if not self.options.hosting_platform:
            return [self._file("public/_redirects", REDIRECTS_HINT)]
        return [
            self._file(file.path, typ.cast("str", file.content))
            for file in self.preset.config_files("project")
        ]

    def _seo_files(self, routes: list[Route]) -> list[ExportedFile]:
        site_url = (
            self.site.published_url.rstrip("/")
            if self.site.published_url
            else f"https://{self.prefix}.example.com"
        )
        preset = self.preset if self.options.hosting_platform else None
        readme = render_template(
            "project/README.md.jinja",
            name=self.site.name or "My Website",
            description=self.site.description,
            preset=preset,
            steps=preset.deploy_steps("project") if preset else (),
        )
        sitemap = render_template(
            "project/sitemap.xml.jinja",
            routes=routes,
            site_url=site_url,
            build_date=self.options.build_date,
        )
        robots = render_template("project/robots.txt.jinja", site_url=site_url)
        return [
            self._file("README.md", readme),
            self._file("public/sitemap.xml", sitemap),
            self._file("public/robots.txt", robots),
        ]


__all__ = [
    "ProjectEmitter",
    "Route",
    "build_routes",
    "sanitize_slug",
    "view_identifier",
]
