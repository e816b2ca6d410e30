"""Hosting platform presets.

A preset bundles the defaults for one hosting platform:

* the default image optimization profile,
* the extra config files each export target needs (redirect rules, header
  files, build-tool config),
* ordered deploy instructions and a documentation link.

Lookups are pure: unknown platform identifiers resolve to the generic
preset. JSON config is encoded with msgspec, TOML with tomlkit, and YAML
with ruamel.yaml.

Examples
--------
>>> get_hosting_preset("netlify").name
'Netlify'
>>> get_hosting_preset("no-such-host").id
'generic'
"""

from __future__ import annotations

import dataclasses as dc
import io
import typing as typ
from types import MappingProxyType

import msgspec
import tomlkit
from ruamel.yaml import YAML

from .config import OptimizationProfile
from .errors import SiteConfigError
from .output import ExportedFile

Target = typ.Literal["static", "project"]

IMMUTABLE_ASSET_CACHE = "public, max-age=31536000, immutable"
SPA_REDIRECT = "/*    /index.html   200\n"


@dc.dataclass(frozen=True, slots=True)
class ConfigFile:
    """A platform config file; ``content`` may be empty for marker files."""

    path: str
    content: str = ""

    @property
    def emitted(self) -> bool:
        """Return ``True`` when the file belongs in the export."""
        return bool(self.content) or self.path.rsplit("/", 1)[-1] == ".nojekyll"


@dc.dataclass(frozen=True, slots=True)
class HostingPreset:
    """Defaults and extra files for one hosting platform."""

    id: str
    name: str
    description: str
    optimization: OptimizationProfile
    static_files: tuple[ConfigFile, ...] = ()
    project_files: tuple[ConfigFile, ...] = ()
    static_steps: tuple[str, ...] = ()
    project_steps: tuple[str, ...] = ()
    docs_url: str = ""

    def config_files(self, target: Target = "static") -> tuple[ExportedFile, ...]:
        """Return the config files to add to an export of ``target``.

        Paths for the ``project`` target are relative to the project root.
        Empty placeholders are skipped, except ``.nojekyll`` markers.
        """
        files = self.project_files if target == "project" else self.static_files
        return tuple(
            ExportedFile(file.path, file.content) for file in files if file.emitted
        )

    def deploy_steps(self, target: Target = "static") -> tuple[str, ...]:
        """Return the ordered deploy instructions for ``target``."""
        return self.project_steps if target == "project" else self.static_steps


def _json(value: object) -> str:
    return msgspec.json.format(msgspec.json.encode(value), indent=2).decode() + "\n"


def _yaml(value: object) -> str:
    yaml = YAML()
    yaml.default_flow_style = False
    stream = io.StringIO()
    yaml.dump(value, stream)
    return stream.getvalue()


def _netlify_toml(*, project: bool) -> str:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Netlify configuration"))
    build = tomlkit.table()
    if project:
        build.add("command", "npm run build")
        build.add("publish", "dist")
    else:
        build.add("publish", ".")
    doc.add("build", build)

    headers = tomlkit.aot()
    asset_rule = tomlkit.table()
    asset_rule.add("for", "/assets/*")
    asset_values = tomlkit.table()
    asset_values.add("Cache-Control", IMMUTABLE_ASSET_CACHE)
    asset_rule.add("values", asset_values)
    headers.append(asset_rule)
    doc.add("headers", headers)

    if project:
        redirects = tomlkit.aot()
        spa = tomlkit.table()
        spa.add("from", "/*")
        spa.add("to", "/index.html")
        spa.add("status", 200)
        redirects.append(spa)
        doc.add("redirects", redirects)
    return tomlkit.dumps(doc)


def _vercel_json(*, project: bool) -> str:
    config: dict[str, typ.Any] = {
        "headers": [
            {
                "source": "/assets/(.*)",
                "headers": [{"key": "Cache-Control", "value": IMMUTABLE_ASSET_CACHE}],
            }
        ],
    }
    if project:
        config = {
            "buildCommand": "npm run build",
            "outputDirectory": "dist",
            "framework": "vite",
            "rewrites": [{"source": "/(.*)", "destination": "/index.html"}],
            **config,
        }
    else:
        config = {"cleanUrls": True, "trailingSlash": False, **config}
    return _json(config)


def _cloudflare_headers() -> str:
    return (
        "/assets/*\n"
        f"  Cache-Control: {IMMUTABLE_ASSET_CACHE}\n"
        "/*\n"
        "  X-Content-Type-Options: nosniff\n"
        "  Referrer-Policy: strict-origin-when-cross-origin\n"
    )


def _github_pages_workflow() -> str:
    return _yaml(
        {
            "name": "Deploy to GitHub Pages",
            "on": {"push": {"branches": ["main"]}, "workflow_dispatch": None},
            "permissions": {"contents": "read", "pages": "write", "id-token": "write"},
            "jobs": {
                "deploy": {
                    "runs-on": "ubuntu-latest",
                    "environment": {"name": "github-pages"},
                    "steps": [
                        {"uses": "actions/checkout@v4"},
                        {"uses": "actions/setup-node@v4", "with": {"node-version": 20}},
                        {"run": "npm install"},
                        {"run": "npm run build"},
                        {"run": "cp dist/index.html dist/404.html"},
                        {
                            "uses": "actions/upload-pages-artifact@v3",
                            "with": {"path": "dist"},
                        },
                        {"uses": "actions/deploy-pages@v4"},
                    ],
                }
            },
        }
    )


def _build_presets() -> dict[str, HostingPreset]:
    presets = [
        HostingPreset(
            id="generic",
            name="Any static host",
            description="Plain files that any web server or static host can serve.",
            optimization=OptimizationProfile(),
            static_steps=(
                "Unzip the export.",
                "Upload every file to your web server's document root.",
                "Open the site URL to confirm index.html is served.",
            ),
            project_steps=(
                "Run npm install.",
                "Run npm run build.",
                "Upload the contents of dist/ to your host.",
                "Configure the host to serve index.html for unknown routes.",
            ),
        ),
        HostingPreset(
            id="github-pages",
            name="GitHub Pages",
            description="Free hosting straight from a GitHub repository.",
            optimization=OptimizationProfile(quality=0.8, max_width=1600),
            static_files=(ConfigFile(".nojekyll"),),
            project_files=(
                ConfigFile("public/.nojekyll"),
                ConfigFile(".github/workflows/deploy.yml", _github_pages_workflow()),
            ),
            static_steps=(
                "Create a repository on GitHub.",
                "Commit the exported files to the main branch.",
                "Open Settings > Pages and choose the main branch as the source.",
                "Wait for the first deployment to finish.",
            ),
            project_steps=(
                "Create a repository on GitHub and push the project.",
                "Open Settings > Pages and choose GitHub Actions as the source.",
                "Push to main; the bundled workflow builds and deploys dist/.",
            ),
            docs_url="https://docs.github.com/pages",
        ),
        HostingPreset(
            id="netlify",
            name="Netlify",
            description="Git-based or drag-and-drop deploys with a global CDN.",
            optimization=OptimizationProfile(quality=0.82, convert_to_webp=True),
            static_files=(ConfigFile("netlify.toml", _netlify_toml(project=False)),),
            project_files=(ConfigFile("netlify.toml", _netlify_toml(project=True)),),
            static_steps=(
                "Open app.netlify.com and choose Add new site.",
                "Drag the export folder onto the deploy area.",
                "Set a custom domain under Domain management if needed.",
            ),
            project_steps=(
                "Push the project to a Git repository.",
                "Import the repository in Netlify; netlify.toml sets the build.",
                "Deploy; Netlify runs npm run build and publishes dist/.",
            ),
            docs_url="https://docs.netlify.com",
        ),
        HostingPreset(
            id="vercel",
            name="Vercel",
            description="Zero-config deploys with edge caching.",
            optimization=OptimizationProfile(quality=0.82, convert_to_webp=True),
            static_files=(ConfigFile("vercel.json", _vercel_json(project=False)),),
            project_files=(ConfigFile("vercel.json", _vercel_json(project=True)),),
            static_steps=(
                "Install the Vercel CLI with npm i -g vercel.",
                "Run vercel from the export folder.",
                "Run vercel --prod to promote the deployment.",
            ),
            project_steps=(
                "Push the project to a Git repository.",
                "Import the repository at vercel.com/new.",
                "Deploy; vercel.json configures the build and SPA rewrites.",
            ),
            docs_url="https://vercel.com/docs",
        ),
        HostingPreset(
            id="cloudflare-pages",
            name="Cloudflare Pages",
            description="Static hosting on Cloudflare's edge network.",
            optimization=OptimizationProfile(quality=0.8, convert_to_webp=True),
            static_files=(ConfigFile("_headers", _cloudflare_headers()),),
            project_files=(
                ConfigFile("public/_headers", _cloudflare_headers()),
                ConfigFile("public/_redirects", SPA_REDIRECT),
            ),
            static_steps=(
                "Open the Cloudflare dashboard and create a Pages project.",
                "Choose Direct Upload and upload the export folder.",
                "Attach a custom domain if needed.",
            ),
            project_steps=(
                "Push the project to a Git repository.",
                "Create a Pages project connected to the repository.",
                "Set the build command to npm run build and the output to dist.",
            ),
            docs_url="https://developers.cloudflare.com/pages",
        ),
    ]
    return {preset.id: preset for preset in presets}


PRESETS: typ.Mapping[str, HostingPreset] = MappingProxyType(_build_presets())


def get_hosting_preset(platform_id: str | None) -> HostingPreset:
    """Return the preset for ``platform_id``, or the generic preset."""
    return PRESETS.get(platform_id or "generic", PRESETS["generic"])


def resolve_profile(
    preset: HostingPreset,
    override: typ.Mapping[str, typ.Any] | OptimizationProfile | None = None,
) -> OptimizationProfile:
    """Merge ``override`` into the preset's profile, field by field.

    Parameters
    ----------
    preset : HostingPreset
        Supplies the default profile.
    override : Mapping or OptimizationProfile, optional
        Caller settings. Mapping entries whose value is ``None`` are ignored;
        a full :class:`OptimizationProfile` replaces every field.

    Raises
    ------
    SiteConfigError
        If ``override`` names a field the profile does not have.

    Examples
    --------
    >>> profile = resolve_profile(get_hosting_preset("netlify"), {"quality": 0.5})
    >>> profile.quality, profile.convert_to_webp
    (0.5, True)
    """
    if override is None:
        return preset.optimization
    if isinstance(override, OptimizationProfile):
        return override
    known = {field.name for field in dc.fields(OptimizationProfile)}
    unknown = sorted(set(override) - known)
    if unknown:
        msg = f"Unknown image optimization setting(s): {', '.join(unknown)}"
        raise SiteConfigError(msg)
    changes = {key: value for key, value in override.items() if value is not None}
    return dc.replace(preset.optimization, **changes)


__all__ = [
    "PRESETS",
    "ConfigFile",
    "HostingPreset",
    "Target",
    "get_hosting_preset",
    "resolve_profile",
]
