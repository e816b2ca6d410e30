"""Tests for hosting presets and optimization profile resolution."""

from __future__ import annotations

import msgspec
import pytest
import tomlkit
from ruamel.yaml import YAML

from site_compiler.config import OptimizationProfile
from site_compiler.errors import SiteConfigError
from site_compiler.presets import PRESETS, get_hosting_preset, resolve_profile


def test_every_documented_platform_is_available() -> None:
    assert set(PRESETS) == {
        "generic",
        "github-pages",
        "netlify",
        "vercel",
        "cloudflare-pages",
    }


@pytest.mark.parametrize("platform", [None, "", "geocities"])
def test_unknown_platform_falls_back_to_generic(platform: str | None) -> None:
    assert get_hosting_preset(platform).id == "generic"


def test_github_pages_static_export_gets_nojekyll_marker() -> None:
    files = get_hosting_preset("github-pages").config_files("static")
    assert [(file.path, file.content) for file in files] == [(".nojekyll", "")]


def test_github_pages_project_ships_a_workflow() -> None:
    files = {
        file.path: file.content
        for file in get_hosting_preset("github-pages").config_files("project")
    }
    assert "public/.nojekyll" in files
    workflow = YAML(typ="safe").load(files[".github/workflows/deploy.yml"])
    steps = workflow["jobs"]["deploy"]["steps"]
    assert {"run": "npm run build"} in steps


def test_netlify_toml_differs_per_target() -> None:
    preset = get_hosting_preset("netlify")
    (static,) = preset.config_files("static")
    (project,) = preset.config_files("project")
    static_doc = tomlkit.parse(static.content)
    project_doc = tomlkit.parse(project.content)
    assert static_doc["build"]["publish"] == "."
    assert project_doc["build"]["command"] == "npm run build"
    assert project_doc["redirects"][0]["to"] == "/index.html"


def test_vercel_project_config_rewrites_to_index() -> None:
    (file,) = get_hosting_preset("vercel").config_files("project")
    config = msgspec.json.decode(file.content)
    assert config["framework"] == "vite"
    assert config["rewrites"] == [{"source": "/(.*)", "destination": "/index.html"}]


def test_cloudflare_project_files_live_under_public() -> None:
    preset = get_hosting_preset("cloudflare-pages")
    paths = [file.path for file in preset.config_files("project")]
    assert paths == ["public/_headers", "public/_redirects"]


def test_generic_preset_emits_no_files() -> None:
    assert get_hosting_preset("generic").config_files("static") == ()


def test_deploy_steps_follow_target() -> None:
    preset = get_hosting_preset("netlify")
    assert preset.deploy_steps("static") != preset.deploy_steps("project")
    assert any("npm run build" in step for step in preset.deploy_steps("project"))


def test_resolve_profile_merges_field_by_field() -> None:
    preset = get_hosting_preset("netlify")
    profile = resolve_profile(preset, {"quality": 0.5, "max_width": None})
    assert profile.quality == 0.5
    assert profile.max_width == preset.optimization.max_width
    assert profile.convert_to_webp is True


def test_resolve_profile_accepts_full_profile() -> None:
    override = OptimizationProfile(enabled=False)
    assert resolve_profile(get_hosting_preset("vercel"), override) is override


def test_resolve_profile_rejects_unknown_fields() -> None:
    with pytest.raises(SiteConfigError, match="sharpness"):
        resolve_profile(get_hosting_preset(None), {"sharpness": 2})
