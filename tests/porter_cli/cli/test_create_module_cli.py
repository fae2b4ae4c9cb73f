"""Tests for the ``create-module`` command."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from porter_cli import app

runner = CliRunner()

NAMESPACE = "Owner\\\\Sub\\\\Leaf\\\\"


def test_help_lists_arguments_and_flags() -> None:
    result = runner.invoke(app, ["create-module", "--help"])

    assert result.exit_code == 0
    for flag in ("--nonVendor", "--ss3", "--withTravisCI", "--withCircleCI", "--path"):
        assert flag in result.output


def test_creates_module_in_current_directory(workdir: Path, asset_root: Path) -> None:
    result = runner.invoke(
        app,
        ["create-module", "owner/leaf", NAMESPACE, "--template-root", str(asset_root)],
    )

    assert result.exit_code == 0, result.output
    assert "Creating SilverStripe module named owner/leaf" in result.output
    for line in (" - Skeleton copied", " - composer.json updated", " - Options copied", " - Done"):
        assert line in result.output

    data = json.loads((workdir / "leaf" / "composer.json").read_text(encoding="utf-8"))
    assert data["name"] == "owner/leaf"
    assert data["type"] == "silverstripe-vendormodule"
    assert data["autoload"]["psr-4"] == {"Owner\\Sub\\Leaf\\": "src/"}
    assert (workdir / "leaf" / "src" / "Placeholder.php").is_file()


def test_non_vendor_and_path(tmp_path: Path, asset_root: Path) -> None:
    base = tmp_path / "modules"
    result = runner.invoke(
        app,
        [
            "create-module",
            "owner/leaf",
            NAMESPACE,
            "--nonVendor",
            "--path",
            str(base),
            "--template-root",
            str(asset_root),
        ],
    )

    assert result.exit_code == 0, result.output
    data = json.loads((base / "leaf" / "composer.json").read_text(encoding="utf-8"))
    assert data["type"] == "silverstripe-module"


def test_ci_flags_are_independent(tmp_path: Path, asset_root: Path) -> None:
    result = runner.invoke(
        app,
        [
            "create-module",
            "owner/leaf",
            NAMESPACE,
            "--withCircleCI",
            "--path",
            str(tmp_path),
            "--template-root",
            str(asset_root),
        ],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "leaf" / ".circleci" / "config.yml").is_file()
    assert not (tmp_path / "leaf" / ".travis.yml").exists()


def test_invalid_module_name_exits_nonzero(workdir: Path, asset_root: Path) -> None:
    result = runner.invoke(
        app,
        ["create-module", "foo", NAMESPACE, "--template-root", str(asset_root)],
    )

    assert result.exit_code == 1
    assert "Invalid module name given. Use the format module/name" in result.output
    assert list(workdir.iterdir()) == []


def test_invalid_namespace_exits_nonzero(workdir: Path, asset_root: Path) -> None:
    result = runner.invoke(
        app,
        ["create-module", "foo/bar", "Foo", "--template-root", str(asset_root)],
    )

    assert result.exit_code == 1
    assert "It seems your namespace is formed incorrectly." in result.output
    assert "[Double backslashes]" in result.output
    assert not (workdir / "bar").exists()


def test_missing_legacy_skeleton_exits_nonzero(tmp_path: Path, asset_root: Path) -> None:
    result = runner.invoke(
        app,
        [
            "create-module",
            "owner/leaf",
            NAMESPACE,
            "--ss3",
            "--path",
            str(tmp_path),
            "--template-root",
            str(asset_root),
        ],
    )

    assert result.exit_code == 1
    assert "Skeleton directory not found" in result.output
    assert " - Done" not in result.output


def test_bundled_legacy_skeleton(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["create-module", "owner/legacy", NAMESPACE, "--ss3", "--withTravisCI", "--path", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    target = tmp_path / "legacy"
    data = json.loads((target / "composer.json").read_text(encoding="utf-8"))
    assert data["require"]["silverstripe/framework"].startswith("^3")
    assert (target / ".travis.yml").is_file()


def test_environment_template_root(tmp_path: Path, asset_root: Path, monkeypatch) -> None:
    monkeypatch.setenv("PORTER_TEMPLATE_ROOT", str(asset_root))

    result = runner.invoke(app, ["create-module", "owner/leaf", NAMESPACE, "--path", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "leaf" / "src" / "Placeholder.php").is_file()


def test_latin1_manifest_is_rewritten(tmp_path: Path, asset_root: Path) -> None:
    manifest = asset_root / "assets" / "ss4-skeleton" / "composer.json"
    manifest.write_bytes(b'{"name": "$moduleName", "description": "Caf\xe9"}\r\n')

    result = runner.invoke(
        app,
        ["create-module", "owner/leaf", NAMESPACE, "--path", str(tmp_path), "--template-root", str(asset_root)],
    )

    assert result.exit_code == 0, result.output
    assert " - Done" in result.output
    written = (tmp_path / "leaf" / "composer.json").read_bytes()
    assert written == b'{"name": "owner/leaf", "description": "Caf\xe9"}\r\n'


def test_double_slash_name_stays_under_path(tmp_path: Path, asset_root: Path) -> None:
    base = tmp_path / "modules"
    result = runner.invoke(
        app,
        ["create-module", "owner//leaf", NAMESPACE, "--path", str(base), "--template-root", str(asset_root)],
    )

    assert result.exit_code == 0, result.output
    assert (base / "leaf" / "composer.json").is_file()
