from __future__ import annotations

from pathlib import Path

import pytest

COMPOSER_TEMPLATE = """{
    "name": "$moduleName",
    "type": "$moduleType",
    "autoload": {
        "psr-4": {
            "$namespace": "src/"
        }
    }
}
"""


def write_skeleton(root: Path, folder: str, extra: dict[str, str] | None = None) -> Path:
    skeleton = root / "assets" / folder
    (skeleton / "src").mkdir(parents=True, exist_ok=True)
    (skeleton / "composer.json").write_text(COMPOSER_TEMPLATE, encoding="utf-8")
    (skeleton / "src" / "Placeholder.php").write_text("<?php\n", encoding="utf-8")
    (skeleton / "README.md").write_text("# Skeleton\n", encoding="utf-8")
    for rel_path, content in (extra or {}).items():
        target = skeleton / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return skeleton


def write_option(root: Path, folder: str, rel_path: str, content: str = "option\n") -> Path:
    target = root / "options" / folder / rel_path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target


@pytest.fixture()
def asset_root(tmp_path: Path) -> Path:
    """A minimal asset root with a current module and DataObject skeleton."""
    root = tmp_path / "templates"
    write_skeleton(root, "ss4-skeleton")
    write_skeleton(root, "ss4-dataobject")

    write_option(root, "ss4-skeleton", ".travis.yml", "language: php\n")
    write_option(root, "ss4-skeleton", ".circleci/config.yml", "version: 2\n")

    write_option(root, "ss4-dataobject", "src/Relations/HasOneRelation.php", "<?php // has_one\n")
    write_option(root, "ss4-dataobject", "src/Relations/HasManyRelation.php", "<?php // has_many\n")
    write_option(root, "ss4-dataobject", "src/Relations/ManyMany/ManyManyRelation.php", "<?php\n")
    write_option(root, "ss4-dataobject", "src/Relations/ManyMany/ManyManyJoin.php", "<?php\n")
    write_option(root, "ss4-dataobject", "phpcs.xml.dist", "<ruleset/>\n")
    return root


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture(autouse=True)
def _clear_template_root_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORTER_TEMPLATE_ROOT", raising=False)
