"""Tests for the template store."""

from __future__ import annotations

from pathlib import Path

import pytest
from newcli import store
from newcli.config import ConfigError, TEMPLATE_SUBDIR, load_config
from newcli.store import (
    TemplateStoreError,
    default_template_content,
    ensure_template_dir,
)


def test_default_template_is_html_skeleton() -> None:
    content = default_template_content()

    assert content.startswith("<!DOCTYPE html>")
    assert "<body>" in content
    assert content.rstrip().endswith("</html>")


def test_ensure_creates_directory_and_seed(tmp_path: Path) -> None:
    template_dir = tmp_path / "home" / TEMPLATE_SUBDIR

    result = ensure_template_dir(template_dir)

    assert result == template_dir.resolve()
    assert result.is_dir()
    seed = template_dir / "index.html"
    assert seed.read_text(encoding="utf-8") == default_template_content()


def test_ensure_is_noop_for_existing_directory(tmp_path: Path) -> None:
    template_dir = tmp_path / "template"
    ensure_template_dir(template_dir)
    seed = template_dir / "index.html"
    seed.write_text("customised", encoding="utf-8")

    ensure_template_dir(template_dir)

    assert seed.read_text(encoding="utf-8") == "customised"


def test_ensure_does_not_reseed_when_default_removed(tmp_path: Path) -> None:
    template_dir = tmp_path / "template"
    ensure_template_dir(template_dir)
    (template_dir / "index.html").unlink()

    ensure_template_dir(template_dir)

    assert list(template_dir.iterdir()) == []


def test_ensure_reports_creation_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(TemplateStoreError, match="Unable to create template directory"):
        ensure_template_dir(blocker / "template")


def test_ensure_reports_seed_write_failure(tmp_path: Path, monkeypatch) -> None:
    def broken_write(self: Path, *args, **kwargs) -> int:
        raise PermissionError("denied")

    monkeypatch.setattr(store.Path, "write_text", broken_write)

    with pytest.raises(TemplateStoreError, match="Unable to write default template"):
        ensure_template_dir(tmp_path / "template")


def test_load_config_places_store_under_home(tmp_path: Path) -> None:
    config = load_config(home=tmp_path, working_dir=tmp_path / "work")

    assert config.template_dir == tmp_path / ".new-cli" / "template"
    assert config.working_dir == tmp_path / "work"


def test_load_config_reports_missing_home(monkeypatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))

    with pytest.raises(ConfigError, match="Unable to determine home directory"):
        load_config()


def test_load_config_reports_missing_current_directory(
    tmp_path: Path, monkeypatch
) -> None:
    def no_cwd() -> Path:
        raise FileNotFoundError("current directory was removed")

    monkeypatch.setattr(Path, "cwd", staticmethod(no_cwd))

    with pytest.raises(ConfigError, match="Unable to determine current directory"):
        load_config(home=tmp_path)


def test_ensure_reports_unreadable_parent(tmp_path: Path, monkeypatch) -> None:
    template_dir = tmp_path / "home" / TEMPLATE_SUBDIR
    original_exists = Path.exists

    def guarded_exists(self: Path, *args, **kwargs) -> bool:
        if self == template_dir:
            raise PermissionError("denied")
        return original_exists(self, *args, **kwargs)

    monkeypatch.setattr(store.Path, "exists", guarded_exists)

    with pytest.raises(TemplateStoreError, match="Unable to access template directory"):
        ensure_template_dir(template_dir)


def test_ensure_reports_missing_builtin_template(tmp_path: Path, monkeypatch) -> None:
    def missing_resource() -> str:
        raise FileNotFoundError("default_template/index.html")

    monkeypatch.setattr(store, "default_template_content", missing_resource)
    template_dir = tmp_path / "template"

    with pytest.raises(
        TemplateStoreError, match="Unable to load built-in default template"
    ):
        ensure_template_dir(template_dir)

    assert not template_dir.exists()
