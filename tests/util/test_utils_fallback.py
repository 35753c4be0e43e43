from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import _find_project_root, config_section, load_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    start = a
    got = _find_project_root(start)
    assert got == start.parent.parent


def test_find_project_root_detects_configs_dir(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    nested = tmp_path / "src" / "util"
    nested.mkdir(parents=True)
    assert _find_project_root(nested) == tmp_path


@pytest.mark.io
def test_load_config_root_overrides_top_level_sections(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "window:\n  width: 1280\n  height: 800\nhud:\n  enabled: true\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("window:\n  width: 640\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["window"] == {"width": 640}
    assert cfg["hud"] == {"enabled": True}


@pytest.mark.io
def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("window: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


@pytest.mark.io
def test_repository_default_config_is_loadable() -> None:
    cfg = load_config()
    window = config_section(cfg, "window")
    assert window.get("width") == 1280
    assert config_section(cfg, "canvas").get("marker_color") == "#E62937"


def test_config_section_type_guards() -> None:
    assert config_section({"window": [1, 2]}, "window") == {}
    assert config_section({}, "hud") == {}
    assert config_section({"hud": {"enabled": False}}, "hud") == {"enabled": False}
