"""配置加载与校验的测试。"""
from __future__ import annotations

from pathlib import Path

import pytest

from zhfmt.config import Config, ConfigError, ZhScript, config_from_mapping, load_config


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = Config()
    assert config.halfwidth_punctuation == "()"
    assert config.unified_punctuation is ZhScript.SIMPLIFIED
    assert "vs." in config.skip_abbrs
    assert config.space_between_mixedwidth_content is True
    assert config.trim_space


def test_empty_preset_turns_everything_off() -> None:
    config = Config.empty()
    assert config.fullwidth_punctuation == ""
    assert config.unified_punctuation is None
    assert config.space_outside_code is None
    assert not config.trim_space


def test_load_toml(tmp_path: Path) -> None:
    path = _write(
        tmp_path / ".zhfmt.toml",
        'space_outside_code = false\nunified_punctuation = "traditional"\nskip_abbrs = ["Mr."]\n',
    )
    config = load_config(path)
    assert config.space_outside_code is False
    assert config.unified_punctuation is ZhScript.TRADITIONAL
    assert config.skip_abbrs == ["Mr."]
    assert config.trim_space


def test_load_yaml_with_preset(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "zhfmt.yaml",
        "preset: empty\nfullwidth_punctuation: \"，。\"\nspace_between_mixedwidth_content: null\n",
    )
    config = load_config(path)
    assert config.fullwidth_punctuation == "，。"
    assert config.space_between_mixedwidth_content is None
    assert config.halfwidth_punctuation == ""


def test_script_none() -> None:
    assert config_from_mapping({"unified_punctuation": "none"}).unified_punctuation is None


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.toml") == Config()
    assert load_config(None) == Config()


@pytest.mark.parametrize(
    "data",
    [
        {"no_such_option": True},
        {"trim_space": "yes"},
        {"space_outside_code": 1},
        {"skip_abbrs": "vs."},
        {"unified_punctuation": "cantonese"},
        {"ignores": ["(unclosed"]},
        {"preset": "strict"},
    ],
)
def test_invalid_mapping(data) -> None:
    with pytest.raises(ConfigError):
        config_from_mapping(data)


def test_invalid_toml(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.toml", "trim_space = \n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_yaml_root_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.yml", "- trim_space\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_empty_yaml_is_default(tmp_path: Path) -> None:
    path = _write(tmp_path / "empty.yaml", "")
    assert load_config(path) == Config()
