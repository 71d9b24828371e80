"""zhfmt.config
用途: 定义规则读取的配置记录，并从 TOML/YAML 文件加载、校验配置。
依赖: Python 标准库 dataclasses、tomllib；第三方库 PyYAML。
示例: ``cfg = load_config(Path(".zhfmt.toml"))``。
"""
from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

__all__ = [
    "ZhScript",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "config_from_mapping",
]

LOGGER = logging.getLogger("zhfmt.config")

DEFAULT_CONFIG_FILE = ".zhfmt.toml"


class ZhScript(Enum):
    """引号样式偏好。"""

    SIMPLIFIED = "simplified"
    TRADITIONAL = "traditional"


class ConfigError(Exception):
    """配置解析相关的自定义异常。"""


def _default_abbrs() -> List[str]:
    return ["Mr.", "Mrs.", "Dr.", "Jr.", "Sr.", "vs.", "etc.", "i.e.", "e.g.", "a.k.a"]


def _default_units() -> List[str]:
    return ["年", "月", "日", "天", "号", "时", "分", "秒"]


@dataclass
class Config:
    """规则配置。

    ``bool`` 选项为 ``False`` 时表示不处理；``Optional[bool]`` 选项中 ``True``
    为一个空格、``False`` 为无空格、``None`` 为保持原样。
    """

    # 标点
    halfwidth_punctuation: str = "()"
    fullwidth_punctuation: str = "，。：；？！“”‘’"
    unified_punctuation: Optional[ZhScript] = ZhScript.SIMPLIFIED
    skip_abbrs: List[str] = field(default_factory=_default_abbrs)

    # 文字之间
    space_between_halfwidth_content: bool = True
    no_space_between_fullwidth_content: bool = True
    space_between_mixedwidth_content: Optional[bool] = True
    skip_zh_units: List[str] = field(default_factory=_default_units)

    # 点号
    no_space_before_pause_or_stop: bool = True
    space_after_halfwidth_pause_or_stop: Optional[bool] = True
    no_space_after_fullwidth_pause_or_stop: bool = True

    # 引号
    space_outside_halfwidth_quotation: Optional[bool] = True
    no_space_outside_fullwidth_quotation: bool = True
    no_space_inside_quotation: bool = True

    # 括号
    space_outside_halfwidth_bracket: Optional[bool] = True
    no_space_outside_fullwidth_bracket: bool = True
    no_space_inside_bracket: bool = True

    # 行内代码与包裹标记
    space_outside_code: Optional[bool] = True
    no_space_inside_hyper_mark: bool = True

    # 全文首尾
    trim_space: bool = True

    # 额外的忽略正则
    ignores: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Config":
        """关闭全部规则的预设。"""

        return cls(
            halfwidth_punctuation="",
            fullwidth_punctuation="",
            unified_punctuation=None,
            skip_abbrs=[],
            space_between_halfwidth_content=False,
            no_space_between_fullwidth_content=False,
            space_between_mixedwidth_content=None,
            skip_zh_units=[],
            no_space_before_pause_or_stop=False,
            space_after_halfwidth_pause_or_stop=None,
            no_space_after_fullwidth_pause_or_stop=False,
            space_outside_halfwidth_quotation=None,
            no_space_outside_fullwidth_quotation=False,
            no_space_inside_quotation=False,
            space_outside_halfwidth_bracket=None,
            no_space_outside_fullwidth_bracket=False,
            no_space_inside_bracket=False,
            space_outside_code=None,
            no_space_inside_hyper_mark=False,
            trim_space=False,
            ignores=[],
        )


PRESETS: Dict[str, Callable[[], Config]] = {
    "default": Config,
    "empty": Config.empty,
}


def _check_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} 必须是布尔值")
    return value


def _check_optional_bool(key: str, value: Any) -> Optional[bool]:
    if value is not None and not isinstance(value, bool):
        raise ConfigError(f"{key} 必须是布尔值或 null")
    return value


def _check_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key} 必须是字符串")
    return value


def _check_str_list(key: str, value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} 必须是字符串列表")
    return list(value)


def _check_script(key: str, value: Any) -> Optional[ZhScript]:
    if value is None or value == "none":
        return None
    try:
        return ZhScript(value)
    except ValueError as exc:
        raise ConfigError(f"{key} 只能是 simplified、traditional 或 none") from exc


def _check_patterns(key: str, value: Any) -> List[str]:
    patterns = _check_str_list(key, value)
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"{key} 中的正则无效 {pattern!r}: {exc}") from exc
    return patterns


_CHECKERS: Dict[str, Callable[[str, Any], Any]] = {
    "halfwidth_punctuation": _check_str,
    "fullwidth_punctuation": _check_str,
    "unified_punctuation": _check_script,
    "skip_abbrs": _check_str_list,
    "skip_zh_units": _check_str_list,
    "ignores": _check_patterns,
}


def _checker_for(name: str, annotation: Any) -> Callable[[str, Any], Any]:
    if name in _CHECKERS:
        return _CHECKERS[name]
    if str(annotation) == "bool":
        return _check_bool
    return _check_optional_bool


def config_from_mapping(data: Dict[str, Any]) -> Config:
    """从字典构建配置；``preset`` 键选择基础预设，其余键逐项覆盖。"""

    data = dict(data)
    preset_name = data.pop("preset", None) or "default"
    if preset_name not in PRESETS:
        raise ConfigError(f"未知的 preset: {preset_name}")  # 仅支持 default/empty
    config = PRESETS[preset_name]()

    known = {f.name: f for f in fields(Config)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"未知的配置项: {', '.join(unknown)}")

    overrides = {
        key: _checker_for(key, known[key].type)(key, value) for key, value in data.items()
    }
    return replace(config, **overrides)


def _load_mapping(path: Path) -> Dict[str, Any]:
    """按扩展名读取 TOML 或 YAML 文件。"""

    try:
        if path.suffix in (".yaml", ".yml"):
            with path.open("r", encoding="utf-8") as fh:  # 打开配置文件
                data = yaml.safe_load(fh) or {}  # 空文件回退空 dict
        else:
            with path.open("rb") as fh:
                data = tomllib.load(fh)
    except yaml.YAMLError as exc:
        raise ConfigError(f"解析 YAML 失败: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"解析 TOML 失败: {exc}") from exc

    if not isinstance(data, dict):  # 确保根节点是字典
        raise ConfigError("配置文件顶层必须是映射类型")
    return data


def load_config(path: str | Path | None = DEFAULT_CONFIG_FILE) -> Config:
    """加载配置；文件不存在时记录警告并返回默认配置。"""

    if path is None:
        return Config()
    config_path = Path(path).expanduser()
    if not config_path.exists():
        LOGGER.warning("配置文件不存在，使用默认配置: %s", config_path)
        return Config()
    data = _load_mapping(config_path)
    config = config_from_mapping(data)
    LOGGER.debug("已加载配置: %s", config_path)
    return config
