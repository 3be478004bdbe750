# どこで: `src/minmaxrange/core/runtime_config.py`。
# 何を: config.yaml（editor セクション）を読み、スライダー表示と警告抑制の設定を返す。
# なぜ: ラベル桁数や警告の重複抑制を、コードを変えずにユーザーが上書きできるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """minmaxrange の実行時設定。"""

    config_path: Path | None
    int_label_decimals: int
    float_label_decimals: int
    warn_once: bool


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定する（None で解除）。キャッシュは破棄する。"""

    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(str(path)).expanduser()
    _cached = None


def _read_yaml(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml を解析できません: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return data


def _overlay(base: dict[str, Any], top: dict[str, Any]) -> dict[str, Any]:
    """top を base へ再帰的に重ねた dict を返す（後勝ち）。"""

    out = dict(base)
    for k, v in top.items():
        if isinstance(out.get(k), dict) and isinstance(v, dict):
            out[k] = _overlay(out[k], v)
        else:
            out[k] = v
    return out


def _required(payload: dict[str, Any], dotted: str) -> Any:
    """ドット区切りのキーで値を引く。欠落や途中が mapping でない場合は RuntimeError。"""

    node: Any = payload
    walked: list[str] = []
    for part in dotted.split("."):
        if not isinstance(node, dict):
            raise RuntimeError(f"{'.'.join(walked)} は mapping である必要があります: got={node!r}")
        walked.append(part)
        if node.get(part) is None:
            raise RuntimeError(f"{dotted} が未設定です（同梱 default_config.yaml を確認してください）")
        node = node[part]
    return node


def _decimals(payload: dict[str, Any], dotted: str) -> int:
    value = _required(payload, dotted)
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuntimeError(f"{dotted} は整数である必要があります: got={value!r}")
    if value < 0:
        raise ValueError(f"{dotted} は 0 以上である必要があります: got={value}")
    return value


def _discovered_path() -> Path | None:
    for p in (
        Path.cwd() / ".minmaxrange" / "config.yaml",
        Path.home() / ".config" / "minmaxrange" / "config.yaml",
    ):
        if p.is_file():
            return p
    return None


def runtime_config() -> RuntimeConfig:
    """実行時設定を返す（キャッシュ）。

    上書き順（後勝ち）: 同梱 default_config.yaml → 探索で見つかった config.yaml
    （`./.minmaxrange/` → `~/.config/minmaxrange/`）→ `set_config_path(...)` の明示パス。
    """

    global _cached
    if _cached is not None:
        return _cached

    explicit = _explicit_path
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = _discovered_path()

    packaged = resources.files("minmaxrange").joinpath("resource", "default_config.yaml")
    payload = _read_yaml(packaged.read_text(encoding="utf-8"), "minmaxrange/resource/default_config.yaml")
    for path in (discovered, explicit):
        if path is not None:
            payload = _overlay(payload, _read_yaml(path.read_text(encoding="utf-8"), str(path)))

    if payload.get("version") != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={payload.get('version')!r}")

    warn_once = _required(payload, "editor.warnings.warn_once")
    if not isinstance(warn_once, bool):
        raise RuntimeError(f"editor.warnings.warn_once は true/false である必要があります: got={warn_once!r}")

    _cached = RuntimeConfig(
        config_path=explicit or discovered,
        int_label_decimals=_decimals(payload, "editor.min_max_slider.int_label_decimals"),
        float_label_decimals=_decimals(payload, "editor.min_max_slider.float_label_decimals"),
        warn_once=warn_once,
    )
    return _cached


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
