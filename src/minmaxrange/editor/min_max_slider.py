# どこで: `src/minmaxrange/editor/min_max_slider.py`。
# 何を: min/max スライダーの行モデル（検証・表示値・書き戻し）を純粋関数として提供する。
# なぜ: GUI ツールキット依存の描画から切り離し、フィールド検証と丸め規則を単体テスト可能に保つため。

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from minmaxrange.core.attribute import MinMaxRange
from minmaxrange.core.fields import RangeKind, pair_kind, scalar_kind
from minmaxrange.core.runtime_config import RuntimeConfig, runtime_config

from .warnings_pool import WarningsPool, default_warnings_pool

_MISSING = object()


@dataclass(frozen=True, slots=True)
class MinMaxSliderState:
    """min/max スライダー 1 行分の表示モデル。"""

    name: str
    kind: RangeKind
    min_value: float
    max_value: float
    travel_min: float
    travel_max: float
    min_label: str
    max_label: str


def inspect_range_fields(
    target: Any,
    *,
    name: str,
    pool: WarningsPool | None = None,
) -> tuple[RangeKind, Any, Any] | None:
    """target の min/max フィールドを検証し、(kind, min, max) を返す。

    フィールド欠落や種別不一致は例外にせず警告を出して None を返す
    （そのフィールドの描画だけを諦め、他のフィールドには影響させない）。
    """

    warnings_pool = default_warnings_pool() if pool is None else pool

    min_value = getattr(target, "min", _MISSING)
    max_value = getattr(target, "max", _MISSING)
    if min_value is _MISSING or max_value is _MISSING:
        warnings_pool.log_warning(
            f"MinMaxRange used on {name}. Must be used on types with min and max fields",
            target,
        )
        return None

    kind = pair_kind(min_value, max_value)
    if kind is None:
        warnings_pool.log_warning(
            f"MinMaxRange used on {name}. min and max fields must be of int or float type",
            target,
        )
        return None
    return kind, min_value, max_value


def format_bound_label(value: float, kind: str, *, config: RuntimeConfig | None = None) -> str:
    """スライダー端に表示する固定小数点テキストを返す（int は 0 桁、float は 2 桁が既定）。"""

    cfg = runtime_config() if config is None else config
    decimals = cfg.int_label_decimals if kind == "int" else cfg.float_label_decimals
    return f"{float(value):.{decimals}f}"


def _ordered_travel(marker: MinMaxRange) -> tuple[float, float]:
    lo, hi = marker.travel()
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def prepare_slider(
    target: Any,
    marker: MinMaxRange,
    *,
    name: str,
    pool: WarningsPool | None = None,
    config: RuntimeConfig | None = None,
) -> MinMaxSliderState | None:
    """target と marker から MinMaxSliderState を組み立てて返す。検証失敗時は None。"""

    fields = inspect_range_fields(target, name=name, pool=pool)
    if fields is None:
        return None
    kind, min_value, max_value = fields

    cfg = runtime_config() if config is None else config
    travel_min, travel_max = _ordered_travel(marker)
    return MinMaxSliderState(
        name=str(name),
        kind=kind,
        min_value=float(min_value),
        max_value=float(max_value),
        travel_min=travel_min,
        travel_max=travel_max,
        min_label=format_bound_label(min_value, kind, config=cfg),
        max_label=format_bound_label(max_value, kind, config=cfg),
    )


def _int_travel(lo: float, hi: float) -> tuple[float, float]:
    """int 用に可動範囲を内側の整数へ寄せる。内側に整数が無い場合はそのまま返す。"""

    lo_i = float(math.ceil(lo)) if math.isfinite(lo) else lo
    hi_i = float(math.floor(hi)) if math.isfinite(hi) else hi
    if lo_i > hi_i:
        return lo, hi
    return lo_i, hi_i


def commit_slider(
    target: Any,
    state: MinMaxSliderState,
    min_value: float,
    max_value: float,
) -> bool:
    """スライダー出力を target の min/max へ書き戻し、変更があれば True を返す。

    Notes
    -----
    - 値はスライダーの可動範囲へクランプし、下側のつまみは上側を越えない（min <= max）。
    - kind=int の場合は可動範囲を内側の整数 [ceil(min), floor(max)] へ寄せてから
      最近接整数へ丸める（.5 は偶数側）。

    Raises
    ------
    ValueError
        kind=int でクランプ後の値が有限でない場合（可動範囲が無限で入力も無限/NaN）。
    """

    lo = state.travel_min
    hi = state.travel_max
    if state.kind == "int":
        lo, hi = _int_travel(lo, hi)
    new_min = max(lo, min(hi, float(min_value)))
    new_max = max(lo, min(hi, float(max_value)))
    if new_min > new_max:
        new_min = new_max

    out_min: int | float
    out_max: int | float
    if state.kind == "int":
        if not (math.isfinite(new_min) and math.isfinite(new_max)):
            raise ValueError(
                f"int スライダーの値は有限である必要があります: min={new_min!r} max={new_max!r}"
            )
        out_min = int(round(new_min))
        out_max = int(round(new_max))
    else:
        out_min = new_min
        out_max = new_max

    changed = False
    if scalar_kind(target.min) != state.kind or target.min != out_min:
        target.min = out_min
        changed = True
    if scalar_kind(target.max) != state.kind or target.max != out_max:
        target.max = out_max
        changed = True
    return changed


__all__ = [
    "MinMaxSliderState",
    "inspect_range_fields",
    "format_bound_label",
    "prepare_slider",
    "commit_slider",
]
