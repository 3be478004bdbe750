# どこで: `src/minmaxrange/core/fields.py`。
# 何を: min/max 値の数値種別（int/float）判定と、種別からのレンジ生成を提供する。
# なぜ: codec と editor で同じ「min/max は単一の数値種別」という検証を共有するため。

from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Literal

from .ranged import FloatRange, IntRange

RangeKind = Literal["int", "float"]


def scalar_kind(value: Any) -> RangeKind | None:
    """value の数値種別を返す。int/float 以外（bool を含む）は None。"""

    # bool は int のサブクラスだが、レンジ値としては扱わない。
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return "int"
    if isinstance(value, Real):
        return "float"
    return None


def pair_kind(min_value: Any, max_value: Any) -> RangeKind | None:
    """min/max が同じ数値種別なら、その種別を返す。混在・非数値は None。"""

    min_kind = scalar_kind(min_value)
    max_kind = scalar_kind(max_value)
    if min_kind is None or max_kind is None:
        return None
    if min_kind != max_kind:
        return None
    return min_kind


def make_range(kind: str, min_value: Any, max_value: Any) -> FloatRange | IntRange:
    """kind に対応するレンジ型を生成して返す。

    Raises
    ------
    ValueError
        kind が "int" / "float" 以外の場合。
    """

    if kind == "int":
        return IntRange(int(min_value), int(max_value))
    if kind == "float":
        return FloatRange(float(min_value), float(max_value))
    raise ValueError(f"未対応のレンジ種別です: got={kind!r}")


__all__ = ["RangeKind", "scalar_kind", "pair_kind", "make_range"]
