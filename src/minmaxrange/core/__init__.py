# どこで: `src/minmaxrange/core/__init__.py`。
# 何を: レンジ値のデータモデルと純粋関数群の公開エイリアスをまとめる。
# なぜ: editor 層や利用側から最小インポートで使えるようにするため。

from .attribute import MinMaxRange
from .codec import decode_range, dumps_range, encode_range, loads_range
from .fields import RangeKind, make_range, pair_kind, scalar_kind
from .ranged import (
    FloatRange,
    IntRange,
    Ranged,
    closed_contains,
    left_open_contains,
    lerp,
    lerp_clamped,
    open_contains,
    right_open_contains,
)
from .ranged_array import contains_mask, lerp_array, lerp_clamped_array

__all__ = [
    "MinMaxRange",
    "decode_range",
    "dumps_range",
    "encode_range",
    "loads_range",
    "RangeKind",
    "make_range",
    "pair_kind",
    "scalar_kind",
    "FloatRange",
    "IntRange",
    "Ranged",
    "closed_contains",
    "left_open_contains",
    "lerp",
    "lerp_clamped",
    "open_contains",
    "right_open_contains",
    "contains_mask",
    "lerp_array",
    "lerp_clamped_array",
]
