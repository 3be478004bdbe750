# どこで: `src/minmaxrange/__init__.py`。
# 何を: ルート `minmaxrange` パッケージを定義する。
# なぜ: import 起点を `minmaxrange` に統一するため。

from __future__ import annotations

from minmaxrange.core import (
    FloatRange,
    IntRange,
    MinMaxRange,
    Ranged,
    closed_contains,
    left_open_contains,
    lerp,
    lerp_clamped,
    open_contains,
    right_open_contains,
)

__all__ = [
    "FloatRange",
    "IntRange",
    "MinMaxRange",
    "Ranged",
    "closed_contains",
    "left_open_contains",
    "lerp",
    "lerp_clamped",
    "open_contains",
    "right_open_contains",
]
