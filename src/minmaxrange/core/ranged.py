# どこで: `src/minmaxrange/core/ranged.py`。
# 何を: Ranged（min/max の組）と区間判定・線形補間の純粋関数群を提供する。
# なぜ: float/int の両レンジを 1 つの型で扱い、判定の境界条件を 1 箇所に閉じるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

N = TypeVar("N", int, float)


@dataclass(slots=True)
class Ranged(Generic[N]):
    """下限 `min` と上限 `max` の組。

    min <= max は検証しない（順序を保つのは呼び出し側 = スライダー側の責務）。
    逆転したレンジもそのまま保持し、判定・補間は格納値を文字通りに使う。
    """

    min: N
    max: N


@dataclass(slots=True)
class FloatRange(Ranged[float]):
    """float のレンジ。既定値は (0.0, 0.0)。"""

    min: float = 0.0
    max: float = 0.0


@dataclass(slots=True)
class IntRange(Ranged[int]):
    """int のレンジ。既定値は (0, 0)。"""

    min: int = 0
    max: int = 0


def lerp(ranged: Ranged, t: float) -> float:
    """min→max を t で線形補間した値を返す（t はクランプしない）。

    Parameters
    ----------
    ranged : Ranged
        補間元のレンジ。min > max の場合は補間方向が逆になる。
    t : float
        補間係数。[0, 1] の外では線形に外挿する。

    Returns
    -------
    float
        `min + t * (max - min)`。t=0 で min、t=1 で max に一致する。
        内部では `(1 - t) * min + t * max` で計算するため、途中の t では
        `min + t * (max - min)` と最下位ビットが異なることがある（0.1→0.7 の t=0.3 で
        0.27999999999999997）。min=max=inf では nan ではなく inf を返す。
    """

    lo = float(ranged.min)
    hi = float(ranged.max)
    t = float(t)
    # (1 - t) * lo + t * hi の形にして、端点 t=0/1 で丸め誤差なく lo/hi を返す。
    return (1.0 - t) * lo + t * hi


def lerp_clamped(ranged: Ranged, t: float) -> float:
    """t を [0, 1] にクランプしてから `lerp` した値を返す。"""

    t = float(t)
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    return lerp(ranged, t)


def closed_contains(ranged: Ranged, value: float) -> bool:
    """閉区間 [min, max] が value を含むなら True を返す（両端を含む）。"""

    return ranged.min <= value and value <= ranged.max


def open_contains(ranged: Ranged, value: float) -> bool:
    """開区間 (min, max) が value を含むなら True を返す（両端を含まない）。"""

    return ranged.min < value and value < ranged.max


def left_open_contains(ranged: Ranged, value: float) -> bool:
    """左開区間 (min, max] が value を含むなら True を返す（min を含まず max を含む）。"""

    return ranged.min < value and value <= ranged.max


def right_open_contains(ranged: Ranged, value: float) -> bool:
    """右開区間 [min, max) が value を含むなら True を返す（min を含み max を含まない）。"""

    return ranged.min <= value and value < ranged.max


__all__ = [
    "Ranged",
    "FloatRange",
    "IntRange",
    "lerp",
    "lerp_clamped",
    "closed_contains",
    "open_contains",
    "left_open_contains",
    "right_open_contains",
]
