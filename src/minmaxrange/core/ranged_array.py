# どこで: `src/minmaxrange/core/ranged_array.py`。
# 何を: Ranged に対する補間・区間判定を numpy 配列へまとめて適用する関数群を提供する。
# なぜ: 大量の値を Python ループ無しで判定/補間するため（スカラー版と同じ境界条件を保つ）。

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from .ranged import Ranged

IntervalName = Literal["closed", "open", "left_open", "right_open"]

_INTERVAL_NAMES: tuple[str, ...] = ("closed", "open", "left_open", "right_open")


def lerp_array(ranged: Ranged, t: ArrayLike) -> np.ndarray:
    """t の各要素で min→max を線形補間した float64 配列を返す（クランプしない）。"""

    lo = float(ranged.min)
    hi = float(ranged.max)
    t_arr = np.asarray(t, dtype=np.float64)
    return (1.0 - t_arr) * lo + t_arr * hi


def lerp_clamped_array(ranged: Ranged, t: ArrayLike) -> np.ndarray:
    """t を [0, 1] にクランプしてから `lerp_array` した配列を返す。"""

    t_arr = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    return lerp_array(ranged, t_arr)


def contains_mask(
    ranged: Ranged,
    values: ArrayLike,
    *,
    interval: IntervalName = "closed",
) -> np.ndarray:
    """values の各要素がレンジに含まれるかを bool 配列で返す。

    Parameters
    ----------
    ranged : Ranged
        判定に使うレンジ（min/max は正規化しない）。
    values : ArrayLike
        判定対象の値。
    interval : {"closed", "open", "left_open", "right_open"}
        端点の扱い。left_open は min を含まず max を含む、right_open はその逆。

    Raises
    ------
    ValueError
        interval が未知の名前の場合。
    """

    if interval not in _INTERVAL_NAMES:
        names = ", ".join(_INTERVAL_NAMES)
        raise ValueError(f"未知の interval です: got={interval!r} (expected: {names})")

    arr = np.asarray(values)
    lo = ranged.min
    hi = ranged.max
    if interval == "closed":
        return (lo <= arr) & (arr <= hi)
    if interval == "open":
        return (lo < arr) & (arr < hi)
    if interval == "left_open":
        return (lo < arr) & (arr <= hi)
    return (lo <= arr) & (arr < hi)


__all__ = ["IntervalName", "lerp_array", "lerp_clamped_array", "contains_mask"]
