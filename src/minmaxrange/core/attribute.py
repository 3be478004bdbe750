# どこで: `src/minmaxrange/core/attribute.py`。
# 何を: MinMaxRange（min/max スライダーの可動範囲を示すマーカー）を提供する。
# なぜ: 格納レンジとは独立した「スライダーの端」をフィールドごとに宣言できるようにするため。

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MinMaxRange:
    """min/max スライダーの可動範囲。

    格納されたレンジ値をクランプするものではなく、スライダーの端を示すだけ。
    """

    min: float
    max: float

    def travel(self) -> tuple[float, float]:
        """スライダーの可動範囲 (min, max) を float で返す。"""

        return float(self.min), float(self.max)


__all__ = ["MinMaxRange"]
