# どこで: `src/minmaxrange/core/codec.py`。
# 何を: レンジ値の JSON encode/decode を提供する。
# なぜ: 保存形式（順序付きの {min, max} の 2 フィールドのみ）を 1 箇所に閉じるため。

from __future__ import annotations

import json
from typing import Any

from .fields import make_range, pair_kind
from .ranged import FloatRange, IntRange, Ranged


def encode_range(ranged: Ranged) -> dict[str, Any]:
    """レンジ値を JSON 化可能な dict（キー順は min → max）に変換して返す。

    Raises
    ------
    ValueError
        min/max が単一の数値種別（int/float）でない場合。
    """

    if isinstance(ranged, IntRange):
        kind = "int"
    elif isinstance(ranged, FloatRange):
        kind = "float"
    else:
        kind = pair_kind(ranged.min, ranged.max)
        if kind is None:
            raise ValueError(
                f"min/max は同じ数値種別である必要があります: min={ranged.min!r} max={ranged.max!r}"
            )

    if kind == "int":
        return {"min": int(ranged.min), "max": int(ranged.max)}
    return {"min": float(ranged.min), "max": float(ranged.max)}


def dumps_range(ranged: Ranged) -> str:
    """レンジ値を JSON 文字列へ変換して返す。"""

    return json.dumps(encode_range(ranged))


def decode_range(obj: object) -> FloatRange | IntRange:
    """JSON 由来の dict からレンジ値を復元して返す。

    min/max の数値種別（int/float）で FloatRange / IntRange を選ぶ。

    Raises
    ------
    TypeError
        obj が dict でない場合。
    ValueError
        min/max が欠けている、または種別が混在・非数値の場合。
    """

    if not isinstance(obj, dict):
        raise TypeError("range payload は dict である必要があります")

    missing = [name for name in ("min", "max") if name not in obj]
    if missing:
        raise ValueError(f"range payload に必須キーがありません: {', '.join(missing)}")

    min_value = obj["min"]
    max_value = obj["max"]
    kind = pair_kind(min_value, max_value)
    if kind is None:
        raise ValueError(
            "range payload の min/max は int または float で揃っている必要があります: "
            f"min={min_value!r} max={max_value!r}"
        )
    return make_range(kind, min_value, max_value)


def loads_range(payload: str) -> FloatRange | IntRange:
    """JSON 文字列からレンジ値を復元して返す。"""

    return decode_range(json.loads(payload))


__all__ = ["encode_range", "decode_range", "dumps_range", "loads_range"]
