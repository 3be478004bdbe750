# どこで: `src/minmaxrange/editor/__init__.py`。
# 何を: min/max スライダーの行モデルと WarningsPool の公開エイリアスをまとめる。

from .min_max_slider import (
    MinMaxSliderState,
    commit_slider,
    format_bound_label,
    inspect_range_fields,
    prepare_slider,
)
from .warnings_pool import WarningsPool, default_warnings_pool

__all__ = [
    "MinMaxSliderState",
    "commit_slider",
    "format_bound_label",
    "inspect_range_fields",
    "prepare_slider",
    "WarningsPool",
    "default_warnings_pool",
]
