"""min/max スライダー行モデル（検証・表示・書き戻し）のテスト群。"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pytest

from minmaxrange.core.attribute import MinMaxRange
from minmaxrange.core.ranged import FloatRange, IntRange
from minmaxrange.core.runtime_config import RuntimeConfig
from minmaxrange.editor.min_max_slider import (
    commit_slider,
    format_bound_label,
    inspect_range_fields,
    prepare_slider,
)
from minmaxrange.editor.warnings_pool import WarningsPool

_LOGGER = "minmaxrange.editor.warnings_pool"

_CONFIG = RuntimeConfig(
    config_path=None,
    int_label_decimals=0,
    float_label_decimals=2,
    warn_once=True,
)


@dataclass
class _OnlyMin:
    min: float = 0.0


@dataclass
class _Mixed:
    min: int = 0
    max: float = 1.0


@dataclass
class _Text:
    min: str = "0"
    max: str = "1"


def _warnings(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == _LOGGER]


def test_inspect_accepts_float_and_int_ranges() -> None:
    pool = WarningsPool(warn_once=True)
    assert inspect_range_fields(FloatRange(2.0, 8.0), name="spread", pool=pool) == ("float", 2.0, 8.0)
    assert inspect_range_fields(IntRange(0, 10), name="count", pool=pool) == ("int", 0, 10)


def test_inspect_warns_on_missing_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger=_LOGGER)
    pool = WarningsPool(warn_once=True)

    assert inspect_range_fields(_OnlyMin(), name="spread", pool=pool) is None
    messages = _warnings(caplog)
    assert len(messages) == 1
    assert "spread" in messages[0]
    assert "min and max fields" in messages[0]


@pytest.mark.parametrize("target", [_Mixed(), _Text()])
def test_inspect_warns_on_mismatched_or_unsupported_kinds(
    caplog: pytest.LogCaptureFixture, target
) -> None:
    caplog.set_level(logging.WARNING, logger=_LOGGER)
    pool = WarningsPool(warn_once=True)

    assert inspect_range_fields(target, name="spread", pool=pool) is None
    messages = _warnings(caplog)
    assert len(messages) == 1
    assert "int or float type" in messages[0]


def test_inspect_warning_is_not_repeated_per_frame(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger=_LOGGER)
    pool = WarningsPool(warn_once=True)
    target = _OnlyMin()
    for _ in range(5):
        inspect_range_fields(target, name="spread", pool=pool)
    assert len(_warnings(caplog)) == 1


def test_invalid_field_does_not_affect_other_fields() -> None:
    pool = WarningsPool(warn_once=True)
    marker = MinMaxRange(0.0, 10.0)

    assert prepare_slider(_Mixed(), marker, name="bad", pool=pool, config=_CONFIG) is None
    state = prepare_slider(FloatRange(1.0, 2.0), marker, name="good", pool=pool, config=_CONFIG)
    assert state is not None
    assert state.name == "good"


@pytest.mark.parametrize(
    "value,kind,expected",
    [(3, "int", "3"), (2.0, "float", "2.00"), (0.125, "float", "0.12"), (7.25, "float", "7.25")],
)
def test_format_bound_label(value, kind, expected) -> None:
    assert format_bound_label(value, kind, config=_CONFIG) == expected


def test_format_bound_label_follows_config_decimals() -> None:
    cfg = RuntimeConfig(config_path=None, int_label_decimals=1, float_label_decimals=3, warn_once=True)
    assert format_bound_label(4, "int", config=cfg) == "4.0"
    assert format_bound_label(0.5, "float", config=cfg) == "0.500"


def test_prepare_slider_builds_state_from_target_and_marker() -> None:
    pool = WarningsPool(warn_once=True)
    state = prepare_slider(IntRange(2, 7), MinMaxRange(0, 10), name="count", pool=pool, config=_CONFIG)

    assert state is not None
    assert state.kind == "int"
    assert (state.min_value, state.max_value) == (2.0, 7.0)
    assert (state.travel_min, state.travel_max) == (0.0, 10.0)
    assert (state.min_label, state.max_label) == ("2", "7")


def test_prepare_slider_keeps_stored_values_outside_travel() -> None:
    pool = WarningsPool(warn_once=True)
    state = prepare_slider(FloatRange(-5.0, 50.0), MinMaxRange(0.0, 10.0), name="x", pool=pool, config=_CONFIG)

    assert state is not None
    assert (state.min_value, state.max_value) == (-5.0, 50.0)


def test_commit_float_writes_values_back() -> None:
    pool = WarningsPool(warn_once=True)
    target = FloatRange(1.0, 2.0)
    state = prepare_slider(target, MinMaxRange(0.0, 10.0), name="x", pool=pool, config=_CONFIG)
    assert state is not None

    assert commit_slider(target, state, 2.5, 7.75) is True
    assert target == FloatRange(2.5, 7.75)
    assert commit_slider(target, state, 2.5, 7.75) is False


def test_commit_int_rounds_to_nearest_integer() -> None:
    pool = WarningsPool(warn_once=True)
    target = IntRange(0, 10)
    state = prepare_slider(target, MinMaxRange(0, 10), name="count", pool=pool, config=_CONFIG)
    assert state is not None

    assert commit_slider(target, state, 2.4, 7.6) is True
    assert target == IntRange(2, 8)
    assert isinstance(target.min, int) and isinstance(target.max, int)


def test_commit_clamps_to_travel_and_keeps_order() -> None:
    pool = WarningsPool(warn_once=True)
    target = FloatRange(1.0, 2.0)
    state = prepare_slider(target, MinMaxRange(0.0, 10.0), name="x", pool=pool, config=_CONFIG)
    assert state is not None

    commit_slider(target, state, -3.0, 12.0)
    assert target == FloatRange(0.0, 10.0)

    commit_slider(target, state, 6.0, 4.0)
    assert target == FloatRange(4.0, 4.0)


def test_inverted_marker_travel_is_ordered() -> None:
    pool = WarningsPool(warn_once=True)
    state = prepare_slider(FloatRange(1.0, 2.0), MinMaxRange(10.0, 0.0), name="x", pool=pool, config=_CONFIG)
    assert state is not None
    assert (state.travel_min, state.travel_max) == (0.0, 10.0)


@pytest.mark.parametrize(
    "raw,expected",
    [((0.0, 10.0), IntRange(1, 9)), ((0.45, 9.55), IntRange(1, 9)), ((5.0, 5.0), IntRange(5, 5))],
)
def test_commit_int_stays_inside_fractional_travel(raw, expected) -> None:
    pool = WarningsPool(warn_once=True)
    target = IntRange(2, 3)
    state = prepare_slider(target, MinMaxRange(0.4, 9.6), name="count", pool=pool, config=_CONFIG)
    assert state is not None

    commit_slider(target, state, *raw)
    assert target == expected


def test_commit_int_with_infinite_travel_accepts_finite_values() -> None:
    pool = WarningsPool(warn_once=True)
    target = IntRange(0, 1)
    state = prepare_slider(
        target, MinMaxRange(-math.inf, math.inf), name="count", pool=pool, config=_CONFIG
    )
    assert state is not None

    assert commit_slider(target, state, -3.6, 12.2) is True
    assert target == IntRange(-4, 12)


def test_commit_int_rejects_non_finite_values() -> None:
    pool = WarningsPool(warn_once=True)
    target = IntRange(0, 1)
    state = prepare_slider(
        target, MinMaxRange(-math.inf, math.inf), name="count", pool=pool, config=_CONFIG
    )
    assert state is not None

    with pytest.raises(ValueError):
        commit_slider(target, state, 0.0, math.inf)
    assert target == IntRange(0, 1)
