from __future__ import annotations

from conftest import record

from usablearea.app.area import AreaModel
from usablearea.config import AreaConfig
from usablearea.model.geometry import Axis, Rect


def test_defaults_come_from_config() -> None:
    model = AreaModel(AreaConfig(default_offset=(0.25, 0.5), default_size=(0.5, 0.4)))
    assert model.offset == (0.25, 0.5)
    assert model.size == (0.5, 0.4)


def test_set_offset_clamps_and_quantizes() -> None:
    model = AreaModel(AreaConfig())
    events = record(model.offset_changed)

    model.set_offset(x=1.7, y=0.333)

    assert model.offset == (1.0, 0.33)
    assert events == [(1.0, 0.33)]


def test_equal_write_emits_once() -> None:
    model = AreaModel(AreaConfig())
    offset_events = record(model.offset_changed)
    size_events = record(model.size_changed)

    model.set_offset(x=0.3)
    model.set_offset(x=0.3)
    model.set_offset(x=0.301)
    model.set_size(x=0.7)
    model.set_size(x=0.7)

    assert offset_events == [(0.3, 0.0)]
    assert size_events == [(0.7, 1.0)]


def test_saturated_write_at_current_bound_emits_nothing() -> None:
    model = AreaModel(AreaConfig())
    events = record(model.size_changed)

    model.set_size(x=5.0, y=2.0)

    assert model.size == (1.0, 1.0)
    assert events == []


def test_size_axis_events_precede_pair_event() -> None:
    model = AreaModel(AreaConfig())
    order: list[str] = []
    model.size_axis_changed.connect(lambda axis: order.append(str(axis)))
    model.size_changed.connect(lambda x, y: order.append("pair"))

    model.set_size(x=0.5, y=0.4)
    model.set_size(y=0.4)
    model.set_size(y=0.2)

    assert order == ["x", "y", "pair", "y", "pair"]


def test_size_never_reaches_zero() -> None:
    model = AreaModel(AreaConfig())
    model.set_size(x=0.0, y=-1.0)
    assert model.size == (0.05, 0.05)
    assert model.compute_aspect_ratio() == 1.0


def test_compute_aspect_ratio_is_pure() -> None:
    model = AreaModel(AreaConfig())
    events = record(model.size_changed)
    model.set_size(x=0.8, y=0.4)

    assert model.compute_aspect_ratio() == 2.0
    assert model.compute_aspect_ratio() == 2.0
    assert len(events) == 1


def test_bounds_accessors_expose_ranges() -> None:
    model = AreaModel(AreaConfig())
    assert model.size_bounds(Axis.Y).min_value == 0.05
    assert model.offset_bounds(Axis.X).max_value == 1.0


def test_is_within_bounds_uses_outer_region() -> None:
    model = AreaModel(AreaConfig())
    outer = Rect.square(200.0)
    assert model.is_within_bounds(outer)

    model.set_offset(x=0.01)
    assert not model.is_within_bounds(outer)

    model.set_size(x=0.98)
    assert model.is_within_bounds(outer)


def test_reset_restores_defaults() -> None:
    model = AreaModel(AreaConfig())
    model.set_offset(0.4, 0.4)
    model.set_size(0.2, 0.3)
    offset_events = record(model.offset_changed)

    model.reset()

    assert model.offset == (0.0, 0.0)
    assert model.size == (1.0, 1.0)
    assert offset_events == [(0.0, 0.0)]


def test_is_within_bounds_scales_by_reference_size() -> None:
    model = AreaModel(AreaConfig(reference_size=100.0))
    assert model.is_within_bounds(Rect.square(100.0))

    model.set_offset(x=0.5)
    # Drawn at 50..150: past a 100 region, inside a 200 one.
    assert not model.is_within_bounds(Rect.square(100.0))
    assert model.is_within_bounds(Rect.square(200.0))
