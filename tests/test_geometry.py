from __future__ import annotations

from usablearea.model.geometry import AreaState, Axis, Rect, is_within_bounds, ratio_label

OUTER = Rect(0.0, 0.0, 200.0, 200.0)


def test_axis_other() -> None:
    assert Axis.X.other is Axis.Y
    assert Axis.Y.other is Axis.X
    assert str(Axis.X) == "x"


def test_rect_contains_point_is_strict() -> None:
    assert OUTER.contains_point((1.0, 1.0))
    assert OUTER.contains_point((199.0, 199.0))
    assert not OUTER.contains_point((0.0, 100.0))
    assert not OUTER.contains_point((200.0, 100.0))


def test_from_normalized_scales_by_reference_size() -> None:
    rect = Rect.from_normalized((0.5, 0.5), (0.25, 0.5), 200.0)
    assert rect == Rect(100.0, 100.0, 50.0, 100.0)


def test_full_area_flush_with_edges_is_within_bounds() -> None:
    assert is_within_bounds((0.0, 0.0), (1.0, 1.0), OUTER)


def test_area_with_inset_margin_is_within_bounds() -> None:
    assert is_within_bounds((0.01, 0.01), (0.98, 0.98), OUTER)


def test_area_one_unit_past_edge_is_out_of_bounds() -> None:
    # 0.005 * 200 = 1 unit to the right of a full-width area.
    assert not is_within_bounds((0.005, 0.0), (1.0, 1.0), OUTER)
    assert not is_within_bounds((0.0, 0.5), (0.5, 0.6), OUTER)


def test_larger_outer_region_contains_overflowing_area() -> None:
    # Drawn at 100..220 horizontally: past a 200 region, inside a 400 one.
    assert not is_within_bounds((0.5, 0.0), (0.6, 0.5), OUTER)
    assert is_within_bounds((0.5, 0.0), (0.6, 0.5), Rect.square(400.0))


def test_bounds_respect_outer_origin() -> None:
    outer = Rect(50.0, 50.0, 200.0, 200.0)
    assert is_within_bounds((0.25, 0.25), (0.5, 0.5), outer)
    assert not is_within_bounds((0.0, 0.0), (0.5, 0.5), outer)


def test_bounds_use_given_reference_size() -> None:
    small = Rect.square(100.0)
    assert is_within_bounds((0.0, 0.0), (1.0, 1.0), small, reference_size=100.0)
    assert not is_within_bounds((0.0, 0.0), (1.0, 1.0), small)


def test_ratio_label_is_reduced() -> None:
    assert ratio_label((1.0, 0.5), 200.0) == "2:1"
    assert ratio_label((0.9, 0.9), 200.0) == "1:1"
    assert ratio_label((0.8, 0.45), 200.0) == "16:9"


def test_ratio_label_degenerate_size() -> None:
    assert ratio_label((0.001, 0.001), 200.0) == "0:0"


def test_area_state_dict_round_trip() -> None:
    state = AreaState(offset=(0.1, 0.2), size=(0.5, 0.25), aspect_ratio=2.0, locked=True, enabled=False)
    data = state.to_dict()
    assert data["size"] == [0.5, 0.25]
    assert AreaState.from_dict(data) == state


def test_area_state_from_partial_dict_uses_defaults() -> None:
    state = AreaState.from_dict({"size": [0.5, 0.5]})
    assert state.offset == (0.0, 0.0)
    assert state.aspect_ratio is None
    assert state.locked is False
    assert state.enabled is True
