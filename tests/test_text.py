import pytest

from naviz.text import (
    Alignment,
    HAlignment,
    TextSpec,
    VAlignment,
    get_aligned_position,
    get_scale,
    to_screen_position,
)
from naviz.viewport import ViewportProjection, ViewportSource, ViewportTarget


def _never() -> float:
    raise AssertionError("size should not be evaluated")


def _full(width=100.0, height=100.0) -> ViewportProjection:
    return ViewportProjection(source=ViewportSource(0.0, 0.0, width, height))


def test_alignment_defaults_to_center():
    alignment = Alignment()
    assert alignment.horizontal is HAlignment.CENTER
    assert alignment.vertical is VAlignment.CENTER


def test_left_top_alignment_is_lazy_and_unchanged():
    result = get_aligned_position(
        Alignment(HAlignment.LEFT, VAlignment.TOP), (5.0, 7.0), _never, _never
    )
    assert result == (5.0, 7.0)


def test_center_alignment_subtracts_half():
    result = get_aligned_position(Alignment(), (10.0, 20.0), lambda: 4.0, lambda: 6.0)
    assert result == (10.0 - 4.0 / 2, 20.0 - 6.0 / 2)


def test_right_bottom_alignment_subtracts_full_size():
    result = get_aligned_position(
        Alignment(HAlignment.RIGHT, VAlignment.BOTTOM), (10.0, 20.0), lambda: 4.0, lambda: 6.0
    )
    assert result == (10.0 - 4.0, 20.0 - 6.0)


def test_horizontal_only_needs_width():
    result = get_aligned_position(
        Alignment(HAlignment.RIGHT, VAlignment.TOP), (10.0, 20.0), lambda: 3.0, _never
    )
    assert result == (7.0, 20.0)


def test_screen_position_corners():
    projection = _full()
    assert to_screen_position(projection, (0.0, 0.0), (640, 480)) == pytest.approx((0.0, 0.0))
    assert to_screen_position(projection, (100.0, 100.0), (640, 480)) == pytest.approx(
        (640.0, 480.0)
    )


def test_screen_position_center_of_target():
    projection = ViewportProjection(
        source=ViewportSource(0.0, 0.0, 10.0, 10.0),
        target=ViewportTarget(0.0, 0.0, 1.0, 1.0),
    )
    # Source center maps to the center of the top-right quadrant of the screen.
    x, y = to_screen_position(projection, (5.0, 5.0), (400, 400))
    assert x == pytest.approx(300.0)
    assert y == pytest.approx(100.0)


def test_scale_matches_pixels_per_unit():
    assert get_scale(_full(), (200, 200)) == pytest.approx(200 / 100.0)


def test_scale_grows_with_resolution():
    projection = _full(50.0, 50.0)
    small = get_scale(projection, (100, 100))
    large = get_scale(projection, (300, 300))
    assert large == pytest.approx(3 * small)


def test_zero_extent_source_is_rejected():
    projection = ViewportProjection(source=ViewportSource(0.0, 0.0, 0.0, 10.0))
    with pytest.raises(ValueError):
        to_screen_position(projection, (0.0, 0.0), (100, 100))


def test_text_spec_holds_texts():
    spec = TextSpec(
        viewport_projection=_full(),
        font_size=12.0,
        font_family="Fira Mono",
        texts=[("a", (1.0, 2.0), Alignment())],
    )
    assert spec.texts[0][0] == "a"
    assert spec.color == (0, 0, 0, 255)