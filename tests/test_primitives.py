import pytest

from naviz.primitives import CircleSpec, LineSpec, RectangleSpec, rectangles_to_lines

COLOR = (0, 122, 255, 255)


def _rect(x=3.0, y=5.0, w=10.0, h=20.0, width=2.0):
    return RectangleSpec(
        start=(x, y), size=(w, h), color=COLOR, width=width, segment_length=4.0, duty=0.5
    )


def test_empty_input_gives_no_lines():
    assert rectangles_to_lines([]) == []


def test_four_lines_per_rectangle_with_style():
    rects = [_rect(), _rect(x=-1.0, y=-2.0, w=4.0, h=4.0, width=1.0)]
    lines = rectangles_to_lines(iter(rects))
    assert len(lines) == 8
    for i, rect in enumerate(rects):
        for line in lines[4 * i : 4 * i + 4]:
            assert line.color == rect.color
            assert line.width == rect.width
            assert line.segment_length == rect.segment_length
            assert line.duty == rect.duty


def test_line_directions_and_extents():
    rect = _rect()
    x, y = rect.start
    w, h = rect.size
    top, right, bottom, left = rectangles_to_lines([rect])

    assert top.start[1] == top.end[1] == y
    assert top.end[0] - top.start[0] == pytest.approx(w + rect.width)

    assert right.start[0] == right.end[0] == x + w
    assert right.start[1] - right.end[1] == pytest.approx(h + rect.width)

    assert bottom.start[1] == bottom.end[1] == y + h
    assert bottom.start[0] - bottom.end[0] == pytest.approx(w + rect.width)

    assert left.start[0] == left.end[0] == x
    assert left.end[1] - left.start[1] == pytest.approx(h + rect.width)


def test_zero_width_lines_meet_at_corners():
    rect = _rect(width=0.0)
    top, right, bottom, left = rectangles_to_lines([rect])
    assert top.end == right.end
    assert right.start == bottom.start
    assert bottom.end == left.end
    assert left.start == top.start == rect.start


def test_specs_are_immutable():
    circle = CircleSpec(center=(1.0, 2.0), radius=3.0, radius_inner=0.0, color=COLOR)
    line = LineSpec(
        start=(0.0, 0.0), end=(1.0, 1.0), color=COLOR, width=1.0, segment_length=0.0, duty=1.0
    )
    with pytest.raises(AttributeError):
        circle.radius = 4.0
    with pytest.raises(AttributeError):
        line.width = 2.0
    assert circle.radius == 3.0
    assert line.width == 1.0