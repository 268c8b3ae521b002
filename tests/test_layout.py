import pytest

from quadkit.geometry import Rect, Vec2
from quadkit.layout import Cursor, Layout, Scroll


def make_cursor(x=0.0, y=0.0, w=100.0, h=100.0, margin=2.0):
    return Cursor(Rect(x, y, w, h), margin)


def test_new_cursor_starts_at_margin():
    c = make_cursor(margin=3.0)
    assert (c.x, c.y) == (3.0, 3.0)
    assert c.scroll.rect == Rect(0.0, 0.0, 100.0, 100.0)
    assert c.next_same_line is None


def test_first_vertical_fit_at_margin():
    c = make_cursor(margin=2.0)
    assert c.fit(Vec2(10.0, 5.0), Layout.vertical()) == Vec2(2.0, 2.0)


def test_vertical_rows_stack_below():
    margin = 2.0
    size = Vec2(10.0, 5.0)
    c = make_cursor(margin=margin)
    first = c.fit(size, Layout.vertical())
    second = c.fit(size, Layout.vertical())
    assert second.x == first.x
    assert second.y == first.y + size.y + margin


def test_horizontal_items_share_row():
    margin = 2.0
    size = Vec2(10.0, 5.0)
    c = make_cursor(margin=margin)
    first = c.fit(size, Layout.horizontal())
    second = c.fit(size, Layout.horizontal())
    assert second.y == first.y
    assert second.x == first.x + size.x + margin


def test_horizontal_wraps_when_too_wide():
    margin = 2.0
    c = make_cursor(w=50.0, margin=margin)
    c.fit(Vec2(30.0, 8.0), Layout.horizontal())
    wrapped = c.fit(Vec2(30.0, 8.0), Layout.horizontal())
    assert wrapped.x == margin + 1.0
    assert wrapped.y > margin


def test_free_layout_uses_point():
    c = make_cursor()
    point = Vec2(40.0, 33.0)
    assert c.fit(Vec2(1.0, 1.0), Layout.free(point)) == point


def test_area_origin_shifts_results():
    a = make_cursor()
    b = make_cursor(x=10.0, y=20.0)
    for layout in (Layout.vertical(), Layout.horizontal(), Layout.vertical()):
        pa = a.fit(Vec2(7.0, 3.0), layout)
        pb = b.fit(Vec2(7.0, 3.0), layout)
        assert pb - pa == Vec2(10.0, 20.0)


def test_ident_shifts_x():
    a = make_cursor()
    b = make_cursor()
    b.ident = 5.0
    pa = a.fit(Vec2(7.0, 3.0), Layout.vertical())
    pb = b.fit(Vec2(7.0, 3.0), Layout.vertical())
    assert pb - pa == Vec2(5.0, 0.0)


def test_next_same_line_forces_horizontal_at_x():
    c = make_cursor()
    first = c.fit(Vec2(10.0, 5.0), Layout.vertical())
    c.next_same_line = 50.0
    second = c.fit(Vec2(10.0, 5.0), Layout.vertical())
    assert second.x == 50.0
    assert second.y == first.y
    assert c.next_same_line is None


def test_inner_rect_grows_to_content():
    c = make_cursor(w=50.0, h=50.0)
    c.fit(Vec2(10.0, 10.0), Layout.free(Vec2(80.0, 90.0)))
    inner = c.scroll.inner_rect
    assert inner.right == 90.0
    assert inner.bottom == 100.0


def test_reset_returns_to_start_and_keeps_previous_content():
    c = make_cursor()
    start = c.current_position()
    c.fit(Vec2(10.0, 10.0), Layout.free(Vec2(150.0, 160.0)))
    grown = c.scroll.inner_rect
    c.ident = 4.0
    c.reset()
    assert c.current_position() == start
    assert c.scroll.inner_rect_previous_frame == grown
    assert c.scroll.inner_rect == Rect(0.0, 0.0, c.area.w, c.area.h)
    assert c.ident == 0.0


def make_scroll():
    return Scroll(
        rect=Rect(0.0, 0.0, 100.0, 100.0),
        inner_rect_previous_frame=Rect(0.0, 0.0, 100.0, 300.0),
    )


@pytest.mark.parametrize("target", [-5.0, 0.0, 50.0, 1000.0])
def test_scroll_to_stays_in_bounds(target):
    s = make_scroll()
    s.scroll_to(target)
    assert 0.0 <= s.rect.y <= 300.0 - 100.0


def test_scroll_to_inside_range_is_exact():
    s = make_scroll()
    s.scroll_to(50.0)
    assert s.rect.y == 50.0


def test_scroll_to_clamps_high():
    s = make_scroll()
    s.scroll_to(1000.0)
    assert s.rect.y == 300.0 - 100.0


def test_update_clamps_current():
    s = make_scroll()
    s.rect.y = -20.0
    s.update()
    assert s.rect.y == 0.0