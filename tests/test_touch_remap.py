# tests/test_touch_remap.py
from picoshelf.touch_remap import (
    BUTTON_DOWN, BUTTON_LEFT, BUTTON_O, BUTTON_RIGHT, BUTTON_UP, BUTTON_X,
    DPAD_BITS, TouchPoint, classify_touch, classify_touches, describe_buttons,
)

W, H = 844, 390
CX, CY = W / 4, H / 2  # d-pad centre


def test_left_of_centre_sets_left_only():
    assert classify_touch(TouchPoint(100, 195), W, H) == BUTTON_LEFT


def test_each_direction():
    assert classify_touch(TouchPoint(CX + 80, CY), W, H) == BUTTON_RIGHT
    assert classify_touch(TouchPoint(CX, CY - 80), W, H) == BUTTON_UP
    assert classify_touch(TouchPoint(CX, CY + 80), W, H) == BUTTON_DOWN


def test_deadzone_produces_nothing():
    for dx, dy in [(0, 0), (20, -25), (-29, 29), (30, 0), (0, -30)]:
        assert classify_touch(TouchPoint(CX + dx, CY + dy), W, H) == 0, (dx, dy)


def test_diagonal_sets_both_axes():
    assert classify_touch(TouchPoint(CX + 100, CY - 100), W, H) == BUTTON_RIGHT | BUTTON_UP
    assert classify_touch(TouchPoint(CX - 60, CY + 50), W, H) == BUTTON_LEFT | BUTTON_DOWN


def test_dominant_axis_suppresses_the_other():
    # dy is below 0.6 * dx, so only horizontal counts
    assert classify_touch(TouchPoint(CX + 100, CY + 55), W, H) == BUTTON_RIGHT
    assert classify_touch(TouchPoint(CX + 55, CY + 100), W, H) == BUTTON_DOWN


def test_action_buttons_overlap_band():
    x = W * 0.75
    assert classify_touch(TouchPoint(x, 0), W, H) == BUTTON_O
    assert classify_touch(TouchPoint(x, H * 0.5), W, H) == BUTTON_O | BUTTON_X
    assert classify_touch(TouchPoint(x, H), W, H) == BUTTON_X


def test_exact_half_width_is_action_side():
    assert classify_touch(TouchPoint(W / 2, 10), W, H) == BUTTON_O


def test_multi_touch_is_union():
    points = [
        TouchPoint(100, 195),          # left
        TouchPoint(CX + 10, CY + 120),  # down
        TouchPoint(800, 20),           # O
    ]
    mask = classify_touches(points, W, H)
    assert mask == BUTTON_LEFT | BUTTON_DOWN | BUTTON_O
    expected_dpad = 0
    for p in points:
        expected_dpad |= classify_touch(p, W, H) & DPAD_BITS
    assert mask & DPAD_BITS == expected_dpad


def test_no_touches_is_zero():
    assert classify_touches([], W, H) == 0


def test_describe_buttons():
    assert describe_buttons(0) == "none"
    assert describe_buttons(BUTTON_LEFT | BUTTON_X) == "left+X"
