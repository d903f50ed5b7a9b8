import pytest

from rangepanel.widgets import (
    COMP_PAGE4_PAGE4,
    COMP_PAGE4_STAGE_TIMER_BTN,
    FLAG_SCROLLABLE,
    FLAG_SCROLL_ON_FOCUS,
    STATE_CHECKED,
    STATE_DISABLED,
    Component,
    ModifyMode,
    Widget,
    checked_text,
    clamp_frame,
    create_stage_timer_button,
    format_value_text,
)


def test_widget_registers_with_parent():
    screen = Widget()
    child = Widget(kind="label", parent=screen)
    assert screen.children == [child]
    assert child.parent is screen


def test_add_and_clear_flag():
    w = Widget()
    w.add_flag(FLAG_SCROLLABLE)
    assert w.has_flag(FLAG_SCROLLABLE)
    w.clear_flag(FLAG_SCROLLABLE)
    assert not w.has_flag(FLAG_SCROLLABLE)


def test_toggle_flag_twice_round_trips():
    w = Widget()
    w.modify_flag(FLAG_SCROLLABLE, ModifyMode.TOGGLE)
    assert w.has_flag(FLAG_SCROLLABLE)
    w.modify_flag(FLAG_SCROLLABLE, ModifyMode.TOGGLE)
    assert not w.has_flag(FLAG_SCROLLABLE)


@pytest.mark.parametrize("start", [True, False])
def test_modify_flag_add_and_remove(start):
    w = Widget()
    if start:
        w.add_flag(FLAG_SCROLLABLE)
    w.modify_flag(FLAG_SCROLLABLE, ModifyMode.ADD)
    assert w.has_flag(FLAG_SCROLLABLE)
    w.modify_flag(FLAG_SCROLLABLE, ModifyMode.REMOVE)
    assert not w.has_flag(FLAG_SCROLLABLE)


def test_modify_state_modes():
    w = Widget()
    w.modify_state(STATE_DISABLED, ModifyMode.ADD)
    assert w.has_state(STATE_DISABLED)
    w.modify_state(STATE_DISABLED, ModifyMode.TOGGLE)
    assert not w.has_state(STATE_DISABLED)
    w.modify_state(STATE_DISABLED, ModifyMode.TOGGLE)
    assert w.has_state(STATE_DISABLED)
    w.modify_state(STATE_DISABLED, ModifyMode.REMOVE)
    assert not w.has_state(STATE_DISABLED)


def test_clear_state_keeps_others():
    w = Widget()
    w.add_state(STATE_DISABLED)
    w.add_state(STATE_CHECKED)
    w.clear_state(STATE_DISABLED)
    assert w.states == {STATE_CHECKED}


def test_stage_timer_button_component():
    screen = Widget()
    comp = create_stage_timer_button(screen)
    button = comp.child(COMP_PAGE4_PAGE4)
    label = comp.child(COMP_PAGE4_STAGE_TIMER_BTN)
    assert button is comp.root
    assert screen.children == [button]
    assert label.parent is button
    assert label.text == "Stage Timer"
    assert button.width == 100
    assert button.y == 50
    assert button.has_flag(FLAG_SCROLL_ON_FOCUS)
    assert not button.has_flag(FLAG_SCROLLABLE)


def test_component_child_out_of_range():
    comp = create_stage_timer_button(None)
    with pytest.raises(IndexError):
        comp.child(len(comp.parts))
    with pytest.raises(IndexError):
        comp.child(-1)


def test_component_holds_given_parts():
    root = Widget()
    part = Widget(parent=root)
    comp = Component(root=root, parts=(root, part))
    assert comp.child(1) is part


@pytest.mark.parametrize("index", [-5, -1, 0, 2, 4, 9, 100])
def test_clamp_frame_stays_in_range(index):
    count = 5
    result = clamp_frame(index, count)
    assert 0 <= result <= count - 1
    if 0 <= index < count:
        assert result == index


def test_clamp_frame_ends():
    assert clamp_frame(-3, 5) == clamp_frame(0, 5)
    assert clamp_frame(10, 5) == 5 - 1


def test_clamp_frame_empty_set():
    with pytest.raises(ValueError):
        clamp_frame(0, 0)


def test_format_value_text():
    assert format_value_text("Val: ", 42, "%") == "Val: 42%"
    assert format_value_text("", 7.9, "") == "7"


def test_checked_text():
    w = Widget()
    assert checked_text(w, "ON", "OFF") == "OFF"
    w.add_state(STATE_CHECKED)
    assert checked_text(w, "ON", "OFF") == "ON"