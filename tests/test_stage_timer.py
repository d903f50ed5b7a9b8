import pytest

from rangepanel.stage_timer import (
    DEFAULT_STAGE_TIME_SECONDS,
    LABEL_PAUSE,
    LABEL_RESUME,
    LABEL_START,
    MAX_STAGE_TIME_SECONDS,
    MIN_STAGE_TIME_SECONDS,
    TIME_ADJUST_INCREMENT_SECONDS,
    StageTimer,
    format_mmss,
)


def _parse(text):
    minutes, seconds = text.split(":")
    return int(minutes) * 60 + int(seconds)


def test_format_zero():
    assert format_mmss(0) == "00:00"


def test_format_maximum():
    assert format_mmss(MAX_STAGE_TIME_SECONDS) == "59:59"


@pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 299, 300, 1234, MAX_STAGE_TIME_SECONDS])
def test_format_round_trip(seconds):
    text = format_mmss(seconds)
    assert _parse(text) == seconds
    assert len(text) == 5


def test_format_negative_raises():
    with pytest.raises(ValueError):
        format_mmss(-1)


def test_defaults():
    timer = StageTimer()
    assert timer.set_seconds == DEFAULT_STAGE_TIME_SECONDS
    assert timer.remaining == DEFAULT_STAGE_TIME_SECONDS
    assert timer.running is False
    assert timer.button_label == LABEL_START
    assert timer.controls_enabled is True
    assert _parse(timer.display_text) == DEFAULT_STAGE_TIME_SECONDS


@pytest.mark.parametrize("seconds", [-1, MAX_STAGE_TIME_SECONDS + 1])
def test_invalid_length_raises(seconds):
    with pytest.raises(ValueError):
        StageTimer(seconds)


def test_start_and_pause_labels():
    timer = StageTimer()
    assert timer.start() is True
    assert timer.running is True
    assert timer.button_label == LABEL_PAUSE
    assert timer.controls_enabled is False
    assert timer.start() is False
    assert timer.pause() is True
    assert timer.running is False
    assert timer.button_label == LABEL_RESUME
    assert timer.pause() is False


def test_start_with_no_time_does_nothing():
    timer = StageTimer(MIN_STAGE_TIME_SECONDS)
    assert timer.start() is False
    assert timer.running is False
    assert timer.button_label == LABEL_START


def test_toggle_alternates():
    timer = StageTimer()
    assert timer.toggle() is True
    assert timer.button_label == LABEL_PAUSE
    assert timer.toggle() is False
    assert timer.button_label == LABEL_RESUME
    assert timer.toggle() is True


def test_tick_counts_down_only_while_running():
    timer = StageTimer()
    assert timer.tick() is False
    assert timer.remaining == DEFAULT_STAGE_TIME_SECONDS
    timer.start()
    assert timer.tick() is True
    assert timer.remaining == DEFAULT_STAGE_TIME_SECONDS - 1
    timer.pause()
    timer.tick()
    assert timer.remaining == DEFAULT_STAGE_TIME_SECONDS - 1


def test_tick_stops_on_tick_after_zero():
    timer = StageTimer(TIME_ADJUST_INCREMENT_SECONDS)
    timer.start()
    for _ in range(TIME_ADJUST_INCREMENT_SECONDS):
        assert timer.tick() is True
    assert timer.remaining == 0
    assert timer.running is True
    assert timer.tick() is False
    assert timer.running is False
    assert timer.remaining == 0
    assert timer.button_label == LABEL_START
    assert timer.controls_enabled is True


def test_reset_refills_and_stops():
    timer = StageTimer()
    timer.start()
    timer.tick()
    timer.tick()
    timer.reset()
    assert timer.running is False
    assert timer.remaining == timer.set_seconds
    assert timer.button_label == LABEL_START
    assert timer.controls_enabled is True


def test_increase_adds_increment():
    timer = StageTimer()
    assert timer.increase() is True
    assert timer.set_seconds == DEFAULT_STAGE_TIME_SECONDS + TIME_ADJUST_INCREMENT_SECONDS
    assert timer.remaining == timer.set_seconds


def test_increase_caps_at_maximum():
    timer = StageTimer(MAX_STAGE_TIME_SECONDS - TIME_ADJUST_INCREMENT_SECONDS + 1)
    timer.increase()
    assert timer.set_seconds == MAX_STAGE_TIME_SECONDS
    timer.increase()
    assert timer.set_seconds == MAX_STAGE_TIME_SECONDS
    assert timer.remaining == MAX_STAGE_TIME_SECONDS


def test_decrease_removes_increment_and_floors():
    timer = StageTimer(TIME_ADJUST_INCREMENT_SECONDS + 1)
    timer.decrease()
    assert timer.set_seconds == 1
    timer.decrease()
    assert timer.set_seconds == MIN_STAGE_TIME_SECONDS
    timer.decrease()
    assert timer.set_seconds == MIN_STAGE_TIME_SECONDS
    assert timer.remaining == MIN_STAGE_TIME_SECONDS


def test_adjust_ignored_while_running():
    timer = StageTimer()
    timer.start()
    assert timer.increase() is False
    assert timer.decrease() is False
    assert timer.set_seconds == DEFAULT_STAGE_TIME_SECONDS


def test_adjust_after_pause_refills_remaining():
    timer = StageTimer()
    timer.start()
    timer.tick()
    timer.pause()
    assert timer.increase() is True
    assert timer.remaining == timer.set_seconds


def test_increase_then_decrease_round_trip():
    timer = StageTimer()
    timer.increase()
    timer.decrease()
    assert timer.set_seconds == DEFAULT_STAGE_TIME_SECONDS
    assert timer.remaining == DEFAULT_STAGE_TIME_SECONDS