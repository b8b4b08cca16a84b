import logging

import numpy as np
import pytest

from depth_threshold.alignment import StreamKind
from depth_threshold.camera_loop import CameraLoop, Session
from depth_threshold.controller import ThresholdController
from depth_threshold.masker import OutputMode

SCALE = 0.001


class FakeSource:
    def __init__(self, frames, changed=False):
        self.frames = list(frames)
        self.calls = 0
        self.changed = changed

    def get_frames(self):
        self.calls += 1
        return self.frames.pop(0)

    def profile_changed(self):
        return self.changed


class FakeDisplay:
    def __init__(self, keys):
        self.keys = list(keys)
        self.shown = []

    def show(self, image):
        self.shown.append(image)

    def poll_key(self):
        return self.keys.pop(0) if self.keys else 255


def _pair(raw=1000, h=3, w=4):
    depth = np.full((h, w), raw, dtype=np.uint16)
    color = np.full((h, w, 3), 77, dtype=np.uint8)
    return depth, color


def _loop(frames, keys, mode=OutputMode.BINARY, **kwargs):
    session = Session(depth_scale=SCALE, align_to=StreamKind.COLOR, mode=mode)
    source = FakeSource(frames, **kwargs)
    display = FakeDisplay(keys)
    loop = CameraLoop(source, display, ThresholdController(), session, show_status=False)
    return loop, source, display


def test_quit_ends_run_with_success():
    loop, source, display = _loop([_pair()] * 3, [255, ord("q")])
    assert loop.run() == 0
    assert source.calls == 2
    assert len(display.shown) == 2


def test_run_logs_session(caplog):
    loop, _, _ = _loop([_pair()], [ord("q")], mode=OutputMode.COLOR)
    with caplog.at_level(logging.INFO, logger="depth_threshold.camera_loop"):
        loop.run()
    assert "color mode" in caplog.text
    assert "aligned to color" in caplog.text


def test_key_affects_next_frame_only():
    # 1.9 m; default threshold 2.0 keeps it, after 's' (1.8) it is gone
    frames = [_pair(1900), _pair(1900), _pair(1900)]
    loop, _, display = _loop(frames, [ord("s"), 255, ord("q")])
    loop.run()
    assert np.all(display.shown[0] == 255)
    assert np.all(display.shown[1] == 0)
    assert np.all(display.shown[2] == 0)


def test_color_mode_shows_color():
    loop, _, display = _loop([_pair()], [ord("Q")], mode=OutputMode.COLOR)
    loop.run()
    assert display.shown[0].shape == (3, 4, 3)
    assert np.all(display.shown[0] == 77)


def test_format_mismatch_keeps_running_and_previous_output():
    good = _pair()
    bad = (np.full((3, 4), 1000, dtype=np.int32), good[1])
    loop, _, display = _loop([good, bad, good], [255, 255, ord("q")])
    assert loop.run() == 0
    assert len(display.shown) == 2
    assert loop.last_output is display.shown[-1]


def test_missing_frame_is_skipped():
    loop, _, display = _loop([None, _pair()], [255, ord("q")])
    assert loop.run() == 0
    assert len(display.shown) == 1


def test_profile_change_is_warned_once(caplog):
    loop, _, _ = _loop([_pair()] * 3, [255, 255, ord("q")], changed=True)
    loop.run()
    assert caplog.text.count("Stream configuration changed") == 1


def test_source_error_propagates():
    class BrokenSource:
        def get_frames(self):
            raise RuntimeError("Frame didn't arrive within 5000")

    session = Session(depth_scale=SCALE, align_to=StreamKind.COLOR, mode=OutputMode.BINARY)
    loop = CameraLoop(BrokenSource(), FakeDisplay([]), ThresholdController(), session, show_status=False)
    with pytest.raises(RuntimeError):
        loop.run()
