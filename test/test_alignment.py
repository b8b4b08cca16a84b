import itertools

import pytest

from depth_threshold.alignment import (
    StreamKind,
    StreamProfile,
    find_stream_to_align,
    profile_changed,
    stream_profile_from,
)
from depth_threshold.errors import NoAlignmentTargetError, NoDepthStreamError, StartupError

DEPTH = StreamProfile(StreamKind.DEPTH, 1)
COLOR = StreamProfile(StreamKind.COLOR, 2)
IR = StreamProfile(StreamKind.INFRARED, 3)
FISHEYE = StreamProfile(StreamKind.FISHEYE, 4)


def test_infrared_when_no_color():
    assert find_stream_to_align([DEPTH, IR]) is StreamKind.INFRARED


@pytest.mark.parametrize("order", list(itertools.permutations([DEPTH, IR, COLOR])))
def test_color_wins_in_any_order(order):
    assert find_stream_to_align(order) is StreamKind.COLOR


def test_first_non_depth_stream_without_color():
    assert find_stream_to_align([IR, DEPTH, FISHEYE]) is StreamKind.INFRARED
    assert find_stream_to_align([FISHEYE, DEPTH, IR]) is StreamKind.FISHEYE


def test_color_not_displaced_by_later_streams():
    assert find_stream_to_align([COLOR, DEPTH, IR, FISHEYE]) is StreamKind.COLOR


def test_depth_only_has_no_target():
    with pytest.raises(NoAlignmentTargetError):
        find_stream_to_align([DEPTH])


def test_no_depth_stream():
    with pytest.raises(NoDepthStreamError):
        find_stream_to_align([])
    with pytest.raises(NoDepthStreamError):
        find_stream_to_align([COLOR, IR])


def test_errors_are_startup_errors():
    assert issubclass(NoAlignmentTargetError, StartupError)
    assert issubclass(NoDepthStreamError, StartupError)


def test_profile_changed_only_when_stream_is_missing():
    a = StreamProfile(StreamKind.DEPTH, 10)
    b = StreamProfile(StreamKind.COLOR, 11)
    assert profile_changed([a, b], [a]) is False
    assert profile_changed([a], [a, b]) is True
    assert profile_changed([a, b], [b, a]) is False


def test_profile_changed_compares_unique_id():
    old = StreamProfile(StreamKind.COLOR, 11)
    new = StreamProfile(StreamKind.COLOR, 12)
    assert profile_changed([new], [old]) is True


def test_any_stream_is_never_a_target():
    wildcard = StreamProfile(StreamKind.ANY, 5)
    with pytest.raises(NoAlignmentTargetError):
        find_stream_to_align([wildcard, DEPTH])
    assert find_stream_to_align([wildcard, DEPTH, IR]) is StreamKind.INFRARED


def test_stream_profile_from_rs_name():
    assert stream_profile_from("color", 7) == StreamProfile(StreamKind.COLOR, 7)
    assert stream_profile_from("Infrared", 8).kind is StreamKind.INFRARED


def test_unknown_stream_name_is_a_startup_error():
    with pytest.raises(StartupError, match="safety"):
        stream_profile_from("safety", 9)
