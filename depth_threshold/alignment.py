from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from depth_threshold.errors import NoAlignmentTargetError, NoDepthStreamError, StartupError


class StreamKind(Enum):
    """Stream types, named after ``rs.stream`` members."""
    ANY = "any"
    DEPTH = "depth"
    COLOR = "color"
    INFRARED = "infrared"
    FISHEYE = "fisheye"
    GYRO = "gyro"
    ACCEL = "accel"
    GPIO = "gpio"
    POSE = "pose"
    CONFIDENCE = "confidence"
    MOTION = "motion"


@dataclass(frozen=True)
class StreamProfile:
    kind: StreamKind
    unique_id: int


def stream_profile_from(stream_name: str, unique_id: int) -> StreamProfile:
    """rs.stream name (e.g. "color") + unique id -> StreamProfile"""
    try:
        kind = StreamKind(stream_name.lower())
    except ValueError:
        raise StartupError(f"Unsupported stream type reported by device: {stream_name!r}") from None
    return StreamProfile(kind=kind, unique_id=int(unique_id))


def find_stream_to_align(profiles: Sequence[StreamProfile]) -> StreamKind:
    """
    Pick the stream depth gets aligned to.

    Color is preferred so the preview looks natural. Without color the
    first non-depth stream in scan order is used.
    """
    align_to = None
    depth_found = False
    color_found = False

    for profile in profiles:
        if profile.kind == StreamKind.DEPTH:
            depth_found = True
            continue
        if profile.kind == StreamKind.ANY:
            # wildcard, not a real stream to align to
            continue

        if profile.kind == StreamKind.COLOR:
            color_found = True
            align_to = StreamKind.COLOR
        elif not color_found and align_to is None:
            align_to = profile.kind

    if not depth_found:
        raise NoDepthStreamError("No Depth stream available")

    if align_to is None:
        raise NoAlignmentTargetError("No stream found to align with Depth")

    return align_to


def profile_changed(current: Iterable[StreamProfile], previous: Iterable[StreamProfile]) -> bool:
    # True when a stream that was active before is gone now.
    # Newly added streams alone do not count.
    current_ids = {sp.unique_id for sp in current}
    return any(sp.unique_id not in current_ids for sp in previous)
