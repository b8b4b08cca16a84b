import logging

import numpy as np
import pyrealsense2 as rs

from depth_threshold import config
from depth_threshold.alignment import StreamProfile, find_stream_to_align, profile_changed, stream_profile_from
from depth_threshold.scale import get_depth_scale

logger = logging.getLogger(__name__)


def to_stream_profile(sp) -> StreamProfile:
    """rs.stream_profile -> StreamProfile"""
    return stream_profile_from(sp.stream_type().name, sp.unique_id())


class RealSenseSource:
    """
    RealSense capture side of the app
    - color (bgr8) + depth (z16) streams
    - depth scale / align target resolved once at start
    - get_frames() returns depth aligned to the target stream
    """

    def __init__(self, width=config.WIDTH, height=config.HEIGHT, fps=config.FPS,
                 warmup_frames=config.WARMUP_FRAMES):
        self.width = width
        self.height = height
        self.fps = fps
        self.warmup_frames = warmup_frames

        self.pipeline = rs.pipeline()
        self.rs_cfg = rs.config()
        self.rs_cfg.enable_stream(rs.stream.color, width, height, rs.format.bgr8, fps)
        self.rs_cfg.enable_stream(rs.stream.depth, width, height, rs.format.z16, fps)

        self.align = None
        self.depth_scale = None
        self.align_to = None
        self._start_profiles = []
        self._started = False

    def start(self):
        profile = self.pipeline.start(self.rs_cfg)
        self._started = True

        try:
            self.depth_scale = get_depth_scale(profile.get_device())
            self._start_profiles = [to_stream_profile(sp) for sp in profile.get_streams()]
            self.align_to = find_stream_to_align(self._start_profiles)
        except Exception:
            self.stop()
            raise
        self.align = rs.align(getattr(rs.stream, self.align_to.value))

        logger.info("RealSense started: %dx%d @ %dfps, depth scale=%.6f, align to %s",
                    self.width, self.height, self.fps, self.depth_scale, self.align_to.value)

        # auto exposure warm-up
        for _ in range(self.warmup_frames):
            self.pipeline.wait_for_frames()
        return self

    def profiles(self):
        active = self.pipeline.get_active_profile()
        return [to_stream_profile(sp) for sp in active.get_streams()]

    def profile_changed(self) -> bool:
        return profile_changed(self.profiles(), self._start_profiles)

    def get_frames(self):
        """
        Block until the next frameset and align it.
        Returns (depth uint16 HxW, color uint8 HxWx3), or None if a frame is missing.
        """
        frames = self.pipeline.wait_for_frames()
        frames = self.align.process(frames)

        depth_frame = frames.get_depth_frame()
        color_frame = frames.get_color_frame()
        if not depth_frame or not color_frame:
            return None

        depth = np.asanyarray(depth_frame.get_data())
        color = np.asanyarray(color_frame.get_data())
        return depth, color

    def stop(self):
        if self._started:
            self.pipeline.stop()
            self._started = False
            logger.info("RealSense stopped")

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
