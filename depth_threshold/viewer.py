"""
Raw stream viewer: color frame and colorized depth frame next to each other.
Any key closes the window.
"""
import logging
import sys

import cv2
import numpy as np

from depth_threshold import config

logger = logging.getLogger(__name__)

WINDOW_NAME = "color | depth"
# rs.colorizer color_scheme 2 = white to black
COLOR_SCHEME_WHITE_TO_BLACK = 2.0


def side_by_side(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """hstack two BGR images; right is resized to left's height."""
    if left.ndim == 2:
        left = cv2.cvtColor(left, cv2.COLOR_GRAY2BGR)
    if right.ndim == 2:
        right = cv2.cvtColor(right, cv2.COLOR_GRAY2BGR)

    h = left.shape[0]
    if right.shape[0] != h:
        w = int(round(right.shape[1] * h / right.shape[0]))
        right = cv2.resize(right, (w, h), interpolation=cv2.INTER_NEAREST)
    return np.hstack([left, right])


def run(width=config.WIDTH, height=config.HEIGHT, fps=config.FPS, warmup_frames=config.WARMUP_FRAMES):
    import pyrealsense2 as rs

    pipeline = rs.pipeline()
    rs_cfg = rs.config()
    rs_cfg.enable_stream(rs.stream.color, width, height, rs.format.bgr8, fps)
    rs_cfg.enable_stream(rs.stream.depth, width, height, rs.format.z16, fps)

    colorizer = rs.colorizer()
    colorizer.set_option(rs.option.histogram_equalization_enabled, 1.0)
    colorizer.set_option(rs.option.color_scheme, COLOR_SCHEME_WHITE_TO_BLACK)

    pipeline.start(rs_cfg)
    try:
        for _ in range(warmup_frames):
            pipeline.wait_for_frames()

        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
        while cv2.waitKey(1) < 0:
            frames = pipeline.wait_for_frames()
            color_frame = frames.get_color_frame()
            depth_frame = frames.get_depth_frame()
            if not color_frame or not depth_frame:
                continue

            color = np.asanyarray(color_frame.get_data())
            depth_vis = np.asanyarray(colorizer.colorize(depth_frame).get_data())
            cv2.imshow(WINDOW_NAME, side_by_side(color, depth_vis))
    finally:
        pipeline.stop()
        cv2.destroyAllWindows()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")
    try:
        run()
    except Exception as e:
        logger.error("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
