import logging
from enum import Enum
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

ON = np.iinfo(np.uint8).max  # 255


class OutputMode(Enum):
    BINARY = "binary"
    COLOR = "color"


def depth_to_meters(depth: np.ndarray, depth_scale: float) -> np.ndarray:
    """raw z16 units -> meters (float32). 65535 * scale stays far inside float range."""
    return depth.astype(np.float32) * np.float32(depth_scale)


def _is_z16(depth: np.ndarray) -> bool:
    if depth.dtype == np.uint16 and depth.ndim == 2:
        return True
    logger.warning(
        "FormatMismatch: depth frame should be 16 bit (z16, HxW), got dtype=%s shape=%s; frame skipped",
        depth.dtype, depth.shape,
    )
    return False


def _foreground(depth: np.ndarray, depth_scale: float, threshold: float) -> np.ndarray:
    # strict '<': a pixel exactly at the threshold is background
    return depth_to_meters(depth, depth_scale) < np.float32(threshold)


def threshold_mask(depth: np.ndarray, depth_scale: float, threshold: float) -> Optional[np.ndarray]:
    """
    Binary mode: 255 where the pixel is closer than ``threshold`` meters, 0 elsewhere.

    Returns None (and logs a warning) if depth is not a z16 frame.
    """
    if not _is_z16(depth):
        return None

    dst = np.zeros(depth.shape, dtype=np.uint8)
    dst[_foreground(depth, depth_scale, threshold)] = ON
    return dst


def threshold_color(
    depth: np.ndarray,
    color: np.ndarray,
    depth_scale: float,
    threshold: float,
) -> Optional[np.ndarray]:
    """
    Color mode: keep the BGR pixel where the depth is closer than ``threshold``,
    black elsewhere.

    depth and color must share H, W (rs.align guarantees it); otherwise ValueError.
    Returns None (and logs a warning) if depth is not a z16 frame.
    """
    if not _is_z16(depth):
        return None

    if color.ndim != 3 or color.shape[2] != 3:
        raise ValueError(f"color frame must be HxWx3, got shape={color.shape}")
    if color.shape[:2] != depth.shape:
        raise ValueError(
            f"depth {depth.shape} and color {color.shape[:2]} frames are not aligned"
        )

    dst = np.zeros((depth.shape[0], depth.shape[1], 3), dtype=np.uint8)
    keep = _foreground(depth, depth_scale, threshold)
    dst[keep] = color[keep]
    return dst


def apply_threshold(
    mode: OutputMode,
    depth: np.ndarray,
    color: np.ndarray,
    depth_scale: float,
    threshold: float,
) -> Optional[np.ndarray]:
    if mode == OutputMode.BINARY:
        return threshold_mask(depth, depth_scale, threshold)
    return threshold_color(depth, color, depth_scale, threshold)
