"""
depth_threshold - settings (config.py)
All startup constants live here and are read once.
Other modules use ``from depth_threshold import config``.
"""

from depth_threshold.masker import OutputMode

# ── RealSense camera ───────────────────────────────────
# [edit point] change resolution / FPS here only
WIDTH = 640
HEIGHT = 480
FPS = 30

# framesets discarded after start so auto exposure can settle
WARMUP_FRAMES = 30

# ── Output ─────────────────────────────────────────────
# BINARY: white mask, COLOR: color pixels inside the threshold
OUTPUT_MODE = OutputMode.COLOR
WINDOW_NAME = "Distance threshold result"

# ── Distance threshold (meters) ────────────────────────
DEFAULT_DISTANCE = 2.0
MAX_DISTANCE = 10.0
LARGE_STEP = 0.2
SMALL_STEP = 0.1

# ── Sanity checks ──────────────────────────────────────
assert WIDTH > 0 and HEIGHT > 0, "camera resolution must be positive"
assert FPS > 0, "fps must be positive"
assert WARMUP_FRAMES >= 0, "warm-up frame count cannot be negative"
assert 0.0 <= DEFAULT_DISTANCE <= MAX_DISTANCE, "default distance outside [0, MAX_DISTANCE]"
assert 0.0 < SMALL_STEP <= LARGE_STEP, "step sizes must be positive and small <= large"
