import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from depth_threshold.alignment import StreamKind
from depth_threshold.controller import ThresholdController, command_for_key
from depth_threshold.masker import OutputMode, apply_threshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """Values resolved once at startup, read-only afterwards."""
    depth_scale: float
    align_to: StreamKind
    mode: OutputMode


class CameraLoop:
    """
    One iteration = get frames -> threshold -> show -> read key -> apply.

    source:  get_frames() -> (depth, color) or None; optional profile_changed()
    display: show(image), poll_key() -> int
    """

    def __init__(self, source, display, controller: ThresholdController, session: Session,
                 show_status=True):
        self.source = source
        self.display = display
        self.controller = controller
        self.session = session
        self.show_status = show_status

        self.last_output: Optional[np.ndarray] = None
        self._profile_warned = False

    def _check_profiles(self):
        check = getattr(self.source, "profile_changed", None)
        if check is None or self._profile_warned:
            return
        if check():
            logger.warning("Stream configuration changed since startup; "
                           "depth scale / align target may be stale")
            self._profile_warned = True

    def step(self) -> bool:
        """Run one frame. Returns False once the user quits."""
        out = self.source.get_frames()
        if out is not None:
            depth, color = out
            # the threshold used for this frame is the one before this frame's key
            threshold = self.controller.value

            if self.show_status:
                print(f"Current distance threshold value is: {threshold:.1f}", end="\r", flush=True)

            result = apply_threshold(self.session.mode, depth, color,
                                     self.session.depth_scale, threshold)
            if result is not None:
                self.last_output = result
                self.display.show(result)

        self._check_profiles()

        key = self.display.poll_key()
        return self.controller.apply(command_for_key(key))

    def run(self) -> int:
        logger.info("Thresholding in %s mode, depth aligned to %s, depth scale=%.6f",
                    self.session.mode.value, self.session.align_to.value, self.session.depth_scale)
        while self.step():
            pass
        if self.show_status:
            print()
        return 0
