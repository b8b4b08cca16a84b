import cv2
import numpy as np

from depth_threshold import config


class PreviewWindow:
    """Single OpenCV window: shows one image per frame and reads one key."""

    def __init__(self, name=config.WINDOW_NAME):
        self.name = name
        self._opened = False

    def open(self):
        cv2.namedWindow(self.name, cv2.WINDOW_AUTOSIZE)
        self._opened = True

    def show(self, image: np.ndarray):
        if not self._opened:
            self.open()
        cv2.imshow(self.name, image)

    def poll_key(self) -> int:
        # non-blocking; 255 when nothing was pressed
        return cv2.waitKey(1) & 0xFF

    def close(self):
        if self._opened:
            cv2.destroyWindow(self.name)
            self._opened = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
