from enum import Enum

from depth_threshold import config


class Command(Enum):
    NONE = "none"
    INCREASE_LARGE = "increase_large"
    DECREASE_LARGE = "decrease_large"
    INCREASE_SMALL = "increase_small"
    QUIT = "quit"


# There is no small decrease key.
KEY_COMMANDS = {
    "a": Command.INCREASE_LARGE,
    "s": Command.DECREASE_LARGE,
    "z": Command.INCREASE_SMALL,
    "q": Command.QUIT,
}


def command_for_key(key: int) -> Command:
    """cv2.waitKey code -> Command (case-insensitive). No key (-1 / 255) is NONE."""
    if key < 0 or key > 0x7F:
        return Command.NONE
    return KEY_COMMANDS.get(chr(key).lower(), Command.NONE)


class ThresholdController:
    """
    Owns the distance threshold (meters).

    The value only changes through ``apply``. After every step it is
    clamped: below 0 -> 0, above MAX_DISTANCE -> back to the default.
    """

    def __init__(
        self,
        default=config.DEFAULT_DISTANCE,
        max_distance=config.MAX_DISTANCE,
        large_step=config.LARGE_STEP,
        small_step=config.SMALL_STEP,
    ):
        self.default = float(default)
        self.max_distance = float(max_distance)
        self._steps = {
            Command.INCREASE_LARGE: float(large_step),
            Command.DECREASE_LARGE: -float(large_step),
            Command.INCREASE_SMALL: float(small_step),
        }
        self._value = self.default

    @property
    def value(self) -> float:
        return self._value

    def apply(self, command: Command) -> bool:
        """Apply one command. Returns False when the loop should stop."""
        if command == Command.QUIT:
            return False

        step = self._steps.get(command)
        if step is None:
            return True

        # snapped to micrometers so repeated 0.1 / 0.2 steps land on exact values
        value = round(self._value + step, 6)
        if value < 0.0:
            value = 0.0
        if value > self.max_distance:
            # overflow goes back to the default, not to max_distance
            value = self.default
        self._value = value
        return True
