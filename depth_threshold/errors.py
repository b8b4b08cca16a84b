class StartupError(RuntimeError):
    """Camera setup failed; the app cannot start."""


class NoDepthSensorError(StartupError):
    pass


class NoDepthStreamError(StartupError):
    pass


class NoAlignmentTargetError(StartupError):
    pass
