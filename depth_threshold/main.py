import argparse
import logging
import sys

from depth_threshold import config
from depth_threshold.camera_loop import CameraLoop, Session
from depth_threshold.controller import ThresholdController
from depth_threshold.display import PreviewWindow
from depth_threshold.errors import StartupError
from depth_threshold.masker import OutputMode

logger = logging.getLogger("depth_threshold")

APP_INFO = (
    "Distance threshold preview\n"
    "Intel RealSense (pyrealsense2) & OpenCV\n"
    "*Depth is aligned to the color stream; align() is CPU heavy and can lower fps.\n"
)


def print_app_info():
    line = "-" * 80
    print(line)
    print(APP_INFO, end="")
    print(line + "\n")


def print_user_manual():
    print(f"Press key 'A' to increase distance by {config.LARGE_STEP} meter.")
    print(f"Press key 'S' to decrease distance by {config.LARGE_STEP} meter.")
    print(f"Press key 'Z' to increase distance by {config.SMALL_STEP} meter.")
    print("Press key 'Q' to exit the program.\n")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Live RealSense depth threshold preview")
    parser.add_argument("--mode", choices=[m.value for m in OutputMode],
                        default=config.OUTPUT_MODE.value,
                        help="binary: white mask, color: color pixels inside the threshold")
    parser.add_argument("--width", type=int, default=config.WIDTH)
    parser.add_argument("--height", type=int, default=config.HEIGHT)
    parser.add_argument("--fps", type=int, default=config.FPS)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def run_app(args) -> int:
    # imported here so --help works without a RealSense runtime
    from depth_threshold.realsense_source import RealSenseSource

    with RealSenseSource(width=args.width, height=args.height, fps=args.fps) as source, \
            PreviewWindow() as window:
        session = Session(
            depth_scale=source.depth_scale,
            align_to=source.align_to,
            mode=OutputMode(args.mode),
        )

        print_app_info()
        print_user_manual()

        loop = CameraLoop(source=source, display=window,
                          controller=ThresholdController(), session=session)
        return loop.run()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return run_app(args)
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        return 1
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
        return 130
    except Exception as e:
        # device errors from pyrealsense2 land here; no reconnect
        logger.error("Fatal error: %s", describe_error(e), exc_info=args.verbose)
        return 1


def describe_error(e: Exception) -> str:
    """rs.error carries the failed SDK call and its arguments; other errors are just str(e)."""
    failed_function = getattr(e, "get_failed_function", None)
    if failed_function is None:
        return str(e)
    failed_args = getattr(e, "get_failed_args", lambda: "")()
    return f"RealSense error calling {failed_function()}({failed_args}): {e}"


if __name__ == "__main__":
    sys.exit(main())
