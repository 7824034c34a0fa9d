"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from zeroengine.app import App, LogPriority
from zeroengine.params import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH, AppParams

LOG_FORMAT = "[%(name)s] [%(levelname)s] %(message)s"


def _dimension(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line options."""
    parser = argparse.ArgumentParser(prog="zeroengine", description="Zero Engine")
    parser.add_argument("-t", "--title", default=DEFAULT_TITLE, help="Window title")
    parser.add_argument("-q", "--height", type=_dimension, default=DEFAULT_HEIGHT, help="Window height")
    parser.add_argument("-w", "--width", type=_dimension, default=DEFAULT_WIDTH, help="Window width")
    parser.add_argument("-s", "--scene", default="", help="Scene to load.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the engine; returns the process exit status."""
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    logging.basicConfig(level=logging.INFO, stream=sys.stdout, format=LOG_FORMAT)

    app = App()
    try:
        app.init(
            AppParams(
                app_title=args.title,
                window_height=args.height,
                window_width=args.width,
            )
        )
        app.run()
        return 0
    except Exception as exc:
        App.log(LogPriority.ERROR, str(exc))
        return 1
    except BaseException as exc:
        App.log(LogPriority.CRITICAL, f"Unknown exception occurred! {exc!r}")
        return 2
    finally:
        app.quit()


if __name__ == "__main__":
    raise SystemExit(main())