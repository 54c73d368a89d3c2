"""
Command line interface.

    brightnessqs to-sys 50       # UI slider percentage to system brightness
    brightnessqs to-pct 128      # system brightness to UI slider percentage
    brightnessqs table --step 10 # print the curve
"""

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from colorama import Fore, Style, just_fix_windows_console

from .config import load_config
from .converter import conversion_table, sys_brightness_to_ui_pct, ui_pct_to_sys_brightness
from .exceptions import ConfigurationError, InvalidArgumentError
from .logs import setup_logging
from .utils import run_with_keyboard_interrupt

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


class Printer:
    """Writes results to stdout, coloured unless disabled"""

    def __init__(self, colour: bool = True):
        self.colour = colour

    def paint(self, text: str, *styles: str) -> str:
        if not self.colour:
            return text
        return "".join(styles) + text + Style.RESET_ALL

    def value(self, label: str, value: int) -> None:
        print(self.paint(f"{label}: ", Style.DIM) + self.paint(str(value), Style.BRIGHT, Fore.CYAN))

    def table(self, rows: list[tuple[int, int, int]]) -> None:
        print(self.paint(f"{'UI %':>6}  {'SYS':>5}  {'UI % (back)':>11}", Style.BRIGHT))
        for ui_pct, sys_brightness, round_trip in rows:
            drift = abs(round_trip - ui_pct)
            # Low end of the 0-255 scale is coarser than a slider step
            back = self.paint(f"{round_trip:>11}", Fore.RED) if drift > 1 else f"{round_trip:>11}"
            print(f"{ui_pct:>6}  " + self.paint(f"{sys_brightness:>5}", Fore.CYAN) + f"  {back}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brightnessqs",
        description="Convert between system brightness (0-255) and a perceptually linear UI slider percentage (0-100)."
    )
    parser.add_argument("--config", metavar="PATH", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--no-colour", dest="colour", action="store_false", default=None, help="disable coloured output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_sys = subparsers.add_parser("to-sys", help="UI slider percentage to system brightness")
    to_sys.add_argument("ui_pct", type=int, help="UI slider percentage, 0-100")

    to_pct = subparsers.add_parser("to-pct", help="system brightness to UI slider percentage")
    to_pct.add_argument("sys_brightness", type=int, help="system brightness, 0-255")

    table = subparsers.add_parser("table", help="print the conversion table")
    table.add_argument("--step", type=int, help="distance between rows")
    table.add_argument("--start", type=int, help="first UI percentage")
    table.add_argument("--stop", type=int, help="last UI percentage (inclusive)")

    return parser


def run(args: argparse.Namespace, config: dict[str, Any]) -> int:
    printer = Printer(colour=config["output"]["colour"] if args.colour is None else args.colour)

    match args.command:
        case "to-sys":
            printer.value("sys_brightness", ui_pct_to_sys_brightness(args.ui_pct))
        case "to-pct":
            printer.value("ui_pct", sys_brightness_to_ui_pct(args.sys_brightness))
        case "table":
            table_config = config["table"]
            rows = conversion_table(
                step=args.step if args.step is not None else table_config["step"],
                start=args.start if args.start is not None else table_config["start"],
                stop=args.stop if args.stop is not None else table_config["stop"],
            )
            printer.table(rows)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    try:
        config = load_config(args.config)
        log_config = config["logging"]
        setup_logging(
            level="DEBUG" if args.verbose else log_config["level"],
            log_file=log_config["file"],
            max_bytes=log_config["max_bytes"],
            backup_count=log_config["backup_count"],
        )
        logger.debug(f"Running '{args.command}' with config {args.config or '(defaults)'}")
        return run(args, config)
    except (InvalidArgumentError, ConfigurationError) as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_INVALID


def console_main() -> None:
    """Entry point for the `brightnessqs` console script"""
    run_with_keyboard_interrupt(main)
