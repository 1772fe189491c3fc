"""Command-line entry point for the LC-3 virtual machine.

    python main.py program.obj            run to HALT on the terminal
    python main.py program.obj --debug    open the stepping debugger
"""
import argparse
import logging
import sys

from lc3.config import MachineConfig
from lc3.console import TerminalConsole
from lc3.cpu_core import LC3
from lc3.errors import ConfigError, ImageIOError, MachineFault
from lc3.loader import decode_image, read_image

logger = logging.getLogger("lc3")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lc3-vm",
        description="A virtual machine for the LC-3 architecture",
    )
    parser.add_argument("image_file", help="path to an LC-3 program image")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="open the interactive stepping debugger")
    parser.add_argument("--config", metavar="PATH",
                        help="JSON machine configuration")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="increase log verbosity (-v info, -vv debug)")
    return parser


def setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def run_debugger(image: bytes, config: MachineConfig) -> int:
    from debugger.main_window import run
    from debugger.session import Debugger

    with TerminalConsole() as console:
        session = Debugger(LC3(console=console, config=config), image)
        return run(session)


def run_batch(image: bytes, config: MachineConfig) -> int:
    with TerminalConsole() as console:
        vm = LC3(console=console, config=config)
        vm.load_image(image)
        try:
            vm.run()
        except MachineFault as e:
            # the program faulted; not a process-level error
            console.flush()
            print(f"\nPANIC: {e}", file=sys.stderr)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = MachineConfig.load(args.config) if args.config else MachineConfig()
        image = read_image(args.image_file)
        origin, words = decode_image(image)
    except (ConfigError, ImageIOError) as e:
        print(f"lc3-vm: {e}", file=sys.stderr)
        return 1
    logger.info("%s: %d words at x%04X", args.image_file, len(words), origin)

    try:
        if args.debug:
            return run_debugger(image, config)
        return run_batch(image, config)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
