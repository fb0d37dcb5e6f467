import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import JsonExplorerError
from .navigator import DisplayOptions, Navigator
from .path import parse_path
from .utils import STYLES

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-explorer",
        description="Explore a JSON document as an expandable tree.",
    )
    parser.add_argument("file", nargs="?", help="JSON file to load")
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "--show-types", action="store_true", help="annotate nodes with their kind"
    )
    parser.add_argument(
        "--show-values", action="store_true", help="display scalar values"
    )
    parser.add_argument(
        "--path", default="", help='path of the subtree to display, e.g. "a.2.b"'
    )
    parser.add_argument(
        "--separator",
        default=".",
        help="separator of --path segments (default: %(default)s)",
    )
    parser.add_argument(
        "--expand-all",
        action="store_true",
        help="expand every node of displayed subtree",
    )
    parser.add_argument(
        "--line-type",
        default="ascii-ex",
        choices=sorted(STYLES),
        help="line drawing style of --print",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--print",
        dest="print_tree",
        action="store_true",
        help="print tree to stdout, no window",
    )
    output.add_argument(
        "--raw",
        action="store_true",
        help="print pretty printed subtree to stdout, no window",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    logger.debug("Arguments: %s", args)

    if not args.separator:
        parser.error("--separator cannot be empty")

    navigator = Navigator(
        DisplayOptions(
            show_node_types=args.show_types, show_node_values=args.show_values
        )
    )
    headless = args.print_tree or args.raw

    if headless and not args.file:
        parser.error("a file is required with --print and --raw")

    if not headless:
        # imported here, tkinter is not needed to print trees
        import tkinter as tk

        from .gui import MainWindow

        root = tk.Tk()
        window = MainWindow(root, navigator)
        if args.file and window.open_file(args.file):
            _prepare(navigator, args, open_root=False)
            window.refresh()
        root.mainloop()
        return 0

    try:
        navigator.load_file(args.file)
    except JsonExplorerError:
        return 1
    _prepare(navigator, args, open_root=True)
    if args.raw:
        sys.stdout.write(navigator.selected_text + "\n")
    else:
        sys.stdout.write(navigator.show(line_type=args.line_type))
    return 0


def _prepare(navigator: Navigator, args: argparse.Namespace, open_root: bool) -> None:
    path = parse_path(args.path, separator=args.separator)
    if path:
        navigator.navigate_to(path)
    if args.expand_all:
        navigator.expand_all()
    elif open_root:
        root = navigator.node(navigator.navigation_path)
        if root.accept_children:
            navigator.toggle(root.identifier)
