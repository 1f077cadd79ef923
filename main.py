#!/usr/bin/env python3
"""ObjTasks - Object, JSON and CSS selector exercise utilities.

Commands:
    selector     Build a CSS selector from fragments
    rectangle    Print a rectangle as JSON with its area
    init-config  Write a default configuration file
"""

import argparse
import logging
import sys

logger = logging.getLogger("objtasks")


class FragmentAction(argparse.Action):
    """Record selector fragments in the order they appear on the command line."""

    def __call__(self, parser, namespace, values, option_string=None):
        fragments = list(getattr(namespace, "fragments", None) or [])
        fragments.append((self.dest, values))
        namespace.fragments = fragments


def cmd_selector(args):
    """Build a compound selector from fragment options, in the given order."""
    from objtasks.utils.selectors import Selector, SelectorError

    selector = Selector()
    try:
        for kind, value in args.fragments or []:
            getattr(selector, kind)(value)
    except SelectorError as e:
        logger.error(f"Invalid selector: {e}")
        return 1

    print(selector.stringify())
    return 0


def cmd_rectangle(args):
    """Print a rectangle as JSON followed by its area."""
    from objtasks.core.models import rectangle
    from objtasks.utils.serialization import SerializationError, get_json

    rect = rectangle(args.width, args.height)
    try:
        print(get_json(rect, args.config_obj.serialization))
    except SerializationError as e:
        logger.error(f"Serialization failed: {e}")
        return 1

    print(rect.get_area())
    return 0


def cmd_init_config(args):
    """Write a default configuration file."""
    from objtasks.core.config import create_default_config

    create_default_config(args.output)
    logger.info(f"Config written to: {args.output}")
    return 0


def _number(value: str):
    """Parse an int if possible, otherwise a float."""
    try:
        return int(value)
    except ValueError:
        return float(value)


def main(argv=None):
    from objtasks.core.config import load_config
    from objtasks.core.logs import setup_logging

    parser = argparse.ArgumentParser(
        description="ObjTasks - Object, JSON and CSS selector exercise utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to config YAML file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Selector command
    selector_parser = subparsers.add_parser("selector", help="Build a CSS selector")
    selector_parser.add_argument("--element", dest="element", action=FragmentAction, help="Element type name")
    selector_parser.add_argument("--id", dest="id", action=FragmentAction, help="Element id")
    selector_parser.add_argument("--class", dest="class_", action=FragmentAction, help="Class name (repeatable)")
    selector_parser.add_argument("--attr", dest="attr", action=FragmentAction,
                                 help='Attribute expression, e.g. href$=".png"')
    selector_parser.add_argument("--pseudo-class", dest="pseudo_class", action=FragmentAction,
                                 help="Pseudo-class (repeatable)")
    selector_parser.add_argument("--pseudo-element", dest="pseudo_element", action=FragmentAction,
                                 help="Pseudo-element")
    selector_parser.set_defaults(func=cmd_selector, fragments=None)

    # Rectangle command
    rectangle_parser = subparsers.add_parser("rectangle", help="Print a rectangle as JSON")
    rectangle_parser.add_argument("width", type=_number, help="Rectangle width")
    rectangle_parser.add_argument("height", type=_number, help="Rectangle height")
    rectangle_parser.set_defaults(func=cmd_rectangle)

    # Init-config command
    init_parser = subparsers.add_parser("init-config", help="Write a default config file")
    init_parser.add_argument("-o", "--output", default="objtasks.config.yaml", help="Output path")
    init_parser.set_defaults(func=cmd_init_config)

    args = parser.parse_args(argv)

    args.config_obj = load_config(args.config)
    setup_logging(args.config_obj.logging, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
