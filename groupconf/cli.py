"""
Command-line interface for groupconf.

Usage:
    groupconf app.conf                         # list every group.key = value
    groupconf app.conf --get server.port       # print one value
    groupconf app.conf --get server.port --type u32
    groupconf app.conf --get a.b --default x   # fallback when missing
    groupconf app.conf --strictness very --on-violation panic
    groupconf --options                        # show effective parser options
    groupconf --version                        # show version
"""

import argparse
import sys

from ._version import __version__
from .options import StringStrictness, StringStrictnessBehavior


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = argparse.ArgumentParser(
        prog="groupconf",
        description="Read a grouped key/value configuration file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  groupconf app.conf                          # list all values\n"
            "  groupconf app.conf --get server.port        # print one value\n"
            "  groupconf app.conf --get server.debug --type bool\n"
            "  groupconf app.conf --strictness forgivable  # drop spaced values\n"
        ),
    )

    p.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="configuration file to read",
    )

    p.add_argument(
        "--get", "-g",
        metavar="GROUP.KEY",
        dest="get_key",
        help="print the value of KEY in GROUP",
    )

    p.add_argument(
        "--default", "-d",
        metavar="VALUE",
        help="value to print when --get finds nothing",
    )

    p.add_argument(
        "--type", "-t",
        dest="cast",
        choices=["str", "i32", "u32", "i64", "u64", "f32", "f64",
                 "int", "float", "bool", "bool-lenient"],
        default="str",
        help="convert the --get value before printing (default: str)",
    )

    p.add_argument(
        "--strictness",
        choices=[s.value for s in StringStrictness],
        help="string strictness (default: from options file, else loose)",
    )

    p.add_argument(
        "--on-violation",
        choices=[b.value for b in StringStrictnessBehavior],
        help="drop offending values or abort (default: from options file, else ignore)",
    )

    p.add_argument(
        "--options",
        action="store_true",
        dest="show_options",
        help="show effective parser options",
    )

    p.add_argument(
        "--version", "-V",
        action="version",
        version=f"groupconf {__version__}",
    )

    return p


def main(argv=None):
    """Main entry point.

    Dispatch priority: options → get → list.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load default options and apply CLI overrides
    from .options import load_options
    options = load_options()
    options = options.with_overrides(
        string_strictness=args.strictness,
        string_strictness_behavior=args.on_violation,
    )

    if args.show_options:
        _cmd_options(options)
        return

    if not args.file:
        parser.error("FILE is required")

    from .errors import GroupConfError
    from .reader import read
    try:
        doc = read(args.file, options)
    except GroupConfError as e:
        print(f"groupconf: {e}", file=sys.stderr)
        sys.exit(1)

    if args.get_key is not None:
        _cmd_get(doc, args.get_key, args.default, args.cast)
        return

    _cmd_list(doc)


def _cmd_options(options):
    """Show effective parser options."""
    from .options import format_options
    print(format_options(options))


def _cmd_list(doc):
    """Print every value as group.key = value, in source order."""
    for name, group in doc.for_each_group():
        for item in group.for_each():
            print(f"{name}.{item.key} = {item.value}")


def _cmd_get(doc, target, default, cast):
    """Print a single value, optionally converted."""
    from .casts import CASTS
    from .errors import CastError

    group, sep, key = target.partition(".")
    if not sep or not group or not key:
        print(f"groupconf: --get expects GROUP.KEY, got {target!r}", file=sys.stderr)
        sys.exit(2)

    item = doc.get(group, key)
    if item is None:
        if default is None:
            print(f"groupconf: no value for {group}.{key}", file=sys.stderr)
            sys.exit(1)
        # defaults are printed verbatim, never converted
        print(default)
        return

    try:
        value = CASTS[cast](item.value)
    except CastError as e:
        print(f"groupconf: {group}.{key}: {e}", file=sys.stderr)
        sys.exit(1)

    if isinstance(value, bool):
        value = str(value).lower()
    elif cast == "f32":
        value = _format_f32(value)
    print(value)


def _format_f32(value):
    """Shortest decimal text that reads back as the same f32 value."""
    from .casts import to_f32
    from .errors import CastError

    for digits in range(1, 9):
        text = format(value, f".{digits}g")
        try:
            if to_f32(text) == value:
                return text
        except CastError:
            # rounding up can step past the f32 range
            continue
    return format(value, ".9g")


if __name__ == "__main__":
    main()
