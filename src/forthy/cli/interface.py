"""CLI UI related functions"""

import logging
import sys
from traceback import format_exception, format_tb

import coloredlogs
import colorful as cf

from ..machine import format_number

TICK = "✔"

UI_COLORS = {
    "forest": "#2E8B57",
    "grey": "#777777",
    "red": "#991010",
}


# Palette names must resolve even before init() runs
cf.update_palette(UI_COLORS)


# Flags that modify interface displays
QUIET = False
VERBOSE = False


LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(name)-25s %(message)s"


def log_level(args):
    """-V means DEBUG, -v means INFO, neither means no logging at all"""
    if args["--vverbose"]:
        return logging.DEBUG
    if args["--verbose"]:
        return logging.INFO
    return None


def init(args):
    """Set up colours and logging from the command line flags"""
    global QUIET
    global VERBOSE
    level = log_level(args)
    QUIET = args["--quiet"]
    VERBOSE = level is not None

    if args["--no-colours"]:
        cf.disable()
        if level:
            logging.basicConfig(format=LOG_FORMAT, datefmt="%H:%M:%S", level=level)
    else:
        cf.use_true_colors()
        if level:
            coloredlogs.install(
                fmt=LOG_FORMAT,
                datefmt="%H:%M:%S",
                level=level,
                logger=logging.getLogger("forthy"),
            )


## String colour modifiers


def dim(string):
    return cf.grey(string)


def good(string):
    return cf.bold_forest(string)


def bad(string):
    return cf.bold_red(string)


def primary(string):
    return cf.forest(string)


def neutral(string):
    return cf.bold(string)


## And printing messages


def info(msg):
    if not QUIET:
        print(msg)


def print_listing(tokens):
    """Print a pretty listing of compiled tokens"""
    print(" /")
    for i, token in enumerate(tokens):
        print(f" | {i:4} | {token!r}")
    print(" \\")


def print_dictionary(dictionary):
    """Print a pretty table of the words in a Dictionary"""
    if not len(dictionary):
        print(dim(" (empty)"))
        return
    entries = sorted(dictionary, key=lambda item: item[0])
    spacing = max(len(name) for name, _ in entries) + 3
    k = "NAME"
    print(f" {k: <{spacing + 2}}VALUE")
    for name, entry in entries:
        dots = "." * (spacing - len(name))
        print(f" {primary(name)} {dots} {entry!r}")


def format_stack(values) -> str:
    return "<{}> {}".format(len(values), " ".join(map(format_number, values)))


## graceful exits


def exit_problem(problem: str, suggested_fix: str):
    """Exit because of a user-correctable problem"""
    print("\n" + bad(problem))
    if suggested_fix:
        print(suggested_fix)
    if not suggested_fix.endswith("\n"):
        print("")
    sys.exit(1)


def exit_bug(msg):
    """Something broke unexpectedly while running"""
    print(bad("\nUnexpected error.\n" + str(msg)))

    exc_type, exc_value, exc_traceback = sys.exc_info()
    if exc_type:
        print("\n" + "".join(format_exception(exc_type, exc_value, exc_traceback)))
        print("".join(format_tb(exc_traceback, limit=4)))

    sys.exit(2)
