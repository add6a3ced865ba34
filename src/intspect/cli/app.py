"""CLI application entry point for intspect.

This module is the **sole error boundary** for the entire application.
It catches :class:`~intspect.exceptions.IntspectError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: parsing, fitting and rendering are
  delegated to :mod:`intspect.core`.
* Each mutually exclusive flag group is collected into a list of
  :class:`~intspect.core.options.Selection` values and reduced once by
  :func:`~intspect.core.options.chosen_value`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from rich.markup import escape

from intspect.cli import exit_codes
from intspect.cli.console import get_console
from intspect.cli.report import print_report
from intspect.core.inspector import inspect_integer
from intspect.core.models import ExtensionMode, Literal, WidthRequest
from intspect.core.options import Selection, chosen_value
from intspect.core.width import SIZE_CLASSES
from intspect.exceptions import IntspectError
from intspect.utils.log import configure_logging
from intspect.version import __version__

logger = logging.getLogger(__name__)

_EPILOG = """\
examples:
  intspect 0b101001 --bits 4 --signed
  intspect 0x123 --short
  intspect -0x10 --byte

A literal starting with '-' is read as the input, not as an option.
Values of --bits, --bytes and --radix are never taken as the input.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _SelectAction(argparse.Action):
    """Append a :class:`Selection` for the option to a shared group list.

    Flags (``nargs=0``) contribute their ``const``; valued options
    contribute their argument multiplied by ``scale``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: int | str | None = None,
        const: Any = None,
        scale: int = 1,
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, nargs=nargs, const=const, **kwargs)
        self.scale = scale
        self.flag = next(
            (opt for opt in option_strings if opt.startswith("--")),
            option_strings[0],
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        value = self.const if self.nargs == 0 else values * self.scale
        selections = list(getattr(namespace, self.dest, None) or [])
        selections.append(Selection(self.flag, value))
        setattr(namespace, self.dest, selections)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    Options are grouped the way they are reduced: radix, width and
    extension each allow at most one choice.
    """
    parser = argparse.ArgumentParser(
        prog="intspect",
        description="Inspect an integer's fixed-width two's-complement representation.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help=(
            "Integer to inspect. Read as decimal unless it starts with "
            "0b, 0o or 0x, or a radix option is given."
        ),
    )
    parser.add_argument(
        "-s",
        "--signed",
        action="store_true",
        help="Treat the input as a signed integer (unsigned by default).",
    )
    parser.add_argument(
        "-t",
        "--twos-complement",
        "--two",
        dest="twos_complement",
        action="store_true",
        help="Also show how the two's complement of the pattern is formed.",
    )

    width = parser.add_argument_group(
        "width",
        "At most one; the default is the minimum width that holds the input.",
    )
    size_aliases: dict[str, tuple[str, ...]] = {
        "byte": ("-B", "--byte", "--u8", "--char"),
        "short": ("-S", "--short", "--u16"),
        "int": ("-i", "--int", "--u32"),
        "long": ("-l", "--long", "--u64"),
    }
    for name, flags in size_aliases.items():
        width.add_argument(
            *flags,
            dest="width",
            action=_SelectAction,
            nargs=0,
            const=SIZE_CLASSES[name],
            help=f"Treat the input as a {SIZE_CLASSES[name]}-bit integer.",
        )
    width.add_argument(
        "--bytes",
        dest="width",
        action=_SelectAction,
        type=int,
        scale=8,
        metavar="N",
        help="Treat the input as an integer of N bytes.",
    )
    width.add_argument(
        "-b",
        "--bits",
        dest="width",
        action=_SelectAction,
        type=int,
        metavar="N",
        help="Treat the input as an integer of N bits.",
    )

    extension = parser.add_argument_group(
        "extension",
        "At most one; the default follows --signed.",
    )
    extension.add_argument(
        "-e",
        "--sign-extend",
        "--sext",
        dest="extension",
        action=_SelectAction,
        nargs=0,
        const=ExtensionMode.SIGN_EXTEND,
        help="Sign-extend when widening (default for signed input).",
    )
    extension.add_argument(
        "--zero-extend",
        "--zext",
        dest="extension",
        action=_SelectAction,
        nargs=0,
        const=ExtensionMode.ZERO_EXTEND,
        help="Zero-extend when widening (default for unsigned input).",
    )

    radix = parser.add_argument_group(
        "radix",
        "At most one; the default comes from the input's prefix, else 10.",
    )
    named_radices: tuple[tuple[tuple[str, ...], int, str], ...] = (
        (("-n", "--binary", "--bin"), 2, "binary"),
        (("-o", "--octal", "--oct"), 8, "octal"),
        (("-d", "--decimal", "--dec"), 10, "decimal"),
        (("-x", "--hexadecimal", "--hex"), 16, "hexadecimal"),
    )
    for flags, base, name in named_radices:
        radix.add_argument(
            *flags,
            dest="radix",
            action=_SelectAction,
            nargs=0,
            const=base,
            help=f"Treat the input as a {name} (base-{base}) integer.",
        )
    radix.add_argument(
        "-r",
        "--radix",
        dest="radix",
        action=_SelectAction,
        type=int,
        metavar="R",
        help="Treat the input as an integer in radix R (2-36).",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    output.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each pipeline stage to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Raw argv handling
# ---------------------------------------------------------------------------

_VALUED_OPTIONS: tuple[str, ...] = ("--bits", "--bytes", "--radix")
_VALUED_SHORT_OPTIONS: tuple[str, ...] = ("-b", "-r")


def _options_part(argv: Sequence[str]) -> Sequence[str]:
    """Return the tokens before a ``--`` separator."""
    if "--" in argv:
        return argv[: list(argv).index("--")]
    return argv


def _takes_value(token: str) -> bool:
    """Whether *token* names an option that consumes the next token."""
    if token in _VALUED_SHORT_OPTIONS:
        return True
    # argparse also accepts unambiguous prefixes such as --bit
    return len(token) > 3 and "=" not in token and any(
        option.startswith(token) for option in _VALUED_OPTIONS
    )


def _hoist_hyphen_literal(argv: Sequence[str]) -> list[str]:
    """Move a literal such as ``-0x10`` behind ``--``.

    argparse reads any token that starts with ``-`` and is not a plain
    negative decimal as an unknown option.  The first token that starts
    with ``-`` followed by a digit, and is not the value of a valued
    option, is moved to the end after a ``--`` separator.  An argv that
    already holds ``--`` is returned unchanged.
    """
    tokens = list(argv)
    if "--" in tokens:
        return tokens
    for index, token in enumerate(tokens):
        if len(token) < 2 or token[0] != "-" or not token[1].isdigit():
            continue
        if index and _takes_value(tokens[index - 1]):
            continue
        return [*tokens[:index], *tokens[index + 1:], "--", token]
    return tokens


def _color_enabled(argv: Sequence[str]) -> bool:
    """Whether colour is left on by the raw *argv*."""
    return "--no-color" not in _options_part(argv)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the intspect CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    IntspectError
        For any invalid input or conflicting options; :func:`cli`
        renders it.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(_hoist_hyphen_literal(argv))

    if args.input is None:
        parser.print_help()
        return exit_codes.SUCCESS

    color = not args.no_color
    configure_logging(args.verbose, color=color)

    literal = Literal(
        text=args.input,
        radix=chosen_value("radix", args.radix),
        signed=args.signed,
    )
    request = WidthRequest(
        bits=chosen_value("width", args.width),
        extension=chosen_value("extension", args.extension),
    )
    logger.debug("inspecting %r with %s", literal.text, request)

    report = inspect_integer(
        literal,
        request,
        twos_complement=args.twos_complement,
    )
    print_report(get_console(color=color), report)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    console = get_console(stderr=True, color=_color_enabled(sys.argv[1:]))
    try:
        code = main()
        sys.exit(code)
    except IntspectError as exc:
        console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        if exc.hint:
            console.print(f"[yellow]hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}",
            soft_wrap=True,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
