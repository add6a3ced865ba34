"""Turn an :class:`InspectionReport` into styled terminal lines.

:func:`report_lines` builds :class:`rich.text.Text` objects; their
``plain`` attribute is exactly what an uncoloured terminal shows::

    Decimal         =>  9
    Binary          =>  0b1001
    Octal           =>  0o11
    Hexadecimal     =>  0x9

    Bits: 4
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from intspect.core.models import InspectionReport

LABEL_WIDTH: int = 16
ARROW: str = "=>  "
TWOS_COMPLEMENT_TITLE: str = "2's Complement \\"

PREFIX_STYLES: dict[str, str] = {
    "0b": "yellow",
    "0o": "green",
    "0x": "magenta",
}
VALUE_STYLE: str = "blue"


def _line(label: str, value: str) -> Text:
    text = Text(f"{label:<{LABEL_WIDTH}}{ARROW}")
    prefix = value[:2]
    style = PREFIX_STYLES.get(prefix)
    if style is not None:
        text.append(prefix, style=style)
        text.append(value[2:], style=VALUE_STYLE)
    else:
        text.append(value, style=VALUE_STYLE)
    return text


def _radix_lines(decimal: str, binary: str, octal: str, hexadecimal: str) -> list[Text]:
    return [
        _line("Decimal", decimal),
        _line("Binary", binary),
        _line("Octal", octal),
        _line("Hexadecimal", hexadecimal),
    ]


def report_lines(report: InspectionReport) -> list[Text]:
    """Lines of the report, in print order, including blank separators."""
    lines = _radix_lines(
        report.decimal, report.binary, report.octal, report.hexadecimal,
    )
    lines.append(Text())
    bits = Text("Bits: ")
    bits.append(str(report.bits), style="bold cyan")
    lines.append(bits)

    detail = report.twos_complement
    if detail is not None:
        lines.append(Text())
        lines.append(Text(TWOS_COMPLEMENT_TITLE, style="bold bright_cyan"))
        lines.append(_line("Inverted", detail.inverted))
        lines.extend(
            _radix_lines(
                detail.decimal, detail.binary, detail.octal, detail.hexadecimal,
            )
        )
    return lines


def print_report(console: Console, report: InspectionReport) -> None:
    """Write *report* to *console* without wrapping long binary lines."""
    for line in report_lines(report):
        console.print(line, soft_wrap=True)
