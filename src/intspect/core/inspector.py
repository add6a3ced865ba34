"""Inspection pipeline: literal in, report out.

Guarantees
----------
* Pure orchestration: no I/O, no ``print()``.
* Only :class:`~intspect.exceptions.IntspectError` subclasses escape for
  bad input; a failure at any stage aborts the whole inspection.
"""

from __future__ import annotations

import logging

from intspect.core.codec import encode, twos_complement_detail
from intspect.core.models import (
    InspectionReport,
    Literal,
    TwosComplementReport,
    WidthRequest,
)
from intspect.core.radix import parse_literal
from intspect.core.render import render_pattern
from intspect.core.width import resolve_width

logger = logging.getLogger(__name__)


def inspect_integer(
    literal: Literal,
    request: WidthRequest | None = None,
    *,
    twos_complement: bool = False,
) -> InspectionReport:
    """Parse, fit and render *literal*.

    Parameters
    ----------
    literal:
        The user's input with its declared radix and signedness.
    request:
        Requested width and extension override.  ``None`` infers the
        width from the value.
    twos_complement:
        Also compute the invert-and-add-one breakdown.
    """
    parsed = parse_literal(literal)
    spec = resolve_width(parsed, request or WidthRequest(), signed=literal.signed)
    pattern = encode(parsed, spec)
    rendering = render_pattern(pattern)

    detail: TwosComplementReport | None = None
    if twos_complement:
        steps = twos_complement_detail(pattern)
        negated = render_pattern(steps.negated)
        detail = TwosComplementReport(
            inverted=render_pattern(steps.inverted).binary,
            decimal=negated.decimal,
            binary=negated.binary,
            octal=negated.octal,
            hexadecimal=negated.hexadecimal,
        )

    logger.debug("inspected %r as %s", literal.text, rendering.binary)
    return InspectionReport(
        decimal=rendering.decimal,
        binary=rendering.binary,
        octal=rendering.octal,
        hexadecimal=rendering.hexadecimal,
        bits=pattern.width,
        twos_complement=detail,
    )
