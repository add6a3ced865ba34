"""Width resolution: pick the final bit width and extension mode."""

from __future__ import annotations

import logging

from intspect.core.models import ExtensionMode, ParsedValue, WidthRequest, WidthSpec
from intspect.exceptions import MAX_BITS, WidthOutOfRangeError

logger = logging.getLogger(__name__)

SIZE_CLASSES: dict[str, int] = {
    "byte": 8,
    "short": 16,
    "int": 32,
    "long": 64,
}
"""Named integer sizes, in bits."""


def check_width(bits: int) -> int:
    """Return *bits* unchanged, or raise if it is not in 1–64."""
    if not 1 <= bits <= MAX_BITS:
        raise WidthOutOfRangeError(
            f"width of {bits} bits is out of range",
            hint=f"Choose a width between 1 and {MAX_BITS} bits.",
        )
    return bits


def resolve_width(
    parsed: ParsedValue,
    request: WidthRequest,
    *,
    signed: bool,
) -> WidthSpec:
    """Reconcile *request* with the parsed value's minimal width.

    * no width requested   → ``EXACT_FIT`` at ``minimal_bits``
    * narrower than needed → ``TRUNCATE`` (silent, never an error)
    * otherwise            → the explicit extension override, else
      ``SIGN_EXTEND`` when signed and ``ZERO_EXTEND`` when not

    A negative literal is always treated as signed.

    Raises
    ------
    WidthOutOfRangeError
        If the requested width is 0 or exceeds 64.
    """
    signed = signed or parsed.negative

    if request.bits is None:
        spec = WidthSpec(parsed.minimal_bits, ExtensionMode.EXACT_FIT, signed)
    else:
        bits = check_width(request.bits)
        if bits < parsed.minimal_bits:
            mode = ExtensionMode.TRUNCATE
        elif request.extension is not None:
            mode = request.extension
        elif signed:
            mode = ExtensionMode.SIGN_EXTEND
        else:
            mode = ExtensionMode.ZERO_EXTEND
        spec = WidthSpec(bits, mode, signed)

    logger.debug(
        "resolved width: bits=%d mode=%s signed=%s",
        spec.bits, spec.mode.value, spec.signed,
    )
    return spec
