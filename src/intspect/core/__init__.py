"""Core layer: the integer-interpretation engine.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli``.
* Every stage is a pure function over frozen models.
"""

from intspect.core.inspector import inspect_integer
from intspect.core.models import (
    BitPattern,
    ExtensionMode,
    InspectionReport,
    Literal,
    ParsedValue,
    Rendering,
    TwosComplementDetail,
    TwosComplementReport,
    WidthRequest,
    WidthSpec,
)

__all__: list[str] = [
    "BitPattern",
    "ExtensionMode",
    "InspectionReport",
    "Literal",
    "ParsedValue",
    "Rendering",
    "TwosComplementDetail",
    "TwosComplementReport",
    "WidthRequest",
    "WidthSpec",
    "inspect_integer",
]
