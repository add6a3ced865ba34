"""intspect: fixed-width integer inspector.

Parses an integer literal in any radix from 2 to 36, fits it to a bit
width and shows its two's-complement pattern in decimal, binary, octal
and hexadecimal.
"""

from intspect.version import __version__

__all__: list[str] = ["__version__"]
