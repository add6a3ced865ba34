"""Mutually exclusive option groups as tagged selections.

The CLI collects every flag of a group into one list of
:class:`Selection` values; :func:`choose_one` then reduces that list to
at most one choice, so precedence between flags never has to be decided.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from intspect.exceptions import ConflictingOptionsError


@dataclass(frozen=True, slots=True)
class Selection:
    """One option from a mutually exclusive group."""

    flag: str
    """Option string as typed, e.g. ``--short``."""

    value: Any
    """Value the option stands for (a width, a radix, an extension mode)."""


def choose_one(group: str, selections: Sequence[Selection] | None) -> Selection | None:
    """Return the single selection of *group*, or ``None`` if empty.

    Repeating the same flag with the same value is accepted.

    Raises
    ------
    ConflictingOptionsError
        If two different selections were made.
    """
    if not selections:
        return None

    distinct: list[Selection] = []
    for selection in selections:
        if selection not in distinct:
            distinct.append(selection)

    if len(distinct) > 1:
        flags = ", ".join(selection.flag for selection in distinct)
        raise ConflictingOptionsError(
            f"conflicting {group} options: {flags}",
            hint=f"Pass at most one {group} option.",
        )
    return distinct[0]


def chosen_value(group: str, selections: Sequence[Selection] | None) -> Any:
    """Like :func:`choose_one` but return the selected value (or ``None``)."""
    selection = choose_one(group, selections)
    return None if selection is None else selection.value
