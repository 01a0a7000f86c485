"""Detail list operations.

A transaction owns an ordered list of detail lines identified by item
number. These helpers return new lists and leave the input untouched.
"""

from dataclasses import replace
from typing import Iterable, Sequence

from ledgercalc.domain.entities import DetailLine
from ledgercalc.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    detail_line_not_found,
    duplicate_item_no,
)


def next_item_no(lines: Sequence[DetailLine]) -> int:
    """Return the item number for a new line (max + 1, or 1 when empty)."""
    return max((line.item_no or 0 for line in lines), default=0) + 1


def add_line(lines: Sequence[DetailLine], line: DetailLine) -> list[DetailLine]:
    """Append a line, assigning the next item number when it has none.

    Raises:
        ConflictError: If the item number is already used
    """
    if not line.item_no:
        line = replace(line, item_no=next_item_no(lines))
    elif any(existing.item_no == line.item_no for existing in lines):
        raise ConflictError(duplicate_item_no(line.item_no))
    return [*lines, line]


def replace_line(lines: Sequence[DetailLine], line: DetailLine) -> list[DetailLine]:
    """Replace the line that has the same item number.

    Raises:
        NotFoundError: If no line has that item number
    """
    if not any(existing.item_no == line.item_no for existing in lines):
        raise NotFoundError(detail_line_not_found(line.item_no))
    return [line if existing.item_no == line.item_no else existing for existing in lines]


def delete_line(lines: Sequence[DetailLine], item_no: int) -> list[DetailLine]:
    """Remove one line and renumber the rest.

    Raises:
        NotFoundError: If no line has that item number
    """
    if not any(line.item_no == item_no for line in lines):
        raise NotFoundError(detail_line_not_found(item_no))
    return renumber_lines(line for line in lines if line.item_no != item_no)


def delete_lines(lines: Sequence[DetailLine], item_nos: Iterable[int]) -> list[DetailLine]:
    """Remove every line whose item number is selected and renumber the rest.

    Unknown item numbers are ignored, as a bulk selection may be stale.
    """
    selected = set(item_nos)
    return renumber_lines(line for line in lines if line.item_no not in selected)


def reorder_lines(lines: Sequence[DetailLine], item_nos: Sequence[int]) -> list[DetailLine]:
    """Put lines in the order given by item numbers, then renumber 1..n.

    Raises:
        ValidationError: If item_nos is not a permutation of the current item numbers
    """
    by_item_no = {line.item_no: line for line in lines}
    if len(item_nos) != len(lines) or set(item_nos) != set(by_item_no):
        raise ValidationError(
            "Reorder must list every current item number exactly once"
        )
    return renumber_lines(by_item_no[item_no] for item_no in item_nos)


def renumber_lines(lines: Iterable[DetailLine]) -> list[DetailLine]:
    """Give lines contiguous item numbers starting at 1, keeping their order."""
    return [
        line if line.item_no == index else replace(line, item_no=index)
        for index, line in enumerate(lines, start=1)
    ]
