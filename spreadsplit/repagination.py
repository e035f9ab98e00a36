"""
Reordering of split documents.

A LAST_FIRST document was acquired starting from its last sheet. Once its
double-layout pages are split, moving pages to the end of the document in a
fixed pattern restores front to back order. The pattern only depends on the
page count, so it is computed up front and then replayed on a document.
"""

import logging
from enum import Enum
from typing import List

logger = logging.getLogger(__name__)


class Repagination(Enum):
    NONE = "none"
    LAST_FIRST = "last-first"


def last_first_moves(page_count: int) -> List[int]:
    """
    Positions (1-based) moved to the end of the document, in move order.

    The step alternates between 3 and 1 after every move. Documents made of an
    odd number of double-layout pages start one page earlier and with step 1.
    Positions are strictly decreasing, so every position still refers to the
    same page it held before the first move.
    """
    if page_count < 0:
        raise ValueError(f"Page count cannot be negative: {page_count}")

    start_step = page_count // 2 % 2
    step = 3 if start_step == 0 else 1

    moves = []
    i = page_count - start_step
    while i > 0:
        moves.append(i)
        i -= step
        step = 3 if step == 1 else 1
    return moves


def apply_moves(pages: list, moves: List[int]) -> list:
    """Return a copy of `pages` with each position in `moves` moved to the end."""
    result = list(pages)
    for position in moves:
        result.append(result.pop(position - 1))
    return result


def last_first_order(page_count: int) -> List[int]:
    """Page numbers in the order they end up after a LAST_FIRST pass."""
    return apply_moves(range(1, page_count + 1), last_first_moves(page_count))


def repaginate(document, mode: Repagination) -> List[int]:
    """
    Reorder `document` in place according to `mode`.

    Returns the positions that were moved, empty for Repagination.NONE.
    """
    if mode is not Repagination.LAST_FIRST:
        return []

    moves = last_first_moves(document.page_count())
    for position in moves:
        document.move_page_to_end(position)
    logger.debug("Repaginated %d pages, moved positions %s", document.page_count(), moves)
    return moves
