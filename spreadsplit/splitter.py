"""
Split one source page into two destination pages.
"""

import logging

from .geometry import BoundingBox, classify_orientation, split_box

logger = logging.getLogger(__name__)


def split_page(destination, content, box: BoundingBox):
    """
    Import `content` twice into `destination` and crop each copy to one half
    of `box`.

    Returns the two SplitRectangle values in the order the pages were added.
    """
    orientation = classify_orientation(box)
    halves = split_box(box, orientation)

    for half in halves:
        page = destination.import_page(content)
        destination.set_crop_box(page, half.box)

    logger.debug("Split %s page %s into %s and %s", orientation.value, box.as_list(),
                 halves[0].side.value, halves[1].side.value)
    return halves


def split_document(source, destination):
    """Split every page of `source` into `destination`, in page order."""
    total = source.page_count()
    for number in range(1, total + 1):
        page = source.page(number)
        split_page(destination, page.content, page.box)
    return total
