import pytest

from spreadsplit.repagination import (
    Repagination,
    apply_moves,
    last_first_moves,
    last_first_order,
    repaginate,
)
from conftest import FakeDocument


def test_four_pages():
    assert last_first_moves(4) == [4, 1]
    assert last_first_order(4) == [2, 3, 4, 1]


def test_eight_pages():
    # step starts at 3 and alternates with 1
    assert last_first_moves(8) == [8, 5, 4, 1]
    assert last_first_order(8) == [2, 3, 6, 7, 8, 5, 4, 1]


def test_odd_number_of_spreads_starts_one_page_earlier():
    assert last_first_moves(2) == [1]
    assert last_first_order(2) == [2, 1]
    assert last_first_moves(6) == [5, 4, 1]
    assert last_first_order(6) == [2, 3, 6, 5, 4, 1]
    assert last_first_moves(10) == [9, 8, 5, 4, 1]


def test_empty_document():
    assert last_first_moves(0) == []
    assert last_first_order(0) == []


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        last_first_moves(-2)


@pytest.mark.parametrize("count", range(0, 41, 2))
def test_order_is_a_permutation(count):
    order = last_first_order(count)
    assert sorted(order) == list(range(1, count + 1))
    assert last_first_order(count) == order


def test_apply_moves_does_not_touch_input():
    pages = ["a", "b", "c", "d"]
    assert apply_moves(pages, [4, 1]) == ["b", "c", "d", "a"]
    assert pages == ["a", "b", "c", "d"]


def _document(count):
    document = FakeDocument()
    for number in range(1, count + 1):
        document.import_page(str(number))
    return document


def test_repaginate_last_first_on_document():
    document = _document(8)
    assert repaginate(document, Repagination.LAST_FIRST) == [8, 5, 4, 1]
    assert document.moves == [8, 5, 4, 1]
    assert [p.content for p in document.pages] == [str(n) for n in last_first_order(8)]


def test_repaginate_none_leaves_document_alone():
    document = _document(8)
    assert repaginate(document, Repagination.NONE) == []
    assert document.moves == []
    assert [p.content for p in document.pages] == [str(n) for n in range(1, 9)]
