import pytest

from algokit.doubly_linked_list import DoublyLinkedList

SOURCE_VALUES = [25, 39, 48, 92, 73]


def test_append_and_iterate_both_ways():
    dl = DoublyLinkedList()
    for v in SOURCE_VALUES:
        dl.append(v)
    assert list(dl) == SOURCE_VALUES
    assert list(reversed(dl)) == SOURCE_VALUES[::-1]
    assert len(dl) == len(SOURCE_VALUES)


def test_delete_head_as_in_source_example():
    dl = DoublyLinkedList(SOURCE_VALUES)
    dl.delete(25)
    assert list(dl) == SOURCE_VALUES[1:]
    assert list(reversed(dl)) == SOURCE_VALUES[1:][::-1]


@pytest.mark.parametrize("target", SOURCE_VALUES)
def test_delete_any_position_keeps_links(target):
    dl = DoublyLinkedList(SOURCE_VALUES)
    dl.delete(target)
    expected = [v for v in SOURCE_VALUES if v != target]
    assert list(dl) == expected
    assert list(reversed(dl)) == expected[::-1]
    assert len(dl) == len(expected)


def test_delete_missing_raises():
    dl = DoublyLinkedList(SOURCE_VALUES)
    with pytest.raises(ValueError):
        dl.delete(1000)
    assert list(dl) == SOURCE_VALUES


def test_delete_first_and_last():
    dl = DoublyLinkedList(SOURCE_VALUES)
    assert dl.delete_first() == SOURCE_VALUES[0]
    assert dl.delete_last() == SOURCE_VALUES[-1]
    assert list(dl) == SOURCE_VALUES[1:-1]
    assert list(reversed(dl)) == SOURCE_VALUES[1:-1][::-1]


def test_single_element_removal_empties_list():
    dl = DoublyLinkedList([5])
    assert dl.delete_last() == 5
    assert list(dl) == []
    assert list(reversed(dl)) == []
    dl.append(6)
    assert list(dl) == [6]


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()