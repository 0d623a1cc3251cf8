import pytest

from algokit.circular_list import CircularList

SOURCE_VALUES = [25, 39, 48, 92, 73]


def test_append_and_iterate():
    cl = CircularList()
    for v in SOURCE_VALUES:
        cl.append(v)
    assert list(cl) == SOURCE_VALUES
    assert len(cl) == len(SOURCE_VALUES)


def test_delete_head_as_in_source_example():
    cl = CircularList(SOURCE_VALUES)
    cl.delete(25)
    assert list(cl) == SOURCE_VALUES[1:]


@pytest.mark.parametrize("target", SOURCE_VALUES)
def test_delete_any_position(target):
    cl = CircularList(SOURCE_VALUES)
    cl.delete(target)
    expected = [v for v in SOURCE_VALUES if v != target]
    assert list(cl) == expected
    cl.append(target)
    assert list(cl) == expected + [target]


def test_delete_missing_raises():
    cl = CircularList(SOURCE_VALUES)
    with pytest.raises(ValueError):
        cl.delete(1000)
    assert list(cl) == SOURCE_VALUES


def test_delete_from_empty_by_value_raises():
    with pytest.raises(ValueError):
        CircularList().delete(1)


def test_delete_first_and_last():
    cl = CircularList(SOURCE_VALUES)
    assert cl.delete_first() == SOURCE_VALUES[0]
    assert cl.delete_last() == SOURCE_VALUES[-1]
    assert list(cl) == SOURCE_VALUES[1:-1]


def test_single_element_cycle_removal():
    cl = CircularList([4])
    assert cl.delete_first() == 4
    assert list(cl) == []
    assert len(cl) == 0
    cl.append(8)
    assert list(cl) == [8]


def test_drain_in_order():
    cl = CircularList(SOURCE_VALUES)
    drained = [cl.delete_first() for _ in range(len(cl))]
    assert drained == SOURCE_VALUES
    assert len(cl) == 0


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(CircularList(), method)()