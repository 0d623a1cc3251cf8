import pytest

from algokit.linked_list import LinkedList, Node, SortedList, has_cycle, merge_sorted

SOURCE_VALUES = [45, 63, 78, 35, 92, 96]


def _chain(values):
    nodes = [Node(v) for v in values]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
    return nodes


def _walk(head):
    out = []
    while head is not None:
        out.append(head.value)
        head = head.next
    return out


def test_append_keeps_order():
    ll = LinkedList()
    for v in SOURCE_VALUES:
        ll.append(v)
    assert list(ll) == SOURCE_VALUES
    assert len(ll) == len(SOURCE_VALUES)


def test_delete_head_value_as_in_source_example():
    ll = LinkedList(SOURCE_VALUES)
    ll.delete(45)
    assert list(ll) == SOURCE_VALUES[1:]


def test_delete_middle_value():
    ll = LinkedList(SOURCE_VALUES)
    ll.delete(78)
    assert list(ll) == [v for v in SOURCE_VALUES if v != 78]


def test_delete_last_value():
    ll = LinkedList(SOURCE_VALUES)
    ll.delete(SOURCE_VALUES[-1])
    assert list(ll) == SOURCE_VALUES[:-1]


def test_delete_missing_raises():
    ll = LinkedList(SOURCE_VALUES)
    with pytest.raises(ValueError):
        ll.delete(1000)
    assert list(ll) == SOURCE_VALUES


def test_delete_first_and_last_return_values():
    ll = LinkedList(SOURCE_VALUES)
    assert ll.delete_first() == SOURCE_VALUES[0]
    assert ll.delete_last() == SOURCE_VALUES[-1]
    assert list(ll) == SOURCE_VALUES[1:-1]


def test_delete_until_empty():
    ll = LinkedList([7])
    assert ll.delete_last() == 7
    assert len(ll) == 0
    assert ll.head is None


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_sorted_list_source_example():
    inputs = [8, 6, 4, 14, 25, 2, 28, 10]
    sl = SortedList()
    for v in inputs:
        sl.insert(v)
    assert list(sl) == sorted(inputs)
    assert len(sl) == len(inputs)


def test_sorted_list_keeps_duplicates():
    inputs = [5, 1, 5, 3, 1, 5]
    sl = SortedList(inputs)
    assert list(sl) == sorted(inputs)


def test_has_cycle_false_for_plain_chain():
    nodes = _chain(range(5))
    assert has_cycle(nodes[0]) is False
    assert has_cycle(None) is False


def test_has_cycle_true_when_tail_links_back():
    nodes = _chain(range(5))
    nodes[-1].next = nodes[1]
    assert has_cycle(nodes[0]) is True


def test_has_cycle_self_loop():
    node = Node(1)
    node.next = node
    assert has_cycle(node) is True


def test_merge_sorted_produces_sorted_union():
    a = [1, 3, 5, 9]
    b = [2, 3, 4, 6, 10]
    merged = merge_sorted(_chain(a)[0], _chain(b)[0])
    assert _walk(merged) == sorted(a + b)


def test_merge_sorted_prefers_first_on_ties():
    first = _chain([3])
    second = _chain([3])
    merged = merge_sorted(first[0], second[0])
    assert merged is first[0]
    assert merged.next is second[0]


def test_merge_sorted_with_empty_side():
    chain = _chain([1, 2])
    assert merge_sorted(None, chain[0]) is chain[0]
    assert merge_sorted(chain[0], None) is chain[0]
    assert merge_sorted(None, None) is None