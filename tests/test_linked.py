import pytest

from pushswap.linked import (
    Node,
    add_back,
    add_front,
    clear,
    delete_one,
    iterate,
    list_last,
    list_size,
)


def build(values):
    head = None
    for value in values:
        head = add_back(head, Node(value))
    return head


def contents(head):
    seen = []
    iterate(head, seen.append)
    return seen


def test_new_node_has_no_successor():
    node = Node("x")
    assert node.content == "x"
    assert node.next is None


def test_add_back_keeps_order():
    head = build([1, 2, 3])
    assert contents(head) == [1, 2, 3]


def test_add_back_to_empty_returns_node():
    node = Node(5)
    assert add_back(None, node) is node


def test_add_back_attaches_chain():
    head = build([1, 2])
    tail = build([3, 4])
    head = add_back(head, tail)
    assert contents(head) == [1, 2, 3, 4]


def test_add_back_without_node_returns_head():
    head = build([1])
    assert add_back(head, None) is head
    assert list_size(head) == 1


def test_add_front_prepends():
    head = build([2, 3])
    head = add_front(head, Node(1))
    assert contents(head) == [1, 2, 3]


def test_add_front_replaces_old_successor():
    node = build(["a", "b"])
    head = add_front(build([1]), node)
    assert contents(head) == ["a", 1]


def test_add_front_without_node():
    head = build([1, 2])
    assert add_front(head, None) is head


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_size_matches_number_of_nodes(values):
    assert list_size(build(values)) == len(values)


def test_last_of_empty_list():
    assert list_last(None) is None


def test_last_node():
    head = build(["x", "y", "z"])
    last = list_last(head)
    assert last.content == "z"
    assert last.next is None


def test_delete_one_calls_delete_once():
    deleted = []
    head = build([1, 2])
    delete_one(head, deleted.append)
    assert deleted == [1]


def test_delete_one_without_function_does_nothing():
    head = build([1, 2])
    delete_one(head, None)
    assert contents(head) == [1, 2]


def test_clear_deletes_all_and_empties():
    deleted = []
    head = build([1, 2, 3])
    assert clear(head, deleted.append) is None
    assert deleted == [1, 2, 3]


def test_clear_without_function_keeps_list():
    head = build([1, 2])
    assert clear(head, None) is head
    assert contents(head) == [1, 2]


def test_iterate_empty_list():
    assert contents(None) == []


def test_iterate_without_function_leaves_contents():
    items = [[1], [2]]
    head = build(items)
    iterate(head, None)
    assert contents(head) == [[1], [2]]