import pytest

from philo.linked_list import LinkedList, Node


def test_items_keep_their_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    empty = LinkedList()
    assert len(empty) == 0
    assert list(empty) == []
    assert empty.last() is None
    assert empty.head is None


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_add_back_appends():
    lst = LinkedList([1])
    node = lst.add_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("only")
    assert lst.last() is node
    assert lst.head is node


def test_none_is_a_valid_content():
    lst = LinkedList()
    lst.add_back(None)
    assert len(lst) == 1
    assert list(lst) == [None]


def test_last_returns_final_node():
    lst = LinkedList(["x", "y", "z"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "z"
    assert last.next is None


def test_len_tracks_additions():
    lst = LinkedList(range(5))
    lst.add_front(-1)
    lst.add_back(5)
    assert len(lst) == len(list(lst))
    assert list(lst) == list(range(-1, 6))


def test_nodes_are_linked():
    lst = LinkedList(["p", "q"])
    assert lst.head.content == "p"
    assert lst.head.next is lst.last()


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.add_back(9)
    assert list(lst) == [9]
    assert lst.last().content == 9


def test_for_each_visits_all():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda value: value * 10)
    assert list(mapped) == [value * 10 for value in source]
    assert list(source) == [1, 2, 3]
    assert mapped is not source
    assert len(mapped) == len(source)


def test_map_failure_deletes_partial_results():
    deleted = []

    def convert(value):
        if value == 3:
            raise RuntimeError("boom")
        return str(value)

    with pytest.raises(RuntimeError, match="boom"):
        LinkedList([1, 2, 3, 4]).map(convert, deleted.append)
    assert deleted == ["1", "2"]


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str)) == []