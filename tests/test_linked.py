import pytest

from ftkit.linked import LinkedList, ListNode, delete_one


def test_init_keeps_order_and_length():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_front_puts_node_at_head():
    lst = LinkedList(["b", "c"])
    node = ListNode("a")
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_add_front_on_empty_list():
    lst = LinkedList()
    node = ListNode(5)
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == [5]


def test_add_front_none_is_ignored():
    lst = LinkedList([1])
    lst.add_front(None)
    assert list(lst) == [1]


def test_add_back_appends_node():
    lst = LinkedList([1, 2])
    node = ListNode(3)
    lst.add_back(node)
    assert lst.last() is node
    assert list(lst) == [1, 2, 3]


def test_add_back_on_empty_list_sets_head():
    lst = LinkedList()
    node = ListNode("x")
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_add_back_links_whole_chain():
    lst = LinkedList([1])
    chain = ListNode(2, ListNode(3))
    lst.add_back(chain)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    last = lst.last()
    assert last.content == "c"
    assert last.next is None


def test_clear_calls_delete_for_each_content_in_order():
    lst = LinkedList([1, 2, 3])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_every_content():
    lst = LinkedList(["a", "b"])
    seen = []
    lst.iterate(seen.append)
    assert seen == ["a", "b"]


def test_iterate_none_leaves_list_untouched():
    lst = LinkedList([1, 2])
    lst.iterate(None)
    assert list(lst) == [1, 2]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str, lambda x: None)
    assert len(mapped) == 0


def test_map_requires_callables():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda x: None)
    with pytest.raises(TypeError):
        lst.map(str, None)


def test_map_failure_deletes_built_contents():
    lst = LinkedList([1, 2, 3])
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [101, 102]
    assert list(lst) == [1, 2, 3]


def test_delete_one_calls_delete_on_content():
    deleted = []
    node = ListNode("payload", ListNode("next"))
    delete_one(node, deleted.append)
    assert deleted == ["payload"]
    assert node.next is None


def test_delete_one_without_delete_does_nothing():
    node = ListNode("keep")
    delete_one(node, None)
    assert node.content == "keep"


def test_delete_one_with_no_node_does_not_call_delete():
    deleted = []
    delete_one(None, deleted.append)
    assert deleted == []