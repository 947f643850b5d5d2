from fractview.libkit.linked import (
    Node,
    delete_all,
    delete_one,
    iterate,
    map_list,
    push_front,
)


def _build(*contents):
    head = None
    for content in reversed(contents):
        head = push_front(head, Node(content))
    return head


def test_push_front_puts_node_first():
    head = push_front(None, Node(b"b"))
    head = push_front(head, Node(b"a"))
    assert [node.content for node in head] == [b"a", b"b"]


def test_push_front_ignores_missing_node():
    head = Node(b"only")
    assert push_front(head, None) is head


def test_content_size_follows_content():
    assert Node(b"abcd").content_size == len(b"abcd")
    assert Node().content_size == 0


def test_iteration_visits_every_node_once():
    head = _build(b"one", b"two", b"three")
    assert [node.content for node in head] == [b"one", b"two", b"three"]


def test_delete_one_passes_content_and_size():
    seen = []
    node = Node(b"data")
    result = delete_one(node, lambda content, size: seen.append((content, size)))
    assert result is None
    assert seen == [(b"data", len(b"data"))]
    assert node.content is None


def test_delete_all_visits_in_order():
    seen = []
    head = _build(b"x", b"yy", b"zzz")
    assert delete_all(head, lambda content, size: seen.append((content, size))) is None
    assert seen == [(b"x", 1), (b"yy", 2), (b"zzz", 3)]


def test_delete_all_on_empty_list():
    seen = []
    assert delete_all(None, lambda content, size: seen.append(content)) is None
    assert seen == []


def test_iterate_calls_function_for_each_node():
    head = _build(b"a", b"b", b"c")
    visited = []
    iterate(head, visited.append)
    assert visited == list(head)


def test_iterate_without_function_does_nothing():
    head = _build(b"a")
    iterate(head, None)
    assert head.content == b"a"


def test_map_list_builds_new_list():
    head = _build(b"ab", b"cde")
    mapped = map_list(head, lambda node: Node(node.content.upper()))
    assert [node.content for node in mapped] == [b"AB", b"CDE"]
    assert [node.content for node in head] == [b"ab", b"cde"]


def test_map_list_copies_content():
    head = _build(bytearray(b"mutable"))
    mapped = map_list(head, lambda node: node)
    mapped.content[0] = ord("M")
    assert head.content == bytearray(b"mutable")
    assert mapped is not head


def test_map_list_of_nothing_is_none():
    assert map_list(None, lambda node: node) is None