"""A singly linked list of nodes carrying arbitrary content."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class Node:
    """One link of the list: some content and the node after it."""

    content: object = None
    next: Node | None = None

    @property
    def content_size(self):
        """Size of the content; 0 when there is none."""
        return 0 if self.content is None else len(self.content)

    def __iter__(self):
        """Yield this node and every node after it."""
        node = self
        while node is not None:
            yield node
            node = node.next


def push_front(head, node):
    """Put ``node`` in front of ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def delete_one(node, delete):
    """Hand ``node``'s content and size to ``delete``; return the emptied link (None)."""
    if node is None:
        return None
    delete(node.content, node.content_size)
    node.content = None
    node.next = None
    return None


def delete_all(head, delete):
    """Hand every node's content and size to ``delete``, front to back; return None."""
    node = head
    while node is not None:
        following = node.next
        delete_one(node, delete)
        node = following
    return None


def iterate(head, f):
    """Call ``f`` on every node, front to back."""
    if head is None or f is None:
        return
    for node in head:
        f(node)


def map_list(head, f):
    """Build a new list from ``f(node)`` for every node, copying each result's content."""
    if head is None:
        return None
    new_head = None
    tail = None
    for node in head:
        fresh = Node(copy.copy(f(node).content))
        if tail is None:
            new_head = fresh
        else:
            tail.next = fresh
        tail = fresh
    return new_head