"""Singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list element: its content and the node that follows it."""

    content: Any
    next: Node | None = None


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        following = node.next
        yield node
        node = following


def add_front(head: Node | None, node: Node | None) -> Node | None:
    """Put ``node`` before ``head`` and return the new head.

    Whatever followed ``node`` before is replaced by ``head``. Without a
    node the list is returned unchanged.
    """
    if node is None:
        return head
    node.next = head
    return node


def add_back(head: Node | None, node: Node | None) -> Node | None:
    """Attach ``node`` (with anything that follows it) after the last node.

    Returns the head of the list, which is ``node`` itself when the list
    was empty.
    """
    if node is None:
        return head
    last = list_last(head)
    if last is None:
        return node
    last.next = node
    return head


def list_size(head: Node | None) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def list_last(head: Node | None) -> Node | None:
    """The final node of the list, or None for an empty list."""
    last = None
    for node in _nodes(head):
        last = node
    return last


def delete_one(node: Node | None, delete: Callable[[Any], None] | None) -> None:
    """Release one node's content with ``delete``; the rest of the list is left alone."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


def clear(head: Node | None, delete: Callable[[Any], None] | None) -> Node | None:
    """Release every node's content with ``delete`` and return the emptied list.

    Without a deletion function nothing is done and the list is returned as is.
    """
    if delete is None:
        return head
    for node in _nodes(head):
        delete(node.content)
        node.next = None
    return None


def iterate(head: Node | None, func: Callable[[Any], None] | None) -> None:
    """Call ``func`` on the content of every node, front to back."""
    if func is None:
        return
    for node in _nodes(head):
        func(node.content)