"""An n-ary tree with a movable insertion point, used to hold parsed HTML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

PreVisit = Callable[["Node"], bool]
PostVisit = Callable[["Node"], None]
CopyValue = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """A tree node holding a value and an ordered list of children."""

    value: Any = None
    parent: Optional["Node"] = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)

    def clone(self, copy: CopyValue) -> "Node":
        """Return a deep copy of this subtree, values copied with ``copy``.

        The clone keeps the same parent but is not attached to it.
        """
        twin = Node(copy(self.value), self.parent)
        for child in self.children:
            cloned = child.clone(copy)
            cloned.parent = twin
            twin.children.append(cloned)
        return twin

    def traverse(self, pre: PreVisit | None, post: PostVisit | None = None) -> None:
        """Walk the subtree depth first.

        ``pre`` is called on entering a node; when it returns false the
        node's children and its ``post`` call are skipped. Without ``pre``
        every node is entered.
        """
        if pre is not None and not pre(self):
            return
        for child in list(self.children):
            child.traverse(pre, post)
        if post is not None:
            post(self)


class NTree:
    """A tree built top-down: new nodes go below the current worker node."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self.worker: Node | None = None

    def add_node(self, value: Any = None) -> Node:
        """Add a node below the worker (or as the root) and make it the worker."""
        node = Node(value, self.worker)
        if self.root is None:
            self.root = node
        else:
            assert self.worker is not None
            self.worker.children.append(node)
        self.worker = node
        return node

    def up(self) -> None:
        """Move the worker to its parent; the root stays where it is."""
        if self.worker is not None and self.worker.parent is not None:
            self.worker = self.worker.parent

    def traverse(self, pre: PreVisit | None, post: PostVisit | None = None) -> None:
        """Walk the whole tree from the root; see :meth:`Node.traverse`."""
        if self.root is not None:
            self.root.traverse(pre, post)

    def proliferate(self, node: Node | None, size: int, copy: CopyValue) -> Node | None:
        """Turn ``node`` into a holder of ``size`` copies of itself.

        The node's children are replaced by ``size`` clones of the node's
        whole subtree and the node itself is returned. Returns None and
        changes nothing when ``node`` is None or ``size`` is below one.
        """
        if node is None or size < 1:
            return None
        first = node.clone(copy)
        first.parent = node
        node.children = [first]
        for _ in range(size - 1):
            node.children.append(first.clone(copy))
        return node