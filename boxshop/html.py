"""An HTML document tree with class lookup, replication and variables.

Pages are held as a tree of elements. Tags are indexed by their ``class``
attribute so that a page can copy an element several times, fill
``$(name)`` placeholders in it, or hide it before the document is sent.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TextIO

from .ntree import Node, NTree
from .regex import TAG_CLASS, get_match, replace_variables


class ElementKind(Enum):
    """What an element in the document tree stands for."""

    TAGS = 0
    CONTENT = 1
    DUMMY = 2
    HIDDEN = 3


class CheckUser(IntEnum):
    """Which visitors a tag is shown to."""

    NOTHING = 0
    LOGGED = 21
    VISIT = 22


class UserState(IntEnum):
    """Whether the visitor is logged in."""

    LOGGED = 21
    VISIT = 22


@dataclass(eq=False)
class Element:
    """A tag pair or a piece of text in the document tree."""

    kind: ElementKind = ElementKind.TAGS
    open_tag: str = ""
    close_tag: str | None = None
    check: CheckUser = CheckUser.NOTHING
    content: str = ""

    @classmethod
    def tags(
        cls, open_tag: str, close_tag: str | None = None, check: int = CheckUser.NOTHING
    ) -> "Element":
        """Create a tag element."""
        return cls(ElementKind.TAGS, open_tag, close_tag, CheckUser(check))

    @classmethod
    def text(cls, content: str) -> "Element":
        """Create a text element."""
        return cls(ElementKind.CONTENT, content=content)

    def copy(self) -> "Element":
        """Return an independent copy of this element."""
        return dataclasses.replace(self)


class Document:
    """A parsed page whose elements can be replicated, filled and hidden."""

    def __init__(self, login: int = UserState.VISIT) -> None:
        self.login = login
        self.ntree = NTree()
        self.class_map: dict[str, list[Node]] = {}
        root = Element.tags("", "")
        root.kind = ElementKind.DUMMY
        self.ntree.add_node(root)

    @property
    def login(self) -> UserState:
        """The visitor's state, deciding which conditional tags are shown."""
        return self._login

    @login.setter
    def login(self, value: int) -> None:
        self._login = UserState(value)

    def add_tag(
        self, open_tag: str, close_tag: str | None = None, check: int = CheckUser.NOTHING
    ) -> Element:
        """Add a tag below the current element and make it current."""
        element = Element.tags(open_tag, close_tag, check)
        self.ntree.add_node(element)
        self.map_classes()
        return element

    def add_content(self, content: str) -> Element:
        """Add a text element below the current element and make it current."""
        element = Element.text(content)
        self.ntree.add_node(element)
        return element

    def last_element(self) -> Element:
        """Return the current element."""
        assert self.ntree.worker is not None
        return self.ntree.worker.value

    def set_close_tag(self, element: Element, close_tag: str) -> Element:
        """Set the closing tag of a tag element."""
        if element.kind is not ElementKind.TAGS:
            raise ValueError("not an element tag")
        element.close_tag = close_tag
        return element

    def element_up(self) -> None:
        """Make the parent of the current element current."""
        self.ntree.up()

    def map_classes(self) -> None:
        """Rebuild the index from class names to tag nodes."""
        self.class_map = {}

        def visit(node: Node) -> bool:
            element: Element = node.value
            if element.kind is ElementKind.TAGS:
                key = get_match(element.open_tag, TAG_CLASS)
                if key is not None:
                    nodes = self.class_map.setdefault(key, [])
                    if not any(known is node for known in nodes):
                        nodes.append(node)
                return True
            return element.kind is ElementKind.DUMMY

        self.ntree.traverse(visit)

    def _shown(self, element: Element) -> bool:
        if element.check == CheckUser.LOGGED and self.login == UserState.VISIT:
            return False
        if element.check == CheckUser.VISIT and self.login == UserState.LOGGED:
            return False
        return True

    def render(self) -> str:
        """Return the document as text, as it is sent to the visitor."""
        parts: list[str] = []

        def enter(node: Node) -> bool:
            element: Element = node.value
            if element.kind is ElementKind.CONTENT:
                parts.append(element.content)
                return False
            if element.kind is ElementKind.TAGS:
                if not self._shown(element):
                    return False
                parts.append(element.open_tag)
                return True
            return element.kind is ElementKind.DUMMY

        def leave(node: Node) -> None:
            element: Element = node.value
            if element.kind is ElementKind.TAGS and element.close_tag is not None:
                parts.append(element.close_tag)

        self.ntree.traverse(enter, leave)
        return "".join(parts)

    def write(self, stream: TextIO) -> None:
        """Write the rendered document to ``stream``."""
        stream.write(self.render())

    def _indexed_node(self, key: str, index: int) -> Node | None:
        nodes = self.class_map.get(key)
        if nodes is None or index < 0:
            return None
        target = index + 1
        for node in nodes:
            element: Element = node.value
            if element.kind in (ElementKind.TAGS, ElementKind.CONTENT):
                if target <= 1:
                    return node
                target -= 1
            if element.kind is ElementKind.DUMMY:
                size = len(node.children)
                if size >= target:
                    return node.children[target - 1]
                target -= size
        return None

    def replicate(self, key: str, index: int, n: int) -> None:
        """Replace the ``index``-th element of class ``key`` by ``n`` copies.

        With ``n`` below one the element is hidden instead.
        """
        node = self._indexed_node(key, index)
        if node is not None:
            holder = self.ntree.proliferate(node, n, Element.copy)
            if holder is None:
                node.value.kind = ElementKind.HIDDEN
                return
            holder.value.kind = ElementKind.DUMMY
        self.map_classes()

    def set_variables(self, key: str, variables: str, index: int) -> None:
        """Fill ``$(name)`` placeholders below the ``index``-th element of ``key``.

        ``variables`` has the form ``name1=value1&name2=value2``.
        """
        node = self._indexed_node(key, index)
        if node is None:
            return

        def visit(current: Node) -> bool:
            element: Element = current.value
            if element.kind is ElementKind.CONTENT:
                element.content = replace_variables(variables, element.content)
                return False
            if element.kind is ElementKind.TAGS:
                element.open_tag = replace_variables(variables, element.open_tag)
                return True
            return element.kind is ElementKind.DUMMY

        node.traverse(visit)

    def hide(self, key: str, index: int) -> None:
        """Keep the ``index``-th element of class ``key`` out of the output."""
        node = self._indexed_node(key, index)
        if node is not None:
            node.value.kind = ElementKind.HIDDEN

    def class_count(self, key: str) -> int:
        """Count the visible instances of class ``key``."""
        count = 0
        for node in self.class_map.get(key, []):
            element: Element = node.value
            if element.kind is ElementKind.DUMMY:
                count += len(node.children)
            elif element.kind is ElementKind.TAGS:
                count += 1
        return count