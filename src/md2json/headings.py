"""Heading tree reconstruction and compression.

Headings arrive as a flat, ordered list. The tree is rebuilt by keeping a
pointer to the most recently attached node and walking up its parents when a
heading does not nest below it. Skipped levels (``##`` followed by ``####``)
are bridged with placeholder nodes so every parent/child step is exactly one
level deep.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from md2json.schemas import Header

logger = logging.getLogger(__name__)

ROOT_KEY = 0


@dataclass(frozen=True)
class HeadingOccurrence:
    """A heading as it appears in the document."""

    level: int
    text: str
    anchor_id: str = ""


@dataclass
class HeaderNode:
    """A node of the working heading tree.

    ``parent_key`` is resolved through :attr:`HeadingTree.nodes`; the root is
    the only node without one.
    """

    key: int
    level: int
    id: str = ""
    text: str = ""
    placeholder: bool = False
    children: list[HeaderNode] = field(default_factory=list)
    parent_key: int | None = None


@dataclass
class HeadingTree:
    """Working tree rooted at a synthetic level-0 node."""

    root: HeaderNode
    nodes: dict[int, HeaderNode]
    dropped: int = 0

    def parent(self, node: HeaderNode) -> HeaderNode | None:
        if node.parent_key is None:
            return None
        return self.nodes[node.parent_key]

    def add_child(self, parent: HeaderNode, level: int) -> HeaderNode:
        node = HeaderNode(key=len(self.nodes), level=level, parent_key=parent.key)
        self.nodes[node.key] = node
        parent.children.append(node)
        return node


def build_heading_tree(occurrences: Iterable[HeadingOccurrence]) -> HeadingTree:
    """Build the working tree for ``occurrences`` (document order).

    When no ancestor with a lower level exists for a heading, that heading and
    every heading after it are left out of the tree; ``dropped`` records how
    many.
    """
    root = HeaderNode(key=ROOT_KEY, level=0)
    tree = HeadingTree(root=root, nodes={ROOT_KEY: root})
    current = root

    pending = list(occurrences)
    for position, occurrence in enumerate(pending):
        attach_to: HeaderNode | None = current
        if occurrence.level - current.level <= 0:
            attach_to = _find_attachment_point(tree, current, occurrence.level)
        if attach_to is None:
            tree.dropped = len(pending) - position
            logger.warning(
                "No parent found for heading %r (level %d); dropping %d heading(s)",
                occurrence.text,
                occurrence.level,
                tree.dropped,
            )
            break
        current = _attach_chain(tree, attach_to, occurrence)

    return tree


def _find_attachment_point(
    tree: HeadingTree, current: HeaderNode, level: int
) -> HeaderNode | None:
    node = tree.parent(current)
    while node is not None and node.level >= level:
        node = tree.parent(node)
    return node


def _attach_chain(
    tree: HeadingTree, parent: HeaderNode, occurrence: HeadingOccurrence
) -> HeaderNode:
    """Attach ``occurrence`` below ``parent``, bridging skipped levels.

    Returns the node that carries the occurrence itself.
    """
    depth = occurrence.level - parent.level
    node = parent
    for step in range(1, depth + 1):
        node = tree.add_child(node, parent.level + step)
        node.placeholder = step < depth

    node.level = occurrence.level
    node.id = occurrence.anchor_id
    node.text = occurrence.text
    return node


def compress_tree(nodes: Iterable[HeaderNode]) -> list[Header]:
    """Project working nodes into output headers, keeping child order."""
    return [
        Header(id=node.id, text=node.text, children=compress_tree(node.children))
        for node in nodes
    ]


def build_header_data(occurrences: Iterable[HeadingOccurrence]) -> list[Header]:
    """Build and compress the heading tree in one step."""
    tree = build_heading_tree(occurrences)
    return compress_tree(tree.root.children)


def count_headers(headers: Iterable[Header]) -> int:
    """Count every entry in the tree, placeholders included."""
    total = 0
    for header in headers:
        total += 1
        total += count_headers(header.children)
    return total
