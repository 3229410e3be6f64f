"""Test fixtures for arborlib consumers.

These fixtures build the reference trees used across the test suite and
expose checks on internal bookkeeping without making it part of the public
API.
"""

from typing import Any, Dict, List

from ..core.base import AbstractTree
from ..trees import BinaryTree, OrderedTree, UnorderedTree


class SampleTree:
    """A reference tree plus handles on some of its nodes.

    Handles stay valid after the nodes are detached, which lets tests probe
    nodes that were removed while building the tree.

    Example:
        sample = make_ordered_sample()
        assert sample.root.size() == 9
        assert sample["5"].get_parent() is sample["4"]
    """

    def __init__(self, root: AbstractTree, nodes: Dict[str, AbstractTree]):
        self.root = root
        self.nodes = nodes

    def __getitem__(self, name: str) -> AbstractTree:
        return self.nodes[name]


def make_ordered_sample() -> SampleTree:
    """Build the reference ordered tree.

    Structure (8 and its children 9, 10 are added then removed)::

        1
        |-- 2
        |   |-- 4
        |   |   `-- 5
        |   |-- 6
        |   |-- 11
        |   `-- 12
        `-- 3
            `-- 7
    """
    root = OrderedTree(1)
    root.add(2)
    root.add_child(3)
    node2 = root.get_child_at(0)
    node2.add(4)
    node4 = node2.get_child_at(0)
    node4.add(5)
    node2.add(6)
    node2.add(11)
    node2.add(12)
    node3 = root.get_child_at(1)
    node3.add(7)
    node3.add(8)
    node8 = node3.get_child_at(1)
    node8.add(9)
    node8.add(10)
    node3.remove_child(8)
    node5 = node4.get_child_at(0)

    return SampleTree(root, {
        "1": root, "2": node2, "3": node3, "4": node4, "5": node5, "8": node8,
    })


def make_unordered_sample() -> SampleTree:
    """Build the reference unordered tree.

    Structure (8 and its children 9, 10 are added then removed)::

        1
        |-- 2
        |   |-- 4
        |   |   `-- 5
        |   `-- 6
        `-- 3
            `-- 7
    """
    root = UnorderedTree(1)
    root.add(2)
    root.add_child(3)
    node2 = root.find_child(2)
    node2.add(4)
    node4 = node2.find_child(4)
    node4.add(5)
    node2.add(6)
    node3 = root.find_child(3)
    node3.add(7)
    node3.add(8)
    node8 = node3.find_child(8)
    node8.add(9)
    node8.add(10)
    node3.remove_child(8)
    node5 = node4.find_child(5)

    return SampleTree(root, {
        "1": root, "2": node2, "3": node3, "4": node4, "5": node5, "8": node8,
    })


def make_binary_sample() -> SampleTree:
    """Build the reference binary tree.

    Structure (``_`` marks an empty left slot)::

        1
        |-- 2
        |   |-- 4
        |   |   `-- 5
        |   `-- 6
        `-- 3
            `-- 7
                `-- 12   (right child, left slot empty)
    """
    root = BinaryTree(1)
    root.add(2)
    root.add_child(3)
    node2 = root.get_child_at(0)
    node2.add(4)
    node4 = node2.get_left_child()
    node4.add(5)
    node2.add(6)
    node3 = root.find_child(3)
    node3.add(7)
    node3.add(8)
    node8 = node3.get_right_child()
    node8.add(9)
    node8.add(10)
    node3.remove_child(8)
    node5 = node4.get_left_child()
    node4.set_right_child(11)
    node4.remove_right_child()
    node7 = node3.get_left_child()
    node7.set_right_child(12)
    node7.remove_left_child()

    return SampleTree(root, {
        "1": root, "2": node2, "3": node3, "4": node4, "5": node5,
        "7": node7, "8": node8,
    })


class TreeTestHelper:
    """Checks on a tree's internal bookkeeping.

    Example:
        helper = TreeTestHelper(tree)
        assert helper.dangling_links() == []
    """

    def __init__(self, root: AbstractTree):
        self._root = root

    def dangling_links(self) -> List[AbstractTree]:
        """Return children whose parent link does not point at their parent."""
        dangling = []
        for node in self._root.get_nodes():
            for child in node.iter_children():
                if child.get_parent() is not node:
                    dangling.append(child)
        return dangling

    def child_slots(self, node: AbstractTree) -> List[Any]:
        """Return the raw child collection of ``node`` as a list.

        Binary nodes report empty slots as ``None``.
        """
        children = getattr(node, "_children", None)
        if children is None:
            return []
        if isinstance(children, dict):
            return list(children.elements())
        return list(children)
