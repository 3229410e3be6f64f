"""Textual renderings of trees.

Two formats are supported, both pure functions of a node's element and
children:

Tree drawing, in the style of the UNIX ``tree`` command::

    1
    |-- 2
    |   |-- 4
    |   |   `-- 5
    |   `-- 6
    `-- 3
        `-- 7

Newick-like nesting, ``(1(2(4(5))(6))(3(7)))`` with the default marks.
"""

from typing import List, Optional, Set

from ..config import RenderConfig
from .node import Tree


def render_tree(root: Tree, config: Optional[RenderConfig] = None) -> str:
    """Draw a tree with one node per line.

    Nodes are emitted depth-first from an explicit stack. For each node, the
    connector at every level is chosen by walking from the node up to
    ``root`` and asking, at each level, whether a sibling of the node on the
    way is still waiting on the stack. A pending sibling gives a tee (or a
    pipe for ancestor levels); otherwise an elbow (or blank).

    Args:
        root: Node to render; its ancestors are ignored
        config: Connector strings (defaults to ``RenderConfig()``)

    Returns:
        The drawing, each line terminated by a newline
    """
    config = (config or RenderConfig()).ensure_valid()

    lines: List[str] = []
    stack: List[Tree] = [root]
    visited: Set[int] = {id(root)}

    while stack:
        current = stack.pop()
        depth = root.depth(current)

        if depth > 0:
            pending = {id(node) for node in stack}
            indents: List[str] = []
            node = current
            for level in range(depth):
                sibling_pending = any(id(sibling) in pending for sibling in node.get_siblings())
                if sibling_pending:
                    indents.append(config.tee if level == 0 else config.pipe)
                else:
                    indents.append(config.elbow if level == 0 else config.blank)
                node = node.get_parent()
            lines.append("".join(reversed(indents)))

        lines.append(f"{current.get_element()}\n")

        # Stack is LIFO; push in reverse to emit children in native order
        children = list(current.iter_children())
        for child in reversed(children):
            if id(child) not in visited:
                visited.add(id(child))
                stack.append(child)

    return "".join(lines)


def render_newick(root: Tree, start_mark: str = "(", end_mark: str = ")") -> str:
    """Render a tree as nested ``(element children...)`` groups.

    Args:
        root: Node to render
        start_mark: Opening mark of each subtree
        end_mark: Closing mark of each subtree

    Returns:
        The Newick-like string
    """
    parts: List[str] = []
    closer = object()
    stack: List[object] = [root]

    while stack:
        item = stack.pop()
        if item is closer:
            parts.append(end_mark)
            continue

        parts.append(start_mark)
        parts.append(str(item.get_element()))
        stack.append(closer)
        children = list(item.iter_children())
        for child in reversed(children):
            stack.append(child)

    return "".join(parts)
