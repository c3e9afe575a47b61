"""Read-only helpers over a decoded Figma node tree."""
from typing import Callable, Iterator, List, Optional

from .models import NodeBase, TextNode


def walk(node: NodeBase) -> Iterator[NodeBase]:
    """Yield a node and all of its descendants, depth-first."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        # Reversed so children come out in document order
        stack.extend(reversed(getattr(current, "children", [])))


def find_nodes(root: NodeBase, predicate: Callable[[NodeBase], bool]) -> List[NodeBase]:
    """Return every node under root (inclusive) matching predicate."""
    return [node for node in walk(root) if predicate(node)]


def find_by_name(root: NodeBase, name: str) -> Optional[NodeBase]:
    """Find the first node whose name matches, ignoring case.

    Useful to locate frames such as "Button / Guide" in a shallow file
    before fetching them in full with figma_get_file_nodes.
    """
    name = name.lower()
    for node in walk(root):
        if node.name.lower() == name:
            return node
    return None


def collect_text(root: NodeBase) -> List[str]:
    """Extract the text of all TEXT nodes under root, in document order."""
    texts = []
    for node in walk(root):
        if isinstance(node, TextNode):
            chars = node.characters.strip()
            if chars:
                texts.append(chars)
    return texts
