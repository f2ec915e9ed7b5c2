"""
Position Resolver.

Finds the innermost syntax node under a cursor offset and returns the full
path to it from the document root. The path is what lets the annotator
replay type information from the operation down to the hovered token.
"""

import logging
from typing import List, Tuple

from graphql.language import DocumentNode, Node

logger = logging.getLogger(__name__)

AncestorChain = Tuple[Node, ...]


def child_nodes(node: Node) -> List[Node]:
    """
    Return the located children of a node in source order.

    Children are discovered through ``Node.keys`` so every node kind is
    covered, including lists of children (definitions, selections,
    arguments, directives, variable definitions, values).
    """
    children: List[Node] = []
    for key in node.keys:
        if key == "loc":
            continue
        value = getattr(node, key, None)
        if isinstance(value, Node):
            children.append(value)
        elif isinstance(value, (list, tuple)):
            children.extend(item for item in value if isinstance(item, Node))
    located = [child for child in children if child.loc is not None]
    # sorted() is stable, so declaration order breaks ties between equal starts
    return sorted(located, key=lambda child: child.loc.start)


def touches(node: Node, offset: int) -> bool:
    """True if ``offset`` lies in ``[start, end]``; the end boundary counts."""
    return node.loc is not None and node.loc.start <= offset <= node.loc.end


def ancestor_chain(document: DocumentNode, offset: int) -> AncestorChain:
    """
    Walk from the document to the deepest node touching ``offset``.

    At each level the last child (in source order) touching the offset is
    chosen, so a token starting exactly at the offset wins over a sibling
    that merely ends there.

    Returns:
        AncestorChain: Nodes from the document root to the leaf. Always
        contains at least the document itself.
    """
    chain: List[Node] = [document]
    node: Node = document
    while True:
        candidates = [child for child in child_nodes(node) if touches(child, offset)]
        if not candidates:
            break
        node = candidates[-1]
        chain.append(node)

    logger.debug(f"Offset {offset} resolved to {chain[-1].kind} (depth {len(chain)})")
    return tuple(chain)
