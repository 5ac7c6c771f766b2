from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from huffzip.abc import NOT_A_SYMBOL, PSEUDO_EOF, FreqType
from huffzip.pqueue import PriorityQueue


@dataclass(eq=False)
class Node:
    weight: int
    symbol: int = NOT_A_SYMBOL
    zero: Optional["Node"] = None
    one: Optional["Node"] = None

    def is_leaf(self) -> bool:
        return self.zero is None and self.one is None


def fill_queue(queue: PriorityQueue[Node], frequencies: FreqType) -> None:
    # Ascending symbol order fixes the tie-break between equal weights,
    # independent of how the table was built.
    for symbol in sorted(frequencies):
        freq = frequencies[symbol]
        assert freq > 0, f"Symbol {symbol} has non-positive frequency {freq}"
        queue.enqueue(Node(weight=freq, symbol=symbol), freq)


def build_encoding_tree(frequencies: FreqType) -> Node:
    """Build a Huffman tree and return its root.

    The first node dequeued becomes the zero branch and the second one the
    one branch. A table with a single entry gives a single leaf.
    """
    if not frequencies:
        raise ValueError("Cannot build an encoding tree from an empty table")

    queue: PriorityQueue[Node] = PriorityQueue()
    fill_queue(queue, frequencies)
    while len(queue) > 1:
        node1 = queue.dequeue()
        node2 = queue.dequeue()
        parent = Node(weight=node1.weight + node2.weight, zero=node1, one=node2)
        queue.enqueue(parent, parent.weight)
    return queue.dequeue()


def free_tree(root: Optional[Node]) -> None:
    """Detach every node from its children, leaving no references behind."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        for child in (node.zero, node.one):
            if child is not None:
                stack.append(child)
        node.zero = node.one = None


@contextmanager
def encoding_tree(frequencies: FreqType) -> Iterator[Node]:
    root = build_encoding_tree(frequencies)
    try:
        yield root
    finally:
        free_tree(root)


def is_empty_tree(root: Node) -> bool:
    return root.is_leaf() and root.symbol == PSEUDO_EOF


def count_leaves(root: Node) -> int:
    n = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            n += 1
        else:
            assert node.zero is not None and node.one is not None, \
                "Internal node with a single child"
            stack.append(node.zero)
            stack.append(node.one)
    return n
