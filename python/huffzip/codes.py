from huffzip.abc import CodeType, FreqType
from huffzip.tree import Node


def build_code_table(root: Node) -> CodeType:
    """Map each leaf symbol to its root-to-leaf path ('0' = zero branch)."""
    codes: CodeType = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = path
            continue
        assert node.zero is not None and node.one is not None, \
            f"Internal node at {path!r} has a single child"
        stack.append((node.one, path + "1"))
        stack.append((node.zero, path + "0"))
    return codes


def weighted_length(freq: FreqType, codes: CodeType) -> int:
    return sum(f * len(codes[s]) for s, f in freq.items())


def is_prefix_free(codes: CodeType) -> bool:
    # After sorting, a prefix always sorts directly before some word it prefixes
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True
