"""
Frequency counting, tree construction and code table generation.

Implements the statistical half of compression:
- Frequency counts over one pass of the input
- Greedy Huffman tree construction with a binary min-heap
- Root-to-leaf path codes for every leaf

Tie-break: the heap is keyed on (weight, order), where order is an
insertion counter. Leaves are pushed in ascending symbol value, and each
merged node takes the next counter value when pushed, so equal weights
pop in insertion order and the same input always yields the same tree.
"""

import heapq

from huffcodec.bitreader import EOF
from huffcodec.constants import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF
from huffcodec.errors import InvariantViolation
from huffcodec.node import INTERNAL, HuffNode

# Import for type hints only
if False:  # noqa: SIM108
    from huffcodec.bitreader import BitReader


def read_for_counts(reader: "BitReader") -> list:
    """
    Count occurrences of every word in the input.

    The terminator slot is always 1 so the terminator always gets a leaf,
    even for empty input.

    Args:
        reader: BitReader positioned at the start of the raw input

    Returns:
        List of ALPH_SIZE + 1 counts indexed by symbol value
    """
    freqs = [0] * (ALPH_SIZE + 1)
    freqs[PSEUDO_EOF] = 1

    while True:
        value = reader.read_bits(BITS_PER_WORD)
        if value == EOF:
            break
        freqs[value] += 1

    return freqs


def make_tree_from_counts(freqs: list) -> HuffNode:
    """
    Build a Huffman tree from symbol counts.

    Only symbols with a non-zero count become leaves. A lone leaf gets a
    zero-weight partner so that every leaf has a non-empty code.

    Args:
        freqs: Counts indexed by symbol value

    Returns:
        Root node of the tree

    Raises:
        InvariantViolation: If no symbol has a non-zero count
    """
    pq = []
    order = 0

    for value, weight in enumerate(freqs):
        if weight > 0:
            heapq.heappush(pq, (weight, order, HuffNode(value, weight)))
            order += 1

    if not pq:
        raise InvariantViolation("cannot build a tree without any symbols")

    if len(pq) == 1:
        lone = pq[0][2]
        partner = HuffNode(1 if lone.value == 0 else 0, 0)
        heapq.heappush(pq, (0, order, partner))
        order += 1

    while len(pq) > 1:
        _, _, left = heapq.heappop(pq)
        _, _, right = heapq.heappop(pq)
        weight = left.weight + right.weight
        heapq.heappush(pq, (weight, order, HuffNode(INTERNAL, weight, left, right)))
        order += 1

    return pq[0][2]


def make_codings_from_tree(root: HuffNode) -> list:
    """
    Derive the code for every leaf of the tree.

    Args:
        root: Root node of a tree with at least two leaves

    Returns:
        List of ALPH_SIZE + 1 entries: a string of '0'/'1' for each
        symbol with a leaf, None for every other symbol

    Raises:
        InvariantViolation: If the root is a leaf
    """
    if root.is_leaf:
        raise InvariantViolation(f"tree is a single leaf ({root.value})")

    encodings = [None] * (ALPH_SIZE + 1)
    _coding_helper(root, "", encodings)
    return encodings


def _coding_helper(node: HuffNode, path: str, encodings: list) -> None:
    if node.is_leaf:
        encodings[node.value] = path
        return

    _coding_helper(node.left, path + "0", encodings)
    _coding_helper(node.right, path + "1", encodings)
