"""
Huffman tree node.

A node is either a leaf holding one symbol value and its weight, or an
internal node holding two children and the sum of their weights. Each
child is owned by exactly one parent.
"""

# Value carried by internal nodes
INTERNAL = -1


class HuffNode:
    """Binary tree node for Huffman coding."""

    def __init__(
        self,
        value: int,
        weight: int,
        left: "HuffNode | None" = None,
        right: "HuffNode | None" = None,
    ) -> None:
        """
        Initialize a node.

        Args:
            value: Symbol value for leaves, INTERNAL for internal nodes
            weight: Occurrence count (sum of children for internal nodes)
            left: Left child, reached by a 0 bit
            right: Right child, reached by a 1 bit
        """
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def leaves(self) -> list:
        """
        Collect leaf values in left-to-right order.

        Returns:
            List of symbol values
        """
        if self.is_leaf:
            return [self.value]
        return self.left.leaves() + self.right.leaves()

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"HuffNode(value={self.value}, weight={self.weight})"
        return f"HuffNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"
