"""Binary tree nodes with parent links, and the queries built on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    # Building

    def add_left(self, value: int) -> Node:
        """Make a new node the left child, detaching any previous left child."""
        child = Node(value, self)
        if self.left is not None:
            self.left.parent = None
        self.left = child
        return child

    def add_right(self, value: int) -> Node:
        """Make a new node the right child, detaching any previous right child."""
        child = Node(value, self)
        if self.right is not None:
            self.right.parent = None
        self.right = child
        return child

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def delete(self) -> None:
        """Take this subtree apart, unlinking every node in post-order."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            if self.parent.right is self:
                self.parent.right = None
        self._unlink()

    def _unlink(self) -> None:
        for child in (self.left, self.right):
            if child is not None:
                child._unlink()
        self.left = None
        self.right = None
        self.parent = None

    # Node checks

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    # Traversals

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    # Measures

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf (0 for a leaf)."""
        if self.is_leaf():
            return 0
        return 1 + max(
            child.height() for child in (self.left, self.right) if child is not None
        )

    def _levels(self) -> int:
        """Number of nodes on the longest path down to a leaf (1 for a leaf)."""
        left = self.left._levels() if self.left is not None else 0
        right = self.right._levels() if self.right is not None else 0
        return 1 + max(left, right)

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return (
            1
            + (self.left.size() if self.left is not None else 0)
            + (self.right.size() if self.right is not None else 0)
        )

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        if self.is_leaf():
            return 1
        return sum(
            child.leaves() for child in (self.left, self.right) if child is not None
        )

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(
            child.internal_nodes()
            for child in (self.left, self.right)
            if child is not None
        )

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        left = self.left._levels() if self.left is not None else 0
        right = self.right._levels() if self.right is not None else 0
        return left - right

    # Shape checks

    def is_full(self) -> bool:
        """True when every node has either zero or two children."""
        if self.is_leaf():
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """True when every inner node has two children and all leaves share a level."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        if self.left.height() != self.right.height():
            return False
        return self.left.is_perfect() and self.right.is_perfect()

    # Relatives

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()