from collections import deque
from typing import TypeVar, Generic, List, Iterator, Optional, Deque

T = TypeVar('T')


class EmptyTreeError(ValueError):
    """Raised when a value is requested from a tree with no root."""


class InternalConsistencyError(AssertionError):
    """Raised when a rotation is attempted without its pivot child.

    This only happens if the balance invariant was already broken, so it is a
    bug in the tree itself and is never caught.
    """


class AVLTree(Generic[T]):
    """Self-balancing binary search tree over totally-ordered values.

    Duplicate values are never stored. Node handles returned by ``find``,
    ``find_min``, ``find_max`` and ``next`` are only valid until the next
    mutation: two-child deletion moves values between nodes.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 1

        def __repr__(self) -> str:
            return f"Node({self.value!r}, height={self.height})"

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def count(self) -> int:
        return self._size

    def root_value(self) -> T:
        if self._root is None:
            raise EmptyTreeError("tree is empty, cannot access root value")
        return self._root.value

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def balance_factor(self, node: Optional[Node]) -> int:
        """Height of the left subtree minus height of the right subtree."""
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    # Rotations

    def _right_rotate(self, y: Node) -> Node:
        x = y.left
        if x is None:
            raise InternalConsistencyError(f"right rotation on {y!r} without a left child")
        t2 = x.right

        x.right = y
        y.left = t2

        self._update_height(y)
        self._update_height(x)

        return x

    def _left_rotate(self, x: Node) -> Node:
        y = x.right
        if y is None:
            raise InternalConsistencyError(f"left rotation on {x!r} without a right child")
        t2 = y.left

        y.left = x
        x.right = t2

        self._update_height(x)
        self._update_height(y)

        return y

    def _rebalance(self, node: Node) -> Node:
        self._update_height(node)
        balance = self.balance_factor(node)

        if balance > 1:
            if self.balance_factor(node.left) < 0:
                # left-right
                node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        if balance < -1:
            if self.balance_factor(node.right) > 0:
                # right-left
                node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    # Mutation

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        return self._rebalance(node)

    def insert(self, value: T) -> bool:
        """Insert ``value``. Returns False if it was already present."""
        size = self._size
        self._root = self._insert(self._root, value)
        return self._size > size

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max_node(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _delete(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        else:
            if node.left is None:
                self._size -= 1
                return node.right
            elif node.right is None:
                self._size -= 1
                return node.left
            else:
                successor = self._find_min_node(node.right)
                node.value = successor.value
                node.right = self._delete(node.right, successor.value)

        return self._rebalance(node)

    def delete(self, value: T) -> bool:
        """Delete ``value``. Returns False if it was not present."""
        size = self._size
        self._root = self._delete(self._root, value)
        return self._size < size

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # Lookup

    def find(self, value: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def find_min(self) -> Optional[Node]:
        if self._root is None:
            return None
        return self._find_min_node(self._root)

    def find_max(self) -> Optional[Node]:
        if self._root is None:
            return None
        return self._find_max_node(self._root)

    def min(self) -> T:
        node = self.find_min()
        if node is None:
            raise EmptyTreeError("min from empty tree")
        return node.value

    def max(self) -> T:
        node = self.find_max()
        if node is None:
            raise EmptyTreeError("max from empty tree")
        return node.value

    def next(self, value: T) -> Optional[Node]:
        """Return the node holding the in-order successor of a stored value.

        Returns None when ``value`` is the maximum, and also when ``value`` is
        not stored at all: this answers "what follows this exact value", not
        "what is the smallest value greater than x".
        """
        target = self.find(value)
        if target is None:
            return None
        if target.right is not None:
            return self._find_min_node(target.right)

        successor: Optional[AVLTree.Node] = None
        node = self._root
        while node is not target:
            if value < node.value:
                successor = node
                node = node.left
            else:
                node = node.right
        return successor

    # Range queries

    def _count_in_range(self, node: Optional[Node], low: T, high: T) -> int:
        if node is None:
            return 0
        if node.value < low:
            return self._count_in_range(node.right, low, high)
        if node.value > high:
            return self._count_in_range(node.left, low, high)
        return (1 + self._count_in_range(node.left, low, high)
                + self._count_in_range(node.right, low, high))

    def count_in_range(self, low: T, high: T) -> int:
        """Number of stored values ``v`` with ``low <= v <= high``."""
        return self._count_in_range(self._root, low, high)

    def _collect_in_range(self, node: Optional[Node], low: T, high: T, result: List[T]) -> None:
        if node is None:
            return
        if low < node.value:
            self._collect_in_range(node.left, low, high, result)
        if low <= node.value <= high:
            result.append(node.value)
        if node.value < high:
            self._collect_in_range(node.right, low, high, result)

    def values_in_range(self, low: T, high: T) -> List[T]:
        result: List[T] = []
        self._collect_in_range(self._root, low, high, result)
        return result

    def _subtree_size(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + self._subtree_size(node.left) + self._subtree_size(node.right)

    def count_greater_than(self, value: T) -> int:
        total = 0
        node = self._root
        while node is not None:
            if node.value > value:
                total += 1 + self._subtree_size(node.right)
                node = node.left
            else:
                node = node.right
        return total

    def count_less_than(self, value: T) -> int:
        total = 0
        node = self._root
        while node is not None:
            if node.value < value:
                total += 1 + self._subtree_size(node.left)
                node = node.right
            else:
                node = node.left
        return total

    # Traversals

    def in_order(self) -> Iterator[T]:
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[AVLTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[T]:
        stack: List[AVLTree.Node] = []
        last: Optional[AVLTree.Node] = None
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                yield top.value
                last = stack.pop()

    def breadth_first(self) -> Iterator[T]:
        if self._root is None:
            return
        queue: Deque[AVLTree.Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    # Whole-tree operations

    def _clone(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        copy = AVLTree.Node(node.value)
        copy.height = node.height
        copy.left = self._clone(node.left)
        copy.right = self._clone(node.right)
        return copy

    def clone(self) -> 'AVLTree[T]':
        tree: AVLTree[T] = AVLTree()
        tree._root = self._clone(self._root)
        tree._size = self._size
        return tree

    def merge(self, other: 'AVLTree[T]') -> None:
        """Insert every value of ``other``; duplicates are skipped."""
        # Materialised first so merging a tree into itself is safe.
        for value in list(other.in_order()):
            self.insert(value)

    def _validate(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(self.balance_factor(node)) > 1:
            return False
        if node.height != 1 + max(self._get_height(node.left), self._get_height(node.right)):
            return False
        if node.left is not None and not node.left.value < node.value:
            return False
        if node.right is not None and not node.value < node.right.value:
            return False
        return self._validate(node.left) and self._validate(node.right)

    def validate(self) -> bool:
        return self._validate(self._root)

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        balance = self.balance_factor(node)
        if abs(balance) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return self._get_height(self._root)

    def to_string(self, separator: str = " ") -> str:
        return "".join(f"{value}{separator}" for value in self.in_order())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"AVLTree({list(self.in_order())})"

    def __str__(self) -> str:
        return self.to_string()
