from typing import Iterator, List, Optional, Set, Tuple


class BinaryTree:
    class Node:
        def __init__(self, value: int) -> None:
            self.value: int = value
            self.left: Optional['BinaryTree.Node'] = None
            self.right: Optional['BinaryTree.Node'] = None
            self.parent: Optional['BinaryTree.Node'] = None

        def has_children(self) -> bool:
            return self.left is not None or self.right is not None

        def has_both_children(self) -> bool:
            return self.left is not None and self.right is not None

        def __str__(self) -> str:
            parts = [f"Value = {self.value}"]
            if self.parent is not None:
                parts.append(f"Parent = {self.parent.value}")
            if self.left is not None:
                parts.append(f"Left Child = {self.left.value}")
            if self.right is not None:
                parts.append(f"Right Child = {self.right.value}")
            return "; ".join(parts)

        def __repr__(self) -> str:
            return f"BinaryTree.Node({self.value})"

    def __init__(self) -> None:
        self._root: Optional[BinaryTree.Node] = None
        self._size: int = 0

    def insert(self, value: int) -> None:
        node = BinaryTree.Node(value)
        if self._root is None:
            self._root = node
            self._size += 1
            return

        parent = self._find_parent(value)
        if parent is None:
            raise RuntimeError(f"no attachment point found for {value}: parent lookup is broken")
        self._attach(parent, node)
        self._size += 1

    def search(self, value: int) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value == node.value:
                if node.left is None or node.left.value != value:
                    return node
                node = node.left
            elif value < node.value:
                node = node.left
            else:
                node = node.right
        return None

    def successor(self, node: Node) -> Optional[Node]:
        if not node.has_children():
            return None
        if not node.has_both_children():
            return node.left if node.left is not None else node.right
        # Largest value of the left subtree, not the smallest of the right one.
        assert node.left is not None
        return self._find_max(node.left)

    def delete(self, value: int) -> None:
        node = self.search(value)
        if node is None:
            return

        replacement = self.successor(node)
        if replacement is None:
            self._detach(node)
            self._size -= 1
            return

        if replacement.parent is not node:
            orphan = replacement.left
            assert replacement.right is None
            adopter = replacement.parent
            self._detach(replacement)
            if orphan is not None:
                replacement.left = None
                self._attach(adopter, orphan)

        self._attach(node.parent, replacement)
        node.parent = None

        for child in (node.left, node.right):
            if child is not None and child is not replacement:
                self._attach(replacement, child)

        node.left = None
        node.right = None
        self._size -= 1

    def contains(self, value: int) -> bool:
        return self.search(value) is not None

    def root(self) -> Optional[Node]:
        return self._root

    def min(self) -> int:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> int:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        if self._root is None:
            return 0
        best = 0
        stack: List[Tuple[BinaryTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def nodes(self) -> Iterator[Node]:
        stack: List[BinaryTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def dump(self) -> Iterator[str]:
        for node in self.nodes():
            yield str(node)

    def in_order(self) -> List[int]:
        return [node.value for node in self.nodes()]

    def pre_order(self) -> List[int]:
        result: List[int] = []
        if self._root is None:
            return result
        stack: List[BinaryTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[int]:
        result: List[int] = []
        if self._root is None:
            return result
        stack: List[BinaryTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def copy(self) -> 'BinaryTree':
        clone = BinaryTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def is_valid(self) -> bool:
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        seen: Set[int] = set()
        # (node, exclusive lower bound, inclusive upper bound)
        stack: List[Tuple[BinaryTree.Node, Optional[int], Optional[int]]] = [(self._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if id(node) in seen:
                return False
            seen.add(id(node))
            if low is not None and node.value <= low:
                return False
            if high is not None and node.value > high:
                return False
            if node.left is not None:
                if node.left is node or node.left.parent is not node:
                    return False
                stack.append((node.left, low, node.value))
            if node.right is not None:
                if node.right is node or node.right.parent is not node:
                    return False
                stack.append((node.right, node.value, high))
        return len(seen) == self._size

    def _find_parent(self, value: int) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value <= node.value:
                if node.left is None:
                    return node
                node = node.left
            else:
                if node.right is None:
                    return node
                node = node.right
        return None

    def _attach(self, parent: Optional[Node], node: Node) -> None:
        if node is parent:
            return
        if parent is None:
            self._root = node
            node.parent = None
            return
        if node.value <= parent.value:
            parent.left = node
        else:
            parent.right = node
        node.parent = parent

    def _detach(self, node: Node) -> None:
        parent = node.parent
        if parent is None:
            if self._root is node:
                self._root = None
            return
        if parent.left is node:
            parent.left = None
        elif parent.right is node:
            parent.right = None
        node.parent = None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinaryTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinaryTree(size={self._size}, height={self.height()})"
