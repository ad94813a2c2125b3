"""Binary trees, binary search trees and ASCII rendering of trees."""

from collections import deque

from .mathutil import usize_log2


class Tree:
    """A binary tree node linked to its parent and children."""

    def __init__(self, value):
        self.value = value
        self.parent = None
        self.left = None
        self.right = None

    def root(self):
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def preorder(self):
        return _preorder(self)

    def inorder(self):
        return _inorder(self)

    def postorder(self):
        return _postorder(self)

    def levelorder(self):
        return [node.value for node, _ in _breadth_first(self)]

    def size(self):
        return tree_size(self)

    def height(self):
        return tree_height(self)

    def detach(self):
        """Unlink this node from its parent, keeping its own subtree."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
            self.parent = None

    def insert(self, node, is_left):
        """Make ``node`` the left or right child, dropping the child it replaces."""
        if node is not None:
            node.detach()
            node.parent = self
        old = self.left if is_left else self.right
        if old is not None and old is not node and old.parent is self:
            old.parent = None
        if is_left:
            self.left = node
        else:
            self.right = node

    @classmethod
    def build(cls, preorder, inorder):
        """Build a tree from its preorder and inorder traversals.

        Returns ``None`` for empty traversals.
        """
        preorder = list(preorder)
        inorder = list(inorder)
        if len(preorder) != len(inorder):
            raise ValueError(
                f"expected equaled lengths: {len(preorder)} != {len(inorder)}"
            )
        if not preorder:
            return None

        tree = cls(preorder[0])
        try:
            p = inorder.index(tree.value)
        except ValueError:
            p = len(inorder)

        left_inorder = inorder[:p]
        right_inorder = inorder[p + 1:]
        left_values = set(left_inorder)
        left_preorder = [v for v in preorder[1:] if v in left_values]
        right_preorder = [v for v in preorder[1:] if v not in left_values]

        tree.insert(cls.build(left_preorder, left_inorder), True)
        tree.insert(cls.build(right_preorder, right_inorder), False)
        return tree

    def equal(self, other):
        """Whether both trees have the same preorder and inorder traversals."""
        return _preorder(self) == _preorder(other) and _inorder(self) == _inorder(other)

    def render(self):
        return render_tree(self)

    def __repr__(self):
        return f"Tree({self.value!r})"


def _preorder(tree):
    result = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _inorder(tree):
    result = []
    stack = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def _postorder(tree):
    result = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _breadth_first(tree):
    """Yield ``(node, number)`` in level order, numbering the root 1."""
    if tree is None:
        return
    queue = deque([(tree, 1)])
    while queue:
        node, number = queue.popleft()
        yield node, number
        if node.left is not None:
            queue.append((node.left, number << 1))
        if node.right is not None:
            queue.append((node.right, number << 1 | 1))


def tree_size(tree):
    """Number of nodes; 0 for ``None``."""
    return len(_preorder(tree))


def tree_height(tree):
    """Number of levels; 0 for ``None``."""
    height = 0
    level = [tree] if tree is not None else []
    while level:
        height += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return height


def _tree_char(n):
    if n < 0 or n > 62:
        raise ValueError(f"expected 0 <= n <= 62, but found: n = {n}")
    if n < 10:
        return chr(ord("0") + n)
    if n < 36:
        return chr(ord("a") + n - 10)
    return chr(ord("A") + n - 36)


def render_tree(tree):
    """Draw the tree as ASCII art.

    Values are drawn as single characters ``0-9a-zA-Z``; a lone node is drawn
    as its number. An empty tree gives an empty string.
    """
    h = tree_height(tree)
    if h == 0:
        return ""
    if h == 1:
        return str(tree.value)

    rows = 2 * h - 1
    c = 1 << (h - 1)
    width = 3 * c - 1
    count = 1 << h

    cols = [0] * count
    for i in range(c, count):
        j = i - c
        cols[i] = 4 + 6 * (j // 2) if j & 1 else 3 * j
    for i in range(c - 1, 0, -1):
        cols[i] = (cols[i << 1] + cols[i << 1 | 1]) // 2

    matrix = [[" "] * width for _ in range(rows)]
    for node, number in reversed(list(_breadth_first(tree))):
        layer = usize_log2(number)
        row = layer << 1
        col = cols[number]
        if layer:
            parent_col = cols[number >> 1]
            if number & 1:
                matrix[row - 1][col - 1] = "\\"
                for k in range(parent_col + 1, col - 1):
                    matrix[row - 2][k] = "_"
            else:
                matrix[row - 1][col + 1] = "/"
                for k in range(col + 2, parent_col):
                    matrix[row - 2][k] = "_"
        matrix[row][col] = _tree_char(node.value)

    return "\n".join("".join(line) for line in matrix)


class BST:
    """An unbalanced binary search tree; equal values go to the right."""

    def __init__(self):
        self.root = None

    def insert(self, value):
        node = Tree(value)
        if self.root is None:
            self.root = node
            return
        p = self.root
        while True:
            if value < p.value:
                if p.left is None:
                    p.insert(node, True)
                    return
                p = p.left
            else:
                if p.right is None:
                    p.insert(node, False)
                    return
                p = p.right

    def search(self, value):
        """Return the node holding ``value``, or ``None``."""
        p = self.root
        while p is not None and p.value != value:
            p = p.left if value < p.value else p.right
        return p

    def __len__(self):
        return tree_size(self.root)