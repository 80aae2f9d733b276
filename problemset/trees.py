"""Binary tree problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def build_tree_pre_in(preorder, inorder) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    preorder, inorder = list(preorder), list(inorder)
    if not preorder or not inorder:
        return None
    root = TreeNode(preorder[0])
    try:
        split = inorder.index(root.val)
    except ValueError:
        return root
    if split:
        root.left = build_tree_pre_in(preorder[1:1 + split], inorder[:split])
    if len(inorder) - 1 - split:
        root.right = build_tree_pre_in(preorder[1 + split:], inorder[split + 1:])
    return root


def build_tree_in_post(inorder, postorder) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    inorder, postorder = list(inorder), list(postorder)
    if not inorder or not postorder:
        return None
    root = TreeNode(postorder[-1])
    try:
        split = inorder.index(root.val)
    except ValueError:
        return root
    if split:
        root.left = build_tree_in_post(inorder[:split], postorder[:split])
    if len(inorder) - 1 - split:
        root.right = build_tree_in_post(inorder[split + 1:], postorder[split:-1])
    return root


def tree_height(root: Optional[TreeNode]) -> int:
    """Height of the tree, counted in nodes."""
    if root is None:
        return 0
    return 1 + max(tree_height(root.left), tree_height(root.right))


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True if every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(tree_height(root.left) - tree_height(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def _prune(node: Optional[TreeNode], target: int) -> bool:
    """Prune target leaves below ``node``; True if ``node`` itself should go."""
    if node is None:
        return True
    if _prune(node.left, target):
        node.left = None
    if _prune(node.right, target):
        node.right = None
    return node.left is None and node.right is None and node.val == target


def remove_leaf_nodes(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Repeatedly delete leaves equal to ``target``; the tree is changed in place."""
    if root is None:
        return None
    _prune(root, target)
    if root.val == target and root.left is None and root.right is None:
        return None
    return root


def evaluate_tree(root: TreeNode) -> bool:
    """Evaluate a boolean tree: leaves 0/1, 2 is OR, 3 is AND."""
    if root.val in (0, 1):
        return root.val == 1
    if root.val == 2:
        return evaluate_tree(root.left) or evaluate_tree(root.right)
    if root.val == 3:
        return evaluate_tree(root.left) and evaluate_tree(root.right)
    return False


def distribute_coins(root: Optional[TreeNode]) -> int:
    """Moves needed so every node holds one coin; the tree is changed in place."""
    if root is None:
        return 0
    moves = distribute_coins(root.left) + distribute_coins(root.right)
    for child in (root.left, root.right):
        if child is not None:
            extra = child.val - 1
            child.val = 1
            root.val += extra
            moves += abs(extra)
    return moves