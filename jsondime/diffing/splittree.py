# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Recursive decomposition of two sequences into matched and unmatched regions.

Each node covers a rectangle (a_range, b_range) of the two sequences.
A node whose rectangle contains a common run records the run as
left/right and owns two subtrees for the regions before and after it.
Nodes without a match are leaves, their ranges are unmatched.
"""

from ..values import values_equal
from .lcs import Span, longest_common_subsequence

__all__ = ["SplitNode", "split_by_common_runs", "iter_split_tree", "iter_unmatched"]


class SplitNode(object):
    __slots__ = ("a_range", "b_range", "left", "right", "left_subtree", "right_subtree")

    def __init__(self, a_range, b_range):
        self.a_range = a_range
        self.b_range = b_range
        # Matched spans in A and B, both None for leaves
        self.left = None
        self.right = None
        self.left_subtree = None
        self.right_subtree = None

    @property
    def matched(self):
        return self.left is not None

    @property
    def is_empty(self):
        return not self.matched and not self.a_range.length and not self.b_range.length

    def __repr__(self):
        if self.matched:
            return "SplitNode(match=%r/%r)" % (tuple(self.left), tuple(self.right))
        return "SplitNode(unmatched=%r/%r)" % (tuple(self.a_range), tuple(self.b_range))


def split_by_common_runs(A, B, a_range=None, b_range=None, compare=values_equal):
    """Build the split tree of A[a_range] and B[b_range].

    Uses a work stack instead of recursion, the depth of the tree can be
    on the order of the sequence length.
    """
    if a_range is None:
        a_range = Span(0, len(A))
    if b_range is None:
        b_range = Span(0, len(B))

    root = SplitNode(Span(*a_range), Span(*b_range))
    stack = [root]
    while stack:
        node = stack.pop()
        (i0, i1), (j0, j1) = node.a_range, node.b_range
        match = longest_common_subsequence(A[i0:i1], B[j0:j1], compare)
        if not match.found:
            continue

        left = match.a.offset(i0)
        right = match.b.offset(j0)
        node.left = left
        node.right = right
        node.left_subtree = SplitNode(Span(i0, left.start), Span(j0, right.start))
        node.right_subtree = SplitNode(Span(left.end, i1), Span(right.end, j1))
        stack.append(node.right_subtree)
        stack.append(node.left_subtree)
    return root


def iter_split_tree(root):
    "Yield the nodes of a split tree in order: left subtree, node, right subtree."
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left_subtree
        node = stack.pop()
        yield node
        node = node.right_subtree


def iter_unmatched(root):
    "Yield (a_range, b_range) of the non-empty unmatched leaves, in order."
    for node in iter_split_tree(root):
        if not node.matched and not node.is_empty:
            yield node.a_range, node.b_range
