# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from ..values import values_equal

__all__ = ["Span", "LcsMatch", "NO_SPAN", "longest_common_subsequence"]


class Span(namedtuple("Span", ["start", "end"])):
    "Half-open index range [start, end) into a sequence."
    __slots__ = ()

    @property
    def length(self):
        return self.end - self.start

    def offset(self, n):
        return Span(self.start + n, self.end + n)


# Sentinel range used when nothing matched
NO_SPAN = Span(0, 0)

LcsMatch = namedtuple("LcsMatch", ["found", "a", "b"])


def common_run_grid(A, B, compare=values_equal):
    """Compute grid R[x][y] == length of the common run ending at A[x-1], B[y-1].

    Returns the grid together with (llcs, x, y), the length and end
    position of the best run. Among runs of maximal length the last one
    in row-major order is chosen.
    """
    N, M = len(A), len(B)
    R = [[0]*(M+1) for i in range(N+1)]
    llcs, xbest, ybest = 0, 0, 0
    for x in range(1, N+1):
        a = A[x-1]
        prev = R[x-1]
        row = R[x]
        for y in range(1, M+1):
            if compare(a, B[y-1]):
                n = row[y] = prev[y-1] + 1
                # >= on purpose, later runs of equal length win
                if n >= llcs:
                    llcs, xbest, ybest = n, x, y
    return R, (llcs, xbest, ybest)


def longest_common_subsequence(A, B, compare=values_equal):
    """Find the longest run of elements shared by A and B.

    Returns an LcsMatch with the spans occupied by the run in A and B.
    If A and B share no element, found is False and both spans are NO_SPAN.
    """
    if not A or not B:
        return LcsMatch(False, NO_SPAN, NO_SPAN)
    _, (llcs, x, y) = common_run_grid(A, B, compare)
    if llcs == 0:
        return LcsMatch(False, NO_SPAN, NO_SPAN)
    return LcsMatch(True, Span(x - llcs, x), Span(y - llcs, y))
