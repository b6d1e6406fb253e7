"""Approximate comparison of two sequences allowing one inserted base."""

from __future__ import annotations

from itertools import accumulate

_NO_DIFF = 100000000


def _mismatch_profiles(
    ins_data: str, normal_data: str, cmplen: int, diff_limit: int
) -> tuple[list[int], list[int]]:
    if cmplen < 1:
        raise ValueError("compare length must be at least 1")
    if len(ins_data) <= cmplen or len(normal_data) < cmplen:
        raise ValueError("sequences are too short for the compare length")

    # left[i]: mismatches of ins[0..i] vs normal[0..i]
    left = list(
        accumulate(int(a != b) for a, b in zip(ins_data[:cmplen], normal_data[:cmplen]))
    )
    # right[i]: mismatches of ins[i+1..cmplen] vs normal[i..cmplen-1]
    right = [0] * cmplen
    right[-1] = int(ins_data[cmplen] != normal_data[cmplen - 1])
    for i in range(cmplen - 2, -1, -1):
        right[i] = right[i + 1] + int(ins_data[i + 1] != normal_data[i])
        if right[i] + left[0] > diff_limit:
            right[:i] = [diff_limit + 1] * i
            break
    return left, right


def match_with_one_insertion(
    ins_data: str, normal_data: str, cmplen: int, diff_limit: int
) -> bool:
    """Return True if ``ins_data`` matches ``normal_data`` with one inserted base.

    ``ins_data`` must hold at least ``cmplen + 1`` characters and
    ``normal_data`` at least ``cmplen``.
    """
    left, right = _mismatch_profiles(ins_data, normal_data, cmplen, diff_limit)
    tail = right[-1]
    for i in range(1, cmplen):
        if left[i - 1] + tail > diff_limit:
            return False
        if left[i - 1] + right[i] <= diff_limit:
            return True
    return False


def diff_with_one_insertion(
    ins_data: str, normal_data: str, cmplen: int, diff_limit: int
) -> int:
    """Return the smallest mismatch count over insertion positions.

    Returns -1 once the mismatches are known to exceed ``diff_limit``.
    """
    left, right = _mismatch_profiles(ins_data, normal_data, cmplen, diff_limit)
    tail = right[-1]
    min_diff = _NO_DIFF
    for i in range(1, cmplen):
        if left[i - 1] + tail > diff_limit:
            return -1
        min_diff = min(min_diff, left[i - 1] + right[i])
    return min_diff