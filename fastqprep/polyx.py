"""Trimming of polyG and polyX tails at the 3' end of reads."""

from __future__ import annotations

from .overlap import Read

_ALLOW_ONE_MISMATCH_FOR_EACH = 8
_MAX_MISMATCH = 5
_ATCG = "ATCG"
_BASE_INDEX = {"A": 0, "T": 1, "C": 2, "G": 3, "N": 4}


def trim_poly_g(read: Read, compare_req: int) -> int:
    """Trim a polyG tail of at least ``compare_req`` scanned bases.

    Returns the number of bases removed.
    """
    data = read.seq
    rlen = len(data)
    mismatch = 0
    first_g_pos = rlen - 1
    scanned = rlen
    for i in range(rlen):
        if data[rlen - i - 1] != "G":
            mismatch += 1
        else:
            first_g_pos = rlen - i - 1
        allowed = (i + 1) // _ALLOW_ONE_MISMATCH_FOR_EACH
        if mismatch > _MAX_MISMATCH or (mismatch > allowed and i >= compare_req - 1):
            scanned = i
            break

    if scanned >= compare_req and 0 <= first_g_pos <= rlen:
        read.resize(first_g_pos)
        return rlen - len(read)
    return 0


def trim_poly_g_pair(r1: Read, r2: Read, compare_req: int) -> tuple[int, int]:
    """Trim polyG tails of both reads of a pair."""
    return trim_poly_g(r1, compare_req), trim_poly_g(r2, compare_req)


def trim_poly_x(read: Read, compare_req: int) -> tuple[str, int] | None:
    """Trim a tail dominated by one base.

    Returns the dominant base and the number of bases removed, or None if
    no polyX tail was found.
    """
    data = read.seq
    rlen = len(data)
    counts = [0, 0, 0, 0]
    pos = rlen
    for p in range(rlen):
        idx = _BASE_INDEX.get(data[rlen - p - 1], 5)
        if idx < 4:
            counts[idx] += 1
        elif idx == 4:
            # N counts toward every base
            counts = [c + 1 for c in counts]

        cmp = p + 1
        allowed = min(_MAX_MISMATCH, cmp // _ALLOW_ONE_MISMATCH_FOR_EACH)
        need_to_break = all(cmp - c > allowed for c in counts)
        if need_to_break and (p >= _ALLOW_ONE_MISMATCH_FOR_EACH or p + 1 >= compare_req - 1):
            pos = p
            break

    if pos + 1 < compare_req:
        return None

    poly = max(range(4), key=lambda b: (counts[b], -b))
    poly_base = _ATCG[poly]
    pos = min(pos, rlen - 1)
    while pos >= 0 and data[rlen - pos - 1] != poly_base:
        pos -= 1

    read.resize(rlen - pos - 1)
    return poly_base, pos + 1


def trim_poly_x_pair(
    r1: Read, r2: Read, compare_req: int
) -> tuple[tuple[str, int] | None, tuple[str, int] | None]:
    """Trim polyX tails of both reads of a pair."""
    return trim_poly_x(r1, compare_req), trim_poly_x(r2, compare_req)