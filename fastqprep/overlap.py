"""Overlap detection and merging of paired-end reads."""

from __future__ import annotations

from dataclasses import dataclass

from .matcher import diff_with_one_insertion
from .util import complement

_COMPLETE_COMPARE_REQUIRE = 50


def reverse_complement(seq: str) -> str:
    """Return the reverse complement; unknown bases become 'N'."""
    return "".join(complement(base) for base in reversed(seq))


@dataclass
class Read:
    """A FASTQ record."""

    name: str
    seq: str
    strand: str
    quality: str

    def __len__(self) -> int:
        return len(self.seq)

    def reverse_complement(self) -> Read:
        """Return a new read with reverse-complemented bases and reversed qualities."""
        return Read(self.name, reverse_complement(self.seq), self.strand, self.quality[::-1])

    def resize(self, length: int) -> None:
        """Truncate bases and qualities to ``length``; out-of-range lengths are ignored."""
        if length < 0 or length > len(self.seq):
            return
        self.seq = self.seq[:length]
        self.quality = self.quality[:length]


@dataclass(frozen=True)
class OverlapResult:
    """Where read1 and the reverse complement of read2 overlap."""

    overlapped: bool = False
    offset: int = 0
    overlap_len: int = 0
    diff: int = 0
    has_gap: bool = False


def _count_mismatches(a: str, b: str, length: int, limit: int | None = None) -> int:
    count = 0
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            count += 1
            if limit is not None and count > limit:
                break
    return count


def _accept_no_gap(a: str, b: str, length: int, limit: int) -> int | None:
    """Return the mismatch count if the overlap is accepted, else None.

    Only the first bases are held to the limit; the full count is reported.
    """
    protected = min(length, _COMPLETE_COMPARE_REQUIRE)
    mismatches = _count_mismatches(a, b, protected, limit)
    if mismatches > limit:
        return None
    if length > _COMPLETE_COMPARE_REQUIRE:
        mismatches = _count_mismatches(a, b, length)
    return mismatches


def _gap_diff(a: str, b: str, overlap_len: int, limit: int) -> int:
    if overlap_len < 2:
        return -1
    diff = diff_with_one_insertion(a, b, overlap_len - 1, limit)
    if diff < 0 or diff > limit:
        diff = diff_with_one_insertion(b, a, overlap_len - 1, limit)
    return diff


def analyze(
    seq1: str | Read,
    seq2: str | Read,
    diff_limit: int,
    overlap_require: int,
    diff_percent_limit: float,
    allow_gap: bool = False,
) -> OverlapResult:
    """Find the overlap of ``seq1`` and the reverse complement of ``seq2``.

    Forward offsets are tried first, then negative offsets, and only then,
    if ``allow_gap`` is set, the same with one inserted base.
    """
    if isinstance(seq1, Read):
        seq1 = seq1.seq
    if isinstance(seq2, Read):
        seq2 = seq2.seq
    str1 = seq1
    str2 = reverse_complement(seq2)
    len1, len2 = len(str1), len(str2)

    def limit_for(overlap_len: int) -> int:
        return min(diff_limit, int(overlap_len * diff_percent_limit))

    def forward_offsets():
        offset = 0
        while offset < len1 - overlap_require:
            yield offset, min(len1 - offset, len2)
            offset += 1

    def reverse_offsets():
        offset = 0
        while offset > -(len2 - overlap_require):
            yield offset, min(len1, len2 - abs(offset))
            offset -= 1

    for offset, overlap_len in forward_offsets():
        diff = _accept_no_gap(str1[offset:], str2, overlap_len, limit_for(overlap_len))
        if diff is not None:
            return OverlapResult(True, offset, overlap_len, diff, False)

    for offset, overlap_len in reverse_offsets():
        diff = _accept_no_gap(str1, str2[-offset:], overlap_len, limit_for(overlap_len))
        if diff is not None:
            return OverlapResult(True, offset, overlap_len, diff, False)

    if allow_gap:
        for offset, overlap_len in forward_offsets():
            limit = limit_for(overlap_len)
            diff = _gap_diff(str1[offset:], str2, overlap_len, limit)
            if 0 <= diff <= limit:
                return OverlapResult(True, offset, overlap_len, diff, True)

        for offset, overlap_len in reverse_offsets():
            limit = limit_for(overlap_len)
            diff = _gap_diff(str1, str2[-offset:], overlap_len, limit)
            if 0 <= diff <= limit:
                return OverlapResult(True, offset, overlap_len, diff, True)

    return OverlapResult()


def merge(r1: Read, r2: Read, ov: OverlapResult) -> Read | None:
    """Merge a read pair along its overlap; None if the pair does not overlap."""
    if not ov.overlapped:
        return None
    ol = ov.overlap_len
    len1 = ol + max(0, ov.offset)
    len2 = len(r2) - ol if ov.offset > 0 else 0

    rr2 = r2.reverse_complement()
    merged_seq = r1.seq[:len1]
    merged_qual = r1.quality[:len1]
    if ov.offset > 0:
        merged_seq += rr2.seq[ol:ol + len2]
        merged_qual += rr2.quality[ol:ol + len2]

    suffix = f" merged_{len1}_{len2}"
    strand = r1.strand if r1.strand == "+" else r1.strand + suffix
    return Read(r1.name + suffix, merged_seq, strand, merged_qual)