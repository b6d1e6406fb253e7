"""Prefix tree of nucleotide sequences used to find a dominant sequence."""

from __future__ import annotations

_RATIO_THRESHOLD = 0.95
_NUM_THRESHOLD = 50


def _slot(base: str) -> int:
    # (A,T,C,G,N) & 0x07 = (1,4,7,6,3)
    return ord(base) & 0x07


class NucleotideNode:
    """One base in the tree with the number of sequences passing through it."""

    def __init__(self, base: str = "N") -> None:
        self.count = 0
        self.base = base
        self.children: dict[int, NucleotideNode] = {}

    def ordered_children(self) -> list[NucleotideNode]:
        return [self.children[k] for k in sorted(self.children)]

    def dump(self) -> str:
        """Return the depth-first listing of bases and counts, one line per leaf."""
        kids = self.ordered_children()
        text = f"{self.base}{self.count}" + "".join(k.dump() for k in kids)
        return text if kids else text + "\n"


class NucleotideTree:
    """Counts sequence prefixes and reports the dominant path through them."""

    def __init__(self) -> None:
        self.root = NucleotideNode()

    def add_seq(self, seq: str) -> None:
        """Add a sequence, stopping at the first 'N'."""
        node = self.root
        for base in seq:
            if base == "N":
                break
            child = node.children.get(_slot(base))
            if child is None:
                child = node.children[_slot(base)] = NucleotideNode(base)
            child.count += 1
            node = child

    def dominant_path(self) -> tuple[str, bool]:
        """Follow children holding at least 95% of the reads.

        Returns the path and whether it ended for lack of data rather than
        for lack of a dominant child.
        """
        path = []
        node = self.root
        while True:
            kids = node.ordered_children()
            total = sum(k.count for k in kids)
            if total < _NUM_THRESHOLD:
                return "".join(path), True
            dominant = next(
                (k for k in kids if k.count / total >= _RATIO_THRESHOLD), None
            )
            if dominant is None:
                return "".join(path), False
            path.append(dominant.base)
            node = dominant