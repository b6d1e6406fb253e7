"""Option groups that together describe one preprocessing run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class UmiLocation(IntEnum):
    """Where the unique molecular identifier is taken from."""

    NONE = 0
    INDEX1 = 1
    INDEX2 = 2
    READ1 = 3
    READ2 = 4
    PER_INDEX = 5
    PER_READ = 6


@dataclass
class MergeOptions:
    """Settings for merging overlapping read pairs."""

    enabled: bool = False
    include_unmerged: bool = False
    out: str = ""


@dataclass
class DuplicationOptions:
    """Settings for duplication evaluation and deduplication."""

    enabled: bool = True
    hist_size: int = 32
    dedup: bool = False
    accuracy_level: int = 1


@dataclass
class IndexFilterOptions:
    """Barcode blacklists for filtering reads by index."""

    blacklist1: list[str] = field(default_factory=list)
    blacklist2: list[str] = field(default_factory=list)
    enabled: bool = False
    threshold: int = 0


@dataclass
class LowComplexityFilterOptions:
    """Settings for the low complexity filter."""

    enabled: bool = False
    threshold: float = 0.3


@dataclass
class OverrepresentedSequenceAnalysisOptions:
    """Settings for overrepresented sequence analysis."""

    enabled: bool = False
    sampling: int = 20


@dataclass
class PolyGTrimmerOptions:
    """Settings for 3' polyG tail trimming."""

    enabled: bool = False
    min_len: int = 10


@dataclass
class PolyXTrimmerOptions:
    """Settings for 3' polyX tail trimming."""

    enabled: bool = False
    min_len: int = 10


@dataclass
class UMIOptions:
    """Settings for UMI preprocessing."""

    enabled: bool = False
    location: UmiLocation = UmiLocation.NONE
    length: int = 0
    skip: int = 0
    prefix: str = ""
    separator: str = ""
    delimiter: str = ":"


@dataclass
class CorrectionOptions:
    """Settings for base correction in overlapped regions."""

    enabled: bool = False


@dataclass
class QualityCutOptions:
    """Sliding-window cutting by quality from the front, tail or right."""

    enabled_front: bool = False
    enabled_tail: bool = False
    enabled_right: bool = False
    window_size_shared: int = 4
    quality_shared: int = 20
    window_size_front: int = 4
    quality_front: int = 20
    window_size_tail: int = 4
    quality_tail: int = 20
    window_size_right: int = 4
    quality_right: int = 20


@dataclass
class SplitOptions:
    """Settings for splitting output into several files."""

    enabled: bool = False
    number: int = 0
    size: int = 0
    digits: int = 4
    need_evaluation: bool = False
    by_file_number: bool = False
    by_file_lines: bool = False


@dataclass
class AdapterOptions:
    """Adapter sequences and how to trim them."""

    enabled: bool = True
    sequence: str = ""
    sequence_r2: str = ""
    detected_adapter1: str = ""
    detected_adapter2: str = ""
    seqs_in_fasta: list[str] = field(default_factory=list)
    fasta_file: str = ""
    has_seq_r1: bool = False
    has_seq_r2: bool = False
    has_fasta: bool = False
    detect_adapter_for_pe: bool = False
    allow_gap_overlap_trimming: bool = False
    dimer_max_len: int = 2


@dataclass
class TrimmingOptions:
    """Fixed trimming at the front and tail, and maximum lengths."""

    front1: int = 0
    tail1: int = 0
    front2: int = 0
    tail2: int = 0
    max_len1: int = 0
    max_len2: int = 0


@dataclass
class QualityFilteringOptions:
    """Settings for filtering reads by base quality."""

    enabled: bool = True
    # phred33 character; '0' is Q15
    qualified_qual: str = "0"
    unqualified_percent_limit: int = 40
    n_base_limit: int = 5
    avg_qual_req: int = 0


@dataclass
class ReadLengthFilteringOptions:
    """Settings for filtering reads by length; 0 max length means no limit."""

    enabled: bool = False
    required_length: int = 15
    max_length: int = 0