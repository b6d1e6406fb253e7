"""The complete set of options for one run, with validation."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from .settings import (
    AdapterOptions,
    CorrectionOptions,
    DuplicationOptions,
    IndexFilterOptions,
    LowComplexityFilterOptions,
    MergeOptions,
    OverrepresentedSequenceAnalysisOptions,
    PolyGTrimmerOptions,
    PolyXTrimmerOptions,
    QualityCutOptions,
    QualityFilteringOptions,
    ReadLengthFilteringOptions,
    SplitOptions,
    TrimmingOptions,
    UMIOptions,
    UmiLocation,
)
from .util import FastpError, check_file_valid, file_exists

_BASES = frozenset("ATCG")
_MIN_FASTA_ADAPTER_LEN = 6


def _warn(message: str) -> None:
    sys.stderr.write(message + "\n")


def _is_alnum_ascii(c: str) -> bool:
    return c.isascii() and c.isalnum()


@dataclass
class Options:
    """Input, output, trimming, filtering and reporting settings."""

    in1: str = ""
    in2: str = ""
    out1: str = ""
    out2: str = ""
    unpaired1: str = ""
    unpaired2: str = ""
    failed_out: str = ""
    overlapped_out: str = ""
    json_file: str = ""
    html_file: str = ""
    report_title: str = "fastp report"
    compression: int = 4
    phred64: bool = False
    dont_overwrite: bool = False
    input_from_stdin: bool = False
    output_to_stdout: bool = False
    interleaved_input: bool = False
    reads_to_process: int = 0
    fix_mgi: bool = False
    thread: int = 3
    trim: TrimmingOptions = field(default_factory=TrimmingOptions)
    qualfilter: QualityFilteringOptions = field(default_factory=QualityFilteringOptions)
    length_filter: ReadLengthFilteringOptions = field(
        default_factory=ReadLengthFilteringOptions
    )
    adapter: AdapterOptions = field(default_factory=AdapterOptions)
    split: SplitOptions = field(default_factory=SplitOptions)
    quality_cut: QualityCutOptions = field(default_factory=QualityCutOptions)
    correction: CorrectionOptions = field(default_factory=CorrectionOptions)
    umi: UMIOptions = field(default_factory=UMIOptions)
    poly_g_trim: PolyGTrimmerOptions = field(default_factory=PolyGTrimmerOptions)
    poly_x_trim: PolyXTrimmerOptions = field(default_factory=PolyXTrimmerOptions)
    over_rep_analysis: OverrepresentedSequenceAnalysisOptions = field(
        default_factory=OverrepresentedSequenceAnalysisOptions
    )
    over_rep_seqs1: dict[str, int] = field(default_factory=dict)
    over_rep_seqs2: dict[str, int] = field(default_factory=dict)
    seq_len1: int = 151
    seq_len2: int = 151
    complexity_filter: LowComplexityFilterOptions = field(
        default_factory=LowComplexityFilterOptions
    )
    index_filter: IndexFilterOptions = field(default_factory=IndexFilterOptions)
    duplicate: DuplicationOptions = field(default_factory=DuplicationOptions)
    insert_size_max: int = 512
    overlap_require: int = 30
    overlap_diff_limit: int = 5
    overlap_diff_percent_limit: int = 20
    verbose: bool = False
    merge: MergeOptions = field(default_factory=MergeOptions)
    writer_buffer_size: int = 1 << 22

    def is_paired(self) -> bool:
        return bool(self.in2) or self.interleaved_input

    def adapter_cutting_enabled(self) -> bool:
        return self.adapter.enabled and (self.is_paired() or bool(self.adapter.sequence))

    def poly_x_trimming_enabled(self) -> bool:
        return self.poly_x_trim.enabled

    def load_fasta_adapters(self, contigs: Mapping[str, str]) -> None:
        """Take adapter sequences from FASTA contigs (name -> sequence).

        Contigs are visited in name order; duplicates and sequences shorter
        than 6 bases are skipped.
        """
        self.adapter.seqs_in_fasta = []
        if not self.adapter.fasta_file:
            self.adapter.has_fasta = False
            return
        for _, seq in sorted(contigs.items()):
            if len(seq) >= _MIN_FASTA_ADAPTER_LEN:
                if seq not in self.adapter.seqs_in_fasta:
                    self.adapter.seqs_in_fasta.append(seq)
            else:
                _warn(
                    f"skip too short adapter sequence in {self.adapter.fasta_file} "
                    f"(6bp required): {seq}"
                )
        self.adapter.has_fasta = bool(self.adapter.seqs_in_fasta)

    def _check_not_overwriting(self, path: str) -> None:
        if self.dont_overwrite and file_exists(path):
            raise FastpError(
                f"{path} already exists and you have set to not rewrite output files "
                "by --dont_overwrite"
            )

    def validate(self) -> bool:
        """Check the options, normalising some of them; raise FastpError on errors."""
        self._validate_inputs()
        self._validate_merge()
        self._validate_outputs()
        self._validate_ranges()
        self._validate_quality_cut()
        self._validate_adapters()
        if self.correction.enabled and not self.is_paired():
            _warn(
                "WARNING: base correction is only appliable for paired end data, "
                "ignoring -c/--correction"
            )
            self.correction.enabled = False
        self._validate_umi()
        if not 1 <= self.over_rep_analysis.sampling <= 10000:
            raise FastpError("overrepresentation_sampling should be 1~10000")
        return True

    def _validate_inputs(self) -> None:
        if not self.in1:
            if self.in2:
                raise FastpError(
                    "read2 input is specified by <in2>, but read1 input is not "
                    "specified by <in1>"
                )
            if not self.input_from_stdin:
                raise FastpError(
                    "read1 input should be specified by --in1, or enable --stdin if "
                    "you want to read STDIN"
                )
            self.in1 = "/dev/stdin"
        else:
            check_file_valid(self.in1)
        if self.in2:
            check_file_valid(self.in2)

        if self.output_to_stdout:
            if self.out1:
                _warn(f"In STDOUT mode, ignore the out1 filename {self.out1}")
                self.out1 = ""
            if self.out2:
                _warn(f"In STDOUT mode, ignore the out2 filename {self.out2}")
                self.out2 = ""

    def _validate_merge(self) -> None:
        merge = self.merge
        if not merge.enabled:
            if merge.out:
                _warn(
                    "You haven't enabled merging mode (-m/--merge), ignoring argument "
                    f"--merged_out = {merge.out}"
                )
                merge.out = ""
            return

        if self.split.enabled:
            raise FastpError("splitting mode cannot work with merging mode")
        if not self.in2 and not self.interleaved_input:
            raise FastpError("read2 input should be specified by --in2 for merging mode")
        self.correction.enabled = True
        if not merge.out and not self.output_to_stdout and self.out1 and not self.out2:
            _warn(
                "You specified --out1, but haven't specified --merged_out in merging "
                "mode. Using --out1 to store the merged reads to be compatible with "
                "fastp 0.19.8\n"
            )
            merge.out = self.out1
            self.out1 = ""
        if merge.include_unmerged:
            for attr, label in (
                ("out1", "--out1"),
                ("out2", "--out2"),
                ("unpaired1", "--unpaired1"),
                ("unpaired2", "--unpaired1"),
            ):
                value = getattr(self, attr)
                if value:
                    _warn(
                        "You specified --include_unmerged in merging mode. Ignoring "
                        f"argument {label} = {value}"
                    )
                    setattr(self, attr, "")
        if not merge.out and not self.output_to_stdout:
            raise FastpError(
                "In merging mode, you should either specify --merged_out or enable --stdout"
            )
        if merge.out:
            for value, label in (
                (self.out1, "--out1"),
                (self.out2, "--out2"),
                (self.unpaired1, "--unpaired1"),
                (self.unpaired2, "--unpaired2"),
            ):
                if merge.out == value:
                    raise FastpError(
                        f"--merged_out and {label} shouldn't have same file name"
                    )

    def _validate_outputs(self) -> None:
        if self.output_to_stdout:
            if self.split.enabled:
                raise FastpError("splitting mode cannot work with stdout mode")
            kind = ""
            if self.merge.enabled:
                kind = "merged"
            elif self.is_paired():
                kind = "interleaved"
            _warn(f"Streaming uncompressed {kind} reads to STDOUT...")
            if self.is_paired() and not self.merge.enabled:
                _warn("Enable interleaved output mode for paired-end input.")
            _warn("")

        if not self.in2 and not self.interleaved_input and self.out2:
            raise FastpError(
                "read2 output is specified (--out2), but neighter read2 input is not "
                "specified (--in2), nor read1 is interleaved."
            )

        if self.in2 or self.interleaved_input:
            if self.out1 and not self.out2:
                raise FastpError(
                    "paired-end input, read1 output should be specified together with "
                    "read2 output (--out2 needed) "
                )
            if not self.out1 and self.out2 and not self.merge.enabled:
                raise FastpError(
                    "paired-end input, read1 output should be specified (--out1 needed) "
                    "together with read2 output "
                )

        if self.in2 and self.interleaved_input:
            raise FastpError(
                "<in2> is not allowed when <in1> is specified as interleaved mode by "
                "(--interleaved_in)"
            )

        if self.out1:
            if self.out1 == self.out2:
                raise FastpError(
                    "read1 output (--out1) and read2 output (--out2) should be different"
                )
            self._check_not_overwriting(self.out1)
        if self.out2:
            self._check_not_overwriting(self.out2)
        if self.overlapped_out:
            self._check_not_overwriting(self.overlapped_out)

        if not self.is_paired():
            for attr, label in (
                ("unpaired1", "--unpaired1"),
                ("unpaired2", "--unpaired2"),
                ("overlapped_out", "--overlapped_out"),
            ):
                value = getattr(self, attr)
                if value:
                    _warn(f"Not paired-end mode. Ignoring argument {label} = {value}")
                    setattr(self, attr, "")
        if self.split.enabled:
            for attr, label in (("unpaired1", "--unpaired1"), ("unpaired2", "--unpaired2")):
                value = getattr(self, attr)
                if value:
                    _warn(
                        "Outputing unpaired reads is not supported in splitting mode. "
                        f"Ignoring argument {label} = {value}"
                    )
                    setattr(self, attr, "")

        for value, label in ((self.unpaired1, "--unpaired1"), (self.unpaired2, "--unpaired2")):
            if not value:
                continue
            self._check_not_overwriting(value)
            if value == self.out1:
                raise FastpError(f"{label} and --out1 shouldn't have same file name")
            if value == self.out2:
                raise FastpError(f"{label} and --out2 shouldn't have same file name")

        if self.failed_out:
            self._check_not_overwriting(self.failed_out)
            for value, label in (
                (self.out1, "--out1"),
                (self.out2, "--out2"),
                (self.unpaired1, "--unpaired1"),
                (self.unpaired2, "--unpaired2"),
                (self.merge.out, "--merged_out"),
            ):
                if self.failed_out == value:
                    raise FastpError(
                        f"--failed_out and {label} shouldn't have same file name"
                    )

        if self.dont_overwrite:
            self._check_not_overwriting(self.json_file)
            self._check_not_overwriting(self.html_file)

    def _validate_ranges(self) -> None:
        if not 1 <= self.compression <= 9:
            raise FastpError(
                "compression level (--compression) should be between 1 ~ 9, 1 for "
                "fastest, 9 for smallest"
            )
        if self.reads_to_process < 0:
            raise FastpError(
                "the number of reads to process (--reads_to_process) cannot be negative"
            )
        if self.thread < 1:
            self.thread = 1
        elif self.thread > 64:
            _warn(f"WARNING: fastp uses up to 64 threads although you specified {self.thread}")
            self.thread = 64

        trim = self.trim
        if trim.front1 < 0:
            raise FastpError("trim_front1 (--trim_front1) should be 0 ~ 30, suggest 0 ~ 4")
        if trim.tail1 < 0:
            raise FastpError("trim_tail1 (--trim_tail1) should be 0 ~ 100, suggest 0 ~ 4")
        if trim.front2 < 0:
            raise FastpError("trim_front2 (--trim_front2) should be 0 ~ 30, suggest 0 ~ 4")
        if trim.tail2 < 0:
            raise FastpError("trim_tail2 (--trim_tail2) should be 0 ~ 100, suggest 0 ~ 4")

        qf = self.qualfilter
        if not 0 <= ord(qf.qualified_qual) - 33 <= 93:
            raise FastpError(
                "qualitified phred (--qualified_quality_phred) should be 0 ~ 93, "
                "suggest 10 ~ 20"
            )
        if not 0 <= qf.avg_qual_req <= 93:
            raise FastpError(
                "average quality score requirement (--average_qual) should be 0 ~ 93, "
                "suggest 20 ~ 30"
            )
        if not 0 <= qf.unqualified_percent_limit <= 100:
            raise FastpError(
                "unqualified percent limit (--unqualified_percent_limit) should be "
                "0 ~ 100, suggest 20 ~ 60"
            )
        if not 0 <= qf.n_base_limit <= 50:
            raise FastpError("N base limit (--n_base_limit) should be 0 ~ 50, suggest 3 ~ 10")
        if self.length_filter.required_length < 0:
            raise FastpError(
                "length requirement (--length_required) should be >0, suggest 15 ~ 100"
            )
        if not 0 <= self.overlap_diff_percent_limit <= 100:
            raise FastpError(
                "the maximum percentage of mismatched bases to detect overlapped region "
                "(--overlap_diff_percent_limit) should be 0 ~ 100, suggest 20 ~ 60"
            )

        split = self.split
        if split.enabled:
            if not 0 <= split.digits <= 10:
                raise FastpError(
                    "you have enabled splitting output to multiple files, the digits "
                    "number of file name prefix (--split_prefix_digits) should be 0 ~ 10."
                )
            if split.by_file_number:
                if not 2 <= split.number < 1000:
                    raise FastpError(
                        "you have enabled splitting output by file number, the number of "
                        "files (--split) should be 2 ~ 999."
                    )
                self.thread = min(self.thread, split.number)
            if split.by_file_lines and split.size < 1000 // 4:
                raise FastpError(
                    "you have enabled splitting output by file lines, the file lines "
                    "(--split_by_lines) should be >= 1000."
                )

    def _validate_quality_cut(self) -> None:
        qc = self.quality_cut
        if not (qc.enabled_front or qc.enabled_tail or qc.enabled_right):
            return
        checks = (
            (qc.window_size_shared, qc.quality_shared, "cut_window_size", "cut_mean_quality", "15"),
            (qc.window_size_front, qc.quality_front, "cut_front_window_size",
             "cut_front_mean_quality", "15"),
            (qc.window_size_tail, qc.quality_tail, "cut_tail_window_size",
             "cut_tail_mean_quality", "13"),
            (qc.window_size_right, qc.quality_right, "cut_right_window_size",
             "cut_right_mean_quality", "15"),
        )
        for window, quality, window_name, quality_name, suggest in checks:
            if not 1 <= window <= 1000:
                raise FastpError(
                    "the sliding window size for cutting by quality "
                    f"(--{window_name}) should be between 1~1000."
                )
            if not 1 <= quality <= 30:
                raise FastpError(
                    "the mean quality requirement for cutting by quality "
                    f"(--{quality_name}) should be 1 ~ 30, suggest {suggest} ~ 20."
                )

    def _validate_adapters(self) -> None:
        seq = self.adapter.sequence
        if seq != "auto" and seq:
            if len(seq) <= 3:
                raise FastpError("the sequence of <adapter_sequence> should be longer than 3")
            if not set(seq) <= _BASES:
                raise FastpError(
                    "the adapter <adapter_sequence> can only have bases in {A, T, C, G}, "
                    f"but the given sequence is: {seq}"
                )
            self.adapter.has_seq_r1 = True

        seq2 = self.adapter.sequence_r2
        if seq2 != "auto" and seq2:
            if len(seq2) <= 3:
                raise FastpError(
                    "the sequence of <adapter_sequence_r2> should be longer than 3"
                )
            if not set(seq2) <= _BASES:
                raise FastpError(
                    "the adapter <adapter_sequence_r2> can only have bases in "
                    f"{{A, T, C, G}}, but the given sequenceR2 is: {seq2}"
                )
            self.adapter.has_seq_r2 = True

    def _validate_umi(self) -> None:
        umi = self.umi
        if not umi.enabled:
            return
        if umi.location in (UmiLocation.READ1, UmiLocation.READ2, UmiLocation.PER_READ):
            if not 1 <= umi.length <= 100:
                raise FastpError("UMI length should be 1~100")
            if not 0 <= umi.skip <= 100:
                raise FastpError(
                    "The base number to skip after UMI <umi_skip> should be 0~100"
                )
        else:
            if umi.skip > 0:
                raise FastpError(
                    "Only if the UMI location is in read1/read2/per_read, you can skip "
                    "bases after UMI"
                )
            if umi.length > 0:
                raise FastpError(
                    "Only if the UMI location is in read1/read2/per_read, you can set "
                    "the UMI length"
                )
        if umi.prefix:
            if len(umi.prefix) >= 10:
                raise FastpError("UMI prefix should be shorter than 10")
            if not all(_is_alnum_ascii(c) for c in umi.prefix):
                raise FastpError(
                    "UMI prefix can only have characters and numbers, but the given is: "
                    + umi.prefix
                )
        if umi.separator:
            if len(umi.separator) > 10:
                raise FastpError("UMI separator cannot be longer than 10 base pairs")
            if not set(umi.separator) <= _BASES:
                raise FastpError(
                    "UMI separator can only have bases in {A, T, C, G}, but the given "
                    f"sequence is: {umi.separator}"
                )

    def shall_detect_adapter(self, is_r2: bool = False) -> bool:
        """Whether the adapter for read1 (or read2) should be auto-detected."""
        if not self.adapter.enabled:
            return False
        if is_r2:
            return (
                self.is_paired()
                and self.adapter.detect_adapter_for_pe
                and self.adapter.sequence_r2 == "auto"
            )
        if self.is_paired():
            return self.adapter.detect_adapter_for_pe and self.adapter.sequence == "auto"
        return self.adapter.sequence == "auto"

    def init_index_filtering(
        self, blacklist_file1: str, blacklist_file2: str, threshold: int = 0
    ) -> None:
        """Load barcode blacklists and enable index filtering if any were given."""
        if not blacklist_file1 and not blacklist_file2:
            return
        if blacklist_file1:
            check_file_valid(blacklist_file1)
            self.index_filter.blacklist1 = self.make_list_from_file_by_line(blacklist_file1)
        if blacklist_file2:
            check_file_valid(blacklist_file2)
            self.index_filter.blacklist2 = self.make_list_from_file_by_line(blacklist_file2)
        if not self.index_filter.blacklist1 and not self.index_filter.blacklist2:
            return
        self.index_filter.enabled = True
        self.index_filter.threshold = threshold

    def make_list_from_file_by_line(self, filename: str) -> list[str]:
        """Read one barcode per line; every barcode may only hold A/T/C/G."""
        _warn(f"filter by index, loading {filename}")
        with open(filename, encoding="ascii", errors="replace", newline="") as handle:
            text = handle.read()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        barcodes = []
        for line in lines:
            if len(line) >= 2 and line[-1] in "\r\n":
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            if not set(line) <= _BASES:
                raise FastpError(
                    f"processing {filename}, each line should be one barcode, which can "
                    "only contain A/T/C/G"
                )
            _warn(line)
            barcodes.append(line)
        _warn("")
        return barcodes

    def adapter1_label(self) -> str:
        seq = self.adapter.sequence
        return "unspecified" if seq in ("", "auto") else seq

    def adapter2_label(self) -> str:
        seq = self.adapter.sequence_r2
        return "unspecified" if seq in ("", "auto") else seq