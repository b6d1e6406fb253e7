"""Command-line option definitions for the preprocessor."""

from __future__ import annotations

import argparse
from typing import Any, NamedTuple


class _Spec(NamedTuple):
    name: str
    short: str
    kind: type
    default: Any
    help: str


def _flag(name: str, short: str, text: str) -> _Spec:
    return _Spec(name, short, bool, False, text)


def _text(name: str, short: str, text: str, default: str = "") -> _Spec:
    return _Spec(name, short, str, default, text)


def _number(name: str, short: str, text: str, default: int | None = 0) -> _Spec:
    return _Spec(name, short, int, default, text)


_SPECS: tuple[_Spec, ...] = (
    # input/output
    _text("in1", "i", "read1 input file name"),
    _text("out1", "o", "read1 output file name"),
    _text("in2", "I", "read2 input file name"),
    _text("out2", "O", "read2 output file name"),
    _text("unpaired1", "", "for PE input, if read1 passed QC but read2 not, it will be written "
          "to unpaired1. Default is to discard it."),
    _text("unpaired2", "", "for PE input, if read2 passed QC but read1 not, it will be written "
          "to unpaired2. If --unpaired2 is same as --unpaired1 (default mode), both unpaired "
          "reads will be written to this same file."),
    _text("overlapped_out", "", "for each read pair, output the overlapped region if it has no "
          "any mismatched base."),
    _text("failed_out", "", "specify the file to store reads that cannot pass the filters."),
    _flag("merge", "m", "for paired-end input, merge each pair of reads into a single read if "
          "they are overlapped. The merged reads will be written to the file given by "
          "--merged_out, the unmerged reads will be written to the files specified by --out1 "
          "and --out2. The merging mode is disabled by default."),
    _text("merged_out", "", "in the merging mode, specify the file name to store merged output, "
          "or specify --stdout to stream the merged output"),
    _flag("include_unmerged", "", "in the merging mode, write the unmerged or unpaired reads to "
          "the file specified by --merge. Disabled by default."),
    _flag("phred64", "6", "indicate the input is using phred64 scoring (it'll be converted to "
          "phred33, so the output will still be phred33)"),
    _number("compression", "z", "compression level for gzip output (1 ~ 9). 1 is fastest, 9 is "
            "smallest, default is 4.", 4),
    _flag("stdin", "", "input from STDIN. If the STDIN is interleaved paired-end FASTQ, please "
          "also add --interleaved_in. Adapter auto-detection is disabled for STDIN mode"),
    _flag("stdout", "", "stream passing-filters reads to STDOUT. This option will result in "
          "interleaved FASTQ output for paired-end output. Disabled by default."),
    _flag("interleaved_in", "", "indicate that <in1> is an interleaved FASTQ which contains both "
          "read1 and read2. Disabled by default."),
    _number("reads_to_process", "", "specify how many reads/pairs to be processed. Default 0 "
            "means process all reads."),
    _flag("dont_overwrite", "", "don't overwrite existing files. Overwritting is allowed by "
          "default."),
    _flag("fix_mgi_id", "", "the MGI FASTQ ID format is not compatible with many BAM operation "
          "tools, enable this option to fix it."),
    _flag("verbose", "V", "output verbose log information (i.e. when every 1M reads are "
          "processed)."),
    # adapter
    _flag("disable_adapter_trimming", "A", "adapter trimming is enabled by default. If this "
          "option is specified, adapter trimming is disabled"),
    _text("adapter_sequence", "a", "the adapter for read1. For SE data, if not specified, the "
          "adapter will be auto-detected. For PE data, this is used if R1/R2 are found not "
          "overlapped.", "auto"),
    _text("adapter_sequence_r2", "", "the adapter for read2 (PE data only). This is used if "
          "R1/R2 are found not overlapped. If not specified, it will be the same as "
          "<adapter_sequence>", "auto"),
    _text("adapter_fasta", "", "specify a FASTA file to trim both read1 and read2 (if PE) by all "
          "the sequences in this FASTA file"),
    _flag("detect_adapter_for_pe", "2", "enable adapter detection for PE data to get ultra-clean "
          "data. It takes more time to find just a little bit more adapters."),
    _flag("allow_gap_overlap_trimming", "", "allow up to one gap when trim adapters by overlap "
          "analysis for PE data. By default no gap is allowed."),
    _number("dimer_max_len", "", "if the read length is less than or equal to this value after "
            "adapter trimming, it is considered an adapter dimer. Requires adapter evidence.", 2),
    # trimming
    _number("trim_front1", "f", "trimming how many bases in front for read1, default is 0"),
    _number("trim_tail1", "t", "trimming how many bases in tail for read1, default is 0"),
    _number("max_len1", "b", "if read1 is longer than max_len1, then trim read1 at its tail to "
            "make it as long as max_len1. Default 0 means no limitation"),
    _number("trim_front2", "F", "trimming how many bases in front for read2. If it's not "
            "specified, it will follow read1's settings"),
    _number("trim_tail2", "T", "trimming how many bases in tail for read2. If it's not "
            "specified, it will follow read1's settings"),
    _number("max_len2", "B", "if read2 is longer than max_len2, then trim read2 at its tail to "
            "make it as long as max_len2. Default 0 means no limitation. If it's not specified, "
            "it will follow read1's settings"),
    # duplication evaluation and deduplication
    _flag("dedup", "D", "enable deduplication to drop the duplicated reads/pairs"),
    _number("dup_calc_accuracy", "", "accuracy level to calculate duplication (1~6), higher "
            "level uses more memory (1G, 2G, 4G, 8G, 16G, 32G). Default 1 for no-dedup mode, "
            "and 3 for dedup mode.", None),
    _flag("dont_eval_duplication", "", "don't evaluate duplication rate to save time and use "
          "less memory."),
    # polyG tail trimming
    _flag("trim_poly_g", "g", "force polyG tail trimming, by default trimming is automatically "
          "enabled for Illumina NextSeq/NovaSeq data"),
    _number("poly_g_min_len", "", "the minimum length to detect polyG in the read tail. 10 by "
            "default.", 10),
    _flag("disable_trim_poly_g", "G", "disable polyG tail trimming, by default trimming is "
          "automatically enabled for Illumina NextSeq/NovaSeq data"),
    # polyX tail trimming
    _flag("trim_poly_x", "x", "enable polyX trimming in 3' ends."),
    _number("poly_x_min_len", "", "the minimum length to detect polyX in the read tail. 10 by "
            "default.", 10),
    # cutting by quality
    _flag("cut_front", "5", "move a sliding window from front (5') to tail, drop the bases in "
          "the window if its mean quality < threshold, stop otherwise."),
    _flag("cut_tail", "3", "move a sliding window from tail (3') to front, drop the bases in the "
          "window if its mean quality < threshold, stop otherwise."),
    _flag("cut_right", "r", "move a sliding window from front to tail, if meet one window with "
          "mean quality < threshold, drop the bases in the window and the right part, and then "
          "stop."),
    _number("cut_window_size", "W", "the window size option shared by cut_front, cut_tail or "
            "cut_sliding. Range: 1~1000, default: 4", 4),
    _number("cut_mean_quality", "M", "the mean quality requirement option shared by cut_front, "
            "cut_tail or cut_sliding. Range: 1~36 default: 20 (Q20)", 20),
    _number("cut_front_window_size", "", "the window size option of cut_front, default to "
            "cut_window_size if not specified", 4),
    _number("cut_front_mean_quality", "", "the mean quality requirement option for cut_front, "
            "default to cut_mean_quality if not specified", 20),
    _number("cut_tail_window_size", "", "the window size option of cut_tail, default to "
            "cut_window_size if not specified", 4),
    _number("cut_tail_mean_quality", "", "the mean quality requirement option for cut_tail, "
            "default to cut_mean_quality if not specified", 20),
    _number("cut_right_window_size", "", "the window size option of cut_right, default to "
            "cut_window_size if not specified", 4),
    _number("cut_right_mean_quality", "", "the mean quality requirement option for cut_right, "
            "default to cut_mean_quality if not specified", 20),
    # quality filtering
    _flag("disable_quality_filtering", "Q", "quality filtering is enabled by default. If this "
          "option is specified, quality filtering is disabled"),
    _number("qualified_quality_phred", "q", "the quality value that a base is qualified. "
            "Default 15 means phred quality >=Q15 is qualified.", 15),
    _number("unqualified_percent_limit", "u", "how many percents of bases are allowed to be "
            "unqualified (0~100). Default 40 means 40%", 40),
    _number("n_base_limit", "n", "if one read's number of N base is >n_base_limit, then this "
            "read/pair is discarded. Default is 5", 5),
    _number("average_qual", "e", "if one read's average quality score <avg_qual, then this "
            "read/pair is discarded. Default 0 means no requirement"),
    # length filtering
    _flag("disable_length_filtering", "L", "length filtering is enabled by default. If this "
          "option is specified, length filtering is disabled"),
    _number("length_required", "l", "reads shorter than length_required will be discarded, "
            "default is 15.", 15),
    _number("length_limit", "", "reads longer than length_limit will be discarded, default 0 "
            "means no limitation."),
    # low complexity filtering
    _flag("low_complexity_filter", "y", "enable low complexity filter. The complexity is defined "
          "as the percentage of base that is different from its next base "
          "(base[i] != base[i+1])."),
    _number("complexity_threshold", "Y", "the threshold for low complexity filter (0~100). "
            "Default is 30, which means 30% complexity is required.", 30),
    # filter by indexes
    _text("filter_by_index1", "", "specify a file contains a list of barcodes of index1 to be "
          "filtered out, one barcode per line"),
    _text("filter_by_index2", "", "specify a file contains a list of barcodes of index2 to be "
          "filtered out, one barcode per line"),
    _number("filter_by_index_threshold", "", "the allowed difference of index barcode for index "
            "filtering, default 0 means completely identical."),
    # base correction in overlapped regions
    _flag("correction", "c", "enable base correction in overlapped regions (only for PE data), "
          "default is disabled"),
    _number("overlap_len_require", "", "the minimum length to detect overlapped region of PE "
            "reads. This will affect overlap analysis based PE merge, adapter trimming and "
            "correction. 30 by default.", 30),
    _number("overlap_diff_limit", "", "the maximum number of mismatched bases to detect "
            "overlapped region of PE reads. This will affect overlap analysis based PE merge, "
            "adapter trimming and correction. 5 by default.", 5),
    _number("overlap_diff_percent_limit", "", "the maximum percentage of mismatched bases to "
            "detect overlapped region of PE reads. This will affect overlap analysis based PE "
            "merge, adapter trimming and correction. Default 20 means 20%.", 20),
    # umi
    _flag("umi", "U", "enable unique molecular identifier (UMI) preprocessing"),
    _text("umi_loc", "", "specify the location of UMI, can be "
          "(index1/index2/read1/read2/per_index/per_read, default is none"),
    _number("umi_len", "", "if the UMI is in read1/read2, its length should be provided"),
    _text("umi_prefix", "", "if specified, an underline will be used to connect prefix and UMI "
          "(i.e. prefix=UMI, UMI=AATTCG, final=UMI_AATTCG). No prefix by default"),
    _number("umi_skip", "", "if the UMI is in read1/read2, fastp can skip several bases "
            "following UMI, default is 0"),
    _text("umi_delim", "", "delimiter to use between the read name and the UMI, default is :",
          ":"),
    # overrepresented sequence analysis
    _flag("overrepresentation_analysis", "p", "enable overrepresented sequence analysis."),
    _number("overrepresentation_sampling", "P", "one in (--overrepresentation_sampling) reads "
            "will be computed for overrepresentation analysis (1~10000), smaller is slower, "
            "default is 20.", 20),
    # reporting
    _text("json", "j", "the json format report file name", "fastp.json"),
    _text("html", "h", "the html format report file name", "fastp.html"),
    _text("report_title", "R", "should be quoted with ' or \", default is \"fastp report\"",
          "fastp report"),
    # threading
    _number("thread", "w", "worker thread number, default is 3", 3),
    # split the output
    _number("split", "s", "split output by limiting total split file number with this option "
            "(2~999), a sequential number prefix will be added to output name ( 0001.out.fq, "
            "0002.out.fq...), disabled by default"),
    _number("split_by_lines", "S", "split output by limiting lines of each file with this "
            "option(>=1000), a sequential number prefix will be added to output name ( "
            "0001.out.fq, 0002.out.fq...), disabled by default"),
    _number("split_prefix_digits", "d", "the digits for the sequential number padding (1~10), "
            "default is 4, so the filename will be padded as 0001.xxx, 0 to disable padding", 4),
    # deprecated options
    _flag("cut_by_quality5", "", "DEPRECATED, use --cut_front instead."),
    _flag("cut_by_quality3", "", "DEPRECATED, use --cut_tail instead."),
    _flag("cut_by_quality_aggressive", "", "DEPRECATED, use --cut_right instead."),
    _flag("discard_unmerged", "", "DEPRECATED, no effect now, see the introduction for merging."),
)


def _mark_given(namespace: argparse.Namespace, dest: str) -> None:
    given = getattr(namespace, "given", frozenset())
    namespace.given = frozenset(given | {dest})


class _GivenValue(argparse.Action):
    """Store a value and record that the option appeared on the command line."""

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        _mark_given(namespace, self.dest)


class _GivenFlag(argparse.Action):
    """Set a flag to True and record that it appeared on the command line."""

    def __init__(self, option_strings, dest, default=False, required=False, help=None):
        super().__init__(
            option_strings, dest, nargs=0, default=default, required=required, help=help
        )

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, True)
        _mark_given(namespace, self.dest)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for every option of the preprocessor.

    The parsed namespace carries a ``given`` frozenset naming every option
    that appeared on the command line, so that options left at their
    defaults can be told apart from options given explicitly.
    """
    parser = argparse.ArgumentParser(
        prog="fastqprep",
        description="an ultra-fast all-in-one FASTQ preprocessor",
        add_help=False,
        allow_abbrev=False,
    )
    for spec in _SPECS:
        flags = [f"-{spec.short}"] if spec.short else []
        flags.append(f"--{spec.name}")
        text = spec.help.replace("%", "%%")
        if spec.kind is bool:
            parser.add_argument(*flags, dest=spec.name, action=_GivenFlag, help=text)
        else:
            parser.add_argument(
                *flags,
                dest=spec.name,
                action=_GivenValue,
                type=spec.kind,
                default=spec.default,
                metavar=spec.kind.__name__,
                help=text,
            )
    parser.add_argument("-?", "--help", action="help", help="print this message")
    parser.set_defaults(given=frozenset())
    return parser