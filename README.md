# fastqprep

Building blocks for preprocessing FASTQ sequencing data:

- **Overlap analysis** of paired-end reads (`fastqprep.overlap`), with
  optional one-gap tolerance, and merging of overlapping pairs into one read.
- **PolyG and polyX tail trimming** (`fastqprep.polyx`).
- **Matching with one insertion** between two sequences under a mismatch
  limit (`fastqprep.matcher`).
- **Nucleotide prefix tree** that finds the dominant path among many
  sequences (`fastqprep.nucleotidetree`).
- **Options** for a preprocessing run (`fastqprep.options`,
  `fastqprep.settings`) with defaults, limits and validation rules, and an
  argument parser for them (`fastqprep.argparser`).
- A small thread-safe FIFO for one producer and one consumer
  (`fastqprep.spsclist`) and string/path helpers (`fastqprep.util`).

The package has no runtime dependencies beyond the Python standard library
and supports Python 3.10 and later.

## Overlap analysis

```python
from fastqprep.overlap import Read, analyze, merge

r1 = "CAGCGCCTACGGGCCCCTTTTTCTGCGCGACCGCGTGGCTGTGGGCGCGGATGCCTTTGAGCGCGGTGACTTCTCACTGCGTATCGAGC"
r2 = "ACCTCCAGCGGCTCGATACGCAGTGAGAAGTCACCGCGCTCAAAGGCATCCGCGCCCACAGCCACGCGGTCGCGCAGAAAAAGGGGTCC"

ov = analyze(r1, r2, 2, 30, 0.2, False)
print(ov.overlapped, ov.offset, ov.overlap_len, ov.diff)
# True 10 79 1
```

`analyze` accepts strings or `Read` objects and compares read 1 with the
reverse complement of read 2: first with read 2 shifted forward, then
backward, and, when `allow_gap` is true, both again tolerating a single
insertion. It returns an `OverlapResult` (`overlapped`, `offset`,
`overlap_len`, `diff`, `has_gap`). `merge(r1, r2, ov)` builds one merged
`Read` from an overlapping pair, naming it `<name> merged_<len1>_<len2>`, or
returns `None` when the pair does not overlap.

`Read` holds `name`, `seq`, `strand` and `quality`; `reverse_complement()`
returns a new read and `resize(length)` truncates it in place.

## Tail trimming

In `fastqprep.polyx`:

- `trim_poly_g(read, compare_req)` trims a 3' run of G and returns the number
  of bases removed.
- `trim_poly_x(read, compare_req)` trims a 3' tail dominated by one base and
  returns `(base, removed)`, or `None` if no such tail was found.
- `trim_poly_g_pair` and `trim_poly_x_pair` do the same for both reads of a
  pair and return a tuple of the two results.

## One-insertion matching

`match_with_one_insertion(ins_data, normal_data, cmplen, diff_limit)` tells
whether `ins_data` (at least `cmplen + 1` long) matches `normal_data` with one
inserted base; `diff_with_one_insertion` returns the smallest mismatch count,
or -1 once the limit is exceeded.

## Dominant path

```python
from fastqprep.nucleotidetree import NucleotideTree

tree = NucleotideTree()
for _ in range(100):
    tree.add_seq("AAAATTTTGGGGCCCC")
print(tree.dominant_path())
# ('AAAATTTTGGGGCCCC', True)
```

`dominant_path()` follows children that hold at least 95% of the sequences
while at least 50 sequences remain, and returns the path with a flag that is
`False` when it stopped for lack of a dominant child.

## Options

`fastqprep.options.Options` is a dataclass of all run settings, grouped in the
dataclasses of `fastqprep.settings`. `Options.validate()` checks the settings,
normalises some of them (for example clamping `thread` to 1..64) and raises
`fastqprep.util.FastpError` on an invalid combination. Other helpers include
`is_paired()`, `shall_detect_adapter(is_r2)`, `load_fasta_adapters(contigs)`
(taking a name-to-sequence mapping), `init_index_filtering(...)` and
`adapter1_label()` / `adapter2_label()`.

`fastqprep.argparser.build_parser()` returns an `argparse.ArgumentParser`
for every option; the parsed namespace has a `given` frozenset naming the
options that appeared on the command line.

## What this package does not do

It does not read or write FASTQ or FASTA files, run a processing pipeline,
produce JSON or HTML reports, or install a command-line program. Turning a
parsed namespace into an `Options` object is left to the caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.