import pytest

from fastqprep.options import Options
from fastqprep.settings import UmiLocation
from fastqprep.util import FastpError


@pytest.fixture
def fastq(tmp_path):
    path = tmp_path / "r1.fq"
    path.write_text("@r\nACGT\n+\nIIII\n")
    return str(path)


@pytest.fixture
def fastq2(tmp_path):
    path = tmp_path / "r2.fq"
    path.write_text("@r\nACGT\n+\nIIII\n")
    return str(path)


def test_is_paired():
    opt = Options()
    assert opt.is_paired() is False
    opt.in2 = "x.fq"
    assert opt.is_paired() is True
    assert Options(interleaved_input=True).is_paired() is True


def test_adapter_cutting_enabled():
    assert Options().adapter_cutting_enabled() is False
    assert Options(in2="r2.fq").adapter_cutting_enabled() is True
    opt = Options()
    opt.adapter.sequence = "AGATCGGAAGAGC"
    assert opt.adapter_cutting_enabled() is True
    opt.adapter.enabled = False
    assert opt.adapter_cutting_enabled() is False


def test_poly_x_trimming_enabled():
    opt = Options()
    assert opt.poly_x_trimming_enabled() is False
    opt.poly_x_trim.enabled = True
    assert opt.poly_x_trimming_enabled() is True


def test_shall_detect_adapter_single_end():
    opt = Options()
    opt.adapter.sequence = "auto"
    assert opt.shall_detect_adapter() is True
    assert opt.shall_detect_adapter(True) is False
    opt.adapter.enabled = False
    assert opt.shall_detect_adapter() is False


def test_shall_detect_adapter_paired_end():
    opt = Options(in2="r2.fq")
    opt.adapter.sequence = "auto"
    opt.adapter.sequence_r2 = "auto"
    assert opt.shall_detect_adapter(False) is False
    opt.adapter.detect_adapter_for_pe = True
    assert opt.shall_detect_adapter(False) is True
    assert opt.shall_detect_adapter(True) is True


def test_adapter_labels():
    opt = Options()
    opt.adapter.sequence = "auto"
    assert opt.adapter1_label() == "unspecified"
    assert opt.adapter2_label() == "unspecified"
    opt.adapter.sequence = "AGATCGGAAGAGC"
    opt.adapter.sequence_r2 = "AGATCGGAAGAGC"
    assert opt.adapter1_label() == "AGATCGGAAGAGC"
    assert opt.adapter2_label() == "AGATCGGAAGAGC"


def test_load_fasta_adapters_dedup_and_skip_short():
    opt = Options()
    opt.adapter.fasta_file = "adapters.fa"
    opt.load_fasta_adapters({"b": "AGATCGGAAG", "a": "AGATCGGAAG", "c": "ACG", "d": "TTTTTTTT"})
    assert opt.adapter.seqs_in_fasta == ["AGATCGGAAG", "TTTTTTTT"]
    assert opt.adapter.has_fasta is True


def test_load_fasta_adapters_without_file_name():
    opt = Options()
    opt.load_fasta_adapters({"a": "AGATCGGAAG"})
    assert opt.adapter.has_fasta is False


def test_load_fasta_adapters_all_short():
    opt = Options()
    opt.adapter.fasta_file = "adapters.fa"
    opt.load_fasta_adapters({"a": "ACG"})
    assert opt.adapter.has_fasta is False
    assert opt.adapter.seqs_in_fasta == []


def test_validate_requires_in1():
    with pytest.raises(FastpError):
        Options().validate()


def test_validate_in2_without_in1(fastq2):
    with pytest.raises(FastpError):
        Options(in2=fastq2).validate()


def test_validate_stdin_sets_in1():
    opt = Options(input_from_stdin=True)
    assert opt.validate() is True
    assert opt.in1 == "/dev/stdin"


def test_validate_missing_file(tmp_path):
    with pytest.raises(FastpError):
        Options(in1=str(tmp_path / "missing.fq")).validate()


@pytest.mark.parametrize("level", [0, 10])
def test_validate_compression_range(fastq, level):
    with pytest.raises(FastpError):
        Options(in1=fastq, compression=level).validate()


def test_validate_thread_clamped(fastq):
    opt = Options(in1=fastq, thread=100)
    opt.validate()
    assert opt.thread == 64
    opt = Options(in1=fastq, thread=0)
    opt.validate()
    assert opt.thread == 1


def test_validate_negative_reads_to_process(fastq):
    with pytest.raises(FastpError):
        Options(in1=fastq, reads_to_process=-1).validate()


def test_validate_merge_requires_output(fastq, fastq2):
    opt = Options(in1=fastq, in2=fastq2)
    opt.merge.enabled = True
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_merge_uses_out1(fastq, fastq2, tmp_path):
    out = str(tmp_path / "merged.fq")
    opt = Options(in1=fastq, in2=fastq2, out1=out)
    opt.merge.enabled = True
    opt.validate()
    assert opt.merge.out == out
    assert opt.out1 == ""
    assert opt.correction.enabled is True


def test_validate_merge_requires_paired(fastq):
    opt = Options(in1=fastq)
    opt.merge.enabled = True
    opt.merge.out = "m.fq"
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_merged_out_ignored_without_merge(fastq):
    opt = Options(in1=fastq)
    opt.merge.out = "m.fq"
    opt.validate()
    assert opt.merge.out == ""


def test_validate_paired_needs_out2(fastq, fastq2):
    with pytest.raises(FastpError):
        Options(in1=fastq, in2=fastq2, out1="o1.fq").validate()


def test_validate_same_outputs(fastq, fastq2):
    with pytest.raises(FastpError):
        Options(in1=fastq, in2=fastq2, out1="o.fq", out2="o.fq").validate()


def test_validate_in2_with_interleaved(fastq, fastq2):
    with pytest.raises(FastpError):
        Options(in1=fastq, in2=fastq2, interleaved_input=True).validate()


def test_validate_dont_overwrite(fastq, tmp_path):
    existing = tmp_path / "out.fq"
    existing.write_text("")
    with pytest.raises(FastpError):
        Options(in1=fastq, out1=str(existing), dont_overwrite=True).validate()
    opt = Options(in1=fastq, out1=str(existing))
    assert opt.validate() is True


def test_validate_unpaired_dropped_for_single_end(fastq):
    opt = Options(in1=fastq, unpaired1="u1.fq", unpaired2="u2.fq")
    opt.validate()
    assert opt.unpaired1 == ""
    assert opt.unpaired2 == ""


def test_validate_failed_out_conflict(fastq):
    with pytest.raises(FastpError):
        Options(in1=fastq, out1="o.fq", failed_out="o.fq").validate()


def test_validate_adapter_sequence(fastq):
    opt = Options(in1=fastq)
    opt.adapter.sequence = "AGATCGGAAGAGC"
    opt.validate()
    assert opt.adapter.has_seq_r1 is True
    assert opt.adapter.has_seq_r2 is False


@pytest.mark.parametrize("seq", ["ACG", "AGATNGG"])
def test_validate_bad_adapter(fastq, seq):
    opt = Options(in1=fastq)
    opt.adapter.sequence = seq
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_correction_disabled_for_single_end(fastq):
    opt = Options(in1=fastq)
    opt.correction.enabled = True
    opt.validate()
    assert opt.correction.enabled is False


def test_validate_split_clamps_thread(fastq):
    opt = Options(in1=fastq, out1="o.fq", thread=8)
    opt.split.enabled = True
    opt.split.by_file_number = True
    opt.split.number = 2
    opt.validate()
    assert opt.thread == 2


def test_validate_split_by_lines_too_small(fastq):
    opt = Options(in1=fastq)
    opt.split.enabled = True
    opt.split.by_file_lines = True
    opt.split.size = 10
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_quality_cut_range(fastq):
    opt = Options(in1=fastq)
    opt.quality_cut.enabled_front = True
    opt.quality_cut.quality_front = 31
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_umi_read1_needs_length(fastq):
    opt = Options(in1=fastq)
    opt.umi.enabled = True
    opt.umi.location = UmiLocation.READ1
    with pytest.raises(FastpError):
        opt.validate()
    opt.umi.length = 8
    assert opt.validate() is True


def test_validate_umi_bad_prefix(fastq):
    opt = Options(in1=fastq)
    opt.umi.enabled = True
    opt.umi.location = UmiLocation.INDEX1
    opt.umi.prefix = "UMI_"
    with pytest.raises(FastpError):
        opt.validate()


def test_validate_sampling_range(fastq):
    opt = Options(in1=fastq)
    opt.over_rep_analysis.sampling = 0
    with pytest.raises(FastpError):
        opt.validate()


def test_make_list_from_file_by_line(tmp_path):
    path = tmp_path / "barcodes.txt"
    path.write_bytes(b"ACGT\r\nTTAA\nGGCC")
    assert Options().make_list_from_file_by_line(str(path)) == ["ACGT", "TTAA", "GGCC"]


def test_make_list_rejects_bad_barcode(tmp_path):
    path = tmp_path / "barcodes.txt"
    path.write_text("ACGT\nACNT\n")
    with pytest.raises(FastpError):
        Options().make_list_from_file_by_line(str(path))


def test_init_index_filtering(tmp_path):
    path = tmp_path / "barcodes.txt"
    path.write_text("ACGT\n")
    opt = Options()
    opt.init_index_filtering(str(path), "", 1)
    assert opt.index_filter.enabled is True
    assert opt.index_filter.threshold == 1
    assert opt.index_filter.blacklist1 == ["ACGT"]
    assert opt.index_filter.blacklist2 == []


def test_init_index_filtering_no_files():
    opt = Options()
    opt.init_index_filtering("", "", 3)
    assert opt.index_filter.enabled is False
    assert opt.index_filter.threshold == 0


def test_init_index_filtering_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    opt = Options()
    opt.init_index_filtering(str(path), "", 2)
    assert opt.index_filter.enabled is False