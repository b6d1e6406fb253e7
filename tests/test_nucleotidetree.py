from fastqprep.nucleotidetree import NucleotideTree


def test_dominant_path_from_mixed_reads():
    tree = NucleotideTree()
    for _ in range(100):
        tree.add_seq("AAAATTTT")
        tree.add_seq("AAAATTTTGGGG")
        tree.add_seq("AAAATTTTGGGGCCCC")
        tree.add_seq("AAAATTTTGGGGCCAA")
    tree.add_seq("AAAATTTTGGGACCCC")
    path, reached_leaf = tree.dominant_path()
    assert path == "AAAATTTTGGGGCC"
    assert reached_leaf is False


def test_too_few_reads_gives_empty_path():
    tree = NucleotideTree()
    for _ in range(10):
        tree.add_seq("ACGT")
    assert tree.dominant_path() == ("", True)


def test_full_path_when_all_identical():
    tree = NucleotideTree()
    for _ in range(60):
        tree.add_seq("ACGTAC")
    assert tree.dominant_path() == ("ACGTAC", True)


def test_add_seq_stops_at_n():
    tree = NucleotideTree()
    for _ in range(60):
        tree.add_seq("ACNGT")
    assert tree.dominant_path() == ("AC", True)


def test_dump_lists_bases_and_counts():
    tree = NucleotideTree()
    tree.add_seq("AT")
    assert tree.root.dump() == "N0A1T1\n"


def test_empty_tree_dump():
    tree = NucleotideTree()
    assert tree.root.dump() == "N0\n"