import random

import pytest

from fastqprep.matcher import diff_with_one_insertion, match_with_one_insertion


def test_insertion_near_end():
    ins = "ACGTACGXA"
    normal = "ACGTACGA"
    assert match_with_one_insertion(ins, normal, 8, 0)
    assert diff_with_one_insertion(ins, normal, 8, 0) == 0


def test_completely_different_sequences():
    ins = "AAAAAAAAA"
    normal = "CCCCCCCC"
    assert not match_with_one_insertion(ins, normal, 8, 2)
    assert diff_with_one_insertion(ins, normal, 8, 2) == -1


def test_insertion_in_middle_is_matched():
    normal = "ACGTACGT"
    ins = "ACGTXACGT"
    assert match_with_one_insertion(ins, normal, 8, 0)


def test_invalid_lengths_raise():
    with pytest.raises(ValueError):
        match_with_one_insertion("AC", "AC", 2, 0)
    with pytest.raises(ValueError):
        diff_with_one_insertion("A", "", 0, 0)


def test_valid_diff_implies_match():
    rng = random.Random(7)
    for _ in range(300):
        n = rng.randint(2, 15)
        normal = "".join(rng.choice("ACGT") for _ in range(n))
        pos = rng.randint(1, n - 1)
        ins = normal[:pos] + rng.choice("ACGT") + normal[pos:]
        ins = "".join(c if rng.random() > 0.1 else rng.choice("ACGT") for c in ins)
        limit = rng.randint(0, 3)
        diff = diff_with_one_insertion(ins, normal, n, limit)
        if 0 <= diff <= limit:
            assert match_with_one_insertion(ins, normal, n, limit)
        assert diff == -1 or diff >= 0