from __future__ import annotations

import random
import unicodedata

import pytest

from stringmetric import dl_distance, osa_distance
from stringmetric.metrics import init_dl_alphabet, init_dl_matrix

SYMBOLS = "!#$%&()*+,-./:;<=>?@[]^_{|}~"

SAMPLES = [
    "",
    "a",
    "AB",
    "BA",
    "a cat",
    "a abct",
    "INTENTION",
    "EXECUTION",
    "αβγδ",
    "αδ",
    "CA",
    "ABC",
    "kitten",
    "sitting",
]


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        ("", "", 0),
        ("", "second β", 8),
        ("first α", "", 7),
        ("test.γ!equal", "test.γ!equal", 0),
        ("testA", "testB", 1),
        ("Atest", "Btest", 1),
        ("test", "teBst", 1),
        ("teAst", "test", 1),
        ("AB", "BA", 1),
        ("a cat", "a abct", 2),
        ("INTENTION", "EXECUTION", 5),
        ("αβγδ", "αδ", 2),
        (SYMBOLS, "\"'\\`", 28),
        ("\"'\\`", SYMBOLS, 28),
    ],
)
def test_dl_distance_reference_cases(source: str, target: str, expected: int) -> None:
    assert dl_distance(source, target) == expected


def test_transposition_across_an_insertion() -> None:
    # Optimal string alignment cannot edit a transposed pair again and gives 3.
    assert dl_distance("CA", "ABC") == 2
    assert osa_distance("CA", "ABC") == 3


@pytest.mark.parametrize("text", SAMPLES)
def test_identity(text: str) -> None:
    assert dl_distance(text, text) == 0


def test_symmetry_and_bounds() -> None:
    for a in SAMPLES:
        for b in SAMPLES:
            forward = dl_distance(a, b)
            assert forward == dl_distance(b, a)
            assert 0 <= forward <= len(a) + len(b)
            assert forward <= osa_distance(a, b)


def test_counts_codepoints_not_bytes() -> None:
    source = "日本語"
    target = "日本"
    assert len(source.encode("utf-8")) == 9
    assert dl_distance(source, target) == 1


def test_normalized_forms_compare_equal() -> None:
    composed = "caf\u00e9"
    decomposed = "cafe\u0301"
    assert dl_distance(composed, decomposed) == 2
    assert (
        dl_distance(
            unicodedata.normalize("NFC", composed),
            unicodedata.normalize("NFC", decomposed),
        )
        == 0
    )


def test_alphabet_covers_both_inputs_with_zero() -> None:
    alphabet = init_dl_alphabet("a cat", "a abct")
    assert alphabet == {"a": 0, " ": 0, "c": 0, "t": 0, "b": 0}


def test_matrix_border_layout() -> None:
    dist = init_dl_matrix(7, 8, 11)
    assert len(dist) == 7
    assert all(len(row) == 8 for row in dist)
    assert dist[0] == [11] * 8
    assert dist[1] == [11, 0, 1, 2, 3, 4, 5, 6]
    assert [row[0] for row in dist] == [11] * 7
    assert [row[1] for row in dist] == [11, 0, 1, 2, 3, 4, 5]
    assert all(cell == 0 for row in dist[2:] for cell in row[2:])


def _random_text(rng: random.Random, alphabet: str = "abcαβ", max_len: int = 6) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len)))


def test_random_pairs_keep_metric_properties() -> None:
    rng = random.Random(20240611)
    for _ in range(300):
        a = _random_text(rng)
        b = _random_text(rng)
        c = _random_text(rng)
        ab = dl_distance(a, b)
        assert ab == dl_distance(b, a)
        assert abs(len(a) - len(b)) <= ab <= max(len(a), len(b))
        assert (ab == 0) == (a == b)
        assert ab <= osa_distance(a, b)
        # the unrestricted metric obeys the triangle inequality, OSA does not
        assert dl_distance(a, c) <= ab + dl_distance(b, c)


def test_osa_reference_cases() -> None:
    assert osa_distance("", "") == 0
    assert osa_distance("", "abc") == 3
    assert osa_distance("abc", "") == 3
    assert osa_distance("AB", "BA") == 1
    assert osa_distance("kitten", "sitting") == 3
    assert osa_distance("INTENTION", "EXECUTION") == 5
    # CA -> AC -> ABC needs the swapped pair to be edited again
    assert osa_distance("CA", "ABC") == 3
    assert osa_distance("ABC", "CA") == 3
