from __future__ import annotations

import random
import string

import pytest

from charclass_leven import (
    CharClassConfig,
    LengthOverflowError,
    WeightedLevenshtein,
    distance,
    levenshtein,
    normalized_distance,
)

ALNUM = string.ascii_letters + string.digits

CONFIGS = [
    CharClassConfig(),
    CharClassConfig(mode="blacklist"),
    CharClassConfig(mode="whitelist"),
    CharClassConfig(mode="both", blacklist_chars="x", whitelist_chars="abcx"),
]


def _random_text(rng: random.Random, alphabet: str, max_len: int = 8) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len)))


def _full_matrix_levenshtein(a: str, b: str) -> int:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + (a[i - 1] != b[j - 1]),
            )
    return table[len(a)][len(b)]


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize("text", ["", "a", "hello;world", "ééé", "x:y,z"])
def test_identity_is_zero(config: CharClassConfig, text: str) -> None:
    assert distance(text, text, config) == 0


@pytest.mark.parametrize("config", CONFIGS)
def test_distance_is_symmetric(config: CharClassConfig) -> None:
    rng = random.Random(1234)
    for _ in range(200):
        a = _random_text(rng, "abx;:z")
        b = _random_text(rng, "abx;:z")
        assert distance(a, b, config) == distance(b, a, config)


def test_triangle_inequality_unweighted() -> None:
    rng = random.Random(99)
    for _ in range(200):
        a, b, c = (_random_text(rng, "abcd") for _ in range(3))
        assert distance(a, c) <= distance(a, b) + distance(b, c)


@pytest.mark.parametrize("config", CONFIGS)
def test_empty_operand_costs_length_of_other(config: CharClassConfig) -> None:
    assert distance("", ";;;", config) == 3
    assert distance("abc", "", config) == 3
    assert distance("", "", config) == 0


def test_unweighted_matches_reference() -> None:
    rng = random.Random(7)
    for _ in range(300):
        a = _random_text(rng, "abcde", max_len=12)
        b = _random_text(rng, "abcde", max_len=12)
        assert distance(a, b) == _full_matrix_levenshtein(a, b)


def test_whitelist_penalizes_non_whitelisted_substitution() -> None:
    config = CharClassConfig(mode="whitelist", whitelist_chars=ALNUM, penalty=2)
    assert distance("a;", "a:", config) == 2
    assert distance("ab", "ac", config) == 1


def test_blacklist_penalizes_listed_characters() -> None:
    config = CharClassConfig(mode="blacklist")
    assert distance("a;b", "a:b", config) == 2
    assert distance("axb", "ayb", config) == 1
    heavy = CharClassConfig(mode="blacklist", penalty=5)
    assert distance("a,b", "a b", heavy) == 5


def test_both_mode_combines_rules() -> None:
    config = CharClassConfig(mode="both", blacklist_chars="x", whitelist_chars="abcx")
    engine = WeightedLevenshtein(config)
    assert engine.penalized("x")
    assert engine.penalized("z")
    assert not engine.penalized("a")
    assert distance("ax", "ab", config) == 2
    assert distance("ab", "ac", config) == 1
    assert distance("ab", "az", config) == 2


def test_common_affixes_do_not_change_distance() -> None:
    config = CharClassConfig(mode="whitelist", whitelist_chars=ALNUM)
    assert distance("prefixXsuffix", "prefixYsuffix", config) == distance("X", "Y", config) == 1
    assert distance("prefix;suffix", "prefix:suffix", config) == distance(";", ":", config) == 2


def test_boundary_insertions_stay_unweighted() -> None:
    config = CharClassConfig(mode="whitelist", whitelist_chars=ALNUM)
    # After trimming "a" and "b" only the inserted ";" remains.
    assert distance("ab", "a;b", config) == 1


def test_interior_match_of_penalized_character_is_free() -> None:
    config = CharClassConfig(mode="blacklist")
    assert distance("x;y", "z;w", config) == 2
    assert distance("x;y", "z:w", config) == 4


def test_mismatch_cost_counts_both_cell_characters() -> None:
    config = CharClassConfig(mode="whitelist", whitelist_chars=ALNUM, penalty=3)
    # Deleting ";" happens inside the table, so it pays the penalty.
    assert distance("x;", "y", config) == 4


def test_overflow_raises_for_long_remainder() -> None:
    config = CharClassConfig(max_length=3)
    with pytest.raises(LengthOverflowError):
        distance("abcdef", "uvwxyz", config)
    with pytest.raises(OverflowError):
        distance("", "abcd", config)


def test_overflow_limit_applies_after_trimming() -> None:
    config = CharClassConfig(max_length=3)
    assert distance("same-text-1-same-text", "same-text-2-same-text", config) == 1
    assert distance("x" * 50, "x" * 50, config) == 0


def test_bytes_and_str_agree_on_ascii() -> None:
    assert distance(b"kitten", b"sitting") == distance("kitten", "sitting") == 3
    assert distance(bytearray(b"flaw"), memoryview(b"lawn")) == 2
    assert distance(b"kitten", "sitting") == 3


def test_code_points_are_not_narrowed() -> None:
    engine = WeightedLevenshtein(CharClassConfig(mode="whitelist"))
    # U+0169 shares its low byte with "i" but is not whitelisted.
    assert not engine.penalized("i")
    assert engine.penalized(0x169)
    assert engine.distance("café", "cafe") == 2
    assert distance("café", "cafe") == 1


def test_integer_sequences_are_accepted() -> None:
    assert distance([1, 2, 3], [1, 3]) == 1
    assert distance((5, 6), range(5, 7)) == 0


@pytest.mark.parametrize(
    "bad", [[1.5], [-1], [True], object(), {1, 2}, (unit for unit in [1, 2]), {1: 2}]
)
def test_invalid_operands_raise_type_error(bad: object) -> None:
    with pytest.raises(TypeError):
        distance(bad, [1])


def test_engine_is_reusable_and_callable() -> None:
    engine = WeightedLevenshtein(CharClassConfig(mode="whitelist"))
    assert engine("kitten", "sitting") == 3
    assert engine.distance("a;", "a:") == 2
    assert engine("kitten", "sitting") == 3


def test_normalized_distance_bounds() -> None:
    assert normalized_distance("", "") == 0.0
    assert normalized_distance("abc", "abd") == pytest.approx(1 / 3)
    assert normalized_distance("abc", "xyz") == 1.0
    config = CharClassConfig(mode="whitelist")
    assert normalized_distance("a;", "a:", config) == pytest.approx(0.5)


def test_levenshtein_is_classic_distance() -> None:
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("a;", "a:") == 1
