from spelling_bee.charvec import string_to_vector, vector_to_string
from spelling_bee.puzzle import Puzzle
from spelling_bee.puzzle_master import PuzzleMaster, build, solutions_to, subvectors


def words():
    return [
        "abracadabrazy",
        "abrac",
        "barca",
        "barbar",
        "zzzzz",
        "zzzzzzzz",
        "lengthened",
        "lengthen",
        "then",  # too short
        "vis-a-vis",  # outside the alphabet
        "Caps",  # outside the alphabet
        "abcdefgh",  # too many distinct letters
    ]


def puzzle(required, optional):
    return Puzzle(required=string_to_vector(required), optional=string_to_vector(optional))


def test_filters_invalid_words():
    index = build(words())
    assert sorted(index.words) == sorted([
        "abracadabrazy", "abrac", "barca", "barbar", "zzzzz", "zzzzzzzz", "lengthened", "lengthen",
    ])


def test_keeps_input_order_and_duplicates():
    index = PuzzleMaster(["barca", "abrac", "barca"])
    assert index.words == ["barca", "abrac", "barca"]
    assert index.words_by_vector == {string_to_vector("abrc"): ["barca", "abrac", "barca"]}


def test_identifies_pots():
    index = build(words())
    assert index.pots == {string_to_vector("abrcdzy"), string_to_vector("lengthd")}


def test_partitions_words_by_vector():
    index = build(words())
    expected = {
        string_to_vector("abrcdzy"): ["abracadabrazy"],
        string_to_vector("abrc"): ["abrac", "barca"],
        string_to_vector("bar"): ["barbar"],
        string_to_vector("z"): ["zzzzz", "zzzzzzzz"],
        string_to_vector("lengthd"): ["lengthened"],
        string_to_vector("length"): ["lengthen"],
    }
    assert index.words_by_vector == expected


def test_solves_simple_puzzle():
    index = build(words())
    assert solutions_to(index, puzzle("c", "abrdzy")) == {"abracadabrazy", "abrac", "barca"}


def test_solves_another_simple_puzzle():
    index = build(words())
    assert index.solutions_to(puzzle("e", "lngthd")) == {"lengthened", "lengthen"}


def test_puzzle_with_no_solutions():
    index = build(words())
    assert index.solutions_to(puzzle("c", "abdleg")) == set()


def test_puzzle_with_unseen_letters():
    index = build(words())
    p = puzzle("q", "jkouwx")
    for word in words():
        overlap = string_to_vector(word.lower().replace("-", "")) & p.pot
        assert not overlap, f"{word!r} uses puzzle letters {vector_to_string(overlap)!r}"
    assert index.solutions_to(p) == set()


def test_empty_optional_letters():
    index = build(words())
    assert index.solutions_to(puzzle("z", "")) == {"zzzzz", "zzzzzzzz"}


def test_duplicate_words_collapse_in_solutions():
    index = build(["barca", "barca", "abrac"])
    assert index.solutions_to(puzzle("a", "bcr")) == {"barca", "abrac"}


def test_empty_index():
    index = build([])
    assert index.words == []
    assert index.pots == set()
    assert index.solutions_to(puzzle("a", "bcdefg")) == set()


def test_solving_does_not_mutate_index():
    index = build(words())
    before = {k: list(v) for k, v in index.words_by_vector.items()}
    p = puzzle("c", "abrdzy")
    assert index.solutions_to(p) == index.solutions_to(p)
    assert index.words_by_vector == before


def test_subvectors_visits_each_subset_once():
    vec = string_to_vector("abdgz")
    subs = list(subvectors(vec))
    assert len(subs) == 2 ** 5
    assert len(set(subs)) == len(subs)
    assert all(s & ~vec == 0 for s in subs)
    assert list(subvectors(0)) == [0]


def test_contains():
    index = build(words())
    assert "barca" in index
    assert "then" not in index
    assert len(index) == 8


def test_puzzles():
    index = build(["lengthened"])
    pot = string_to_vector("lengthd")
    puzzles = index.puzzles()
    assert len(puzzles) == 7
    assert {p.required for p in puzzles} == {1 << i for i in range(26) if pot & (1 << i)}
    assert all(p.pot == pot for p in puzzles)
    assert all(index.solutions_to(p) == {"lengthened"} for p in puzzles)
