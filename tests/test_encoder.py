import pytest
from menukeys.backends.cnf import CNFBackend
from menukeys.compilation.artifact import COVERAGE, EXCLUSIVITY, CROSS_ENTRY
from menukeys.core.errors import EmptyLabelError
from menukeys.encoder import (
    parse_entries, add_coverage_and_uniqueness, add_cross_entry_exclusion,
    find_repeated_candidates, group_by_character, distinct_characters
)


@pytest.fixture
def backend():
    with CNFBackend() as b:
        yield b


def test_distinct_characters_keeps_first_occurrence():
    assert distinct_characters("hello") == ["h", "e", "l", "o"]
    assert distinct_characters("aaa") == ["a"]


def test_parse_entries_deduplicates_per_label(backend):
    entries = parse_entries(["undo", "mississippi"], backend)
    assert [c.character for c in entries[0]] == ["u", "n", "d", "o"]
    assert [c.character for c in entries[1]] == ["m", "i", "s", "p"]
    assert [c.position for c in entries[1]] == [0, 1, 2, 3]
    assert all(c.entry_index == 1 for c in entries[1])
    assert [c.var_name for c in entries[0]] == ["Uu0", "Un0", "Ud0", "Uo0"]
    assert backend.stats.num_vars == 8


def test_parse_entries_names_are_injective(backend):
    entries = parse_entries(["ab", "ba", "a"], backend)
    flat = [c for e in entries for c in e]
    assert len({c.variable for c in flat}) == len(flat)
    assert len({(c.character, c.entry_index) for c in flat}) == len(flat)
    for c in flat:
        assert backend.var_manager.get_id_to_name()[c.variable] == f"U{c.character}{c.entry_index}"


def test_empty_label_rejected_before_declaring(backend):
    with pytest.raises(EmptyLabelError) as excinfo:
        parse_entries(["open", ""], backend)
    assert excinfo.value.entry_index == 1
    assert len(backend.var_manager) == 0


def test_parse_entries_deterministic():
    labels = ["cut", "copy", "cost"]
    with CNFBackend() as b1, CNFBackend() as b2:
        first = parse_entries(labels, b1)
        second = parse_entries(labels, b2)
        again = parse_entries(labels, b1)

    def key(entries):
        return [[(c.character, c.entry_index, c.var_name) for c in e] for e in entries]

    assert key(first) == key(second) == key(again)
    assert first == again


def test_coverage_and_exclusivity_counts(backend):
    entries = parse_entries(["undo", "copy", "mod"], backend)
    add_coverage_and_uniqueness(entries, backend)

    stats = backend.stats
    assert stats.constraints_by_group[COVERAGE] == 3
    # one implication per candidate
    assert stats.constraints_by_group[EXCLUSIVITY] == 4 + 4 + 3
    # k - 1 binary clauses per implication
    assert stats.clauses_by_group[EXCLUSIVITY] == 4 * 3 + 4 * 3 + 3 * 2
    assert CROSS_ENTRY not in stats.constraints_by_group


def test_single_character_entry_gets_trivial_implication(backend):
    entries = parse_entries(["x"], backend)
    add_coverage_and_uniqueness(entries, backend)
    assert backend.stats.constraints_by_group[EXCLUSIVITY] == 1
    assert backend.stats.clauses_by_group[EXCLUSIVITY] == 0


def test_find_repeated_candidates_three_way(backend):
    entries = parse_entries(["cut", "copy", "cost"], backend)
    repeated = find_repeated_candidates(entries)

    assert [(c.character, c.entry_index) for c in repeated] == [
        ("c", 0), ("c", 1), ("c", 2),
        ("t", 0), ("t", 2),
        ("o", 1), ("o", 2),
    ]
    assert len(repeated) == len(set(repeated))


def test_group_by_character(backend):
    entries = parse_entries(["cut", "copy", "cost"], backend)
    grouped = group_by_character(find_repeated_candidates(entries))
    assert list(grouped) == ["c", "t", "o"]
    assert [c.entry_index for c in grouped["c"]] == [0, 1, 2]
    assert [c.entry_index for c in grouped["o"]] == [1, 2]
    # characters unique to one entry never show up
    assert "u" not in grouped and "s" not in grouped


def test_cross_entry_exclusion_counts(backend):
    entries = parse_entries(["cut", "copy", "cost"], backend)
    add_cross_entry_exclusion(entries, backend)
    stats = backend.stats
    assert stats.constraints_by_group[CROSS_ENTRY] == 3 + 2 + 2
    assert stats.clauses_by_group[CROSS_ENTRY] == 3 * 2 + 2 * 1 + 2 * 1


def test_cross_entry_exclusion_without_shared_characters(backend):
    entries = parse_entries(["abc", "def"], backend)
    add_cross_entry_exclusion(entries, backend)
    assert backend.stats.num_constraints == 0
