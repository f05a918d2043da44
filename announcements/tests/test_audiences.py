import pytest

from announcements.audiences import AUDIENCES, known_audiences, resolve_audience


@pytest.mark.parametrize(
    "label, expected",
    [
        ("UGT", ["UGT"]),
        ("PGT", ["PGT"]),
        ("PGR", ["PGR"]),
        ("Staff", ["Staff"]),
        ("Students_all", ["UGT", "PGT", "PGR"]),
        ("Students_taught", ["UGT", "PGT"]),
        ("All", ["UGT", "PGT", "PGR", "Staff"]),
    ],
)
def test_canonical_labels_expand(label, expected):
    assert resolve_audience(label) == expected


def test_results_have_no_duplicates_and_ignore_call_order():
    first = {label: resolve_audience(label) for label in reversed(known_audiences())}
    second = {label: resolve_audience(label) for label in known_audiences()}
    assert first == second
    for names in second.values():
        assert len(names) == len(set(names))


@pytest.mark.parametrize("label", ["Alumni", "ugt", "students_all", "", "U_T%"])
def test_unknown_labels_pass_through(label):
    assert resolve_audience(label) == [label]


def test_result_is_a_copy():
    names = resolve_audience("All")
    names.append("Visitors")
    assert AUDIENCES["All"] == ["UGT", "PGT", "PGR", "Staff"]
