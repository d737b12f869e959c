import io

import pytest

from advent_solvers.day05 import PrintQueue, main

SAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


@pytest.fixture
def queue():
    return PrintQueue.from_lines(SAMPLE.splitlines())


def test_parse(queue):
    assert queue.rules[47] == [53, 13, 61, 29]
    assert len(queue.updates) == 6
    assert queue.updates[2] == [75, 29, 13]


def test_sample_correct_middles(queue):
    assert queue.sum_correct_middles() == 143


def test_sample_incorrect_middles(queue):
    assert queue.sum_incorrect_middles() == 123


def test_indented_input_is_trimmed():
    indented = "\n".join("            " + line for line in SAMPLE.splitlines())
    assert PrintQueue.from_lines(indented.splitlines()).sum_correct_middles() == 143


def test_middle_if_correct(queue):
    assert queue.middle_if_correct([75, 47, 61, 53, 29]) == 61
    assert queue.middle_if_correct([75, 97, 47, 61, 53]) is None


def test_middle_of_even_correct_update_raises(queue):
    with pytest.raises(ValueError):
        queue.middle_if_correct([75, 47])


@pytest.mark.parametrize(
    "order, expected",
    [
        ([75, 97, 47, 61, 53], [97, 75, 47, 61, 53]),
        ([61, 13, 29], [61, 29, 13]),
        ([97, 13, 75, 29, 47], [97, 75, 47, 29, 13]),
    ],
)
def test_reorder(queue, order, expected):
    assert queue.reorder(order) == expected


def test_reorder_repeated_pages_raises(queue):
    with pytest.raises(ValueError):
        queue.reorder([75, 75, 47])


def test_cyclic_rules_raise():
    queue = PrintQueue.from_lines(["1|2", "2|1", "", "1,2,3"])
    with pytest.raises(ValueError):
        queue.sum_incorrect_middles()


@pytest.mark.parametrize("part, expected", [("1", "143"), ("2", "123")])
def test_main(monkeypatch, capsys, part, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE + "\n"))
    main(["--part", part])
    assert capsys.readouterr().out.strip() == expected