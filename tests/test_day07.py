import pytest

from advent_solvers.day07 import Equation, Op, max_tenth, total_calibration

SAMPLE = """190: 10 19
            3267: 81 40 27
            83: 17 5
            156: 15 6
            7290: 6 8 6 15
            161011: 16 10 13
            192: 17 8 14
            21037: 9 7 18 13
            292: 11 6 16 20""".split("\n")


def test_sample_all_ops():
    assert total_calibration(SAMPLE) == 11387


def test_sample_add_and_mul():
    assert total_calibration(SAMPLE, [Op.ADD, Op.MUL]) == 3749


@pytest.mark.parametrize("x, expected", [(0, 1), (1, 10), (9, 10), (10, 100), (345, 1000)])
def test_max_tenth(x, expected):
    assert max_tenth(x) == expected


def test_op_eval():
    assert Op.ADD.eval(3, 4) == 7
    assert Op.MUL.eval(3, 4) == 12
    assert Op.CON.eval(12, 345) == 12345
    assert Op.CON.eval(5, 0) == 5


def test_parse():
    eq = Equation.parse("190: 10 19")
    assert eq.value == 190
    assert eq.numbers == (10, 19)


def test_parse_errors():
    with pytest.raises(ValueError):
        Equation.parse("190 10 19")
    with pytest.raises(ValueError):
        Equation.parse("190:")


def test_is_valid():
    assert Equation.parse("156: 15 6").is_valid()
    assert not Equation.parse("156: 15 6").is_valid([Op.ADD, Op.MUL])
    assert not Equation.parse("83: 17 5").is_valid()


def test_blank_lines_ignored():
    assert total_calibration(["190: 10 19", "", "83: 17 5"]) == 190