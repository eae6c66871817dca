import pytest

from drillbook import atm, bits, patterns
from drillbook.cli import main


def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


@pytest.mark.parametrize(
    "operation, function",
    [("set", bits.set_bit), ("clear", bits.clear_bit), ("toggle", bits.toggle_bit)],
)
def test_bit_operations(capsys, operation, function):
    status, out, _ = run(capsys, "bits", operation, "5", "1")
    assert status == 0
    assert out == f">>> {function(5, 1)}\n"


def test_bits_read(capsys):
    status, out, _ = run(capsys, "bits", "read", "10")
    assert status == 0
    assert out == f">>> {bits.binary_string(10)}\n"


def test_bits_out_of_range(capsys):
    status, out, err = run(capsys, "bits", "set", "1", "40")
    assert status == 1
    assert out == ""
    assert "bit" in err


def test_single_pattern(capsys):
    status, out, _ = run(capsys, "pattern", "2", "3")
    assert status == 0
    assert out == patterns.pattern(2, 3) + "\n\n"


def test_all_patterns(capsys):
    status, out, _ = run(capsys, "pattern", "6", "3")
    assert status == 0
    for number in range(1, 6):
        assert patterns.pattern(number, 3) in out


def test_wrong_pattern_choice(capsys):
    status, out, err = run(capsys, "pattern", "9", "3")
    assert status == 1
    assert "Wrong choice" in err
    assert out == ""


def test_atm(capsys):
    status, out, _ = run(capsys, "atm", "10")
    assert status == 0
    lines = out.splitlines()
    expected = [atm.format_withdrawal(w) for w in atm.enumerate_withdrawals(10)]
    assert lines[:-1] == expected
    assert lines[-1] == f"All possibilities of 10 = {atm.count_withdrawals(10)}"


def test_atm_negative_amount(capsys):
    status, _, err = run(capsys, "atm", "-5")
    assert status == 1
    assert "negative" in err


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2