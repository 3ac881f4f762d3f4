import io

import pytest

from minishell.output import print_error, put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_rejects_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(" world", buf)
    assert buf.getvalue() == "hello" + " world"


def test_put_str_defaults_to_stdout(capsys):
    put_str("visible")
    assert capsys.readouterr().out == "visible"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_negative_sign():
    buf = io.StringIO()
    put_nbr(-42, buf)
    assert buf.getvalue() == "-42"


def test_print_error_substitutes_string(capsys):
    count = print_error("error: %s\n", "boom")
    err = capsys.readouterr().err
    assert err == "error: boom\n"
    assert count == len(err)


def test_print_error_null_argument(capsys):
    count = print_error("%s", None)
    assert capsys.readouterr().err == "(null)"
    assert count == len("(null)")


def test_print_error_other_conversions_print_nothing(capsys):
    count = print_error("a%db")
    assert capsys.readouterr().err == "ab"
    assert count == 2


def test_print_error_plain_text(capsys):
    text = "minishell: command not found\n"
    assert print_error(text) == len(text)
    assert capsys.readouterr().err == text


def test_print_error_missing_argument():
    with pytest.raises(ValueError):
        print_error("%s and %s", "one")


def test_print_error_none_format():
    with pytest.raises(TypeError):
        print_error(None)


def test_print_error_writes_nothing_to_stdout(capsys):
    print_error("%s", "x")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "x"