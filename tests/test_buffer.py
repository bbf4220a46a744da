import pytest

from peachc.buffer import Buffer


def test_new_buffer_is_empty():
    buf = Buffer()
    assert len(buf) == 0
    assert buf.getvalue() == ""
    assert buf.read() is None
    assert buf.peek() is None


def test_write_then_read_round_trip():
    buf = Buffer()
    for c in "hello":
        buf.write(c)
    assert buf.getvalue() == "hello"
    assert "".join(iter(buf.read, None)) == "hello"
    assert buf.read() is None


def test_peek_does_not_advance():
    buf = Buffer()
    buf.write("xy")
    assert buf.peek() == "x"
    assert buf.peek() == "x"
    assert buf.read() == "x"
    assert buf.peek() == "y"


def test_len_counts_characters():
    buf = Buffer()
    buf.write("abc")
    buf.write("d")
    assert len(buf) == len("abcd")


@pytest.mark.parametrize(
    "fmt,args",
    [("%d-%s", (7, "x")), ("plain", ()), ("%%", ()), ("%05.1f", (2.5,))],
)
def test_printf_matches_percent_formatting(fmt, args):
    buf = Buffer()
    buf.write(">")
    buf.printf(fmt, *args)
    assert buf.getvalue() == ">" + fmt % args


def test_printf_no_terminator_drops_last_character():
    buf = Buffer()
    buf.printf_no_terminator("%s;", "abc")
    assert buf.getvalue() == "abc"
    buf.printf_no_terminator("%d!", 42)
    assert buf.getvalue() == "abc42"


def test_printf_then_read():
    buf = Buffer()
    buf.printf("%s=%d", "a", 1)
    assert buf.read() == "a"
    assert buf.read() == "="
    assert buf.read() == "1"
    assert buf.read() is None