import pytest

from peachc.cprocess import CompileProcess


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "input.c"
    path.write_text("ab\ncd")
    return path


def test_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CompileProcess(tmp_path / "missing.c")


def test_reads_every_character_then_none(source):
    with CompileProcess(source) as process:
        chars = []
        while (c := process.next_char()) is not None:
            chars.append(c)
    assert "".join(chars) == "ab\ncd"


def test_newline_resets_column_and_advances_line(source):
    with CompileProcess(source) as process:
        start_line = process.pos.line
        while process.next_char() != "\n":
            pass
        assert process.pos.col == 1
        assert process.pos.line == start_line + 1
        process.next_char()
        assert process.pos.col == 2


def test_peek_does_not_consume(source):
    with CompileProcess(source) as process:
        assert process.peek_char() == "a"
        assert process.peek_char() == "a"
        assert process.next_char() == "a"
        assert process.next_char() == "b"


def test_push_char_is_read_next(source):
    with CompileProcess(source) as process:
        first = process.next_char()
        process.push_char(first)
        assert process.next_char() == first
        process.push_char("z")
        assert process.peek_char() == "z"
        assert process.next_char() == "z"
        assert process.next_char() == "b"


def test_push_none_is_ignored(source):
    with CompileProcess(source) as process:
        process.push_char(None)
        assert process.next_char() == "a"


def test_output_file_is_created_and_truncated(source, tmp_path):
    out = tmp_path / "out.s"
    out.write_text("old contents")
    with CompileProcess(source, out, flags=3) as process:
        assert process.flags == 3
    assert out.read_text() == ""


def test_close_closes_files(source, tmp_path):
    process = CompileProcess(source, tmp_path / "out.s")
    process.close()
    assert process.cfile.closed
    assert process.ofile.closed


def test_bad_output_path_raises_and_closes(source, tmp_path):
    with pytest.raises(OSError):
        CompileProcess(source, tmp_path / "no_dir" / "out.s")