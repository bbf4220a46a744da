import pytest

from peachc.compiler import CompileError, compile_file


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "test.c"
    path.write_text("int main()\n{\n    return 0;\n}\n")
    return path


def test_compiles_ok(source):
    tokens = compile_file(source, None, 0)
    assert len(tokens) == 0


def test_missing_input_raises(tmp_path):
    with pytest.raises(CompileError):
        compile_file(tmp_path / "missing.c", None, 0)


def test_unwritable_output_raises(source, tmp_path):
    with pytest.raises(CompileError):
        compile_file(source, tmp_path / "no_dir" / "out", 0)


def test_output_file_is_truncated(source, tmp_path):
    out = tmp_path / "test.out"
    out.write_text("stale")
    compile_file(source, out, 0)
    assert out.exists()
    assert out.read_text() == ""


def test_compile_error_chains_cause(tmp_path):
    with pytest.raises(CompileError) as info:
        compile_file(tmp_path / "missing.c")
    assert isinstance(info.value.__cause__, FileNotFoundError)