# peachc

Groundwork for a small C compiler. It opens a C source file, reads it one
character at a time while tracking the line and column, and hands it to a
lexing stage that collects tokens into a vector.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
peachc
```

The command prints `hello world` and exits with status 0. It takes no
options besides `-h`/`--help`.

## Using it as a library

`peachc.compiler.compile_file(filename, out_filename=None, flags=0)` opens
the input file (and, if given, creates the output file for writing), runs
the lexing stage and returns the token `Vector`. It raises `CompileError`
if a file cannot be opened or if lexing raises `LexError`:

```python
from peachc.compiler import compile_file, CompileError

try:
    tokens = compile_file("test.c", None, 0)
except CompileError as err:
    print("compilation failed:", err)
```

Driving the stages yourself:

```python
from peachc.cprocess import CompileProcess
from peachc.lex_process import LexProcess
from peachc.lexer import lex

with CompileProcess("test.c", None, 0) as compiler:
    process = LexProcess(compiler, None)
    for token in lex(process):
        print(token)
```

- `CompileProcess` has `next_char`, `peek_char` and `push_char`; `None`
  marks the end of input. Its `pos` attribute is a `Pos` holding the
  current line and column. It closes its files on `close()` or when used as
  a context manager.
- `LexProcess` wraps any object with those three methods, forwards them,
  keeps an opaque `private` value for the caller, and returns its token
  vector from `tokens()`.
- `peachc.tokens` defines `Pos`, `TokenType` (identifier, keyword,
  operator, symbol, number, string, comment, newline) and the `Token`
  dataclass.

### Helpers

`peachc.buffer.Buffer` is a growable character buffer with a read cursor.
It has `write`, `printf` (%-formatting), `printf_no_terminator` (the same,
dropping the last character), `read` and `peek` (both return `None` when
nothing is left), `getvalue` and `len()`.

`peachc.vector.Vector` is a sequence with a peek cursor. Set
`VectorFlag.PEEK_DECREMENT` to make the cursor walk backwards. `save` and
`restore` push and pop the cursor position, element count and flags; the
elements themselves are not restored.

```python
from peachc.vector import Vector

v = Vector([1, 2, 3])
v.set_peek_pointer(0)
assert v.peek() == 1
v.save()
v.peek()
v.restore()
assert v.peek() == 2
```

## What it does not do

- `lex` does not yet read any characters: it returns the process's token
  vector as it stands, which is empty, and never raises `LexError`.
- There is no parser and no code generation. When an output file is given
  to `compile_file` it is created (or truncated) but nothing is written
  to it.
- The `peachc` command does not compile anything; it only prints its
  greeting.