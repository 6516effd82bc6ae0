import io

import pytest

from permutate.cli import build_permutator, main, permutate, prepare
from permutate.cli.buffer import StdoutBuffer
from permutate.shapes import ListOfLists, Repeated


def test_build_permutator_shapes():
    assert isinstance(build_permutator([["a", "b"]]).lists, Repeated)
    assert isinstance(build_permutator([["a"], ["b"]]).lists, ListOfLists)


def test_prepare_output():
    out = io.BytesIO()
    assert prepare([["1", "2"], ["a", "b", "c"]], stream=out) == 6
    assert out.getvalue() == b"1 a\n1 b\n1 c\n2 a\n2 b\n2 c\n"


def test_prepare_no_delimiters():
    out = io.BytesIO()
    prepare([["1", "2"]], no_delimiters=True, stream=out)
    assert out.getvalue() == b"11\n12\n21\n22\n"


def test_prepare_benchmark():
    out = io.BytesIO()
    assert prepare([["1", "2", "3"]], benchmark=True, stream=out) == 27
    assert out.getvalue() == b""


def test_permutate_resumes_from_position():
    perms = build_permutator([["x", "y"], ["1", "2"]])
    next(perms)
    out = io.BytesIO()
    assert permutate(perms, out) == 3
    assert out.getvalue() == b"x 2\ny 1\ny 2\n"
    assert permutate(perms, io.BytesIO()) == 0


def test_permutate_unicode():
    out = io.BytesIO()
    permutate(build_permutator([["é"], ["ß", "ø"]]), out)
    assert out.getvalue().decode() == "é ß\né ø\n"


def test_buffer_batches_writes():
    out = io.BytesIO()
    buffer = StdoutBuffer(out, capacity=8)
    buffer.write(b"abcd")
    buffer.write(b"efgh")
    assert out.getvalue() == b""
    buffer.write(b"i")
    assert out.getvalue() == b"abcdefgh"
    buffer.write(b"0123456789")
    assert out.getvalue() == b"abcdefghi0123456789"
    buffer.flush()
    assert out.getvalue() == b"abcdefghi0123456789"


def test_buffer_flushes_on_exit():
    out = io.BytesIO()
    with StdoutBuffer(out) as buffer:
        buffer.write(b"tail\n")
    assert out.getvalue() == b"tail\n"


def test_buffer_capacity():
    with pytest.raises(ValueError):
        StdoutBuffer(io.BytesIO(), capacity=0)


def test_main_parse_error(capsys):
    assert main(["a", ":::"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("permutate: parse error: no input was provided")
    assert "Example Usage: permutate 1 2 3 ::: 4 5 6 ::: 1 2 3" in err


def test_main_file_error(capsys, tmp_path):
    assert main(["-f", str(tmp_path / "nope"), ":::", "x"]) == 1
    assert "could not be read" in capsys.readouterr().err


def test_main_benchmark(capsys):
    assert main(["-b", "1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""
