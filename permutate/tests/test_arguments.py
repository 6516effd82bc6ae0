import pytest

from permutate.cli.arguments import (
    FileError, NoInputsProvided, NotEnoughInputs, parse_arguments,
    parse_options, tokenize
)


def test_tokenize_plain():
    assert [t for t, _ in tokenize("  a b\tc  ")] == ["a", "b", "c"]


def test_tokenize_quotes_and_escapes():
    tokens = list(tokenize(r"""'a b' "c \"d\"" e\ f ':::' \::: g"""))
    assert tokens == [
        ("a b", True), ('c "d"', True), ("e f", True), (":::", True),
        (":::", True), ("g", False)
    ]


def test_tokenize_single_quotes_keep_backslash():
    assert list(tokenize(r"'a\b'")) == [("a\\b", True)]


def test_tokenize_empty_quoted_token():
    assert list(tokenize("a '' b")) == [("a", False), ("", True), ("b", False)]


def test_parse_lists():
    assert parse_arguments("1 2 3 ::: 4 5 6 ::: 1 2 3") == [
        ["1", "2", "3"], ["4", "5", "6"], ["1", "2", "3"]
    ]


def test_parse_single_list():
    assert parse_arguments("a b c") == [["a", "b", "c"]]


def test_parse_leading_separator():
    assert parse_arguments("::: a b ::: c") == [["a", "b"], ["c"]]


def test_parse_quoted_separator_is_token():
    assert parse_arguments("a ':::' ::: b") == [["a", ":::"], ["b"]]


def test_parse_accumulate():
    assert parse_arguments("a b ::: 1 2 :::+ 3 ::: x") == [
        ["a", "b"], ["1", "2", "3"], ["x"]
    ]


@pytest.mark.parametrize("text", ("a b :::", "a ::: ::: b", "a ::: b :::"))
def test_parse_no_inputs_after_separator(text):
    with pytest.raises(NoInputsProvided):
        parse_arguments(text)


@pytest.mark.parametrize("text", ("", "a", ":::+ a", "   "))
def test_parse_not_enough_inputs(text):
    with pytest.raises(NotEnoughInputs):
        parse_arguments(text)


def test_parse_files(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("alpha\nbeta\n\ngamma\n")
    numbers = tmp_path / "numbers.txt"
    numbers.write_text("1\n2\n")
    assert parse_arguments(f"{words} ::: {numbers}", interpret_files=True) == [
        ["alpha", "beta", "gamma"], ["1", "2"]
    ]


def test_parse_file_separator(tmp_path):
    numbers = tmp_path / "numbers.txt"
    numbers.write_text("1\n2\n")
    assert parse_arguments(f"a b :::: {numbers} ::: c") == [
        ["a", "b"], ["1", "2"], ["c"]
    ]
    assert parse_arguments(f"a b ::::+ {numbers}") == [["a", "b", "1", "2"]]


def test_parse_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(FileError) as info:
        parse_arguments(f"{missing} ::: a", interpret_files=True)
    assert info.value.path == str(missing)
    assert "could not be read" in str(info.value)


def test_options_defaults():
    args = parse_options(["a", "b"])
    assert args.inputs == ["a", "b"]
    assert not (args.benchmark or args.files or args.no_delimiters)


def test_options_flags():
    args = parse_options(["-b", "--files", "-n", "x", ":::", "y"])
    assert args.benchmark and args.files and args.no_delimiters
    assert args.inputs == ["x", ":::", "y"]


def test_options_double_dash():
    args = parse_options(["-n", "--", "-x", "y"])
    assert args.inputs == ["-x", "y"]


def test_options_help(capsys):
    with pytest.raises(SystemExit) as info:
        parse_options(["-h"])
    assert info.value.code == 0
    assert "SYNOPSIS" in capsys.readouterr().out


def test_options_unknown_flag(capsys):
    with pytest.raises(SystemExit) as info:
        parse_options(["--bogus", "a"])
    assert info.value.code == 1
    err = capsys.readouterr().err
    assert "parse error" in err
    assert "Example Usage" in err
