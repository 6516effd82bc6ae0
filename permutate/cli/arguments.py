import argparse
import sys
from typing import Iterator, NoReturn

from permutate.cli.man import EXAMPLE_USAGE, MAN_PAGE

SEPARATOR = ":::"
FILE_SEPARATOR = "::::"
ACCUMULATE = "+"


class InputError(Exception):
    pass


class FileError(InputError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path} could not be read: {reason}.")
        self.path = path
        self.reason = reason


class NoInputsProvided(InputError):
    def __init__(self):
        super().__init__("no input was provided after separator.")


class NotEnoughInputs(InputError):
    def __init__(self):
        super().__init__("not enough inputs were provided.")


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.exit(
            1, f"{self.prog}: parse error: {message}\n{EXAMPLE_USAGE}\n"
        )


class _ManAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(
            option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0,
            **kwargs
        )

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(MAN_PAGE)
        parser.exit(0)


def create_arg_parser() -> ArgumentParser:
    arg_parser = ArgumentParser(prog="permutate", add_help=False)

    arg_parser.add_argument("-b", "--benchmark", action="store_true", help="run"
        " through every permutation without printing")
    arg_parser.add_argument("-f", "--files", action="store_true", help="treat"
        " every input token as a file whose lines are list elements")
    arg_parser.add_argument("-n", "--no-delimiters", action="store_true",
        help="do not print a space between elements")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="log"
        " debug information to standard error")
    arg_parser.add_argument("-h", "--help", action=_ManAction, help="print the"
        " manual and exit")
    arg_parser.add_argument("inputs", nargs=argparse.REMAINDER, help="lists,"
        " separated by ::: (tokens) or :::: (files)")

    return arg_parser


def parse_options(argv: list[str] | None = None) -> argparse.Namespace:
    args = create_arg_parser().parse_args(argv)
    if args.inputs and args.inputs[0] == "--":
        args.inputs = args.inputs[1:]
    return args


def tokenize(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split `text` on unquoted whitespace. Yields `(token, literal)` pairs,
    where `literal` is set if any part of the token was quoted or escaped and
    so can never be a separator.
    """
    token: list[str] = []
    literal = False
    quote = None
    escaped = False
    for char in text:
        if escaped:
            token.append(char)
            escaped = False
        elif char == "\\" and quote != "'":
            escaped = literal = True
        elif quote is not None:
            if char == quote:
                quote = None
            else:
                token.append(char)
        elif char in "'\"":
            quote = char
            literal = True
        elif char.isspace():
            if token or literal:
                yield "".join(token), literal
            token, literal = [], False
        else:
            token.append(char)
    if escaped:
        token.append("\\")
    if token or literal:
        yield "".join(token), literal


def read_lines(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return [line for line in handle.read().splitlines() if line]
    except (OSError, UnicodeDecodeError) as exc:
        raise FileError(path, getattr(exc, "strerror", None) or str(exc))


def parse_arguments(text: str, interpret_files: bool = False) -> list[list[str]]:
    """
    Build the list of lists described by a flattened argument string.

    `:::` starts a new list of tokens and `::::` a new list of files. Either
    followed by `+` appends to the previous list instead.
    """
    lists: list[list[str]] = []
    current: list[str] = []
    files = interpret_files
    pending_separator = False

    def close():
        if current:
            lists.append(current)
        elif pending_separator:
            raise NoInputsProvided

    for token, literal in tokenize(text):
        separator = None if literal else token.removesuffix(ACCUMULATE)
        if separator in (SEPARATOR, FILE_SEPARATOR):
            close()
            files = interpret_files or separator == FILE_SEPARATOR
            if token.endswith(ACCUMULATE):
                if not lists:
                    raise NotEnoughInputs
                current = lists.pop()
            else:
                current = []
            pending_separator = True
            continue
        if files:
            current.extend(read_lines(token))
        else:
            current.append(token)
    close()

    if not lists or (len(lists) == 1 and len(lists[0]) < 2):
        raise NotEnoughInputs
    return lists
