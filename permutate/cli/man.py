EXAMPLE_USAGE = "Example Usage: permutate 1 2 3 ::: 4 5 6 ::: 1 2 3"

MAN_PAGE = """NAME
    permutate - efficient command-line permutator

SYNOPSIS
    permutate [-b | --benchmark] [-f | --files] [-h | --help]
              [-n | --no-delimiters] [-v | --verbose] [TOKENS...] [::: TOKENS...]...

DESCRIPTION
    Prints every combination of one element taken from each input list, one
    combination per line. The last list varies fastest. A single list is
    permutated against itself as many times as it has elements.

SEPARATORS
    :::     starts a new list of tokens
    ::::    starts a new list whose tokens are files; each line of a file is an
            element
    :::+    appends the following tokens to the previous list
    ::::+   appends the lines of the following files to the previous list

    Tokens may be quoted with single or double quotes, and a backslash escapes
    the next character. A quoted or escaped separator is an ordinary token.

OPTIONS
    -b, --benchmark
        Performs a benchmark by permutating all possible values without
        printing.

    -f, --files
        Interprets every token as a file to read list elements from.

    -h, --help
        Prints this help information.

    -n, --no-delimiters
        Disables the spaced delimiters between elements.

    -v, --verbose
        Logs debug information to standard error.

EXAMPLES
    permutate 1 2 3 ::: 4 5 6 ::: 1 2 3
    permutate -n A B ::: 1 2 :::+ 3
    permutate -f words.txt ::: numbers.txt
"""
