import logging
import os
import sys
from collections import deque
from typing import BinaryIO

from permutate.cli.arguments import InputError, parse_arguments, parse_options
from permutate.cli.buffer import StdoutBuffer
from permutate.cli.man import EXAMPLE_USAGE
from permutate.permutator import Permutator
from permutate.shapes import ListOfLists, Repeated

logger = logging.getLogger(__name__)


def build_permutator(list_vector: list[list[str]]) -> Permutator[list]:
    if len(list_vector) == 1:
        logger.debug("repeating a single list of %d elements", len(list_vector[0]))
        return Permutator(Repeated(list_vector[0]))
    logger.debug("permutating %d lists", len(list_vector))
    return Permutator(ListOfLists(list_vector))


def permutate(
    permutator: Permutator[list], stream: BinaryIO, delimiter: bytes = b" "
) -> int:
    """Write every remaining combination to `stream`, one per line."""
    current = next(permutator, None)
    if current is None:
        return 0
    count = 0
    with StdoutBuffer(stream) as buffer:
        while current is not None:
            buffer.write(delimiter.join(e.encode() for e in current) + b"\n")
            count += 1
            current = permutator.next_into(current)
    return count


def prepare(
    list_vector: list[list[str]],
    benchmark: bool = False,
    no_delimiters: bool = False,
    stream: BinaryIO | None = None,
) -> int:
    permutator = build_permutator(list_vector)
    logger.debug("%d combinations", permutator.max_combinations())
    if benchmark:
        deque(permutator, maxlen=0)
        return permutator.max_combinations()
    if stream is None:
        stream = sys.stdout.buffer
    return permutate(permutator, stream, b"" if no_delimiters else b" ")


def main(argv: list[str] | None = None) -> int:
    args = parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        list_vector = parse_arguments(" ".join(args.inputs), args.files)
    except InputError as exc:
        sys.stderr.write(f"permutate: parse error: {exc}\n{EXAMPLE_USAGE}\n")
        return 1
    try:
        prepare(list_vector, args.benchmark, args.no_delimiters)
    except BrokenPipeError:
        # downstream closed early, e.g. `permutate ... | head`
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0
