"""Command line entry point for pileup.

Reads numbers from the command line, loads them into the requested heap and
prints them in extraction order, which is sorted order for a full drain.
"""

import logging
import math
from argparse import ArgumentParser
from typing import List, Optional, Sequence, Union

from pileup import constants
from pileup.base import Heap
from pileup.common import HeapError, InvalidArgument
from pileup.config import HeapConfig, parse_kind, parse_orientation

type Number = Union[int, float]


def parse_number(text: str) -> Number:
    """Parse an int, or a float when the text is not integral.

    Raises:
        InvalidArgument: If the text is not a number, or is NaN.
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise InvalidArgument(f"not a number: {text!r}")
    # NaN has no place in a total order.
    if math.isnan(value):
        raise InvalidArgument(f"not a number: {text!r}")
    return value


def drain(heap: Heap[Number], top: Optional[int] = None) -> List[Number]:
    """Pop up to `top` values (all of them by default) in extraction order."""
    out: List[Number] = []
    while not heap.null() and (top is None or len(out) < top):
        out.append(heap.pop_extreme())
    return out


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="pileup", description="Drain numbers through a heap.")
    parser.add_argument("--log-level", default=constants.DEFAULT_LOG_LEVEL)
    parser.add_argument("--kind", default=constants.DEFAULT_KIND.value)
    parser.add_argument(
        "--orientation", default=constants.DEFAULT_ORIENTATION.value
    )
    parser.add_argument("--top", type=int, default=None)
    parser.add_argument("numbers", nargs="*")
    return parser


def parse_log_level(name: str) -> str:
    """Normalize a logging level name such as 'debug' to 'DEBUG'.

    Raises:
        InvalidArgument: If logging has no level by that name.
    """
    level = name.upper()
    if level not in logging.getLevelNamesMapping():
        raise InvalidArgument(f"unknown log level: {name!r}")
    return level


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(format=constants.LOG_FORMAT, level=log_level)


def run(argv: Optional[Sequence[str]] = None) -> List[Number]:
    """Parse arguments, build the heap and drain it.

    Returns:
        The drained values.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(parse_log_level(args.log_level))
        config = HeapConfig(parse_kind(args.kind), parse_orientation(args.orientation))
        if args.top is not None and args.top < 0:
            raise InvalidArgument(f"--top must be non-negative, got {args.top}")
        numbers = [parse_number(text) for text in args.numbers]
        heap = config.build(numbers)
        logging.info(
            "loaded %d numbers into a %s %s-heap",
            heap.size(),
            config.kind.value,
            config.orientation.value,
        )
        return drain(heap, args.top)
    except HeapError as e:
        parser.error(str(e))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point: print the drained values space-separated."""
    print(" ".join(str(value) for value in run(argv)))


if __name__ == "__main__":
    main()
