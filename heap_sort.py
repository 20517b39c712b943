import argparse
import sys
from argparse import ArgumentParser
from typing import List

import numpy as np
from tqdm import tqdm

import func
from binary_heap import Heap
from heap_logger import logger


def heap_sort(values, less=func.less) -> list:
    """ Values sorted least to greatest under less """
    return Heap(less, *values).sorted()


def n_largest(values, k: int, less=func.less) -> list:
    """ The k greatest values under less, greatest first """
    if k <= 0:
        return []
    heap = Heap(less, *values)
    return [heap.pop() for _ in range(min(k, heap.size()))]


def parse_args(argv):
    parser = ArgumentParser()
    parser.add_argument('-n', '--n', type=int, help='The number of random values', default=10000)
    parser.add_argument('-k', '--k', type=int, help='The number of greatest values to select', default=10)
    parser.add_argument('-s', '--seed', type=int, help='The seed of random', default=3984572)
    parser.add_argument('--max_value', type=int, help='Random values are drawn from [0, max_value)', default=1000000)
    parser.add_argument('--reverse', action='store_true', help='Order greatest to least')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    return parser.parse_known_args(argv)[0]


@func.time_it
def build_heap(values: List[int], less) -> Heap:
    heap = Heap(less)
    for value in tqdm(values, desc='push'):
        heap.push(value)
    return heap


@func.time_it
def sort_heap(heap: Heap) -> list:
    return heap.sorted()


def run(args: argparse.Namespace) -> list:
    if args.n < 0:
        logger.error('n must not be negative')
        sys.exit(1)
    if args.max_value <= 0:
        logger.error('max_value must be greater than 0')
        sys.exit(1)

    rng = np.random.default_rng(args.seed)
    values = rng.integers(0, args.max_value, size=args.n)
    less = func.greater_or_equal if args.reverse else func.less

    heap = build_heap(values.tolist(), less)
    logger.debug(heap)
    result = sort_heap(heap)

    expected = np.sort(values)
    if args.reverse:
        expected = expected[::-1]
    logger.assert_true(result == expected.tolist(), 'heap sort disagrees with numpy.sort')

    selection = heap.copy()
    top = [selection.pop() for _ in range(min(max(args.k, 0), selection.size()))]
    logger.assert_true(top == result[::-1][:len(top)], 'top-k selection disagrees with the sorted values')
    logger.info(f'Sorted {len(result)} values, top {len(top)}: ' + ' '.join(map(str, top)))
    return result


def main(argv=None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logger.set_level(logger.DEBUG if args.verbose else logger.INFO)
    logger.info(f'Init with random seed {args.seed}')
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
