import time

from heap_logger import logger


def next_pow2(n: int) -> int:
    """
    Smallest power of two not less than n; 0 maps to 1 and negative n to 0
    """
    if n < 0:
        return 0
    if n == 0:
        return 1
    return 1 << (n - 1).bit_length()


def less(x, y) -> bool:
    return x < y


def greater_or_equal(x, y) -> bool:
    # reversed ordering: turns the max-heap into a min-heap
    return y <= x


def time_it(func):
    def wrapper(*args, **kwargs):
        logger.info(f'Running {func.__name__}...')
        start = time.time()
        result = func(*args, **kwargs)
        end = time.time()
        logger.info(f"Time taken by {func.__name__} is {end - start:.04f} seconds")
        return result
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper
