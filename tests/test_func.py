import logging

import pytest

from func import next_pow2, less, greater_or_equal, time_it
from heap_logger import logger


@pytest.mark.parametrize('n, expected', [
    (-1, 0),
    (0, 1), (1, 1),
    (2, 2),
    (3, 4), (4, 4),
    (5, 8), (7, 8), (8, 8),
    (9, 16), (15, 16), (16, 16),
    (17, 32), (31, 32), (32, 32),
    (33, 64), (63, 64), (64, 64),
    (65, 128), (127, 128), (128, 128),
    (129, 256), (255, 256), (256, 256),
])
def test_next_pow2(n, expected):
    assert next_pow2(n) == expected


def test_orderings():
    assert less(1, 2)
    assert not less(2, 2)
    assert not less(3, 2)
    assert greater_or_equal(2, 1)
    assert greater_or_equal(2, 2)
    assert not greater_or_equal(1, 2)


def test_time_it(caplog):
    @time_it
    def add(x, y):
        """ adds """
        return x + y

    logger.set_level(logger.INFO)
    with caplog.at_level(logging.INFO, logger=logger.name):
        assert add(1, y=2) == 3
    assert add.__name__ == 'add'
    assert add.__doc__ == ' adds '
    messages = [record.getMessage() for record in caplog.records]
    assert 'Running add...' in messages
    assert any(m.startswith('Time taken by add is') for m in messages)
