# Binary max-heap
from heap_logger import logger
from func import next_pow2


class Heap(object):
    def __init__(self, less, *values):
        """
        The tree lives in a flat list: the children of index i are 2i+1 and 2i+2.
        Slots [0, heap_size) are the heap, slots [heap_size, len(heap_list)) hold
        cached values left behind by pop() and clear() until clean() drops them.
        :param less: less(a, b) is True when a must sit below b
        :param values: initial values, pushed in order
        """
        self._check_less(less)
        self.less = less
        self.heap_list = []
        self.heap_size = 0
        self.heap_capacity = next_pow2(len(values))
        self.push(*values)

    @staticmethod
    def _check_less(less):
        logger.assert_true(less is not None, 'Heap requires an ordering function')
        logger.assert_true(callable(less), f'Ordering must be callable, got {type(less).__name__}')

    def __str__(self):
        return f"Heap size: {self.heap_size}, capacity: {self.heap_capacity}, values: {self.heap_list}"

    def __repr__(self):
        return self.__str__()

    def __len__(self):
        return self.heap_size

    def __contains__(self, value):
        return self.contains(value)

    def __eq__(self, other):
        if not isinstance(other, Heap):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def size(self) -> int:
        return self.heap_size

    def capacity(self) -> int:
        return self.heap_capacity

    def empty(self) -> bool:
        return self.heap_size == 0

    def peek(self):
        """ Top of the heap, or None when empty """
        if self.heap_size == 0:
            return None
        return self.heap_list[0]

    def push(self, *values) -> 'Heap':
        """ O(log n) per value """
        for value in values:
            if self.heap_size < len(self.heap_list):
                # reuse a cached slot
                self.heap_list[self.heap_size] = value
            else:
                if len(self.heap_list) == self.heap_capacity:
                    self.heap_capacity <<= 1
                self.heap_list.append(value)
            self.heap_size += 1
            self.per_up(self.heap_size - 1)
        return self

    def pop(self):
        """ O(log n); the removed value stays cached behind the heap """
        if self.heap_size == 0:
            return None
        self.heap_size -= 1
        last = self.heap_size
        self.heap_list[0], self.heap_list[last] = self.heap_list[last], self.heap_list[0]
        self.per_down(0)
        return self.heap_list[last]

    def per_up(self, index: int):
        while index > 0:
            parent = (index - 1) >> 1
            if not self.less(self.heap_list[parent], self.heap_list[index]):
                break
            self.heap_list[parent], self.heap_list[index] = self.heap_list[index], self.heap_list[parent]
            index = parent

    def per_down(self, index: int):
        size = self.heap_size
        child = 2 * index + 1
        while child < size:
            # right child wins only if the left one is less than it
            right = child + 1
            if right < size and self.less(self.heap_list[child], self.heap_list[right]):
                child = right
            if not self.less(self.heap_list[index], self.heap_list[child]):
                break
            self.heap_list[index], self.heap_list[child] = self.heap_list[child], self.heap_list[index]
            index = child
            child = 2 * index + 1

    def clear(self) -> 'Heap':
        """ Everything becomes cached; see restore() """
        self.heap_size = 0
        return self

    def restore(self) -> 'Heap':
        """ Push the cached values back onto the heap """
        return self.push(*self.heap_list[self.heap_size:])

    def clean(self) -> 'Heap':
        """
        Drop the cached values. This cannot be undone by restore().
        The capacity shrinks to the next power of two only once the heap fills
        less than half of it, so alternating push/clean does not reallocate.
        """
        del self.heap_list[self.heap_size:]
        if 2 * self.heap_size < self.heap_capacity:
            capacity = next_pow2(self.heap_size)
            logger.debug(f'Heap capacity {self.heap_capacity} -> {capacity}')
            # fresh list, so the over-allocated buffer is released
            self.heap_list = self.heap_list[:]
            self.heap_capacity = capacity
        return self

    def contains(self, value) -> bool:
        """ O(n) equality scan of the heap """
        for i in range(self.heap_size):
            if self.heap_list[i] == value:
                return True
        return False

    def copy(self) -> 'Heap':
        h = Heap(self.less)
        h.heap_list = self.heap_list[:self.heap_size]
        h.heap_size = self.heap_size
        h.heap_capacity = next_pow2(self.heap_size)
        return h

    def equals(self, other: 'Heap') -> bool:
        """
        Compares storage order, not sorted order: two heaps holding the same
        values may differ if they were built in a different order.
        """
        if self is other:
            return True
        if self.heap_size != other.heap_size:
            return False
        for i in range(self.heap_size):
            if self.heap_list[i] != other.heap_list[i]:
                return False
        return True

    def set_less(self, less) -> 'Heap':
        """ Replace the ordering and rebuild the heap, O(n log n) """
        self._check_less(less)
        values = [self.pop() for _ in range(self.heap_size)]
        logger.debug(f'Reordering {len(values)} values with {getattr(less, "__name__", less)}')
        self.less = less
        return self.push(*values)

    def sorted(self) -> list:
        """
        Values sorted least to greatest under less.
        Pops to empty, then puts the heap back exactly as it was.
        """
        size = self.heap_size
        backup = self.heap_list[:size]
        while self.heap_size > 0:
            self.pop()
        result = self.heap_list[:size]
        self.heap_list[:size] = backup
        self.heap_size = size
        return result

    def values(self) -> list:
        """ Heap values in storage order """
        return self.heap_list[:self.heap_size]
