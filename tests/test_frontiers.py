"""
Frontier tests: LIFO stack, FIFO queue and the indexed min-heap used by A*.
"""

import pytest

from frontiers import NOT_IN_HEAP, Stack, Queue, PriorityQueue
from maze import Cell


def scored(y, x, g, h):
    cell = Cell(y, x)
    cell.g = g
    cell.h = h
    return cell


def assert_heap_ok(pq):
    heap = list(pq)
    for i, cell in enumerate(heap):
        assert cell.heap_index == i
        if i > 0:
            assert heap[(i - 1) // 2].f <= cell.f


class TestStack:
    def test_pop_returns_last_pushed(self):
        stack = Stack()
        for item in ('a', 'b', 'c'):
            stack.push(item)
        assert len(stack) == 3
        assert [stack.pop(), stack.pop(), stack.pop()] == ['c', 'b', 'a']

    def test_duplicates_allowed(self):
        stack = Stack()
        stack.push('a')
        stack.push('a')
        assert len(stack) == 2

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            Stack().pop()

    def test_clear(self):
        stack = Stack()
        stack.push(1)
        stack.clear()
        assert len(stack) == 0


class TestQueue:
    def test_pop_returns_least_recently_pushed(self):
        queue = Queue()
        for item in (1, 2, 3):
            queue.push(item)
        assert queue.peek() == 1
        assert [queue.pop(), queue.pop(), queue.pop()] == [1, 2, 3]

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            Queue().pop()

    def test_clear(self):
        queue = Queue()
        queue.push(1)
        queue.push(1)
        queue.clear()
        assert len(queue) == 0


class TestPriorityQueue:
    def test_pops_in_ascending_f_order(self):
        pq = PriorityQueue()
        cells = [scored(0, i, g, h) for i, (g, h) in enumerate([(3, 4), (0, 1), (2, 2), (5, 0), (1, 1)])]
        for cell in cells:
            pq.push(cell)
            assert_heap_ok(pq)

        popped = []
        while len(pq):
            popped.append(pq.pop().f)
            assert_heap_ok(pq)
        assert popped == sorted(popped)

    def test_popped_cell_leaves_heap(self):
        pq = PriorityQueue()
        cell = scored(0, 0, 1, 1)
        pq.push(cell)
        assert cell.heap_index == 0
        assert pq.pop() is cell
        assert cell.heap_index == NOT_IN_HEAP
        assert len(pq) == 0

    def test_update_inserts_new_cell(self):
        pq = PriorityQueue()
        cell = scored(1, 1, 2, 2)
        pq.update(cell)
        assert len(pq) == 1
        assert pq.peek() is cell

    def test_update_moves_cell_after_score_drop(self):
        pq = PriorityQueue()
        cells = [scored(0, i, 10 + i, 0) for i in range(6)]
        for cell in cells:
            pq.push(cell)
        last = cells[-1]
        last.g = 0
        pq.update(last)
        assert len(pq) == 6
        assert pq.peek() is last
        assert_heap_ok(pq)

    def test_update_moves_cell_after_score_rise(self):
        pq = PriorityQueue()
        cells = [scored(0, i, i, 0) for i in range(5)]
        for cell in cells:
            pq.push(cell)
        first = cells[0]
        first.g = 100
        pq.update(first)
        assert_heap_ok(pq)
        assert pq.pop() is cells[1]

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            PriorityQueue().pop()

    def test_clear_resets_back_pointers(self):
        pq = PriorityQueue()
        cells = [scored(0, i, i, i) for i in range(3)]
        for cell in cells:
            pq.push(cell)
        pq.clear()
        assert len(pq) == 0
        assert all(cell.heap_index == NOT_IN_HEAP for cell in cells)
