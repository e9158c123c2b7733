# frontiers.py
"""
Frontiers used by the search driver. All three share push / pop / len / clear.
  Stack          -> LIFO (DFS)
  Queue          -> FIFO (BFS)
  PriorityQueue  -> indexed binary min-heap keyed by cell.f (A*)
"""
from collections import deque

NOT_IN_HEAP = -1


class Stack:
    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        # IndexError on empty; the driver checks len() first
        return self._items.pop()

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class Queue:
    def __init__(self):
        self._items = deque()

    def push(self, item):
        self._items.append(item)

    def pop(self):
        return self._items.popleft()

    def peek(self):
        return self._items[0]

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class PriorityQueue:
    """
    Min-heap of cells ordered by ``cell.f`` (g + h). Each resident cell
    carries its position in ``cell.heap_index`` so update() can move it
    without scanning the heap.
    """

    def __init__(self):
        self._heap = []

    def __len__(self):
        return len(self._heap)

    def __iter__(self):
        return iter(self._heap)

    def push(self, cell):
        cell.heap_index = len(self._heap)
        self._heap.append(cell)
        self._sift_up(cell.heap_index)

    def pop(self):
        if not self._heap:
            raise IndexError('pop from empty priority queue')
        last = len(self._heap) - 1
        self._swap(0, last)
        cell = self._heap.pop()
        cell.heap_index = NOT_IN_HEAP
        if self._heap:
            self._sift_down(0)
        return cell

    def peek(self):
        return self._heap[0]

    def update(self, cell):
        """Insert ``cell``, or restore heap order after its score changed."""
        index = cell.heap_index
        if index == NOT_IN_HEAP or index >= len(self._heap) or self._heap[index] is not cell:
            self.push(cell)
            return
        self._sift_down(self._sift_up(index))

    def clear(self):
        for cell in self._heap:
            cell.heap_index = NOT_IN_HEAP
        self._heap.clear()

    # --- heap helpers --- #
    def _less(self, i, j):
        return self._heap[i].f < self._heap[j].f

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].heap_index = i
        heap[j].heap_index = j

    def _sift_up(self, index):
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent
        return index

    def _sift_down(self, index):
        size = len(self._heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                return index
            self._swap(index, smallest)
            index = smallest
