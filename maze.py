# maze.py
"""
Grid model for the maze visualizer.
  Cell        -> one grid position: coordinates, obstacle flag, A* scores
  Maze        -> size x size matrix of cells plus start/end and the scratch
                 state (visited set, frontiers, trace) used while solving
  build_maze  -> random maze with obstacles at OBSTACLE_PROBABILITY
"""
import random

from frontiers import NOT_IN_HEAP, Stack, Queue, PriorityQueue

# Score sentinel; larger than any path length on a supported grid
INFINITY = 2 ** 31 - 1
OBSTACLE_PROBABILITY = 0.3


def manhattan(a, b):
    # only 4 directions of movement are allowed through the grid (no diagonals)
    return abs(a.x - b.x) + abs(a.y - b.y)


class Cell:
    __slots__ = ('y', 'x', 'obstacle', 'g', 'h', 'heap_index')

    def __init__(self, y, x, obstacle=False):
        self.y = y
        self.x = x
        self.obstacle = obstacle
        self.reset_scores()

    def reset_scores(self):
        # g, h and heap_index are only used for A*
        self.g = INFINITY
        self.h = INFINITY
        self.heap_index = NOT_IN_HEAP

    @property
    def f(self):
        # heap key: cost so far plus Manhattan distance to end (h holds only the distance)
        return self.g + self.h

    @property
    def position(self):
        return (self.y, self.x)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.y == other.y and self.x == other.x

    def __hash__(self):
        return hash((self.y, self.x))

    def __str__(self):
        return '%d,%d' % (self.y, self.x)

    def __repr__(self):
        return 'Cell(%d, %d%s)' % (self.y, self.x, ', obstacle' if self.obstacle else '')


class VisitedSet:
    """Coordinates of cells that have already been expanded."""

    def __init__(self):
        self._positions = set()

    def add(self, cell):
        self._positions.add(cell.position)

    def remove(self, cell):
        self._positions.discard(cell.position)

    def contains(self, cell):
        return cell.position in self._positions

    __contains__ = contains

    def clear(self):
        self._positions.clear()

    def __len__(self):
        return len(self._positions)

    def __iter__(self):
        return iter(sorted(self._positions))


class Maze:
    def __init__(self, size, start=(0, 0), end=None):
        if size <= 0:
            raise ValueError('maze size must be positive, got %r' % (size,))
        if end is None:
            end = (size - 1, size - 1)
        self.size = size
        self.matrix = [[Cell(y, x) for x in range(size)] for y in range(size)]
        self.start = self.cell(*start)
        self.end = self.cell(*end)

        # per-solve state, emptied by solver.clear()
        self.visited = VisitedSet()
        self.stack = Stack()                   # used for DFS
        self.queue = Queue()                   # used for BFS
        self.priority_queue = PriorityQueue()  # used for A*
        self.path_to_end = []

        self.reset_scores()

    def in_bounds(self, y, x):
        return 0 <= y < self.size and 0 <= x < self.size

    def cell(self, y, x):
        if not self.in_bounds(y, x):
            raise IndexError('cell (%d, %d) outside %dx%d maze' % (y, x, self.size, self.size))
        return self.matrix[y][x]

    def is_terminal(self, y, x):
        return (y, x) == self.start.position or (y, x) == self.end.position

    def set_obstacle(self, y, x, obstacle=True):
        # don't put an obstacle on the starting or ending cells
        if obstacle and self.is_terminal(y, x):
            raise ValueError('start and end cells cannot be obstacles')
        self.cell(y, x).obstacle = obstacle

    def add_obstacles(self, rng=random):
        for row in self.matrix:
            for cell in row:
                if self.is_terminal(cell.y, cell.x):
                    continue
                if rng.random() < OBSTACLE_PROBABILITY:
                    cell.obstacle = True

    def obstacles(self):
        return [cell.position for row in self.matrix for cell in row if cell.obstacle]

    def rows(self):
        return iter(self.matrix)

    def reset_scores(self):
        for row in self.matrix:
            for cell in row:
                cell.reset_scores()
        self.start.g = 0
        self.start.h = manhattan(self.start, self.end)


def build_maze(size, rng=None):
    """
    Random size x size maze. Start and end are sampled independently, so
    they may land on the same cell. Every other cell is an obstacle with
    probability OBSTACLE_PROBABILITY.
    """
    if rng is None:
        rng = random
    start = (rng.randrange(size), rng.randrange(size))
    end = (rng.randrange(size), rng.randrange(size))
    maze = Maze(size, start, end)
    maze.add_obstacles(rng)
    return maze
