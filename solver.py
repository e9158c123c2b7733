# solver.py
"""
Search driver shared by DFS, BFS and A*.

solve(maze, algorithm) pops cells from the algorithm's frontier until it
reaches maze.end or runs out of cells, and returns the visit trace: one
"<y>,<x>-<algorithm>" token per expanded cell, in expansion order. The
trace is a visit order, not a path from start to end.
"""
import logging

from maze import manhattan

DFS = 'DFS'
BFS = 'BFS'
ASTAR = 'AStar'
ALGORITHMS = (DFS, BFS, ASTAR)

# top, left, bottom, right
NEIGHBOR_OFFSETS = ((-1, 0), (0, -1), (1, 0), (0, 1))

logger = logging.getLogger(__name__)


def trace_token(cell, algorithm):
    return '%s-%s' % (cell, algorithm)


def can_visit(maze, y, x):
    if not maze.in_bounds(y, x):
        return False
    cell = maze.matrix[y][x]
    return cell not in maze.visited and not cell.obstacle


def neighbors(maze, cell):
    """Open, unvisited 4-connected neighbors of ``cell`` in top, left, bottom, right order."""
    for dy, dx in NEIGHBOR_OFFSETS:
        y, x = cell.y + dy, cell.x + dx
        if can_visit(maze, y, x):
            yield maze.matrix[y][x]


# --- enqueue hooks --- #
def _push_dfs(maze, neighbor, current):
    maze.stack.push(neighbor)


def _push_bfs(maze, neighbor, current):
    maze.queue.push(neighbor)


def process_neighbor(maze, neighbor, current):
    tentative_g = current.g + 1
    if tentative_g < neighbor.g:
        neighbor.g = tentative_g
    neighbor.h = manhattan(neighbor, maze.end)
    maze.priority_queue.update(neighbor)


def frontier_for(maze, algorithm):
    if algorithm == DFS:
        return maze.stack, _push_dfs
    if algorithm == BFS:
        return maze.queue, _push_bfs
    if algorithm == ASTAR:
        return maze.priority_queue, process_neighbor
    raise ValueError('unknown algorithm %r, expected one of %s' % (algorithm, ', '.join(ALGORITHMS)))


def solve(maze, algorithm):
    """
    Run one search over ``maze`` and return its trace (``maze.path_to_end``).
    Call clear(maze) between solves on the same maze.
    """
    frontier, enqueue = frontier_for(maze, algorithm)
    trace = maze.path_to_end

    frontier.push(maze.start)
    while len(frontier) > 0:
        current = frontier.pop()
        if current == maze.end:
            # has reached the end
            trace.append(trace_token(current, algorithm))
            break
        if current in maze.visited:
            continue
        for neighbor in neighbors(maze, current):
            enqueue(maze, neighbor, current)
        maze.visited.add(current)
        trace.append(trace_token(current, algorithm))

    logger.debug('%s expanded %d cells on %dx%d maze, reached end: %s',
                 algorithm, len(trace), maze.size, maze.size, reached_end(maze, trace, algorithm))
    return trace


def clear(maze):
    """Empty the visited set, every frontier and the trace; reset A* scores."""
    maze.visited.clear()
    maze.stack.clear()
    maze.queue.clear()
    maze.priority_queue.clear()
    maze.path_to_end = []
    maze.reset_scores()


def reached_end(maze, trace, algorithm):
    return bool(trace) and trace[-1] == trace_token(maze.end, algorithm)


def solve_all(maze, algorithms=ALGORITHMS):
    """Solve ``maze`` once per algorithm, in order, and return {algorithm: trace}."""
    traces = {}
    for algorithm in algorithms:
        clear(maze)
        traces[algorithm] = list(solve(maze, algorithm))
    return traces
