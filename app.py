# app.py
"""
Maze search visualizer backend (Flask).
Endpoints:
  GET  /                -> HTML page: one random maze solved with DFS, BFS and A*,
                           each algorithm's visit trace animated cell by cell
  POST /api/solve_maze  -> { size?: int, seed?: int, algorithms?: ['DFS'|'BFS'|'AStar'] }
                           returns { size, start: [y,x], end: [y,x], obstacles: [[y,x]..],
                                     results: { <algo>: { trace, explored, reached_end, time } } }
Configuration (environment):
  MAZE_SIZE   grid size used when the request gives none (default 40)
  MAZE_SEED   seed for a reproducible maze on every request (default unset)
  PORT        port for `python app.py` (default 8080)
Run locally:
  python3 -m venv venv
  source venv/bin/activate
  pip install -e .
  python app.py
"""
from flask import Flask, request, jsonify, render_template
from flask_cors import CORS
import random
import time
import os

from maze import build_maze
from solver import ALGORITHMS, clear, solve, reached_end

MIN_MAZE_SIZE = 1
MAX_MAZE_SIZE = 101

app = Flask(__name__, template_folder="templates", static_folder="static")
app.config.from_mapping(
    MAZE_SIZE=int(os.environ.get('MAZE_SIZE', 40)),
    MAZE_SEED=os.environ.get('MAZE_SEED'),
)
CORS(app)


class InvalidRequest(ValueError):
    pass


def parse_int(name, value):
    # JSON gives bools and floats; the query string gives str
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidRequest('%s must be an integer, got %r' % (name, value))
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidRequest('%s must be an integer, got %r' % (name, value))


def parse_size(value):
    if value is None or value == '':
        value = app.config['MAZE_SIZE']
    size = parse_int('size', value)
    return max(MIN_MAZE_SIZE, min(size, MAX_MAZE_SIZE))  # constrain


def parse_seed(value):
    if value is None or value == '':
        value = app.config['MAZE_SEED']
    if value is None or value == '':
        return None
    return parse_int('seed', value)


def parse_algorithms(value):
    if value is None:
        return list(ALGORITHMS)
    if isinstance(value, str) or not isinstance(value, list):
        raise InvalidRequest('algorithms must be a list')
    unknown = [algo for algo in value if algo not in ALGORITHMS]
    if unknown:
        raise InvalidRequest('unknown algorithm(s): %s' % ', '.join(map(str, unknown)))
    return value


def new_maze(size, seed):
    # a seeded maze gets its own generator so requests don't share RNG state
    rng = random.Random(seed) if seed is not None else None
    return build_maze(size, rng)


def run_algorithms(maze, algorithms):
    """Solve the maze once per algorithm and collect trace + timing for each."""
    results = {}
    for algo in algorithms:
        clear(maze)
        start_time = time.time()
        trace = list(solve(maze, algo))
        time_ms = int((time.time() - start_time) * 1000)
        results[algo] = {
            'trace': trace,
            'explored': len(trace),
            'reached_end': reached_end(maze, trace, algo),
            'time': time_ms,
        }
        app.logger.info('%s: %d cells explored in %d ms (reached end: %s)',
                        algo, len(trace), time_ms, results[algo]['reached_end'])
    return results


@app.errorhandler(InvalidRequest)
def handle_bad_request(err):
    return jsonify({'error': str(err)}), 400


# --- Flask routes --- #
@app.route('/')
def index():
    size = parse_size(request.args.get('size'))
    seed = parse_seed(request.args.get('seed'))
    maze = new_maze(size, seed)
    results = run_algorithms(maze, ALGORITHMS)
    return render_template('index.html', maze=maze, algorithms=ALGORITHMS, results=results)


@app.route('/api/solve_maze', methods=['POST'])
def api_solve_maze():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidRequest('request body must be a JSON object')
    size = parse_size(payload.get('size'))
    seed = parse_seed(payload.get('seed'))
    algorithms = parse_algorithms(payload.get('algorithms'))

    maze = new_maze(size, seed)
    results = run_algorithms(maze, algorithms)
    return jsonify({
        'size': maze.size,
        'start': list(maze.start.position),
        'end': list(maze.end.position),
        'obstacles': [list(pos) for pos in maze.obstacles()],
        'results': results,
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port, debug=bool(os.environ.get('MAZE_DEBUG')))
