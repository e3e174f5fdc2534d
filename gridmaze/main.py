import argparse
import logging
import sys
import time

from gridmaze.core.errors import MazeError

DEFAULT_ROWS = 20
DEFAULT_COLS = 20

logger = logging.getLogger("gridmaze")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    from gridmaze.maze import GENERATORS, SOLVERS

    parser = argparse.ArgumentParser(description="Grid Maze: generate and solve perfect mazes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_maze_args(p):
        p.add_argument("--rows", type=float, default=DEFAULT_ROWS, help="Maze rows")
        p.add_argument("--cols", type=float, default=DEFAULT_COLS, help="Maze columns")
        p.add_argument("--seed", type=int, default=None, help="Random Seed")
        p.add_argument("--algo", type=str, default="dfs", choices=sorted(GENERATORS), help="Generation Algorithm")
        p.add_argument("--trace", action="store_true", help="Log every grid/solver event at DEBUG level")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    add_maze_args(gen_parser)

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate a maze, solve it and print the path")
    add_maze_args(solve_parser)
    solve_parser.add_argument("--solver", type=str, default="dijkstra", choices=sorted(SOLVERS), help="Solver algorithm")
    solve_parser.add_argument("--show", action="store_true", help="Also draw the maze with the path")
    solve_parser.add_argument("--visual", action="store_true", help="Animate generation and solving in a pygame window")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and every solver")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def _make_grid(args):
    from gridmaze.maze import new_grid
    from gridmaze.core.events import EventLog

    evt_log = EventLog(logger=logging.getLogger("gridmaze.events")) if args.trace else None
    return new_grid(args.rows, args.cols, rng=args.seed, event_writer=evt_log)

def cmd_generate(args):
    from gridmaze.maze import generate
    from gridmaze.core.analysis import MazeAnalyzer
    from gridmaze.viz.text import render_text

    grid = _make_grid(args)
    logger.info(f"Generating {grid.rows}x{grid.cols} maze with {args.algo.upper()}...")
    generate(grid, args.algo)

    print(render_text(grid))
    stats = MazeAnalyzer.calculate_stats(grid)
    logger.info(f"Stats: {stats}")
    for key, value in stats.items():
        print(f"{key}: {value:.2f}" if isinstance(value, float) else f"{key}: {value}")

def cmd_solve(args):
    from gridmaze.maze import GENERATORS, SOLVERS, generate, solve

    grid = _make_grid(args)

    if args.visual:
        from gridmaze.viz.renderer import Renderer
        logger.info("Visual mode enabled - Opening window...")
        solver = SOLVERS[args.solver](grid, event_writer=grid.event_writer)
        renderer = Renderer(grid, generator=GENERATORS[args.algo](grid), solver=solver)
        renderer.init_window()
        renderer.run_loop()
        path = solver.path
    else:
        logger.info(f"Generating {grid.rows}x{grid.cols} maze with {args.algo.upper()}...")
        generate(grid, args.algo)
        logger.info(f"Solving with {args.solver.upper()} from {grid.start.pos} to {grid.end.pos}...")
        path = solve(grid, args.solver)

    if not path:
        logger.warning("No path found from start to end.")
        return 1

    for row, col in path:
        print(f"{row},{col}")

    if args.show:
        from gridmaze.viz.text import render_text
        print(render_text(grid, path))

    logger.info(f"Path length: {len(path)} cells ({len(path) - 1} steps)")
    return 0

def cmd_benchmark(args):
    from gridmaze.maze import SOLVERS, new_grid
    from gridmaze.algo.dfs import RecursiveBacktracker

    logger.info(f"Running Solver Benchmark Suite (Size: {args.size}x{args.size})...")

    t0 = time.time()
    grid = new_grid(args.size, args.size, rng=args.seed)
    RecursiveBacktracker(grid).run_all()
    logger.info(f"Generation complete in {time.time()-t0:.4f}s")

    print(f"\n{'ALGORITHM':<20} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 60)

    for name, cls in SOLVERS.items():
        s = cls(grid)
        t_start = time.time()
        s.run_all()
        duration = time.time() - t_start
        print(f"{name:<20} | {duration:<10.4f} | {len(s.path):<10} | {s.visited_count:<10}")

COMMANDS = {
    "generate": cmd_generate,
    "solve": cmd_solve,
    "benchmark": cmd_benchmark,
}

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        return COMMANDS[args.command](args) or 0
    except MazeError as e:
        logger.error(str(e))
        return 2

if __name__ == "__main__":
    sys.exit(main())
