import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from maze_arena.comparison import ComparisonSession
from maze_arena.config import config
from maze_arena.exceptions import MazeArenaException
from maze_arena.layout import MazeLayout, load_maze_file
from maze_arena.logging_config import setup_logging
from maze_arena.models import Position
from maze_arena.solver import SHORT_NAMES, get_algorithm_info, list_algorithms, resolve_algorithm, run_algorithm


app = typer.Typer(help="Run and compare grid pathfinding algorithms on text mazes.")
console = Console()
logger = logging.getLogger(__name__)

RANK_STYLES = ["bold yellow", "bold white", "bold dark_orange"]


@app.callback()
def main(
    log_level: str = typer.Option(
        config.log_level,
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
    ),
):
    """
    Maze Arena: watch search algorithms race through a maze.
    """
    setup_logging(level=log_level, use_rich=config.use_rich_logging)


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise typer.Exit(code=2)


def _resolve_endpoints(layout: MazeLayout, start: Optional[str], end: Optional[str]):
    try:
        start_pos = Position.from_key(start) if start else layout.start
        end_pos = Position.from_key(end) if end else layout.end
    except ValueError as e:
        _fail(str(e))
    if start_pos is None:
        _fail("No start position: mark one with 'S' or pass --start x,z.")
    if end_pos is None:
        _fail("No end position: mark one with 'E' or pass --end x,z.")
    return start_pos, end_pos


def _format_ms(value: float) -> str:
    return f"{value:.{config.time_precision}f}ms"


@app.command()
def solve(
    maze_file: Path = typer.Argument(..., help="Text maze ('#' wall, '.' floor, 'S' start, 'E' end)."),
    algorithm: str = typer.Option(
        config.default_algorithm.value,
        "--algorithm",
        "-a",
        help="Algorithm key: astar, bfs, dfs, ucs or ids.",
    ),
    start: Optional[str] = typer.Option(None, "--start", help="Start position as x,z."),
    end: Optional[str] = typer.Option(None, "--end", help="End position as x,z."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """
    Solve a maze with a single algorithm.
    """
    try:
        layout = load_maze_file(maze_file)
        logger.debug(f"Loaded {layout.maze.width}x{layout.maze.height} maze from {maze_file}")
        start_pos, end_pos = _resolve_endpoints(layout, start, end)
        info = get_algorithm_info(algorithm)
        result = run_algorithm(algorithm, layout.maze, start_pos, end_pos)
    except MazeArenaException as e:
        _fail(e.message)
        return

    if as_json:
        payload = {"algorithm": info["key"], **result.model_dump(mode="json", by_alias=True)}
        typer.echo(json.dumps(payload, indent=2))
        return

    console.print(f"[bold]{info['display_name']}[/bold] {start_pos} -> {end_pos}", highlight=False)
    console.print(f"Solve time: {_format_ms(result.stats.solve_time_ms)}", highlight=False)
    console.print(f"Nodes explored: {result.stats.nodes_explored}", highlight=False)
    console.print(f"Path length: {result.stats.path_length}", highlight=False)
    if result.found:
        console.print("Path: " + " -> ".join(p.key for p in result.path), highlight=False)
    else:
        console.print("[yellow]No path found[/yellow]")


@app.command()
def compare(
    maze_file: Path = typer.Argument(..., help="Text maze ('#' wall, '.' floor, 'S' start, 'E' end)."),
    algorithms: Optional[List[str]] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Algorithm to include; repeat for each. Defaults to all configured algorithms.",
    ),
    start: Optional[str] = typer.Option(None, "--start", help="Start position as x,z."),
    end: Optional[str] = typer.Option(None, "--end", help="End position as x,z."),
    as_json: bool = typer.Option(False, "--json", help="Print the ranking as JSON."),
):
    """
    Run several algorithms on the same maze and rank them by solve time.
    """
    session = ComparisonSession()
    selected = algorithms or [a.value for a in config.compare_algorithms]

    try:
        layout = load_maze_file(maze_file)
        logger.debug(f"Loaded {layout.maze.width}x{layout.maze.height} maze from {maze_file}")
        start_pos, end_pos = _resolve_endpoints(layout, start, end)
        # Repeated -a flags select an algorithm once
        for algo in dict.fromkeys(resolve_algorithm(a) for a in selected):
            session.toggle_algorithm(algo)
        if not session.can_compare:
            missing = 2 - len(session.selected_algorithms)
            console.print(f"Select {missing} more algorithm{'' if missing == 1 else 's'} to compare.")
            raise typer.Exit(code=1)
        results = session.start_comparison(layout.maze, start_pos, end_pos)
    except MazeArenaException as e:
        _fail(e.message)
        return

    if as_json:
        payload = [
            {
                "rank": rank,
                "algorithm": r.algorithm.value,
                "stats": r.stats.model_dump(mode="json", by_alias=True),
                "path": [p.model_dump(mode="json") for p in r.path],
                "visited": [p.model_dump(mode="json") for p in r.visited],
            }
            for rank, r in enumerate(results, start=1)
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"Algorithm Comparison {start_pos} -> {end_pos}")
    table.add_column("Rank", justify="right")
    table.add_column("Algorithm")
    table.add_column("Solve Time", justify="right", style="cyan")
    table.add_column("Nodes Explored", justify="right", style="red")
    table.add_column("Path Length", justify="right", style="green")

    for index, r in enumerate(results):
        rank_style = RANK_STYLES[index] if index < len(RANK_STYLES) else "dim"
        table.add_row(
            f"[{rank_style}]#{index + 1}[/{rank_style}]",
            SHORT_NAMES[r.algorithm],
            _format_ms(r.stats.solve_time_ms),
            str(r.stats.nodes_explored),
            str(r.stats.path_length),
        )
    console.print(table)

    fastest = session.fastest()
    console.print(
        f"Fastest Algorithm: {SHORT_NAMES[fastest.algorithm]} ({_format_ms(fastest.stats.solve_time_ms)})",
        highlight=False,
    )
    efficient = session.most_efficient()
    if efficient is None:
        console.print("Most Efficient Path: [yellow]No path found[/yellow]")
    else:
        console.print(
            f"Most Efficient Path: {SHORT_NAMES[efficient.algorithm]} ({efficient.stats.path_length} steps)",
            highlight=False,
        )


@app.command("algorithms")
def show_algorithms():
    """
    List the available search algorithms.
    """
    for info in list_algorithms():
        console.print(f"[bold]{info['key']}[/bold]  {info['display_name']}: {info['description']}", highlight=False)


if __name__ == "__main__":
    app()
