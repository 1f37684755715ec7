"""Island counting on a grid and adjacency lists for undirected graphs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1))

_DEMO_GRID = ("01", "10", "11", "10")
_DEMO_EDGES = ("0-1", "0-4", "4-1", "4-3", "1-3", "1-2", "3-2")


def count_islands(grid: Iterable[Iterable[int]]) -> int:
    """Count groups of cells equal to 1, joined in all eight directions."""
    rows = [list(row) for row in grid]
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != 1 or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc in _DIRECTIONS:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < len(rows)
                        and 0 <= nc < len(rows[nr])
                        and rows[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return islands


def adjacency_list(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build the adjacency list of an undirected graph, neighbours in edge order."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    neighbours: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) refers to a vertex outside 0..{vertex_count - 1}")
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def _parse_edge(text: str) -> tuple[int, int]:
    try:
        u, v = text.split("-")
        return int(u), int(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"edge must look like U-V, got {text!r}") from None


def _parse_row(text: str) -> list[int]:
    if not set(text) <= {"0", "1"}:
        raise argparse.ArgumentTypeError(f"row must contain only 0 and 1, got {text!r}")
    return [int(ch) for ch in text]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-graphs", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    islands = commands.add_parser("islands", help="count islands in a 0/1 grid")
    islands.add_argument(
        "rows", nargs="*", type=_parse_row, default=[_parse_row(r) for r in _DEMO_GRID]
    )

    adjacency = commands.add_parser("adjacency", help="print an adjacency list")
    adjacency.add_argument("--vertices", type=int, default=5)
    adjacency.add_argument(
        "edges", nargs="*", type=_parse_edge, default=[_parse_edge(e) for e in _DEMO_EDGES]
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "islands":
        print(count_islands(args.rows))
        return 0
    try:
        neighbours = adjacency_list(args.vertices, args.edges)
    except ValueError as error:
        parser.error(str(error))
    print("Adjacency List")
    for vertex, adjacent in enumerate(neighbours):
        print(f"Vertex {vertex}: " + " ".join(map(str, adjacent)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())