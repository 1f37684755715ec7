import pytest

from dsakit.backtracking import main, max_flags, solve_maze

DEMO_MAZE = [
    [1, 0, 1, 0, 1],
    [1, 1, 1, 1, 1],
    [0, 1, 0, 1, 1],
    [1, 0, 0, 1, 1],
    [1, 1, 1, 0, 1],
]


def _reachable(path, start, goal):
    rows, cols = len(path), len(path[0])
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and path[nx][ny] == 1 and (nx, ny) not in seen:
                seen.add((nx, ny))
                stack.append((nx, ny))
    return goal in seen


def test_demo_maze_has_valid_path():
    solution = solve_maze(DEMO_MAZE)
    assert solution is not None
    n = len(DEMO_MAZE)
    assert solution[0][0] == 1 and solution[n - 1][n - 1] == 1
    for r in range(n):
        for c in range(n):
            if solution[r][c] == 1:
                assert DEMO_MAZE[r][c] == 1
    assert _reachable(solution, (0, 0), (n - 1, n - 1))


def test_maze_does_not_modify_input():
    maze = [row[:] for row in DEMO_MAZE]
    solve_maze(maze)
    assert maze == DEMO_MAZE


def test_blocked_start_has_no_solution():
    assert solve_maze([[0, 1], [1, 1]]) is None


def test_blocked_goal_has_no_solution():
    assert solve_maze([[1, 1], [1, 0]]) is None


def test_walled_maze_has_no_solution():
    assert solve_maze([[1, 0, 1], [0, 0, 1], [1, 1, 1]]) is None


def test_single_open_cell():
    assert solve_maze([[1]]) == [[1]]


def test_ragged_maze_rejected():
    with pytest.raises(ValueError):
        solve_maze([[1, 1], [1]])


def test_max_flags_demo_board():
    assert max_flags(4) == 4


def test_max_flags_empty_board():
    assert max_flags(0) == 0


def test_max_flags_bounds_and_monotone():
    results = [max_flags(n) for n in range(1, 7)]
    for n, value in enumerate(results, start=1):
        assert 1 <= value <= n
    assert results == sorted(results)


def test_max_flags_negative_rejected():
    with pytest.raises(ValueError):
        max_flags(-1)


def test_main_flags(capsys):
    assert main(["flags", "--size", "4"]) == 0
    assert capsys.readouterr().out == (
        f"Maximum number of flags that can be placed: {max_flags(4)}\n"
    )


def test_main_maze_default(capsys):
    main(["maze"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "solution exist"
    assert lines[1:] == [" ".join(map(str, row)) for row in solve_maze(DEMO_MAZE)]


def test_main_maze_no_solution(capsys):
    main(["maze", "01", "11"])
    assert capsys.readouterr().out == "no solution exist\n"