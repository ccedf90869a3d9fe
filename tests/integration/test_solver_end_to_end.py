import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from transport_solver import (  # noqa: E402
    ProblemUnbalancedError,
    load_problem,
    save_result,
    solve_transport,
    summarize_basis,
    validate_allocation,
)

EXAMPLE = PROJECT_ROOT / "examples" / "textbook_transport_problem.json"


@pytest.mark.parametrize("method", ["northwest_corner", "minimum_cost", "vogel"])
def test_example_problem_solves_to_a_full_basis(method, tmp_path: Path):
    problem = load_problem(EXAMPLE)

    result = solve_transport(problem, method=method)

    assert validate_allocation(problem, result.allocation).is_valid
    assert not summarize_basis(result).is_degenerate
    save_result(tmp_path / f"{method}.json", result)
    assert (tmp_path / f"{method}.json").exists()


def test_vogel_beats_northwest_corner_on_example():
    problem = load_problem(EXAMPLE)

    vogel = solve_transport(problem, method="vogel")
    northwest = solve_transport(problem, method="northwest_corner")

    assert vogel.total_cost < northwest.total_cost


def test_unbalanced_file_rejected(tmp_path: Path):
    path = tmp_path / "unbalanced.json"
    path.write_text('{"supply": [10], "demand": [4, 7], "costs": [[1, 2]]}', encoding="utf-8")
    problem = load_problem(path)

    with pytest.raises(ProblemUnbalancedError) as exc_info:
        solve_transport(problem, method="minimum_cost")

    assert exc_info.value.total_supply == 10.0
    assert exc_info.value.total_demand == 11.0
