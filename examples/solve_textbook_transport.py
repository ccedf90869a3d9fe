"""Solve the textbook transportation example with each heuristic and store the results."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from transport_solver import load_problem, save_result, solve_transport  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    base_dir = Path(__file__).resolve().parent
    problem_path = base_dir / "textbook_transport_problem.json"

    problem = load_problem(problem_path)
    for method in ("northwest_corner", "minimum_cost", "vogel"):
        result = solve_transport(problem, method=method)
        output_path = base_dir / f"textbook_transport_{method}.json"
        save_result(output_path, result)
        print(f"Solved {problem_path.name} with {method}: total_cost={result.total_cost:g}")
        for line in result.steps or []:
            print(f"  {line}")


if __name__ == "__main__":
    main()
