"""Tests for custom exception hierarchy."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from transport_solver import (  # noqa: E402
    InvalidProblemError,
    ProblemUnbalancedError,
    SolverConfigurationError,
    TransportSolverError,
    build_problem,
    solve_minimum_cost,
    solve_northwest_corner,
    solve_transport,
    solve_vogel_approximation,
)


def test_all_exceptions_inherit_from_base():
    """Test that all custom exceptions inherit from TransportSolverError."""
    assert issubclass(InvalidProblemError, TransportSolverError)
    assert issubclass(ProblemUnbalancedError, TransportSolverError)
    assert issubclass(SolverConfigurationError, TransportSolverError)


def test_unbalanced_is_an_invalid_problem():
    assert issubclass(ProblemUnbalancedError, InvalidProblemError)


def test_base_exception_is_exception():
    """Test that TransportSolverError inherits from Exception."""
    assert issubclass(TransportSolverError, Exception)


def test_unbalanced_error_carries_totals():
    error = ProblemUnbalancedError(total_supply=10.0, total_demand=11.0)

    assert error.total_supply == 10.0
    assert error.total_demand == 11.0
    assert "unbalanced" in str(error).lower()
    assert "10" in str(error)
    assert "11" in str(error)


def test_unbalanced_error_custom_message():
    error = ProblemUnbalancedError(1.0, 2.0, message="totals differ")

    assert str(error) == "totals differ"
    assert error.total_supply == 1.0
    assert error.total_demand == 2.0


@pytest.mark.parametrize(
    "solve",
    [solve_northwest_corner, solve_minimum_cost, solve_vogel_approximation],
)
def test_unbalanced_problem_rejected_by_every_method(solve):
    """Test ProblemUnbalancedError raised before any allocation for unbalanced input."""
    problem = build_problem(supply=[10], demand=[4, 7], cost=[[1, 2]])

    with pytest.raises(ProblemUnbalancedError) as exc_info:
        solve(problem)

    assert exc_info.value.total_supply == 10.0
    assert exc_info.value.total_demand == 11.0


def test_catch_all_with_base_exception():
    """Test that all solver errors can be caught with the base class."""
    problem = build_problem(supply=[5], demand=[4], cost=[[1]])

    with pytest.raises(TransportSolverError):
        solve_vogel_approximation(problem)


def test_unknown_method_raises_configuration_error():
    problem = build_problem(supply=[5], demand=[5], cost=[[1]])

    with pytest.raises(SolverConfigurationError) as exc_info:
        solve_transport(problem, method="stepping_stone")

    assert "stepping_stone" in str(exc_info.value)
    assert "vogel" in str(exc_info.value)
