"""Tests for utility functions."""

import pytest

from transport_solver import (
    build_problem,
    recompute_cost,
    solve_minimum_cost,
    solve_northwest_corner,
    solve_vogel_approximation,
    summarize_basis,
    validate_allocation,
)
from transport_solver.data import TransportResult


@pytest.fixture
def problem():
    return build_problem(supply=[20, 30], demand=[25, 25], cost=[[5, 8], [7, 6]])


def test_validate_allocation_accepts_solver_output(problem):
    result = solve_northwest_corner(problem)

    validation = validate_allocation(problem, result.allocation)

    assert validation.is_valid
    assert validation.errors == []
    assert validation.row_residuals == [0.0, 0.0]
    assert validation.column_residuals == [0.0, 0.0]
    assert validation.negative_cells == []


def test_validate_allocation_reports_unshipped_supply(problem):
    validation = validate_allocation(problem, [[10.0, 0.0], [5.0, 25.0]])

    assert not validation.is_valid
    assert validation.row_residuals[0] == pytest.approx(10.0)
    assert validation.column_residuals[0] == pytest.approx(10.0)
    assert any("Origin 1" in error for error in validation.errors)
    assert any("Destination 1" in error for error in validation.errors)


def test_validate_allocation_reports_negative_cells(problem):
    validation = validate_allocation(problem, [[25.0, -5.0], [0.0, 30.0]])

    assert not validation.is_valid
    assert validation.negative_cells == [(0, 1)]
    assert any("negative" in error for error in validation.errors)


def test_validate_allocation_reports_shape_mismatch(problem):
    validation = validate_allocation(problem, [[20.0, 0.0, 0.0]])

    assert not validation.is_valid
    assert "shape" in validation.errors[0]


def test_validate_allocation_tolerance(problem):
    allocation = [[20.0 + 1e-12, 0.0], [5.0, 25.0]]

    assert not validate_allocation(problem, allocation, tolerance=0.0).is_valid
    assert validate_allocation(problem, allocation).is_valid


def test_summarize_basis_full_basis(problem):
    summary = summarize_basis(solve_vogel_approximation(problem))

    assert summary.occupied == 3
    assert summary.basis_size == 3
    assert not summary.is_degenerate


def test_summarize_basis_degenerate():
    problem = build_problem(supply=[10, 20], demand=[10, 20], cost=[[1, 2], [3, 4]])

    summary = summarize_basis(solve_northwest_corner(problem))

    assert summary.occupied == 2
    assert summary.basis_size == 3
    assert summary.is_degenerate


def test_recompute_cost_matches_reported_total(problem):
    for solve in (solve_northwest_corner, solve_minimum_cost, solve_vogel_approximation):
        result = solve(problem)
        assert recompute_cost(result) == pytest.approx(result.total_cost)


def test_shipments_by_name():
    problem = build_problem(
        supply=[20, 30],
        demand=[25, 25],
        cost=[[5, 8], [7, 6]],
        origins=["F1", "F2"],
        destinations=["W1", "W2"],
    )

    result = solve_minimum_cost(problem)

    assert result.shipments() == {
        ("F1", "W1"): 20.0,
        ("F2", "W1"): 5.0,
        ("F2", "W2"): 25.0,
    }


def test_occupied_cells_row_major():
    result = TransportResult(
        allocation=[[0.0, 3.0], [4.0, 0.0]],
        total_cost=0.0,
        origin_names=["a", "b"],
        destination_names=["x", "y"],
        cost=[[0.0, 0.0], [0.0, 0.0]],
        method="vogel",
    )

    assert result.occupied_cells() == [(0, 1), (1, 0)]
