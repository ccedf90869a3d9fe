"""High-level entrypoints for the transportation problem initial solution library."""

from .data import SolverOptions, TransportProblem, TransportResult, build_problem
from .evaluation import total_cost
from .exceptions import (
    InvalidProblemError,
    ProblemUnbalancedError,
    SolverConfigurationError,
    TransportSolverError,
)
from .solver import (
    load_problem,
    save_result,
    solve_minimum_cost,
    solve_northwest_corner,
    solve_transport,
    solve_vogel_approximation,
)
from .utils import (
    BasisSummary,
    ValidationResult,
    recompute_cost,
    summarize_basis,
    validate_allocation,
)
from .validation import validate_balance

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build_problem",
    "load_problem",
    "save_result",
    "solve_northwest_corner",
    "solve_minimum_cost",
    "solve_vogel_approximation",
    "solve_transport",
    # Data model
    "TransportProblem",
    "TransportResult",
    "SolverOptions",
    # Building blocks
    "validate_balance",
    "total_cost",
    # Utilities
    "validate_allocation",
    "summarize_basis",
    "recompute_cost",
    "ValidationResult",
    "BasisSummary",
    # Exceptions
    "TransportSolverError",
    "InvalidProblemError",
    "ProblemUnbalancedError",
    "SolverConfigurationError",
    # Version
    "__version__",
]
