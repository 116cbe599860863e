"""Linear systems: Gaussian elimination with partial pivoting and simple iteration."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

EPSILON = 0.001
DEFAULT_MAX_ITERATIONS = 100

SAMPLE_MATRIX = (
    (0.91, -0.04, 0.21, -18.0),
    (0.25, -1.23, -0.23, -0.09),
    (-0.21, -0.23, 0.8, -0.13),
    (0.15, -1.31, 0.06, -1.04),
)
SAMPLE_CONSTANTS = (-1.24, -1.04, 2.56, 0.91)


class SingularMatrixError(ValueError):
    """Raised when a system has no unique solution by the chosen method."""


@dataclass(frozen=True)
class IterationResult:
    """Outcome of the simple iteration method."""

    converged: bool
    solution: tuple[float, ...] | None
    iterations: int
    norm: float
    diagonally_dominant: bool


def _check_square(matrix: Sequence[Sequence[float]], constants: Sequence[float]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    if len(constants) != size:
        raise ValueError("constants must match the matrix size")
    return size


def forward_elimination(
    matrix: Sequence[Sequence[float]], constants: Sequence[float]
) -> tuple[list[list[float]], list[float]]:
    """Reduce the system to upper triangular form with partial pivoting.

    Returns new lists; the inputs are left untouched.
    """
    size = _check_square(matrix, constants)
    a = [list(map(float, row)) for row in matrix]
    b = list(map(float, constants))
    for i in range(size):
        pivot = max(range(i, size), key=lambda k: abs(a[k][i]))
        if abs(a[pivot][i]) < EPSILON:
            raise SingularMatrixError("matrix is singular")
        if pivot != i:
            a[i], a[pivot] = a[pivot], a[i]
            b[i], b[pivot] = b[pivot], b[i]
        for j in range(i + 1, size):
            factor = a[j][i] / a[i][i]
            for k in range(i, size):
                a[j][k] -= factor * a[i][k]
            b[j] -= factor * b[i]
    return a, b


def solve_upper_triangular(
    matrix: Sequence[Sequence[float]], constants: Sequence[float]
) -> list[float]:
    """Back-substitute an upper triangular system."""
    size = _check_square(matrix, constants)
    x = [0.0] * size
    for i in reversed(range(size)):
        total = constants[i] - sum(matrix[i][j] * x[j] for j in range(i + 1, size))
        x[i] = total / matrix[i][i]
    return x


def is_diagonally_dominant(matrix: Sequence[Sequence[float]]) -> bool:
    """True if every diagonal entry is at least the sum of the others in its row."""
    return all(
        abs(row[i]) >= sum(abs(v) for j, v in enumerate(row) if j != i)
        for i, row in enumerate(matrix)
    )


def simple_iteration(
    matrix: Sequence[Sequence[float]],
    constants: Sequence[float],
    tolerance: float = EPSILON,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> IterationResult:
    """Solve by Jacobi-style simple iteration starting from zero.

    Iteration is attempted only when the row-sum norm of the iteration matrix
    is below 1; it stops when successive approximations differ by less than
    ``tolerance`` in every component.
    """
    size = _check_square(matrix, constants)
    dominant = is_diagonally_dominant(matrix)
    if any(matrix[i][i] == 0 for i in range(size)):
        raise SingularMatrixError("zero on the diagonal")
    c = [
        [0.0 if i == j else -matrix[i][j] / matrix[i][i] for j in range(size)]
        for i in range(size)
    ]
    d = [constants[i] / matrix[i][i] for i in range(size)]
    norm = max((sum(abs(v) for v in row) for row in c), default=0.0)
    if norm >= 1.0:
        return IterationResult(False, None, 0, norm, dominant)

    x = [0.0] * size
    for iteration in range(1, max_iterations + 1):
        x_new = [sum(cij * xj for cij, xj in zip(row, x)) + di for row, di in zip(c, d)]
        diff = max((abs(n - o) for n, o in zip(x_new, x)), default=0.0)
        if diff < tolerance:
            return IterationResult(True, tuple(x_new), iteration, norm, dominant)
        x = x_new
    return IterationResult(False, None, max_iterations, norm, dominant)


def _print_solution(values: Sequence[float]) -> None:
    for i, value in enumerate(values, start=1):
        print(f"x{i} = {value:.3f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the sample system by Gaussian elimination and by simple iteration."""
    parser = argparse.ArgumentParser(
        prog="labworks-slau",
        description="Solve a sample linear system by Gauss elimination and simple iteration.",
    )
    parser.parse_args(argv)

    print("Gaussian elimination:")
    try:
        upper, reduced = forward_elimination(SAMPLE_MATRIX, SAMPLE_CONSTANTS)
    except SingularMatrixError:
        print("The matrix is singular. No solution is possible.")
        return 1
    solution = solve_upper_triangular(upper, reduced)
    print("Solution after forward elimination:")
    _print_solution(solution)
    print()
    print("Solution after back substitution:")
    _print_solution(solve_upper_triangular(upper, reduced))
    print()

    print("Simple iteration:")
    try:
        result = simple_iteration(SAMPLE_MATRIX, SAMPLE_CONSTANTS)
    except SingularMatrixError:
        print("The matrix has a zero on the diagonal.")
        return 0
    if result.diagonally_dominant:
        print("The matrix is diagonally dominant.")
    else:
        print("The matrix is NOT diagonally dominant.")
    print(f"Norm of matrix C: {result.norm:.3f}")
    if result.norm >= 1.0:
        print("The sufficient convergence condition does not hold.")
    else:
        print("The sufficient convergence condition holds (norm of C < 1).")
    if result.converged and result.solution is not None:
        print(f"Simple iteration converged in {result.iterations} iterations.")
        _print_solution(result.solution)
    else:
        if result.norm < 1.0:
            print(f"No solution found in {result.iterations} iterations.")
        print("Simple iteration did not converge; the system cannot be put in canonical form.")
    return 0


if __name__ == "__main__":
    sys.exit(main())