import pytest

from labworks.slau import (
    SAMPLE_CONSTANTS,
    SAMPLE_MATRIX,
    SingularMatrixError,
    forward_elimination,
    is_diagonally_dominant,
    main,
    simple_iteration,
    solve_upper_triangular,
)


def _residual(matrix, x, b):
    return max(abs(sum(a * xi for a, xi in zip(row, x)) - bi) for row, bi in zip(matrix, b))


DOMINANT = [[10.0, 1.0, 2.0], [1.0, 8.0, -1.0], [2.0, -1.0, 9.0]]
DOMINANT_B = [13.0, 8.0, 10.0]


def test_gauss_solves_sample_system():
    upper, reduced = forward_elimination(SAMPLE_MATRIX, SAMPLE_CONSTANTS)
    x = solve_upper_triangular(upper, reduced)
    assert _residual(SAMPLE_MATRIX, x, SAMPLE_CONSTANTS) < 1e-9


def test_forward_elimination_gives_upper_triangle():
    upper, _ = forward_elimination(SAMPLE_MATRIX, SAMPLE_CONSTANTS)
    for i, row in enumerate(upper):
        assert all(abs(v) < 1e-12 for v in row[:i])


def test_forward_elimination_does_not_mutate_input():
    matrix = [[0.0, 2.0], [3.0, 1.0]]
    constants = [4.0, 5.0]
    forward_elimination(matrix, constants)
    assert matrix == [[0.0, 2.0], [3.0, 1.0]]
    assert constants == [4.0, 5.0]


def test_forward_elimination_pivots_on_zero_leading_entry():
    matrix = [[0.0, 2.0], [3.0, 1.0]]
    constants = [4.0, 5.0]
    upper, reduced = forward_elimination(matrix, constants)
    x = solve_upper_triangular(upper, reduced)
    assert _residual(matrix, x, constants) < 1e-12


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        forward_elimination([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        forward_elimination([[1.0, 2.0]], [1.0])


def test_solve_upper_triangular_identity():
    assert solve_upper_triangular([[1.0, 0.0], [0.0, 1.0]], [3.0, 7.0]) == [3.0, 7.0]


def test_diagonal_dominance():
    assert is_diagonally_dominant(DOMINANT) is True
    assert is_diagonally_dominant([[1.0, 2.0], [3.0, 1.0]]) is False


def test_sample_matrix_is_not_dominant_and_iteration_fails():
    result = simple_iteration(SAMPLE_MATRIX, SAMPLE_CONSTANTS)
    assert result.diagonally_dominant is False
    assert result.norm >= 1.0
    assert result.converged is False
    assert result.solution is None
    assert result.iterations == 0


def test_simple_iteration_converges_on_dominant_system():
    result = simple_iteration(DOMINANT, DOMINANT_B, 1e-9, 200)
    assert result.converged is True
    assert result.norm < 1.0
    assert 1 <= result.iterations <= 200
    assert _residual(DOMINANT, result.solution, DOMINANT_B) < 1e-6


def test_simple_iteration_agrees_with_gauss():
    result = simple_iteration(DOMINANT, DOMINANT_B, 1e-10, 500)
    upper, reduced = forward_elimination(DOMINANT, DOMINANT_B)
    exact = solve_upper_triangular(upper, reduced)
    assert all(abs(a - b) < 1e-8 for a, b in zip(result.solution, exact))


def test_simple_iteration_runs_out_of_iterations():
    result = simple_iteration(DOMINANT, DOMINANT_B, 1e-12, 1)
    assert result.converged is False
    assert result.solution is None
    assert result.iterations == 1


def test_simple_iteration_zero_diagonal_raises():
    with pytest.raises(SingularMatrixError):
        simple_iteration([[0.0, 1.0], [1.0, 2.0]], [1.0, 1.0])


def test_main_reports_both_methods(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Gaussian elimination:" in out
    assert "NOT diagonally dominant" in out
    assert out.count("x1 = ") == 2