"""Unit tests for hermitekit.interpolation.evaluate."""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from hermitekit.exceptions import InvalidInputError
from hermitekit.interpolation.divided_differences import (
    doubled_nodes,
    hermite_coefficients,
)
from hermitekit.interpolation.evaluate import (
    interpolate,
    newton_polynomial,
    newton_polynomial_derivative,
)


def test_cubic_hermite_of_sine_at_midpoint():
    """Tests the two-node cubic fit of sin on [0, pi/2] at pi/4."""
    x = [0.0, np.pi / 2]
    y = [0.0, 1.0]
    dy = [1.0, 0.0]

    _, values = interpolate(x, y, dy, [np.pi / 4])

    # Cubic Hermite error bound: max|f''''| / 4! * ((b - a) / 2)**4.
    bound = (np.pi / 4) ** 4 / 24
    assert abs(values[0] - np.sin(np.pi / 4)) <= bound
    assert values[0] == pytest.approx(np.sin(np.pi / 4), abs=2e-2)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_exact_for_polynomials_up_to_degree_2n_minus_1(n, rng):
    """Tests that polynomials of degree <= 2n-1 are reproduced everywhere."""
    x = np.linspace(-1.0, 1.0, n) + rng.uniform(-0.05, 0.05, size=n)
    poly = np.polynomial.Polynomial(rng.normal(size=2 * n))
    dpoly = poly.deriv()

    query = np.linspace(-1.2, 1.2, 31)
    _, values = interpolate(x, poly(x), dpoly(x), query)

    np.testing.assert_allclose(values, poly(query), rtol=1e-8, atol=1e-8)


def test_reproduces_values_and_derivatives_at_nodes():
    """Tests that the interpolant matches y and dy at every node."""
    x = np.array([0.0, 0.4, 1.0, 1.7])
    y = np.exp(-x) * np.sin(3 * x)
    dy = np.exp(-x) * (3 * np.cos(3 * x) - np.sin(3 * x))

    _, at_nodes = interpolate(x, y, dy, x)
    np.testing.assert_allclose(at_nodes, y, rtol=0, atol=1e-12)

    h = 1e-6
    _, plus = interpolate(x, y, dy, x + h)
    _, minus = interpolate(x, y, dy, x - h)
    np.testing.assert_allclose((plus - minus) / (2 * h), dy, atol=1e-6)


def test_empty_query_returns_empty_result():
    """Tests that an empty query gives an empty result rather than an error."""
    query, values = interpolate([0.0, 1.0], [0.0, 1.0], [1.0, 1.0], [])
    assert query.shape == (0,)
    assert values.shape == (0,)


def test_query_points_returned_unchanged():
    """Tests that the query points come back alongside the results."""
    query_in = [2.0, -1.0, 0.5, 0.5]
    query, values = interpolate([0.0, 1.0], [0.0, 1.0], [1.0, 1.0], query_in)

    np.testing.assert_array_equal(query, query_in)
    assert values.shape == query.shape


def test_results_follow_query_order():
    """Tests positional correspondence between query points and values."""
    x = np.array([0.0, 1.0, 2.0])
    q = np.array([1.5, 0.25, 1.75, 0.0])

    _, values = interpolate(x, x**2, 2 * x, q)
    _, reversed_values = interpolate(x, x**2, 2 * x, q[::-1])

    np.testing.assert_allclose(values, q**2, atol=1e-12)
    np.testing.assert_array_equal(values, reversed_values[::-1])


def test_build_error_propagates():
    """Tests that invalid samples raise from interpolate unchanged."""
    with pytest.raises(InvalidInputError, match="derivative data required"):
        interpolate([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], [0.0, 2.0], [0.5])


def test_accumulates_terms_left_to_right():
    """Tests bitwise agreement with a scalar left-to-right accumulation."""
    x = [0.0, 0.35, 0.9, 1.6]
    y = [1.0, 0.2, -0.7, 0.4]
    dy = [0.3, -1.0, 0.8, 2.0]
    coeffs = hermite_coefficients(x, y, dy)
    nodes = doubled_nodes(x)
    query = [-0.3, 0.1, 0.77, 1.2, 2.4]

    expected = []
    for q in query:
        basis = 1.0
        result = float(coeffs[0])
        for j in range(1, coeffs.size):
            basis = basis * (q - float(nodes[j - 1]))
            result = result + float(coeffs[j]) * basis
        expected.append(result)

    np.testing.assert_array_equal(newton_polynomial(coeffs, nodes, query), expected)


def test_newton_polynomial_preserves_query_shape():
    """Tests that 2D queries give 2D results and scalars give 0-d results."""
    coeffs = hermite_coefficients([0.0, 1.0], [0.0, 1.0], [0.0, 3.0])
    nodes = doubled_nodes([0.0, 1.0])
    grid = np.linspace(0.0, 1.0, 6).reshape(2, 3)

    assert newton_polynomial(coeffs, nodes, grid).shape == (2, 3)
    assert np.ndim(newton_polynomial(coeffs, nodes, 0.5)) == 0
    assert float(newton_polynomial(coeffs, nodes, 0.5)) == pytest.approx(0.125)


def test_newton_polynomial_derivative_of_cubic():
    """Tests the derivative pass on the Newton form of x**3."""
    coeffs = np.array([0.0, 0.0, 1.0, 1.0])
    nodes = np.array([0.0, 0.0, 1.0, 1.0])
    q = np.linspace(-1.0, 2.0, 7)

    np.testing.assert_allclose(
        newton_polynomial_derivative(coeffs, nodes, q), 3 * q**2, atol=1e-12
    )


def test_single_sample_is_tangent_line():
    """Tests that one sample interpolates as y0 + dy0 * (q - x0)."""
    _, values = interpolate([1.0], [2.0], [0.5], [0.0, 1.0, 3.0])
    np.testing.assert_allclose(values, [1.5, 2.0, 3.0])


def test_concurrent_calls_match_serial(extra_threads_ok):
    """Tests that independent calls from several threads give serial results."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads")

    cases = []
    for k in range(8):
        x = np.linspace(0.0, 1.0 + k, 4 + k % 3)
        cases.append((x, np.sin(x), np.cos(x), np.linspace(0.0, 1.0 + k, 11)))

    serial = [interpolate(*c)[1] for c in cases]
    with ThreadPoolExecutor(max_workers=4) as ex:
        threaded = list(ex.map(lambda c: interpolate(*c)[1], cases))

    for a, b in zip(serial, threaded):
        np.testing.assert_array_equal(a, b)
