import math
from datetime import datetime, timedelta

import numpy as np
import pytest
from scipy.special import j0, y0

from bemkit.utilities import (
    Direction,
    affine_combination,
    basis_vector,
    cexp,
    compress,
    conjugate,
    distance,
    find_index,
    get_env_bool,
    get_env_int,
    hankel0_1,
    infty_error,
    intersect,
    invert_diagonal,
    join,
    l2_norm,
    linear_combination,
    max_vector_index,
    now,
    p_error,
    plane_wave,
    plot_function,
    product,
    reduce_matrices,
    remove,
    sqrt_diagonal,
    square_diagonal,
    stretch,
    tensorize,
    time_difference,
    transpose,
    vector_norm,
)


def test_hankel_matches_bessel_components():
    for z in range(1, 101):
        value = hankel0_1(float(z))
        assert value.real == pytest.approx(j0(z), rel=1e-5)
        assert value.imag == pytest.approx(y0(z), rel=1e-5)


def test_hankel_known_value():
    value = hankel0_1(1.0)
    assert value.real == pytest.approx(0.7651976866, rel=1e-8)
    assert value.imag == pytest.approx(0.0882569642, rel=1e-8)


def test_matrix_product_real():
    m1 = [[0.0, 1.0, 0.3], [1.0, -2.0, 3.0]]
    m2 = [[1.0, 1.0], [0.0, -0.5], [3.0, 0.0]]
    result = product(m1, m2)
    assert result[0, 0].real == pytest.approx(0.9, rel=1e-12)
    assert result[0, 1].real == pytest.approx(-0.5, rel=1e-12)
    assert result[1, 0].real == pytest.approx(10.0, rel=1e-12)
    assert result[1, 1].real == pytest.approx(2.0, rel=1e-12)


def test_matrix_product_complex():
    m1 = np.array([[1j, 1.0 - 0.3j, 0.3], [1.0, -2.0 + 0.5j, 3.0 - 2.0j]])
    m2 = np.array([[1.0, 1.0 + 0.5j], [1j, -0.5], [3.0 - 2.0j, 0.0]])
    np.testing.assert_allclose(product(m1, m2), m1 @ m2, rtol=1e-12)
    # element (0, 0): i*1 + (1-0.3i)*i + 0.3*(3-2i)
    assert product(m1, m2)[0, 0] == pytest.approx(1.2 + 1.4j)


def test_product_shape_mismatch():
    with pytest.raises(ValueError):
        product(np.ones((2, 3)), np.ones((2, 3)))


def test_cexp_real_and_complex():
    assert cexp(math.pi / 2) == pytest.approx(1j)
    assert cexp(complex(1.0, 0.0)) == pytest.approx(math.e)


def test_plane_wave_unit_modulus_and_value():
    wave = plane_wave(0.0, 2.0)
    assert abs(wave(0.3, 0.7)) == pytest.approx(1.0)
    assert wave(0.0, -math.pi / 4) == pytest.approx(1j)


def test_max_vector_index():
    assert max_vector_index([1, -5, 3j, 5]) == 1
    assert max_vector_index([0, 0]) == 0


def test_errors():
    a = np.array([[1.0, 2.0], [4.0, 8.0]])
    b = np.array([[1.0, 1.0], [4.0, 6.0]])
    assert infty_error(a, b) == pytest.approx(2.0)
    assert infty_error(a, b, True) == pytest.approx(0.5)
    assert p_error(a, b) == pytest.approx(math.sqrt(5.0))
    assert p_error(a, b, True) == pytest.approx(math.sqrt(5.0) / math.sqrt(85.0))


def test_conjugate():
    np.testing.assert_array_equal(conjugate([1 + 2j, -1j]), [1 - 2j, 1j])


def test_stretch_compress_round_trip():
    matrix = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=complex)
    flat = stretch(matrix)
    np.testing.assert_array_equal(flat[:3], [1, 4, 7])
    np.testing.assert_array_equal(compress(flat), matrix)


def test_compress_rejects_non_square_length():
    with pytest.raises(ValueError):
        compress([1, 2, 3])


def test_intersect_and_distance():
    assert intersect((0.0, 0.5), (0.25, 1.0)) == (0.25, 0.5)
    assert distance((0.0, 0.5), (0.25, 1.0)) == 0.0
    assert distance((0.0, 0.25), (0.75, 1.0)) == pytest.approx(0.5)


def test_get_env(monkeypatch):
    monkeypatch.delenv("BEMKIT_FLAG", raising=False)
    monkeypatch.delenv("BEMKIT_NUM", raising=False)
    assert get_env_bool("BEMKIT_FLAG") is False
    assert get_env_int("BEMKIT_NUM") == -1
    monkeypatch.setenv("BEMKIT_FLAG", "true")
    monkeypatch.setenv("BEMKIT_NUM", "42")
    assert get_env_bool("BEMKIT_FLAG") is True
    assert get_env_int("BEMKIT_NUM") == 42
    monkeypatch.setenv("BEMKIT_FLAG", "yes")
    assert get_env_bool("BEMKIT_FLAG") is False
    monkeypatch.setenv("BEMKIT_NUM", "abc")
    with pytest.raises(ValueError):
        get_env_int("BEMKIT_NUM")


def test_diagonal_operations_skip_zeros():
    diag = np.diag([4.0, 0.0, 0.25])
    np.testing.assert_allclose(np.diagonal(square_diagonal(diag)), [16, 0, 0.0625])
    np.testing.assert_allclose(np.diagonal(sqrt_diagonal(diag)), [2, 0, 0.5])
    np.testing.assert_allclose(np.diagonal(invert_diagonal(diag)), [0.25, 0, 4])
    assert diag[0, 0] == 4.0
    with pytest.raises(ValueError):
        invert_diagonal(np.ones((2, 3)))


def test_transpose_does_not_conjugate():
    matrix = np.array([[1j, 2], [3, 4]])
    np.testing.assert_array_equal(transpose(matrix), [[1j, 3], [2, 4]])


def test_time_difference():
    start = datetime(2020, 1, 1)
    assert time_difference(start, start + timedelta(seconds=1.5)) == 1500
    earlier = now()
    assert time_difference(earlier, now()) >= 0


@pytest.mark.parametrize(
    "point, direction, expected",
    [
        (0.3, Direction.LEFT, 1),
        (0.5, Direction.LEFT, 1),
        (0.5, Direction.RIGHT, 2),
        (0.25, Direction.LEFT, 0),
        (0.25, Direction.RIGHT, 1),
        (1.0, Direction.RIGHT, 3),
        (0.0, Direction.RIGHT, 0),
    ],
)
def test_find_index(point, direction, expected):
    assert find_index([0.0, 0.25, 0.5, 0.75, 1.0], point, direction) == expected


def test_basis_vector():
    assert basis_vector(1, 3) == [0, 1, 0]
    with pytest.raises(IndexError):
        basis_vector(3, 3)


def test_l2_norm_of_constant():
    assert l2_norm(lambda t: 2.0) == pytest.approx(2.0)


def test_join_and_remove():
    a = [(0.0, "a"), (1.0, "b")]
    b = [(1.0, "x"), (2.0, "c")]
    assert join(a, b) == [(0.0, "a"), (1.0, "b"), (2.0, "c")]
    assert remove(a, b) == [(2.0, "c")]
    with pytest.raises(ValueError):
        join([(0.0, 1), (0.0, 2)], [])


def test_plot_function(tmp_path):
    path = plot_function(tmp_path / "curve", lambda t: complex(1.0, t))
    lines = path.read_text().splitlines()
    assert path.name == "curve.txt"
    assert len(lines) == 200
    assert lines[0] == "0 1 0"
    assert lines[1] == "0.005 1 0.005"


def test_tensorize_order():
    grid = tensorize([[1.0, 2.0], [10.0, 20.0, 30.0]])
    assert grid == [
        [1.0, 10.0], [2.0, 10.0],
        [1.0, 20.0], [2.0, 20.0],
        [1.0, 30.0], [2.0, 30.0],
    ]
    assert tensorize([]) == [[]]


def test_reduce_matrices():
    basis = np.array([[1.0], [1j]])
    matrix = np.array([[2.0, 0.0], [0.0, 3.0]])
    (reduced,) = reduce_matrices([matrix], basis)
    assert reduced.shape == (1, 1)
    assert reduced[0, 0] == pytest.approx(5.0)


def test_combinations():
    assert affine_combination([1.0, 2.0, 3.0], [10.0, 100.0]) == pytest.approx(321.0)
    assert linear_combination([2.0, 3.0], [10.0, 100.0]) == pytest.approx(320.0)
    with pytest.raises(ValueError):
        affine_combination([1.0], [1.0])
    with pytest.raises(ValueError):
        linear_combination([1.0, 2.0], [1.0])


def test_vector_norm():
    assert vector_norm([3.0, 4j]) == pytest.approx(5.0)
    with pytest.raises(ValueError):
        vector_norm([])