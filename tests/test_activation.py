import numpy as np
import pytest

from talawa.activation import Activation
from talawa.matrix import Matrix, MatrixError


def _sample(rows: int = 3, cols: int = 5, seed: int = 3) -> Matrix:
    rng = np.random.default_rng(seed)
    m = Matrix.random(rows, cols, rng)
    return m * 6.0 - Matrix.ones(rows, cols) * 3.0


def test_linear_is_identity():
    z = _sample()
    assert Activation.LINEAR.apply(z) == z


def test_relu_is_nonnegative_and_keeps_positives():
    z = _sample()
    out = Activation.RELU.apply(z).to_numpy()
    src = z.to_numpy()
    assert (out >= 0).all()
    assert np.array_equal(out[src > 0], src[src > 0])
    assert (out[src <= 0] == 0).all()


def test_sigmoid_is_symmetric():
    z = _sample()
    pos = Activation.SIGMOID.apply(z).to_numpy()
    neg = Activation.SIGMOID.apply(z * -1.0).to_numpy()
    np.testing.assert_allclose(pos + neg, np.ones_like(pos), atol=1e-6)
    assert ((pos > 0) & (pos < 1)).all()


def test_tanh_is_odd_and_bounded():
    z = _sample()
    pos = Activation.TANH.apply(z).to_numpy()
    neg = Activation.TANH.apply(z * -1.0).to_numpy()
    np.testing.assert_allclose(pos, -neg, atol=1e-6)
    assert (np.abs(pos) < 1).all()


def test_softmax_rows_sum_to_one():
    out = Activation.SOFTMAX.apply(_sample(4, 7)).to_numpy()
    np.testing.assert_allclose(out.sum(axis=1), np.ones(4), atol=1e-5)
    assert (out > 0).all()


def test_softmax_clips_extreme_probabilities():
    z = Matrix.from_rows([[0.0, 200.0]])
    out = Activation.SOFTMAX.apply(z)
    assert out[0, 0] == pytest.approx(1e-7, rel=1e-3)
    assert out[0, 1] == pytest.approx(1.0 - 1e-7, abs=1e-7)


def test_log_softmax_apply_raises():
    with pytest.raises(ValueError, match="Log-Softmax"):
        Activation.LOG_SOFTMAX.apply(_sample())


def test_linear_backprop_passes_gradient_through():
    z = _sample()
    grads = _sample(seed=9)
    assert Activation.LINEAR.backprop(Activation.LINEAR.apply(z), grads) == grads


@pytest.mark.parametrize("kind", [Activation.RELU, Activation.SIGMOID, Activation.TANH])
def test_backprop_with_unit_gradient_matches_derivative(kind):
    z = _sample()
    a = kind.apply(z)
    ones = Matrix.ones(z.rows, z.cols)
    np.testing.assert_allclose(
        kind.backprop(a, ones).to_numpy(), kind.derivative(z).to_numpy(), atol=1e-5
    )


@pytest.mark.parametrize("kind", [Activation.SIGMOID, Activation.TANH])
def test_derivative_matches_finite_difference(kind):
    z = _sample(2, 3)
    h = 1e-2
    up = kind.apply(z + Matrix.ones(2, 3) * h).to_numpy()
    down = kind.apply(z - Matrix.ones(2, 3) * h).to_numpy()
    numeric = (up - down) / (2 * h)
    np.testing.assert_allclose(kind.derivative(z).to_numpy(), numeric, atol=1e-3)


def test_softmax_backprop_rows_sum_to_zero():
    a = Activation.SOFTMAX.apply(_sample(3, 6))
    grads = _sample(3, 6, seed=11)
    dz = Activation.SOFTMAX.backprop(a, grads).to_numpy()
    np.testing.assert_allclose(dz.sum(axis=1), np.zeros(3), atol=1e-5)


def test_softmax_backprop_of_uniform_gradient_vanishes():
    a = Activation.SOFTMAX.apply(_sample(2, 4))
    dz = Activation.SOFTMAX.backprop(a, Matrix.ones(2, 4) * 2.5).to_numpy()
    np.testing.assert_allclose(dz, np.zeros((2, 4)), atol=1e-5)


def test_backprop_shape_mismatch_raises():
    with pytest.raises(MatrixError):
        Activation.RELU.backprop(Matrix.ones(2, 2), Matrix.ones(2, 3))


def test_log_softmax_backprop_raises():
    with pytest.raises(ValueError, match="Backprop not defined"):
        Activation.LOG_SOFTMAX.backprop(Matrix.ones(1, 2), Matrix.ones(1, 2))


def test_linear_derivative_is_ones():
    assert Activation.LINEAR.derivative(_sample()) == Matrix.ones(3, 5)


@pytest.mark.parametrize("kind", [Activation.SOFTMAX, Activation.LOG_SOFTMAX])
def test_derivative_undefined_raises(kind):
    with pytest.raises(ValueError, match="Derivative not defined"):
        kind.derivative(_sample())


@pytest.mark.parametrize(
    "kind, name",
    [
        (Activation.LINEAR, "Linear"),
        (Activation.RELU, "ReLU"),
        (Activation.SIGMOID, "Sigmoid"),
        (Activation.TANH, "Tanh"),
        (Activation.SOFTMAX, "Softmax"),
        (Activation.LOG_SOFTMAX, "Unknown"),
    ],
)
def test_display_name(kind, name):
    assert kind.display_name() == name