import unittest

import numpy

from ffnn.core.exception import InvalidConfiguration
from ffnn.functions import activation


def numerical_derivative(func, x, eps=1e-6):
    return (func(x + eps) - func(x - eps)) / (2 * eps)


class TestActivation(unittest.TestCase):

    def setUp(self):
        # Keep away from zero where relu is not differentiable
        self.x = numpy.r_[-3.0, -1.2, -0.3, 0.4, 1.1, 2.5]

    def test_derivatives_match_finite_differences(self):
        for func in activation.ACTIVATION_FUNCTIONS.values():
            analytic = func.derivative(self.x)
            numeric = numerical_derivative(func, self.x)

            self.assertLess(numpy.abs(analytic - numeric).max(), 1e-6,
                            msg=func.name)

    def test_identity(self):
        numpy.testing.assert_array_equal(
            activation.identity(self.x), self.x)

    def test_sigmoid_values(self):
        y = activation.sigmoid(numpy.r_[0.0, 1000.0, -1000.0])
        numpy.testing.assert_allclose(y, [0.5, 1.0, 0.0])

    def test_relu(self):
        numpy.testing.assert_array_equal(
            activation.relu(numpy.r_[-2.0, 0.0, 3.0]), [0.0, 0.0, 3.0])
        numpy.testing.assert_array_equal(
            activation.relu.derivative(numpy.r_[-2.0, 0.0, 3.0]),
            [0.0, 0.0, 1.0])

    def test_rational_sigmoid_bounded(self):
        y = activation.rational_sigmoid(numpy.r_[-1e6, 0.0, 1e6])

        self.assertTrue((numpy.abs(y) < 1).all())
        self.assertEqual(y[1], 0.0)

    def test_get_activation(self):
        self.assertIs(activation.get_activation('relu'), activation.relu)
        self.assertIs(activation.get_activation(activation.sigmoid),
                      activation.sigmoid)

        with self.assertRaises(InvalidConfiguration):
            activation.get_activation('softmax')

        with self.assertRaises(InvalidConfiguration):
            activation.get_activation(42)
