import unittest

import numpy

from ffnn.core.configuration import Configuration
from ffnn.core.exception import InvalidConfiguration
from ffnn.functions import activation, cost


class TestConfiguration(unittest.TestCase):

    def test_defaults(self):
        config = Configuration()

        self.assertIs(config.hidden_activation, activation.sigmoid)
        self.assertIs(config.output_activation, activation.sigmoid)
        self.assertIs(config.cost, cost.mean_squared)
        self.assertEqual(config.learning_rate, 0.5)
        self.assertEqual(config.momentum, 0.1)

    def test_functions_by_name(self):
        config = Configuration(hidden_activation='hyperbolic_tangent',
                               output_activation='identity',
                               cost='cross_entropy')

        self.assertIs(config.hidden_activation, activation.hyperbolic_tangent)
        self.assertIs(config.output_activation, activation.identity)
        self.assertIs(config.cost, cost.cross_entropy)

    def test_unknown_function_names(self):
        with self.assertRaises(InvalidConfiguration):
            Configuration(hidden_activation='not an activation')

        with self.assertRaises(InvalidConfiguration):
            Configuration(cost='not a cost')

    def test_bad_function_types(self):
        with self.assertRaises(InvalidConfiguration):
            Configuration(hidden_activation=numpy.tanh)

        with self.assertRaises(InvalidConfiguration):
            Configuration(cost=None)

    def test_custom_activation(self):
        softsign = activation.ActivationFunction(
            name='softsign',
            function=lambda x: x / (1 + numpy.abs(x)),
            derivative=lambda x: 1 / (1 + numpy.abs(x))**2)

        config = Configuration(hidden_activation=softsign)
        self.assertIs(config.hidden_activation, softsign)

    def test_custom_activation_not_callable(self):
        broken = activation.ActivationFunction(
            name='broken', function=numpy.tanh, derivative=None)

        with self.assertRaises(InvalidConfiguration):
            Configuration(output_activation=broken)

    def test_non_finite_hyperparameters(self):
        for value in [numpy.nan, numpy.inf, -numpy.inf]:
            with self.assertRaises(InvalidConfiguration):
                Configuration(learning_rate=value)

            with self.assertRaises(InvalidConfiguration):
                Configuration(momentum=value)

    def test_non_numeric_hyperparameters(self):
        with self.assertRaises(InvalidConfiguration):
            Configuration(learning_rate='0.1')

        with self.assertRaises(InvalidConfiguration):
            Configuration(momentum=None)

    def test_out_of_range_hyperparameters_accepted(self):
        config = Configuration(learning_rate=3.0, momentum=-0.5)

        self.assertEqual(config.learning_rate, 3.0)
        self.assertEqual(config.momentum, -0.5)

    def test_mutable_hyperparameters(self):
        config = Configuration()

        config.learning_rate = 0.01
        config.momentum = 0.9

        self.assertEqual(config.learning_rate, 0.01)
        self.assertEqual(config.momentum, 0.9)

    def test_setter_rejects_non_finite(self):
        config = Configuration(learning_rate=0.25)

        with self.assertRaises(InvalidConfiguration):
            config.learning_rate = numpy.nan

        # The previous value is kept
        self.assertEqual(config.learning_rate, 0.25)

        with self.assertRaises(InvalidConfiguration):
            config.momentum = numpy.inf

    def test_functions_read_only(self):
        config = Configuration()

        with self.assertRaises(AttributeError):
            config.cost = cost.cross_entropy
