""" Activation functions applied elementwise to the hidden and output layers

Each function is an :class:`ActivationFunction` value carrying the forward
map together with its derivative. The derivative is evaluated at the
pre-activation value, i.e., for :code:`y = f(x)` the derivative function
returns :code:`dy/dx` at :code:`x`.

Custom activations are created the same way as the built-ins::

    softplus = ActivationFunction(
        name='softplus',
        function=lambda x: numpy.log1p(numpy.exp(x)),
        derivative=scipy.special.expit)
"""
from collections import namedtuple

import numpy
from scipy.special import expit

from ffnn.core.exception import InvalidConfiguration


class ActivationFunction(
        namedtuple('ActivationFunction', ['name', 'function', 'derivative'])):
    """ A differentiable elementwise activation function
    """
    __slots__ = ()

    def __call__(self, x):
        return self.function(x)


def _identity(x):
    return numpy.array(x, dtype=float)


def _identity_derivative(x):
    return numpy.ones_like(x, dtype=float)


def _sigmoid_derivative(x):
    y = expit(x)
    return y * (1.0 - y)


def _rational_sigmoid(x):
    return x / (1.0 + numpy.abs(x))


def _rational_sigmoid_derivative(x):
    return 1.0 / (1.0 + numpy.abs(x))**2


def _relu(x):
    return numpy.maximum(x, 0.0)


def _relu_derivative(x):
    return (numpy.asarray(x) > 0).astype(float)


def _tanh_derivative(x):
    return 1.0 - numpy.tanh(x)**2


identity = ActivationFunction(
    name='identity', function=_identity, derivative=_identity_derivative)

sigmoid = ActivationFunction(
    name='sigmoid', function=expit, derivative=_sigmoid_derivative)

rational_sigmoid = ActivationFunction(
    name='rational_sigmoid', function=_rational_sigmoid,
    derivative=_rational_sigmoid_derivative)

relu = ActivationFunction(
    name='relu', function=_relu, derivative=_relu_derivative)

hyperbolic_tangent = ActivationFunction(
    name='hyperbolic_tangent', function=numpy.tanh,
    derivative=_tanh_derivative)


ACTIVATION_FUNCTIONS = {
    activation.name: activation
    for activation in (
        identity, sigmoid, rational_sigmoid, relu, hyperbolic_tangent)
}


def get_activation(activation):
    """ Resolve a built-in activation by name, or validate an
    :class:`ActivationFunction` instance
    """
    if isinstance(activation, ActivationFunction):
        if not (callable(activation.function) and
                callable(activation.derivative)):
            msg = "Activation `{}` must have callable function and derivative"
            raise InvalidConfiguration(msg.format(activation.name))
        return activation

    if isinstance(activation, str):
        try:
            return ACTIVATION_FUNCTIONS[activation]
        except KeyError:
            msg = "Unknown activation `{}`; choose from {}"
            raise InvalidConfiguration(
                msg.format(activation, sorted(ACTIVATION_FUNCTIONS)))

    msg = "Activation ({!r}) should be an ActivationFunction or a name"
    raise InvalidConfiguration(msg.format(activation))
