""" Cost functions measuring the error between network output and labels

The derivative of each cost is taken with respect to the network output,
which seeds the chain rule in backpropagation.
"""
from collections import namedtuple

import numpy

from ffnn.core.exception import InvalidConfiguration


# Outputs are clipped into [EPSILON, 1-EPSILON] for the logarithms
EPSILON = 1e-12


class CostFunction(namedtuple('CostFunction', ['name', 'cost', 'derivative'])):
    """ A differentiable cost function

    :code:`cost(actual, target)` returns a scalar and
    :code:`derivative(actual, target)` returns the gradient of the cost
    with respect to :code:`actual`.
    """
    __slots__ = ()

    def __call__(self, actual, target):
        return self.cost(actual, target)


def _mean_squared(actual, target):
    diff = numpy.asarray(actual) - numpy.asarray(target)
    return 0.5 * numpy.dot(diff, diff) / diff.shape[0]


def _mean_squared_derivative(actual, target):
    diff = numpy.asarray(actual) - numpy.asarray(target)
    return diff / diff.shape[0]


def _cross_entropy(actual, target):
    a = numpy.clip(actual, EPSILON, 1.0 - EPSILON)
    t = numpy.asarray(target)
    return -numpy.mean(t * numpy.log(a) + (1.0 - t) * numpy.log(1.0 - a))


def _cross_entropy_derivative(actual, target):
    a = numpy.clip(actual, EPSILON, 1.0 - EPSILON)
    t = numpy.asarray(target)
    return (a - t) / (a * (1.0 - a) * a.shape[0])


mean_squared = CostFunction(
    name='mean_squared', cost=_mean_squared,
    derivative=_mean_squared_derivative)

cross_entropy = CostFunction(
    name='cross_entropy', cost=_cross_entropy,
    derivative=_cross_entropy_derivative)


COST_FUNCTIONS = {
    cost.name: cost for cost in (mean_squared, cross_entropy)
}


def get_cost(cost):
    """ Resolve a built-in cost by name, or validate a
    :class:`CostFunction` instance
    """
    if isinstance(cost, CostFunction):
        if not (callable(cost.cost) and callable(cost.derivative)):
            msg = "Cost `{}` must have callable cost and derivative"
            raise InvalidConfiguration(msg.format(cost.name))
        return cost

    if isinstance(cost, str):
        try:
            return COST_FUNCTIONS[cost]
        except KeyError:
            msg = "Unknown cost `{}`; choose from {}"
            raise InvalidConfiguration(
                msg.format(cost, sorted(COST_FUNCTIONS)))

    msg = "Cost ({!r}) should be a CostFunction or a name"
    raise InvalidConfiguration(msg.format(cost))
