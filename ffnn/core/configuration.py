import math
import numbers

from .exception import InvalidConfiguration
from ffnn.functions.activation import get_activation, sigmoid
from ffnn.functions.cost import get_cost, mean_squared


DEFAULT_LEARNING_RATE = 0.5
DEFAULT_MOMENTUM = 0.1


def _validate_finite(name, value):
    if (isinstance(value, bool) or
            not isinstance(value, numbers.Real) or
            not math.isfinite(value)):
        msg = "`{}` ({!r}) should be a finite number"
        raise InvalidConfiguration(msg.format(name, value))
    return float(value)


class Configuration:

    def __init__(self, hidden_activation=sigmoid, output_activation=sigmoid,
                 cost=mean_squared, learning_rate=DEFAULT_LEARNING_RATE,
                 momentum=DEFAULT_MOMENTUM):
        """
        Hyperparameters used both for inference and for training

        Parameters
        ----------
        hidden_activation: ActivationFunction or str, default=sigmoid
            Activation applied elementwise to the hidden layer. A string
            selects one of the built-in activations by name.

        output_activation: ActivationFunction or str, default=sigmoid
            Activation applied elementwise to the output layer.

        cost: CostFunction or str, default=mean_squared
            The error measure minimized during training.

        learning_rate: float, default=0.5
            Gradient descent step size. Can be changed between
            backpropagation steps.

        momentum: float, default=0.1
            Fraction of the previous weight update added to the current
            one. Can be changed between backpropagation steps.

        Note
        ----
        Only finiteness of `learning_rate` and `momentum` is enforced;
        values outside of [0, 1] are accepted.

        """
        self._hidden_activation = get_activation(hidden_activation)
        self._output_activation = get_activation(output_activation)
        self._cost = get_cost(cost)
        self._learning_rate = _validate_finite('learning_rate', learning_rate)
        self._momentum = _validate_finite('momentum', momentum)

    def __repr__(self):
        return ("<Configuration hidden_activation={}, output_activation={}, "
                "cost={}, learning_rate={}, momentum={}>").format(
                    self.hidden_activation.name, self.output_activation.name,
                    self.cost.name, self.learning_rate, self.momentum)

    @property
    def hidden_activation(self):
        return self._hidden_activation

    @property
    def output_activation(self):
        return self._output_activation

    @property
    def cost(self):
        return self._cost

    @property
    def learning_rate(self):
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value):
        self._learning_rate = _validate_finite('learning_rate', value)

    @property
    def momentum(self):
        return self._momentum

    @momentum.setter
    def momentum(self, value):
        self._momentum = _validate_finite('momentum', value)
