from collections import namedtuple
import numbers

from .exception import InvalidStructure


class Structure(namedtuple('Structure', ['inputs', 'hidden', 'outputs'])):
    """ The layer sizes of a three layer network

    Parameters
    ----------
    inputs: int
        Number of input units.

    hidden: int
        Number of hidden units.

    outputs: int
        Number of output units.

    """
    __slots__ = ()

    def __new__(cls, inputs, hidden, outputs):
        for name, value in zip(cls._fields, (inputs, hidden, outputs)):
            if (isinstance(value, bool) or
                    not isinstance(value, numbers.Integral)):
                msg = "`{}` ({!r}) should be an integer"
                raise InvalidStructure(msg.format(name, value))
            if value <= 0:
                msg = "`{}` ({}) should be greater than zero"
                raise InvalidStructure(msg.format(name, value))

        return super().__new__(cls, int(inputs), int(hidden), int(outputs))

    @property
    def input_to_hidden_shape(self):
        # The extra column holds the bias weights
        return (self.hidden, self.inputs + 1)

    @property
    def hidden_to_output_shape(self):
        return (self.outputs, self.hidden + 1)

    @property
    def n_weights(self):
        """ The total number of parameters, bias weights included
        """
        return (self.hidden * (self.inputs + 1) +
                self.outputs * (self.hidden + 1))
