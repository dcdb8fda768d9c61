""" A fully connected three layer (input => hidden => output) network

For a single input vector, the computation chain is::

    hidden_pre = dot(input_to_hidden, [input; 1])
    hidden = hidden_activation(hidden_pre)
    output_pre = dot(hidden_to_output, [hidden; 1])
    output = output_activation(output_pre)

where the trailing 1 feeds the bias weights stored in the last column of
each weight matrix. Training is single example stochastic gradient descent
with momentum.
"""
import copy
import enum
import functools
import logging
import math
import numbers

import numpy

from .configuration import Configuration
from .dataset import Dataset
from .exception import (
    DatasetStructureMismatch, InputSizeMismatch, InvalidThreshold,
    LabelSizeMismatch, StaleState, WeightCountMismatch)
from .structure import Structure


logger = logging.getLogger(__name__)


class NetState(enum.Enum):
    """ READY: no cached activations usable by backpropagation.
    INFERRED: caches hold the activations of the most recent inference.
    """
    READY = 'ready'
    INFERRED = 'inferred'


def _requires_inference(method):
    """ Decorator for methods that consume the cached layer activations
    """
    @functools.wraps(method)
    def method_wrapped(self, *args, **kwargs):
        if self.state is not NetState.INFERRED:
            msg = ("No cached activations; `infer` must be called "
                   "before `{}`")
            raise StaleState(msg.format(method.__name__))

        return method(self, *args, **kwargs)

    return method_wrapped


def _with_bias(vector):
    return numpy.append(vector, 1.0)


class NeuralNet:

    def __init__(self, structure, configuration=None, random_state=None,
                 weights=None):
        """
        Parameters
        ----------
        structure: Structure
            The number of input, hidden, and output units.

        configuration: Configuration, default=None
            Activations, cost, and training hyperparameters. The default
            (None) uses `Configuration()`.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        weights: sequence of float, default=None
            Flat weights in the order produced by `all_weights`. If None,
            the weights are randomized.

        """
        if not isinstance(structure, Structure):
            msg = "`structure` ({}) not instance of Structure"
            raise TypeError(msg.format(type(structure)))

        if configuration is None:
            configuration = Configuration()
        elif not isinstance(configuration, Configuration):
            msg = "`configuration` ({}) not instance of Configuration"
            raise TypeError(msg.format(type(configuration)))

        self.structure = structure
        self.configuration = configuration
        self.rs = (numpy.random.RandomState()
                   if random_state is None else random_state)

        if weights is None:
            # This both initializes and randomizes.
            self.randomize_weights()
        else:
            self.set_weights(weights)

    def __repr__(self):
        return "<NeuralNet inputs={}, hidden={}, outputs={}>".format(
            *self.structure)

    def _reset(self):
        """ Zero the momentum buffers and drop cached activations
        """
        self._input_to_hidden_update = numpy.zeros(
            self.structure.input_to_hidden_shape)
        self._hidden_to_output_update = numpy.zeros(
            self.structure.hidden_to_output_shape)

        self._last_input = None
        self._last_hidden_pre = None
        self._last_hidden = None
        self._last_output_pre = None
        self._last_output = None

        self.state = NetState.READY

    def randomize_weights(self, scale=0.1):
        """
        Randomize the weights using IID Gaussian random variables
        scaled by `scale`. Momentum history is discarded.
        """
        self._input_to_hidden = scale * self.rs.randn(
            *self.structure.input_to_hidden_shape)
        self._hidden_to_output = scale * self.rs.randn(
            *self.structure.hidden_to_output_shape)
        self._reset()

    @property
    def input_to_hidden(self):
        """ Copy of the `(hidden, inputs+1)` weight matrix; bias last
        """
        return self._input_to_hidden.copy()

    @property
    def hidden_to_output(self):
        """ Copy of the `(outputs, hidden+1)` weight matrix; bias last
        """
        return self._hidden_to_output.copy()

    def all_weights(self):
        """
        Returns
        -------
        weights: ndarray, shape=(structure.n_weights,)
            Both weight matrices flattened row-major, `input_to_hidden`
            first, bias columns included.
        """
        return numpy.hstack([self._input_to_hidden.ravel(),
                             self._hidden_to_output.ravel()])

    def set_weights(self, weights):
        """
        Overwrite both weight matrices from a flat array in the order
        produced by `all_weights`. Momentum history and cached activations
        are discarded.
        """
        weights = numpy.asarray(weights, dtype=float)

        if weights.ndim != 1 or weights.shape[0] != self.structure.n_weights:
            msg = "Expected {} weights but got array of shape {}"
            raise WeightCountMismatch(
                msg.format(self.structure.n_weights, weights.shape))

        split = numpy.prod(self.structure.input_to_hidden_shape)

        self._input_to_hidden = weights[:split].reshape(
            self.structure.input_to_hidden_shape).copy()
        self._hidden_to_output = weights[split:].reshape(
            self.structure.hidden_to_output_shape).copy()
        self._reset()

    def _as_input(self, input):
        x = numpy.asarray(input, dtype=float)

        if x.ndim != 1 or x.shape[0] != self.structure.inputs:
            msg = "Input has shape {} but should have length {}"
            raise InputSizeMismatch(
                msg.format(x.shape, self.structure.inputs))

        return x

    def _as_labels(self, labels):
        t = numpy.asarray(labels, dtype=float)

        if t.ndim != 1 or t.shape[0] != self.structure.outputs:
            msg = "Labels have shape {} but should have length {}"
            raise LabelSizeMismatch(
                msg.format(t.shape, self.structure.outputs))

        return t

    def _forward(self, x):
        """ Returns the bias-extended input, hidden pre- and post-activations,
        and output pre- and post-activations. Nothing is cached.
        """
        hidden_activation = self.configuration.hidden_activation
        output_activation = self.configuration.output_activation

        x = _with_bias(x)
        hidden_pre = numpy.dot(self._input_to_hidden, x)
        hidden = numpy.asarray(hidden_activation(hidden_pre), dtype=float)

        output_pre = numpy.dot(self._hidden_to_output, _with_bias(hidden))
        output = numpy.asarray(output_activation(output_pre), dtype=float)

        return x, hidden_pre, hidden, output_pre, output

    def infer(self, input):
        """
        Parameters
        ----------
        input: sequence of float, length=structure.inputs

        Returns
        -------
        output: ndarray, shape=(structure.outputs,)
            The output layer activations. The intermediate layer values are
            cached for a following call to `backpropagate`.
        """
        x, hidden_pre, hidden, output_pre, output = self._forward(
            self._as_input(input))

        self._last_input = x
        self._last_hidden_pre = hidden_pre
        self._last_hidden = hidden
        self._last_output_pre = output_pre
        self._last_output = output
        self.state = NetState.INFERRED

        return output.copy()

    @_requires_inference
    def backpropagate(self, labels):
        """
        Update the weights by one step of gradient descent with momentum
        on the cost between the most recent inference and `labels`.

        Parameters
        ----------
        labels: sequence of float, length=structure.outputs
            The "correct" output values for the last inferred input.
        """
        t = self._as_labels(labels)

        config = self.configuration

        # Deltas are computed from the current weights before any update.
        output_delta = (
            numpy.asarray(config.cost.derivative(self._last_output, t)) *
            config.output_activation.derivative(self._last_output_pre))

        # Bias column excluded from the back-propagated sum
        hidden_delta = (
            numpy.dot(output_delta, self._hidden_to_output[:, :-1]) *
            config.hidden_activation.derivative(self._last_hidden_pre))

        self._hidden_to_output_update = (
            -config.learning_rate *
            numpy.outer(output_delta, _with_bias(self._last_hidden)) +
            config.momentum * self._hidden_to_output_update)

        self._input_to_hidden_update = (
            -config.learning_rate *
            numpy.outer(hidden_delta, self._last_input) +
            config.momentum * self._input_to_hidden_update)

        self._hidden_to_output += self._hidden_to_output_update
        self._input_to_hidden += self._input_to_hidden_update

        self.state = NetState.READY

    def average_cost(self, inputs, labels):
        """ The configured cost averaged over the (input, label) pairs

        The forward passes are not cached, so the state and any activations
        from a previous `infer` are left as they were.
        """
        inputs = [self._as_input(x) for x in inputs]
        labels = [self._as_labels(y) for y in labels]

        if len(inputs) != len(labels):
            msg = "Mismatch in number of examples: inputs ({}), labels ({})"
            raise ValueError(msg.format(len(inputs), len(labels)))

        if len(inputs) == 0:
            raise ValueError("Cannot average the cost over zero examples")

        cost = self.configuration.cost
        total = 0.0

        for x, y in zip(inputs, labels):
            output = self._forward(x)[-1]
            total += float(cost(output, y))

        return total / len(inputs)

    def train(self, dataset, error_threshold, max_epochs=None, on_epoch=None):
        """
        Train until the average validation cost drops below
        `error_threshold`.

        Each epoch runs `infer` then `backpropagate` on every training
        example in order, followed by computing the average cost over the
        validation dataset.

        Parameters
        ----------
        dataset: Dataset
            Training and validation examples built for this net's structure.

        error_threshold: float
            Training stops once the average validation cost is below this
            positive value.

        max_epochs: int, default=None
            The maximum number of epochs. The default (None) trains until
            convergence with no limit, which never returns if the threshold
            is unreachable. When the limit is reached a warning is logged.

        on_epoch: callable or list of callables, default=None
            Called after each epoch with signature
            :code:`on_epoch(epoch, validation_cost)`.

        Returns
        -------
        costs: ndarray, shape=(n_epochs,)
            The average validation cost after each epoch.
        """
        ############################################################
        # Input validation
        if (isinstance(error_threshold, bool) or
                not isinstance(error_threshold, numbers.Real) or
                not math.isfinite(error_threshold) or error_threshold <= 0):
            msg = "`error_threshold` ({!r}) should be finite and positive"
            raise InvalidThreshold(msg.format(error_threshold))

        if not isinstance(dataset, Dataset):
            msg = "`dataset` ({}) not instance of Dataset"
            raise TypeError(msg.format(type(dataset)))

        if dataset.structure != self.structure:
            msg = "Dataset was built for {} but the network is {}"
            raise DatasetStructureMismatch(
                msg.format(dataset.structure, self.structure))

        if max_epochs is not None:
            if (isinstance(max_epochs, bool) or
                    not isinstance(max_epochs, numbers.Integral) or
                    max_epochs <= 0):
                msg = "`max_epochs` ({!r}) should be a positive integer"
                raise ValueError(msg.format(max_epochs))

        if on_epoch is None:
            on_epoch = []
        elif not isinstance(on_epoch, list):
            on_epoch = [on_epoch]

        if not all([callable(func) for func in on_epoch]):
            msg = "All on_epoch items must be callable"
            raise TypeError(msg)
        # End Input validation
        ############################################################

        costs = []
        epoch = 0

        while max_epochs is None or epoch < max_epochs:
            epoch += 1

            for example in dataset.training_examples():
                self.infer(example.input)
                self.backpropagate(example.label)

            cost = self.average_cost(dataset.validation_inputs,
                                     dataset.validation_labels)
            costs.append(cost)

            logger.debug("Epoch: {:04d}, validation cost: {:.7f}"
                         .format(epoch, cost))

            for func in on_epoch:
                func(epoch, cost)

            if cost < error_threshold:
                msg = "Converged after {} epoch(s) with validation cost {:.7f}"
                logger.info(msg.format(epoch, cost))
                break
        else:
            msg = ("Reached max_epochs ({}) without converging; "
                   "validation cost {:.7f} >= threshold {}")
            logger.warning(msg.format(max_epochs, costs[-1], error_threshold))

        return numpy.array(costs)

    def copy(self, random_state=None):
        """ An independent snapshot of this network, e.g., for use by
        another thread. Cached activations are not carried over.

        Parameters
        ----------
        random_state: numpy.random.RandomState, default=None
            The snapshot's RandomState. The default (None) gives the snapshot
            a copy of this network's RandomState, so both produce the same
            draws from `randomize_weights` afterwards.
        """
        if random_state is not None and not isinstance(
                random_state, numpy.random.RandomState):
            msg = "`random_state` ({}) not instance numpy.random.RandomState"
            raise TypeError(msg.format(type(random_state)))

        snapshot = copy.deepcopy(self)
        if random_state is not None:
            snapshot.rs = random_state
        snapshot._reset()
        return snapshot

    def save(self, file):
        """ Write the network to `file` (a filename or binary file object)
        """
        from ffnn.io.storage import save
        save(self, file)

    @staticmethod
    def load(file, configuration=None, random_state=None):
        """ Load a network written by `save`
        """
        from ffnn.io.storage import load
        return load(file, configuration=configuration,
                    random_state=random_state)
