from collections import namedtuple
import logging

import numpy
from sklearn.model_selection import train_test_split

from .exception import DatasetShapeMismatch
from .structure import Structure


logger = logging.getLogger(__name__)


TRAINING_DATASET_KEY = 'training'
VALIDATION_DATASET_KEY = 'validation'
DATASET_KEYS = (
    TRAINING_DATASET_KEY,
    VALIDATION_DATASET_KEY,
)


# Yielded by the dataset example generators
DatasetExample = namedtuple('DatasetExample', ['index', 'input', 'label'])


def _as_matrix(vectors, width, collection):
    """ Convert a sequence of vectors to a read-only float matrix, raising
    a `DatasetShapeMismatch` naming the first offending vector
    """
    vectors = list(vectors)

    for index, vector in enumerate(vectors):
        ndim = numpy.ndim(vector)
        if ndim != 1:
            msg = "{}[{}] has {} dimension(s) but should be a 1d vector"
            raise DatasetShapeMismatch(msg.format(collection, index, ndim))

        length = numpy.size(vector)
        if length != width:
            msg = "{}[{}] has length {} but should have length {}"
            raise DatasetShapeMismatch(
                msg.format(collection, index, length, width))

    matrix = numpy.array(vectors, dtype=float).reshape(len(vectors), width)
    matrix.flags.writeable = False

    return matrix


class Dataset:
    """ Paired training and validation examples checked against a
    :class:`Structure`
    """

    def __init__(self, structure, training_inputs, training_labels,
                 validation_inputs, validation_labels):
        """
        Parameters
        ----------
        structure: Structure
            The network shape the examples must fit.

        training_inputs, training_labels: sequence of float vectors
            Training examples and their respective labels. Inputs must have
            length `structure.inputs` and labels `structure.outputs`.

        validation_inputs, validation_labels: sequence of float vectors
            The validation dataset analogues to `training_inputs` and
            `training_labels`.

        """
        if not isinstance(structure, Structure):
            msg = "`structure` ({}) not instance of Structure"
            raise TypeError(msg.format(type(structure)))

        self.structure = structure

        self._inputs = {}
        self._labels = {}

        splits = (
            (TRAINING_DATASET_KEY, training_inputs, training_labels),
            (VALIDATION_DATASET_KEY, validation_inputs, validation_labels),
        )

        # Validate everything before storing anything
        for dataset_key, inputs, labels in splits:
            inputs = _as_matrix(
                inputs, structure.inputs, dataset_key + '_inputs')
            labels = _as_matrix(
                labels, structure.outputs, dataset_key + '_labels')

            if len(inputs) != len(labels):
                msg = ("Mismatch in number of {} examples: "
                       "inputs ({}), labels ({})")
                raise DatasetShapeMismatch(
                    msg.format(dataset_key, len(inputs), len(labels)))

            if len(inputs) == 0:
                msg = "The {} dataset has no examples"
                raise DatasetShapeMismatch(msg.format(dataset_key))

            self._inputs[dataset_key] = inputs
            self._labels[dataset_key] = labels

    def __repr__(self):
        return "<Dataset n_training={}, n_validation={}>".format(
            self.n_training, self.n_validation)

    @classmethod
    def from_split(cls, structure, inputs, labels, validation_size=0.2,
                   random_state=None):
        """ Randomly partition a collection of examples into training and
        validation datasets

        Parameters
        ----------
        structure: Structure
            The network shape the examples must fit.

        inputs, labels: sequence of float vectors
            All of the examples and their respective labels.

        validation_size: float or int, default=0.2
            The fraction (or, if int, the number) of examples placed into
            the validation dataset.

        random_state: numpy.random.RandomState, default=None
            Provide for reproducible results.

        """
        if random_state is None:
            random_state = numpy.random.RandomState()
            msg = ("RandomState not provided; results will "
                   "not be reproducible")
            logger.warning(msg)
        elif not isinstance(random_state, numpy.random.RandomState):
            msg = "`random_state` ({}) not instance numpy.random.RandomState"
            raise TypeError(msg.format(type(random_state)))

        inputs = list(inputs)
        labels = list(labels)

        if len(inputs) != len(labels):
            msg = "Mismatch in number of examples: inputs ({}), labels ({})"
            raise DatasetShapeMismatch(msg.format(len(inputs), len(labels)))

        try:
            (training_inputs, validation_inputs,
             training_labels, validation_labels) = train_test_split(
                inputs, labels, test_size=validation_size,
                random_state=random_state)
        except ValueError as e:
            # Raised by sklearn when a split would be empty
            raise DatasetShapeMismatch(str(e)) from e

        return cls(structure,
                   training_inputs=training_inputs,
                   training_labels=training_labels,
                   validation_inputs=validation_inputs,
                   validation_labels=validation_labels)

    @property
    def training_inputs(self):
        return self._inputs[TRAINING_DATASET_KEY]

    @property
    def training_labels(self):
        return self._labels[TRAINING_DATASET_KEY]

    @property
    def validation_inputs(self):
        return self._inputs[VALIDATION_DATASET_KEY]

    @property
    def validation_labels(self):
        return self._labels[VALIDATION_DATASET_KEY]

    @property
    def n_training(self):
        return len(self.training_inputs)

    @property
    def n_validation(self):
        return len(self.validation_inputs)

    def iterate_examples(self, dataset_key):
        """ Iterates through the examples of one dataset, in order

        Parameters
        ----------
        dataset_key: str
            One of TRAINING_DATASET_KEY or VALIDATION_DATASET_KEY

        """
        if dataset_key not in DATASET_KEYS:
            msg = "`dataset_key` ({!r}) should be one of {}"
            raise ValueError(msg.format(dataset_key, DATASET_KEYS))

        inputs = self._inputs[dataset_key]
        labels = self._labels[dataset_key]

        for i in range(len(inputs)):
            yield DatasetExample(index=i, input=inputs[i], label=labels[i])

    def training_examples(self):
        return self.iterate_examples(TRAINING_DATASET_KEY)

    def validation_examples(self):
        return self.iterate_examples(VALIDATION_DATASET_KEY)
