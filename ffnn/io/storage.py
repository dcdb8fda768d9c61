""" Persistence of networks in hdf5 format

The layout of a saved network, assuming `hf` is an h5py `File`, is::

    hf
    |_ weights  (float64, shape=(n_weights,), order of `all_weights`)
    |_ attrs
       |_ format_version
       |_ inputs, hidden, outputs
       |_ hidden_activation, output_activation, cost
       |_ learning_rate, momentum

Both filenames and binary file objects (e.g., `io.BytesIO`) are accepted.
"""
import io
import logging

import h5py
import numpy

from ffnn.core.configuration import Configuration
from ffnn.core.exception import (
    CorruptData, InvalidConfiguration, InvalidStructure)
from ffnn.core.neural_net import NeuralNet
from ffnn.core.structure import Structure
from ffnn.functions.activation import ACTIVATION_FUNCTIONS
from ffnn.functions.cost import COST_FUNCTIONS


logger = logging.getLogger(__name__)


FORMAT_VERSION = 1

WEIGHTS_KEY = 'weights'
STRUCTURE_KEYS = ('inputs', 'hidden', 'outputs')
FUNCTION_KEYS = ('hidden_activation', 'output_activation', 'cost')
HYPERPARAMETER_KEYS = ('learning_rate', 'momentum')


def save(net, file):
    """ Write `net` to `file`, a filename or writable binary file object
    """
    config = net.configuration

    for activation in (config.hidden_activation, config.output_activation):
        if ACTIVATION_FUNCTIONS.get(activation.name) is not activation:
            msg = ("Saving custom activation `{}` by name; supply the "
                   "configuration when loading")
            logger.warning(msg.format(activation.name))

    if COST_FUNCTIONS.get(config.cost.name) is not config.cost:
        msg = ("Saving custom cost `{}` by name; supply the "
               "configuration when loading")
        logger.warning(msg.format(config.cost.name))

    with h5py.File(file, mode='w') as hf:
        hf.attrs['format_version'] = FORMAT_VERSION

        for key, value in zip(STRUCTURE_KEYS, net.structure):
            hf.attrs[key] = value

        hf.attrs['hidden_activation'] = config.hidden_activation.name
        hf.attrs['output_activation'] = config.output_activation.name
        hf.attrs['cost'] = config.cost.name
        hf.attrs['learning_rate'] = config.learning_rate
        hf.attrs['momentum'] = config.momentum

        hf.create_dataset(WEIGHTS_KEY, data=net.all_weights())


def _read_attr(hf, key):
    try:
        value = hf.attrs[key]
    except KeyError:
        msg = "Missing attribute `{}`"
        raise CorruptData(msg.format(key))

    if isinstance(value, bytes):
        value = value.decode('utf-8')

    return value


def _read_configuration(hf):
    names = {key: str(_read_attr(hf, key)) for key in FUNCTION_KEYS}

    for key in FUNCTION_KEYS[:2]:
        if names[key] not in ACTIVATION_FUNCTIONS:
            msg = ("Stored {} `{}` is not a built-in activation; "
                   "a configuration must be supplied")
            raise CorruptData(msg.format(key, names[key]))

    if names['cost'] not in COST_FUNCTIONS:
        msg = ("Stored cost `{}` is not a built-in cost; "
               "a configuration must be supplied")
        raise CorruptData(msg.format(names['cost']))

    try:
        return Configuration(
            hidden_activation=names['hidden_activation'],
            output_activation=names['output_activation'],
            cost=names['cost'],
            learning_rate=float(_read_attr(hf, 'learning_rate')),
            momentum=float(_read_attr(hf, 'momentum')))
    except InvalidConfiguration as e:
        raise CorruptData("Invalid stored configuration: {}".format(e)) from e


def load(file, configuration=None, random_state=None):
    """ Read a network written by :func:`save`

    Parameters
    ----------
    file: str or binary file object
        The saved network.

    configuration: Configuration, default=None
        Overrides the stored configuration. Required when the network was
        saved with custom activation or cost functions.

    random_state: numpy.random.RandomState, default=None
        Passed to the network for later calls to `randomize_weights`.

    """
    with h5py.File(file, mode='r') as hf:
        try:
            structure = Structure(
                *[int(_read_attr(hf, key)) for key in STRUCTURE_KEYS])
        except (InvalidStructure, TypeError, ValueError) as e:
            raise CorruptData("Invalid stored dimensions: {}".format(e)) from e

        if WEIGHTS_KEY not in hf:
            msg = "Missing `{}` dataset"
            raise CorruptData(msg.format(WEIGHTS_KEY))

        weights = numpy.array(hf[WEIGHTS_KEY][...], dtype=float)

        if configuration is None:
            configuration = _read_configuration(hf)

    if weights.ndim != 1 or weights.shape[0] != structure.n_weights:
        msg = ("Stored dimensions {} imply {} weights but the payload has "
               "shape {}")
        raise CorruptData(
            msg.format(tuple(structure), structure.n_weights, weights.shape))

    return NeuralNet(structure, configuration=configuration,
                     random_state=random_state, weights=weights)


def to_bytes(net):
    """ Serialize `net` to an in-memory hdf5 image
    """
    buffer = io.BytesIO()
    save(net, buffer)
    return buffer.getvalue()


def from_bytes(data, configuration=None, random_state=None):
    """ Inverse of :func:`to_bytes`
    """
    return load(io.BytesIO(data), configuration=configuration,
                random_state=random_state)
