# flake8: noqa

from ._version import version as __version__

from .core.configuration import Configuration
from .core.dataset import Dataset, DatasetExample
from .core.exception import (
    CorruptData,
    DatasetShapeMismatch,
    DatasetStructureMismatch,
    InputSizeMismatch,
    InvalidConfiguration,
    InvalidStructure,
    InvalidThreshold,
    LabelSizeMismatch,
    NeuralNetError,
    StaleState,
    WeightCountMismatch,
)
from .core.neural_net import NeuralNet, NetState
from .core.structure import Structure
from .functions import activation, cost
