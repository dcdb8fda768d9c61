class NeuralNetError(Exception):
    """ Base class for the errors raised by the network and its collaborators
    """


class InvalidStructure(NeuralNetError):
    """ Raised when a layer size is not a positive integer
    """


class InvalidConfiguration(NeuralNetError):
    """ Raised when a hyperparameter is not finite, or an activation or
    cost function cannot be resolved
    """


class InvalidThreshold(NeuralNetError):
    """ Raised when the training error threshold is not finite and positive
    """


class InputSizeMismatch(NeuralNetError):
    """ Raised when an input vector does not match the input layer size
    """


class LabelSizeMismatch(NeuralNetError):
    """ Raised when a label vector does not match the output layer size
    """


class WeightCountMismatch(NeuralNetError):
    """ Raised when a flat weight array has the wrong number of parameters
    """


class DatasetShapeMismatch(NeuralNetError):
    """ Raised when dataset collections disagree with each other or with
    the structure they are validated against
    """


class DatasetStructureMismatch(NeuralNetError):
    """ Raised when training with a dataset built for a different structure
    """


class StaleState(NeuralNetError):
    """ Raised when backpropagating without a fresh preceding inference
    """


class CorruptData(NeuralNetError):
    """ Raised when persisted network data is inconsistent or incomplete
    """
