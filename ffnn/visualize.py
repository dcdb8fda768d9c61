import matplotlib.pyplot as plt
import numpy as np


def plot_training_history(
        costs, threshold=None, ax=None,
        line_kwargs=dict(c='b', ls='-', lw=2),
        threshold_kwargs=dict(c='r', ls='--', lw=1)):
    """ Plot the validation cost after each training epoch

    Parameters
    ----------
    costs: ndarray, shape=(n_epochs,)
        As returned by `NeuralNet.train`.

    threshold: float, default=None
        If given, the error threshold is drawn as a horizontal line.

    ax: matplotlib Axes, default=None
        The axis to draw on. The default creates a new figure.

    line_kwargs, threshold_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib Axes
    """
    costs = np.asarray(costs, dtype=float)

    if costs.ndim != 1:
        raise ValueError("`costs` must be 1d.")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(1, 1, 1)

    epochs = np.arange(1, costs.shape[0] + 1)
    ax.plot(epochs, costs, **line_kwargs)

    if threshold is not None:
        ax.axhline(threshold, **threshold_kwargs)

    if (costs > 0).all():
        ax.set_yscale('log')

    ax.set_xlabel('Epoch')
    ax.set_ylabel('Validation cost')

    return ax
