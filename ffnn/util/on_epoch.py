""" This module provides a few simple `on_epoch` functions that can be
used in the NeuralNet.train member function
"""
import logging


logger = logging.getLogger(__name__)


def collect_costs(cost_list):
    """ Collects the validation costs from the epochs. Costs are appended to
    :code:`cost_list` and so an empty list should be provided. Usage::

        costs = []
        net.train(dataset, 0.01, on_epoch=[collect_costs(costs), ...])
    """

    def on_epoch(epoch, cost):
        cost_list.append(cost)

    return on_epoch


def log_progress(every=1):
    """ Log the validation cost every `every` epochs
    """
    if every < 1:
        raise ValueError("`every` should be at least 1")

    def on_epoch(epoch, cost):
        if epoch % every == 0:
            logger.info("Epoch: {:04d}, validation cost: {:.7f}"
                        .format(epoch, cost))

    return on_epoch
