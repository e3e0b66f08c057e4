""" This module provides a few simple `on_epoch` functions that can be
passed to :meth:`shallownet.NeuralNetwork.train`. They observe the
training run and never modify the network.
"""
import logging

import numpy

from shallownet.network.evaluation import mean_squared_error


logger = logging.getLogger(__name__)


def collect_losses(labels, loss_list, loss_func=mean_squared_error):
    """ Collects the loss of each epoch's output. Losses are appended to
    :code:`loss_list` and so an empty list should be provided. Usage::

        losses = []
        network.train(features, labels,
                      on_epoch=collect_losses(labels, losses))
    """

    def on_epoch(epoch, network, output):
        loss_list.append(loss_func(output, labels))

    return on_epoch


def warn_on_nonfinite():
    """ Logs a single warning the first time an epoch's output contains
    NaN or infinite values
    """
    warned = []

    def on_epoch(epoch, network, output):
        if not warned and not numpy.isfinite(output).all():
            msg = "Non-finite network output encountered at epoch {}"
            logger.warning(msg.format(epoch))
            warned.append(epoch)

    return on_epoch
