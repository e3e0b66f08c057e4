from collections import namedtuple
import logging
import time

from shallownet.network.neural_network import NeuralNetwork


logger = logging.getLogger(__name__)


ExperimentResult = namedtuple(
    'ExperimentResult', ['accuracy', 'elapsed', 'network'])


def run_experiment(provider, settings, random_state=None, on_epoch=None):
    """ Load data, train a network, and report its accuracy on the
    testing data

    Parameters
    ----------
    provider: DataProviderBase
        Supplies the training and testing datasets. Any
        :class:`shallownet.core.exception.DataLoadFailure` it raises is
        propagated unchanged.

    settings: NetworkSettings

    random_state: numpy.random.RandomState, default=None
        Provide for reproducible results

    on_epoch: callable or list of callables, default=None
        Passed to :meth:`NeuralNetwork.train`

    Returns
    -------
    result: ExperimentResult
        `elapsed` is the training wall time in seconds.

    """
    data = provider()

    network = NeuralNetwork(settings, random_state=random_state)

    start = time.perf_counter()
    network.train(
        data.training.features, data.training.labels, on_epoch=on_epoch)
    elapsed = time.perf_counter() - start

    network.log_parameters()

    acc = network.validate(data.testing.features, data.testing.labels)
    logger.info("Accuracy = {:0.4f}".format(acc))
    logger.info("Elapsed training time: {:.3f}s".format(elapsed))

    return ExperimentResult(accuracy=acc, elapsed=elapsed, network=network)
