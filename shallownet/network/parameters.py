import logging

import numpy

from shallownet.core.exception import ShapeMismatch


logger = logging.getLogger(__name__)

PARAMETER_NAMES = (
    'weights_hidden', 'biases_hidden', 'weights_out', 'biases_out')


class NetworkParameters:
    """ The four trainable tensors of the network

    weights_hidden: ndarray, shape=(input_neurons, hidden_neurons)
        weights_hidden[i, j] = weight from input i to hidden unit j.

    biases_hidden: ndarray, shape=(1, hidden_neurons)
        Broadcast over the rows of the hidden preactivations.

    weights_out: ndarray, shape=(hidden_neurons, output_neurons)
        weights_out[j, k] = weight from hidden unit j to output unit k.

    biases_out: ndarray, shape=(1, output_neurons)
        Broadcast over the rows of the output preactivations.
    """
    def __init__(self, weights_hidden, biases_hidden,
                 weights_out, biases_out):
        self.weights_hidden = weights_hidden
        self.biases_hidden = biases_hidden
        self.weights_out = weights_out
        self.biases_out = biases_out

    def __repr__(self):
        return "<NetworkParameters ninput=%d, nhidden=%d, noutput=%d>" % (
            self.weights_hidden.shape[0], self.weights_hidden.shape[1],
            self.weights_out.shape[1])

    def __iter__(self):
        return iter(self.get_params())

    def get_params(self):
        """ Returns [weights_hidden, biases_hidden, weights_out, biases_out]
        """
        return [getattr(self, name) for name in PARAMETER_NAMES]

    def copy(self):
        """ A deep copy; mutating the copy never affects this instance """
        return NetworkParameters(*[p.copy() for p in self])

    def check_shapes(self, settings):
        """ Raise `ShapeMismatch` unless every tensor has the shape
        implied by `settings`
        """
        for name, param, shape in zip(PARAMETER_NAMES, self, settings.shapes):
            if param.shape != shape:
                msg = "`{}` was shape {} but should be {}"
                raise ShapeMismatch(msg.format(name, param.shape, shape))


def initialize_parameters(settings, random_state=None):
    """ Create parameters with every entry drawn independently and
    uniformly from [0, 1)

    Parameters
    ----------
    settings: NetworkSettings
        Determines the tensor shapes

    random_state: numpy.random.RandomState, default=None
        Provide for reproducible results

    Returns
    -------
    parameters: NetworkParameters

    """
    if random_state is None:
        random_state = numpy.random.RandomState()
        msg = ("RandomState not provided; results will "
               "not be reproducible")
        logger.warning(msg)
    elif not isinstance(random_state, numpy.random.RandomState):
        msg = "`random_state` ({}) not instance numpy.random.RandomState"
        raise TypeError(msg.format(type(random_state)))

    return NetworkParameters(*[
        random_state.random_sample(shape) for shape in settings.shapes
    ])
