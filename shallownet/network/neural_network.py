"""
A single hidden layer neural network classifier.

    Input (R^n) => Hidden (R^h) => Output (R^k)

Both layers use the logistic sigmoid activation. The network is trained
by full-batch gradient descent on the squared error between the one-hot
labels and the network output, for a fixed number of epochs.

For a matrix of inputs X (examples by row), the computation chain is:

    H = sigmoid(dot(X, W) + b)
    O = sigmoid(dot(H, V) + c)

where W = weights_hidden, b = biases_hidden, V = weights_out and
c = biases_out.
"""
import logging

import numpy

from shallownet.core.exception import NotInitialized, ShapeMismatch
from shallownet.core.logger import progress_message
from shallownet.network.activation import (
    apply_elementwise, broadcast_add, column_sum, sigmoid, sigmoid_prime)
from shallownet.network.evaluation import accuracy
from shallownet.network.parameters import (
    PARAMETER_NAMES, initialize_parameters)


logger = logging.getLogger(__name__)

UNINITIALIZED = 'uninitialized'
INITIALIZED = 'initialized'
TRAINED = 'trained'


def feedforward(features, parameters):
    """ Run the forward pass

    Parameters
    ----------
    features: ndarray, shape=(nsamples, ninput)
        Each row of `features` is an observation.

    parameters: NetworkParameters

    Returns
    -------
    hidden_activations: ndarray, shape=(nsamples, nhidden)

    output: ndarray, shape=(nsamples, noutput)
    """
    hidden_preact = broadcast_add(
        numpy.dot(features, parameters.weights_hidden),
        parameters.biases_hidden)
    hidden_activations = apply_elementwise(hidden_preact, sigmoid)

    output_preact = broadcast_add(
        numpy.dot(hidden_activations, parameters.weights_out),
        parameters.biases_out)
    output = apply_elementwise(output_preact, sigmoid)

    return hidden_activations, output


def backpropagate(labels, hidden_activations, output, weights_out):
    """ Propagate the output error back through the network

    Returns
    -------
    deltas_output: ndarray, shape=(nsamples, noutput)

    deltas_hidden: ndarray, shape=(nsamples, nhidden)
    """
    # Target minus prediction
    error = labels - output

    # The derivatives are evaluated at the already-activated values.
    deltas_output = error * apply_elementwise(output, sigmoid_prime)

    errors_hidden = numpy.dot(deltas_output, weights_out.T)
    deltas_hidden = errors_hidden * apply_elementwise(
        hidden_activations, sigmoid_prime)

    return deltas_output, deltas_hidden


def update_parameters(parameters, features, hidden_activations,
                      deltas_output, deltas_hidden, learning_rate):
    """ Apply one additive gradient step to `parameters` in place """
    nabla_weights_out = numpy.dot(hidden_activations.T, deltas_output)
    parameters.weights_out += learning_rate * nabla_weights_out

    nabla_biases_out = column_sum(deltas_output)
    parameters.biases_out += learning_rate * nabla_biases_out

    nabla_weights_hidden = numpy.dot(features.T, deltas_hidden)
    parameters.weights_hidden += learning_rate * nabla_weights_hidden

    nabla_biases_hidden = column_sum(deltas_hidden)
    parameters.biases_hidden += learning_rate * nabla_biases_hidden


class NeuralNetwork:
    """ Single hidden layer sigmoid network trained by full-batch
    gradient descent
    """
    def __init__(self, settings, random_state=None, log_every=100):
        """
        Parameters
        ----------
        settings: NetworkSettings
            Topology and training run configuration.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        log_every: int, default=100
            A debug progress message is logged every `log_every` epochs.
        """
        self.settings = settings
        self.random_state = random_state
        self.log_every = log_every

        self._parameters = None
        self._state = UNINITIALIZED

    def __repr__(self):
        return "<NeuralNetwork ninput=%d, nhidden=%d, noutput=%d, %s>" % (
            self.settings.input_neurons, self.settings.hidden_neurons,
            self.settings.output_neurons, self._state)

    @property
    def state(self):
        return self._state

    @property
    def is_trained(self):
        return self._state == TRAINED

    @property
    def parameters(self):
        """ A copy of the trained parameters """
        self._check_trained()
        return self._parameters.copy()

    def _check_trained(self):
        if not self.is_trained or self._parameters is None:
            msg = "The network weights and biases must be initialized"
            raise NotInitialized(msg)

    def _validate_features(self, features):
        features = numpy.asarray(features, dtype=numpy.float64)

        if features.ndim != 2:
            msg = "`features` was ndim {} but should be 2"
            raise ShapeMismatch(msg.format(features.ndim))

        if features.shape[1] != self.settings.input_neurons:
            msg = "`features` has {} columns but the network has {} inputs"
            raise ShapeMismatch(msg.format(
                features.shape[1], self.settings.input_neurons))

        return features

    def _validate_labels(self, labels, nrows):
        labels = numpy.asarray(labels, dtype=numpy.float64)

        if labels.ndim != 2:
            msg = "`labels` was ndim {} but should be 2"
            raise ShapeMismatch(msg.format(labels.ndim))

        if labels.shape[0] != nrows:
            msg = "Mismatch in number of examples: features ({}), labels ({})"
            raise ShapeMismatch(msg.format(nrows, labels.shape[0]))

        if labels.shape[1] != self.settings.output_neurons:
            msg = "`labels` has {} columns but the network has {} outputs"
            raise ShapeMismatch(msg.format(
                labels.shape[1], self.settings.output_neurons))

        return labels

    def train(self, features, labels, on_epoch=None):
        """ Initialize the parameters randomly, then run `epochs`
        full-batch gradient descent steps

        Parameters
        ----------
        features: ndarray, shape=(nsamples, ninput)
            The training inputs -- examples by row.

        labels: ndarray, shape=(nsamples, noutput)
            One-hot encoded training classes.

        on_epoch: callable or list of callables, default=None
            Called after every epoch's update with signature::

                on_epoch(epoch, network, output)

            where `output` is the forward pass output of that epoch.

        Returns
        -------
        self: NeuralNetwork
        """
        features = self._validate_features(features)
        labels = self._validate_labels(labels, features.shape[0])

        if on_epoch is None:
            on_epoch = []
        elif callable(on_epoch):
            on_epoch = [on_epoch]

        epochs = self.settings.epochs
        learning_rate = self.settings.learning_rate

        # Re-training always starts from scratch
        self._state = UNINITIALIZED
        self._parameters = initialize_parameters(
            self.settings, random_state=self.random_state)
        self._state = INITIALIZED

        msg = "Training on {} examples for {} epochs (learning rate {})"
        logger.info(msg.format(features.shape[0], epochs, learning_rate))

        for epoch in range(epochs):
            hidden_activations, output = feedforward(
                features, self._parameters)

            deltas_output, deltas_hidden = backpropagate(
                labels, hidden_activations, output,
                self._parameters.weights_out)

            update_parameters(
                self._parameters, features, hidden_activations,
                deltas_output, deltas_hidden, learning_rate)

            for func in on_epoch:
                func(epoch, self, output)

            if self.log_every and (epoch + 1) % self.log_every == 0:
                logger.debug(progress_message("epochs", epoch + 1, epochs))

        self._state = TRAINED
        logger.info("Training finished")

        return self

    def predict(self, features):
        """
        Parameters
        ----------
        features: ndarray, shape=(nsamples, ninput)
            Each row of `features` is an observation.

        Returns
        -------
        output: ndarray, shape=(nsamples, noutput)
            Entries lie in (0, 1).
        """
        self._check_trained()
        features = self._validate_features(features)
        _, output = feedforward(features, self._parameters)
        return output

    def validate(self, features, labels):
        """ Classification accuracy of the trained network on the given
        test data

        Returns
        -------
        accuracy: float
            The fraction of test rows whose true class attains the row
            maximum of the network output.
        """
        self._check_trained()
        features = self._validate_features(features)
        labels = self._validate_labels(labels, features.shape[0])

        return accuracy(self.predict(features), labels)

    def format_parameters(self):
        """ A human readable rendering of the trained parameters """
        self._check_trained()

        blocks = []
        for name, param in zip(PARAMETER_NAMES, self._parameters):
            text = numpy.array2string(param, prefix=' ')
            blocks.append("{} =\n {}".format(name, text))

        return "\n\n".join(blocks)

    def log_parameters(self, level=logging.INFO):
        logger.log(level, "\n" + self.format_parameters())
