from collections import namedtuple
import numbers

import numpy


_NetworkSettings = namedtuple(
    '_NetworkSettings',
    ['input_neurons', 'output_neurons', 'hidden_neurons',
     'epochs', 'learning_rate'])


class NetworkSettings(_NetworkSettings):
    """ Immutable description of the network topology and the training run

    Attributes
    ----------
    input_neurons: int
        Number of feature columns

    output_neurons: int
        Number of classes, i.e., one-hot label columns

    hidden_neurons: int
        Number of units in the hidden layer

    epochs: int
        Number of full-batch gradient descent steps

    learning_rate: float
        Multiplier applied to every parameter update

    """
    __slots__ = ()

    def __new__(cls, input_neurons, output_neurons, hidden_neurons,
                epochs, learning_rate):

        for name, value in (('input_neurons', input_neurons),
                            ('output_neurons', output_neurons),
                            ('hidden_neurons', hidden_neurons),
                            ('epochs', epochs)):
            if (isinstance(value, bool) or
                    not isinstance(value, numbers.Integral)):
                msg = "`{}` ({!r}) should be an integer"
                raise TypeError(msg.format(name, value))
            if value < 1:
                msg = "`{}` ({}) should be positive"
                raise ValueError(msg.format(name, value))

        try:
            learning_rate = float(learning_rate)
        except (ValueError, TypeError):
            msg = "`learning_rate` ({!r}) must be numeric"
            raise ValueError(msg.format(learning_rate))

        if not numpy.isfinite(learning_rate) or learning_rate <= 0:
            msg = "`learning_rate` ({}) should be positive and finite"
            raise ValueError(msg.format(learning_rate))

        return super().__new__(
            cls, int(input_neurons), int(output_neurons),
            int(hidden_neurons), int(epochs), learning_rate)

    @property
    def shapes(self):
        """ The shapes of (weights_hidden, biases_hidden, weights_out,
        biases_out) implied by these settings
        """
        return (
            (self.input_neurons, self.hidden_neurons),
            (1, self.hidden_neurons),
            (self.hidden_neurons, self.output_neurons),
            (1, self.output_neurons),
        )
