# flake8: noqa

from .activation import sigmoid, sigmoid_prime
from .evaluation import accuracy, mean_squared_error
from .neural_network import NeuralNetwork
from .on_epoch import collect_losses, warn_on_nonfinite
from .parameters import NetworkParameters, initialize_parameters
