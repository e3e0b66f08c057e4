# flake8: noqa

from .core.exception import DataLoadFailure, NotInitialized, ShapeMismatch
from .core.settings import NetworkSettings
from .data.provider import (
    ArrayDataProvider,
    CsvDataProvider,
    DataProviderBase,
    Dataset,
    TrainTestData,
)
from .network.neural_network import NeuralNetwork
from .network.parameters import NetworkParameters
from .run import ExperimentResult, run_experiment
