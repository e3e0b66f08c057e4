import abc
from collections import namedtuple
import logging
import os

import numpy

from shallownet.core.exception import DataLoadFailure, ShapeMismatch


logger = logging.getLogger(__name__)


TrainTestData = namedtuple('TrainTestData', ['training', 'testing'])


class Dataset(namedtuple('Dataset', ['features', 'labels'])):
    """ A read-only pair of feature and one-hot label matrices with the
    same number of rows
    """
    __slots__ = ()

    @classmethod
    def create(cls, features, labels):
        """ Validate and convert `features` and `labels` to read-only
        2d float arrays
        """
        features = numpy.array(features, dtype=numpy.float64)
        labels = numpy.array(labels, dtype=numpy.float64)

        if features.ndim != 2:
            msg = "`features` was ndim {} but should be 2"
            raise ShapeMismatch(msg.format(features.ndim))

        if labels.ndim != 2:
            msg = "`labels` was ndim {} but should be 2"
            raise ShapeMismatch(msg.format(labels.ndim))

        if features.shape[0] != labels.shape[0]:
            msg = "Mismatch in number of examples: features ({}), labels ({})"
            raise ShapeMismatch(
                msg.format(features.shape[0], labels.shape[0]))

        features.flags.writeable = False
        labels.flags.writeable = False

        return cls(features, labels)

    @property
    def n_examples(self):
        return self.features.shape[0]


def split_columns(data, n_features, n_labels):
    """ Split the 2d `data` into a Dataset whose first `n_features`
    columns are the features and last `n_labels` columns the labels
    """
    data = numpy.atleast_2d(data)

    if data.shape[1] != n_features + n_labels:
        msg = "Records have {} fields but should have {} ({} + {})"
        raise ShapeMismatch(msg.format(
            data.shape[1], n_features + n_labels, n_features, n_labels))

    return Dataset.create(
        features=data[:, :n_features], labels=data[:, n_features:])


def load_csv(filename, n_features, n_labels, delimiter=','):
    """ Load a comma separated file into a Dataset

    Parameters
    ----------
    filename: str
        The first row of the file is a header and is skipped. Every other
        row must contain exactly `n_features + n_labels` numeric fields.

    n_features: int
        Number of leading feature columns

    n_labels: int
        Number of trailing one-hot label columns

    Returns
    -------
    dataset: Dataset

    """
    if not os.path.exists(filename):
        msg = "Data file {} does not exist"
        raise DataLoadFailure(msg.format(filename))

    try:
        data = numpy.loadtxt(
            filename, delimiter=delimiter, skiprows=1,
            dtype=numpy.float64, ndmin=2)
    except ValueError as e:
        msg = "Could not parse {}: {}"
        raise DataLoadFailure(msg.format(filename, e)) from e

    if data.size == 0:
        msg = "Data file {} contains no records"
        raise DataLoadFailure(msg.format(filename))

    try:
        dataset = split_columns(data, n_features, n_labels)
    except ShapeMismatch as e:
        msg = "Bad records in {}: {}"
        raise DataLoadFailure(msg.format(filename, e)) from e

    msg = "Loaded {} examples from {}"
    logger.info(msg.format(dataset.n_examples, filename))

    return dataset


class DataProviderBase(abc.ABC):
    """ The abstract base class for training and testing data sources
    """

    def __init__(self, n_features, n_labels):
        """
        Parameters
        ----------
        n_features: int
            Number of feature columns every dataset must have

        n_labels: int
            Number of one-hot label columns every dataset must have
        """
        self.n_features = n_features
        self.n_labels = n_labels

    def __call__(self):
        """ The __call__ function handles validation of the datasets
        returned by the user-implemented `load` member function.
        """
        data = self.load()

        if not isinstance(data, TrainTestData):
            msg = "Returned data was type {} but should be TrainTestData"
            raise TypeError(msg.format(type(data)))

        for name, dataset in zip(data._fields, data):
            if dataset.features.shape[1] != self.n_features:
                msg = "{} features have {} columns but should have {}"
                raise ShapeMismatch(msg.format(
                    name, dataset.features.shape[1], self.n_features))

            if dataset.labels.shape[1] != self.n_labels:
                msg = "{} labels have {} columns but should have {}"
                raise ShapeMismatch(msg.format(
                    name, dataset.labels.shape[1], self.n_labels))

        return data

    @abc.abstractmethod
    def load(self):
        """ Returns a TrainTestData of two Datasets """
        raise NotImplementedError


class ArrayDataProvider(DataProviderBase):
    """ Provides data already held in memory """

    def __init__(self, train_features, train_labels,
                 test_features, test_labels):
        self.training = Dataset.create(train_features, train_labels)
        self.testing = Dataset.create(test_features, test_labels)

        super().__init__(
            n_features=self.training.features.shape[1],
            n_labels=self.training.labels.shape[1])

    def load(self):
        return TrainTestData(training=self.training, testing=self.testing)


class CsvDataProvider(DataProviderBase):
    """ Reads training and testing data from two headed CSV files """

    def __init__(self, train_filename, test_filename, n_features, n_labels):
        super().__init__(n_features=n_features, n_labels=n_labels)
        self.train_filename = train_filename
        self.test_filename = test_filename

    def load(self):
        return TrainTestData(
            training=load_csv(
                self.train_filename, self.n_features, self.n_labels),
            testing=load_csv(
                self.test_filename, self.n_features, self.n_labels),
        )
