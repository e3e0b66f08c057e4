import unittest

import numpy

from shallownet.core.exception import ShapeMismatch
from shallownet.network.evaluation import (
    accuracy, mean_squared_error, predicted_class_indices,
    true_class_indices)


class TestEvaluation(unittest.TestCase):

    def test_accuracy(self):
        labels = numpy.eye(3)[[0, 1, 2, 0]]
        predictions = numpy.array([
            [0.9, 0.1, 0.2],  # hit
            [0.3, 0.8, 0.1],  # hit
            [0.7, 0.1, 0.2],  # miss
            [0.2, 0.6, 0.4],  # miss
        ])

        self.assertEqual(accuracy(predictions, labels), 0.5)

    def test_tie_counts_as_hit(self):
        labels = numpy.array([[0.0, 1.0, 0.0]])
        predictions = numpy.array([[0.4, 0.4, 0.1]])

        self.assertEqual(accuracy(predictions, labels), 1.0)

    def test_duplicate_one_hot_uses_first_column(self):
        labels = numpy.array([[0.0, 1.0, 1.0]])

        with self.assertLogs('shallownet.network.evaluation', 'WARNING'):
            classes = true_class_indices(labels)

        self.assertEqual(classes[0], 1)

        with self.assertLogs('shallownet.network.evaluation', 'WARNING'):
            # Column 2 is the max but column 1 is taken as the true class
            self.assertEqual(
                accuracy(numpy.array([[0.1, 0.2, 0.9]]), labels), 0.0)

    def test_predicted_class_indices(self):
        predictions = numpy.array([[0.1, 0.7, 0.2], [0.5, 0.1, 0.4]])
        self.assertEqual(list(predicted_class_indices(predictions)), [1, 0])

    def test_shape_mismatch(self):
        with self.assertRaises(ShapeMismatch):
            accuracy(numpy.zeros((2, 3)), numpy.zeros((3, 3)))

        with self.assertRaises(ShapeMismatch):
            accuracy(numpy.zeros((0, 3)), numpy.zeros((0, 3)))

    def test_mean_squared_error(self):
        labels = numpy.array([[1.0, 0.0]])
        predictions = numpy.array([[0.5, 0.5]])

        self.assertEqual(mean_squared_error(predictions, labels), 0.25)
