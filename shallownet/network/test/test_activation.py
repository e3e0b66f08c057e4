import unittest

import numpy

from shallownet.network.activation import (
    apply_elementwise, broadcast_add, column_sum, sigmoid, sigmoid_prime)


class TestActivation(unittest.TestCase):

    def test_sigmoid_at_zero(self):
        self.assertEqual(sigmoid(0.0), 0.5)

    def test_sigmoid_increasing_and_bounded(self):
        x = numpy.linspace(-20, 20, 401)
        y = sigmoid(x)

        self.assertTrue((numpy.diff(y) > 0).all())
        self.assertTrue((y > 0).all())
        self.assertTrue((y < 1).all())

    def test_sigmoid_matches_logistic_formula(self):
        x = numpy.linspace(-5, 5, 11)
        expected = 1.0 / (1.0 + numpy.exp(-x))
        self.assertLess(numpy.abs(sigmoid(x) - expected).max(), 1e-15)

    def test_sigmoid_prime_uses_activated_value(self):
        z = numpy.linspace(-3, 3, 13)
        a = sigmoid(z)

        # Central difference of the sigmoid at the preactivation
        eps = 1e-6
        numerical = (sigmoid(z + eps) - sigmoid(z - eps)) / (2 * eps)

        self.assertLess(numpy.abs(sigmoid_prime(a) - numerical).max(), 1e-8)
        self.assertEqual(sigmoid_prime(0.5), 0.25)

    def test_apply_elementwise_returns_new_array(self):
        arr = numpy.array([[0.0, 1.0], [2.0, 3.0]])
        out = apply_elementwise(arr, lambda v: 2 * v)

        self.assertTrue((out == 2 * arr).all())
        self.assertEqual(arr[1, 1], 3.0)
        self.assertEqual(out.dtype, numpy.float64)

    def test_broadcast_add(self):
        arr = numpy.zeros((3, 2))
        row = numpy.array([[1.0, 2.0]])

        out = broadcast_add(arr, row)
        self.assertTrue((out == numpy.array([[1, 2], [1, 2], [1, 2]])).all())

    def test_broadcast_add_bad_row(self):
        arr = numpy.zeros((3, 2))

        with self.assertRaises(ValueError):
            broadcast_add(arr, numpy.ones(2))

        with self.assertRaises(ValueError):
            broadcast_add(arr, numpy.ones((1, 3)))

    def test_column_sum(self):
        arr = numpy.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        out = column_sum(arr)

        self.assertEqual(out.shape, (1, 2))
        self.assertTrue((out == numpy.array([[9.0, 12.0]])).all())
