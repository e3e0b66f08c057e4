""" Elementwise transforms used by the forward and backward passes.

None of these reach into network state: each takes arrays and, where
needed, a scalar function, and returns a new array.
"""
import numpy
from scipy.special import expit


def sigmoid(x):
    """ The logistic function, 1 / (1 + exp(-x)), applied elementwise """
    return expit(x)


def sigmoid_prime(a):
    """ Derivative of the sigmoid with respect to its preactivation,
    evaluated at the *activated* value `a = sigmoid(z)`
    """
    return a * (1.0 - a)


def apply_elementwise(arr, func):
    """ Returns a new float array with `func` applied to every entry of
    `arr`. `func` must accept and return arrays (numpy ufunc semantics).
    """
    arr = numpy.asarray(arr, dtype=numpy.float64)
    return numpy.asarray(func(arr), dtype=numpy.float64)


def broadcast_add(arr, row):
    """ Add the single row `row` (shape (1, ncols)) to every row of `arr`
    """
    if row.ndim != 2 or row.shape[0] != 1:
        msg = "`row` was shape {} but should be (1, ncols)"
        raise ValueError(msg.format(row.shape))

    if arr.shape[1] != row.shape[1]:
        msg = "Cannot broadcast row of width {} onto array of shape {}"
        raise ValueError(msg.format(row.shape[1], arr.shape))

    return arr + row


def column_sum(arr):
    """ Sum over rows, keeping a (1, ncols) shape """
    return arr.sum(axis=0, keepdims=True)
