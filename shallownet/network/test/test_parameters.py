import unittest

import numpy

from shallownet.core.exception import ShapeMismatch
from shallownet.core.settings import NetworkSettings
from shallownet.network.parameters import initialize_parameters


class TestParameters(unittest.TestCase):

    def setUp(self):
        self.random_state = numpy.random.RandomState(1234)

    def test_initialized_shapes_and_range(self):

        for ninput, nhidden, noutput in [(4, 4, 3), (1, 1, 1), (7, 13, 2)]:
            settings = NetworkSettings(
                input_neurons=ninput, output_neurons=noutput,
                hidden_neurons=nhidden, epochs=1, learning_rate=0.1)

            params = initialize_parameters(
                settings, random_state=self.random_state)

            self.assertEqual(params.weights_hidden.shape, (ninput, nhidden))
            self.assertEqual(params.biases_hidden.shape, (1, nhidden))
            self.assertEqual(params.weights_out.shape, (nhidden, noutput))
            self.assertEqual(params.biases_out.shape, (1, noutput))

            for param in params:
                self.assertTrue((param >= 0).all())
                self.assertTrue((param < 1).all())

            # Should not raise
            params.check_shapes(settings)

    def test_bad_random_state(self):
        settings = NetworkSettings(4, 3, 4, 1, 0.1)

        with self.assertRaises(TypeError):
            initialize_parameters(settings, random_state=1234)

    def test_missing_random_state_warns(self):
        settings = NetworkSettings(4, 3, 4, 1, 0.1)

        with self.assertLogs('shallownet.network.parameters', 'WARNING'):
            initialize_parameters(settings)

    def test_check_shapes(self):
        settings = NetworkSettings(4, 3, 4, 1, 0.1)
        params = initialize_parameters(
            settings, random_state=self.random_state)
        params.weights_out = numpy.zeros((3, 4))

        with self.assertRaises(ShapeMismatch):
            params.check_shapes(settings)

    def test_copy_is_independent(self):
        settings = NetworkSettings(4, 3, 4, 1, 0.1)
        params = initialize_parameters(
            settings, random_state=self.random_state)

        copied = params.copy()
        copied.weights_hidden[:] = 5.0

        self.assertTrue((params.weights_hidden < 1).all())
