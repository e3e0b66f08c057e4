import unittest

from shallownet.core.settings import NetworkSettings


class TestNetworkSettings(unittest.TestCase):

    def test_valid(self):
        settings = NetworkSettings(
            input_neurons=4, output_neurons=3, hidden_neurons=5,
            epochs=1000, learning_rate=0.01)

        self.assertEqual(settings.input_neurons, 4)
        self.assertEqual(settings.learning_rate, 0.01)
        self.assertEqual(
            settings.shapes, ((4, 5), (1, 5), (5, 3), (1, 3)))

    def test_learning_rate_cast_to_float(self):
        settings = NetworkSettings(4, 3, 4, 10, 1)
        self.assertIsInstance(settings.learning_rate, float)

    def test_immutable(self):
        settings = NetworkSettings(4, 3, 4, 10, 0.1)

        with self.assertRaises(AttributeError):
            settings.epochs = 5

    def test_non_positive_counts(self):
        for field in ('input_neurons', 'output_neurons',
                      'hidden_neurons', 'epochs'):
            kwargs = dict(input_neurons=4, output_neurons=3,
                          hidden_neurons=4, epochs=10, learning_rate=0.1)
            kwargs[field] = 0

            with self.assertRaises(ValueError, msg=field):
                NetworkSettings(**kwargs)

    def test_non_integer_counts(self):
        with self.assertRaises(TypeError):
            NetworkSettings(4.0, 3, 4, 10, 0.1)

        with self.assertRaises(TypeError):
            NetworkSettings(4, 3, True, 10, 0.1)

    def test_bad_learning_rate(self):
        for learning_rate in (0, -0.1, float('nan'), float('inf'), 'fast'):
            with self.assertRaises(ValueError, msg=repr(learning_rate)):
                NetworkSettings(4, 3, 4, 10, learning_rate)
