import matplotlib.pyplot as plt
import numpy as np

from shallownet import CsvDataProvider, NetworkSettings, run_experiment
from shallownet.core.logger import setup_logging
from shallownet.network.on_epoch import collect_losses, warn_on_nonfinite
from shallownet.visualize import plot_loss_history

setup_logging(filename='log.txt')

# Seed a random number generator.
rs = np.random.RandomState(1234)

settings = NetworkSettings(
    input_neurons=4,
    output_neurons=3,
    hidden_neurons=4,
    epochs=1000,
    learning_rate=0.01,
)

# Run `create_data.py` first to write these files.
provider = CsvDataProvider(
    train_filename='train.csv', test_filename='test.csv',
    n_features=settings.input_neurons, n_labels=settings.output_neurons)

training = provider().training

losses = []
result = run_experiment(
    provider, settings, random_state=rs,
    on_epoch=[collect_losses(training.labels, losses), warn_on_nonfinite()])

print("Accuracy = {:0.4f}".format(result.accuracy))

plot_loss_history(losses)
plt.show()
