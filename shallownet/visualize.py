import matplotlib.pyplot as plt
import numpy as np


def plot_loss_history(losses, ax=None, line_kwargs=None):
    """ Plot the per-epoch losses collected with
    :func:`shallownet.network.on_epoch.collect_losses`

    Parameters
    ----------
    losses: list of float
        One loss value per epoch.

    ax: matplotlib.axes.Axes, default=None
        Axes to draw on. The default creates a new figure.

    line_kwargs: dict, default=None
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    losses = np.asarray(losses, dtype=float)
    if losses.ndim != 1:
        raise TypeError("`losses` must be 1d.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    kwargs = line_kwargs or dict(c='b', ls='-', lw=2)
    ax.plot(np.arange(1, len(losses) + 1), losses, **kwargs)
    ax.set_xlabel('Epoch')
    ax.set_ylabel('Mean squared error')

    return ax
