import logging

import numpy as np

from shallownet.data.provider import Dataset


logger = logging.getLogger(__name__)


def make_blobs(n_per_class=20, n_features=4, n_classes=3, spread=0.1,
               separation=1.0, rs=None):
    """
    Make a near linearly separable classification dataset. Class `k` is an
    isotropic Gaussian blob centered at `separation` times the k'th
    standard basis vector of the feature space.

    Parameters
    ----------
    n_per_class: int, default=20
        Number of examples drawn for every class.

    n_features: int, default=4
        Dimension of the feature space. Must be at least `n_classes`.

    n_classes: int, default=3
        Number of classes, i.e., one-hot label columns.

    spread: float, default=0.1
        Standard deviation of the additive Gaussian noise.

    separation: float, default=1.0
        Distance of every blob center from the origin.

    rs: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    dataset: Dataset
        Examples are ordered by class.
    """
    if n_features < n_classes:
        raise ValueError("`n_features` should be at least `n_classes`.")
    if n_per_class < 1:
        raise ValueError("`n_per_class` should be positive.")

    rs = rs if rs is not None else np.random.RandomState()

    classes = np.repeat(np.arange(n_classes), n_per_class)

    centers = separation * np.eye(n_classes, n_features)
    features = centers[classes] + spread * rs.randn(len(classes), n_features)
    labels = np.eye(n_classes)[classes]

    return Dataset.create(features=features, labels=labels)


def save_csv(filename, dataset, header=None):
    """ Write `dataset` as a headed CSV with feature columns first and
    label columns last, the layout read by
    :func:`shallownet.data.provider.load_csv`
    """
    n_features = dataset.features.shape[1]
    n_labels = dataset.labels.shape[1]

    if header is None:
        header = ",".join(
            ["x{}".format(i) for i in range(n_features)] +
            ["y{}".format(i) for i in range(n_labels)])

    np.savetxt(filename, np.hstack([dataset.features, dataset.labels]),
               delimiter=',', header=header, comments='', fmt='%.10g')

    msg = "Wrote {} examples to {}"
    logger.info(msg.format(dataset.n_examples, filename))
