import logging

import numpy

from shallownet.core.exception import ShapeMismatch


logger = logging.getLogger(__name__)


def true_class_indices(labels):
    """ The column index of the first entry equal to 1.0 in each row of the
    one-hot `labels`. Rows with no such entry map to 0.
    """
    is_hot = labels == 1.0

    n_hot = is_hot.sum(axis=1)
    n_malformed = int((n_hot > 1).sum())
    if n_malformed > 0:
        msg = ("{} label row(s) have more than one entry equal to 1.0; "
               "using the first such column as the true class")
        logger.warning(msg.format(n_malformed))

    # argmax returns the first maximal index, i.e., the first 1.0
    return is_hot.argmax(axis=1)


def predicted_class_indices(predictions):
    """ The column index of the maximum output in each row """
    return predictions.argmax(axis=1)


def accuracy(predictions, labels):
    """ The fraction of rows where the output at the true class equals
    the maximum output of that row

    Parameters
    ----------
    predictions: ndarray, shape=(nsamples, noutput)
        Network outputs.

    labels: ndarray, shape=(nsamples, noutput)
        One-hot encoded true classes.

    Returns
    -------
    accuracy: float
        Value in [0, 1].

    Note
    ----
    A tie between the true class and another column still counts as a hit.
    """
    if predictions.shape != labels.shape:
        msg = "`predictions` shape {} does not match `labels` shape {}"
        raise ShapeMismatch(msg.format(predictions.shape, labels.shape))

    nrows = predictions.shape[0]
    if nrows == 0:
        raise ShapeMismatch("Cannot compute accuracy over zero rows")

    true_classes = true_class_indices(labels)
    at_true = predictions[numpy.arange(nrows), true_classes]
    hits = (at_true == predictions.max(axis=1)).sum()

    return float(hits) / nrows


def mean_squared_error(predictions, labels):
    """ Mean over all entries of the squared difference """
    diff = labels - predictions
    return float((diff * diff).mean())
