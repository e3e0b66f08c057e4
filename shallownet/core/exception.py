class ShapeMismatch(ValueError):
    """ Raised when feature or label matrices have row or column counts
    inconsistent with each other or with the network settings
    """


class NotInitialized(Exception):
    """ Raised when trying to access parameters or run inference on a
    network that has not been trained
    """


class DataLoadFailure(Exception):
    """ Raised by data providers when records cannot be read into
    feature and label matrices
    """
