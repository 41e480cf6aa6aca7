class InvalidArgument(ValueError):
    """
    Raised when a sequence, lag or process parameter is outside what the estimator or generator accepts.
    """


class DivisionByZero(ZeroDivisionError):
    """
    Raised when a normalisation would divide by a zero variance (eg. the ACF of a constant series).
    """
