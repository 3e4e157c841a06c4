class LeastSquaresError(Exception):
    """Base class of all errors raised by the regression model."""
    pass


class InvalidPointError(LeastSquaresError, ValueError):
    """A data point with non-finite coordinates, or one that is already a member."""
    pass


class NotFoundError(LeastSquaresError, LookupError):
    """The data point is not a member of the point set."""
    pass
