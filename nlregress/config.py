"""Constants for the regression model and the plot window, and the starting parameters."""

EULER = 2.71828
ALPHA = 0.0001
EPSILON = 0.001
THRESHOLD = 0.0001  # limit below which two values count as equal

SIZE = 20  # number of data points read from the data file
PARAMS = 10  # number of model parameters

WIDTH = 550
HEIGHT = 550
EDGE = 100  # margin kept free on the right and bottom of the plot

_INITIAL_PARAMETERS = (0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def initial_parameters():
    """Return a fresh list holding the model's starting parameters."""
    return list(_INITIAL_PARAMETERS)