"""Non-linear regression by finite-difference gradient descent, with a live plot of the fit."""

__version__ = "0.1.0"