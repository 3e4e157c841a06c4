"""
Least squares regression model.

Maintains a set of data points on a graph and keeps the best fit line, the
residuals of both the user's line and the best fit line, and the summary
statistics consistent with every change of the point set.
"""
