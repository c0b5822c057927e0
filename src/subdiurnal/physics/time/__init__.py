"""Time arguments used by the Earth-orientation models.

All epochs are Modified Julian Dates in the timescale the models expect (TT/TDB). Nothing
in this package converts between timescales.
"""
