"""Mathematics, time, and Earth-orientation algorithms.

These algorithms are grouped by concern so each step of the subdiurnal polar motion model
can be tested on its own.
"""
