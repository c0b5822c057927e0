"""
Subdiurnal Polar Motion
=======================

Show the tidal polar motion correction over a few days.

This example demonstrates how the :class:`.SubdiurnalNutation` class works for both band
policies along with a simple plot.
"""

# %%
# Imports
# -------

# Third Party Imports
import numpy as np
from matplotlib import pyplot as plt

# %%
# Create Epochs
# -------------
#
# Sample three days at ten minute steps, starting at the IERS test epoch.

start_epoch = 54335.0  # MJD, August 23, 2007
epochs = start_epoch + np.arange(0.0, 3.0, 10.0 / 1440.0)

# %%
# Evaluate Both Bands
# -------------------
#
# The quasi diurnal band is the IERS recommendation. The full model adds the
# long periodic terms and the secular drift. Both accept arrays of epochs.

# SUBDIURNAL Imports
from subdiurnal import BandPolicy, SubdiurnalNutation

quasi_diurnal = SubdiurnalNutation(BandPolicy.QUASI_DIURNAL_ONLY).evaluate(epochs)
full_model = SubdiurnalNutation(BandPolicy.FULL_MODEL).evaluate(epochs)

print(f"dx, dy at {start_epoch}: {quasi_diurnal.dx[0]:.6f}, {quasi_diurnal.dy[0]:.6f} uas")

# %%
# Plot Data
# ---------
#
# Plot both components against days elapsed.

days = epochs - start_epoch
fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True)
ax1.plot(days, quasi_diurnal.dx, label="quasi diurnal")
ax1.plot(days, full_model.dx, label="full model")
ax1.set_ylabel("dx [uas]")
ax1.legend()
ax2.plot(days, quasi_diurnal.dy)
ax2.plot(days, full_model.dy)
ax2.set_ylabel("dy [uas]")
ax2.set_xlabel("days since MJD 54335")
plt.show()
