"""Fundamental angular arguments of the IERS tidal and nutation series.

The five Delaunay arguments come from an injectable provider so that models built on top of
them can be exercised with fixed, hand-picked angles. The default provider implements the
IERS Conventions (2010) polynomials.
"""

from __future__ import annotations

# Standard Library Imports
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

# Local Imports
from .. import constants as const
from ..maths import fmodArcseconds
from ..time.conversions import greenwichSiderealArgument, julianCenturiesSinceJ2000

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy.typing import ArrayLike


class DelaunayArguments(NamedTuple):
    """The five Delaunay arguments, in radians."""

    l: float  # noqa: E741
    """``float``: mean anomaly of the Moon."""

    lp: float
    """``float``: mean anomaly of the Sun."""

    f: float
    """``float``: mean argument of latitude of the Moon, L - Ω."""

    d: float
    """``float``: mean elongation of the Moon from the Sun."""

    om: float
    """``float``: mean longitude of the ascending node of the Moon."""


FundamentalArgumentProvider = Callable[[float], Sequence[float]]
"""Signature of a Delaunay argument provider: Julian centuries since J2000.0 -> (l, l', F, D, Ω)."""


def getDelaunayArguments(ttt: ArrayLike) -> DelaunayArguments:
    """Compute the Delaunay arguments for a time in Julian centuries of TDB since J2000.0.

    Each argument is a quartic in `ttt` (arcseconds), reduced modulo one turn with ``fmod``
    before converting to radians.

    References:
        :cite:t:`petit_2010_iers`, Eqn 5.43

    Args:
        ttt (``float``): Julian centuries since J2000.0.

    Returns:
        :class:`.DelaunayArguments`: (l, l', F, D, Ω) in radians.
    """
    mean_anomaly_moon = fmodArcseconds(
        485868.249036
        + ttt * (1717915923.2178 + ttt * (31.8792 + ttt * (0.051635 + ttt * (-0.00024470)))),
    )
    mean_anomaly_sun = fmodArcseconds(
        1287104.79305
        + ttt * (129596581.0481 + ttt * (-0.5532 + ttt * (0.000136 + ttt * (-0.00001149)))),
    )
    latitude_argument = fmodArcseconds(
        335779.526232
        + ttt * (1739527262.8478 + ttt * (-12.7512 + ttt * (-0.001037 + ttt * 0.00000417))),
    )
    mean_elongation = fmodArcseconds(
        1072260.70369
        + ttt * (1602961601.2090 + ttt * (-6.3706 + ttt * (0.006593 + ttt * (-0.00003169)))),
    )
    ascending_node = fmodArcseconds(
        450160.398036
        + ttt * (-6962890.5431 + ttt * (7.4722 + ttt * (0.007702 + ttt * (-0.00005939)))),
    )

    return DelaunayArguments(
        l=mean_anomaly_moon * const.DAS2R,
        lp=mean_anomaly_sun * const.DAS2R,
        f=latitude_argument * const.DAS2R,
        d=mean_elongation * const.DAS2R,
        om=ascending_node * const.DAS2R,
    )


@dataclass(frozen=True)
class FundamentalArguments:
    r"""Ordered vector :math:`[\Theta, l, l', F, D, \Omega]` of fundamental arguments (radians).

    Iterating yields the six values in that order, which is the order the integer
    multipliers of :class:`.TidalTerm` are applied in.
    """

    theta: float
    r"""``float``: sidereal argument :math:`\Theta = GMST + \pi`."""

    l: float  # noqa: E741
    """``float``: mean anomaly of the Moon."""

    lp: float
    """``float``: mean anomaly of the Sun."""

    f: float
    """``float``: mean argument of latitude of the Moon."""

    d: float
    """``float``: mean elongation of the Moon from the Sun."""

    om: float
    """``float``: mean longitude of the ascending node of the Moon."""

    def __iter__(self) -> Iterator[float]:
        """Iterate over the arguments in multiplier order."""
        return iter((self.theta, self.l, self.lp, self.f, self.d, self.om))


def assembleFundamentalArguments(
    epoch: ArrayLike,
    provider: FundamentalArgumentProvider = getDelaunayArguments,
) -> FundamentalArguments:
    """Build the fundamental argument vector for `epoch`.

    Args:
        epoch (``float``): Modified Julian Date (TT/TDB). Not range checked.
        provider (``callable``, optional): Delaunay argument provider, called with Julian
            centuries since J2000.0. Defaults to :func:`.getDelaunayArguments`.

    Returns:
        :class:`.FundamentalArguments`: freshly computed arguments for `epoch`.
    """
    ttt = julianCenturiesSinceJ2000(epoch)
    mean_anomaly_moon, mean_anomaly_sun, latitude_argument, mean_elongation, node = provider(ttt)

    return FundamentalArguments(
        theta=greenwichSiderealArgument(ttt),
        l=mean_anomaly_moon,
        lp=mean_anomaly_sun,
        f=latitude_argument,
        d=mean_elongation,
        om=node,
    )
