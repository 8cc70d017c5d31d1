"""Skyfield-backed ephemeris adapter producing barycentric ecliptic vectors."""

from functools import partial
from typing import Optional

from skyfield.api import Loader, load
from skyfield.framelib import ecliptic_J2000_frame

from ..errors import BodyNotFoundError, EphemerisLoadError
from ..models.bodies import PositionFn
from ..models.coordinates import CartesianVector
from ..models.time import JulianDate

DEFAULT_KERNEL = "de421.bsp"

# Catalog id -> segment name inside the JPL kernel
KERNEL_TARGETS = {
    "sun": "sun",
    "mercury": "mercury",
    "venus": "venus",
    "earth": "earth",
    "moon": "moon",
    "mars": "mars barycenter",
    "jupiter": "jupiter barycenter",
    "saturn": "saturn barycenter",
    "uranus": "uranus barycenter",
    "neptune": "neptune barycenter",
}


class EphemerisAdapter:
    """Exposes `position(body_id, jd)` over a JPL kernel.

    Any ephemeris object can be used as long as ``ephemeris[name]`` returns
    something with ``.at(time)`` whose result offers ``.frame_xyz(frame).au``,
    and whose targets support subtraction (skyfield vector functions do).
    """

    def __init__(self, ephemeris, timescale):
        self.ephemeris = ephemeris
        self.timescale = timescale

    @classmethod
    def load(
        cls, kernel: str = DEFAULT_KERNEL, data_dir: Optional[str] = None
    ) -> "EphemerisAdapter":
        """Load a kernel through skyfield, downloading it on first use.

        Raises:
            EphemerisLoadError: If the kernel cannot be fetched or opened
        """
        loader = Loader(data_dir) if data_dir else load
        try:
            ephemeris = loader(kernel)
        except (OSError, ValueError) as e:
            raise EphemerisLoadError(kernel, str(e)) from e
        return cls(ephemeris, loader.timescale())

    def _time(self, jd: JulianDate):
        return self.timescale.tt_jd(jd.value)

    def _ecliptic(self, position) -> CartesianVector:
        return CartesianVector.from_array(position.frame_xyz(ecliptic_J2000_frame).au)

    def barycentric(self, target: str, jd: JulianDate) -> CartesianVector:
        """Barycentric ecliptic position of a kernel segment, in AU."""
        return self._ecliptic(self.ephemeris[target].at(self._time(jd)))

    def heliocentric(self, target: str, jd: JulianDate) -> CartesianVector:
        """Position of a kernel segment relative to the Sun, in AU."""
        vector = self.ephemeris[target] - self.ephemeris["sun"]
        return self._ecliptic(vector.at(self._time(jd)))

    def earth(self, jd: JulianDate) -> CartesianVector:
        return self.barycentric(KERNEL_TARGETS["earth"], jd)

    def moon(self, jd: JulianDate) -> CartesianVector:
        """Barycentric Moon: heliocentric lunar vector plus barycentric Sun."""
        return self.heliocentric(KERNEL_TARGETS["moon"], jd) + self.barycentric(
            KERNEL_TARGETS["sun"], jd
        )

    def position(self, body_id: str, jd: JulianDate) -> CartesianVector:
        """
        Barycentric ecliptic position of a catalog body.

        Args:
            body_id: Body name (case-insensitive, e.g. "Mars")
            jd: Time of evaluation; no range check is made

        Returns:
            CartesianVector in AU

        Raises:
            BodyNotFoundError: If body_id is not a known body
        """
        key = body_id.lower()
        if key not in KERNEL_TARGETS:
            raise BodyNotFoundError(body_id, list(KERNEL_TARGETS.keys()))
        if key == "moon":
            return self.moon(jd)
        return self.barycentric(KERNEL_TARGETS[key], jd)

    def position_fn(self, body_id: str) -> PositionFn:
        """Bind `position` to one body, validating the id up front."""
        key = body_id.lower()
        if key not in KERNEL_TARGETS:
            raise BodyNotFoundError(body_id, list(KERNEL_TARGETS.keys()))
        return partial(self.position, key)
