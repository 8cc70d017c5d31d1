from dataclasses import dataclass

J2000_JD = 2451545.0


@dataclass(frozen=True)
class JulianDate:
    """Continuous day count with fractional part."""

    value: float

    @property
    def days_since_j2000(self) -> float:
        return self.value - J2000_JD
