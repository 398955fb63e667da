from dataclasses import dataclass
from typing import Optional

from ..coercion import Coercion
from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class Runway(OurAirportsRecord):
    """A row of runways.csv."""

    id: str = column()
    airport_ref: str = column()
    airport_ident: str = column()
    length_ft: Optional[int] = column(Coercion.OPTIONAL_UNSIGNED)
    width_ft: Optional[int] = column(Coercion.OPTIONAL_UNSIGNED)
    surface: str = column()
    lighted: bool = column(Coercion.BOOLEAN)
    closed: bool = column(Coercion.BOOLEAN)

    # Low end (LE) information
    le_ident: str = column()
    le_latitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    le_longitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    le_elevation_ft: Optional[int] = column(Coercion.OPTIONAL_INT)
    le_heading_degT: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    le_displaced_threshold_ft: Optional[int] = column(Coercion.OPTIONAL_INT)

    # High end (HE) information
    he_ident: str = column()
    he_latitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    he_longitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    he_elevation_ft: Optional[int] = column(Coercion.OPTIONAL_INT)
    he_heading_degT: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    he_displaced_threshold_ft: Optional[int] = column(Coercion.OPTIONAL_INT)

    def __str__(self):
        """Return a human-readable string representation of the runway."""
        status = []
        if self.closed:
            status.append("CLOSED")
        if self.lighted:
            status.append("LIGHTED")

        runway_info = f"Runway {self.le_ident}/{self.he_ident}"
        if status:
            runway_info += f" ({', '.join(status)})"
        if self.length_ft:
            runway_info += f" {self.length_ft}ft"
        return runway_info
