from dataclasses import dataclass
from typing import Optional

from ..coercion import Coercion
from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class Navaid(OurAirportsRecord):
    """
    A row of navaids.csv.

    Frequencies and the DME channel stay text; positions, elevations and
    variations are optional numbers since many navaids lack them.
    """

    id: str = column()
    filename: str = column()
    ident: str = column()
    name: str = column()
    type: str = column()
    frequency_khz: str = column()
    latitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    longitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    elevation_ft: Optional[int] = column(Coercion.OPTIONAL_INT)
    iso_country: str = column()

    # Paired DME
    dme_frequency_khz: str = column()
    dme_channel: str = column()
    dme_latitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    dme_longitude_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    dme_elevation_ft: Optional[int] = column(Coercion.OPTIONAL_INT)

    slaved_variation_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    magnetic_variation_deg: Optional[float] = column(Coercion.OPTIONAL_FLOAT)
    usageType: str = column()
    power: str = column()
    associated_airport: str = column()
