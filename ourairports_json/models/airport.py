from dataclasses import dataclass
from typing import Optional, Tuple

from ..coercion import Coercion
from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class Airport(OurAirportsRecord):
    """A row of airports.csv."""

    id: str = column()
    ident: str = column()
    type: str = column()
    name: str = column()
    latitude_deg: float = column(Coercion.FLOAT)
    longitude_deg: float = column(Coercion.FLOAT)
    elevation_ft: Optional[int] = column(Coercion.OPTIONAL_INT)
    continent: str = column()
    iso_country: str = column()
    iso_region: str = column()
    municipality: str = column()
    scheduled_service: bool = column(Coercion.BOOLEAN)
    gps_code: str = column()
    iata_code: str = column()
    local_code: str = column()
    home_link: str = column()
    wikipedia_link: str = column()
    keywords: Tuple[str, ...] = column(Coercion.LIST)

    def __str__(self):
        return f"{self.ident} {self.name} ({self.type})"
