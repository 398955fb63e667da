from dataclasses import dataclass
from typing import Tuple

from ..coercion import Coercion
from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class Region(OurAirportsRecord):
    """A row of regions.csv. code is the ISO 3166-2 code, e.g. 'GB-ENG'."""

    id: str = column()
    code: str = column()
    local_code: str = column()
    name: str = column()
    continent: str = column()
    iso_country: str = column()
    wikipedia_link: str = column()
    keywords: Tuple[str, ...] = column(Coercion.LIST)
