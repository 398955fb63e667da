from dataclasses import dataclass
from typing import Tuple

from ..coercion import Coercion
from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class Country(OurAirportsRecord):
    """A row of countries.csv."""

    id: str = column()
    code: str = column()
    name: str = column()
    continent: str = column()
    wikipedia_link: str = column()
    keywords: Tuple[str, ...] = column(Coercion.LIST)
