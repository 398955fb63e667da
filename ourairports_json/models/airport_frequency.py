from dataclasses import dataclass

from ..schema import column
from .base import OurAirportsRecord


@dataclass(frozen=True)
class AirportFrequency(OurAirportsRecord):
    """
    A row of airport-frequencies.csv.

    frequency_mhz is kept as published (e.g. '118.325') rather than parsed
    to a float, so no precision is lost or invented.
    """

    id: str = column()
    airport_ref: str = column()
    airport_ident: str = column()
    type: str = column()
    description: str = column()
    frequency_mhz: str = column()
