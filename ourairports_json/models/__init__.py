"""
Record models for the OurAirports tables.

One frozen dataclass per published table. The field declarations double
as the column schema used to decode rows and encode documents.
"""

from .base import OurAirportsRecord
from .airport import Airport
from .airport_frequency import AirportFrequency
from .runway import Runway
from .navaid import Navaid
from .country import Country
from .region import Region

__all__ = [
    'OurAirportsRecord',
    'Airport',
    'AirportFrequency',
    'Runway',
    'Navaid',
    'Country',
    'Region',
]
