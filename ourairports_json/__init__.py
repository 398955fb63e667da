"""
Convert OurAirports reference data (https://ourairports.com/data/) to JSON.

The main public API includes:
- RecordKind: the six OurAirports tables and their schemas
- parse_table / serialize / convert: CSV table to records to JSON
- OurAirportsSource: reading tables from disk or ourairports.com
"""

__version__ = '0.1.0'

from .errors import (
    ConversionError, AcquisitionError, SchemaError, CoercionError, SerializationError
)
from .kinds import RecordKind
from .mapper import decode_row, parse_table, serialize, parse_document, record_from_document, convert
from .models import Airport, AirportFrequency, Runway, Navaid, Country, Region
from .sources import OurAirportsSource, CachedOurAirportsSource

__all__ = [
    'RecordKind',
    'decode_row',
    'parse_table',
    'serialize',
    'parse_document',
    'record_from_document',
    'convert',
    'Airport',
    'AirportFrequency',
    'Runway',
    'Navaid',
    'Country',
    'Region',
    'OurAirportsSource',
    'CachedOurAirportsSource',
    'ConversionError',
    'AcquisitionError',
    'SchemaError',
    'CoercionError',
    'SerializationError',
]
