"""
The closed set of OurAirports tables this package converts.

Each RecordKind carries everything that depends on the table: the name
used on the command line, the name it is published under and the record
class whose declaration is the column schema.
"""

from enum import Enum
from typing import Type

from .models import Airport, AirportFrequency, Country, Navaid, OurAirportsRecord, Region, Runway
from .schema import RecordSchema

BASE_URL = "https://ourairports.com/data"


class RecordKind(Enum):
    """An OurAirports table."""

    AIRPORT = ("airport", "airports", Airport)
    AIRPORT_FREQUENCY = ("airport-frequency", "airport-frequencies", AirportFrequency)
    RUNWAY = ("runway", "runways", Runway)
    NAVAID = ("navaid", "navaids", Navaid)
    COUNTRY = ("country", "countries", Country)
    REGION = ("region", "regions", Region)

    def __init__(self, command: str, table: str, record_class: Type[OurAirportsRecord]):
        self.command = command
        self.table = table
        self.record_class = record_class

    @property
    def url(self) -> str:
        """Well-known download location of the table."""
        return f"{BASE_URL}/{self.table}.csv"

    @property
    def schema(self) -> RecordSchema:
        return self.record_class.schema()

    @property
    def arity(self) -> int:
        return self.schema.arity

    @classmethod
    def from_command(cls, command: str) -> 'RecordKind':
        """
        Look up a kind by its command-line name.

        Raises:
            ValueError: If no kind has that name
        """
        for kind in cls:
            if kind.command == command:
                return kind
        raise ValueError(f"Unknown record kind: {command}")

    @classmethod
    def from_table(cls, table: str) -> 'RecordKind':
        """Look up a kind by its published table name, e.g. 'runways'."""
        for kind in cls:
            if kind.table == table:
                return kind
        raise ValueError(f"Unknown table: {table}")

    def __str__(self):
        return self.record_class.__name__
