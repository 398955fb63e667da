from functools import lru_cache
from typing import Any, Dict, Optional, Sequence

from ..schema import RecordSchema


@lru_cache(maxsize=None)
def schema_for(record_class: type) -> RecordSchema:
    """Return the (cached) schema of a record dataclass."""
    return RecordSchema.from_dataclass(record_class)


class OurAirportsRecord:
    """
    Behaviour shared by all OurAirports record dataclasses.

    Subclasses are frozen dataclasses whose fields are declared with
    column(), in the column order of the published table.
    """

    @classmethod
    def schema(cls) -> RecordSchema:
        return schema_for(cls)

    @classmethod
    def from_row(cls, values: Sequence[str], row_number: Optional[int] = None) -> 'OurAirportsRecord':
        """Create instance from one row of table columns."""
        return cls.schema().decode(values, row_number)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: Optional[int] = None) -> 'OurAirportsRecord':
        """Create instance from dictionary."""
        return cls.schema().decode_document(data, index)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.schema().encode(self)
