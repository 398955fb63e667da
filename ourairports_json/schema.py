"""
Record schema descriptors.

A schema is the ordered list of (column name, coercion) pairs of a record
kind. It is derived once from the record dataclass and then used for every
operation on that kind: checking the width of a row, decoding it, turning
a record into a JSON mapping and rebuilding a record from one.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from .coercion import Coercion, COERCERS
from .errors import CoercionError, SchemaError

logger = logging.getLogger(__name__)


def column(coercion: Coercion = Coercion.TEXT):
    """Declare a record field backed by one table column."""
    return field(metadata={'coercion': coercion})


@dataclass(frozen=True)
class FieldSpec:
    """One column of a record kind."""

    name: str
    coercion: Coercion


@dataclass(frozen=True)
class RecordSchema:
    """Ordered column layout of a record kind."""

    name: str
    fields: Tuple[FieldSpec, ...]
    record_class: type

    @classmethod
    def from_dataclass(cls, record_class: type) -> 'RecordSchema':
        """Build the schema from the column() declarations of a dataclass."""
        specs = tuple(
            FieldSpec(f.name, f.metadata.get('coercion', Coercion.TEXT))
            for f in dataclass_fields(record_class)
        )
        return cls(name=record_class.__name__, fields=specs, record_class=record_class)

    @property
    def arity(self) -> int:
        """Number of columns a row of this kind must have."""
        return len(self.fields)

    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    def check_width(self, values: Sequence[Any], row_number: Optional[int] = None) -> None:
        """
        Check that a row has exactly one value per column.

        Raises:
            SchemaError: If the count differs from the arity
        """
        if len(values) != self.arity:
            raise SchemaError(self.name, self.arity, len(values), row_number)

    def decode(self, values: Sequence[str], row_number: Optional[int] = None):
        """
        Decode one row of text columns into a record.

        Args:
            values: Raw column values, in table order
            row_number: Optional row number used in error messages

        Returns:
            A populated record of this kind

        Raises:
            SchemaError: If the row has the wrong number of columns
            CoercionError: If a mandatory column cannot be interpreted
        """
        self.check_width(values, row_number)
        kwargs = {}
        for spec, value in zip(self.fields, values):
            try:
                kwargs[spec.name] = COERCERS[spec.coercion](value)
            except ValueError as e:
                raise CoercionError(spec.name, value, row_number, reason=e) from e
        return self.record_class(**kwargs)

    def encode(self, record) -> Dict[str, Any]:
        """Convert a record to a mapping in column order."""
        document = {}
        for spec in self.fields:
            value = getattr(record, spec.name)
            if spec.coercion is Coercion.LIST:
                value = list(value)
            document[spec.name] = value
        return document

    def decode_document(self, document: Dict[str, Any], index: Optional[int] = None):
        """
        Rebuild a record from a mapping produced by encode().

        Raises:
            SchemaError: If the keys differ from the column names
            CoercionError: If a value has the wrong JSON type
        """
        expected = set(self.names)
        actual = set(document)
        if expected != actual:
            details = []
            missing = sorted(expected - actual)
            unexpected = sorted(actual - expected)
            if missing:
                details.append(f"missing {', '.join(missing)}")
            if unexpected:
                details.append(f"unexpected {', '.join(unexpected)}")
            raise SchemaError(self.name, self.arity, len(document), index, detail='; '.join(details))

        kwargs = {}
        for spec in self.fields:
            value = document[spec.name]
            if not _matches(spec.coercion, value):
                raise CoercionError(spec.name, value, index,
                                    reason=f"not a valid {spec.coercion.value} value")
            if spec.coercion is Coercion.LIST:
                value = tuple(value)
            elif spec.coercion in (Coercion.FLOAT, Coercion.OPTIONAL_FLOAT) and value is not None:
                value = float(value)
            kwargs[spec.name] = value
        return self.record_class(**kwargs)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(coercion: Coercion, value: Any) -> bool:
    """Check the JSON type of a document value against its coercion."""
    if coercion is Coercion.TEXT:
        return isinstance(value, str)
    if coercion is Coercion.FLOAT:
        return _is_number(value)
    if coercion is Coercion.BOOLEAN:
        return isinstance(value, bool)
    if coercion is Coercion.LIST:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    if value is None:
        return True
    if coercion is Coercion.OPTIONAL_FLOAT:
        return _is_number(value)
    if coercion is Coercion.OPTIONAL_UNSIGNED:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, int) and not isinstance(value, bool)
