"""
Row-to-record decoding and record-to-JSON serialization.

The mapper works on whole tables: it decodes every data row before
anything is serialized, and any bad row aborts the conversion.
"""

import csv
import io
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .errors import ConversionError, SerializationError
from .kinds import RecordKind
from .models import OurAirportsRecord

logger = logging.getLogger(__name__)

BOM = '\ufeff'


def decode_row(kind: RecordKind, values: Sequence[str], row_number: Optional[int] = None) -> OurAirportsRecord:
    """
    Decode one row of text columns into a record of the given kind.

    Args:
        kind: Record kind of the table
        values: Raw column values
        row_number: Optional row number used in error messages

    Returns:
        The decoded record

    Raises:
        SchemaError: If the column count differs from the kind's arity
        CoercionError: If a mandatory column cannot be interpreted
    """
    return kind.schema.decode(values, row_number)


def iter_rows(text: str) -> Iterable[tuple]:
    """
    Yield (row_number, values) for each data row of a CSV table.

    The header is row 1; blank lines are skipped and not counted.
    """
    if text.startswith(BOM):
        text = text[len(BOM):]
    reader = csv.reader(io.StringIO(text, newline=''))
    row_number = 0
    for values in reader:
        if not values:
            continue
        row_number += 1
        if row_number == 1:
            continue
        yield row_number, values


def parse_table(kind: RecordKind, text: str) -> List[OurAirportsRecord]:
    """
    Decode a whole CSV table into records, keeping row order.

    Args:
        kind: Record kind of the table
        text: CSV text, header row first

    Returns:
        List of records, one per data row

    Raises:
        SchemaError: If any row has the wrong number of columns
        CoercionError: If any mandatory column cannot be interpreted
    """
    logger.info(f"Converting {kind} data")
    records = []
    for row_number, values in iter_rows(text):
        records.append(decode_row(kind, values, row_number))
    logger.debug(f"Decoded {len(records)} {kind} rows")
    return records


def serialize(records: Sequence[OurAirportsRecord], pretty: bool = False) -> str:
    """
    Serialize records as a JSON list of objects.

    Args:
        records: Records of one kind, in output order
        pretty: Indent the output instead of the compact form

    Returns:
        The JSON document

    Raises:
        SerializationError: If a record holds a value JSON cannot represent
    """
    documents = [record.to_dict() for record in records]
    try:
        if pretty:
            return json.dumps(documents, indent=2, ensure_ascii=False, allow_nan=False)
        return json.dumps(documents, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize records: {e}") from e


def record_from_document(kind: RecordKind, document: Dict[str, Any], index: Optional[int] = None) -> OurAirportsRecord:
    """Rebuild one record from a mapping produced by serialize()."""
    return kind.record_class.from_dict(document, index)


def parse_document(kind: RecordKind, text: str) -> List[OurAirportsRecord]:
    """
    Rebuild records from a JSON document produced by serialize().

    Raises:
        ConversionError: If the text is not a JSON list of objects
        SchemaError: If an object's keys differ from the kind's columns
        CoercionError: If a value has the wrong type
    """
    try:
        documents = json.loads(text)
    except ValueError as e:
        raise ConversionError(f"Invalid JSON document: {e}") from e
    if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
        raise ConversionError("JSON document must be a list of objects")
    return [record_from_document(kind, document, index) for index, document in enumerate(documents)]


def convert(kind: RecordKind, text: str, pretty: bool = False) -> str:
    """Decode a CSV table and serialize it as JSON."""
    records = parse_table(kind, text)
    output = serialize(records, pretty)
    logger.info(f"Converted {len(records)} {kind} records")
    return output
