"""Record validation utilities for the token top-up processor."""
import logging
from itertools import groupby
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import ValidationError

from token_topup.models.schemas import Company, Defect, Record

# Get loggers
debug_logger = logging.getLogger('debug')


def record_id(record: Any) -> Any:
    """Return the id used to identify a record in warnings."""
    if isinstance(record, dict) and record.get('id') is not None:
        return record['id']
    return 'unknown'


def collect_defects(record: Any, schema: Type[Record], label: str) -> List[Defect]:
    """Check a record against a schema and describe every violation.

    Each schema field produces at most one defect: a missing field is not
    also reported as having the wrong type.

    Args:
        record: Raw record parsed from JSON
        schema: The pydantic model the record must satisfy
        label: Record kind used in messages, e.g. "Company"

    Returns:
        List of defects, empty if the record is valid
    """
    object_id = record_id(record)
    try:
        schema.model_validate(record)
        return []
    except ValidationError as e:
        errors = e.errors()

    defects = []
    for error in errors:
        loc = error.get('loc') or ()
        if not loc:
            defects.append(Defect(
                label, object_id, '',
                f"Warning: {label} (ID: {object_id}) is not a JSON object.  Skipping..."
            ))
            continue

        field = str(loc[0])
        if error.get('type') == 'missing':
            message = f"Warning: {label} (ID: {object_id}) missing field '{field}'.  Skipping..."
        else:
            actual_type = type(error.get('input')).__name__
            expected_type = schema.expected_type(field)
            message = (f"Warning: {label} (ID: {object_id}) field '{field}' has invalid type "
                       f"'{actual_type}' (expected '{expected_type}').  Skipping...")
        defects.append(Defect(label, object_id, field, message))
    return defects


def verify(record: Any, schema: Type[Record], label: str,
           logger: Optional[logging.Logger] = None) -> bool:
    """Verify a record and log one warning per defect.

    Defects never raise; they only mark the record as invalid.

    Args:
        record: Raw record parsed from JSON
        schema: The pydantic model the record must satisfy
        label: Record kind used in messages
        logger: Logger receiving the defects, defaults to 'verification'

    Returns:
        bool: True if the record has no defects
    """
    logger = logger or logging.getLogger('verification')
    defects = collect_defects(record, schema, label)
    for defect in defects:
        logger.warning(defect.message)
    return not defects


def partition_records(records: List[Any], schema: Type[Record], label: str,
                      logger: Optional[logging.Logger] = None) -> Tuple[List[Record], List[Any]]:
    """Split records into valid models and invalid raw records.

    Both lists keep the input order.
    """
    valid, invalid = [], []
    for record in records:
        if verify(record, schema, label, logger):
            valid.append(schema.model_validate(record))
        else:
            invalid.append(record)
    debug_logger.debug(f"{label} records: {len(valid)} valid, {len(invalid)} invalid")
    return valid, invalid


def remove_duplicate_companies(valid_companies: List[Company], invalid_companies: List[Dict[str, Any]],
                               logger: Optional[logging.Logger] = None) -> List[Company]:
    """Move every company sharing an id with another company to the invalid list.

    All members of a duplicate group are removed, including the first one.
    The invalid list is extended in place with the dumped records.

    Returns:
        The remaining companies sorted by ascending id
    """
    logger = logger or logging.getLogger('verification')
    remaining = []
    by_id = sorted(valid_companies, key=lambda company: company.id)
    for _id, group in groupby(by_id, key=lambda company: company.id):
        companies = list(group)
        if len(companies) == 1:
            remaining.extend(companies)
            continue

        for company in companies:
            invalid_companies.append(company.model_dump())
            logger.warning(
                f"Warning: Company {company.name} (ID: {company.id}) is a duplicate ID.  Skipping..."
            )
    return remaining
