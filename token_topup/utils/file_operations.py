"""File operation utilities for the token top-up processor."""
import os
import json
import logging
from typing import Any, List, Optional, Tuple

# Get loggers
logger = logging.getLogger('debug')

ABORT_SUFFIX = "Cannot proceed without complete input data.\nAborting!"


def load_json_file(file_path: str) -> Tuple[Optional[List[Any]], Optional[str]]:
    """Load a JSON array of records from a file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Tuple containing the parsed records (or None) and a diagnostic (or None)
    """
    logger.debug(f"Reading file content: {file_path}")
    if not os.path.isfile(file_path):
        return None, f"Error: File '{file_path}' not found.\n{ABORT_SUFFIX}"

    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug(f"Invalid JSON in {file_path}: {str(e)}")
        return None, f"Error: Failed to parse JSON file '{file_path}'.\n{ABORT_SUFFIX}"

    if not isinstance(data, list):
        return None, f"Error: File '{file_path}' does not contain a JSON array.\n{ABORT_SUFFIX}"

    logger.debug(f"Loaded {len(data)} records from {file_path}")
    return data, None


def write_text_file(file_path: str, lines: List[str]) -> None:
    """Write lines to a text file followed by one trailing blank line.

    WARNING: an existing file at file_path is overwritten without warning.
    """
    with open(file_path, 'w', encoding='utf-8') as file:
        for line in lines:
            file.write(f"{line}\n")
        file.write("\n")
    logger.debug(f"Wrote {len(lines)} lines to {file_path}")


def write_json_file(file_path: str, records: List[Any]) -> None:
    """Write records as a pretty-printed JSON array.

    WARNING: an existing file at file_path is overwritten without warning.
    """
    with open(file_path, 'w', encoding='utf-8') as file:
        json.dump(records, file, indent=2, ensure_ascii=False)
    logger.debug(f"Wrote {len(records)} records to {file_path}")
