from typing import Any, Dict, List
from jsonschema import Draft202012Validator, SchemaError

from teamboard.logs import get_logger
from teamboard.models import Board
from teamboard.recovery import FatalError
from teamboard.version import BOARD_SCHEMA_VERSION

log = get_logger("data.validate")

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

def board_schema() -> Dict[str, Any]:
    """
    Generate the JSON schema of a board snapshot file from the Board model.

    Returns:
        A dictionary holding the draft 2020-12 JSON schema.
    """
    schema = Board.model_json_schema()
    schema["$schema"] = JSON_SCHEMA_DIALECT
    schema["version"] = BOARD_SCHEMA_VERSION
    return schema

def _format_error(error) -> str:
    location = "/".join(str(part) for part in error.absolute_path)
    return f"{location or '<root>'}: {error.message}"

def validate_board_data(data: Any) -> List[str]:
    """
    Validate raw board data against the board schema.

    Args:
        data: The parsed contents of a board file.

    Returns:
        Error messages, ordered by location. Empty when the data is valid.
    """
    schema = board_schema()
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        log.critical(f"The board schema itself is invalid. Error: {e.message}")
        raise FatalError(f"Invalid board schema: {e.message}") from e

    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    messages = [_format_error(e) for e in errors]

    if messages:
        log.warning(f"Board data FAILED validation with {len(messages)} error(s)")
        for message in messages:
            log.debug(f"Validation Error: {message}")
    else:
        log.info("Board data is VALID")
    return messages
