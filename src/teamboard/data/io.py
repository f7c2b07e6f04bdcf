import tempfile, yaml, json, os
from datetime import date, datetime
from typing import Union, Dict, Any, Type, TypeVar
from pathlib import Path
from pydantic import ValidationError
from teamboard.recovery import FileOperationError, FatalError, CorruptionError
from teamboard.logs import get_logger
from teamboard.models import BaseYAMLModel, Board
from .validate import validate_board_data

log = get_logger("data.io")

DATA_YAML = 0
DATA_JSON = 1

YAML_SUFFIXES = ('.yml', '.yaml')
JSON_SUFFIXES = ('.json',)

M = TypeVar("M", bound=BaseYAMLModel)

def data_type_for(file_path: Union[Path, str]) -> int:
    """Pick the serialization format from a file extension."""
    suffix = Path(file_path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return DATA_YAML
    if suffix in JSON_SUFFIXES:
        return DATA_JSON
    raise FatalError(f"Unsupported data format for {file_path}; expected .yml, .yaml or .json")

def _cleanup(temp_path):
    if temp_path is not None and os.path.exists(temp_path):
        try:
            os.unlink(temp_path)
            log.debug(f"Cleaned up temporary file: {temp_path}")
        except OSError as cleanup_error:
            # Don't raise while already handling an error, just log
            log.warning(f"Could not clean up temp file {temp_path}: {cleanup_error}")

def _create_dirs(file_path : Path):
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, PermissionError) as e:
        error_msg = f"Cannot create directory {file_path.parent}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def atomic_write(data_type : int, file_path : Union[Path, str], data : Dict[str, Any], create_dirs : bool = False):
    """
    Serialize and save data to a YAML or JSON file using atomic updates.
    """
    file_path = Path(file_path)
    temp_path = None

    try:
        if create_dirs:
            _create_dirs(file_path)

        # Temporary file in the same directory as the target for atomicity
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', dir=file_path.parent, prefix=f".{file_path.name}.", suffix='.tmp', delete=False) as temp_file:
            temp_path = temp_file.name
            if data_type == DATA_YAML:
                yaml.safe_dump(data, temp_file, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)
            elif data_type == DATA_JSON:
                json.dump(data, temp_file, indent=2, ensure_ascii=False)
            else:
                raise FatalError("Unsupported Data Format")
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, file_path)
        log.debug(f"Successfully saved file: {file_path}")
        return True

    except FileOperationError:
        raise

    except FatalError:
        _cleanup(temp_path)
        raise

    except (yaml.YAMLError, TypeError, ValueError) as e:
        _cleanup(temp_path)
        # Data cannot be serialized
        error_msg = (f"Data serialization failed for {file_path}. "
                    f"In-memory data may be corrupt or contain non-serializable types: {e}")
        log.critical(error_msg)
        raise FatalError(error_msg) from e

    except (IOError, OSError, PermissionError) as e:
        _cleanup(temp_path)
        error_msg = f"I/O error saving file {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def _normalize(value):
    # YAML parses bare timestamps into datetime objects; the schema expects strings
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value

def load_data_file(file_path : Union[Path, str]) -> Dict[str, Any]:
    """
    Load and parse a YAML or JSON data file.

    Args:
        file_path: Path to the data file

    Returns:
        Parsed data as dict; an empty document gives an empty dict

    Raises:
        FileOperationError: The file is missing or cannot be read
        CorruptionError: The file is not valid YAML/JSON or not a mapping
    """
    file_path = Path(file_path)
    data_type = data_type_for(file_path)
    if not file_path.exists():
        raise FileOperationError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            if data_type == DATA_YAML:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        # Syntax or encoding errors mean the file is corrupted
        raise CorruptionError(f"Syntax error in {file_path}: {e}") from e
    except (IOError, OSError, PermissionError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CorruptionError(f"File {file_path} contains invalid data structure")
    return _normalize(data)

def load_model(model_type : Type[M], file_path : Union[Path, str]) -> M:
    """Load a data file and validate it into a model."""
    data = load_data_file(file_path)
    try:
        return model_type.model_validate(data)
    except ValidationError as e:
        raise CorruptionError(f"Invalid {model_type.__name__} data in {file_path}: {e}") from e

def load_board(file_path : Union[Path, str]) -> Board:
    """
    Load a board snapshot, checking it against the board schema first.

    Raises:
        FileOperationError: The file is missing or cannot be read
        CorruptionError: The file is malformed or fails the schema
    """
    data = load_data_file(file_path)
    errors = validate_board_data(data)
    if errors:
        error_msg = f"Board file {file_path} failed validation: " + "; ".join(errors)
        log.error(error_msg)
        raise CorruptionError(error_msg)

    try:
        board = Board.model_validate(data)
    except ValidationError as e:
        raise CorruptionError(f"Invalid Board data in {file_path}: {e}") from e
    log.info(f"Loaded board {file_path}: {len(board.teams)} teams, "
             f"{len(board.projects)} projects, {len(board.tasks)} tasks")
    return board
