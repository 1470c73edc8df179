import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, NoReturn

from tqdm import tqdm

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name}")


def load_dataset(path: Path, key: str) -> List[Dict[str, Any]]:
    """Read a `{key: [record, ...]}` document and return the records in file order."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            document = json.load(f, parse_constant=_reject_constant)
        except ValueError as e:
            raise SystemExit(f"Failed to parse {path} as JSON: {e}") from e

    if not isinstance(document, dict):
        raise SystemExit(f"Expected a JSON object at the top of {path}")
    records = document.get(key)
    if records is None:
        raise SystemExit(f"Field '{key}' not found in {path}")
    if not isinstance(records, list):
        raise SystemExit(f"Field '{key}' in {path} is not an array")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise SystemExit(f"Entry {index} of '{key}' in {path} is not an object")

    logger.info("Loaded %d %s from %s", len(records), key, path)
    return records


def save_dataset(path: Path, records: List[Dict[str, Any]]) -> None:
    """Write records as a bare, pretty-printed JSON array (overwrites)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    logger.info("Saved %d records to %s", len(records), path)


def map_dataset(
    input_path: Path,
    key: str,
    mapper: Callable[[Dict[str, Any]], Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """Load `key` records from input_path and map each one. Writes nothing."""
    records = load_dataset(input_path, key)

    converted = []
    for index, raw in enumerate(tqdm(records, desc=f"Converting {key}", unit="rec")):
        try:
            converted.append(mapper(raw))
        except (KeyError, TypeError, ValueError) as e:
            record_id = raw.get("id")
            label = f" (id={record_id!r})" if isinstance(record_id, str) else ""
            raise SystemExit(f"Failed to convert {key} record {index}{label}: {e}") from e
    return converted


def convert_dataset(
    input_path: Path,
    output_path: Path,
    key: str,
    mapper: Callable[[Dict[str, Any]], Dict[str, Any]],
) -> int:
    """map_dataset then save_dataset; nothing is written if any record fails."""
    converted = map_dataset(input_path, key, mapper)
    save_dataset(output_path, converted)
    return len(converted)
