import logging
from pathlib import Path
from typing import Any, Dict, List

from dataset_io import convert_dataset, map_dataset
from record_fields import (
    is_json_int,
    localized_required,
    optional_str,
    require_str,
    require_str_list,
)

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _as_coordinate(value: Any) -> int | None:
    if is_json_int(value) and INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def coerce_position(value: Any) -> Dict[str, int]:
    """{x, y} when both are integers, otherwise the origin. Never raises."""
    if isinstance(value, dict):
        x = _as_coordinate(value.get("x"))
        y = _as_coordinate(value.get("y"))
        if x is not None and y is not None:
            return {"x": x, "y": y}
    return {"x": 0, "y": 0}


def map_node(raw: Dict[str, Any]) -> Dict[str, Any]:
    logger.debug("Raw node: %r", raw)

    return {
        "id": require_str(raw, "id"),
        "type": require_str(raw, "type"),
        "sub_type": optional_str(raw, "subType"),
        "zone": localized_required(raw, "zone"),
        "teleport": localized_required(raw, "teleport"),
        "position": coerce_position(raw.get("position")),
        "start_time": require_str(raw, "startTime"),
        "end_time": require_str(raw, "endTime"),
        "items": require_str_list(raw, "itemIds"),
    }


def convert_nodes(input_path: Path, output_path: Path) -> int:
    """Reshape `{"nodes": [...]}` into a bare array of nested nodes."""
    return convert_dataset(input_path, output_path, "nodes", map_node)


def build_nodes(input_path: Path) -> List[Dict[str, Any]]:
    return map_dataset(input_path, "nodes", map_node)
