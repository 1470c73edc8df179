import math
from pathlib import Path
from typing import Any, Dict, List

from dataset_io import convert_dataset, map_dataset
from record_fields import (
    is_json_int,
    is_json_number,
    localized_optional,
    localized_required,
    optional_str,
    require_str,
)

SLOT_MIN = -128
SLOT_MAX = 127


def coerce_slot(value: Any) -> int:
    """Slot as a signed byte. Non-numbers (and missing) become 0; floats truncate."""
    if is_json_int(value):
        slot = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"slot {value!r} is not a finite number")
        slot = math.trunc(value)
    else:
        return 0

    if not SLOT_MIN <= slot <= SLOT_MAX:
        raise ValueError(f"slot {value!r} outside {SLOT_MIN}..{SLOT_MAX}")
    return slot


def map_item(raw: Dict[str, Any]) -> Dict[str, Any]:
    patch = raw.get("patch")
    if patch is not None and not is_json_number(patch):
        raise TypeError(f"field 'patch' must be a number or null, got {type(patch).__name__}")

    return {
        "id": require_str(raw, "id"),
        "slot": coerce_slot(raw.get("slot")),
        "name": localized_required(raw, "name"),
        "level": require_str(raw, "level"),
        "gathering_skill": require_str(raw, "gatheringSkill"),
        "perception": require_str(raw, "perception"),
        "image_url": optional_str(raw, "imageUrl"),
        "description": localized_optional(raw, "description"),
    }


def convert_items(input_path: Path, output_path: Path) -> int:
    """Reshape `{"items": [...]}` into a bare array of nested items."""
    return convert_dataset(input_path, output_path, "items", map_item)


def build_items(input_path: Path) -> List[Dict[str, Any]]:
    return map_dataset(input_path, "items", map_item)
