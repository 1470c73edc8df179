from typing import Any, Dict, List

Record = Dict[str, Any]


def require_str(raw: Record, key: str) -> str:
    """Return a mandatory string field, raising KeyError/TypeError otherwise."""
    value = raw[key]
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def optional_str(raw: Record, key: str) -> str:
    """Return an optional string field; absent or null reads as ""."""
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string or null, got {type(value).__name__}")
    return value


def require_str_list(raw: Record, key: str) -> List[str]:
    values = raw[key]
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise TypeError(f"field '{key}' must be an array of strings")
    return list(values)


def is_json_int(value: Any) -> bool:
    # bool is an int subclass but a distinct JSON type
    return isinstance(value, int) and not isinstance(value, bool)


def is_json_number(value: Any) -> bool:
    return is_json_int(value) or isinstance(value, float)


def localized(en: str, fr: str, de: str) -> Dict[str, str]:
    return {"en": en, "fr": fr, "de": de}


def localized_required(raw: Record, key: str) -> Dict[str, str]:
    """Nest `key`, `keyFr`, `keyDe` into one {en, fr, de} object; all three required."""
    return localized(
        require_str(raw, key),
        require_str(raw, f"{key}Fr"),
        require_str(raw, f"{key}De"),
    )


def localized_optional(raw: Record, key: str) -> Dict[str, str]:
    """Same as localized_required, but each missing language becomes ""."""
    return localized(
        optional_str(raw, key),
        optional_str(raw, f"{key}Fr"),
        optional_str(raw, f"{key}De"),
    )
