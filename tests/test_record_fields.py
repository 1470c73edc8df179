import pytest

from record_fields import (
    is_json_int,
    is_json_number,
    localized_optional,
    localized_required,
    optional_str,
    require_str,
)


def test_require_str():
    assert require_str({"zone": ""}, "zone") == ""
    with pytest.raises(KeyError):
        require_str({}, "zone")
    with pytest.raises(TypeError):
        require_str({"zone": None}, "zone")


@pytest.mark.parametrize("raw, expected", [({}, ""), ({"k": None}, ""), ({"k": "v"}, "v")])
def test_optional_str(raw, expected):
    assert optional_str(raw, "k") == expected


def test_optional_str_rejects_other_types():
    with pytest.raises(TypeError):
        optional_str({"k": 1}, "k")


@pytest.mark.parametrize(
    "value, is_int, is_number",
    [(1, True, True), (1.0, False, True), (True, False, False), ("1", False, False), (None, False, False)],
)
def test_number_predicates(value, is_int, is_number):
    assert is_json_int(value) is is_int
    assert is_json_number(value) is is_number


def test_localized_helpers():
    raw = {"zone": "Z", "zoneFr": "Zf", "zoneDe": "Zd", "teleport": "T"}
    assert localized_required(raw, "zone") == {"en": "Z", "fr": "Zf", "de": "Zd"}
    assert localized_optional(raw, "teleport") == {"en": "T", "fr": "", "de": ""}
    with pytest.raises(KeyError):
        localized_required(raw, "teleport")
