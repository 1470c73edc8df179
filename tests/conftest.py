"""Shared record builders for the converter tests."""

import json

import pytest


def raw_item(**overrides):
    item = {
        "id": "ironore",
        "slot": 3,
        "name": "Iron Ore",
        "nameFr": "Minerai de fer",
        "nameDe": "Eisenerz",
        "level": "10",
        "gatheringSkill": "Mining",
        "perception": "120",
        "imageUrl": "https://example.org/iron.png",
        "description": "A lump of iron.",
        "descriptionFr": "Un morceau de fer.",
        "descriptionDe": "Ein Stück Eisen.",
        "patch": 1.2,
    }
    item.update(overrides)
    return item


def raw_node(**overrides):
    node = {
        "id": "node-1",
        "type": "mining",
        "subType": "rare",
        "zone": "Windsward",
        "zoneFr": "Bief-du-Vent",
        "zoneDe": "Windkreis",
        "teleport": "Windsward Shrine",
        "teleportFr": "Sanctuaire de Bief-du-Vent",
        "teleportDe": "Schrein von Windkreis",
        "position": {"x": 3, "y": 4},
        "startTime": "00:00",
        "endTime": "06:00",
        "itemIds": ["ironore", "starmetal"],
    }
    node.update(overrides)
    return node


@pytest.fixture
def write_json(tmp_path):
    def _write(name, document):
        path = tmp_path / name
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
