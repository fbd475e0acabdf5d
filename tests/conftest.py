"""Configure pytest environment for all tests."""

import sys
from pathlib import Path
from typing import List

import pytest

# Get absolute paths
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from entityscope.api.entity import Connection, Entity  # noqa: E402


def make_entity(properties, connections=None, source=None) -> Entity:
    return Entity.from_properties(properties, connections=connections, source=source)


@pytest.fixture
def map_entities() -> List[Entity]:
    """A small map: world, a brush door with outputs, point entities and a duplicate name."""
    return [
        make_entity({"classname": "worldspawn", "skyname": "sky_day01"}, source="maps/test.vmap"),
        make_entity(
            {"classname": "func_door", "targetname": "door01", "model": "*3", "speed": 100},
            connections=[
                Connection(output_name="OnOpen", target_name="relay_open", input_name="Trigger"),
                Connection(
                    output_name="OnClose",
                    target_name="light_hall",
                    input_name="TurnOff",
                    delay=0.5,
                    times_to_fire=-1,
                ),
            ],
            source="maps/test.vmap",
        ),
        make_entity({"classname": "logic_relay", "targetname": "relay_open"}),
        make_entity(
            {"classname": "light", "targetname": "light_hall", "origin": [0, 128, 64]},
        ),
        make_entity({"classname": "prop_physics", "model": "models/crate.vmdl", "health": "100"}),
        make_entity({"classname": "logic_relay", "targetname": "relay_open", "spawnflags": 1}),
    ]
