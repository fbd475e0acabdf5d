"""Tests for the GUI-independent viewer session."""

from datetime import datetime, timezone

import pytest

from entityscope.api.entity import Entity
from entityscope.api.filters import FilterCriteria, ObjectKind
from entityscope.api.viewer import (
    ConnectionRow,
    EntityViewer,
    ViewerTab,
    describe,
    panel_title,
)
from entityscope.core.exceptions import EmptySelectionError


class TestPanelTitle:
    def test_prefers_targetname(self) -> None:
        entity = Entity.from_properties({"classname": "func_door", "targetname": "door01"})
        assert panel_title(entity) == "Entity Properties - door01"

    def test_falls_back_to_classname(self) -> None:
        entity = Entity.from_properties({"classname": "light"}, source="maps/a.vmap")
        assert panel_title(entity) == "Entity Properties - light - Entity Lump: maps/a.vmap"

    def test_bare(self) -> None:
        assert panel_title(Entity.from_properties({})) == "Entity Properties"


class TestDescribe:
    def test_flattens_properties_and_outputs(self, map_entities) -> None:
        details = describe(map_entities[1])
        assert details.properties[:2] == (("classname", "func_door"), ("targetname", "door01"))
        assert details.outputs_visible
        assert details.connections[1] == ConnectionRow(
            output="OnClose",
            target="light_hall",
            input="TurnOff",
            parameter="",
            delay=0.5,
            times_to_fire=-1,
        )

    def test_no_outputs(self, map_entities) -> None:
        details = describe(map_entities[3])
        assert not details.outputs_visible
        assert ("origin", "0 128 64") in details.properties


class TestEntityViewer:
    def test_initial_refresh_shows_first_row(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        assert len(viewer.rows) == len(map_entities)
        assert viewer.details is not None
        assert viewer.details.entity is map_entities[0]

    def test_set_filter_refreshes(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        rows = viewer.set_filter(object_kind=ObjectKind.MESH_ENTITIES)
        assert [row.classname for row in rows] == ["func_door", "prop_physics"]
        assert viewer.details.entity is map_entities[1]
        assert viewer.criteria.object_kind == ObjectKind.MESH_ENTITIES

    def test_empty_result_keeps_previous_details(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        viewer.select(2)
        viewer.set_filter(class_filter="does_not_exist")
        assert viewer.rows == []
        assert viewer.details.entity is map_entities[2]

    def test_unknown_filter_field(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        with pytest.raises(AttributeError):
            viewer.set_filter(colour="red")

    def test_host_owned_criteria(self, map_entities) -> None:
        criteria = FilterCriteria(class_filter="relay")
        viewer = EntityViewer(map_entities, criteria)
        criteria.class_filter = "light"
        assert [row.classname for row in viewer.refresh()] == ["light"]

    def test_activate_calls_focus(self, map_entities) -> None:
        focused = []
        viewer = EntityViewer(map_entities, on_focus=focused.append)
        assert viewer.activate(1)
        assert focused == [map_entities[1]]

    def test_worldspawn_is_never_focused(self, map_entities) -> None:
        focused = []
        viewer = EntityViewer(map_entities, on_focus=focused.append)
        assert not viewer.activate(0)
        assert focused == []

    def test_follow_reference_searches_whole_collection(self, map_entities) -> None:
        viewer = EntityViewer(map_entities, FilterCriteria(class_filter="door"))
        viewer.active_tab = ViewerTab.OUTPUTS
        target = viewer.details.connections[0].target

        entity = viewer.follow_reference(target)

        assert entity is map_entities[2]
        assert viewer.details.entity is map_entities[2]
        assert viewer.active_tab == ViewerTab.PROPERTIES
        assert [row.entity for row in viewer.rows] == [map_entities[1]]

    def test_follow_reference_miss_changes_nothing(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        viewer.select(3)
        viewer.active_tab = ViewerTab.OUTPUTS
        assert viewer.follow_reference("nobody") is None
        assert viewer.follow_reference("") is None
        assert viewer.details.entity is map_entities[3]
        assert viewer.active_tab == ViewerTab.OUTPUTS

    def test_selection_export(self, map_entities) -> None:
        viewer = EntityViewer(map_entities, FilterCriteria(class_filter="relay"))
        exported_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        document = viewer.selection_export([1, 0, 1], exported_at=exported_at)
        assert document["entityCount"] == 2
        assert document["entities"][0]["properties"]["spawnflags"] == "1"
        assert document["exportDate"] == "2024-01-01T00:00:00+00:00"

    @pytest.mark.parametrize("index", [-1, 6])
    def test_row_index_out_of_range(self, map_entities, index) -> None:
        viewer = EntityViewer(map_entities)
        with pytest.raises(IndexError):
            viewer.entity_at(index)
        with pytest.raises(IndexError):
            viewer.selection_export([0, index])

    def test_empty_selection(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        with pytest.raises(EmptySelectionError):
            viewer.selection_export([])

    def test_collection_is_not_modified(self, map_entities) -> None:
        viewer = EntityViewer(map_entities)
        viewer.set_filter(value_filter="door")
        viewer.follow_reference("relay_open")
        assert list(viewer.entities) == map_entities
