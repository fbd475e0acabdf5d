"""Tests for targetname resolution."""

from entityscope.api.entity import Entity
from entityscope.api.resolve import find_all_by_targetname, resolve_by_targetname


class CountingEntities:
    """Iterable that records whether it was scanned."""

    def __init__(self, entities):
        self.entities = entities
        self.iterated = False

    def __iter__(self):
        self.iterated = True
        return iter(self.entities)


def build_collection():
    a = Entity.from_properties({"classname": "info_target", "targetname": "x"})
    b = Entity.from_properties({"classname": "info_target", "targetname": "x"})
    c = Entity.from_properties({"classname": "info_target", "targetname": "y"})
    return a, b, c


class TestResolveByTargetname:
    def test_first_match_wins(self) -> None:
        a, b, c = build_collection()
        assert resolve_by_targetname([a, b, c], "x") is a
        assert resolve_by_targetname([a, b, c], "y") is c

    def test_empty_name_skips_scan(self) -> None:
        collection = CountingEntities(list(build_collection()))
        assert resolve_by_targetname(collection, "") is None
        assert not collection.iterated

    def test_unknown_name(self) -> None:
        assert resolve_by_targetname(build_collection(), "z") is None

    def test_case_sensitive(self) -> None:
        assert resolve_by_targetname(build_collection(), "X") is None

    def test_unnamed_entities_never_match(self) -> None:
        unnamed = Entity.from_properties({"classname": "light", "targetname": None})
        assert resolve_by_targetname([unnamed], "light") is None

    def test_find_all_keeps_order(self) -> None:
        a, b, c = build_collection()
        assert find_all_by_targetname([c, b, a], "x") == [b, a]
        assert find_all_by_targetname([a, b, c], "") == []
