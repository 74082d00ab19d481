"""Tests for station_qa/rules/suggestable.py"""

from station_qa.core.config import ValidationConfig
from station_qa.rules import suggestable


class TestName:
    def test_suggestable_requires_name(self, run_check, make_station):
        rows = [make_station(id="1", name=None), make_station(id="2", name=None, is_suggestable="f")]
        violations = run_check(suggestable.check_has_name, rows)
        assert [v.message for v in violations] == ["Station 1 is suggestable but has empty name"]

    def test_duplicate_names_among_suggestable_only(self, run_check, make_station):
        rows = [
            make_station(id="1", name="Nice Ville"),
            make_station(id="2", name="Nice Ville", is_suggestable="f"),
            make_station(id="3", name="Nice Ville"),
        ]
        violations = run_check(suggestable.check_name_unique, rows)
        assert [v.station_id for v in violations] == ["3"]
        assert "Duplicate name 'Nice Ville'" in violations[0].message


class TestInfo:
    def test_info_equal_to_name_in_any_locale(self, run_check, make_station):
        row = make_station(**{"info:fr": "Paris Gare de Lyon", "info:it": "Paris Gare de Lyon", "info:en": "Lyon station"})
        violations = run_check(suggestable.check_info_differs_from_name, [row])
        assert [v.message.split(" of station")[0] for v in violations] == ["Name and info:fr", "Name and info:it"]

    def test_non_suggestable_ignored(self, run_check, make_station):
        row = make_station(is_suggestable="f", **{"info:de": "Paris Gare de Lyon"})
        assert run_check(suggestable.check_info_differs_from_name, [row]) == []

    def test_configured_locales(self, run_check, make_station):
        config = ValidationConfig(locales=("fr",))
        row = make_station(**{"info:de": "Paris Gare de Lyon"})
        assert run_check(suggestable.check_info_differs_from_name, [row], config) == []


class TestCarrier:
    def test_own_carrier(self, run_check, make_station):
        assert run_check(suggestable.check_has_carrier, [make_station()]) == []

    def test_carrier_through_child(self, run_check, make_station):
        rows = [
            make_station(id="1", sncf_is_enabled="f"),
            make_station(id="2", is_suggestable="f", parent_station_id="1"),
        ]
        assert run_check(suggestable.check_has_carrier, rows) == []

    def test_no_carrier_anywhere(self, run_check, make_station):
        rows = [
            make_station(id="1", sncf_is_enabled="f"),
            make_station(id="2", sncf_is_enabled="f", is_suggestable="f", parent_station_id="1"),
        ]
        violations = run_check(suggestable.check_has_carrier, rows)
        assert [v.message for v in violations] == ["Station 1 is suggestable but has no enabled system"]


class TestParentStation:
    def test_existing_named_parent(self, run_check, make_station):
        rows = [make_station(id="1", name="Paris"), make_station(id="2", name="Paris Est", parent_station_id="1")]
        assert run_check(suggestable.check_parent_station, rows) == []

    def test_unknown_parent(self, run_check, make_station):
        rows = [make_station(id="2", parent_station_id="999")]
        violations = run_check(suggestable.check_parent_station, rows)
        assert violations[0].message == "Station 2 references a not existing parent station (999)"

    def test_parent_without_name(self, run_check, make_station):
        rows = [make_station(id="1", name=None, is_suggestable="f"), make_station(id="2", parent_station_id="1")]
        violations = run_check(suggestable.check_parent_station, rows)
        assert violations[0].message == "The station 1 has no name (parent of station 2)"

    def test_non_suggestable_child_not_checked_here(self, run_check, make_station):
        # dangling parents of any station are reported by parent_hierarchy
        rows = [make_station(id="2", is_suggestable="f", parent_station_id="999")]
        assert run_check(suggestable.check_parent_station, rows) == []


class TestSlug:
    def test_slug_must_match_name(self, run_check, make_station):
        rows = [
            make_station(id="1", name="Figueras/Figueres Vilafant Esp.", slug="figueras-figueres-vilafant-esp"),
            make_station(id="2", name="Lille Europe", slug="lille"),
            make_station(id="3", name="Lille Flandres", slug=None),
            make_station(id="4", name="Lille", slug="wrong", is_suggestable="f"),
        ]
        violations = run_check(suggestable.check_slug_matches_name, rows)
        assert [v.station_id for v in violations] == ["2", "3"]
        assert "expected 'lille-europe'" in violations[0].message

    def test_slug_unique(self, run_check, make_station):
        rows = [
            make_station(id="1", slug="lyon"),
            make_station(id="2", slug="lyon", is_suggestable="f"),
            make_station(id="3", slug="lyon"),
        ]
        violations = run_check(suggestable.check_slug_unique, rows)
        assert [v.message for v in violations] == ["Duplicated slug 'lyon' for station 3"]


class TestMetaStation:
    def test_two_suggestable_children_pass(self, run_check, make_station):
        rows = [
            make_station(id="100"),
            make_station(id="101", parent_station_id="100"),
            make_station(id="102", parent_station_id="100"),
        ]
        assert run_check(suggestable.check_meta_station_children, rows) == []

    def test_single_suggestable_child_fails(self, run_check, make_station):
        rows = [
            make_station(id="100"),
            make_station(id="101", parent_station_id="100"),
            make_station(id="102", parent_station_id="100", is_suggestable="f"),
        ]
        violations = run_check(suggestable.check_meta_station_children, rows)
        assert len(violations) == 1
        assert violations[0].station_id == "100"
        assert violations[0].message == "The meta station 100 is suggestable and has only 1 child."

    def test_parent_with_no_suggestable_child(self, run_check, make_station):
        rows = [make_station(id="100"), make_station(id="101", parent_station_id="100", is_suggestable="f")]
        violations = run_check(suggestable.check_meta_station_children, rows)
        assert "has only 0 child" in violations[0].message

    def test_non_suggestable_meta_station_ignored(self, run_check, make_station):
        rows = [make_station(id="100", is_suggestable="f"), make_station(id="101", parent_station_id="100")]
        assert run_check(suggestable.check_meta_station_children, rows) == []

    def test_station_without_children_ignored(self, run_check, make_station):
        assert run_check(suggestable.check_meta_station_children, [make_station(id="100")]) == []

    def test_configured_minimum(self, run_check, make_station):
        config = ValidationConfig(meta_station_min_children=1)
        rows = [make_station(id="100"), make_station(id="101", parent_station_id="100")]
        assert run_check(suggestable.check_meta_station_children, rows, config) == []
