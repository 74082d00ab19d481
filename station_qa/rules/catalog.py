"""The ordered rule catalog."""

from __future__ import annotations

from station_qa.core.config import ValidationConfig
from station_qa.rules import fields, structure, suggestable
from station_qa.rules.base import Rule
from station_qa.rules.carriers import carrier_rule
from station_qa.rules.hierarchy import check_parent_hierarchy


def default_rules(config: ValidationConfig) -> list[Rule]:
    """Rules in report order; one `carrier:<name>` rule per configured carrier."""
    rules = [
        Rule("header", structure.check_header, description="header matches the stations schema"),
        Rule("arity", structure.check_arity, description="every record has the expected field count"),
    ]
    rules += [carrier_rule(c) for c in config.carriers]
    rules += [
        Rule("id_unique", structure.check_id_unique, description="ids are present and unique"),
        Rule(
            "uic_unique",
            structure.check_uic_unique,
            fatal=config.uic_duplicates_fatal,
            description="uic codes are unique",
        ),
        Rule("coordinates", fields.check_coordinates, description="coordinates are paired and in the bounding box"),
        Rule("sorted_by_id", structure.check_sorted_by_id, description="records are sorted by integer id"),
        Rule("is_suggestable_domain", fields.check_is_suggestable, description="is_suggestable is t or f"),
        Rule("is_main_station_domain", fields.check_is_main_station, description="is_main_station is t or f"),
        Rule("country", fields.check_country, description="country is two uppercase letters"),
        Rule("time_zone", fields.check_time_zone, description="time_zone is set"),
        Rule("suggestable_has_name", suggestable.check_has_name),
        Rule("suggestable_name_unique", suggestable.check_name_unique),
        Rule("info_differs_from_name", suggestable.check_info_differs_from_name),
        Rule("suggestable_has_carrier", suggestable.check_has_carrier),
        Rule("idtgv_matches_sncf", fields.check_idtgv_matches_sncf, description="idtgv_id is sncf_id[2:6]"),
        Rule("parent_station", suggestable.check_parent_station),
        Rule("slug_matches_name", suggestable.check_slug_matches_name),
        Rule("slug_unique", suggestable.check_slug_unique),
        Rule("meta_station_children", suggestable.check_meta_station_children),
        Rule("uic8_sncf", fields.check_uic8_sncf, description="uic is uic8_sncf without its check digit"),
        Rule("parent_hierarchy", check_parent_hierarchy, description="parent links resolve and have no cycles"),
    ]
    return rules
