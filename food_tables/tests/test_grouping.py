"""
Test merging of duplicate meat rows.
"""

from food_tables.grouping import GroupSpec, group_merge

SPEC = GroupSpec(key="name", source="source", target="sources")


def meat(source, name, cooked="Cooked", value=1.0):
    return {"source": source, "name": name, "cooked": cooked, "value": value}


def test_merge_skips_not_available_sources():
    """N/A sources are left out of the merged source list"""
    merged = group_merge([meat("Ocean", "Eel"), meat("N/A", "Eel")], SPEC)

    assert len(merged) == 1
    assert merged[0]["name"] == "Eel"
    assert merged[0]["sources"] == "Ocean"


def test_merge_all_not_available_falls_back_to_name():
    merged = group_merge([meat("N/A", "Roe"), meat("N/A", "Roe")], SPEC)

    assert merged == [{"name": "Roe", "sources": "Roe", "cooked": "Cooked", "value": 1.0}]


def test_merge_joins_sources_and_keeps_first_row():
    """Sources are comma-joined; other fields come from the first row"""
    rows = [
        meat("Pig", "Meat", cooked="Cooked Meat", value=1.0),
        meat("Beefalo", "Meat", cooked="Steak", value=2.0),
        meat("Koalefant", "Meat"),
    ]

    merged = group_merge(rows, SPEC)

    assert merged == [{"name": "Meat", "sources": "Pig,Beefalo,Koalefant", "cooked": "Cooked Meat", "value": 1.0}]


def test_merge_preserves_first_seen_order():
    rows = [meat("Spider", "Monster Meat"), meat("Ocean", "Eel"), meat("Hound", "Monster Meat")]

    merged = group_merge(rows, SPEC)

    assert [m["name"] for m in merged] == ["Monster Meat", "Eel"]
    assert list(merged[0].keys()) == ["name", "sources", "cooked", "value"]
    # Inputs are left untouched
    assert rows[0] == meat("Spider", "Monster Meat")
