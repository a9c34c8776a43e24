import pytest

from src.graph import MappingFrozenError, NodeMapping


def test_ids_follow_first_occurrence_order():
    mapping = NodeMapping()
    assert mapping.get_or_create("b") == (0, True)
    assert mapping.get_or_create("a") == (1, True)
    assert mapping.get_or_create("b") == (0, False)
    assert list(mapping) == ["b", "a"]
    assert list(mapping.items()) == [("b", 0), ("a", 1)]
    assert len(mapping) == 2


def test_forward_and_reverse_lookup_agree():
    mapping = NodeMapping()
    for item in ["x", "y", "x", "z"]:
        mapping.get_or_create(item)
    for item, node in mapping.items():
        assert mapping[item] == node
        assert mapping.item_for(node) == item
    assert mapping.get("missing") is None
    assert mapping.item_for(3) is None
    assert mapping.item_for(-1) is None
    assert "x" in mapping and "missing" not in mapping


def test_frozen_mapping_rejects_new_items_only():
    mapping = NodeMapping()
    mapping.get_or_create("a")
    mapping.freeze()
    assert mapping.frozen
    assert mapping.get_or_create("a") == (0, False)
    with pytest.raises(MappingFrozenError):
        mapping.get_or_create("b")
    assert len(mapping) == 1
