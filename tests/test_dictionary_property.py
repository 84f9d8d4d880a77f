"""Tests for DictionaryProperty."""

import gc

import pytest

from sample_types import Character, Element


def test_resolves_dotted_path(character):
    from pyqt_serialdict import SerializedDictionary
    from pyqt_serialdict.editor import DictionaryProperty

    character.stats = Character(inventory=SerializedDictionary(key_type=str, value_type=int))
    prop = DictionaryProperty(character, "stats.inventory")

    assert prop.dictionary is character.stats.inventory
    assert prop.depth == 1
    assert prop.name == "inventory"
    assert prop.state_key == (id(character), "stats.inventory")


def test_rejects_non_dictionary_path(character):
    from pyqt_serialdict.editor import DictionaryProperty

    with pytest.raises(TypeError):
        DictionaryProperty(character, "name")
    with pytest.raises(AttributeError):
        DictionaryProperty(character, "missing")


@pytest.mark.parametrize("name, expected", [
    ("resistances", "Resistances"),
    ("_max_hit_points", "Max Hit Points"),
    ("m_Items", "Items"),
    ("lootTable", "Loot Table"),
])
def test_display_name(name, expected):
    from pyqt_serialdict.editor.dictionary_property import nicify_name

    assert nicify_name(name) == expected


def test_list_edits_apply_to_runtime_map(character):
    from pyqt_serialdict.editor import DictionaryProperty

    prop = DictionaryProperty(character, "resistances")
    prop.insert_entry(1, Element.WATER, 0.25)
    prop.set_value(0, 0.75)

    assert prop.has_modified_properties
    assert Element.WATER not in character.resistances

    prop.apply_modified_properties()

    assert not prop.has_modified_properties
    assert dict(character.resistances.items()) == {Element.FIRE: 0.75, Element.WATER: 0.25}


def test_move_and_delete_keep_lists_parallel(character):
    from pyqt_serialdict.editor import DictionaryProperty

    prop = DictionaryProperty(character, "inventory")
    for index, name in enumerate(["sword", "shield", "potion"]):
        prop.insert_entry(index, name, index)

    prop.move_entry(0, 2)
    assert prop.keys == ["shield", "potion", "sword"]
    assert prop.values == [1, 2, 0]

    prop.delete_entry(1)
    assert prop.keys == ["shield", "sword"]
    assert prop.values == [1, 0]


def test_disposed_when_owner_collected():
    from pyqt_serialdict import PropertyDisposedError, SerializedDictionary
    from pyqt_serialdict.editor import DictionaryProperty

    owner = Character(inventory=SerializedDictionary())
    prop = DictionaryProperty(owner, "inventory")
    assert not prop.is_disposed

    del owner
    gc.collect()

    assert prop.is_disposed
    with pytest.raises(PropertyDisposedError):
        prop.dictionary
