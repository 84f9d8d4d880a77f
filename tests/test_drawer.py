"""Tests for the toolkit independent dictionary drawer."""

import pytest

from sample_types import Character, Element


def make_drawer(host, **kwargs):
    from pyqt_serialdict.editor import SerializedDictionaryDrawer
    return SerializedDictionaryDrawer(host=host, **kwargs)


def make_property(owner, path):
    from pyqt_serialdict.editor import DictionaryProperty
    return DictionaryProperty(owner, path)


def test_first_pass_builds_view_and_warnings(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "resistances")

    assert drawer.on_gui(prop) is False

    view = host.views[-1]
    assert view.property is prop
    assert view.display_header
    assert view.header == "Resistances"
    assert view.empty_label == "Dictionary is empty"
    assert view.key_label is None
    assert view.value_label == "Value"
    assert [(e.key, e.value) for e in view.entries()] == [(Element.FIRE, 0.5)]


def test_view_cached_across_passes(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "resistances")

    drawer.on_gui(prop)
    drawer.on_gui(prop)

    assert host.views[0] is host.views[1]


def test_generic_keys_get_label_and_nested_properties_no_header(host):
    from pyqt_serialdict import SerializedDictionary

    owner = Character(stats=Character(inventory=SerializedDictionary(key_type=tuple, value_type=int)))
    prop = make_property(owner, "stats.inventory")

    make_drawer(host).on_gui(prop)

    view = host.views[-1]
    assert view.key_label == "Key"
    assert not view.display_header


def test_added_entry_uses_unused_enum_key_and_default_value(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "resistances")
    drawer.on_gui(prop)

    host.views[-1].add()
    host.changed = True
    assert drawer.on_gui(prop) is True

    assert prop.keys == [Element.FIRE, Element.WATER]
    assert prop.values == [0.5, 0.0]
    assert character.resistances[Element.WATER] == 0.0


def test_duplicate_key_edit_warns_and_is_shadowed(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "inventory")
    drawer.on_gui(prop)

    view = host.views[-1]
    view.add()
    view.add()
    view.set_value(0, 1)
    view.set_value(1, 2)
    host.changed = True
    drawer.on_gui(prop)

    # Both new keys default to "" so the second one is a duplicate
    assert prop.keys == ["", ""]
    assert [w.text for w in drawer.get_warnings(prop, 1)] == ["Duplicate key"]
    assert drawer.get_warnings(prop, 0) == []
    assert dict(character.inventory.items()) == {"": 1}

    view.set_key(1, "gold")
    host.changed = True
    drawer.on_gui(prop)

    assert drawer.get_warnings(prop, 1) == []
    assert dict(character.inventory.items()) == {"": 1, "gold": 2}

    entries = view.entries()
    assert [e.has_errors for e in entries] == [False, False]


def test_remove_selected_deletes_in_descending_order(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "inventory")
    for key in ["a", "b", "c", "d"]:
        character.inventory[key] = ord(key)
    drawer.on_gui(prop)

    host.views[-1].remove([0, 2, 2])
    host.changed = True
    drawer.on_gui(prop)

    assert prop.keys == ["b", "d"]
    assert list(character.inventory) == ["b", "d"]


def test_reorder_moves_key_and_value(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "inventory")
    character.inventory.update({"a": 1, "b": 2, "c": 3})
    drawer.on_gui(prop)

    host.views[-1].reorder(2, 0)
    host.changed = True
    drawer.on_gui(prop)

    assert prop.keys == ["c", "a", "b"]
    assert prop.values == [3, 1, 2]
    assert list(character.inventory) == ["c", "a", "b"]


def test_unchanged_pass_does_not_apply(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "inventory")
    drawer.on_gui(prop)

    prop.keys.append("ghost")
    prop.values.append(0)
    assert drawer.on_gui(prop) is False
    assert "ghost" not in character.inventory


def test_undo_or_redo_revalidates_and_applies(character, host):
    drawer = make_drawer(host)
    prop = make_property(character, "inventory")
    drawer.on_gui(prop)

    # Simulate an undo restoring persisted data behind the drawer's back
    character.inventory.serialized_keys[:] = ["x", "x"]
    character.inventory.serialized_values[:] = [1, 2]
    host.undo = True

    assert drawer.on_gui(prop) is True
    assert dict(character.inventory.items()) == {"x": 1}
    assert [w.text for w in drawer.get_warnings(prop, 1)] == ["Duplicate key"]


def test_view_recreated_for_disposed_property(host):
    import gc
    from pyqt_serialdict import SerializedDictionary
    from pyqt_serialdict.editor import DrawerStateCache

    states = DrawerStateCache()
    drawer = make_drawer(host, states=states)

    owner = Character(inventory=SerializedDictionary())
    stale = make_property(owner, "inventory")
    drawer.on_gui(stale)
    key = stale.state_key
    del owner
    gc.collect()

    replacement = Character(inventory=SerializedDictionary({"k": 1}))
    fresh = make_property(replacement, "inventory")
    # Force identity reuse the way an id() collision would
    fresh._target_id = key[0]
    drawer.on_gui(fresh)

    assert host.views[-1].property is fresh
    assert len(states) == 1


def test_requires_host():
    from pyqt_serialdict import SerializedDictionary
    from pyqt_serialdict.editor import SerializedDictionaryDrawer

    drawer = SerializedDictionaryDrawer()
    owner = Character(inventory=SerializedDictionary())
    prop = make_property(owner, "inventory")
    with pytest.raises(RuntimeError):
        drawer.on_gui(prop)

    # Nothing is cached for a pass that had no host
    assert len(drawer.states) == 0


def test_uses_registered_host(character, host):
    from pyqt_serialdict.editor import SerializedDictionaryDrawer
    from pyqt_serialdict.protocols import register_inspector_host

    register_inspector_host(host)
    SerializedDictionaryDrawer().on_gui(make_property(character, "inventory"))
    assert len(host.views) == 1


def test_registered_for_all_serialized_dictionaries():
    from pyqt_serialdict import SerializedDictionary
    from pyqt_serialdict.editor import SerializedDictionaryDrawer
    from pyqt_serialdict.protocols import DrawerRegistry

    class Inventory(SerializedDictionary):
        pass

    assert DrawerRegistry.get_drawer(SerializedDictionary) is SerializedDictionaryDrawer
    assert DrawerRegistry.get_drawer(Inventory) is SerializedDictionaryDrawer
    assert DrawerRegistry.get_drawer(dict) is None
