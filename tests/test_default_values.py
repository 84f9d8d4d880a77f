"""Tests for default key/value synthesis."""

from typing import Optional

import pytest

from sample_types import Element, Stats


@pytest.mark.parametrize("element_type, expected", [
    (bool, False),
    (int, 0),
    (float, 0.0),
    (complex, 0j),
    (str, ""),
    (bytes, b""),
    (None, None),
    (Optional[int], None),
    (list, []),
    (dict, {}),
    (tuple, ()),
])
def test_primitive_defaults(element_type, expected):
    from pyqt_serialdict.editor import DefaultValueService

    value = DefaultValueService().default_for(element_type)
    assert value == expected
    assert type(value) is type(expected)


def test_generic_container_defaults():
    from pyqt_serialdict.editor import DefaultValueService

    assert DefaultValueService().default_for(list[int]) == []
    assert DefaultValueService().default_for(set[str]) == set()


def test_enum_picks_first_unused_member():
    from pyqt_serialdict.editor import DefaultValueService

    service = DefaultValueService()
    assert service.default_for(Element) is Element.FIRE
    assert service.default_for(Element, [Element.FIRE]) is Element.WATER
    assert service.default_for(Element, [Element.FIRE, Element.WATER]) is Element.EARTH


def test_enum_wraps_to_first_member_when_all_used():
    from pyqt_serialdict.editor import DefaultValueService

    assert DefaultValueService().default_for(Element, list(Element)) is Element.FIRE


def test_nested_dictionary_default_keeps_element_types():
    from pyqt_serialdict import SerializedDictionary
    from pyqt_serialdict.editor import DefaultValueService

    value = DefaultValueService().default_for(SerializedDictionary[str, int])

    assert isinstance(value, SerializedDictionary)
    assert len(value) == 0
    assert value.key_type is str
    assert value.value_type is int


def test_other_types_delegate_to_host(host):
    from pyqt_serialdict.editor import DefaultStrategy, DefaultValueService

    service = DefaultValueService(host)

    assert service.determine_strategy(Stats) is DefaultStrategy.HOST
    assert service.default_for(Stats) == Stats()
    assert host.created == [Stats]


def test_registered_host_used_when_none_given(host):
    from pyqt_serialdict.editor import DefaultValueService
    from pyqt_serialdict.protocols import register_inspector_host

    register_inspector_host(host)
    assert DefaultValueService().default_for(Stats) == Stats()


def test_missing_host_raises():
    from pyqt_serialdict import DefaultValueError
    from pyqt_serialdict.editor import DefaultValueService

    with pytest.raises(DefaultValueError):
        DefaultValueService().default_for(Stats)
