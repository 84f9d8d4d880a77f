"""Tests for protocols, registries and configuration."""


def test_drawer_config_defaults_and_override():
    from pyqt_serialdict.protocols import DrawerConfig, get_drawer_config, set_drawer_config

    assert get_drawer_config() == DrawerConfig()
    assert get_drawer_config().state_idle_limit == 60

    custom = DrawerConfig(empty_label="Nothing here")
    set_drawer_config(custom)
    assert get_drawer_config() is custom


def test_inspector_host_registration(host):
    from pyqt_serialdict.protocols import get_inspector_host, register_inspector_host

    assert get_inspector_host() is None
    register_inspector_host(host)
    assert get_inspector_host() is host


def test_drawer_registry_children_lookup():
    from pyqt_serialdict.protocols import DrawerRegistry, register_property_drawer

    class Base:
        pass

    class Child(Base):
        pass

    class Exact:
        pass

    class ExactChild(Exact):
        pass

    def base_drawer():
        return "base"

    def exact_drawer():
        return "exact"

    register_property_drawer(Base, base_drawer, use_for_children=True)
    register_property_drawer(Exact, exact_drawer)
    try:
        assert DrawerRegistry.get_drawer(Child) is base_drawer
        assert DrawerRegistry.get_drawer(Exact) is exact_drawer
        assert DrawerRegistry.get_drawer(ExactChild) is None
    finally:
        DrawerRegistry.unregister(Base)
        DrawerRegistry.unregister(Exact)


def test_recording_host_satisfies_protocol(host):
    """The drawer only relies on the three protocol methods."""
    from pyqt_serialdict.protocols import InspectorHostProtocol

    for name in ("draw", "is_undo_or_redo", "create_default"):
        assert callable(getattr(host, name))
        assert hasattr(InspectorHostProtocol, name)
