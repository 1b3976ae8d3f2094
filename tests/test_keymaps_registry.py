import pytest

from blob_editor.actions import render_usage
from blob_editor.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_registry(*action_ids: str) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in action_ids or ("core.test",):
        registry.register_action(make_action(action_id))
    return registry


def test_register_binding_success() -> None:
    registry = make_registry()
    binding = Binding(key="x", action_id="core.test")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.lookup("x") is registry.get_action("core.test")


def test_register_binding_conflict_detection() -> None:
    registry = make_registry("core.one", "core.two")
    registry.register_binding(Binding(key="x", action_id="core.one"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(Binding(key="x", action_id="core.two"))

    assert excinfo.value.existing.action_id == "core.one"


def test_register_binding_with_replace() -> None:
    registry = make_registry("core.one", "core.two")
    registry.register_binding(Binding(key="x", action_id="core.one"))

    registry.register_binding(Binding(key="x", action_id="core.two"), replace=True)

    assert registry.lookup("x").id == "core.two"
    assert registry.stats().binding_count == 1


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(Binding(key="x", action_id="core.missing"))


def test_register_action_twice_requires_replace() -> None:
    registry = make_registry()

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)


def test_unregister_binding() -> None:
    registry = make_registry()
    binding = Binding(key="x", action_id="core.test")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("x")

    assert removed == binding
    assert registry.lookup("x") is None
    assert registry.revision() == before + 1


@pytest.mark.parametrize("key", ["", "ab", "\n"])
def test_binding_rejects_invalid_keys(key: str) -> None:
    with pytest.raises(ValueError):
        Binding(key=key, action_id="core.test")


def test_action_ref_requires_callable() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="core.bad", handler="not callable")  # type: ignore[arg-type]


def test_load_default_keymaps_binds_every_command() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    assert registry.stats().keys == tuple(sorted("nbpildqwh"))
    assert registry.lookup("z") is None


def test_load_default_keymaps_exclude_keys() -> None:
    registry = load_default_keymaps(KeymapRegistry(), exclude_keys=("w",))

    assert registry.lookup("w") is None
    assert registry.lookup("q") is not None


def test_load_default_keymaps_extra_bindings() -> None:
    registry = load_default_keymaps(
        KeymapRegistry(),
        extra_bindings=(Binding(key="x", action_id="core.quit"),),
    )

    assert registry.lookup("x") is registry.lookup("q")


def test_render_usage_lists_bound_letters() -> None:
    usage = render_usage(load_default_keymaps(KeymapRegistry()))

    assert "'n' (next): go to the next line.\n" in usage
    assert "'h' (help): print this message.\n" in usage
    assert "'npi'" in usage
