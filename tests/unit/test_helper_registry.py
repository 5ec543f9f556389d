from concurrent.futures import Future

from assemble_helpers.registry import HelperRegistry


def test_register_decorator_and_lookup() -> None:
    registry = HelperRegistry()

    @registry.register("shout")
    def shout(ctx, text, *, options=None):
        return text.upper()

    assert registry.get("shout") is shout
    assert "shout" in registry
    assert not registry.is_async("shout")
    assert registry.get("missing") is None


def test_async_registration_replaces_sync() -> None:
    registry = HelperRegistry()
    registry.add("render", lambda ctx: "sync")

    @registry.register("render", is_async=True)
    def render(ctx, *, options=None):
        future = Future()
        future.set_result("async")
        return future

    assert registry.is_async("render")
    assert registry.sync == {}
    assert registry.async_ == {"render": render}
    assert len(registry) == 1


def test_list_helpers_sync_first() -> None:
    registry = HelperRegistry()
    registry.add_async("b", lambda ctx: None)
    registry.add("a", lambda ctx: None)
    assert registry.list_helpers() == ["a", "b"]


def test_views_are_copies() -> None:
    registry = HelperRegistry()
    registry.add("a", lambda ctx: None)
    registry.sync.clear()
    assert "a" in registry
