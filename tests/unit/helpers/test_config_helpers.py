"""Tests for the config, option, enabled and disabled helpers."""
from __future__ import annotations

import pytest

from assemble_helpers.context import HelperOptions
from assemble_helpers.exceptions import HelperArgumentError
from assemble_helpers.helpers.config import config, disabled, enabled, option


class TestConfigHelper:
    def test_config_reads_app_options(self, bare_app, make_ctx) -> None:
        bare_app.option("name", "foo")
        assert config(make_ctx(), "name") == "foo"

    def test_config_reads_cached_data(self, bare_app, make_ctx) -> None:
        bare_app.set_data("name", "foo")
        assert config(make_ctx(), "name") == "foo"

    def test_config_prefers_data_over_options(self, bare_app, make_ctx) -> None:
        bare_app.option("name", "foo")
        bare_app.set_data("name", "bar")
        assert config(make_ctx(), "name") == "bar"

    def test_config_prefers_locals_over_everything(self, bare_app, make_ctx) -> None:
        bare_app.option("name", "foo")
        bare_app.set_data("name", "bar")
        ctx = make_ctx()
        assert config(ctx, {"name": "zzz"}, "name") == "zzz"
        assert config(ctx, "name", {"name": "zzz"}) == "zzz"

    def test_config_hash_overrides_locals(self, make_ctx) -> None:
        options = HelperOptions(name="config", hash={"name": "hash"})
        assert config(make_ctx(), "name", {"name": "locals"}, options=options) == "hash"

    def test_config_supports_dot_notation(self, bare_app, make_ctx) -> None:
        bare_app.option("a", {"b": {"c": "eee"}})
        ctx = make_ctx()
        assert config(ctx, "a.b.c") == "eee"
        assert config(ctx, "a.b") == {"c": "eee"}

    def test_config_missing_property_is_none(self, make_ctx) -> None:
        assert config(make_ctx(), "name") is None

    @pytest.mark.parametrize("prop", [None, 1, {"a": 1}])
    def test_config_rejects_non_string_prop(self, make_ctx, prop) -> None:
        with pytest.raises(TypeError) as exc_info:
            config(make_ctx(), prop)
        assert str(exc_info.value) == 'helper {{config}} expected "prop" to be a string'


class TestOptionHelper:
    def test_option_reads_app_options(self, bare_app, make_ctx) -> None:
        bare_app.option("a", {"b": "c"})
        ctx = make_ctx()
        assert option(ctx, "a") == {"b": "c"}
        assert option(ctx, "a.b") == "c"

    def test_option_ignores_context_data(self, bare_app, make_ctx) -> None:
        bare_app.set_data("name", "bar")
        assert option(make_ctx(), "name") is None

    def test_option_rejects_missing_prop(self, make_ctx) -> None:
        with pytest.raises(HelperArgumentError, match=r'helper \{\{option\}\} expected "prop" to be a string'):
            option(make_ctx())


class TestEnabledDisabledHelpers:
    @pytest.mark.parametrize(
        "value, is_enabled, is_disabled",
        [
            (True, True, False),
            (False, False, True),
            (None, False, False),
            ("true", False, False),
            (1, False, False),
            (0, False, False),
        ],
    )
    def test_enabled_and_disabled_only_match_exact_booleans(
        self, bare_app, make_ctx, value, is_enabled, is_disabled
    ) -> None:
        bare_app.option("navbar", value)
        ctx = make_ctx()
        assert enabled(ctx, "navbar") is is_enabled
        assert disabled(ctx, "navbar") is is_disabled

    def test_enable_and_disable_set_booleans(self, bare_app, make_ctx) -> None:
        bare_app.enable("navbar")
        bare_app.disable("sidebar")
        ctx = make_ctx()
        assert enabled(ctx, "navbar") is True
        assert disabled(ctx, "sidebar") is True

    def test_missing_option_is_neither_enabled_nor_disabled(self, make_ctx) -> None:
        ctx = make_ctx()
        assert enabled(ctx, "navbar") is False
        assert disabled(ctx, "navbar") is False

    @pytest.mark.parametrize("helper, name", [(enabled, "enabled"), (disabled, "disabled")])
    def test_rejects_non_string_prop(self, make_ctx, helper, name) -> None:
        with pytest.raises(TypeError) as exc_info:
            helper(make_ctx(), None)
        assert str(exc_info.value) == f'helper {{{{{name}}}}} expected "prop" to be a string'
