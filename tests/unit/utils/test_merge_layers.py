from assemble_helpers.utils.merge import deep_merge, merge_arrays, merge_layers


def test_merge_layers_later_wins_and_skips_none() -> None:
    assert merge_layers({"a": 1, "b": 1}, None, {}, {"b": 2, "c": 3}) == {"a": 1, "b": 2, "c": 3}


def test_merge_layers_is_shallow() -> None:
    assert merge_layers({"a": {"x": 1}}, {"a": {"y": 2}}) == {"a": {"y": 2}}


def test_deep_merge_nested_dicts_without_mutating() -> None:
    base = {"match": {"nocase": False, "fields": ["stem"]}}
    result = deep_merge(base, {"match": {"nocase": True}})
    assert result == {"match": {"nocase": True, "fields": ["stem"]}}
    assert base["match"]["nocase"] is False


def test_merge_arrays_replace_and_append() -> None:
    assert merge_arrays(["key", "stem"], ["path"]) == ["path"]
    assert merge_arrays(["key"], ["+", "data.slug"]) == ["key", "data.slug"]
    assert deep_merge({"f": ["a"]}, {"f": ["+", "b"]}) == {"f": ["a", "b"]}
