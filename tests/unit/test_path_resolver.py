"""
Unit tests for object_validator.engine.path_resolver.
"""
from types import SimpleNamespace

from object_validator.engine.path_resolver import resolve, split_path


class TestSplitPath:
    def test_single_segment(self):
        assert split_path("a") == ["a"]

    def test_dotted_path(self):
        assert split_path("a.b.c") == ["a", "b", "c"]


class TestResolve:
    """Tests for dot-path resolution."""

    def test_top_level_key(self, nested_obj):
        value, found = resolve(nested_obj, "a")
        assert found is True
        assert value is nested_obj["a"]

    def test_nested_leaf(self, nested_obj):
        assert resolve(nested_obj, "a.b.c") == ("Hello", True)

    def test_falsy_values_are_found(self, nested_obj):
        assert resolve(nested_obj, "a.f") == (False, True)
        assert resolve(nested_obj, "a.g") == ("", True)

    def test_none_leaf_is_missing(self, nested_obj):
        assert resolve(nested_obj, "a.h") == (None, False)

    def test_missing_key(self, nested_obj):
        assert resolve(nested_obj, "notThere") == (None, False)

    def test_missing_intermediate_does_not_raise(self, nested_obj):
        assert resolve(nested_obj, "x.y.z") == (None, False)
        assert resolve(nested_obj, "a.h.deeper") == (None, False)

    def test_none_root(self):
        assert resolve(None, "a") == (None, False)

    def test_scalar_intermediate(self, nested_obj):
        assert resolve(nested_obj, "a.b.c.d") == (None, False)
        assert resolve(42, "a.b") == (None, False)

    def test_attribute_lookup(self):
        obj = SimpleNamespace(spouse=SimpleNamespace(name="Jane", age=None))
        assert resolve(obj, "spouse.name") == ("Jane", True)
        assert resolve(obj, "spouse.age") == (None, False)

    def test_mixed_mapping_and_attributes(self):
        obj = SimpleNamespace(meta={"owner": SimpleNamespace(id=7)})
        assert resolve(obj, "meta.owner.id") == (7, True)

    def test_no_index_syntax(self):
        obj = {"items": ["first", "second"]}
        assert resolve(obj, "items.0") == (None, False)
        assert resolve({"items": {"0": "first"}}, "items.0") == ("first", True)

    def test_raising_property_is_missing(self):
        class Record:
            name = "John"

            @property
            def age(self):
                raise ValueError("not loaded")

        assert resolve(Record(), "age") == (None, False)
        assert resolve({"record": Record()}, "record.age.years") == (None, False)
        assert resolve(Record(), "name") == ("John", True)

    def test_raising_getattr_is_missing(self):
        class Lazy:
            def __getattr__(self, name):
                raise RuntimeError(f"cannot load {name}")

        assert resolve(Lazy(), "spouse.name") == (None, False)
