"""Tests for adapter resolution and the adapter registry."""

import pytest

from endb import Adapter, AdapterRegistry, ConfigurationError, Endb, EndbOptions, MemoryAdapter
from endb.adapters import DEFAULT_ADAPTERS, adapter_name_from_uri, default_registry, resolve_adapter
from endb.adapters.sqlite import SQLiteAdapter


class LabelledAdapter(MemoryAdapter):
    def __init__(self, label: str) -> None:
        super().__init__()
        self.label = label

    @classmethod
    def from_options(cls, options):
        return cls(options.extra("label", "none"))


class TestDefaults:
    def test_registered_names(self):
        assert sorted(default_registry().names()) == [
            "mongo",
            "mongodb",
            "mysql",
            "postgres",
            "postgresql",
            "redis",
            "sqlite",
        ]

    def test_default_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_ADAPTERS["custom"] = "x:y"  # type: ignore[index]

    def test_default_registry_is_fresh_each_time(self):
        registry = default_registry()
        registry.register("custom", MemoryAdapter)
        assert "custom" in registry
        assert "custom" not in default_registry()


class TestResolution:
    def test_no_configuration_uses_memory(self):
        assert isinstance(resolve_adapter(EndbOptions()), MemoryAdapter)

    def test_empty_uri_uses_memory(self):
        assert isinstance(Endb("").adapter, MemoryAdapter)

    def test_uri_scheme_matches_explicit_adapter(self):
        by_uri = Endb("sqlite://file.db")
        by_name = Endb(adapter="sqlite")
        assert isinstance(by_uri.adapter, SQLiteAdapter)
        assert type(by_uri.adapter) is type(by_name.adapter)
        assert by_uri.adapter.db_path == "file.db"
        assert by_name.adapter.db_path == ":memory:"

    def test_uri_keyword_is_equivalent_to_positional(self):
        assert isinstance(Endb(uri="sqlite://file.db").adapter, SQLiteAdapter)

    def test_explicit_adapter_wins_over_uri_scheme(self):
        registry = AdapterRegistry({"a": lambda options: LabelledAdapter("from a")})
        db = Endb("b://ignored", adapter="a", registry=registry)
        assert db.adapter.label == "from a"

    def test_store_wins_over_adapter(self):
        adapter = MemoryAdapter()
        db = Endb(store=adapter, adapter="no-such-adapter")
        assert db.adapter is adapter

    def test_mapping_store_is_wrapped(self):
        shared = {}
        db = Endb(store=shared)
        assert isinstance(db.adapter, MemoryAdapter)
        assert db.adapter.data is shared

    def test_unsupported_store_type(self):
        with pytest.raises(ConfigurationError):
            Endb(store=["not", "a", "store"])

    def test_unknown_adapter(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Endb(adapter="cassandra")
        assert "cassandra" in str(exc_info.value)
        assert "sqlite" in str(exc_info.value)

    def test_unknown_uri_scheme(self):
        with pytest.raises(ConfigurationError):
            Endb("ftp://example.com/data")

    def test_uri_without_scheme(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Endb(":6379")
        assert "Could not infer adapter" in str(exc_info.value)

    def test_invalid_table_name(self):
        with pytest.raises(ConfigurationError):
            Endb("sqlite://file.db", table="entries; DROP TABLE x")


@pytest.mark.parametrize(
    "uri, name",
    [
        ("sqlite://file.db", "sqlite"),
        ("postgresql://user:pw@localhost:5432/app", "postgresql"),
        ("redis://localhost:6379/0", "redis"),
        ("localhost:6379", "localhost"),
    ],
)
def test_adapter_name_from_uri(uri, name):
    assert adapter_name_from_uri(uri) == name


class TestCustomRegistry:
    def test_register_factory(self):
        registry = AdapterRegistry()
        registry.register("custom", lambda options: LabelledAdapter(options.namespace))
        db = Endb("custom://anything", namespace="tenant", registry=registry)
        assert db.adapter.label == "tenant"
        assert db.adapter.namespace == "tenant"

    def test_register_adapter_class_uses_from_options(self):
        registry = AdapterRegistry({"labelled": LabelledAdapter})
        db = Endb(adapter="labelled", label="blue", registry=registry)
        assert db.adapter.label == "blue"

    def test_lazy_reference(self):
        registry = AdapterRegistry({"mem": "endb.adapters.memory:MemoryAdapter"})
        assert isinstance(registry.create("mem", EndbOptions()), MemoryAdapter)

    def test_missing_module(self):
        registry = AdapterRegistry({"ghost": "endb_ghost_driver:GhostAdapter"})
        with pytest.raises(ConfigurationError) as exc_info:
            Endb(adapter="ghost", registry=registry)
        assert "not available" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_missing_attribute(self):
        registry = AdapterRegistry({"ghost": "endb.adapters.memory:GhostAdapter"})
        with pytest.raises(ConfigurationError):
            Endb(adapter="ghost", registry=registry)

    def test_factory_must_return_adapter(self):
        registry = AdapterRegistry({"bad": lambda options: {}})
        with pytest.raises(ConfigurationError) as exc_info:
            Endb(adapter="bad", registry=registry)
        assert "not an Adapter" in str(exc_info.value)

    def test_factory_failure_is_wrapped(self):
        def explode(options):
            raise RuntimeError("driver exploded")

        registry = AdapterRegistry({"boom": explode})
        with pytest.raises(ConfigurationError) as exc_info:
            Endb(adapter="boom", registry=registry)
        assert "driver exploded" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_copy_is_independent(self):
        registry = AdapterRegistry({"mem": MemoryAdapter})
        clone = registry.copy()
        clone.register("other", MemoryAdapter)
        assert registry.names() == ["mem"]
        assert clone.names() == ["mem", "other"]

    def test_subclass_without_overrides_is_abstract(self):
        class Incomplete(Adapter):
            pass

        with pytest.raises(TypeError):
            Incomplete()
