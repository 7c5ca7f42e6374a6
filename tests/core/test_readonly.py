import pytest

from collectforge import (
    ArrayMap,
    GenericCollection,
    GenericMap,
    KeyNotFound,
    ReadonlyMap,
    ReadonlyMapView,
    WeakMap,
)


@pytest.fixture
def source() -> ArrayMap:
    return ArrayMap({"a": 1, "b": 2})


def test_view_reads_through(source):
    view = source.as_readonly()
    assert isinstance(view, ReadonlyMapView)
    assert view.get("a") == 1
    assert view.has("b")
    assert not view.has("c")
    assert len(view) == 2
    assert view["b"] == 2
    assert list(view) == ["a", "b"]


def test_view_sees_later_changes(source):
    view = source.as_readonly()
    source.put("c", 3)
    source.remove("a")
    assert view.keys() == ["b", "c"]


def test_view_has_no_mutators(source):
    view = source.as_readonly()
    assert not isinstance(view, GenericMap)
    for name in ("put", "remove"):
        assert not hasattr(view, name)
    with pytest.raises(TypeError):
        view["z"] = 26
    with pytest.raises(TypeError):
        del view["a"]


def test_view_missing_key(source):
    with pytest.raises(KeyNotFound):
        source.as_readonly().get("missing")


def test_view_queries_return_source_type(source):
    view = source.as_readonly()
    result = view.where(lambda value, key: value > 1)
    assert isinstance(result, ArrayMap)
    assert result.to_dict() == {"b": 2}

    result.put("x", 0)
    assert not source.has("x")

    assert isinstance(WeakMap().as_readonly().map(lambda v, k: v), WeakMap)


def test_view_of_view_is_itself(source):
    view = source.as_readonly()
    assert view.as_readonly() is view


def test_contract_hierarchy():
    m = ArrayMap()
    assert isinstance(m, GenericMap)
    assert isinstance(m, ReadonlyMap)
    assert isinstance(m, GenericCollection)


def test_contracts_are_abstract():
    with pytest.raises(TypeError):
        ReadonlyMap()
    with pytest.raises(TypeError):
        GenericMap()


def test_view_repr(source):
    assert repr(source.as_readonly()) == "ReadonlyMapView(ArrayMap({'a': 1, 'b': 2}))"
