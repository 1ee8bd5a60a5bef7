import pytest

from commanding.infrastructure.hydration import (
    FilterComposite,
    GetFilter,
    HasFilter,
    IsFilter,
    MethodMatchFilter,
    NumberOfParameterFilter,
)


class Sample:
    def no_args(self):
        pass

    def one_arg(self, value):
        pass

    def optional_arg(self, value=None):
        pass

    def keyword_only(self, *, factor):
        pass

    def variadic(self, *args, **kwargs):
        pass


def test_prefix_filters():
    assert GetFilter().filter("get_name")
    assert not GetFilter().filter("getter")
    assert IsFilter().filter("is_active")
    assert HasFilter().filter("has_items")
    assert not HasFilter().filter("hash")


def test_method_match_filter_exclude_and_include():
    assert not MethodMatchFilter("get_hydrator").filter("get_hydrator")
    assert MethodMatchFilter("get_hydrator").filter("get_name")
    assert MethodMatchFilter("get_name", exclude=False).filter("get_name")
    assert not MethodMatchFilter("get_name", exclude=False).filter("get_other")


def test_number_of_parameter_filter():
    sample = Sample()
    assert NumberOfParameterFilter(0).filter("no_args", sample)
    assert NumberOfParameterFilter(0).filter("optional_arg", sample)
    assert NumberOfParameterFilter(1).filter("one_arg", sample)
    assert not NumberOfParameterFilter(0).filter("one_arg", sample)
    assert not NumberOfParameterFilter(0).filter("missing", sample)
    assert not NumberOfParameterFilter(0).filter("no_args")
    assert not NumberOfParameterFilter(0).filter("keyword_only", sample)
    assert NumberOfParameterFilter(1).filter("keyword_only", sample)
    assert NumberOfParameterFilter(0).filter("variadic", sample)


def test_empty_composite_accepts_everything():
    assert FilterComposite().filter("anything")


def test_composite_or_then_and():
    composite = FilterComposite()
    composite.add_filter("get", GetFilter())
    composite.add_filter("is", IsFilter())
    composite.add_filter("skip", MethodMatchFilter("get_secret"), FilterComposite.CONDITION_AND)

    assert composite.filter("get_name")
    assert composite.filter("is_ready")
    assert not composite.filter("get_secret")
    assert not composite.filter("name")


def test_composite_and_only():
    composite = FilterComposite(and_filters={"skip": MethodMatchFilter("secret")})
    assert composite.filter("name")
    assert not composite.filter("secret")


def test_composite_management():
    composite = FilterComposite()
    composite.add_filter("get", GetFilter())
    assert composite.has_filter("get")

    composite.remove_filter("get")
    assert not composite.has_filter("get")

    with pytest.raises(ValueError):
        composite.add_filter("bad", GetFilter(), condition=3)
    with pytest.raises(TypeError):
        composite.add_filter("bad", lambda name: True)
