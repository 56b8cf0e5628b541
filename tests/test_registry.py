import pytest

from editfilter import PatternCompileError, RegexEditFilter, Verdict
from editfilter.filters import registry


class _AlwaysAccept:
    def __init__(self, pattern, *, flags=0):
        self.pattern = pattern

    def evaluate(self, buffer, dstart, dend, replacement, rstart, rend):
        return Verdict.accept(buffer[:dstart] + replacement[rstart:rend] + buffer[dend:])


def _not_a_filter(pattern, *, flags=0):
    return object()


@pytest.fixture
def always_accept():
    registry.register_filter("Always", _AlwaysAccept)
    yield
    registry.unregister_filter("always")


def test_default_strategy_is_regex():
    assert isinstance(registry.build_filter(None, r"\d*"), RegexEditFilter)
    assert isinstance(registry.build_filter("REGEX", r"\d*"), RegexEditFilter)
    assert "regex" in registry.available_filters()


def test_registered_strategy_is_case_insensitive(always_accept):
    flt = registry.build_filter("ALWAYS", "ignored")
    assert isinstance(flt, _AlwaysAccept)
    assert registry.get_filter_factory("always") is _AlwaysAccept


def test_unknown_strategy():
    with pytest.raises(LookupError):
        registry.build_filter("nope", r"\d*")


def test_empty_name_is_rejected():
    with pytest.raises(ValueError):
        registry.register_filter("  ", _AlwaysAccept)


def test_module_reference_strategy():
    flt = registry.build_filter("editfilter.filters.regex_filter:RegexEditFilter", r"[a-z]*")
    assert flt.evaluate("ab", 2, 2, "c", 0, 1).accepted


def test_bad_module_reference():
    with pytest.raises(ImportError):
        registry.build_filter("editfilter.missing_module:Thing", r"\d*")


def test_factory_must_return_a_filter():
    registry.register_filter("broken", _not_a_filter)
    try:
        with pytest.raises(TypeError):
            registry.build_filter("broken", r"\d*")
    finally:
        registry.unregister_filter("broken")


def test_compile_error_propagates():
    with pytest.raises(PatternCompileError):
        registry.build_filter("regex", "(")
