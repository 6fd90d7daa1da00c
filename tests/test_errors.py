import pytest

from ingresskit.errors import AggregateError, ErrorCollector


def test_empty_collector_has_no_result():
    collector = ErrorCollector()
    assert collector.result() is None
    assert len(collector) == 0


def test_none_values_are_ignored():
    collector = ErrorCollector()
    collector.add(None, None)
    assert collector.result() is None
    assert not collector


def test_result_joins_messages_with_leading_newlines():
    collector = ErrorCollector()
    collector.add(ValueError("first"), None, KeyError("second"))
    result = collector.result()
    assert isinstance(result, AggregateError)
    assert str(result) == "\nfirst\n'second'"
    assert len(result.errors) == 2


def test_add_accumulates_across_calls():
    collector = ErrorCollector()
    first = RuntimeError("a")
    second = RuntimeError("b")
    collector.add(first)
    collector.add(second)
    assert list(collector) == [first, second]
    assert collector.result().errors == (first, second)


def test_result_can_be_raised():
    collector = ErrorCollector()
    problem = OSError("disk")
    collector.add(problem)
    result = collector.result()
    assert str(result) == "\ndisk"
    assert result.errors == (problem,)
    with pytest.raises(AggregateError) as info:
        raise result
    assert info.value is result