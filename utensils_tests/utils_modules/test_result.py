import pytest

from utensils.utils.result import Err, Ok, Result, UnwrapError, as_result


def test_ok() -> None:
    result: Result[int, str] = Ok(1)
    assert result.is_ok()
    assert not result.is_err()
    assert result.ok() == 1
    assert result.err() is None
    assert result.unwrap() == 1
    assert result.unwrap_or(2) == 1
    with pytest.raises(UnwrapError):
        result.unwrap_err()


def test_err() -> None:
    result: Result[int, str] = Err('bad')
    assert result.is_err()
    assert not result.is_ok()
    assert result.ok() is None
    assert result.err() == 'bad'
    assert result.unwrap_or(2) == 2
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap()
    assert exc_info.value.result is result


def test_err_unwrap_chains_exception() -> None:
    error = ValueError('boom')
    with pytest.raises(UnwrapError) as exc_info:
        Err(error).unwrap()
    assert exc_info.value.__cause__ is error


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert hash(Ok(1)) != hash(Err(1))
    assert len({Ok(1), Ok(1), Err(1)}) == 2


def test_as_result() -> None:
    @as_result(ValueError)
    def parse(text: str) -> int:
        return int(text)

    assert parse('12') == Ok(12)
    result = parse('twelve')
    assert isinstance(result.err(), ValueError)


def test_as_result_lets_other_exceptions_through() -> None:
    @as_result(KeyError)
    def fail() -> None:
        raise RuntimeError

    with pytest.raises(RuntimeError):
        fail()


def test_as_result_requires_exception_types() -> None:
    with pytest.raises(TypeError):
        as_result()
    with pytest.raises(TypeError):
        as_result(int)  # type: ignore[type-var]
