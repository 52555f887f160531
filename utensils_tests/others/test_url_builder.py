from decimal import Decimal

from utensils.url_builder import UrlBuilder


def test_empty() -> None:
    assert str(UrlBuilder()) == ''


def test_query_string() -> None:
    assert str(UrlBuilder().add_parameter('test', 'another')) == '?test=another'


def test_query_int() -> None:
    assert str(UrlBuilder().add_parameter('test', 1)) == '?test=1'


def test_base_path_only() -> None:
    assert str(UrlBuilder('test')) == 'test'


def test_base_path_and_query() -> None:
    assert str(UrlBuilder('base').add_parameter('test', 'another')) == 'base?test=another'


def test_append_path_after_parameters() -> None:
    builder = UrlBuilder().add_parameter('test', 'another').append_path('base').append_path('path')
    assert str(builder) == 'basepath?test=another'


def test_multiple_values() -> None:
    builder = UrlBuilder().add_parameter('test', 'another', 'one').add_parameter('test2', 2)
    assert str(builder) == '?test=another,one&test2=2'


def test_multiple_values_last() -> None:
    assert str(UrlBuilder().add_parameter('test', 'another', 'one')) == '?test=another,one'


def test_numbers() -> None:
    builder = (
        UrlBuilder()
        .add_parameter('decimal', Decimal(1))
        .add_parameter('double', 3.333)
        .add_parameter('long', 333366642069)
        .add_parameter('short', 3333)
    )
    assert str(builder) == '?decimal=1&double=3.333&long=333366642069&short=3333'


def test_append_path_segment() -> None:
    builder = UrlBuilder().append_path('test').append_path_segment('endpoint')
    assert str(builder) == 'test/endpoint'


def test_builder_is_reusable() -> None:
    builder = UrlBuilder('api')
    assert str(builder) == 'api'
    builder.append_path_segment('v1').add_parameter('page', 2)
    assert str(builder) == 'api/v1?page=2'
    assert repr(builder) == "UrlBuilder('api/v1?page=2')"


def test_parameter_without_values() -> None:
    builder = UrlBuilder('items').add_parameter('flag').add_parameter('page', 1)
    assert str(builder) == 'items?flag=&page=1'
