import math

import pytest

from loxcore.values import (
    NIL, BoolVal, NilVal, NumberVal, TextVal,
    format_number, from_python, is_equal, is_truthy, stringify, type_name,
)


def test_only_nil_and_false_are_falsy():
    assert is_truthy(NIL) is False
    assert is_truthy(BoolVal(False)) is False
    assert is_truthy(BoolVal(True)) is True
    assert is_truthy(NumberVal(0.0)) is True
    assert is_truthy(TextVal('')) is True


def test_nil_is_a_singleton():
    assert NilVal() is NIL


def test_equality_within_a_variant():
    assert is_equal(NIL, NIL)
    assert is_equal(NumberVal(1.0), NumberVal(1.0))
    assert is_equal(TextVal('ab'), TextVal('ab'))
    assert is_equal(BoolVal(True), BoolVal(True))
    assert not is_equal(NumberVal(1.0), NumberVal(2.0))
    assert not is_equal(TextVal('a'), TextVal('A'))


def test_equality_across_variants_is_false():
    assert not is_equal(NIL, NumberVal(0.0))
    assert not is_equal(NumberVal(0.0), NIL)
    assert not is_equal(NIL, BoolVal(False))
    assert not is_equal(NumberVal(1.0), TextVal('1'))
    assert not is_equal(BoolVal(True), NumberVal(1.0))


def test_number_equality_is_numeric():
    assert not is_equal(NumberVal(math.nan), NumberVal(math.nan))
    assert is_equal(NumberVal(0.0), NumberVal(-0.0))


def test_stringify_numbers_drop_trailing_zero():
    assert stringify(NumberVal(4.0)) == '4'
    assert stringify(NumberVal(4.5)) == '4.5'
    assert stringify(NumberVal(-3.0)) == '-3'
    assert stringify(NumberVal(0.1)) == '0.1'
    assert stringify(NumberVal(-0.0)) == '-0'


def test_stringify_non_finite_numbers():
    assert format_number(math.inf) == 'Infinity'
    assert format_number(-math.inf) == '-Infinity'
    assert format_number(math.nan) == 'NaN'


def test_large_numbers_use_the_shortest_decimal():
    assert format_number(1e7) == '10000000'
    assert format_number(1e21) == '1e+21'
    assert format_number(1.5e-7) == '1.5e-07'


def test_stringify_other_values():
    assert stringify(NIL) == 'nil'
    assert stringify(BoolVal(True)) == 'true'
    assert stringify(BoolVal(False)) == 'false'
    assert stringify(TextVal('hi there')) == 'hi there'


def test_from_python():
    assert from_python(None) is NIL
    assert from_python(True) == BoolVal(True)
    assert from_python(3) == NumberVal(3.0)
    assert from_python('x') == TextVal('x')
    with pytest.raises(TypeError):
        from_python([1, 2])


def test_type_name():
    assert type_name(NIL) == 'nil'
    assert type_name(BoolVal(False)) == 'boolean'
    assert type_name(NumberVal(1.0)) == 'number'
    assert type_name(TextVal('')) == 'string'
