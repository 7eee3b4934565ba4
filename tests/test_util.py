from mackind.util import DELIMITERS, NOTATIONS, delimiters_in, group


def test_notation_widths():
    assert NOTATIONS == {'': 12, '-': 2, ':': 2, '.': 4}
    assert DELIMITERS == {'-', ':', '.'}


def test_delimiters_in():
    assert delimiters_in('a0b1c2d3e4f5') == set()
    assert delimiters_in('a0-b1-c2-d3-e4-f5') == {'-'}
    assert delimiters_in('a0-b1:c2.d3e4f5') == {'-', ':', '.'}


def test_group():
    assert group('a0b1c2d3e4f5', 2, ':') == 'a0:b1:c2:d3:e4:f5'
    assert group('a0b1c2d3e4f5', 4, '.') == 'a0b1.c2d3.e4f5'
    assert group('a0b1c2d3e4f5', 12, '') == 'a0b1c2d3e4f5'


def test_delimiters_in_is_mutable_set():
    seps = delimiters_in('a0:b1:c2:d3:e4:f5')
    assert seps.pop() == ':'
    assert not seps
