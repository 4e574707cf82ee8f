import pytest

from globkit import caseless

@pytest.mark.parametrize('a, b', [
    ('a', 'a'),
    ('a', 'A'),
    ('Z', 'z'),
    ('ä', 'Ä'),
    ('1', '1'),
    ('*', '*'),
])
def test_chars_equal(a, b):
    assert caseless.chars_equal(a, b)
    assert caseless.chars_equal(b, a)

@pytest.mark.parametrize('a, b', [
    ('a', 'b'),
    ('a', 'B'),
    ('1', '2'),
    ('/', '\\'),
])
def test_chars_not_equal(a, b):
    assert not caseless.chars_equal(a, b)
