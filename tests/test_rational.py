import pytest

from rashunal.rational import Rashunal


def test_normalizes_numerator_and_denominator():
    assert Rashunal(-1, -2) == Rashunal(1, 2)
    b = Rashunal(1, -2)
    assert b.numerator == -1
    assert b.denominator == 2
    assert Rashunal(24, 36) == Rashunal(2, 3)
    d = Rashunal(0, 2)
    assert d.numerator == 0
    assert d.denominator == 1


def test_zero_denominator_raises():
    with pytest.raises(ZeroDivisionError):
        Rashunal(1, 0)


def test_integer_constructor():
    r = Rashunal(7)
    assert (r.numerator, r.denominator) == (7, 1)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Rashunal(1.5, 2)


def test_is_immutable():
    r = Rashunal(1, 2)
    with pytest.raises(AttributeError):
        r.numerator = 3
    assert r.numerator == 1


def test_equal_values_hash_equal():
    assert hash(Rashunal(2, 4)) == hash(Rashunal(1, 2))
    assert len({Rashunal(2, 4), Rashunal(1, 2), Rashunal(-3, -6)}) == 1


def test_repr():
    assert repr(Rashunal(24, 36)) == "Rashunal(2, 3)"


def test_add():
    c = Rashunal(1, 2) + Rashunal(1, 3)
    assert c.numerator == 5
    assert c.denominator == 6
    assert c == Rashunal(5, 6)


def test_sub():
    c = Rashunal(1, 2) - Rashunal(1, 3)
    assert (c.numerator, c.denominator) == (1, 6)


def test_mul():
    c = Rashunal(1, 2) * Rashunal(1, 3)
    assert (c.numerator, c.denominator) == (1, 6)


def test_div():
    c = Rashunal(1, 2) / Rashunal(1, 3)
    assert (c.numerator, c.denominator) == (3, 2)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Rashunal(1, 2) / Rashunal(0, 1)


def test_add_then_sub_round_trip():
    a, b = Rashunal(-7, 12), Rashunal(5, 18)
    assert (a + b) - b == a


def test_operator_with_other_type_unsupported():
    with pytest.raises(TypeError):
        Rashunal(1, 2) + "x"


def test_inv():
    b = Rashunal(1, 2).inverse()
    assert (b.numerator, b.denominator) == (2, 1)


def test_inv_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Rashunal(0, 1).inverse()


def test_inverse_is_involution():
    a = Rashunal(-3, 7)
    assert a.inverse().inverse() == a
    assert a * a.inverse() == Rashunal(1)


def test_mds():
    pivot = Rashunal(3)
    base = Rashunal(2)
    assert pivot.mds(base, pivot, base) == Rashunal(0)
    assert Rashunal(5).mds(Rashunal(4), pivot, base) == Rashunal(-1)
    assert Rashunal(6).mds(Rashunal(1), pivot, base) == Rashunal(9, 2)


def test_mds_with_zero_base_raises():
    with pytest.raises(ZeroDivisionError):
        Rashunal(5).mds(Rashunal(4), Rashunal(3), Rashunal(0))


def test_printed_length():
    assert Rashunal(1, 10).printed_length() == 6
    assert Rashunal(0, 1).printed_length() == 1
    assert Rashunal(10, 1).printed_length() == 2


@pytest.mark.parametrize("n, d", [(-1, 10), (-123, 1), (7, -9), (0, 5), (100, 3)])
def test_printed_length_matches_str(n, d):
    r = Rashunal(n, d)
    assert r.printed_length() == len(str(r))


def test_to_string():
    assert str(Rashunal(1, 10)) == "1 / 10"
    assert str(Rashunal(0, 1)) == "0"
    assert str(Rashunal(10, 1)) == "10"


def test_padded_strings():
    a = Rashunal(1, 10)
    b = Rashunal(10, 1)
    assert a.padded(6) == "1 / 10"
    assert b.padded(6) == "    10"
    assert a.padded(-6) == "1 / 10"
    assert b.padded(-6) == "10    "


def test_padded_too_short_raises():
    with pytest.raises(ValueError):
        Rashunal(1, 10).padded(3)


def test_padded_zero_width_raises():
    with pytest.raises(ValueError):
        Rashunal(0).padded(0)