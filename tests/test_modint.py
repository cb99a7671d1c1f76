import pytest

from compkit.modint import ModInt

MOD = ModInt.MOD


def test_reduction_on_construction():
    assert ModInt(MOD) == ModInt.zero()
    assert ModInt(MOD + 1) == ModInt.one()
    assert ModInt(-1).value == MOD - 1


def test_add_sub_round_trip():
    a = ModInt(123456789)
    b = ModInt(MOD - 7)
    assert (a + b) - b == a
    assert (a - b) + b == a
    assert (a - a) == ModInt.zero()


def test_inverse_multiplies_to_one():
    for n in (1, 2, 3, 10**9, MOD - 1):
        x = ModInt(n)
        assert x * x.inv() == ModInt.one()


def test_division_round_trip():
    a = ModInt(987654321)
    b = ModInt(31337)
    assert (a / b) * b == a
    assert 1 / b == b.inv()


def test_pow_matches_repeated_multiplication():
    x = ModInt(12345)
    acc = ModInt.one()
    for k in range(10):
        assert x.pow(k) == acc
        acc = acc * x
    assert x ** 0 == ModInt.one()


def test_fermat():
    x = ModInt(777)
    assert x.pow(MOD - 1) == ModInt.one()
    assert x.pow(MOD - 2) == x.inv()


def test_int_operands_and_negation():
    x = ModInt(5)
    assert x + 3 == 3 + x
    assert 2 * x == x + x
    assert -x + x == ModInt.zero()
    assert int(x * 4) == int(ModInt(20))


def test_errors():
    with pytest.raises(ZeroDivisionError):
        ModInt.zero().inv()
    with pytest.raises(ZeroDivisionError):
        ModInt(4) / ModInt(MOD)
    with pytest.raises(ValueError):
        ModInt(3).pow(-1)