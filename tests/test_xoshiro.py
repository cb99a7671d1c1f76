import pytest

from compkit.xoshiro import SplitMix64, Xoshiro256


def test_splitmix_reference_value():
    assert SplitMix64(0).next_u64() == 0xE220A8397B1DCDAF


def test_splitmix_outputs_fit_in_64_bits():
    mixer = SplitMix64(2**64 + 5)
    again = SplitMix64(5)
    for _ in range(20):
        value = mixer.next_u64()
        assert 0 <= value < 2**64
        assert value == again.next_u64()


def test_same_seed_same_sequence():
    a = Xoshiro256(42)
    b = Xoshiro256(42)
    assert [a.next_u64() for _ in range(50)] == [b.next_u64() for _ in range(50)]


def test_different_seeds_differ():
    a = [Xoshiro256(1).next_u64() for _ in range(1)]
    b = [Xoshiro256(2).next_u64() for _ in range(1)]
    assert a[0] != b[0]
    assert 0 <= a[0] < 2**64


def test_ranges():
    rng = Xoshiro256(7)
    usizes = [rng.gen_usize(3, 9) for _ in range(500)]
    assert all(3 <= x < 9 for x in usizes)
    assert set(usizes) == set(range(3, 9))
    signed = [rng.gen_i64(-5, 5) for _ in range(500)]
    assert all(-5 <= x < 5 for x in signed)
    assert min(signed) < 0


def test_floats_in_unit_interval():
    rng = Xoshiro256(11)
    values = [rng.gen_f64() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert 0.3 < sum(values) / len(values) < 0.7


def test_gen_bool_extremes():
    rng = Xoshiro256(3)
    assert not any(rng.gen_bool(0.0) for _ in range(100))
    assert all(rng.gen_bool(1.0) for _ in range(100))


def test_shuffle_is_permutation():
    rng = Xoshiro256(99)
    items = list(range(30))
    rng.shuffle(items)
    assert sorted(items) == list(range(30))
    assert items != list(range(30))


def test_invalid_bounds():
    rng = Xoshiro256(0)
    with pytest.raises(ValueError):
        rng.gen_usize(5, 5)
    with pytest.raises(ValueError):
        rng.gen_i64(3, -3)