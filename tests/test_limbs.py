import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixbig.limbs import (
    MASK,
    add,
    divmod_basic,
    less_than,
    mul_karatsuba,
    mul_school,
    sub,
)


def to_int(limbs):
    return sum(limb << (64 * pos) for pos, limb in enumerate(limbs))


limb = st.sampled_from([0, 1, MASK - 1, MASK]) | st.integers(0, MASK)


def limb_lists(n):
    return st.lists(limb, min_size=n, max_size=n)


pairs = st.integers(1, 12).flatmap(lambda n: st.tuples(limb_lists(n), limb_lists(n)))


@given(pairs)
def test_less_than_matches_integer_order(pair):
    a, b = pair
    assert less_than(a, b) == (to_int(a) < to_int(b))


@given(limb_lists(4))
def test_less_than_is_false_for_equal_operands(a):
    assert less_than(a, list(a)) is False


@given(pairs)
def test_add_is_addition_modulo_width(pair):
    a, b = pair
    result = add(a, b)
    assert len(result) == len(a)
    assert to_int(result) == (to_int(a) + to_int(b)) % (1 << (64 * len(a)))


def test_carry_propagates_across_limbs():
    assert add([MASK, MASK, 0, 0], [1, 0, 0, 0]) == [0, 0, 1, 0]


@given(pairs)
def test_sub_undoes_add(pair):
    a, b = pair
    assert sub(add(a, b), b) == a


@given(pairs)
def test_sub_is_subtraction_modulo_width(pair):
    a, b = pair
    assert to_int(sub(a, b)) == (to_int(a) - to_int(b)) % (1 << (64 * len(a)))


def test_sub_wraps_below_zero():
    zero = [0, 0, 0, 0]
    one = [1, 0, 0, 0]
    result = sub(zero, one)
    assert result == [MASK] * 4
    assert add(result, one) == zero


@given(pairs)
def test_mul_school_gives_full_product(pair):
    a, b = pair
    product = mul_school(a, b)
    assert len(product) == 2 * len(a)
    assert to_int(product) == to_int(a) * to_int(b)


@given(
    st.sampled_from([4, 8, 9, 12, 16, 33]).flatmap(
        lambda n: st.tuples(limb_lists(n), limb_lists(n))
    )
)
def test_karatsuba_matches_school(pair):
    a, b = pair
    assert mul_karatsuba(a, b) == mul_school(a, b)


@pytest.mark.parametrize("n", [12, 32, 64])
def test_karatsuba_on_all_ones(n):
    ones = [MASK] * n
    product = mul_karatsuba(ones, ones)
    assert product == mul_school(ones, ones)
    assert to_int(product) == to_int(ones) ** 2


@given(pairs.filter(lambda pair: any(pair[1])))
def test_divmod_reconstructs_numerator(pair):
    a, b = pair
    quotient, remainder = divmod_basic(a, b)
    assert len(quotient) == len(remainder) == len(a)
    assert to_int(quotient) * to_int(b) + to_int(remainder) == to_int(a)
    assert to_int(remainder) < to_int(b)


@given(limb_lists(4).filter(any))
def test_divmod_by_itself(a):
    quotient, remainder = divmod_basic(a, a)
    assert to_int(quotient) == 1
    assert not any(remainder)


def test_divmod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divmod_basic([5, 0, 0, 0], [0, 0, 0, 0])


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        add([1, 2], [1, 2, 3])


@pytest.mark.parametrize("bad", [MASK + 1, -1])
def test_out_of_range_limbs_are_rejected(bad):
    with pytest.raises(ValueError):
        mul_school([bad, 0], [0, 0])