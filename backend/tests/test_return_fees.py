from decimal import Decimal

from backend.app.returns.fees import calculate_return_fee, get_effective_return_fee


def test_full_fee_without_original_shipping():
    calc = calculate_return_fee(20, 0)
    assert calc.base_amount == Decimal("20")
    assert calc.effective_fee == Decimal("20")


def test_fee_is_halved_when_order_paid_shipping():
    calc = calculate_return_fee(20, 15)
    assert calc.as_dict() == {"base_amount": Decimal("20.00"), "effective_fee": Decimal("10.00")}


def test_negative_and_non_finite_inputs_clamp_to_zero():
    assert calculate_return_fee(-5, 10).as_dict() == {"base_amount": 0, "effective_fee": 0}
    assert calculate_return_fee(float("nan"), 10).effective_fee == 0
    # Negative shipping counts as no shipping.
    assert calculate_return_fee(20, -3).effective_fee == Decimal("20")
    assert calculate_return_fee(20, float("inf")).effective_fee == Decimal("20")


def test_halving_rounds_to_cents():
    calc = calculate_return_fee(Decimal("15.555"), 1)
    assert calc.base_amount == Decimal("15.56")
    assert calc.effective_fee == Decimal("7.78")


def test_effective_fee_never_exceeds_base():
    for base in (0, Decimal("0.01"), Decimal("0.03"), 19.99, 1000):
        for shipping in (0, Decimal("0.01"), 25):
            calc = calculate_return_fee(base, shipping)
            assert calc.effective_fee <= calc.base_amount


def test_zero_base_fee_is_always_free():
    assert get_effective_return_fee(0, 0) == 0
    assert get_effective_return_fee(0, 30) == 0


def test_get_effective_return_fee_matches_calculation():
    assert get_effective_return_fee("30", "12.5") == Decimal("15.00")


def test_very_large_base_fee_is_quantized_without_error():
    calc = calculate_return_fee(1e30, 0)
    assert calc.base_amount == calc.effective_fee == Decimal("1E+30")
    assert calculate_return_fee(1e30, 5).effective_fee == Decimal("5E+29")
