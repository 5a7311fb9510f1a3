from decimal import Decimal

from frontoffice.constants import PaymentMethod
from frontoffice.forms import CheckinForm, CheckoutForm


def test_blank_amounts_become_zero():
    form = CheckinForm({"identity_verified": "on", "guest_confirmation": "on"})
    assert form.is_valid(), form.errors
    adj = form.to_adjustments()
    assert adj.early_arrival_fee == Decimal("0")
    assert adj.late_arrival_fee == Decimal("0")
    assert adj.payment_collected_now == Decimal("0")
    assert adj.payment_method == PaymentMethod.CASH


def test_payment_requires_method():
    form = CheckoutForm({"payment_amount": "1500"})
    assert not form.is_valid()
    assert "payment_method" in form.errors


def test_negative_fee_rejected():
    form = CheckoutForm({"damage_fee": "-10"})
    assert not form.is_valid()
    assert "damage_fee" in form.errors


def test_unknown_payment_method_rejected():
    form = CheckinForm({"payment_amount": "10", "payment_method": "CHEQUE"})
    assert not form.is_valid()
    assert "payment_method" in form.errors


def test_checkin_checklist_from_json_booleans():
    form = CheckinForm({
        "identity_verified": True,
        "guest_confirmation": False,
        "room_inspected": True,
        "late_checkin_fee": 2000,
    })
    assert form.is_valid(), form.errors
    checklist = form.to_checklist()
    assert checklist.identity_verified is True
    assert checklist.guest_confirmed is False
    assert checklist.room_inspected is True
    assert checklist.key_card_issued is False
    assert form.to_adjustments().late_arrival_fee == Decimal("2000")


def test_checkout_adjustments():
    form = CheckoutForm({
        "late_checkout_fee": "150",
        "damage_fee": "2000.50",
        "additional_charges": "300",
        "payment_amount": "5000",
        "payment_method": "CREDIT_CARD",
    })
    assert form.is_valid(), form.errors
    adj = form.to_adjustments()
    assert adj.late_departure_fee == Decimal("150")
    assert adj.damage_fee == Decimal("2000.50")
    assert adj.misc_additional_charges == Decimal("300")
    assert adj.payment_collected_now == Decimal("5000")
    assert adj.payment_method == PaymentMethod.CREDIT_CARD
    assert adj.fees_total() == Decimal("2450.50")
