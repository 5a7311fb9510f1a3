from decimal import Decimal

from django import forms

from .billing import BillingAdjustments, CheckinChecklist
from .constants import PaymentMethod, ZERO


def _amount_field(label):
    return forms.DecimalField(
        label=label,
        required=False,
        min_value=Decimal("0"),
        max_digits=12,
        decimal_places=2,
        widget=forms.NumberInput(attrs={"class": "form-control", "min": "0", "step": "0.01"}),
    )


class _StayBillingForm(forms.Form):
    """Fields shared by check-in and checkout."""

    payment_amount = _amount_field("Payment collected now")
    payment_method = forms.ChoiceField(
        choices=[("", "---------")] + list(PaymentMethod.choices),
        required=False,
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    additional_charges = _amount_field("Additional charges")
    payment_remarks = forms.CharField(max_length=200, required=False)
    staff_notes = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))

    AMOUNT_FIELDS = ("payment_amount", "additional_charges")

    def clean(self):
        cleaned = super().clean()
        # blank amount -> 0
        for name in self.AMOUNT_FIELDS:
            if name in cleaned and cleaned[name] is None:
                cleaned[name] = ZERO

        if (cleaned.get("payment_amount") or ZERO) > 0 and not cleaned.get("payment_method"):
            self.add_error("payment_method", "Select a payment method for the amount collected.")
        return cleaned

    def payment_method_or_default(self):
        return self.cleaned_data.get("payment_method") or PaymentMethod.CASH


class CheckinForm(_StayBillingForm):
    early_checkin_fee = _amount_field("Early check-in fee")
    late_checkin_fee = _amount_field("Late check-in fee")

    guest_confirmation = forms.BooleanField(required=False)
    identity_verified = forms.BooleanField(required=False)
    key_card_issued = forms.BooleanField(required=False)
    room_inspected = forms.BooleanField(required=False)

    AMOUNT_FIELDS = _StayBillingForm.AMOUNT_FIELDS + ("early_checkin_fee", "late_checkin_fee")

    def to_adjustments(self) -> BillingAdjustments:
        cd = self.cleaned_data
        return BillingAdjustments(
            early_arrival_fee=cd["early_checkin_fee"],
            late_arrival_fee=cd["late_checkin_fee"],
            misc_additional_charges=cd["additional_charges"],
            payment_collected_now=cd["payment_amount"],
            payment_method=self.payment_method_or_default(),
        )

    def to_checklist(self) -> CheckinChecklist:
        cd = self.cleaned_data
        return CheckinChecklist(
            identity_verified=cd.get("identity_verified", False),
            guest_confirmed=cd.get("guest_confirmation", False),
            room_inspected=cd.get("room_inspected", False),
            key_card_issued=cd.get("key_card_issued", False),
        )


class CheckoutForm(_StayBillingForm):
    late_checkout_fee = _amount_field("Late checkout fee")
    damage_fee = _amount_field("Damage fee")
    damage_description = forms.CharField(max_length=500, required=False)

    AMOUNT_FIELDS = _StayBillingForm.AMOUNT_FIELDS + ("late_checkout_fee", "damage_fee")

    def to_adjustments(self) -> BillingAdjustments:
        cd = self.cleaned_data
        return BillingAdjustments(
            late_departure_fee=cd["late_checkout_fee"],
            damage_fee=cd["damage_fee"],
            misc_additional_charges=cd["additional_charges"],
            payment_collected_now=cd["payment_amount"],
            payment_method=self.payment_method_or_default(),
        )
