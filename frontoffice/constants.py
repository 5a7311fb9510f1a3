# frontoffice/constants.py
#
# Shared domain enumerations. Models, forms, views and the CSV export all
# read their choices from here.

from decimal import Decimal

from django.db import models


class PaymentMethod(models.TextChoices):
    CASH = "CASH", "Cash"
    CREDIT_CARD = "CREDIT_CARD", "Credit Card"
    DEBIT_CARD = "DEBIT_CARD", "Debit Card"
    BANK_TRANSFER = "BANK_TRANSFER", "Bank Transfer"
    MOBILE_PAYMENT = "MOBILE_PAYMENT", "Mobile Payment"


class ReservationStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    CHECKED_IN = "CHECKED_IN", "Checked In"
    CHECKED_OUT = "CHECKED_OUT", "Checked Out"
    CANCELLED = "CANCELLED", "Cancelled"
    NO_SHOW = "NO_SHOW", "No Show"


class RoomStatus(models.TextChoices):
    AVAILABLE = "AVAILABLE", "Available"
    OCCUPIED = "OCCUPIED", "Occupied"
    CLEANING = "CLEANING", "Cleaning"
    MAINTENANCE = "MAINTENANCE", "Maintenance"
    OUT_OF_ORDER = "OUT_OF_ORDER", "Out of Order"


class PaymentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    PARTIAL = "PARTIAL", "Partial"
    PAID = "PAID", "Paid"


class PaymentType(models.TextChoices):
    ADVANCE_PAYMENT = "ADVANCE_PAYMENT", "Advance Payment"
    CHECKIN_PAYMENT = "CHECKIN_PAYMENT", "Check-in Payment"
    CHECKOUT_PAYMENT = "CHECKOUT_PAYMENT", "Checkout Payment"


class QuickOrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


class IncidentType(models.TextChoices):
    DAMAGE = "DAMAGE", "Damage"
    LOST_ITEM = "LOST_ITEM", "Lost Item"
    COMPLAINT = "COMPLAINT", "Complaint"


class IncidentStatus(models.TextChoices):
    OPEN = "OPEN", "Open"
    RESOLVED = "RESOLVED", "Resolved"


class CashFlowDirection(models.TextChoices):
    INFLOW = "INFLOW", "Inflow"
    OUTFLOW = "OUTFLOW", "Outflow"


# ----------------------------
# Fee policy defaults (override with settings.FRONT_DESK_FEES)
# ----------------------------
DEFAULT_FEE_POLICY = {
    "EARLY_CHECKIN_PER_HOUR": Decimal("100"),
    "LATE_CHECKIN_PER_DAY": Decimal("500"),
    "LATE_CHECKOUT_PER_HOUR": Decimal("50"),
    "STANDARD_CHECKOUT_HOUR": 12,
}

ZERO = Decimal("0")
