from django.urls import path

from . import views
from . import views_billing

urlpatterns = [
    # check-in / checkout (GET snapshot, POST submit)
    path("reservations/<int:pk>/checkin/", views.reservation_checkin, name="reservation_checkin"),
    path("reservations/<int:pk>/checkout/", views.reservation_checkout, name="reservation_checkout"),
    path("reservations/<int:pk>/checkin/quote/", views.reservation_quote, {"action": "checkin"},
         name="reservation_checkin_quote"),
    path("reservations/<int:pk>/checkout/quote/", views.reservation_quote, {"action": "checkout"},
         name="reservation_checkout_quote"),

    # billing
    path("billing/", views_billing.billing_list, name="billing_list"),
    path("billing/export.csv", views_billing.billing_export_csv, name="billing_export"),
]
