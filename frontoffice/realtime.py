# frontoffice/realtime.py
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

from .constants import ReservationStatus, RoomStatus
from .models import Reservation, Room

BOARD_GROUP = "front_desk_live"


def serialize_rooms(qs):
    # expect qs = Room.objects.select_related("room_class")
    out = []
    for rm in qs:
        out.append({
            "id": rm.id,
            "number": rm.number,
            "floor": rm.floor,
            "room_class": rm.room_class.name,
            "status": rm.status,  # AVAILABLE / OCCUPIED / CLEANING / ...
        })
    return out


def build_board_state():
    """Room board snapshot grouped by room status, plus today's arrivals/departures."""
    rooms = list(Room.objects.filter(is_active=True).select_related("room_class").order_by("floor", "number"))
    today = timezone.localdate()
    return {
        "rooms": {
            "available": serialize_rooms(r for r in rooms if r.status == RoomStatus.AVAILABLE),
            "occupied": serialize_rooms(r for r in rooms if r.status == RoomStatus.OCCUPIED),
            "other": serialize_rooms(
                r for r in rooms if r.status not in (RoomStatus.AVAILABLE, RoomStatus.OCCUPIED)
            ),
        },
        "counts": {
            "arrivals_today": Reservation.objects.filter(
                status=ReservationStatus.CONFIRMED, check_in_date__date=today
            ).count(),
            "departures_today": Reservation.objects.filter(
                status=ReservationStatus.CHECKED_IN, check_out_date__date=today
            ).count(),
        },
    }


def push_front_desk_board():
    """
    Tell all FrontDeskConsumer clients to refresh their board.
    Called after a check-in or checkout commits.
    """
    layer = get_channel_layer()
    if not layer:
        return

    async_to_sync(layer.group_send)(
        BOARD_GROUP,
        {
            "type": "board.push",  # maps to FrontDeskConsumer.board_push
            "payload": {"type": "board_state", "data": build_board_state()},
        },
    )
