import pytest
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser

from frontoffice import realtime
from frontoffice.consumers import FrontDeskConsumer
from frontoffice.constants import RoomStatus
from frontoffice.models import Room

pytestmark = pytest.mark.django_db(transaction=True)

PATH = "/ws/front-desk/live/"


def communicator_for(user):
    communicator = WebsocketCommunicator(FrontDeskConsumer.as_asgi(), PATH)
    communicator.scope["user"] = user
    return communicator


@pytest.fixture
def board_rooms(room, room_class):
    Room.objects.create(number="102", floor="1", room_class=room_class, status=RoomStatus.OCCUPIED)
    Room.objects.create(number="103", floor="1", room_class=room_class, status=RoomStatus.CLEANING)


async def test_front_desk_user_gets_initial_board(staff_user, board_rooms):
    communicator = communicator_for(staff_user)
    connected, _ = await communicator.connect()
    assert connected

    message = await communicator.receive_json_from()
    assert message["type"] == "board_state"
    rooms = message["data"]["rooms"]
    assert [r["number"] for r in rooms["available"]] == ["101"]
    assert [r["number"] for r in rooms["occupied"]] == ["102"]
    assert [r["number"] for r in rooms["other"]] == ["103"]
    assert rooms["other"][0]["room_class"] == "Deluxe"
    await communicator.disconnect()


async def test_group_push_is_forwarded(staff_user):
    communicator = communicator_for(staff_user)
    connected, _ = await communicator.connect()
    assert connected
    await communicator.receive_json_from()

    await get_channel_layer().group_send(
        realtime.BOARD_GROUP,
        {"type": "board.push", "payload": {"type": "board_state", "data": {"rooms": {}}}},
    )
    message = await communicator.receive_json_from()
    assert message == {"type": "board_state", "data": {"rooms": {}}}
    await communicator.disconnect()


async def test_anonymous_rejected():
    communicator = communicator_for(AnonymousUser())
    connected, _ = await communicator.connect()
    assert not connected


async def test_other_roles_rejected(guest_role_user):
    communicator = communicator_for(guest_role_user)
    connected, _ = await communicator.connect()
    assert not connected


def test_push_sends_board_state_to_group(monkeypatch, room):
    sent = []

    class RecordingLayer:
        async def group_send(self, group, message):
            sent.append((group, message))

    monkeypatch.setattr(realtime, "get_channel_layer", lambda: RecordingLayer())
    realtime.push_front_desk_board()

    assert len(sent) == 1
    group, message = sent[0]
    assert group == realtime.BOARD_GROUP
    assert message["type"] == "board.push"
    assert message["payload"]["type"] == "board_state"
    assert message["payload"]["data"]["rooms"]["available"][0]["number"] == "101"


def test_push_without_layer_is_noop(monkeypatch):
    monkeypatch.setattr(realtime, "get_channel_layer", lambda: None)
    realtime.push_front_desk_board()


def test_board_counts_today(make_reservation):
    make_reservation()
    state = realtime.build_board_state()
    assert state["counts"]["arrivals_today"] == 1
    assert state["counts"]["departures_today"] == 0
