# frontoffice/consumers.py
from asgiref.sync import sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .decorators import is_front_desk_user
from .realtime import BOARD_GROUP, build_board_state


class FrontDeskConsumer(AsyncJsonWebsocketConsumer):
    """
    Live room board for the front desk.
    Only authenticated front-desk staff may connect.
    """

    async def connect(self):
        user = self.scope.get("user")
        if not user or not user.is_authenticated or not is_front_desk_user(user):
            await self.close()
            return

        self.group_name = BOARD_GROUP
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

        # Initial board state
        data = await sync_to_async(build_board_state)()
        await self.send_json({
            "type": "board_state",
            "data": data,
        })

    async def disconnect(self, close_code):
        if hasattr(self, "group_name"):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)

    # === Group event handler ===
    async def board_push(self, event):
        """Forwards a board.push payload to the browser."""
        payload = event.get("payload") or {}
        await self.send_json(payload)
