# frontoffice/routing.py
from django.urls import path

from . import consumers

websocket_urlpatterns = [
    path("ws/front-desk/live/", consumers.FrontDeskConsumer.as_asgi()),
]
