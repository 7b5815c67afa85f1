from django.urls import path

from . import consumers

websocket_urlpatterns = [
    path('ws/persone/', consumers.PersoneConsumer.as_asgi()),
]
