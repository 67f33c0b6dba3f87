"""
URL configuration for careerchat project.
"""

from django.urls import path
from careerchat.api import chat, health
from careerchat.api.procedures import rpc_endpoint
from careerchat.account.api import users

urlpatterns = [
    # Health check
    path("api/health/", health.health_check, name="health"),
    # Users
    path("api/users/me/", users.current_user, name="current_user"),
    # Session/message procedures
    path("api/rpc/<str:path>/", rpc_endpoint, name="rpc"),
    # Chat completion
    path("api/chat/", chat.chat, name="chat"),
]
