"""URL configuration for the relay."""

from django.urls import path

from vibeprompt.webapp import views

urlpatterns = [
    path("api/chat", views.relay_chat, name="relay_chat"),
]
