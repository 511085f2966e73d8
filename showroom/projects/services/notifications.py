"""
User-facing notification channel.

The capture side-channel reports outcomes through an injected Notifier
instead of a global alert, so it can run without a request (tests, API).

- MessagesNotifier: Django messages framework, shown as banners on the next
  rendered page
- CollectingNotifier: in-memory list, returned in JSON responses
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from django.contrib import messages

from showroom.projects.dto import NotificationDTO

if TYPE_CHECKING:
    from django.http import HttpRequest


class Notifier(Protocol):
    notifications: list[NotificationDTO]

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class CollectingNotifier:
    """Collects notifications in memory."""

    def __init__(self):
        self.notifications: list[NotificationDTO] = []

    def success(self, message: str) -> None:
        self.notifications.append(NotificationDTO(level="success", message=message))

    def error(self, message: str) -> None:
        self.notifications.append(NotificationDTO(level="error", message=message))


class MessagesNotifier(CollectingNotifier):
    """Forwards notifications to django.contrib.messages for the request."""

    def __init__(self, request: HttpRequest):
        super().__init__()
        self.request = request

    def success(self, message: str) -> None:
        super().success(message)
        messages.success(self.request, message)

    def error(self, message: str) -> None:
        super().error(message)
        messages.error(self.request, message)
