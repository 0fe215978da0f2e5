"""Createsend: Subscriber Endpoints.

Add, update, fetch, unsubscribe, delete and bulk-import subscribers on a
list. Actions that address an existing subscriber pass the email address
as the ``email`` query parameter.
"""

from createsend.connectors.client import CreatesendClient
from createsend.core.logging import get_logger
from createsend.models.subscriber_models import (
    ImportResult,
    ImportSubscribers,
    NewSubscriber,
    Subscriber,
)

logger = get_logger("subscribers")


class SubscriberEndpoints:
    """Subscriber resource actions."""

    def __init__(self, client: CreatesendClient):
        self.client = client

    def add(self, list_id: str, subscriber: NewSubscriber) -> None:
        self.client.request("POST", f"subscribers/{list_id}.json", body=subscriber)

    def resubscribe(self, list_id: str, email: str) -> None:
        """Re-add a previously unsubscribed address to the list."""
        body = NewSubscriber(email_address=email, resubscribe=True)
        self.client.request("POST", f"subscribers/{list_id}.json", body=body)

    def update(self, list_id: str, email: str, subscriber: NewSubscriber) -> None:
        """Update the subscriber currently known by ``email``.

        ``subscriber.email_address`` may differ to change the address.
        """
        self.client.request(
            "PUT",
            f"subscribers/{list_id}.json",
            params={"email": email},
            body=subscriber,
        )

    def get(self, list_id: str, email: str) -> Subscriber:
        return self.client.request(
            "GET",
            f"subscribers/{list_id}.json",
            Subscriber,
            params={"email": email},
        )

    def unsubscribe(self, list_id: str, email: str) -> None:
        """Move a subscriber from Active to Unsubscribed."""
        self.client.request(
            "POST",
            f"subscribers/{list_id}/unsubscribe.json",
            body={"EmailAddress": email},
        )

    def delete(self, list_id: str, email: str) -> None:
        """Remove a subscriber from the list."""
        self.client.request(
            "DELETE",
            f"subscribers/{list_id}.json",
            params={"email": email},
            body={"EmailAddress": email},
        )

    def import_subscribers(
        self, list_id: str, request: ImportSubscribers
    ) -> ImportResult:
        """Add or update many subscribers in one call."""
        result = self.client.request(
            "POST", f"subscribers/{list_id}/import.json", ImportResult, body=request
        )
        logger.info(
            f"Imported {len(request.subscribers)} subscribers into {list_id}: "
            f"{result.total_new_subscribers} new, "
            f"{len(result.failure_details)} failed"
        )
        return result
