"""Createsend: Client Endpoints.

Account-level client listing and per-client lists, campaigns and templates.
"""

from typing import List as ListOf

from createsend.connectors.client import CreatesendClient
from createsend.models.client_models import (
    Campaign,
    Client,
    DraftCampaign,
    List,
    ListForEmail,
    ScheduledCampaign,
    Template,
)


class ClientEndpoints:
    """Client resource actions."""

    def __init__(self, client: CreatesendClient):
        self.client = client

    def list_clients(self) -> ListOf[Client]:
        """Clients associated with the authenticated account."""
        return self.client.request("GET", "clients.json", ListOf[Client])

    def list_lists(self, client_id: str) -> ListOf[List]:
        """Subscriber lists belonging to a client."""
        return self.client.request(
            "GET", f"clients/{client_id}/lists.json", ListOf[List]
        )

    def lists_for_email(self, client_id: str, email: str) -> ListOf[ListForEmail]:
        """The client's lists on which the email address appears, with its state."""
        return self.client.request(
            "GET",
            f"clients/{client_id}/listsforemail.json",
            ListOf[ListForEmail],
            params={"email": email},
        )

    def campaigns(self, client_id: str) -> ListOf[Campaign]:
        """Sent campaigns."""
        return self.client.request(
            "GET", f"clients/{client_id}/campaigns.json", ListOf[Campaign]
        )

    def scheduled_campaigns(self, client_id: str) -> ListOf[ScheduledCampaign]:
        return self.client.request(
            "GET", f"clients/{client_id}/scheduled.json", ListOf[ScheduledCampaign]
        )

    def draft_campaigns(self, client_id: str) -> ListOf[DraftCampaign]:
        return self.client.request(
            "GET", f"clients/{client_id}/drafts.json", ListOf[DraftCampaign]
        )

    def list_templates(self, client_id: str) -> ListOf[Template]:
        return self.client.request(
            "GET", f"clients/{client_id}/templates.json", ListOf[Template]
        )
