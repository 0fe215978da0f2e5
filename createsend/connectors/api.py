"""Createsend: API Facade.

Bundles the resource endpoints over one shared client.
"""

import httpx

from createsend.connectors.campaigns import CampaignEndpoints
from createsend.connectors.client import CreatesendClient
from createsend.connectors.clients import ClientEndpoints
from createsend.connectors.segments import SegmentEndpoints
from createsend.connectors.subscribers import SubscriberEndpoints


class Createsend:
    """Entry point for the Campaign Monitor API.

    >>> with Createsend(api_key="...") as cs:
    ...     for client in cs.clients.list_clients():
    ...         print(client.name)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        access_token: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.client = CreatesendClient(
            api_key,
            base_url,
            access_token=access_token,
            http_client=http_client,
        )
        self.clients = ClientEndpoints(self.client)
        self.campaigns = CampaignEndpoints(self.client)
        self.segments = SegmentEndpoints(self.client)
        self.subscribers = SubscriberEndpoints(self.client)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Createsend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
