"""Createsend: Campaign Endpoints.

Recipients listing, draft creation and scheduling.
"""

from datetime import datetime

from createsend.connectors.client import CreatesendClient
from createsend.core.dates import format_send_date
from createsend.core.logging import get_logger
from createsend.models.campaign_models import (
    CampaignRecipients,
    CampaignRecipientsOptions,
    CreateCampaign,
    ScheduleCampaign,
)

logger = get_logger("campaigns")


class CampaignEndpoints:
    """Campaign resource actions."""

    def __init__(self, client: CreatesendClient):
        self.client = client

    def recipients(
        self,
        campaign_id: str,
        options: CampaignRecipientsOptions | None = None,
    ) -> CampaignRecipients:
        """Fetch one page of the recipients a campaign was sent to."""
        params = options.to_params() if options else None
        return self.client.request(
            "GET",
            f"campaigns/{campaign_id}/recipients.json",
            CampaignRecipients,
            params=params,
        )

    def create(self, client_id: str, campaign: CreateCampaign) -> str:
        """Create a draft campaign and return its ID."""
        campaign_id = self.client.request(
            "POST", f"campaigns/{client_id}.json", str, body=campaign
        )
        logger.info(f"Created campaign {campaign_id!r} for client {client_id}")
        return campaign_id

    def create_from_template(self, client_id: str, campaign: CreateCampaign) -> str:
        """Create a draft campaign from a template and return its ID."""
        campaign_id = self.client.request(
            "POST", f"campaigns/{client_id}/fromTemplate.json", str, body=campaign
        )
        logger.info(
            f"Created campaign {campaign_id!r} from template {campaign.template_id}"
        )
        return campaign_id

    def schedule(
        self,
        campaign_id: str,
        confirmation_email: str,
        send_date: datetime | None = None,
    ) -> bool:
        """Schedule a draft for sending, immediately when no date is given.

        The date is sent in the account's time zone as ``YYYY-MM-DD HH:MM``.
        """
        body = ScheduleCampaign(
            confirmation_email=confirmation_email,
            send_date=format_send_date(send_date),
        )
        self.client.request("POST", f"campaigns/{campaign_id}/send.json", body=body)
        logger.info(f"Scheduled campaign {campaign_id} for {body.send_date}")
        return True
