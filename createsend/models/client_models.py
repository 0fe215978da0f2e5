"""Createsend: Client-Level Models.

Records returned by the account and client listings: clients, their
subscriber lists, campaigns in each state, and templates.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from createsend.core.dates import parse_api_date
from createsend.models.base_models import APIModel


class Client(APIModel):
    """A client of the authenticated account."""

    client_id: str = Field(default="", alias="ClientID")
    name: str = ""


class List(APIModel):
    """A subscriber list belonging to a client."""

    list_id: str = Field(default="", alias="ListID")
    name: str = ""


class ListForEmail(APIModel):
    """A subscriber list together with one email address's subscription to it.

    The schema differs from ``List``.
    """

    list_id: str = Field(default="", alias="ListID")
    list_name: str = ""
    subscriber_state: str = ""
    date_subscriber_added: str = ""

    @property
    def is_subscribed(self) -> bool:
        return self.subscriber_state == "Active"

    @property
    def is_unsubscribed(self) -> bool:
        return self.subscriber_state == "Unsubscribed"

    @property
    def date_subscriber_added_at(self) -> Optional[datetime]:
        if not self.date_subscriber_added:
            return None
        return parse_api_date(self.date_subscriber_added)


class Campaign(APIModel):
    """A sent campaign."""

    from_name: str = ""
    from_email: str = ""
    reply_to: str = ""
    web_version_url: str = Field(default="", alias="WebVersionURL")
    web_version_text_url: str = Field(default="", alias="WebVersionTextURL")
    campaign_id: str = Field(default="", alias="CampaignID")
    subject: str = ""
    name: str = ""
    sent_date: str = ""
    total_recipients: int = 0


class ScheduledCampaign(APIModel):
    date_scheduled: str = ""
    scheduled_time_zone: str = ""
    campaign_id: str = Field(default="", alias="CampaignID")
    name: str = ""
    subject: str = ""
    from_name: str = ""
    from_email: str = ""
    reply_to: str = ""
    date_created: str = ""
    preview_url: str = Field(default="", alias="PreviewURL")
    preview_text_url: str = Field(default="", alias="PreviewTextURL")


class DraftCampaign(APIModel):
    campaign_id: str = Field(default="", alias="CampaignID")
    name: str = ""
    subject: str = ""
    from_name: str = ""
    from_email: str = ""
    reply_to: str = ""
    date_created: str = ""
    preview_url: str = Field(default="", alias="PreviewURL")
    preview_text_url: str = Field(default="", alias="PreviewTextURL")


class Template(APIModel):
    template_id: str = Field(default="", alias="TemplateID")
    name: str = ""
    preview_url: str = Field(default="", alias="PreviewURL")
    screenshot_url: str = Field(default="", alias="ScreenshotURL")
