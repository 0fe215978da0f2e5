"""Createsend: Campaign Models."""

from typing import Dict, List, Optional

from pydantic import Field

from createsend.models.base_models import APIModel


# ─────────────────────────────────────────────
# RECIPIENTS
# ─────────────────────────────────────────────


class CampaignRecipientsOptions(APIModel):
    """Paging and ordering for a recipients listing. Unset values are not sent."""

    page: int = 0
    page_size: int = 0
    order_field: str = ""
    order_direction: str = ""  # "asc" | "desc"

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.page > 0:
            params["page"] = str(self.page)
        if self.page_size > 0:
            params["pagesize"] = str(self.page_size)
        if self.order_field:
            params["orderfield"] = self.order_field
        if self.order_direction:
            params["orderdirection"] = self.order_direction
        return params


class Recipient(APIModel):
    email_address: str = ""
    list_id: str = Field(default="", alias="ListID")


class CampaignRecipients(APIModel):
    """One page of a campaign's recipients."""

    results: List[Recipient] = []
    results_ordered_by: str = ""
    order_direction: str = ""
    page_number: int = 0
    page_size: int = 0
    records_on_this_page: int = 0
    total_number_of_records: int = 0
    number_of_pages: int = 0


# ─────────────────────────────────────────────
# TEMPLATE CONTENT
# ─────────────────────────────────────────────


class Singleline(APIModel):
    label: Optional[str] = None
    content: str = ""
    href: Optional[str] = None


class Multiline(APIModel):
    content: str = ""


class Image(APIModel):
    content: str = ""
    alt: Optional[str] = None
    href: Optional[str] = None


class RepeaterItem(APIModel):
    layout: str = ""
    singlelines: List[Singleline] = []
    multilines: List[Multiline] = []
    images: List[Image] = []


class Repeater(APIModel):
    items: List[RepeaterItem] = []


class TemplateContent(APIModel):
    """Editable regions filled in when creating a campaign from a template."""

    singlelines: Optional[List[Singleline]] = None
    multilines: Optional[List[Multiline]] = None
    images: Optional[List[Image]] = None
    repeaters: Optional[List[Repeater]] = None


# ─────────────────────────────────────────────
# CREATE / SCHEDULE
# ─────────────────────────────────────────────


class CreateCampaign(APIModel):
    """Body for creating a draft campaign.

    Plain creation reads content from ``html_url``/``text_url``; creation
    from a template uses ``template_id`` and ``template_content`` instead.
    """

    name: str
    subject: str
    from_name: str
    from_email: str
    reply_to: str
    html_url: Optional[str] = None
    text_url: Optional[str] = None
    list_ids: List[str] = Field(default=[], alias="ListIDs")
    segment_ids: List[str] = Field(default=[], alias="SegmentIDs")
    template_id: str = Field(default="", alias="TemplateID")
    template_content: TemplateContent = Field(default_factory=TemplateContent)


class ScheduleCampaign(APIModel):
    confirmation_email: str
    send_date: str  # "YYYY-MM-DD HH:MM" | "Immediately"
