"""Createsend: Subscriber Models.

Request bodies leave optional fields as None so they are omitted from the
JSON payload; the API treats a missing key differently from an empty one.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator

from createsend.core.dates import normalize_api_date, parse_api_date
from createsend.models.base_models import APIModel


class CustomField(APIModel):
    """A subscriber custom data field."""

    key: str
    value: Any = None
    clear: Optional[bool] = None


class NewSubscriber(APIModel):
    """A subscriber to add, or the new values for an existing one."""

    email_address: str
    name: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None
    resubscribe: Optional[bool] = None
    restart_subscription_based_autoresponders: Optional[bool] = None
    consent_to_track: Optional[str] = None  # "Yes" | "No" | "Unchanged"


class Subscriber(APIModel):
    """A subscriber's details.

    The API sends ``Date`` (or ``date``) as ``2010-10-25 10:28:00``; it is stored here
    re-rendered as RFC3339 (``2010-10-25T10:28:00Z``).
    """

    email_address: str = ""
    name: str = ""
    date_str: str = Field(
        default="",
        validation_alias=AliasChoices("Date", "date"),
        serialization_alias="Date",
    )
    state: str = ""
    custom_fields: List[CustomField] = []
    reads_email_with: str = ""

    @field_validator("date_str")
    @classmethod
    def _normalize_date(cls, value: str) -> str:
        return normalize_api_date(value)

    @property
    def date(self) -> Optional[datetime]:
        if not self.date_str:
            return None
        return parse_api_date(self.date_str)


class ImportSubscriber(APIModel):
    email_address: str
    name: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None


class ImportSubscribers(APIModel):
    subscribers: List[ImportSubscriber]
    resubscribe: Optional[bool] = None
    queue_subscription_based_auto_responders: Optional[bool] = None
    restart_subscription_based_autoresponders: Optional[bool] = None


class ImportFailure(APIModel):
    email_address: str = ""
    code: int = 0
    message: str = ""


class ImportResult(APIModel):
    """Outcome of a bulk import."""

    failure_details: List[ImportFailure] = []
    total_unique_emails_submitted: int = 0
    total_existing_subscribers: int = 0
    total_new_subscribers: int = 0
    duplicate_emails_in_submission: List[str] = []
