"""Createsend: Segment Endpoints."""

from createsend.connectors.client import CreatesendClient
from createsend.core.logging import get_logger
from createsend.models.segment_models import (
    RuleGroupCreate,
    SegmentCreate,
    SegmentDetail,
)

logger = get_logger("segments")


class SegmentEndpoints:
    """Segment resource actions."""

    def __init__(self, client: CreatesendClient):
        self.client = client

    def create(self, list_id: str, segment: SegmentCreate) -> str:
        """Create a segment on a list and return its ID."""
        segment_id = self.client.request(
            "POST", f"segments/{list_id}.json", str, body=segment
        )
        logger.info(f"Created segment {segment_id!r} on list {list_id}")
        return segment_id

    def add_rule_group(self, segment_id: str, rule_group: RuleGroupCreate) -> None:
        """Append a rule group to an existing segment.

        Uses the documented ``POST segments/{id}/rules.json``, which takes a
        single rule group, not the ``segments/{list_id}.json`` creation path.
        """
        self.client.request(
            "POST", f"segments/{segment_id}/rules.json", body=rule_group
        )

    def update(self, segment_id: str, segment: SegmentCreate) -> None:
        """Replace a segment's title and, when given, its rule groups."""
        self.client.request("PUT", f"segments/{segment_id}.json", body=segment)

    def details(self, segment_id: str) -> SegmentDetail:
        return self.client.request(
            "GET", f"segments/{segment_id}.json", SegmentDetail
        )
