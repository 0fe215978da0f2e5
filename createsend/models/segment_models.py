"""Createsend: Segment Models."""

from typing import List, Optional

from pydantic import Field

from createsend.models.base_models import APIModel


class RuleCreate(APIModel):
    """A single rule, e.g. RuleType ``EmailAddress`` with Clause ``CONTAINS @example.com``."""

    rule_type: str
    clause: str


class RuleGroupCreate(APIModel):
    """Rules within a group are OR'd; groups within a segment are AND'd."""

    rules: List[RuleCreate] = []


class SegmentCreate(APIModel):
    title: str
    rule_groups: Optional[List[RuleGroupCreate]] = None


class SegmentDetail(APIModel):
    active_subscribers: int = 0
    rule_groups: List[RuleGroupCreate] = []
    list_id: str = Field(default="", alias="ListID")
    segment_id: str = Field(default="", alias="SegmentID")
    title: str = ""
