"""Schemas for eventcast."""

from eventcast.schemas.event import PAGEVIEW, Event, PropValue

__all__ = ["Event", "PAGEVIEW", "PropValue"]
