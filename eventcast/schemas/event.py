"""Event schema.

An ``Event`` is the provider-neutral description of one tracked occurrence.
It is frozen: adapters that need extra properties derive a new event with
``with_props`` instead of mutating the caller's instance.
"""

from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

PAGEVIEW = "pageview"

PropValue = Union[str, bool, int, float, None]


class Event(BaseModel):
    """A pageview or custom action to be forwarded to an analytics backend."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Human-readable label, e.g. a link name.")
    type: str = Field(
        ...,
        min_length=1,
        description="Event classification. 'pageview' is reserved; anything else is custom.",
    )
    url: str = Field(..., min_length=1, description="Absolute URL where the event occurred.")
    value: Optional[Union[int, float]] = Field(None, description="Optional numeric weight.")
    props: Dict[str, PropValue] = Field(
        default_factory=dict,
        description="Open-ended scalar properties (screenWidth, referrer, account, ...).",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require a scheme and a host so backends can split host and path."""
        parts = urlsplit(v)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"Event url must be absolute, got {v!r}")
        return v

    @field_validator("props", mode="before")
    @classmethod
    def validate_props(cls, v: Any) -> Any:
        """Reject nested values; props are a flat mapping of scalars."""
        if v is None:
            return {}
        if isinstance(v, dict):
            for key, item in v.items():
                if isinstance(item, (dict, list, tuple, set, BaseModel)):
                    raise ValueError(f"Prop '{key}' must be a scalar, got {type(item).__name__}")
        return v

    @property
    def is_pageview(self) -> bool:
        """True for the reserved ``pageview`` type."""
        return self.type == PAGEVIEW

    def get_prop(self, key: str, default: PropValue = None) -> PropValue:
        """Return a single prop, or ``default`` when it is absent."""
        return self.props.get(key, default)

    def with_props(self, **extra: PropValue) -> "Event":
        """Return a copy whose props are merged with ``extra`` (extra wins)."""
        return self.model_copy(update={"props": {**self.props, **extra}})
