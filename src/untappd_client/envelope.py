"""Models for the JSON envelope wrapping every API response.

```json
{
  "meta": {
    "code": 200,
    "error_detail": "...",
    "error_type": "...",
    "developer_friendly": "...",
    "response_time": {"time": 0.036, "measure": "seconds"}
  },
  "response": {}
}
```

The ``response`` payload is endpoint specific and kept as decoded JSON;
endpoint callers convert it into their own models.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class ResponseTime:
    """Processing time measured by the API."""

    time: float = 0.0
    measure: str = ""

    @property
    def duration(self) -> timedelta:
        if self.measure == "milliseconds":
            return timedelta(milliseconds=self.time)
        return timedelta(seconds=self.time)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ResponseTime":
        if not data:
            return cls()
        return cls(time=float(data.get("time") or 0), measure=data.get("measure") or "")


@dataclass(frozen=True)
class Meta:
    """Status block of the envelope.

    A ``code`` of 0 means the API sent no meta block at all.
    """

    code: int = 0
    error_type: str = ""
    error_detail: str = ""
    developer_friendly: str = ""
    response_time: ResponseTime = field(default_factory=ResponseTime)

    @property
    def is_error(self) -> bool:
        return (self.code != 0 and self.code != 200) or bool(self.error_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Meta":
        if not data:
            return cls()
        return cls(
            code=int(data.get("code") or 0),
            error_type=data.get("error_type") or "",
            error_detail=data.get("error_detail") or "",
            developer_friendly=data.get("developer_friendly") or "",
            response_time=ResponseTime.from_dict(data.get("response_time")),
        )


@dataclass(frozen=True)
class Envelope:
    """Top-level structure of every response.

    ``Envelope()`` is the zero value returned for successful empty bodies.
    """

    meta: Meta = field(default_factory=Meta)
    response: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Envelope":
        return cls(meta=Meta.from_dict(data.get("meta")), response=data.get("response"))
