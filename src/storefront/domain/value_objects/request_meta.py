"""Request metadata stored alongside submissions."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RequestMeta:
    """Browser details captured when a form is submitted."""

    user_agent: str = ""
    referer: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "RequestMeta":
        if not isinstance(data, dict):
            return cls()
        return cls(
            user_agent=str(data.get("userAgent") or ""),
            referer=str(data.get("referer") or ""),
        )

    def to_dict(self) -> dict[str, str]:
        return {"userAgent": self.user_agent, "referer": self.referer}
