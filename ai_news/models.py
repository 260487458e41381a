from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

FIELD_ORDER = ("headline", "category", "summary", "source", "link", "publicationDate")


@dataclass(slots=True)
class NewsItem:
    """A single news item as returned to the caller."""

    headline: Optional[str] = None
    category: Optional[str] = None
    summary: Optional[str] = None
    source: Optional[str] = None
    link: Optional[str] = None
    publication_date: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NewsItem":
        return cls(
            headline=payload.get("headline"),
            category=payload.get("category"),
            summary=payload.get("summary"),
            source=payload.get("source"),
            link=payload.get("link"),
            publication_date=payload.get("publicationDate"),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "headline": self.headline,
            "category": self.category,
            "summary": self.summary,
            "source": self.source,
            "link": self.link,
            "publicationDate": self.publication_date,
        }
