"""Prompt and request payload for the recent-news query."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, Tuple

from .models import FIELD_ORDER

DATE_FORMAT = "%Y-%m-%d"

PREFERRED_OUTLETS = (
    "TechCrunch",
    "The Verge",
    "MIT Technology Review",
    "Financial Times",
    "Reuters",
    "Bloomberg",
)

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {name: {"type": "STRING"} for name in FIELD_ORDER},
        "propertyOrdering": list(FIELD_ORDER),
    },
}


def reference_dates(now: datetime) -> Tuple[str, str]:
    """Return ``(today, yesterday)`` as ``YYYY-MM-DD`` strings for ``now``."""
    today = now.date()
    yesterday = today - timedelta(days=1)
    return today.strftime(DATE_FORMAT), yesterday.strftime(DATE_FORMAT)


def build_prompt(today: str, yesterday: str, language: str = "English") -> str:
    outlets = ", ".join(PREFERRED_OUTLETS)
    return (
        "Find the 3 to 5 most notable news stories of the current day about artificial intelligence "
        "and relevant AI companies.\n"
        "Focus areas: technological breakthroughs, company developments, market-moving events.\n"
        "Geographic focus: USA, Europe.\n"
        f"Prioritize reputable tech and business outlets such as {outlets}, "
        "and well-regarded specialist AI blogs and newsletters.\n"
        f"**Important:** Only consider articles published on {today} or {yesterday}.\n"
        "\n"
        "For each story return the following fields in JSON format:\n"
        "{\n"
        f'    "headline": "Short, meaningful title of the story in {language}.",\n'
        f'    "category": "A short label in {language} stating whether it is a \'Technology\', '
        "'Company' or 'Market' story.\",\n"
        f'    "summary": "A concise summary (at most 70-100 words) in {language} highlighting the key '
        'facts and why they matter.",\n'
        '    "source": "Name of the original source (e.g. TechCrunch).",\n'
        '    "link": "A direct, clickable link to the full article at the original source.",\n'
        '    "publicationDate": "Publication date in the format YYYY-MM-DD."\n'
        "}\n"
        "Return only the JSON array, without any additional text."
    )


def build_payload(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
        },
    }
