import datetime
import math
import re


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def parse_date(value: str) -> datetime.datetime:
    """Parse an ISO date or datetime string; naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def format_date(value: str) -> str:
    """Render an ISO date (or datetime) string as e.g. "January 1, 2024"."""
    parsed = parse_date(value)
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def strip_xml_illegal(text: str) -> str:
    """Drop characters that XML 1.0 documents cannot contain."""
    return _XML_ILLEGAL.sub("", text)
