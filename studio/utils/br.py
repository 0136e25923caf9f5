# studio/utils/br.py
import re
from datetime import date, datetime
from urllib.parse import quote


def only_digits(s: str | None) -> str:
    return re.sub(r"\D+", "", s or "")


def normalize_mobile_phone(value: str | None) -> str | None:
    # wa.me aceita só dígitos (DDI opcional)
    digits = only_digits(value)
    return digits or None


def parse_iso(value) -> date | datetime | None:
    if value is None or isinstance(value, (date, datetime)):
        return value
    s = str(value).strip()
    if not s:
        return None
    # "2024-01-05T10:00:00Z" -> fromisoformat não aceita "Z" em versões antigas
    s = s.replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return datetime.strptime(s[:10], "%Y-%m-%d")


def format_date_br(value) -> str:
    """dd/mm/aaaa (vazio se não houver data)."""
    d = parse_iso(value)
    return d.strftime("%d/%m/%Y") if d else ""



def whatsapp_share_url(message: str, phone: str | None = None) -> str:
    digits = normalize_mobile_phone(phone) or ""
    return f"https://wa.me/{digits}?text={quote(message or '')}"
