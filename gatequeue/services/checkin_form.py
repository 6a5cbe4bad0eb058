"""Derived check-in form fields: PO number, PIC, licence plate.

Everything here is a pure function of the current inputs and is recomputed
on demand; nothing is stored between calls.
"""

from __future__ import annotations

import re

from gatequeue.core.config import settings
from gatequeue.core.exceptions import ValidationError
from gatequeue.domain.enums import PoEntity

PLATE_PREFIX_MAX = 4
PLATE_NUMBER_MAX = 4
PLATE_SUFFIX_MAX = 5


def _entity(value: PoEntity | str) -> PoEntity:
    try:
        return PoEntity(str(getattr(value, "value", value)).upper())
    except ValueError:
        raise ValidationError(f"Unknown PO entity '{value}'") from None


def _digits(value: str | None) -> str:
    return re.sub(r"\D", "", value or "")


# ---------------------------------------------------------------------------
# PO / DO number
# ---------------------------------------------------------------------------

def format_po_number(
    entity: PoEntity | str,
    year: str | None = None,
    sequence: str | None = None,
    free_text: str | None = None,
) -> str:
    """``PO/{entity}/{year}/{sequence}``, or the free text verbatim for OTHER.

    Blank inputs give an incomplete string; callers check completeness.
    """
    ent = _entity(entity)
    if ent is PoEntity.OTHER:
        return free_text or ""
    return f"PO/{ent.value}/{_digits(year)}/{_digits(sequence)}"


def po_inputs_complete(
    entity: PoEntity | str, sequence: str | None = None, free_text: str | None = None
) -> bool:
    if _entity(entity) is PoEntity.OTHER:
        return bool((free_text or "").strip())
    return bool(_digits(sequence))


def pic_for(entity: PoEntity | str, manual: str | None = None) -> tuple[str, bool]:
    """Return ``(pic, locked)``. SBI and SDI have a fixed receiver."""
    ent = _entity(entity)
    if ent is PoEntity.SBI:
        return settings.pic_sbi, True
    if ent is PoEntity.SDI:
        return settings.pic_sdi, True
    return manual or "", False


# ---------------------------------------------------------------------------
# Licence plate
# ---------------------------------------------------------------------------

def _clean_part(value: str | None, pattern: str, limit: int, label: str) -> str:
    cleaned = re.sub(pattern, "", (value or "").upper())
    if len(cleaned) > limit:
        raise ValidationError(f"Plate {label} allows at most {limit} characters")
    return cleaned


def assemble_license_plate(prefix: str | None, number: str | None, suffix: str | None) -> str:
    """``("b", "1234", "xyz")`` → ``"B 1234 XYZ"``; blank parts are skipped."""
    parts = (
        _clean_part(prefix, r"[^A-Z]", PLATE_PREFIX_MAX, "prefix"),
        _clean_part(number, r"\D", PLATE_NUMBER_MAX, "number"),
        _clean_part(suffix, r"[^A-Z]", PLATE_SUFFIX_MAX, "suffix"),
    )
    return " ".join(part for part in parts if part)


def split_license_plate(plate: str | None) -> tuple[str, str, str]:
    parts = (plate or "").split(" ")
    prefix = parts[0] if parts else ""
    number = parts[1] if len(parts) > 1 else ""
    suffix = "".join(parts[2:])
    return prefix, number, suffix
