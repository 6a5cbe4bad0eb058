"""Check-in wizard as an explicit state machine over form steps.

ENTRY_TYPE → IDENTITY → CARGO → DOCUMENT → REVIEW. Each step owns a fixed
set of draft fields; ``advance`` accepts only those, validates the step and
moves forward. The draft is the only state and travels with every call.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gatequeue.core.exceptions import ValidationError
from gatequeue.schemas.checkin import CheckInDraft, WizardState, WizardStep
from gatequeue.schemas.driver import CheckInCreate, LocationIn
from gatequeue.services.checkin_form import (
    assemble_license_plate,
    format_po_number,
    pic_for,
    po_inputs_complete,
)

STEP_ORDER: list[WizardStep] = list(WizardStep)

STEP_FIELDS: dict[WizardStep, frozenset[str]] = {
    WizardStep.ENTRY_TYPE: frozenset({"entry_type"}),
    WizardStep.IDENTITY: frozenset({"name", "phone", "plate_prefix", "plate_number", "plate_suffix"}),
    WizardStep.CARGO: frozenset({
        "company", "purpose", "po_entity", "po_year", "po_sequence",
        "do_number", "pic", "item_type", "priority", "notes",
    }),
    WizardStep.DOCUMENT: frozenset({"document_file"}),
    WizardStep.REVIEW: frozenset(),
}


def _blank(value: str | None) -> bool:
    return not (value or "").strip()


def _validate_step(step: WizardStep, draft: CheckInDraft) -> None:
    if step is WizardStep.ENTRY_TYPE:
        if draft.entry_type is None:
            raise ValidationError("Choose walk-in or booking")
    elif step is WizardStep.IDENTITY:
        if any(_blank(v) for v in (draft.name, draft.phone, draft.plate_prefix, draft.plate_number)):
            raise ValidationError("Name, phone and licence plate are required")
        assemble_license_plate(draft.plate_prefix, draft.plate_number, draft.plate_suffix)
    elif step is WizardStep.CARGO:
        complete = po_inputs_complete(draft.po_entity, draft.po_sequence, draft.do_number)
        if _blank(draft.company) or not complete:
            raise ValidationError("Vendor name and PO/DO number are required")


def _apply_pic_rule(draft: CheckInDraft) -> CheckInDraft:
    pic, _ = pic_for(draft.po_entity, draft.pic)
    return draft.model_copy(update={"pic": pic})


def state(step: WizardStep, draft: CheckInDraft) -> WizardState:
    """Wizard position plus the derived values a form shows (computed on read)."""
    _, locked = pic_for(draft.po_entity, draft.pic)
    try:
        plate = assemble_license_plate(draft.plate_prefix, draft.plate_number, draft.plate_suffix)
    except ValidationError:
        plate = ""
    return WizardState(
        step=step,
        draft=draft,
        license_plate=plate,
        do_number=format_po_number(draft.po_entity, draft.po_year, draft.po_sequence, draft.do_number),
        pic_locked=locked,
    )


def advance(step: WizardStep, draft: CheckInDraft, data: dict[str, Any]) -> WizardState:
    """Merge the fields ``step`` owns from ``data``, validate, and move to the next step."""
    if step is WizardStep.REVIEW:
        raise ValidationError("Review is the last step; submit the draft instead")

    try:
        incoming = CheckInDraft.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid input for {step.value}: {exc.errors()[0]['msg']}") from exc

    owned = incoming.model_dump(include=set(STEP_FIELDS[step]), exclude_unset=True)
    merged = draft.model_copy(update=owned)
    if step is WizardStep.CARGO:
        merged = _apply_pic_rule(merged)

    _validate_step(step, merged)
    return state(STEP_ORDER[STEP_ORDER.index(step) + 1], merged)


def back(step: WizardStep, draft: CheckInDraft) -> WizardState:
    index = STEP_ORDER.index(step)
    return state(STEP_ORDER[max(index - 1, 0)], draft)


def build_check_in(draft: CheckInDraft, location: LocationIn | None = None) -> CheckInCreate:
    """Turn a finished draft into a check-in request; re-validates every step."""
    for step in STEP_ORDER:
        _validate_step(step, draft)
    draft = _apply_pic_rule(draft)
    try:
        return CheckInCreate(
            entry_type=draft.entry_type,
            name=draft.name.strip(),
            phone=draft.phone.strip(),
            license_plate=assemble_license_plate(draft.plate_prefix, draft.plate_number, draft.plate_suffix),
            company=draft.company.strip(),
            purpose=draft.purpose,
            priority=draft.priority,
            do_number=format_po_number(draft.po_entity, draft.po_year, draft.po_sequence, draft.do_number),
            pic=draft.pic or None,
            item_type=draft.item_type,
            notes=draft.notes,
            document_file=draft.document_file,
            location=location,
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"Incomplete check-in: {exc.errors()[0]['msg']}") from exc
