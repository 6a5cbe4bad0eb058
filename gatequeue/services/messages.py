"""WhatsApp message bodies sent to the operations group and to drivers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from gatequeue.domain.driver import Driver

# Western Indonesia Time, no DST
WIB = timezone(timedelta(hours=7), name="WIB")

_RULE = "-" * 44


def gate_label(gate: str | None) -> str:
    return (gate or "-").replace("_", " ")


def approval_message(driver: Driver, actor: str, at: datetime) -> str:
    """Group notice sent when security lets a driver in."""
    clock = at.astimezone(WIB).strftime("%H:%M")
    return "\n".join([
        "NOTIFIKASI OPERASIONAL TRAFFIC GUDANG",
        _RULE,
        "STATUS: ENTRY APPROVED (AKSES MASUK)",
        "",
        "DETAIL UNIT:",
        f"Vendor   : {driver.company}",
        f"No. Pol  : {driver.license_plate}",
        f"Driver   : {driver.name}",
        f"Dokumen  : {driver.do_number}",
        f"Kegiatan : {driver.purpose}",
        "",
        "ALOKASI:",
        f"Gate     : {gate_label(driver.gate)}",
        f"Antrian  : {driver.queue_number}",
        f"Waktu    : {clock} WIB",
        f"Petugas  : {actor}",
        _RULE,
    ])


def call_message(driver: Driver) -> str:
    """Direct message asking the driver to move to the assigned dock."""
    return "\n".join([
        "PANGGILAN OPERASIONAL BONGKAR MUAT",
        _RULE,
        "IDENTITAS UNIT:",
        f"No. Polisi    : {driver.license_plate}",
        f"Nama Driver   : {driver.name}",
        f"No. Antrian   : {driver.queue_number or '-'}",
        "",
        "INSTRUKSI MERAPAT:",
        f"Lokasi Tujuan : {gate_label(driver.gate)}",
        "",
        "Personel operasional telah siap di Gate (dock) untuk memproses muatan Anda.",
        "Mohon segera memindahkan unit dari area parkir tunggu menuju lokasi tersebut "
        "dalam waktu maksimal 10 menit.",
        _RULE,
        "Admin Operations",
    ])
