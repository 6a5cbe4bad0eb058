"""
PO number, PIC and licence plate helpers
"""

import pytest

from gatequeue.core.exceptions import ValidationError
from gatequeue.domain.enums import PoEntity
from gatequeue.services.checkin_form import (
    assemble_license_plate,
    format_po_number,
    pic_for,
    po_inputs_complete,
    split_license_plate,
)


class TestPoNumber:
    def test_internal_entity(self):
        assert format_po_number(PoEntity.SBI, "2025", "7") == "PO/SBI/2025/7"

    def test_non_digits_are_stripped(self):
        assert format_po_number("SDI", "20a25", "00-12") == "PO/SDI/2025/0012"

    def test_other_uses_free_text_verbatim(self):
        assert format_po_number(PoEntity.OTHER, "2025", "7", "SJ-99/abc") == "SJ-99/abc"

    def test_completeness(self):
        assert not po_inputs_complete(PoEntity.SBI, "")
        assert po_inputs_complete(PoEntity.SRI, "3")
        assert not po_inputs_complete(PoEntity.OTHER, "3", "  ")
        assert po_inputs_complete(PoEntity.OTHER, None, "DO-1")


class TestPic:
    def test_locked_receivers(self):
        assert pic_for(PoEntity.SBI, "someone") == ("Bu Santi", True)
        assert pic_for(PoEntity.SDI) == ("Pak Azhari", True)

    def test_free_receivers(self):
        assert pic_for(PoEntity.SRI, "Pak Budi") == ("Pak Budi", False)
        assert pic_for(PoEntity.OTHER) == ("", False)


class TestLicensePlate:
    def test_full_plate(self):
        assert assemble_license_plate("b", "1234", "xyz") == "B 1234 XYZ"

    def test_no_suffix_has_no_trailing_space(self):
        assert assemble_license_plate("B", "1234", "") == "B 1234"

    def test_blank_middle_part_leaves_single_space(self):
        assert assemble_license_plate("B", "", "XYZ") == "B XYZ"
        assert assemble_license_plate("", "1234", "") == "1234"

    def test_disallowed_characters_dropped(self):
        assert assemble_license_plate("b1", "12a3", "x-y") == "B 123 XY"

    @pytest.mark.parametrize("parts", [("ABCDE", "1", ""), ("B", "12345", ""), ("B", "1", "ABCDEF")])
    def test_over_length_rejected(self, parts):
        with pytest.raises(ValidationError):
            assemble_license_plate(*parts)

    def test_split(self):
        assert split_license_plate("B 1234 XYZ") == ("B", "1234", "XYZ")
        assert split_license_plate("B 1234") == ("B", "1234", "")
