# =============================================================================
# importers/booking_importer.py
# =============================================================================
# PURPOSE:
#   Imports client bookings (inquiries) from a CSV/Excel export.
#
# EXPECTED FORMAT:
#   Inquiry ID | Full Name | Email | Phone | Event Type | Package |
#   Event Date | Status | Assigned Staff | Contact Date
#
#   Assigned Staff is a comma separated list of names ("Amal, Nimal").
#   Event Date decides which month the booking is reported in.
#
# DUPLICATES:
#   Detected by Inquiry ID. Rows without one are imported every time.
# =============================================================================

from config import BOOKING_STATUSES
from database import create_booking, check_booking_exists
from ledger.models import parse_staff_list
from .base import CsvImporter


class BookingImporter(CsvImporter):
    """
    USAGE:
        importer = BookingImporter("bookings.csv")
        success, message, count = importer.run()
    """

    COLUMN_MAPPINGS = {
        "full_name": ["full name", "client name", "client", "name"],
        "inquiry_id": ["inquiry id", "inquiry", "booking id", "reference"],
        "email": ["email", "e-mail"],
        "phone": ["phone", "mobile", "contact number"],
        "event_type": ["event type", "category", "event"],
        "package_name": ["package", "package name"],
        "event_date": ["event date", "date"],
        "status": ["status"],
        "assigned_staff": ["assigned staff", "staff", "photographers", "assigned"],
        "created_at": ["contact date", "created at", "submitted"],
    }
    REQUIRED_FIELDS = ("full_name",)
    ENTITY_LABEL = "bookings"

    def _import_row(self, row, row_num, col_map):
        full_name = self._get_value(row, col_map.get("full_name"))
        if not full_name:
            self.skipped.append(f"Row {row_num}: No client name")
            return False

        inquiry_id = self._get_value(row, col_map.get("inquiry_id"))
        if inquiry_id and check_booking_exists(inquiry_id):
            self.duplicates.append(f"Row {row_num}: Booking {inquiry_id}")
            return False

        status = self._get_value(row, col_map.get("status"), default=BOOKING_STATUSES[0])
        if status not in BOOKING_STATUSES:
            print(f"[WARN] Row {row_num}: unknown status '{status}', kept as is")

        data = {
            "inquiry_id": inquiry_id,
            "full_name": full_name,
            "email": self._get_value(row, col_map.get("email")),
            "phone": self._get_value(row, col_map.get("phone")),
            "event_type": self._get_value(row, col_map.get("event_type")),
            "package_name": self._get_value(row, col_map.get("package_name")),
            "event_date": self._get_date(row, col_map.get("event_date")),
            "status": status,
            "assigned_staff": parse_staff_list(self._get_value(row, col_map.get("assigned_staff"))),
        }
        created_at = self._get_date(row, col_map.get("created_at"))
        if created_at:
            data["created_at"] = created_at

        booking_id = create_booking(data)
        if booking_id is None:
            self.errors.append(f"Row {row_num}: Could not save booking for {full_name}")
            return False
        return True
