# =============================================================================
# importers/package_importer.py
# =============================================================================
# PURPOSE:
#   Imports the service package price list.
#
# EXPECTED FORMAT:
#   Name | Price | Category | Description
#   Gold Wedding | Rs. 150,000 | Wedding | Full day, 2 photographers
#
#   Price is kept as the original text. The number is parsed from it when
#   revenue is calculated, so "From Rs. 25,000" still works.
#
# DUPLICATES:
#   A package whose name already exists is skipped. Bookings refer to
#   packages by name, so two packages with the same name would make prices
#   ambiguous.
# =============================================================================

from database import create_package, check_package_exists
from .base import CsvImporter


class PackageImporter(CsvImporter):
    """
    USAGE:
        importer = PackageImporter("packages.csv")
        success, message, count = importer.run()
    """

    COLUMN_MAPPINGS = {
        "name": ["package name", "name", "package"],
        "price": ["price", "rate", "amount"],
        "category": ["category", "type"],
        "description": ["description", "details", "notes"],
    }
    REQUIRED_FIELDS = ("name",)
    ENTITY_LABEL = "packages"

    def _import_row(self, row, row_num, col_map):
        name = self._get_value(row, col_map.get("name"))
        if not name:
            self.skipped.append(f"Row {row_num}: No package name")
            return False

        if check_package_exists(name):
            self.duplicates.append(f"Row {row_num}: Package {name}")
            return False

        package_id = create_package({
            "name": name,
            "price": self._get_value(row, col_map.get("price")),
            "category": self._get_value(row, col_map.get("category")),
            "description": self._get_value(row, col_map.get("description")),
        })
        if package_id is None:
            self.errors.append(f"Row {row_num}: Could not save package {name}")
            return False
        return True
