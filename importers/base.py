# =============================================================================
# importers/base.py
# =============================================================================
# PURPOSE:
#   Shared plumbing for the CSV/Excel importers:
#   - reading the file (CSV first, Excel if that fails)
#   - flexible column detection (exact header match, then partial match)
#   - safe cell access (NaN, "n/a", blanks -> default)
#   - the (success, message, count) result and the import summary
#
# A SUBCLASS PROVIDES:
#   COLUMN_MAPPINGS  - {our field: [possible header names]}
#   REQUIRED_FIELDS  - fields that must be found among the headers
#   ENTITY_LABEL     - "bookings", "packages"... for messages
#   _import_row()    - turn one row into a database record
# =============================================================================

from datetime import datetime

import pandas as pd


class CsvImporter:
    """
    Base class for the file importers.

    USAGE (via a subclass):
        importer = BookingImporter("bookings.csv")
        success, message, count = importer.run()
        summary = importer.get_import_summary()
    """

    COLUMN_MAPPINGS = {}
    REQUIRED_FIELDS = ()
    ENTITY_LABEL = "rows"

    def __init__(self, source):
        """
        PARAMETERS:
            source: File path or file-like object (e.g. a Streamlit upload)
        """
        self.source = source
        self.batch_id = datetime.now().strftime("batch_%Y%m%d_%H%M%S")
        self.errors = []
        self.skipped = []
        self.duplicates = []

    def read_file(self):
        """Read the source as CSV, falling back to Excel."""
        try:
            return pd.read_csv(self.source)
        except (ValueError, UnicodeDecodeError) as e:
            print(f"[INFO] Not a CSV ({e}), trying Excel")
            if hasattr(self.source, "seek"):
                self.source.seek(0)
            return pd.read_excel(self.source)

    def run(self):
        """
        Main method: import every row of the file.

        RETURNS:
            tuple: (success, message, count)
        """
        try:
            df = self.read_file()
            print(f"[INFO] Read file with {len(df)} rows")
            print(f"   Columns: {list(df.columns)}")

            col_map = self._detect_columns(df)
            missing = [f for f in self.REQUIRED_FIELDS if not col_map.get(f)]
            if missing:
                names = ", ".join(self.COLUMN_MAPPINGS[f][0].title() for f in missing)
                return False, f"Missing required column: {names}", 0

            created = 0
            for idx, row in df.iterrows():
                # +2: header row and 1-based numbering, as seen in a spreadsheet
                row_num = idx + 2
                if self._import_row(row, row_num, col_map):
                    created += 1

            msg_parts = [f"Imported {created} {self.ENTITY_LABEL}"]
            if self.duplicates:
                msg_parts.append(f"{len(self.duplicates)} duplicates")
            if self.skipped:
                msg_parts.append(f"{len(self.skipped)} skipped")
            if self.errors:
                msg_parts.append(f"{len(self.errors)} errors")

            return True, " | ".join(msg_parts), created

        except Exception as e:
            return False, f"Import error: {str(e)}", 0

    def _import_row(self, row, row_num, col_map):
        raise NotImplementedError

    def _detect_columns(self, df):
        """
        Detect which columns contain which data.

        RETURNS:
            dict: Mapping of our field names to actual column names
        """
        col_map = {}

        # First pass: exact matches
        for field, possible_names in self.COLUMN_MAPPINGS.items():
            for col in df.columns:
                col_lower = str(col).lower().strip()
                if any(col_lower == name.lower() for name in possible_names):
                    col_map[field] = col
                    break

        # Second pass: partial matches for fields not yet matched
        for field, possible_names in self.COLUMN_MAPPINGS.items():
            if field in col_map:
                continue
            for col in df.columns:
                col_lower = str(col).lower().strip()
                if col in col_map.values():
                    continue
                if any(name.lower() in col_lower for name in possible_names):
                    col_map[field] = col
                    break

        print("[INFO] Column mapping detected:")
        for field, col in col_map.items():
            print(f"   {field} -> {col}")

        return col_map

    def _get_value(self, row, col_name, default=None):
        """Safely get a stripped string value from a row."""
        if not col_name or col_name not in row.index:
            return default

        value = row[col_name]
        if pd.isna(value):
            return default

        str_val = str(value).strip()
        if not str_val or str_val.lower() in ("nan", "none", "n/a"):
            return default
        return str_val

    def _get_date(self, row, col_name):
        """A date cell as YYYY-MM-DD, or None if it cannot be parsed."""
        value = self._get_value(row, col_name)
        if value is None:
            return None
        parsed = pd.to_datetime(value, errors="coerce", dayfirst=False)
        if pd.isna(parsed):
            return None
        return parsed.strftime("%Y-%m-%d")

    def get_import_summary(self):
        """Get detailed import summary."""
        return {
            "batch_id": self.batch_id,
            "errors": self.errors,
            "skipped": self.skipped,
            "duplicates": self.duplicates,
        }
