# =============================================================================
# reports/__init__.py
# =============================================================================
# PURPOSE:
#   Period reporting over already-fetched bookings and product orders:
#   - aggregations.py: package / staff / category / income rollups
#   - salary.py:       cross-stream commission totals per staff member
#   - assembly.py:     named sheets for the period report and salary statement
#   - excel_sink.py:   writes assembled sheets to an .xlsx file
#
# USAGE:
#   from reports import assemble, ReportPeriod, report_to_bytes
# =============================================================================

from .aggregations import (
    price_lookup,
    price_of,
    package_stats,
    staff_stats,
    category_stats,
    total_income,
    find_unpriced_packages,
)

from .salary import (
    SalaryRow,
    compute_salary,
    booking_earnings,
    product_earnings,
    salary_rows,
    salary_summary,
    staff_statement,
)

from .assembly import ReportPeriod, assemble, assemble_salary_statement

from .excel_sink import write_workbook, report_to_bytes, report_frames
