# =============================================================================
# importers/product_order_importer.py
# =============================================================================
# PURPOSE:
#   Imports product orders (albums, frames, prints) from a CSV/Excel export.
#
# EXPECTED FORMAT:
#   Order ID | Customer | Total Amount | Status | Assigned Staff | Order Date
#
#   Order Date decides which month the order is reported in. Rows without
#   one get today's date.
#
# DUPLICATES:
#   Detected by Order ID.
# =============================================================================

from config import PRODUCT_ORDER_STATUSES
from database import create_product_order, check_product_order_exists
from ledger.models import parse_staff_list
from utils.money import to_money
from .base import CsvImporter


class ProductOrderImporter(CsvImporter):
    """
    USAGE:
        importer = ProductOrderImporter("orders.csv")
        success, message, count = importer.run()
    """

    COLUMN_MAPPINGS = {
        "customer_name": ["customer", "customer name", "client", "name"],
        "order_id": ["order id", "order", "reference"],
        "total_amount": ["total amount", "total", "amount", "price"],
        "status": ["status"],
        "assigned_staff": ["assigned staff", "staff", "photographers", "assigned"],
        "created_at": ["order date", "created at", "date"],
    }
    REQUIRED_FIELDS = ("customer_name", "total_amount")
    ENTITY_LABEL = "product orders"

    def _import_row(self, row, row_num, col_map):
        customer = self._get_value(row, col_map.get("customer_name"))
        if not customer:
            self.skipped.append(f"Row {row_num}: No customer name")
            return False

        order_id = self._get_value(row, col_map.get("order_id"))
        if order_id and check_product_order_exists(order_id):
            self.duplicates.append(f"Row {row_num}: Order {order_id}")
            return False

        status = self._get_value(row, col_map.get("status"), default=PRODUCT_ORDER_STATUSES[0])
        if status not in PRODUCT_ORDER_STATUSES:
            print(f"[WARN] Row {row_num}: unknown status '{status}', kept as is")

        data = {
            "order_id": order_id,
            "customer_name": customer,
            "total_amount": to_money(self._get_value(row, col_map.get("total_amount"))),
            "status": status,
            "assigned_staff": parse_staff_list(self._get_value(row, col_map.get("assigned_staff"))),
        }
        created_at = self._get_date(row, col_map.get("created_at"))
        if created_at:
            data["created_at"] = created_at

        new_id = create_product_order(data)
        if new_id is None:
            self.errors.append(f"Row {row_num}: Could not save order for {customer}")
            return False
        return True
