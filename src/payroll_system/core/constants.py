"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

TAX_RATE = Decimal("0.12")
DEFAULT_PORT = 3000
DEFAULT_DATA_FILE = "employees.json"
JSON_INDENT = 2

FORM_ERROR_MESSAGE = "Please fill all fields correctly."
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
