# =============================================================================
# config/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the 'config' folder a package and re-exports every setting, so
#   other files can write:
#       from config import DB_PATH, SUMMARY_LABEL
#   Instead of:
#       from config.settings import DB_PATH, SUMMARY_LABEL
#
# NOTE:
#   Code that must see a value changed at runtime (tests point DB_PATH at a
#   temporary file) should read it as `config.DB_PATH`, not import the name.
# =============================================================================

from .settings import *
