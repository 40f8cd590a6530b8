"""
Server-wide constants.
"""

PROJECT_NAME = "RFID Database Application"
VERSION = "1.0.0"
SCHEMA_VERSION = "v1"

WELCOME_MESSAGE = "Welcome to the RFID Database Application"

# Generic body returned for every storage or unexpected failure
SERVER_ERROR_MESSAGE = "Server error"
ERROR_KIND_HEADER = "X-Error-Kind"

WEAPON_RFID_REQUIRED = "weapon_rfid is required"
USER_NOT_FOUND = "User not found"
