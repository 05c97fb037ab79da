"""
Core constants for gattfix.
"""

# Result/Error Codes
RESULT_OK = 0
RESULT_ERR = 1
RESULT_ERR_NOT_FOUND = 9
RESULT_ERR_BAD_ARGS = 8
RESULT_ERR_INVALID_FORMAT = 27
RESULT_ERR_DATA_FILE = 28

# Base UUID Constants
BASE_UUID__BLUETOOTH = "00000000-0000-1000-8000-00805f9b34fb"
BASE_UUID__SUFFIX = BASE_UUID__BLUETOOTH[8:]

# Largest alias that fits the 32-bit slot of the base UUID
ALIAS_MAX = 0xFFFFFFFF

# Attribute values longer than this are rejected by a conforming stack
MAX_ATTRIBUTE_VALUE_LENGTH = 512

# GATT entity kinds
KIND__SERVICE = "service"
KIND__CHARACTERISTIC = "characteristic"
KIND__DESCRIPTOR = "descriptor"
GATT_KINDS = (KIND__SERVICE, KIND__CHARACTERISTIC, KIND__DESCRIPTOR)

# Blocklist exclusion types
EXCLUDE = "exclude"
EXCLUDE_READS = "exclude-reads"
EXCLUDE_WRITES = "exclude-writes"

# Operations checked against the blocklist
OP__READ = "read"
OP__WRITE = "write"
OP__DISCOVER = "discover"
