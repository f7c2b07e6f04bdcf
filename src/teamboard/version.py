VERSION = "0.1.0"
BOARD_SCHEMA_VERSION = "0.1.0"
