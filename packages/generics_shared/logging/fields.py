"""Canonical logging field names.

Keeping names centralized prevents drift between the modules that bind
context and the formatters that emit it.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Container / view fields.
PAYLOAD_TYPE = "payload_type"
CONTENT_TYPE = "content_type"
FIELD_NAME = "field_name"
ERROR_CODE = "error_code"

# Observer fields.
OBSERVER_COUNT = "observer_count"
SOURCE = "source"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
