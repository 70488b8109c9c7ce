"""Defaults shared across the operator layer."""

DEFAULT_FIRST_DAY_OF_WEEK = 1
"""Monday. Days are numbered 0 (Sunday) through 6 (Saturday)."""

DEFAULT_DIALECT = "postgresql"

DEFAULT_WHERE_TEMPLATE = "{field} {op} {value}"

ALWAYS_FALSE = "1=0"
"""Predicate used when an equality filter has nothing to match."""

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

ENV_FIRST_DAY_OF_WEEK = "PYREPORTOPS_FIRST_DAY_OF_WEEK"
ENV_DIALECT = "PYREPORTOPS_DIALECT"
