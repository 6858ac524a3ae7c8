"""Constants and enums for schema reflection.

This module contains the fixed metadata vocabulary: the statements issued
against the catalog, the flag values those statements return, the foreign
key clause pattern and the policy enum for unrecognized column types.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import Final


class Constants:
    """Fixed vocabulary shared by the reflection builders."""

    # Catalog statements
    SHOW_COLUMNS_TEMPLATE: Final[str] = "SHOW FULL COLUMNS FROM {table}"
    SHOW_CREATE_TEMPLATE: Final[str] = "SHOW CREATE TABLE `{table}`"

    # SHOW FULL COLUMNS field positions
    FIELD_NAME: Final[int] = 0
    FIELD_TYPE: Final[int] = 1
    FIELD_NULLABLE: Final[int] = 3
    FIELD_KEY: Final[int] = 4
    FIELD_EXTRA: Final[int] = 6

    # SHOW CREATE TABLE field positions
    FIELD_DEFINITION: Final[int] = 1

    # Flag values
    NOT_NULLABLE: Final[str] = "NO"
    KEY_PRIMARY: Final[str] = "PRI"
    KEY_UNIQUE: Final[str] = "UNI"
    KEY_MULTIPLE: Final[str] = "MUL"
    EXTRA_AUTO_INCREMENT: Final[str] = "auto_increment"

    # MySQL error code for "Table doesn't exist"
    MYSQL_NO_SUCH_TABLE: Final[int] = 1146

    @staticmethod
    def foreign_key_pattern(column: str) -> re.Pattern[str]:
        """Build the FOREIGN KEY clause pattern for one column.

        Captures the referenced table and referenced column names.
        """
        return re.compile(
            rf"FOREIGN KEY \(`{re.escape(column)}`\) REFERENCES `(\w+)` \(`(\w+)`\)"
        )


class UnknownTypePolicy(Enum):
    """What the attribute builder does with an unrecognized column type."""

    DROP = "drop"
    RAISE = "raise"
