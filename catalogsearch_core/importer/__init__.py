"""CatalogSearch Importer Configuration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from catalogsearch_core.importer.parameters import (
    DEFAULT_GROUP_NAME,
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    ImportGroupConfig,
    ImportParameter,
    ImportParameterConfig,
    ImportParameterGroup,
    ImportParameterSet,
)

__all__ = ["DEFAULT_GROUP_NAME", "HIGHEST_PRECEDENCE", "LOWEST_PRECEDENCE", "ImportGroupConfig", "ImportParameter", "ImportParameterConfig", "ImportParameterGroup", "ImportParameterSet"]
