# -*- coding: utf-8 -*-
"""Constants used throughout the cavenet library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Graph Shape
# -----------------------------------------------------------------------------

#: Maximum number of legs a single graph station can carry.  Survey
#: junctions with more shots are split into several stations.
MAX_LEGS: int = 3

#: Name format of the extra stations created when a junction is split
SPLIT_STATION_FORMAT: str = "{name}[{part}]"

#: Sentinel index used by the intrusive station lists
NIL: int = -1

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

#: Version written into network documents and reports
DOCUMENT_VERSION = "1.0"
