# -*- coding: utf-8 -*-

"""
pandas_geos/config.py

This module centralizes the constants shared by the codec, the column
operators and the materializer. Keeping them in one place means a column
produced by `buffer` is named and serialized exactly like one produced by
`intersection`.

Contents:
---------
1. COLUMN_NAMES:
   - Names given to materialized output columns.
   - Geometry operators name their result ``"geometry"``; the validity check
     names its result ``"is_valid"``.

2. WKB_OPTIONS:
   - Keyword arguments handed to `shapely.wkb.dumps` for every encoded cell.
   - ``output_dimension`` of 3 keeps Z coordinates when present and writes
     plain 2D WKB otherwise.

3. BUFFER_DEFAULTS:
   - Default arc density and styles used by `buffer` when the caller does not
     override them.

4. QUIET_LOGGERS:
   - Third-party loggers lowered to ERROR once, when the package is imported.

Usage:
------
    from pandas_geos.config import BUFFER_DEFAULTS

    BUFFER_DEFAULTS["quad_segs"]   # 8
"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) OUTPUT COLUMN NAMES
# ───────────────────────────────────────────────────────────────────────────────
COLUMN_NAMES = {
    'geometry': 'geometry',     # any operator producing WKB cells
    'is_valid': 'is_valid',     # boolean validity check
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) WKB SERIALIZATION
# ───────────────────────────────────────────────────────────────────────────────
WKB_OPTIONS = {
    'hex': False,               # raw bytes, not hex strings
    'output_dimension': 3,      # keep Z when the geometry has it
    'include_srid': False,      # plain ISO/extended WKB, no EWKB SRID header
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) BUFFER DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
BUFFER_DEFAULTS = {
    'quad_segs': 8,             # segments per quarter circle
    'cap_style': 'round',       # 'round' | 'flat' | 'square'
    'join_style': 'round',      # 'round' | 'mitre' | 'bevel'
    'mitre_limit': 5.0,         # only used with join_style='mitre'
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) LOGGING
# ───────────────────────────────────────────────────────────────────────────────
QUIET_LOGGERS = (
    'shapely.geos',
)
