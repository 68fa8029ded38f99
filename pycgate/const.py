"""Constants for the C-Gate protocol decoder."""

from __future__ import annotations

from typing import Final

# Line prefixes
EVENT_PREFIX: Final = "#e#"
NO_VALUE: Final = "-"  # Empty address or object id slot
SYSTEM_ADDRESS: Final = "cgate"  # C-Gate's own pseudo-address
ADDRESS_PREFIX: Final = "//"
ADDRESS_SEPARATOR: Final = "/"
MAX_ADDRESS_SEGMENTS: Final = 4  # project/network/application/group

# Event sub-grammars
SECURITY_TAG: Final = "[security]"
SECURITY_APPLICATION: Final = "security"
SOURCE_UNIT_KEY: Final = "sourceUnit"
ZONE_SEALED: Final = "zone_sealed"
ZONE_UNSEALED: Final = "zone_unsealed"
STATE_CHANGE_TAG: Final = "new"
LEVEL_KEY: Final = "level"

# Well-known event codes
EVENT_HEARTBEAT: Final = 700
EVENT_SECURITY: Final = 702
EVENT_LEVEL_CHANGE: Final = 730
EVENT_SYNC_STATE: Final = 756

# Well-known response codes
RESPONSE_OK: Final = 200
RESPONSE_OBJECT_STATUS: Final = 300

# Brightness
RAW_LEVEL_MIN: Final = 0
RAW_LEVEL_MAX: Final = 255
PERCENT_LEVEL_MIN: Final = 0
PERCENT_LEVEL_MAX: Final = 100

# C-Bus to percent level lookup table, indexed by raw level (0-255).
# Percent p starts at raw round(2.55 * (p - 1)) + 1.
RAW_TO_PERCENT: Final[tuple[int, ...]] = (
    0, 1, 1, 1, 2, 2, 3, 3, 3, 4, 4, 5, 5, 5, 6, 6,  # 0-15
    7, 7, 7, 8, 8, 9, 9, 9, 10, 10, 10, 11, 11, 12, 12, 12,  # 16-31
    13, 13, 14, 14, 14, 15, 15, 16, 16, 16, 17, 17, 18, 18, 18, 19,  # 32-47
    19, 20, 20, 20, 21, 21, 21, 22, 22, 23, 23, 23, 24, 24, 25, 25,  # 48-63
    25, 26, 26, 27, 27, 27, 28, 28, 29, 29, 29, 30, 30, 30, 31, 31,  # 64-79
    32, 32, 32, 33, 33, 34, 34, 34, 35, 35, 36, 36, 36, 37, 37, 38,  # 80-95
    38, 38, 39, 39, 40, 40, 40, 41, 41, 41, 42, 42, 43, 43, 43, 44,  # 96-111
    44, 45, 45, 45, 46, 46, 47, 47, 47, 48, 48, 49, 49, 49, 50, 50,  # 112-127
    50, 51, 51, 52, 52, 52, 53, 53, 54, 54, 54, 55, 55, 56, 56, 56,  # 128-143
    57, 57, 58, 58, 58, 59, 59, 60, 60, 60, 61, 61, 61, 62, 62, 63,  # 144-159
    63, 63, 64, 64, 65, 65, 65, 66, 66, 67, 67, 67, 68, 68, 69, 69,  # 160-175
    69, 70, 70, 70, 71, 71, 72, 72, 72, 73, 73, 74, 74, 74, 75, 75,  # 176-191
    76, 76, 76, 77, 77, 78, 78, 78, 79, 79, 80, 80, 80, 81, 81, 81,  # 192-207
    82, 82, 83, 83, 83, 84, 84, 85, 85, 85, 86, 86, 87, 87, 87, 88,  # 208-223
    88, 89, 89, 89, 90, 90, 90, 91, 91, 92, 92, 92, 93, 93, 94, 94,  # 224-239
    94, 95, 95, 96, 96, 96, 97, 97, 98, 98, 98, 99, 99, 100, 100, 100,  # 240-255
)
