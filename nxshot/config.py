"""
Configuration constants for the capture organizer.
"""

# --- Output Layout ---
# Created directly under the selected root. Any directory with this name is
# skipped while scanning so organized copies are never picked up again.
OUTPUT_DIR_NAME = "Organized"
UNKNOWN_NAME = "Unknown"

# --- Capture Naming Convention ---
# e.g. 2023061510304500-0123456789abcdef0123456789abcdef.jpg
CAPTURE_NAME_LENGTH = 53
IMAGE_EXT = ".jpg"
VIDEO_EXT = ".mp4"

# Fixed offsets into the filename
YEAR_SLICE = slice(0, 4)
MONTH_SLICE = slice(4, 6)
DAY_SLICE = slice(6, 8)
HOUR_SLICE = slice(8, 10)
MINUTE_SLICE = slice(10, 12)
SECOND_SLICE = slice(12, 14)
IDENTIFIER_SLICE = slice(17, 49)
IDENTIFIER_LENGTH = 32

# --- Copying ---
COPY_CHUNK_SIZE = 64 * 1024  # 64 KB chunks for reading
