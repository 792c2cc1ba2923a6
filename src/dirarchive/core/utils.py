"""
Formatting utilities used by the reporter.
"""

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_file_size(num_bytes: int) -> str:
    """
    Format a byte count for display.

    Sizes below 1024 are shown as a whole number of bytes. Larger sizes are
    divided by 1024 until they fit the next unit (capped at TB) and shown
    with one decimal place.
    """
    size = float(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{int(size)} {SIZE_UNITS[unit_index]}"
    return f"{size:.1f} {SIZE_UNITS[unit_index]}"


def pluralize_directories(count: int) -> str:
    return "directory" if count == 1 else "directories"
