# SQLite and MySQL store integer keys and LIMIT/OFFSET as signed 64-bit values.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fits_int64(value: int) -> bool:
    """Values outside this range cannot be bound as SQL integer parameters."""
    return INT64_MIN <= value <= INT64_MAX
