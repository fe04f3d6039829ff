from .catalog import ERROR_KEY, SUCCESS_KEY, TOTAL_KEY


def transform_metrics(record):
    """Replace the invocation total with the success count (total - errors)."""
    if TOTAL_KEY in record:
        total = record[TOTAL_KEY]
        record[SUCCESS_KEY] = total - record[ERROR_KEY] if ERROR_KEY in record else total
    record.pop(TOTAL_KEY, None)
    return record
