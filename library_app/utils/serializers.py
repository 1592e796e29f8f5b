from datetime import date, datetime, time, timedelta


def to_json_value(value):
    """
    Converts driver values to JSON friendly ones.
    MySQL returns TIME columns as timedelta, rendered here as HH:MM:SS.
    """
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        total = int(value.total_seconds())
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return value


def row_to_json(row):
    return {key: to_json_value(value) for key, value in row.items()}
