from datetime import date, datetime

from library_app.exceptions import InvalidRequest


def json_body(request):
    """The request body as a dict; anything other than a JSON object is rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return data


def field(data, *names, required=True):
    """Reads the first present key among names (camelCase and snake_case aliases)."""
    for name in names:
        value = data.get(name)
        if value is not None and value != "":
            return value
    if required:
        raise InvalidRequest(f"Missing field: {names[0]}")
    return None


def positive_int(value, name):
    if isinstance(value, bool):
        raise InvalidRequest(f"{name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidRequest(f"{name} must be a positive integer")
    if number <= 0 or str(number) != str(value).strip():
        raise InvalidRequest(f"{name} must be a positive integer")
    return number


def optional_int(value, name):
    if value is None:
        return None
    return positive_int(value, name)


def iso_date(value, name="date"):
    """Accepts YYYY-MM-DD, or an ISO datetime whose time part is dropped."""
    text = str(value).strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date().isoformat()
    except ValueError:
        raise InvalidRequest(f"{name} must be a date (YYYY-MM-DD)")


def clock_time(value, name):
    """Accepts HH:MM or HH:MM:SS and normalizes to HH:MM:SS."""
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(str(value), fmt).strftime("%H:%M:%S")
        except ValueError:
            continue
    raise InvalidRequest(f"{name} must be a time (HH:MM)")


def time_window(start_time, end_time):
    if end_time <= start_time:
        raise InvalidRequest("endTime must be after startTime")
    return start_time, end_time
