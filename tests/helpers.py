def error_of(response):
    """Return (kind, message) from a {"Err": {kind: message}} body."""
    body = response.json()
    assert set(body) == {"Err"}, body
    ((kind, message),) = body["Err"].items()
    return kind, message
