from flask import current_app, request


def get_storage():
    return current_app.extensions['storage']


def get_auth_service():
    return current_app.extensions['auth_service']


def json_body():
    """Request JSON as a dict; anything else (missing, invalid, an array) is {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
