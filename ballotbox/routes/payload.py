from flask import request


def request_data():
    """JSON object body, falling back to form data; None for other JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    return data if isinstance(data, dict) else None


def invalid_request(message, code="invalid_request"):
    return {"ok": False, "error": message, "code": code}, 400


def parse_proposal_id(raw_proposal_id):
    # bool is an int subclass; JSON true must not read as index 1.
    if isinstance(raw_proposal_id, bool):
        return None
    if isinstance(raw_proposal_id, int):
        return raw_proposal_id
    if isinstance(raw_proposal_id, str):
        value = raw_proposal_id.strip()
        if value.isascii() and value.isdigit():
            return int(value)
    return None
