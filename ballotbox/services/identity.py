from flask import current_app
from flask_login import UserMixin
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

IDENTITY_SALT = "caller-identity"


class Caller(UserMixin):
    """An authenticated caller; the identity is trusted as-is."""

    def __init__(self, identity):
        self.identity = identity

    def get_id(self):
        return self.identity


def _identity_serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"])


def issue_identity_token(identity):
    return _identity_serializer().dumps(identity, salt=IDENTITY_SALT)


def verify_identity_token(token, max_age=None):
    if max_age is None:
        max_age = current_app.config["IDENTITY_TOKEN_MAX_AGE"]
    try:
        return _identity_serializer().loads(token, salt=IDENTITY_SALT, max_age=max_age)
    except (BadSignature, SignatureExpired):
        return None


def load_caller_from_request(request):
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None

    identity = verify_identity_token(token.strip())
    if not identity:
        current_app.logger.info("Rejected invalid or expired identity token")
        return None
    return Caller(identity)
