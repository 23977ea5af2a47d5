import os

try:
    from dotenv import load_dotenv

    load_dotenv()
except Exception:
    pass


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///ballotbox.db")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    ELECTION_ADMIN_IDENTITY = os.getenv("ELECTION_ADMIN_IDENTITY", "admin")
    IDENTITY_TOKEN_MAX_AGE = int(os.getenv("IDENTITY_TOKEN_MAX_AGE", "86400"))
