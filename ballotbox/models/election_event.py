from datetime import datetime, timezone

from ballotbox.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class ElectionEvent(db.Model):
    __tablename__ = "election_events"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    payload = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
