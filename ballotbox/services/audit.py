from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ballotbox.extensions import db
from ballotbox.models import ElectionEvent


def record_election_event(event):
    entry = ElectionEvent(name=event.name, payload=event.as_dict())
    try:
        db.session.add(entry)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Could not record election event %s", event.name)
        raise

    current_app.logger.info("Election event %s %s", event.name, entry.payload)
    return entry


def list_election_events():
    events = ElectionEvent.query.order_by(ElectionEvent.id).all()
    return [
        {
            "id": event.id,
            "name": event.name,
            "payload": event.payload,
            "created_at": event.created_at.isoformat(),
        }
        for event in events
    ]
