from datetime import datetime
from ..extensions import db


class AllowedEmail(db.Model):
    """
    Email addresses allowed to use the application.
    """
    __tablename__ = 'allowed_emails'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __init__(self, email: str) -> None:
        self.email = normalize_email(email)

    def __repr__(self) -> str:
        return f'<AllowedEmail {self.email}>'


def normalize_email(email: str) -> str:
    return (email or '').lower().strip()
