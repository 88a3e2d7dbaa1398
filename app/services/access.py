from app.models.access import AllowedEmail, normalize_email


def is_email_allowed(email: str) -> bool:
    if not email:
        return False
    return AllowedEmail.query.filter_by(email=normalize_email(email)).first() is not None
