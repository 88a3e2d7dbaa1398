from functools import wraps
from flask import current_app, jsonify, request
from flask_login import UserMixin, current_user
from app.extensions import login_manager
from app.models.access import normalize_email
from app.services.access import is_email_allowed


class ProxyUser(UserMixin):
    """Caller identified by the email address the fronting proxy vouches for."""

    def __init__(self, email: str) -> None:
        self.id = normalize_email(email)
        self.email = email.strip()

    @property
    def is_allowed(self) -> bool:
        return is_email_allowed(self.email)


@login_manager.request_loader
def load_user_from_request(req):
    email = req.headers.get(current_app.config['USER_EMAIL_HEADER'], '').strip()
    if not email:
        return None
    return ProxyUser(email)


# API authentication
def allowed_user_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'success': False, 'error': 'Authentication required'}), 401

        if not current_user.is_allowed:
            current_app.logger.warning('Rejected %s for %s', current_user.email, request.path)
            return jsonify({'success': False, 'error': 'Your email is not authorized'}), 403

        return f(*args, **kwargs)

    return decorated_function
