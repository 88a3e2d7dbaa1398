from flask import Blueprint, current_app, render_template, request
from flask_login import current_user

main = Blueprint('main', __name__)


@main.route('/')
def index():
    """Serve the folder browser to allowed users, an access notice to everyone else"""
    email = current_user.email if current_user.is_authenticated else None

    if email is None or not current_user.is_allowed:
        current_app.logger.info('Access denied for %s', email or 'unknown')
        return render_template('access_denied.html', email=email or 'unknown'), 403

    return render_template(
        'index.html',
        title='Multimedia Management System',
        folder_id=request.args.get('folder') or current_app.config['ROOT_FOLDER_ID']
    )
