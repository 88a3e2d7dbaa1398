import os
from flask import Blueprint, abort, current_app, request, send_file
from app.routes.auth import allowed_user_required
from app.services import get_drive
from app.storage.base import ItemNotFound
from app.utils.file_utils import has_thumbnail
from app.utils.image_utils import parse_thumbnail_width, render_thumbnail

files = Blueprint('files', __name__)


def _lookup(file_id):
    provider = get_drive().provider
    try:
        return provider.get_file(file_id), provider.get_file_path(file_id)
    except ItemNotFound:
        abort(404)


@files.route('/files/raw/<file_id>')
@allowed_user_required
def raw_file(file_id):
    """Serve a file directly for inline preview (no attachment)."""
    file, file_path = _lookup(file_id)
    if not file_path or not os.path.exists(file_path):
        abort(404)

    return send_file(file_path, mimetype=file.mime_type, as_attachment=False, download_name=file.name)


@files.route('/thumbnail')
@allowed_user_required
def thumbnail():
    file_id = request.args.get('id')
    if not file_id:
        abort(400)

    file, file_path = _lookup(file_id)
    if not has_thumbnail(file.mime_type):
        abort(404)

    width = parse_thumbnail_width(request.args.get('sz'), current_app.config.get('THUMBNAIL_WIDTH', 400))
    image = render_thumbnail(file_path, file.name, file.mime_type, width)
    return send_file(image, mimetype='image/jpeg', max_age=3600)
