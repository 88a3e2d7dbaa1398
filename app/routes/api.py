import csv
import io
from flask import Blueprint, Response, jsonify, request
from app.forms.drive import CreateFolderForm, MoveFolderForm, RemarksForm, RenameFolderForm, first_error
from app.models.remark import REMARKS_HEADER
from app.routes.auth import allowed_user_required
from app.services import get_drive

api = Blueprint('api', __name__, url_prefix='/api')


def invalid(form):
    return jsonify({'success': False, 'error': first_error(form)}), 400


@api.route('/root')
@allowed_user_required
def root_info():
    return jsonify(get_drive().listing.root_info())


@api.route('/folders/contents')
@allowed_user_required
def folder_contents():
    folder_id = request.args.get('folder_id') or None
    return jsonify(get_drive().listing.list_contents(folder_id))


@api.route('/search')
@allowed_user_required
def search():
    query = request.args.get('query', '').strip()
    if not query:
        return jsonify({'success': False, 'error': 'Search query is required'}), 400

    folder_id = request.args.get('folder_id') or None
    return jsonify(get_drive().search.search(query, folder_id))


@api.route('/folders', methods=['POST'])
@allowed_user_required
def create_folder():
    form = CreateFolderForm()
    if not form.validate_on_submit():
        return invalid(form)

    return jsonify(get_drive().folders.create_folder(form.name.data.strip(), form.parent_id.data or None))


@api.route('/folders/<folder_id>/rename', methods=['POST'])
@allowed_user_required
def rename_folder(folder_id):
    form = RenameFolderForm()
    if not form.validate_on_submit():
        return invalid(form)

    return jsonify(get_drive().folders.rename_folder(folder_id, form.name.data.strip()))


@api.route('/folders/<folder_id>/move', methods=['POST'])
@allowed_user_required
def move_folder(folder_id):
    form = MoveFolderForm()
    if not form.validate_on_submit():
        return invalid(form)

    return jsonify(get_drive().folders.move_folder(folder_id, form.target_id.data))


@api.route('/remarks', methods=['POST'])
@allowed_user_required
def save_remarks():
    form = RemarksForm()
    if not form.validate_on_submit():
        return invalid(form)

    result = get_drive().remarks_store.upsert(
        form.file_id.data,
        form.file_name.data or '',
        form.file_type.data or '',
        form.parent_folder_id.data or '',
        form.folder_path.data or '',
        form.remarks.data or ''
    )
    return jsonify(result)


@api.route('/remarks/export')
@allowed_user_required
def export_remarks():
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(REMARKS_HEADER)
    writer.writerows(get_drive().remarks_store.export_rows())

    return Response(
        output.getvalue(),
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename="remarks.csv"'}
    )
