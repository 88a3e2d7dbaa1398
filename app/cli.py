import os
from datetime import datetime, timezone
import click
from flask import Flask, current_app
from app.extensions import db
from app.models.access import AllowedEmail, normalize_email
from app.models.db_init import ensure_root_folder
from app.services import get_drive
from app.utils.file_utils import get_mime_type


def import_tree(provider, local_path: str, parent_id: str) -> tuple[int, int]:
    """
    Mirror a local directory below ``parent_id``

    Returns:
        tuple: Number of folders and files created
    """
    folder_count = 0
    file_count = 0

    with os.scandir(local_path) as entries:
        children = sorted(entries, key=lambda e: e.name)

    for entry in children:
        if entry.is_dir(follow_symlinks=False):
            folder = provider.create_folder(parent_id, entry.name)
            sub_folders, sub_files = import_tree(provider, entry.path, folder.id)
            folder_count += 1 + sub_folders
            file_count += sub_files
        elif entry.is_file(follow_symlinks=False):
            stat = entry.stat()
            provider.add_file(
                parent_id,
                entry.name,
                get_mime_type(entry.name),
                stat.st_size,
                file_path=os.path.abspath(entry.path),
                updated_at=datetime.fromtimestamp(stat.st_mtime, timezone.utc).replace(tzinfo=None)
            )
            file_count += 1

    return folder_count, file_count


def register_commands(app: Flask) -> None:
    @app.cli.command('init-db')
    def init_db_command():
        """Create the tables and the root folder."""
        db.create_all()
        root = ensure_root_folder(current_app)
        click.echo(f'Database initialized, root folder "{root.name}" ({root.id})')

    @app.cli.command('allow-email')
    @click.argument('email')
    def allow_email_command(email):
        """Allow EMAIL to use the application."""
        if AllowedEmail.query.filter_by(email=normalize_email(email)).first():
            click.echo(f'{normalize_email(email)} is already allowed')
            return

        db.session.add(AllowedEmail(email))
        db.session.commit()
        click.echo(f'Allowed {normalize_email(email)}')

    @app.cli.command('import-tree')
    @click.argument('path', type=click.Path(exists=True, file_okay=False))
    @click.option('--parent', 'parent_id', default=None, help='Folder to import into (root by default).')
    def import_tree_command(path, parent_id):
        """Mirror the local directory PATH into the folder tree."""
        drive = get_drive()
        folders, files = import_tree(drive.provider, path, parent_id or drive.root_id)
        click.echo(f'Imported {folders} folders and {files} files')
