import pytest
from flask import g
from flask.testing import FlaskClient
from app import create_app
from app.extensions import db
from app.models.access import AllowedEmail
from app.services import get_drive

ALLOWED_EMAIL = 'editor@example.com'


class TreeBuilder:
    """Creates folders and files under the root folder of the test app."""

    def __init__(self, provider, root_id):
        self.provider = provider
        self.root_id = root_id

    def folder(self, name, parent=None):
        return self.provider.create_folder(parent or self.root_id, name).id

    def file(self, name, parent=None, mime_type='application/pdf', size=10, file_path=None):
        return self.provider.add_file(parent or self.root_id, name, mime_type, size, file_path=file_path).id


class FreshUserClient(FlaskClient):
    """Drops Flask-Login's cached user, which lives in the shared app context's g."""

    def open(self, *args, **kwargs):
        g.pop('_login_user', None)
        return super().open(*args, **kwargs)


@pytest.fixture
def app():
    app = create_app('testing')
    app.test_client_class = FreshUserClient
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def drive(app):
    return get_drive()


@pytest.fixture
def provider(drive):
    return drive.provider


@pytest.fixture
def tree(drive):
    return TreeBuilder(drive.provider, drive.root_id)


@pytest.fixture
def client(app):
    db.session.add(AllowedEmail(ALLOWED_EMAIL))
    db.session.commit()
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'X-Forwarded-Email': ALLOWED_EMAIL}
