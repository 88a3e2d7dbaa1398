import logging
from app.extensions import db
from app.models.file import Folder

logger = logging.getLogger(__name__)


def ensure_root_folder(app) -> Folder:
    """Create the configured root folder if it does not exist yet"""
    root_id = app.config['ROOT_FOLDER_ID']
    root = db.session.get(Folder, root_id)
    if root is None:
        root = Folder(name=app.config['ROOT_FOLDER_NAME'], id=root_id)
        db.session.add(root)
        db.session.commit()
        logger.info('Created root folder %s (%s)', root.name, root.id)
    return root


def initialize_db(app):
    db.init_app(app)

    with app.app_context():
        db.create_all()
        ensure_root_folder(app)

        return db
