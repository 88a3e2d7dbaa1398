import os
import secrets
import platform
from pathlib import Path


def get_base_storage_path() -> Path:
    """Get the base storage path based on the operating system"""
    override = os.environ.get('BASE_STORAGE_PATH')
    if override:
        return Path(override)

    system = platform.system().lower()
    if system == 'windows':
        drive_path = Path('D:/cloud_storage')
        if drive_path.exists():
            return drive_path
        return Path.home() / 'cloud_storage'
    elif system == 'linux':
        if os.path.exists('/mnt/cloud_storage'):
            return Path('/mnt/cloud_storage')
        return Path.home() / 'cloud_storage'
    elif system == 'darwin':
        return Path.home() / 'cloud_storage'
    else:
        return Path(__file__).parent / 'storage'


def get_db_path(env: str) -> str:
    """Get the database path based on environment and operating system"""
    if env == 'development':
        db_path = Path(__file__).parent / 'dev.db'
    else:
        db_path = get_base_storage_path() / 'folder-remarks' / 'production.db'

    db_path.parent.mkdir(parents=True, exist_ok=True)
    return str(db_path)


class Config(object):
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(16)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Server configuration
    USE_HTTPS = False
    SERVER_PORT = int(os.environ.get('SERVER_PORT', 5000))
    SERVER_HOST = os.environ.get('SERVER_HOST', '0.0.0.0')

    system = platform.system().lower()
    if system == 'linux':
        SSL_CERT = '/etc/ssl/certs/folder-remarks.crt'
        SSL_KEY = '/etc/ssl/private/folder-remarks.key'
    else:
        SSL_CERT = str(Path(__file__).parent / 'ssl' / 'folder-remarks.crt')
        SSL_KEY = str(Path(__file__).parent / 'ssl' / 'folder-remarks.key')

    # Folder tree
    ROOT_FOLDER_ID = os.environ.get('ROOT_FOLDER_ID', 'root')
    ROOT_FOLDER_NAME = os.environ.get('ROOT_FOLDER_NAME', 'Multimedia')
    MAX_FOLDER_HOPS = 20
    SEARCH_MAX_RESULTS = 50

    # Remarks
    REMARKS_CACHE_SECONDS = 30

    # Links handed to the browser
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL', '')
    THUMBNAIL_BASE_URL = os.environ.get('THUMBNAIL_BASE_URL', '/thumbnail')
    THUMBNAIL_WIDTH = 400

    # Identity is resolved by the fronting proxy
    USER_EMAIL_HEADER = os.environ.get('USER_EMAIL_HEADER', 'X-Forwarded-Email')

    # The page sends its token in the X-CSRFToken header
    WTF_CSRF_ENABLED = True
    WTF_CSRF_HEADERS = ['X-CSRFToken']


class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or f'sqlite:///{get_db_path("development")}'
    TEMPLATES_AUTO_RELOAD = True
    SEND_FILE_MAX_AGE_DEFAULT = 0


class ProductionConfig(Config):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{get_db_path("production")}'
    PREFERRED_URL_SCHEME = 'https'


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    ROOT_FOLDER_ID = 'root'
    ROOT_FOLDER_NAME = 'Multimedia'
    PUBLIC_BASE_URL = 'http://files.test'
    THUMBNAIL_BASE_URL = 'http://files.test/thumbnail'
    USER_EMAIL_HEADER = 'X-Forwarded-Email'
    WTF_CSRF_ENABLED = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
