import logging
import os
import ssl
from app import create_app

logger = logging.getLogger(__name__)


def load_ssl_context(cert_path, key_path):
    """Return an SSL context for the certificate pair, or None to serve plain HTTP"""
    if not os.path.exists(cert_path) or not os.path.exists(key_path):
        logger.warning('SSL certificate files not found at %s and %s, serving over HTTP', cert_path, key_path)
        return None

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    try:
        context.load_cert_chain(cert_path, key_path)
    except Exception as e:
        logger.error('Error loading SSL certificates: %s, serving over HTTP', e)
        return None
    return context


if __name__ == '__main__':
    app = create_app(os.environ.get('FLASK_CONFIG', 'default'))

    run_options = {
        'debug': app.config.get('DEBUG', False),
        'host': app.config.get('SERVER_HOST', '0.0.0.0'),
        'port': app.config.get('SERVER_PORT', 5000)
    }

    if app.config.get('USE_HTTPS', False):
        context = load_ssl_context(app.config.get('SSL_CERT'), app.config.get('SSL_KEY'))
        if context is not None:
            run_options['ssl_context'] = context

    app.run(**run_options)
