import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_SQLITE = f"sqlite:///{os.path.join(BASE_DIR, 'registration.db')}"


def _flag(name, default):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


class Config:
    DATABASE_URL = os.environ.get('DATABASE_URL', DEFAULT_SQLITE)
    PORT = int(os.environ.get('PORT', '5001'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # werkzeug method string, e.g. 'scrypt' or 'pbkdf2:sha256:600000'
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    CREATE_TABLES = _flag('CREATE_TABLES', 'true')
    DEBUG = os.environ.get('FLASK_ENV', '') == 'development'
