import os


def _database_url() -> str:
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    _database = os.getenv('POSTGRES_DB')
    _user = os.getenv('POSTGRES_USER')
    _password = os.getenv('POSTGRES_PASSWORD')
    _host = os.getenv('POSTGRES_HOST')
    _port = os.getenv('POSTGRES_PORT', '5432')
    if _database and _user and _host:
        return f'postgresql://{_user}:{_password}@{_host}:{_port}/{_database}'

    return 'sqlite:///./catalog.db'


DATABASE_URL = _database_url()
DB_TIMEOUT_SECONDS = float(os.getenv('DB_TIMEOUT_SECONDS', '5'))

# Token signing key, handed to TokenIssuer by the auth dependency
SECRET = os.getenv('SECRET', 'change-me')
TOKEN_TTL_MS = int(os.getenv('TOKEN_TTL_MS', str(30 * 60000)))

STOCK_FLOOR = 5
# Largest value the integer columns hold (int4 on PostgreSQL)
MAX_INT = 2**31 - 1
DEFAULT_STOCK = 50
DEFAULT_DESCRIPTION = 'no description'

GZIP_MINIMUM_SIZE = int(os.getenv('GZIP_MINIMUM_SIZE', '1000'))

LOG_DIR = os.getenv('LOG_DIR', '')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
