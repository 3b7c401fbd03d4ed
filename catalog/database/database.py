from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from catalog.config import DATABASE_URL, DB_TIMEOUT_SECONDS
from catalog.models.database_models import Base


def build_engine(url: str = DATABASE_URL, timeout: float = DB_TIMEOUT_SECONDS):
    """Engine whose waits on locks, connections and statements are bounded by ``timeout``."""
    if url.startswith('sqlite'):
        return create_engine(
            url,
            connect_args={'check_same_thread': False, 'timeout': timeout},
        )

    return create_engine(
        url,
        pool_timeout=timeout,
        pool_pre_ping=True,
        connect_args={
            'connect_timeout': max(1, int(timeout)),
            'options': f'-c statement_timeout={int(timeout * 1000)}',
        },
    )


engine = build_engine()
sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    Base.metadata.create_all(bind or engine)


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
