"""Подключение к базе данных SQLAlchemy."""
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from macrobot.config import config

# Создание движка БД
engine = create_engine(
    config.DATABASE_URL,
    echo=False,  # True для отладки SQL
    connect_args={"check_same_thread": False} if "sqlite" in config.DATABASE_URL else {},
)

# Фабрика сессий
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()


def init_db() -> None:
    """Создание всех таблиц в БД и заполнение каталога достижений."""
    # Импорт регистрирует модели в metadata
    import macrobot.models  # noqa: F401
    from macrobot.services.achievement_service import seed_achievements

    Base.metadata.create_all(bind=engine)
    seed_achievements()


@contextmanager
def get_db(session_factory=None):
    """Контекстный менеджер для сессий БД.

    Использование:
        with get_db() as db:
            user = db.query(User).first()

    Args:
        session_factory: фабрика сессий (по умолчанию SessionLocal)
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    finally:
        db.close()
