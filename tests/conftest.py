"""Общие фикстуры тестов."""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from macrobot.database import Base
from macrobot.models import User
from macrobot.services.food_log_service import FoodLogStore
from macrobot.services.achievement_service import AchievementStore



@pytest.fixture
def session_factory():
    """Фабрика сессий поверх SQLite в памяти."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def user_id(session_factory):
    db = session_factory()
    try:
        user = User(telegram_id=1001, username="tester", first_name="Test")
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


@pytest.fixture
def food_store(session_factory):
    return FoodLogStore(session_factory)


@pytest.fixture
def achievement_store(session_factory):
    return AchievementStore(session_factory)
