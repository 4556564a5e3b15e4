"""Сервис для работы с пользователями и профилями."""
import logging
from typing import Optional
from telegram import User as TelegramUser
from sqlalchemy.orm import joinedload
from macrobot.database import get_db
from macrobot.models import User, Profile, Goal
from macrobot.services.nutrition_calc import apply_targets

logger = logging.getLogger(__name__)


def get_or_create_user(telegram_user: TelegramUser, session_factory=None) -> User:
    """Получить или создать пользователя.

    Args:
        telegram_user: Объект пользователя из Telegram

    Returns:
        Объект User из БД
    """
    with get_db(session_factory) as db:
        user = (
            db.query(User)
            .options(joinedload(User.profile))
            .filter(User.telegram_id == telegram_user.id)
            .first()
        )

        if not user:
            user = User(
                telegram_id=telegram_user.id,
                username=telegram_user.username,
                first_name=telegram_user.first_name,
                last_name=telegram_user.last_name,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            # У нового пользователя профиля нет
            _ = user.profile

        return user


def get_user_by_telegram_id(telegram_id: int, session_factory=None) -> Optional[User]:
    """Получить пользователя по Telegram ID (с профилем)."""
    with get_db(session_factory) as db:
        return (
            db.query(User)
            .options(joinedload(User.profile))
            .filter(User.telegram_id == telegram_id)
            .first()
        )


def has_profile(user: User) -> bool:
    """Проверить, заполнен ли профиль пользователя."""
    return user.profile is not None


def find_profile(db, user_id: int) -> Optional[Profile]:
    """Профиль пользователя в рамках открытой сессии."""
    return db.query(Profile).filter_by(user_id=user_id).first()


def set_body_metrics(
    profile: Profile,
    weight_kg: Optional[float] = None,
    height_cm: Optional[float] = None,
    age: Optional[int] = None,
) -> None:
    """Изменить параметры тела и пересчитать нормы, если они не заданы вручную."""
    if weight_kg is not None:
        profile.weight_kg = weight_kg
    if height_cm is not None:
        profile.height_cm = height_cm
    if age is not None:
        profile.age = age

    if not profile.targets_overridden:
        apply_targets(profile)


def create_profile(
    user_id: int,
    weight_kg: float,
    height_cm: float,
    age: int,
    goal: Goal,
    session_factory=None,
) -> Profile:
    """Создать профиль при онбординге и рассчитать нормы."""
    with get_db(session_factory) as db:
        profile = Profile(
            user_id=user_id,
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=age,
            goal=Goal(goal),
        )
        apply_targets(profile)
        db.add(profile)
        db.commit()
        db.refresh(profile)
        logger.info(f"Profile created for user {user_id}: {profile.daily_calories} kcal")
        return profile


def update_body_metrics(
    user_id: int,
    weight_kg: Optional[float] = None,
    height_cm: Optional[float] = None,
    age: Optional[int] = None,
    session_factory=None,
) -> Optional[Profile]:
    """Обновить параметры тела.

    Нормы пересчитываются по формуле, если не были заданы вручную.
    """
    with get_db(session_factory) as db:
        profile = find_profile(db, user_id)
        if profile is None:
            return None

        set_body_metrics(profile, weight_kg, height_cm, age)
        db.commit()
        db.refresh(profile)
        return profile


def toggle_goal(user_id: int, session_factory=None) -> Optional[Profile]:
    """Переключить цель cut/bulk и пересчитать нормы по формуле.

    Ручная правка норм при этом сбрасывается.
    """
    with get_db(session_factory) as db:
        profile = find_profile(db, user_id)
        if profile is None:
            return None

        profile.goal = Goal.BULK if profile.goal == Goal.CUT else Goal.CUT
        apply_targets(profile)
        db.commit()
        db.refresh(profile)
        logger.info(f"User {user_id} switched goal to {profile.goal.value}")
        return profile


def override_targets(
    user_id: int,
    calories: int,
    protein: int,
    carbs: int,
    fats: int,
    session_factory=None,
) -> Optional[Profile]:
    """Задать нормы вручную. Формула не применяется до смены цели."""
    with get_db(session_factory) as db:
        profile = find_profile(db, user_id)
        if profile is None:
            return None

        profile.daily_calories = calories
        profile.daily_protein = protein
        profile.daily_carbs = carbs
        profile.daily_fats = fats
        profile.targets_overridden = True
        db.commit()
        db.refresh(profile)
        return profile
