"""Достижения: каталог, проверка условий и выдача наград."""
import calendar
import logging
from datetime import datetime
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError
from macrobot.database import get_db
from macrobot.models import Achievement, UserAchievement, CriteriaType
from macrobot.services.food_log_service import FoodLogStore
from macrobot.services.streak_service import streak_achievement_met

logger = logging.getLogger(__name__)

# Базовый каталог достижений
DEFAULT_ACHIEVEMENTS = [
    {
        "code": "first_meal",
        "name": "Первый шаг",
        "description": "Добавь первую запись о еде",
        "icon": "🍽️",
        "criteria_type": CriteriaType.FIRST_ENTRY,
        "criteria_value": 1,
    },
    {
        "code": "monthly_regular",
        "name": "Снова в деле",
        "description": "Записывай еду хотя бы раз за последний месяц",
        "icon": "📅",
        "criteria_type": CriteriaType.MONTHLY_ENTRIES,
        "criteria_value": 1,
    },
    {
        "code": "streak_3",
        "name": "Разгон",
        "description": "3 дня подряд с записями",
        "icon": "🔥",
        "criteria_type": CriteriaType.STREAK,
        "criteria_value": 3,
    },
    {
        "code": "streak_7",
        "name": "Неделя без пропусков",
        "description": "7 дней подряд с записями",
        "icon": "⚡",
        "criteria_type": CriteriaType.STREAK,
        "criteria_value": 7,
    },
    {
        "code": "entries_10",
        "name": "Десятка",
        "description": "10 записей о еде",
        "icon": "🥗",
        "criteria_type": CriteriaType.TOTAL_ENTRIES,
        "criteria_value": 10,
    },
    {
        "code": "streak_30",
        "name": "Железная дисциплина",
        "description": "30 дней подряд с записями",
        "icon": "🏅",
        "criteria_type": CriteriaType.STREAK,
        "criteria_value": 30,
    },
    {
        "code": "entries_100",
        "name": "Сотня",
        "description": "100 записей о еде",
        "icon": "💯",
        "criteria_type": CriteriaType.TOTAL_ENTRIES,
        "criteria_value": 100,
    },
]


def months_ago(moment: datetime, months: int) -> datetime:
    """Начало дня, отстоящего от moment на months календарных месяцев.

    День месяца ограничивается последним днем целевого месяца (31 марта − 1 = 28/29 февраля).
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return datetime(year, month, day)


class AchievementStore:
    """Каталог достижений и полученные пользователями награды."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory

    def fetch_catalog(self) -> list[Achievement]:
        """Весь каталог по возрастанию порога (при равенстве — в порядке добавления)."""
        with get_db(self._session_factory) as db:
            return (
                db.query(Achievement)
                .order_by(Achievement.criteria_value.asc(), Achievement.id.asc())
                .all()
            )

    def fetch_earned_ids(self, user_id: int) -> set[int]:
        """ID уже полученных пользователем достижений."""
        with get_db(self._session_factory) as db:
            rows = (
                db.query(UserAchievement.achievement_id)
                .filter(UserAchievement.user_id == user_id)
                .all()
            )
            return {achievement_id for (achievement_id,) in rows}

    def award(
        self, user_id: int, achievement_id: int, earned_at: Optional[datetime] = None
    ) -> Optional[UserAchievement]:
        """Выдать достижение.

        Повторная выдача (в т.ч. параллельная из другой сессии) не ошибка:
        уникальный индекс отклоняет вставку, и метод возвращает None.
        """
        with get_db(self._session_factory) as db:
            row = UserAchievement(
                user_id=user_id,
                achievement_id=achievement_id,
                earned_at=earned_at or datetime.now(),
            )
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.info(f"Achievement {achievement_id} already earned by user {user_id}")
                return None

            db.refresh(row)
            # Загружаем каталог до закрытия сессии
            _ = row.achievement
            return row

    def fetch_user_achievements(self, user_id: int) -> list[UserAchievement]:
        """Полученные достижения, новые первыми."""
        with get_db(self._session_factory) as db:
            return (
                db.query(UserAchievement)
                .filter(UserAchievement.user_id == user_id)
                .order_by(UserAchievement.earned_at.desc(), UserAchievement.id.desc())
                .all()
            )


class AchievementEngine:
    """Проверка условий каталога и выдача новых достижений.

    Каждое достижение проверяется до конца перед следующим. Ошибка при
    проверке одного достижения не мешает остальным: она логируется,
    а достижение считается не полученным в этом проходе.
    """

    def __init__(
        self,
        entries: Optional[FoodLogStore] = None,
        catalog: Optional[AchievementStore] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.entries = entries or FoodLogStore()
        self.catalog = catalog or AchievementStore()
        self._now = now or datetime.now

        self._predicates = {
            CriteriaType.FIRST_ENTRY: self._first_entry,
            CriteriaType.STREAK: self._streak,
            CriteriaType.TOTAL_ENTRIES: self._total_entries,
            CriteriaType.MONTHLY_ENTRIES: self._monthly_entries,
        }
        missing = set(CriteriaType) - set(self._predicates)
        if missing:
            raise RuntimeError(f"Нет проверки для типов: {sorted(m.value for m in missing)}")

    def _first_entry(self, user_id: int, value: int, now: datetime) -> bool:
        return self.entries.count_entries(user_id) >= 1

    def _streak(self, user_id: int, value: int, now: datetime) -> bool:
        return streak_achievement_met(self.entries, user_id, value, today=now.date())

    def _total_entries(self, user_id: int, value: int, now: datetime) -> bool:
        return self.entries.count_entries(user_id) >= value

    def _monthly_entries(self, user_id: int, value: int, now: datetime) -> bool:
        # Проверяется наличие хотя бы одной записи за value месяцев, а не их число
        return self.entries.count_entries(user_id, since=months_ago(now, value)) >= 1

    def is_met(self, user_id: int, achievement: Achievement, now: Optional[datetime] = None) -> bool:
        """Выполнено ли условие достижения для пользователя."""
        predicate = self._predicates[CriteriaType(achievement.criteria_type)]
        return predicate(user_id, achievement.criteria_value, now or self._now())

    def evaluate(self, user_id: int) -> list[UserAchievement]:
        """Проверить весь каталог и выдать новые достижения.

        Returns:
            Список UserAchievement, созданных именно в этом вызове
        """
        achievements = self.catalog.fetch_catalog()
        earned_ids = self.catalog.fetch_earned_ids(user_id)
        now = self._now()

        new_achievements = []
        for achievement in achievements:
            if achievement.id in earned_ids:
                continue

            try:
                if not self.is_met(user_id, achievement, now):
                    continue
                awarded = self.catalog.award(user_id, achievement.id, earned_at=now)
            except Exception as e:
                logger.error(
                    f"Ошибка проверки достижения {achievement.code} для user {user_id}: {e}",
                    exc_info=True,
                )
                continue

            if awarded is not None:
                logger.info(f"🏆 User {user_id} earned {achievement.code}")
                new_achievements.append(awarded)

        return new_achievements


def check_achievements(user_id: int, engine: Optional[AchievementEngine] = None) -> list[UserAchievement]:
    """Проверить достижения после новой записи. Ошибки только логируются."""
    try:
        return (engine or AchievementEngine()).evaluate(user_id)
    except Exception as e:
        logger.error(f"Не удалось проверить достижения user {user_id}: {e}", exc_info=True)
        return []


def get_user_achievements(user_id: int, store: Optional[AchievementStore] = None) -> list[UserAchievement]:
    """Полученные пользователем достижения вместе с данными каталога."""
    return (store or AchievementStore()).fetch_user_achievements(user_id)


def seed_achievements(session_factory=None) -> int:
    """Добавить недостающие достижения базового каталога.

    Returns:
        Количество добавленных записей
    """
    with get_db(session_factory) as db:
        existing = {code for (code,) in db.query(Achievement.code).all()}
        added = 0
        for data in DEFAULT_ACHIEVEMENTS:
            if data["code"] in existing:
                continue
            db.add(Achievement(**data))
            added += 1
        db.commit()

    if added:
        logger.info(f"Seeded {added} achievements")
    return added
