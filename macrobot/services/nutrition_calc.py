"""Расчет дневных норм калорий и БЖУ."""
import math
from macrobot.models import Profile, Goal

# Коэффициент умеренной активности (других уровней нет)
ACTIVITY_MULTIPLIER = 1.55

# Корректировка калорий под цель
GOAL_ADJUSTMENTS = {
    Goal.BULK: 300,   # Профицит 300 ккал
    Goal.CUT: -500,   # Дефицит 500 ккал
}

PROTEIN_PER_KG = 2.2
FAT_CALORIE_SHARE = 0.25

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def _round(value: float) -> int:
    """Округление к ближайшему целому, половины вверх."""
    return int(math.floor(value + 0.5))


def calculate_targets(weight_kg: float, height_cm: float, age: int, goal: Goal) -> dict:
    """Рассчитать дневные нормы калорий и БЖУ.

    Формула Mifflin-St Jeor с фиксированным коэффициентом активности 1.55.
    Белки и жиры считаются первыми, углеводы забирают остаток калорий.
    Углеводы не ограничиваются снизу и могут уйти в минус при крайних
    входных данных. Входные данные здесь не валидируются.

    Returns:
        dict с полями: calories, protein, carbs, fats
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
    tdee = bmr * ACTIVITY_MULTIPLIER

    calories = _round(tdee + GOAL_ADJUSTMENTS[Goal(goal)])
    protein = _round(weight_kg * PROTEIN_PER_KG)
    fats = _round(calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT)
    carbs = _round(
        (calories - (protein * KCAL_PER_G_PROTEIN + fats * KCAL_PER_G_FAT)) / KCAL_PER_G_CARBS
    )

    return {"calories": calories, "protein": protein, "carbs": carbs, "fats": fats}


def apply_targets(profile: Profile) -> dict:
    """Пересчитать нормы профиля по формуле и сбросить ручную правку."""
    targets = calculate_targets(profile.weight_kg, profile.height_cm, profile.age, profile.goal)
    profile.daily_calories = targets["calories"]
    profile.daily_protein = targets["protein"]
    profile.daily_carbs = targets["carbs"]
    profile.daily_fats = targets["fats"]
    profile.targets_overridden = False
    return targets


def goal_progress(total, targets: dict) -> dict:
    """Процент выполнения нормы по каждому показателю.

    Args:
        total: DailyTotal (или любой объект с calories/protein/carbs/fats)
        targets: нормы в формате calculate_targets
    """
    progress = {}
    for metric in ("calories", "protein", "carbs", "fats"):
        target = targets.get(metric) or 0
        value = getattr(total, metric)
        progress[metric] = _round(value / target * 100) if target > 0 else 0
    return progress
