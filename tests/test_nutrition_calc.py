"""Тесты расчета дневных норм."""
from types import SimpleNamespace
from macrobot.models import Goal, Profile
from macrobot.services.nutrition_calc import calculate_targets, apply_targets, goal_progress


def test_cut_targets_example():
    """70 кг, 175 см, 30 лет, сушка."""
    # BMR = 700 + 1093.75 - 150 + 5 = 1648.75, TDEE = 2555.5625
    targets = calculate_targets(70, 175, 30, Goal.CUT)

    assert targets == {"calories": 2056, "protein": 154, "carbs": 232, "fats": 57}


def test_bulk_targets():
    """Та же база, масса: +300 ккал вместо −500."""
    targets = calculate_targets(70, 175, 30, Goal.BULK)

    assert targets["calories"] == 2856
    assert targets["fats"] == 79
    assert targets["carbs"] == 382


def test_protein_does_not_depend_on_goal():
    cut = calculate_targets(82.5, 180, 40, Goal.CUT)
    bulk = calculate_targets(82.5, 180, 40, Goal.BULK)

    assert cut["protein"] == bulk["protein"] == round(82.5 * 2.2)


def test_targets_are_deterministic():
    assert calculate_targets(64, 168, 27, "cut") == calculate_targets(64, 168, 27, Goal.CUT)


def test_carbs_can_go_negative():
    """Крайние входные данные не ограничиваются: углеводы уходят в минус."""
    targets = calculate_targets(100, 0, 300, Goal.CUT)

    assert targets["calories"] == -1267
    assert targets["protein"] == 220
    assert targets["fats"] == -35
    assert targets["carbs"] == -458


def test_apply_targets_resets_override():
    profile = Profile(weight_kg=70, height_cm=175, age=30, goal=Goal.CUT, targets_overridden=True)

    apply_targets(profile)

    assert profile.daily_calories == 2056
    assert profile.daily_protein == 154
    assert profile.targets_overridden is False


def test_goal_progress():
    total = SimpleNamespace(calories=1023, protein=77, carbs=0, fats=57)
    targets = {"calories": 2046, "protein": 154, "carbs": 229, "fats": 57}

    progress = goal_progress(total, targets)

    assert progress == {"calories": 50, "protein": 50, "carbs": 0, "fats": 100}


def test_goal_progress_zero_target():
    total = SimpleNamespace(calories=500, protein=10, carbs=10, fats=10)

    progress = goal_progress(total, {"calories": 0, "protein": 0, "carbs": -5, "fats": 0})

    assert progress == {"calories": 0, "protein": 0, "carbs": 0, "fats": 0}
