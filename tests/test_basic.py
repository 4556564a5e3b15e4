"""Тесты конфигурации и разбора ввода."""
import pytest
from macrobot.config import Config
from macrobot.handlers.food import parse_food_text, generate_progress_bar


def test_config_validation():
    """Тест валидации конфигурации."""
    config = Config(BOT_TOKEN="test_token", DATABASE_URL="sqlite:///test.db", ADMIN_ID=None)
    # Не должно вызывать ошибку
    config.validate()


def test_config_requires_token():
    config = Config(BOT_TOKEN="", DATABASE_URL="sqlite:///test.db", ADMIN_ID=None)

    with pytest.raises(ValueError):
        config.validate()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "abc")
    monkeypatch.setenv("ADMIN_ID", "42")
    monkeypatch.setenv("STATS_WINDOW_DAYS", "14")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.ADMIN_ID == 42
    assert config.STATS_WINDOW_DAYS == 14
    assert config.LOG_LEVEL == "DEBUG"


def test_parse_food_text():
    """Тест парсинга текста еды."""
    data = parse_food_text("Гречка с курицей; 450; 35; 50,5; 12")
    assert data == {
        "food_name": "Гречка с курицей",
        "calories": 450,
        "protein": 35,
        "carbs": 50.5,
        "fats": 12,
    }

    # Только калории
    data = parse_food_text("  Яблоко ; 52 ")
    assert data["food_name"] == "Яблоко"
    assert data["protein"] == data["carbs"] == data["fats"] == 0


def test_parse_food_text_errors():
    for text in ("Овсянка", "; 300", "Суп; много", "Суп; -5", "Суп; ; 10", "Суп; 1; 2; 3; 4; 5"):
        with pytest.raises(ValueError):
            parse_food_text(text)


def test_parse_food_text_keeps_positions():
    """Пустое поле — ноль, остальные значения не сдвигаются."""
    data = parse_food_text("Курица; 300; ; 30; 5")

    assert data["calories"] == 300
    assert data["protein"] == 0
    assert data["carbs"] == 30
    assert data["fats"] == 5


def test_parse_food_text_rejects_non_finite():
    for text in ("Суп; nan", "Суп; inf", "Суп; 100; -inf"):
        with pytest.raises(ValueError):
            parse_food_text(text)


def test_progress_bar():
    assert generate_progress_bar(50, 100, length=10) == "🟩" * 5 + "▯" * 5
    assert generate_progress_bar(500, 100, length=4) == "🟩" * 4
    assert generate_progress_bar(10, 0, length=3) == "▯" * 3
