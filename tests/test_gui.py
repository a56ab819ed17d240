import pytest

from famclicker.gui import (
    auto_clicker_label,
    click_value_label,
    price_label,
    score_label,
)


@pytest.mark.parametrize("score", [0, 7, 10000000])
def test_score_label(score):
    assert score_label(score) == f"Очки: {score}"


def test_score_label_negative():
    assert score_label(-3) == "Очки: -3"


@pytest.mark.parametrize("value", [1, 2, 50])
def test_click_value_label(value):
    assert click_value_label(value) == f"Очков за клик: {value}"


@pytest.mark.parametrize("value", [0, 1, 12])
def test_auto_clicker_label(value):
    assert auto_clicker_label(value) == f"Очков в секунду: {value}"


@pytest.mark.parametrize("cost", [50, 1000])
def test_price_label(cost):
    assert price_label(cost) == f"Цена: {cost} очков"


def test_labels_contain_value_once():
    text = price_label(123)
    assert text.count("123") == 1
    assert text.startswith("Цена: ")