"""Tests for classifier label mapping."""

from food_advisor.services.labels import (
    SUPPORTED_FOODS,
    is_known_food,
    map_label,
    supported_foods,
)


def test_map_label_normalizes_case_and_separators() -> None:
    assert map_label("French_Fries") == "french fries"
    assert map_label("  ICE   cream ") == "ice cream"


def test_map_label_uses_synonyms() -> None:
    assert map_label("hamburger") == "burger"
    assert map_label("butternut_squash") == "samosa"


def test_map_label_partial_match_takes_first_table_entry() -> None:
    assert map_label("pizza_with_rice") == "pizza"


def test_map_label_passes_unknown_labels_through() -> None:
    assert map_label("totally_unknown_xyz") == "totally unknown xyz"


def test_map_label_empty_label() -> None:
    assert map_label("   ") == ""


def test_is_known_food() -> None:
    assert is_known_food("cheeseburger")
    assert not is_known_food("quokka_qvx")


def test_supported_foods_is_a_copy() -> None:
    foods = supported_foods()
    foods.append("quokka")

    assert len(SUPPORTED_FOODS) == 20
    assert "quokka" not in supported_foods()
