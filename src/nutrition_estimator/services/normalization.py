"""Normalize loosely-typed nutrition payloads and scale them by quantity."""

import math
import re
from collections.abc import Mapping
from dataclasses import replace

from nutrition_estimator.domain.nutrition import NutritionRecord, RawNutrition
from nutrition_estimator.domain.rounding import clamp_finite, round_one_decimal

SERVING_SIZES: tuple[str, ...] = (
    "1 cup",
    "1 bowl",
    "1 plate",
    "1 piece",
    "1 slice",
    "1 spoon",
    "1 glass",
)
DEFAULT_SERVING_SIZE = "1 plate"

_UNIT_ALIASES: dict[str, str] = {
    "cup": "1 cup",
    "katori": "1 bowl",
    "bowl": "1 bowl",
    "plate": "1 plate",
    "piece": "1 piece",
    "pc": "1 piece",
    "pcs": "1 piece",
    "slice": "1 slice",
    "spoon": "1 spoon",
    "tablespoon": "1 spoon",
    "teaspoon": "1 spoon",
    "tbsp": "1 spoon",
    "tsp": "1 spoon",
    "glass": "1 glass",
}

# Checked in order; the first rule with a matching word wins.
_KEYWORD_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    (
        "1 glass",
        frozenset(
            {
                "juice",
                "milk",
                "tea",
                "chai",
                "coffee",
                "lassi",
                "buttermilk",
                "shake",
                "milkshake",
                "smoothie",
                "water",
                "soda",
                "lemonade",
                "beer",
            }
        ),
    ),
    (
        "1 bowl",
        frozenset(
            {
                "soup",
                "stew",
                "curry",
                "dal",
                "daal",
                "sambar",
                "rasam",
                "chili",
                "broth",
                "salad",
                "porridge",
                "khichdi",
                "kheer",
                "raita",
                "oatmeal",
            }
        ),
    ),
    (
        "1 spoon",
        frozenset(
            {
                "chutney",
                "ghee",
                "pickle",
                "honey",
                "jam",
                "sauce",
                "ketchup",
                "sugar",
                "butter",
                "mayonnaise",
            }
        ),
    ),
    (
        "1 slice",
        frozenset(
            {
                "bread",
                "toast",
                "roti",
                "chapati",
                "chapatti",
                "naan",
                "paratha",
                "phulka",
                "pizza",
                "cake",
                "sandwich",
            }
        ),
    ),
    (
        "1 piece",
        frozenset(
            {
                "idli",
                "dosa",
                "vada",
                "samosa",
                "egg",
                "banana",
                "apple",
                "orange",
                "cookie",
                "biscuit",
                "puri",
                "poori",
                "uttapam",
                "ladoo",
            }
        ),
    ),
    (
        "1 cup",
        frozenset(
            {
                "rice",
                "biryani",
                "pulao",
                "pasta",
                "noodles",
                "oats",
                "poha",
                "upma",
                "quinoa",
                "cereal",
                "couscous",
                "yogurt",
                "curd",
            }
        ),
    ),
)

_WORD_RE = re.compile(r"[a-z]+")
_LEADING_COUNT_RE = re.compile(r"^(\d+)\s+")
_SIBILANT_ENDINGS = ("ss", "sh", "ch", "x", "z")


def normalize_record(
    raw: Mapping[str, object] | RawNutrition, fallback_name: str
) -> NutritionRecord:
    """Build a well-formed record from an upstream payload.

    Missing or malformed fields never propagate: names fall back to the
    capitalized query text, numbers fall back to 0 and the serving size always
    comes from `SERVING_SIZES`.
    """
    payload = (
        raw if isinstance(raw, RawNutrition) else RawNutrition.model_validate(raw)
    )
    food_name = _normalize_name(payload.food_name, fallback_name)
    return NutritionRecord(
        food_name=food_name,
        serving_size=normalize_serving_size(
            payload.serving_size, food_name, fallback_name
        ),
        calories_kcal=sanitize_number(payload.calories_kcal),
        protein_g=sanitize_number(payload.protein_g),
        carbs_g=sanitize_number(payload.carbs_g),
        fat_g=sanitize_number(payload.fat_g),
    )


def sanitize_number(value: object) -> float:
    """Coerce a value to a non-negative float rounded to one decimal."""
    number = _to_float(value)
    if number is None or not math.isfinite(number) or number <= 0:
        return 0.0
    return round_one_decimal(number)


def normalize_serving_size(raw: object, *names: str) -> str:
    """Map a raw serving size onto the closed serving-size vocabulary."""
    serving_text = raw if isinstance(raw, str) else ""
    if serving_text in SERVING_SIZES:
        return serving_text
    for word in _words(serving_text):
        alias = _UNIT_ALIASES.get(_singular(word))
        if alias is not None:
            return alias
    raw_words = _words(" ".join((serving_text, *names)))
    words = set(raw_words) | {_singular(word) for word in raw_words}
    for serving_size, keywords in _KEYWORD_RULES:
        if words & keywords:
            return serving_size
    return DEFAULT_SERVING_SIZE


def scale_record(record: NutritionRecord, quantity: int) -> NutritionRecord:
    """Multiply macros by quantity and relabel the serving size."""
    if quantity < 1:
        raise ValueError(f"quantity must be at least 1, got {quantity}")
    return replace(
        record,
        serving_size=format_serving_size(quantity, record.serving_size),
        calories_kcal=_scale(record.calories_kcal, quantity),
        protein_g=_scale(record.protein_g, quantity),
        carbs_g=_scale(record.carbs_g, quantity),
        fat_g=_scale(record.fat_g, quantity),
    )


def _scale(value: float, quantity: int) -> float:
    if value == 0:
        return 0.0
    try:
        product = value * quantity
    except OverflowError:
        product = math.inf
    return round_one_decimal(clamp_finite(product))


def format_serving_size(quantity: int, serving_size: str) -> str:
    """Render a serving label such as "3 cups" from a base like "1 cup".

    A leading count on the base label multiplies the quantity, so "2 cups"
    scaled by 3 reads "6 cups".
    """
    label = serving_size.strip()
    match = _LEADING_COUNT_RE.match(label)
    count = int(match.group(1)) if match else 1
    unit = label[match.end() :] if match else label
    total = count * quantity
    if total == 1:
        return f"1 {unit}"
    return f"{total} {_pluralize(unit)}"


def _pluralize(unit: str) -> str:
    if unit.endswith(_SIBILANT_ENDINGS):
        return f"{unit}es"
    if unit.endswith("s"):
        return unit
    return f"{unit}s"


def _normalize_name(value: object, fallback_name: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback_name[:1].upper() + fallback_name[1:]


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, int | float):
            return float(value)
        if isinstance(value, str):
            return float(value.strip())
    except (OverflowError, ValueError):
        return None
    return None


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(text.lower())


def _singular(word: str) -> str:
    if word.endswith("es") and word[:-2].endswith(_SIBILANT_ENDINGS):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        return word[:-1]
    return word
