"""Free-text meal interpreter backed by a keyword rule table."""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from nutritrack.domain.meals import NutrientEstimate
from nutritrack.rounding import round_half_up

_logger = logging.getLogger(__name__)


class FoodTableError(ValueError):
    """Raised when a food rule table cannot be loaded."""


MAX_RULE_VALUE = 100_000


class FoodRule(BaseModel):
    """Per-unit nutrients for one food keyword."""

    calories: float = Field(ge=0, le=MAX_RULE_VALUE)
    protein: float = Field(ge=0, le=MAX_RULE_VALUE)
    carbs: float = Field(ge=0, le=MAX_RULE_VALUE)
    fat: float = Field(ge=0, le=MAX_RULE_VALUE)


DEFAULT_FOOD_TABLE: dict[str, FoodRule] = {
    "egg": FoodRule(calories=78, protein=6, carbs=1, fat=5),
    # per cup
    "rice": FoodRule(calories=130, protein=3, carbs=28, fat=0.3),
    # per 100g
    "chicken": FoodRule(calories=165, protein=31, carbs=0, fat=3.6),
    "banana": FoodRule(calories=89, protein=1, carbs=23, fat=0.3),
    # per slice
    "bread": FoodRule(calories=79, protein=3, carbs=14, fat=1),
}

DEFAULT_ESTIMATE = NutrientEstimate(calories=150, protein_g=8, carbs_g=20, fat_g=5)

# quantities above this are clamped
MAX_QUANTITY = 10_000.0


def load_food_table(path: Path) -> dict[str, FoodRule]:
    """Load a keyword rule table from a JSON object file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise FoodTableError(f"Cannot read food table {path}: {exc}") from exc
    if not isinstance(raw, dict) or not raw:
        raise FoodTableError(f"Food table {path} must be a non-empty JSON object")
    table: dict[str, FoodRule] = {}
    for keyword, values in raw.items():
        cleaned = str(keyword).strip().lower()
        if not cleaned:
            raise FoodTableError(f"Food table {path} has an empty keyword")
        try:
            table[cleaned] = FoodRule.model_validate(values)
        except ValidationError as exc:
            raise FoodTableError(f"Invalid rule for {keyword!r}: {exc}") from exc
    _logger.info("Loaded food table: path=%s keywords=%s", path, len(table))
    return table


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    # optional quantity, optional single filler word, keyword, optional plural
    return re.compile(
        rf"\b(?:(?P<quantity>\d+(?:\.\d+)?)\s*)?(?:[a-z]+\s+)?"
        rf"{re.escape(keyword)}s?\b",
        re.IGNORECASE,
    )


@dataclass
class FoodTextInterpreter:
    """Estimate nutrients for a meal description like "2 eggs and 1 cup rice"."""

    table: dict[str, FoodRule] = field(
        default_factory=lambda: dict(DEFAULT_FOOD_TABLE)
    )
    default: NutrientEstimate = DEFAULT_ESTIMATE

    def __post_init__(self) -> None:
        self._patterns = {keyword: _keyword_pattern(keyword) for keyword in self.table}

    def interpret(self, text: str) -> NutrientEstimate:
        """Return the rounded estimate for ``text``; never raises.

        Each keyword contributes at most once, using the first match in the
        text, with quantities above MAX_QUANTITY clamped. Text matching no
        keyword gets the fixed default estimate.
        """
        calories = protein = carbs = fat = 0.0
        matched = False
        for keyword, pattern in self._patterns.items():
            match = pattern.search(text)
            if match is None:
                continue
            matched = True
            quantity = min(float(match.group("quantity") or 1), MAX_QUANTITY)
            rule = self.table[keyword]
            calories += rule.calories * quantity
            protein += rule.protein * quantity
            carbs += rule.carbs * quantity
            fat += rule.fat * quantity

        if not matched:
            return self.default

        return NutrientEstimate(
            calories=round_half_up(calories),
            protein_g=round_half_up(protein),
            carbs_g=round_half_up(carbs),
            fat_g=round_half_up(fat),
        )
