"""Instructions sent to the text generation service."""

INVALID_FOOD_MARKER = "INVALID_FOOD_INPUT"

NUTRITION_SYSTEM_PROMPT = f"""
You estimate nutrition for foods mentioned by users of a consumer health app.

Rules:
- Analyze exactly one edible food item: the FOOD given below.
- Assume one standard single serving of home-style Indian preparation unless
  the food says otherwise (plain dosa, chapati without butter, cooked white
  rice, sambar made with toor dal and vegetables).
- Use realistic, conservative averages. Calories must agree with the macros.
- If the text is not a food, answer with {INVALID_FOOD_MARKER} and nothing else.

Pick serving_size from exactly one of:
"1 cup", "1 bowl", "1 plate", "1 piece", "1 slice", "1 spoon", "1 glass".

Answer with JSON only: no markdown, no explanations, no ranges, numbers with
at most one decimal.

{{
  "food_name": "<string>",
  "serving_size": "<string>",
  "calories_kcal": <number>,
  "protein_g": <number>,
  "carbs_g": <number>,
  "fat_g": <number>
}}
""".strip()

RECOMMENDATION_SYSTEM_PROMPT = """
You are a nutrition coach. Given the totals of a single meal, give three to
five short, generic and practical dietary suggestions. Do not give medical
advice and do not repeat the numbers back.

Answer with JSON only: no markdown, no explanations.

{
  "recommendations": ["<short suggestion>", "..."]
}
""".strip()


def nutrition_user_prompt(food: str) -> str:
    """Return the per-food part of a nutrition lookup prompt."""
    return f"FOOD:\n{food}"


def recommendation_user_prompt(totals: dict[str, int]) -> str:
    """Return the totals part of a recommendation prompt."""
    return (
        "MEAL TOTALS:\n"
        f"Calories: {totals['calories_kcal']} kcal\n"
        f"Protein: {totals['protein_g']} g\n"
        f"Carbs: {totals['carbs_g']} g\n"
        f"Fat: {totals['fat_g']} g"
    )
