"""Prompt construction for AI calorie plans."""

from nutrisync.domain.calorie_plan.core.value_objects import CalorieProfile

CALORIE_PLAN_SYSTEM_PROMPT = (
    "You are a certified nutritionist and fitness expert. Calculate "
    "personalized daily calorie goals and provide comprehensive nutrition advice."
)

_RESPONSE_CONTRACT = """RESPOND ONLY WITH VALID JSON in this exact format:
{
  "bmr": 1650,
  "tdee": 2200,
  "dailyCalorieGoal": 1950,
  "macroBreakdown": {
    "protein": 25,
    "carbs": 45,
    "fats": 30
  },
  "personalizedAdvice": [
    "Focus on lean proteins like chicken, fish, and legumes",
    "Include complex carbohydrates for sustained energy",
    "Stay hydrated with at least 8 glasses of water daily"
  ],
  "timelineEstimate": "You can expect to reach your target weight in approximately 12-16 weeks with consistent effort"
}

All numeric values must be plain JSON numbers (use 0.5, never 1/2).
Macro percentages must be whole numbers that sum to 100."""

_REQUIREMENTS = """CALCULATION REQUIREMENTS:
1. Use Mifflin-St Jeor equation for BMR calculation
2. Apply appropriate activity multiplier for TDEE
3. Adjust calories based on weight goal (deficit for loss, surplus for gain)
4. Provide realistic macro percentages based on goals
5. Include 3-5 specific, actionable nutrition tips
6. Give realistic timeline estimate based on safe weight change rates

IMPORTANT: Ensure all numbers are realistic and safe. Daily calorie goal should not be below 1200 for women or 1500 for men."""


def build_calorie_plan_prompt(profile: CalorieProfile) -> str:
    """
    Build the natural-language instruction for a calorie plan.

    Embeds the validated profile and the strict JSON output contract.

    Args:
        profile: Validated calorie profile

    Returns:
        Prompt text
    """
    goals = ", ".join(profile.goals) if profile.goals else "general health"

    return f"""{CALORIE_PLAN_SYSTEM_PROMPT}

USER PROFILE:
- Age: {profile.age} years
- Gender: {profile.gender.value}
- Height: {_fmt(profile.height_cm)} cm
- Current Weight: {_fmt(profile.current_weight_kg)} kg
- Target Weight: {_fmt(profile.target_weight_kg)} kg ({profile.weight_direction()})
- Activity Level: {profile.activity_level.value} ({profile.activity_level.description()})
- Goals: {goals}
- Weekly Goal: {_fmt(profile.weekly_goal_kg)} kg per week

TASK: Provide a comprehensive nutrition plan with accurate calculations.

{_RESPONSE_CONTRACT}

{_REQUIREMENTS}"""


def _fmt(value: float) -> str:
    return f"{value:g}"
