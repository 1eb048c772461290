"""Default monthly average temperatures (Washington, DC), January first."""

DC_AVG_TEMPS: list[dict[str, float]] = [
    {"high": 40, "low": 30},
    {"high": 45, "low": 30},
    {"high": 55, "low": 40},
    {"high": 65, "low": 45},
    {"high": 75, "low": 55},
    {"high": 85, "low": 65},
    {"high": 90, "low": 70},
    {"high": 85, "low": 70},
    {"high": 80, "low": 65},
    {"high": 70, "low": 50},
    {"high": 60, "low": 40},
    {"high": 45, "low": 35},
]
