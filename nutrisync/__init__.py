"""NutriSync core: offline mutation queue and calorie plan resolver."""

__version__ = "0.1.0"
