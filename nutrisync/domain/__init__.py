"""Domain layer for NutriSync."""
