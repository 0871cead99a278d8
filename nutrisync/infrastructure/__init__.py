"""Infrastructure adapters for NutriSync."""
