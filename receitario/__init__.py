"""Recipe book and ingredient pantry, with sample data and screen texts."""

__version__ = "0.1.0"
__all__ = ["ingredients", "recipes", "sample_data", "menu"]