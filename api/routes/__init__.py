"""API routes package"""

from . import health, recipes, reviews, users

__all__ = ["health", "recipes", "reviews", "users"]
