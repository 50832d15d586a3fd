"""
Catalog store models - recipe and review rows.

Owner references point at the natural login handle of a user document in the
identity store; they are checked at creation time only, so there are no
foreign keys here.
"""

from sqlalchemy import Column, Integer, Text, String, Float, JSON

from domain.models.database import Base


class Recipe(Base):
    """Recipe row"""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    steps = Column(JSON, nullable=False)


class Review(Base):
    """Review row"""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(Integer, nullable=False, index=True)
    owner_id = Column(String(255), nullable=False, index=True)
    title = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)
    body = Column(Text)
