"""
Model collaborators usable with :class:`AbstractRepository`.
"""

from .sqlalchemy_model import SQLAlchemyModel

__all__ = ["SQLAlchemyModel"]
