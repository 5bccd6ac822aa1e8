"""
Domain layer - Error taxonomy shared by repositories.

Independent of any particular ORM or logging backend.
"""
