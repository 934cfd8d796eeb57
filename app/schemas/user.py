"""
Pydantic schemas for the authenticated caller.
"""

from pydantic import BaseModel


class TokenUser(BaseModel):
    """Caller identity taken from a verified JWT."""
    username: str
    is_admin: bool = False
