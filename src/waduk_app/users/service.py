from __future__ import annotations

from typing import Optional

from flask import g

from ..auth.session import SessionState
from .model import User
from .repository import UserRepository


class CurrentUserService:
    """Use case: resolve the logged-in user from the session.

    The lookup runs at most once per request; the result is cached on ``g``.
    """

    _CACHE_KEY = "_current_user"

    def __init__(self, users: UserRepository):
        self._users = users

    def get_current_user(self) -> Optional[User]:
        if self._CACHE_KEY in g:
            return g.get(self._CACHE_KEY)

        user_id = SessionState().user_id
        user = self._users.get_by_id(user_id) if user_id else None
        setattr(g, self._CACHE_KEY, user)
        return user
