from __future__ import annotations

from functools import wraps

from flask import abort, current_app, g, redirect

from ..core.constants import FORBIDDEN_PATH, LOGIN_PATH
from ..core.enums import Role
from .session import SessionState


def _container():
    return current_app.extensions["waduk"]


def loggedin_required(view):
    """Cek masa aktif login, lalu inject user ke ``g.user``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        container = _container()
        state = SessionState()
        if state.is_expired():
            container.logger.info("Session expired or missing, redirecting to login")
            state.destroy()
            return redirect(LOGIN_PATH)

        user = container.current_user_service.get_current_user()
        if not user:
            # user di session sudah tidak ada di database
            abort(404)

        g.user = user
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = g.get("user")
            if user is None or user.role != role:
                _container().logger.warning(
                    "User %s denied, %s role required",
                    getattr(user, "id", None),
                    role.name.lower(),
                )
                return redirect(FORBIDDEN_PATH)
            return view(*args, **kwargs)

        return wrapper

    return decorator


petugas_required = role_required(Role.PETUGAS)
admin_required = role_required(Role.ADMIN)
