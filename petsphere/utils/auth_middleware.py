import logging

from flask import jsonify, session
from flask_login import LoginManager, current_user, login_required, login_user, logout_user

from .context import get_auth_service

logger = logging.getLogger(__name__)

login_manager = LoginManager()
login_manager.session_protection = 'basic'

__all__ = ['login_manager', 'setup_auth_middleware', 'login_required', 'current_user', 'start_session', 'end_session']


@login_manager.user_loader
def load_user(user_id):
    # flask-login calls this at most once per request and caches the result
    user = get_auth_service().deserialize_user(user_id)
    if user is None:
        logger.info(f"Session references missing user {user_id}; treating request as anonymous")
        session.pop('_user_id', None)
    return user


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'message': 'Not authenticated'}), 401


def start_session(user):
    """Attach ``user`` to the session under a fresh session id."""
    regenerate = getattr(session, 'regenerate', None)
    if regenerate is not None:
        regenerate()
    login_user(user)


def end_session():
    logout_user()
    session.clear()


def setup_auth_middleware(app):
    login_manager.init_app(app)
