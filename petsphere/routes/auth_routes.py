import logging

from flask import Blueprint

from ..utils.auth_middleware import current_user, end_session, login_required, start_session
from ..utils.context import get_auth_service, json_body

bp = Blueprint('auth', __name__, url_prefix='/api')

logger = logging.getLogger(__name__)


@bp.route('/register', methods=['POST'])
def register():
    """Create an account and log it in"""
    data = json_body()
    user = get_auth_service().register(data)
    start_session(user)
    return user.public_dict(), 201


@bp.route('/login', methods=['POST'])
def login():
    data = json_body()
    user = get_auth_service().authenticate(data.get('username'), data.get('password'))
    start_session(user)
    return user.public_dict(), 200


@bp.route('/logout', methods=['POST'])
def logout():
    end_session()
    return {'message': 'Logged out successfully'}, 200


@bp.route('/user', methods=['GET'])
@login_required
def get_current_user():
    return current_user.public_dict(), 200
