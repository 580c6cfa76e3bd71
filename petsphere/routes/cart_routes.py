from flask import Blueprint

from ..storage import cart_summary
from ..utils.auth_middleware import current_user, login_required
from ..utils.context import get_storage, json_body

bp = Blueprint('cart', __name__, url_prefix='/api/cart')


def _own_cart_item(cart_id):
    """The caller's cart row, or None (rows of other users look missing)."""
    cart = get_storage().get_cart_item(cart_id)
    if cart is None or cart.userId != current_user.id:
        return None
    return cart


@bp.route('', methods=['GET'])
@login_required
def get_cart():
    rows = get_storage().get_cart(current_user.id)
    return [row.model_dump(mode='json') for row in rows], 200


@bp.route('/summary', methods=['GET'])
@login_required
def get_cart_summary():
    return cart_summary(get_storage().get_cart(current_user.id)), 200


@bp.route('', methods=['POST'])
@login_required
def add_to_cart():
    data = json_body()
    cart = get_storage().add_to_cart({**data, 'userId': current_user.id})
    return cart.model_dump(mode='json'), 201


@bp.route('/<int:cart_id>', methods=['PUT'])
@login_required
def update_cart_item(cart_id):
    data = json_body()
    quantity = data.get('quantity')
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        return {'message': 'Quantity must be an integer'}, 400
    if _own_cart_item(cart_id) is None:
        return {'message': 'Cart item not found'}, 404
    cart = get_storage().update_cart_item(cart_id, quantity)
    return cart.model_dump(mode='json'), 200


@bp.route('/<int:cart_id>', methods=['DELETE'])
@login_required
def remove_from_cart(cart_id):
    if _own_cart_item(cart_id) is None or not get_storage().remove_from_cart(cart_id):
        return {'message': 'Cart item not found'}, 404
    return '', 204


@bp.route('', methods=['DELETE'])
@login_required
def clear_cart():
    get_storage().clear_cart(current_user.id)
    return '', 204
