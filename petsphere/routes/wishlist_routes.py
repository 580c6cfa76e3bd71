from flask import Blueprint

from ..utils.auth_middleware import current_user, login_required
from ..utils.context import get_storage, json_body

bp = Blueprint('wishlist', __name__, url_prefix='/api/wishlist')


@bp.route('', methods=['GET'])
@login_required
def get_wishlist():
    rows = get_storage().get_wishlist(current_user.id)
    return [row.model_dump(mode='json') for row in rows], 200


@bp.route('', methods=['POST'])
@login_required
def add_to_wishlist():
    data = json_body()
    wishlist = get_storage().add_to_wishlist({**data, 'userId': current_user.id})
    return wishlist.model_dump(mode='json'), 201


@bp.route('/<int:wishlist_id>', methods=['DELETE'])
@login_required
def remove_from_wishlist(wishlist_id):
    storage = get_storage()
    wishlist = storage.get_wishlist_item(wishlist_id)
    if wishlist is None or wishlist.userId != current_user.id:
        return {'message': 'Wishlist item not found'}, 404
    storage.remove_from_wishlist(wishlist_id)
    return '', 204
