import logging

from flask import Blueprint

from ..services.order_service import checkout, format_order, order_with_items
from ..utils.auth_middleware import current_user, login_required
from ..utils.context import get_storage, json_body

bp = Blueprint('orders', __name__, url_prefix='/api/orders')

logger = logging.getLogger(__name__)


@bp.route('', methods=['GET'])
@login_required
def list_orders():
    """Orders of the logged-in user"""
    orders = get_storage().get_orders_by_user(current_user.id)
    return [format_order(order) for order in orders], 200


@bp.route('/<int:order_id>', methods=['GET'])
@login_required
def get_order(order_id):
    storage = get_storage()
    order = storage.get_order(order_id)
    if order is None:
        return {'message': 'Order not found'}, 404
    if order.userId != current_user.id:
        return {'message': 'Forbidden'}, 403
    return order_with_items(storage, order), 200


@bp.route('', methods=['POST'])
@login_required
def create_order():
    """Place an order for everything in the cart"""
    data = json_body()
    order = checkout(get_storage(), current_user.id, data)
    return format_order(order), 201


@bp.route('/<int:order_id>/status', methods=['PUT'])
@login_required
def update_order_status(order_id):
    storage = get_storage()
    data = json_body()
    status = data.get('status')
    if not isinstance(status, str) or not status:
        return {'message': 'Missing status field'}, 400

    order = storage.get_order(order_id)
    if order is None:
        return {'message': 'Order not found'}, 404
    if order.userId != current_user.id:
        return {'message': 'Forbidden'}, 403

    order = storage.update_order_status(order_id, status)
    logger.info(f"Order {order_id} status set to {status}")
    return format_order(order), 200
