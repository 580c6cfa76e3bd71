# Order service module for checkout
import logging

logger = logging.getLogger(__name__)


def checkout(storage, user_id, order_data):
    """Turn the user's cart into an order.

    Creates the order, one order item per cart row priced at the product's
    effective price right now, then empties the cart. The steps are not
    wrapped in a transaction: if one fails, the ones before it stay applied
    (an order can exist while the cart is still full).
    """
    order_data = dict(order_data, userId=user_id)
    order = storage.create_order(order_data)

    cart_rows = storage.get_cart(user_id)
    for row in cart_rows:
        storage.create_order_item({
            'orderId': order.id,
            'productId': row.productId,
            'quantity': row.quantity,
            'price': row.product.effective_price,
        })

    storage.clear_cart(user_id)
    logger.info(f"Order {order.id} placed by user {user_id} with {len(cart_rows)} items, total {order.total}")
    return order


def format_order(order):
    return order.model_dump(mode='json')


def order_with_items(storage, order):
    data = format_order(order)
    data['items'] = [item.model_dump(mode='json') for item in storage.get_order_items(order.id)]
    return data
