"""Read views that attach the referenced product to cart, order item and
wishlist rows. Nothing here is stored; views are rebuilt on every read."""
import logging

from ..errors import ConsistencyError

logger = logging.getLogger(__name__)


def resolve_rows(rows, products, view_cls, kind):
    """Pair every row with its product from ``products`` (a ``Table``).

    A row whose product is missing cannot be priced or shown, so the whole
    read fails with ``ConsistencyError`` instead of dropping the row.
    """
    resolved = []
    for row in rows:
        product = products.get(row.productId)
        if product is None:
            logger.error(f"Dangling product reference: {kind} {row.id} -> product {row.productId}")
            raise ConsistencyError(kind, row.id, row.productId)
        resolved.append(view_cls(**row.model_dump(), product=product))
    return resolved


def cart_item_count(cart_rows):
    return sum(row.quantity for row in cart_rows)


def cart_total(cart_rows):
    return round(sum(row.quantity * row.product.effective_price for row in cart_rows), 2)


def cart_summary(cart_rows):
    return {
        'itemCount': cart_item_count(cart_rows),
        'total': cart_total(cart_rows),
    }
