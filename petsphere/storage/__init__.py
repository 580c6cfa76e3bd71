from .mem_storage import MemStorage, ReferenceCheck
from .joins import cart_item_count, cart_summary, cart_total
from .seed import seed_products

__all__ = [
    'MemStorage', 'ReferenceCheck',
    'cart_item_count', 'cart_summary', 'cart_total',
    'seed_products',
]
