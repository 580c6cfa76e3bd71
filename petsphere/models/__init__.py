from .base import merge_partial
from .user_model import InsertUser, PartialUser, User
from .product_model import InsertProduct, PartialProduct, Product
from .cart_model import InsertCart, Cart, CartWithProduct
from .order_model import InsertOrder, Order, InsertOrderItem, OrderItem, OrderItemWithProduct
from .appointment_model import InsertAppointment, Appointment
from .wishlist_model import InsertWishlist, Wishlist, WishlistWithProduct

__all__ = [
    'merge_partial',
    'InsertUser', 'PartialUser', 'User',
    'InsertProduct', 'PartialProduct', 'Product',
    'InsertCart', 'Cart', 'CartWithProduct',
    'InsertOrder', 'Order', 'InsertOrderItem', 'OrderItem', 'OrderItemWithProduct',
    'InsertAppointment', 'Appointment',
    'InsertWishlist', 'Wishlist', 'WishlistWithProduct',
]
