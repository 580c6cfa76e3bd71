# Storage module for all entity kinds
import functools
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel

from ..errors import DuplicateUserError, InvalidQuantityError, ReferentialIntegrityError
from ..models import (
    Appointment, Cart, CartWithProduct, InsertAppointment, InsertCart, InsertOrder,
    InsertOrderItem, InsertProduct, InsertUser, InsertWishlist, Order, OrderItem,
    OrderItemWithProduct, PartialProduct, PartialUser, Product, User, Wishlist,
    WishlistWithProduct, merge_partial,
)
from ..services.session_store import SessionStore
from .joins import resolve_rows
from .table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceCheck:
    """Outcome of looking up a foreign id before a write."""
    entity: str
    ref_id: int
    ok: bool

    @property
    def error(self):
        if self.ok:
            return None
        return ReferentialIntegrityError(self.entity, self.ref_id)

    def raise_for_error(self):
        if not self.ok:
            raise self.error


def _validated(schema, data):
    if type(data) is schema:
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return schema.model_validate(data)


def _now():
    return datetime.now(timezone.utc)


def _synchronized(method):
    """Run a store operation while holding the store lock."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class MemStorage:
    """In-memory store for users, catalog, carts, orders, appointments and
    wishlists, plus the backing store for login sessions.

    One instance is created per application and handed to whoever needs it;
    there is no module-level store. Every operation holds one re-entrant
    lock for its whole body, so a check-then-insert (cart add, wishlist add)
    or id allocation cannot interleave with another request thread. Work
    made of several operations, such as checkout, is not covered.
    """

    def __init__(self, initial_products=None, session_store=None):
        self._lock = threading.RLock()
        self.users = Table('user')
        self.products = Table('product')
        self.carts = Table('cart')
        self.orders = Table('order')
        self.order_items = Table('order_item')
        self.appointments = Table('appointment')
        self.wishlists = Table('wishlist')

        self.session_store = session_store if session_store is not None else SessionStore()

        for product in initial_products or ():
            self.create_product(product)

    # Reference checks
    @_synchronized
    def check_product_reference(self, product_id):
        return ReferenceCheck('Product', product_id, self.products.get(product_id) is not None)

    @_synchronized
    def check_order_reference(self, order_id):
        return ReferenceCheck('Order', order_id, self.orders.get(order_id) is not None)

    # User methods
    @_synchronized
    def get_user(self, user_id):
        return self.users.get(user_id)

    @_synchronized
    def get_user_by_username(self, username):
        return self.users.find(lambda user: user.username == username)

    @_synchronized
    def get_user_by_email(self, email):
        return self.users.find(lambda user: user.email == email)

    @_synchronized
    def create_user(self, data):
        """Store a new user. Username/email uniqueness is checked by the caller."""
        data = _validated(InsertUser, data)
        user = User(**data.model_dump(), id=self.users.next_id())
        logger.debug(f"Created user {user.id} ({user.username})")
        return self.users.put(user)

    @_synchronized
    def update_user(self, user_id, changes):
        """Apply profile changes. The password is not updatable here; a new
        username or email must not belong to another user."""
        user = self.users.get(user_id)
        if user is None:
            return None
        updated = merge_partial(user, PartialUser, changes)
        if updated.username != user.username and self.get_user_by_username(updated.username) is not None:
            raise DuplicateUserError('username')
        if updated.email != user.email and self.get_user_by_email(updated.email) is not None:
            raise DuplicateUserError('email')
        return self.users.put(updated)

    # Product methods
    @_synchronized
    def get_product(self, product_id):
        return self.products.get(product_id)

    @_synchronized
    def get_products(self):
        return self.products.filter()

    @_synchronized
    def get_products_by_category(self, category):
        return self.products.filter(lambda product: product.category == category)

    @_synchronized
    def get_products_by_sub_category(self, sub_category):
        return self.products.filter(lambda product: product.subCategory == sub_category)

    @_synchronized
    def get_featured_products(self):
        return self.products.filter(lambda product: product.isFeatured)

    @_synchronized
    def create_product(self, data):
        data = _validated(InsertProduct, data)
        product = Product(**data.model_dump(), id=self.products.next_id())
        logger.debug(f"Created product {product.id} ({product.name})")
        return self.products.put(product)

    @_synchronized
    def update_product(self, product_id, changes):
        product = self.products.get(product_id)
        if product is None:
            return None
        return self.products.put(merge_partial(product, PartialProduct, changes))

    @_synchronized
    def delete_product(self, product_id):
        # Cart and wishlist rows are not cascaded; reading them afterwards
        # raises ConsistencyError.
        return self.products.delete(product_id)

    # Cart methods
    @_synchronized
    def get_cart(self, user_id):
        rows = self.carts.filter(lambda cart: cart.userId == user_id)
        return resolve_rows(rows, self.products, CartWithProduct, 'cart item')

    @_synchronized
    def get_cart_item(self, cart_id):
        return self.carts.get(cart_id)

    @_synchronized
    def add_to_cart(self, data):
        """Add a product to a user's cart.

        Adding a product that is already in the cart increases the quantity
        of the existing row instead of creating a second one.
        """
        data = _validated(InsertCart, data)
        self.check_product_reference(data.productId).raise_for_error()

        existing = self.carts.find(
            lambda cart: cart.userId == data.userId and cart.productId == data.productId
        )
        if existing is not None:
            updated = existing.model_copy(update={'quantity': existing.quantity + data.quantity})
            return self.carts.put(updated)

        cart = Cart(**data.model_dump(), id=self.carts.next_id())
        return self.carts.put(cart)

    @_synchronized
    def update_cart_item(self, cart_id, quantity):
        if quantity is None or quantity < 1:
            raise InvalidQuantityError(quantity)
        cart = self.carts.get(cart_id)
        if cart is None:
            return None
        return self.carts.put(cart.model_copy(update={'quantity': quantity}))

    @_synchronized
    def remove_from_cart(self, cart_id):
        return self.carts.delete(cart_id)

    @_synchronized
    def clear_cart(self, user_id):
        for cart in self.carts.filter(lambda cart: cart.userId == user_id):
            self.carts.delete(cart.id)
        return True

    # Order methods
    @_synchronized
    def get_order(self, order_id):
        return self.orders.get(order_id)

    @_synchronized
    def get_orders_by_user(self, user_id):
        return self.orders.filter(lambda order: order.userId == user_id)

    @_synchronized
    def create_order(self, data):
        data = _validated(InsertOrder, data)
        order = Order(**data.model_dump(), id=self.orders.next_id(), createdAt=_now())
        logger.debug(f"Created order {order.id} for user {order.userId}")
        return self.orders.put(order)

    @_synchronized
    def update_order_status(self, order_id, status):
        order = self.orders.get(order_id)
        if order is None:
            return None
        return self.orders.put(order.model_copy(update={'status': status}))

    # Order item methods
    @_synchronized
    def get_order_items(self, order_id):
        rows = self.order_items.filter(lambda item: item.orderId == order_id)
        return resolve_rows(rows, self.products, OrderItemWithProduct, 'order item')

    @_synchronized
    def create_order_item(self, data):
        data = _validated(InsertOrderItem, data)
        self.check_order_reference(data.orderId).raise_for_error()
        self.check_product_reference(data.productId).raise_for_error()
        item = OrderItem(**data.model_dump(), id=self.order_items.next_id())
        return self.order_items.put(item)

    # Appointment methods
    @_synchronized
    def get_appointment(self, appointment_id):
        return self.appointments.get(appointment_id)

    @_synchronized
    def get_appointments_by_user(self, user_id):
        return self.appointments.filter(lambda appointment: appointment.userId == user_id)

    @_synchronized
    def create_appointment(self, data):
        data = _validated(InsertAppointment, data)
        appointment = Appointment(**data.model_dump(), id=self.appointments.next_id(), createdAt=_now())
        logger.debug(f"Created appointment {appointment.id} for user {appointment.userId}")
        return self.appointments.put(appointment)

    @_synchronized
    def update_appointment_status(self, appointment_id, status):
        appointment = self.appointments.get(appointment_id)
        if appointment is None:
            return None
        return self.appointments.put(appointment.model_copy(update={'status': status}))

    # Wishlist methods
    @_synchronized
    def get_wishlist(self, user_id):
        rows = self.wishlists.filter(lambda wishlist: wishlist.userId == user_id)
        return resolve_rows(rows, self.products, WishlistWithProduct, 'wishlist item')

    @_synchronized
    def get_wishlist_item(self, wishlist_id):
        return self.wishlists.get(wishlist_id)

    @_synchronized
    def add_to_wishlist(self, data):
        """Add a product to a user's wishlist; a repeat add returns the existing row."""
        data = _validated(InsertWishlist, data)
        self.check_product_reference(data.productId).raise_for_error()

        existing = self.wishlists.find(
            lambda wishlist: wishlist.userId == data.userId and wishlist.productId == data.productId
        )
        if existing is not None:
            return existing

        wishlist = Wishlist(**data.model_dump(), id=self.wishlists.next_id())
        return self.wishlists.put(wishlist)

    @_synchronized
    def remove_from_wishlist(self, wishlist_id):
        return self.wishlists.delete(wishlist_id)
