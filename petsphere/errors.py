"""
Business-level exceptions raised by the store and the auth services.

Lookups that find nothing return ``None``/``False`` instead of raising; the
classes below cover the outcomes a caller cannot treat as a normal answer.
"""


class PetSphereError(Exception):
    """Base exception for all store and auth errors."""
    def __init__(self, message="Server error"):
        self.message = message
        super().__init__(self.message)


class ReferentialIntegrityError(PetSphereError):
    """A create or update points at a foreign id that does not exist."""
    def __init__(self, entity, ref_id):
        self.entity = entity
        self.ref_id = ref_id
        super().__init__(f"{entity} not found: {ref_id}")


class ConsistencyError(PetSphereError):
    """A stored row references a product that is gone."""
    def __init__(self, kind, row_id, product_id):
        self.kind = kind
        self.row_id = row_id
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found for {kind}: {row_id}")


class InvalidQuantityError(PetSphereError, ValueError):
    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Quantity must be at least 1, got {quantity}")


class MalformedCredentialError(PetSphereError):
    """Stored password hash is not in ``<key>.<salt>`` form."""
    def __init__(self):
        super().__init__("Stored credential is malformed")


class InvalidCredentialsError(PetSphereError):
    """Login failed. The message never says which part was wrong."""
    def __init__(self):
        super().__init__("Invalid username or password")


class DuplicateUserError(PetSphereError):
    def __init__(self, field):
        self.field = field
        super().__init__(f"{field.capitalize()} already exists")
