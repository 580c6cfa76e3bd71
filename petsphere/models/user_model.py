import re
from typing import Optional

from pydantic import ConfigDict, Field

from .base import InsertModel, PartialModel

EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+$')


class InsertUser(InsertModel):
    username: str = Field(..., min_length=1, max_length=80)
    password: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_REGEX.pattern)
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipCode: Optional[str] = None
    phone: Optional[str] = None


class PartialUser(PartialModel):
    username: Optional[str] = Field(None, min_length=1, max_length=80)
    email: Optional[str] = Field(None, pattern=EMAIL_REGEX.pattern)
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipCode: Optional[str] = None
    phone: Optional[str] = None


class User(InsertUser):
    model_config = ConfigDict(frozen=True)

    id: int

    # flask-login user protocol
    @property
    def is_authenticated(self):
        return True

    @property
    def is_active(self):
        return True

    @property
    def is_anonymous(self):
        return False

    def get_id(self):
        return str(self.id)

    def public_dict(self):
        """User data safe to send to a client."""
        return self.model_dump(mode='json', exclude={'password'})

    def __repr__(self):
        return f'<User {self.username} ({self.id})>'
