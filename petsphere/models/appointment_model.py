from datetime import datetime
from typing import Optional

from dateutil.parser import isoparse
from pydantic import ConfigDict, Field, field_validator

from .base import InsertModel


class InsertAppointment(InsertModel):
    userId: int
    serviceType: str = Field(..., min_length=1)
    petType: str = Field(..., min_length=1)
    petBreed: Optional[str] = None
    appointmentDate: datetime
    appointmentTime: str = Field(..., min_length=1)
    notes: Optional[str] = None
    status: str = 'pending'

    @field_validator('appointmentDate', mode='before')
    @classmethod
    def parse_appointment_date(cls, value):
        if isinstance(value, str):
            try:
                return isoparse(value)
            except ValueError:
                raise ValueError('Invalid date format. Use ISO format (YYYY-MM-DDTHH:MM:SS)')
        return value


class Appointment(InsertAppointment):
    model_config = ConfigDict(frozen=True)

    id: int
    createdAt: datetime

    def __repr__(self):
        return f'<Appointment {self.id} ({self.serviceType}) for User {self.userId}>'
