import logging

from flask import Blueprint

from ..utils.auth_middleware import current_user, login_required
from ..utils.context import get_storage, json_body

bp = Blueprint('appointments', __name__, url_prefix='/api/appointments')

logger = logging.getLogger(__name__)


def format_appointment(appointment):
    return appointment.model_dump(mode='json')


@bp.route('', methods=['GET'])
@login_required
def list_appointments():
    appointments = get_storage().get_appointments_by_user(current_user.id)
    return [format_appointment(a) for a in appointments], 200


@bp.route('/<int:appointment_id>', methods=['GET'])
@login_required
def get_appointment(appointment_id):
    appointment = get_storage().get_appointment(appointment_id)
    if appointment is None:
        return {'message': 'Appointment not found'}, 404
    if appointment.userId != current_user.id:
        return {'message': 'Forbidden'}, 403
    return format_appointment(appointment), 200


@bp.route('', methods=['POST'])
@login_required
def create_appointment():
    """Book a grooming, training or veterinary appointment"""
    data = json_body()
    appointment = get_storage().create_appointment({**data, 'userId': current_user.id})
    logger.info(f"Appointment {appointment.id} booked by user {current_user.id}")
    return format_appointment(appointment), 201


@bp.route('/<int:appointment_id>/status', methods=['PUT'])
@login_required
def update_appointment_status(appointment_id):
    storage = get_storage()
    data = json_body()
    status = data.get('status')
    if not isinstance(status, str) or not status:
        return {'message': 'Missing status field'}, 400

    appointment = storage.get_appointment(appointment_id)
    if appointment is None:
        return {'message': 'Appointment not found'}, 404
    if appointment.userId != current_user.id:
        return {'message': 'Forbidden'}, 403

    appointment = storage.update_appointment_status(appointment_id, status)
    return format_appointment(appointment), 200
