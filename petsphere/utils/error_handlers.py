import logging

from flask import jsonify
from pydantic import ValidationError

from ..errors import (
    ConsistencyError, DuplicateUserError, InvalidCredentialsError, InvalidQuantityError,
    PetSphereError, ReferentialIntegrityError,
)

logger = logging.getLogger(__name__)


def validation_errors(error):
    return [
        {'loc': list(detail['loc']), 'msg': detail['msg'], 'type': detail['type']}
        for detail in error.errors()
    ]


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def invalid_input(error):
        return jsonify({'message': 'Invalid input', 'errors': validation_errors(error)}), 400

    @app.errorhandler(ReferentialIntegrityError)
    @app.errorhandler(InvalidQuantityError)
    @app.errorhandler(DuplicateUserError)
    def bad_request(error):
        return jsonify({'message': error.message}), 400

    @app.errorhandler(InvalidCredentialsError)
    def invalid_credentials(error):
        return jsonify({'message': error.message}), 401

    @app.errorhandler(ConsistencyError)
    @app.errorhandler(PetSphereError)
    def server_error(error):
        logger.exception(f"Unhandled store error: {error.message}")
        return jsonify({'message': 'Server error'}), 500

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405
