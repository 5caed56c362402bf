"""Error types raised by the store operations and mapped to JSON responses."""


class ServiceError(Exception):
    status_code = 400
    message = 'Bad request'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'status': 'error', 'message': self.message}


class ValidationError(ServiceError):
    message = 'Please provide all required fields'


class ConflictError(ServiceError):
    message = 'Already exists'


class NotFoundError(ServiceError):
    message = 'Not found'


class InvalidCredentialsError(ServiceError):
    message = 'Invalid credentials'


class StoreError(ServiceError):
    status_code = 500
    message = 'Server error'
