"""User store: registration, credential checks and profile lookups."""
import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from . import fields
from .errors import ConflictError, InvalidCredentialsError, NotFoundError, ValidationError
from .models import User

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    'name', 'phone', 'email', 'password', 'state', 'district',
    'representative_type', 'year_of_study',
)


def register(db, data, hash_method='scrypt'):
    """Create a user from a registration form.

    ``college`` is kept only for college representatives and ``school`` only
    for school representatives; the other one is stored empty. Nothing about
    the new record is returned.
    """
    values = {key: fields.text(data, key) for key in REQUIRED_FIELDS if key != 'password'}
    values['email'] = fields.email(data.get('email'))
    password = data.get('password') or ''
    if not all(values.values()) or not isinstance(password, str) or not password:
        raise ValidationError('Please fill out all required fields')

    if find_user(db, values['email']):
        raise ConflictError('User already exists')

    rep_type = values['representative_type']
    user = User(
        college=fields.text(data, 'college') if rep_type == 'college' else '',
        school=fields.text(data, 'school') if rep_type == 'school' else '',
        password_hash=generate_password_hash(password, method=hash_method),
        **values
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError('User already exists')
    logger.info('registered user %s', user.email)


def find_user(db, email):
    return db.query(User).filter_by(email=email).first()


def authenticate(db, email, password):
    email = fields.email(email)
    if not email or not password or not isinstance(password, str):
        raise ValidationError('Please provide email and password')
    user = find_user(db, email)
    if not user:
        raise NotFoundError('User not found')
    if not check_password_hash(user.password_hash, password):
        logger.warning('failed sign-in for %s', email)
        raise InvalidCredentialsError('Invalid credentials')
    return user


def get_profile(db, email):
    email = fields.email(email)
    if not email:
        raise ValidationError('Email is required')
    user = find_user(db, email)
    if not user:
        raise NotFoundError('User not found', status_code=404)
    return user.to_profile()
