"""Submission ledger: one link per (user email, task) and admin scoring."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from . import fields
from .errors import ConflictError, NotFoundError, ValidationError
from .leaderboard import credit
from .models import Submission, Task
from .users import find_user

logger = logging.getLogger(__name__)


def find_submission(db, email, task_id):
    return db.query(Submission).filter_by(user_email=email, task_id=task_id).first()


def submit(db, email, raw_task_id, link):
    if fields.is_missing(email) or fields.is_missing(raw_task_id) or fields.is_missing(link):
        raise ValidationError('Please provide all required fields')
    email = fields.email(email)

    task_id = fields.task_id(raw_task_id)
    user = find_user(db, email)
    task = db.get(Task, task_id) if task_id is not None else None
    if not user or not task:
        raise ValidationError('Invalid user or task')

    if find_submission(db, email, task_id):
        raise ConflictError('Task already submitted')

    db.add(Submission(user_email=email, task_id=task_id, link=link))
    try:
        db.commit()
    except IntegrityError:
        # a concurrent duplicate got past the check above
        db.rollback()
        raise ConflictError('Task already submitted')
    logger.info('%s submitted task %s', email, task_id)


def award_points(db, email, raw_task_id, points_awarded):
    """Score a submission and add the points to the user's leaderboard total.

    ``points_awarded`` may be 0. Awarding the same submission again
    overwrites the stored score but adds to the total again.
    """
    if fields.is_missing(email) or fields.is_missing(raw_task_id) or fields.is_missing(points_awarded):
        raise ValidationError('Please provide all required fields')
    points = fields.number(points_awarded, 'pointsAwarded')
    email = fields.email(email)

    task_id = fields.task_id(raw_task_id)
    submission = None
    if task_id is not None:
        submission = find_submission(db, email, task_id)
    if not submission:
        raise NotFoundError('Submission not found')

    if submission.points_awarded is not None:
        logger.warning('re-awarding %s/%s: %s -> %s', email, task_id,
                       submission.points_awarded, points)
    try:
        submission.points_awarded = points
        credit(db, email, points)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
