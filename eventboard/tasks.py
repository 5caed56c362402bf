import logging

from . import fields
from .errors import ValidationError
from .models import Task

logger = logging.getLogger(__name__)


def create_task(db, data):
    title = fields.text(data, 'title')
    description = fields.text(data, 'description')
    points = data.get('points')
    if not title or not description or fields.is_missing(points):
        raise ValidationError('Please provide all required fields')

    task = Task(
        title=title,
        description=description,
        points=fields.number(points, 'points'),
        deadline=fields.timestamp(data.get('deadline'), 'deadline'),
        submission_type=fields.text(data, 'submissionType') or None,
    )
    db.add(task)
    db.commit()
    logger.info('created task %s (%s)', task.id, task.title)
    return task


def list_tasks(db):
    return [task.to_dict() for task in db.query(Task).order_by(Task.id).all()]
