from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow():
    # naive UTC, matching what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    if value is None:
        return None
    return value.isoformat() + 'Z'


def as_number(value):
    """Render stored floats as ints when they carry no fraction."""
    if value is None:
        return None
    if float(value).is_integer():
        return int(value)
    return value


class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True)
    name = Column(String(150), nullable=False)
    phone = Column(String(50), nullable=False)
    state = Column(String(100), nullable=False)
    district = Column(String(100), nullable=False)
    representative_type = Column(String(20), nullable=False)
    college = Column(String(255), nullable=False, default='')
    school = Column(String(255), nullable=False, default='')
    year_of_study = Column(String(20), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    def to_profile(self):
        return {
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'representativeType': self.representative_type,
            'college': self.college,
            'district': self.district,
            'state': self.state,
        }


class Task(Base):
    __tablename__ = 'tasks'
    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    deadline = Column(DateTime, nullable=True)
    points = Column(Float, nullable=False)
    submission_type = Column(String(20), nullable=True)  # individual | team
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'deadline': isoformat(self.deadline),
            'points': as_number(self.points),
            'submissionType': self.submission_type,
            'createdAt': isoformat(self.created_at),
        }


class Submission(Base):
    __tablename__ = 'submissions'
    __table_args__ = (
        UniqueConstraint('user_email', 'task_id', name='uq_submission_user_task'),
    )
    id = Column(Integer, primary_key=True)
    user_email = Column(String(255), nullable=False, index=True)
    task_id = Column(Integer, ForeignKey('tasks.id'), nullable=False)
    link = Column(Text, nullable=False)
    submitted_at = Column(DateTime, nullable=False, default=utcnow)
    # null until an admin reviews the submission
    points_awarded = Column(Float, nullable=True)


class LeaderboardEntry(Base):
    __tablename__ = 'leaderboard'
    id = Column(Integer, primary_key=True)
    user_email = Column(String(255), unique=True, nullable=False)
    total_points = Column(Float, nullable=False, default=0)
