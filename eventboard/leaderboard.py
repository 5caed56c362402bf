"""Per-user point totals and the ranked leaderboard view."""
import logging

from .models import LeaderboardEntry, User, as_number

logger = logging.getLogger(__name__)

UNKNOWN_USER = 'Unknown User'
UNKNOWN_COLLEGE = 'Unknown College'


def credit(db, email, points):
    """Add ``points`` to the user's total, creating the entry on first award.

    Does not commit; the caller commits together with the submission update.
    """
    entry = db.query(LeaderboardEntry).filter_by(user_email=email).first()
    if entry is None:
        entry = LeaderboardEntry(user_email=email, total_points=points)
        db.add(entry)
        logger.info('opened leaderboard entry for %s', email)
    else:
        # evaluated by the store so concurrent awards do not overwrite each other
        entry.total_points = LeaderboardEntry.total_points + points
    return entry


def get_leaderboard(db):
    entries = (
        db.query(LeaderboardEntry)
        .order_by(LeaderboardEntry.total_points.desc(), LeaderboardEntry.id)
        .all()
    )
    board = []
    for entry in entries:
        # resolved per entry; a missing user must not hide the row
        user = db.query(User).filter_by(email=entry.user_email).first()
        board.append({
            'name': user.name if user else UNKNOWN_USER,
            'college': user.college if user else UNKNOWN_COLLEGE,
            'points': as_number(entry.total_points),
        })
    return board
