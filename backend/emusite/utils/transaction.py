from contextlib import contextmanager
from emusite.extensions import db


@contextmanager
def transactional():
    """
    Commit everything done inside the block, or nothing.
    Any exception rolls the session back and is re-raised.
    """
    try:
        yield
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
