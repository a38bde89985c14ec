"""
Named counters for ids that must be allocated without races.
"""
from models import db
from sqlalchemy import func


class Sequence(db.Model):
    """Single-row counter per name; incremented with one UPDATE so concurrent callers never share a value"""
    __tablename__ = 'sequences'

    name = db.Column(db.String(50), primary_key=True)
    value = db.Column(db.Integer, nullable=False, default=0)

    @classmethod
    def ensure(cls, name, seed_column=None):
        """
        Create the counter row if missing, starting at max(seed_column) or 0.
        Caller commits.
        """
        sequence = db.session.get(cls, name)
        if sequence is None:
            start = 0
            if seed_column is not None:
                start = db.session.query(func.max(seed_column)).scalar() or 0
            sequence = cls(name=name, value=start)
            db.session.add(sequence)
            db.session.flush()
        return sequence

    @classmethod
    def next_value(cls, name, seed_column=None):
        """
        Reserve and return the next value of the named counter.

        The increment is a single UPDATE, so the row stays locked until the
        surrounding transaction commits or rolls back; a rollback releases
        the value again. Caller commits.
        """
        result = db.session.execute(
            db.update(cls).where(cls.name == name).values(value=cls.value + 1)
        )
        if result.rowcount == 0:
            cls.ensure(name, seed_column)
            db.session.execute(
                db.update(cls).where(cls.name == name).values(value=cls.value + 1)
            )
        return db.session.execute(
            db.select(cls.value).where(cls.name == name)
        ).scalar_one()

    def __repr__(self):
        return f'<Sequence {self.name}={self.value}>'
