"""
Favourite model definition
"""
from models import db
from datetime import datetime

class Favourite(db.Model):
    """Biodata bookmarked by a user, with a display snapshot taken at add time"""
    __tablename__ = 'favourites'
    __table_args__ = (
        db.UniqueConstraint('user_email', 'biodata_id', name='uq_favourite_user_biodata'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_email = db.Column(db.String(120), nullable=False, index=True)
    biodata_id = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(120))
    permanent_address = db.Column(db.String(120))
    occupation = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'userEmail': self.user_email,
            'biodataId': self.biodata_id,
            'name': self.name,
            'permanentAddress': self.permanent_address,
            'occupation': self.occupation,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Favourite {self.user_email} -> {self.biodata_id}>'
