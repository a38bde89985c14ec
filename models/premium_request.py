"""
Premium request model definition
"""
from models import db
from datetime import datetime

class PremiumRequest(db.Model):
    """Request to upgrade a biodata to premium, approved by an admin"""
    __tablename__ = 'premium_requests'
    __table_args__ = (
        # At most one pending request per biodata, even under concurrent submits
        db.Index(
            'uq_premium_request_pending_biodata', 'biodata_id',
            unique=True,
            postgresql_where=db.text("status = 'pending'"),
            sqlite_where=db.text("status = 'pending'"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    biodata_id = db.Column(db.Integer, nullable=False, index=True)
    user_email = db.Column(db.String(120), nullable=False)
    user_name = db.Column(db.String(120), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, approved
    approved_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'biodataId': self.biodata_id,
            'userEmail': self.user_email,
            'userName': self.user_name,
            'status': self.status,
            'approvedAt': self.approved_at.isoformat() if self.approved_at else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<PremiumRequest {self.id} biodata={self.biodata_id} {self.status}>'
