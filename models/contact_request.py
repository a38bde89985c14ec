"""
Contact request model definition
"""
from models import db
from datetime import datetime

class ContactRequest(db.Model):
    """Paid request to see a biodata's contact details"""
    __tablename__ = 'contact_requests'

    id = db.Column(db.Integer, primary_key=True)
    biodata_id = db.Column(db.Integer, nullable=False, index=True)
    requester_email = db.Column(db.String(120), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, approved
    transaction_id = db.Column(db.String(255))
    amount = db.Column(db.Numeric(10, 2), nullable=False, default=5)

    # Copied from the biodata at creation time, never re-synced
    biodata_name = db.Column(db.String(120))
    biodata_email = db.Column(db.String(120))
    biodata_phone = db.Column(db.String(20))

    approved_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'biodataId': self.biodata_id,
            'requesterEmail': self.requester_email,
            'status': self.status,
            'transactionId': self.transaction_id,
            'amount': float(self.amount) if self.amount is not None else None,
            'biodataName': self.biodata_name,
            'biodataEmail': self.biodata_email,
            'biodataPhone': self.biodata_phone,
            'approvedAt': self.approved_at.isoformat() if self.approved_at else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<ContactRequest {self.id} biodata={self.biodata_id} {self.status}>'
