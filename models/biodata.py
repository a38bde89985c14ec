"""
Biodata model definition
"""
from models import db
from datetime import datetime

BIODATA_TYPES = ('Male', 'Female')

class Biodata(db.Model):
    """Matrimony profile, exactly one per user email"""
    __tablename__ = 'biodatas'

    id = db.Column(db.Integer, primary_key=True)
    biodata_id = db.Column(db.Integer, unique=True, nullable=False, index=True)
    user_email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    biodata_type = db.Column(db.String(10), nullable=False)  # Male, Female
    name = db.Column(db.String(120), nullable=False)
    profile_image = db.Column(db.String(500))
    date_of_birth = db.Column(db.String(20))
    height = db.Column(db.String(20))
    weight = db.Column(db.String(20))
    age = db.Column(db.Integer, index=True)
    occupation = db.Column(db.String(120))
    race = db.Column(db.String(50))
    fathers_name = db.Column(db.String(120))
    mothers_name = db.Column(db.String(120))
    permanent_division = db.Column(db.String(50), index=True)
    present_division = db.Column(db.String(50))
    expected_partner_age = db.Column(db.Integer)
    expected_partner_height = db.Column(db.String(20))
    expected_partner_weight = db.Column(db.String(20))
    contact_email = db.Column(db.String(120), nullable=False)
    mobile_number = db.Column(db.String(20))
    is_premium = db.Column(db.Boolean, nullable=False, default=False)
    status = db.Column(db.String(20), nullable=False, default='active')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self, include_contact=True):
        """Convert biodata to the camelCase JSON shape; contact fields blanked when not disclosed"""
        return {
            'id': self.id,
            'biodataId': self.biodata_id,
            'userEmail': self.user_email,
            'biodataType': self.biodata_type,
            'name': self.name,
            'profileImage': self.profile_image,
            'dateOfBirth': self.date_of_birth,
            'height': self.height,
            'weight': self.weight,
            'age': self.age,
            'occupation': self.occupation,
            'race': self.race,
            'fathersName': self.fathers_name,
            'mothersName': self.mothers_name,
            'permanentDivision': self.permanent_division,
            'presentDivision': self.present_division,
            'expectedPartnerAge': self.expected_partner_age,
            'expectedPartnerHeight': self.expected_partner_height,
            'expectedPartnerWeight': self.expected_partner_weight,
            'contactEmail': self.contact_email if include_contact else None,
            'mobileNumber': self.mobile_number if include_contact else None,
            'isPremium': bool(self.is_premium),
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Biodata {self.biodata_id} {self.name}>'
