"""
Success story model definition
"""
from models import db
from datetime import datetime, date

class SuccessStory(db.Model):
    """Public testimonial from a married couple"""
    __tablename__ = 'success_stories'

    id = db.Column(db.Integer, primary_key=True)
    self_biodata_id = db.Column(db.Integer, nullable=False)
    partner_biodata_id = db.Column(db.Integer, nullable=False)
    couple_image = db.Column(db.String(500), nullable=False)
    success_story_text = db.Column(db.Text, nullable=False)
    marriage_date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    review_star = db.Column(db.Integer, nullable=False, default=5)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'selfBiodataId': self.self_biodata_id,
            'partnerBiodataId': self.partner_biodata_id,
            'coupleImage': self.couple_image,
            'successStoryText': self.success_story_text,
            'marriageDate': self.marriage_date.isoformat() if self.marriage_date else None,
            'reviewStar': self.review_star,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<SuccessStory {self.self_biodata_id} & {self.partner_biodata_id}>'
