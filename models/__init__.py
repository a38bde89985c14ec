"""
Models package for the Soulmate matrimony API
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Import all models here to ensure they're registered
from models.user import User
from models.biodata import Biodata
from models.favourite import Favourite
from models.premium_request import PremiumRequest
from models.contact_request import ContactRequest
from models.success_story import SuccessStory
from models.sequence import Sequence

__all__ = [
    'db',
    'User',
    'Biodata',
    'Favourite',
    'PremiumRequest',
    'ContactRequest',
    'SuccessStory',
    'Sequence',
]
