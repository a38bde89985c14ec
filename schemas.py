"""
Request schemas for the Soulmate matrimony API.

Every route that accepts a body or query string validates it through one of
these models before touching the database. Field names are snake_case in
Python and camelCase on the wire (biodataId, userEmail, ...), matching the
JSON the API returns.
"""
from datetime import date
from typing import Annotated, Literal, Optional

from flask import request
from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra='ignore',
    )


Email = Annotated[EmailStr, AfterValidator(str.lower)]


# Auth

class TokenRequest(RequestSchema):
    email: Email
    name: Optional[str] = Field(None, max_length=120)
    photo_url: Optional[str] = Field(None, alias='photoURL', max_length=500)


# Biodatas

class BiodataInput(RequestSchema):
    """Update body: only fields present are written; name and biodataType may be omitted, not nulled"""
    user_email: Email
    name: str = Field(None, min_length=1, max_length=120)
    biodata_type: Literal['Male', 'Female'] = None
    profile_image: Optional[str] = Field(None, max_length=500)
    date_of_birth: Optional[str] = Field(None, max_length=20)
    height: Optional[str] = Field(None, max_length=20)
    weight: Optional[str] = Field(None, max_length=20)
    age: Optional[int] = Field(None, ge=18, le=100)
    occupation: Optional[str] = Field(None, max_length=120)
    race: Optional[str] = Field(None, max_length=50)
    fathers_name: Optional[str] = Field(None, max_length=120)
    mothers_name: Optional[str] = Field(None, max_length=120)
    permanent_division: Optional[str] = Field(None, max_length=50)
    present_division: Optional[str] = Field(None, max_length=50)
    expected_partner_age: Optional[int] = Field(None, ge=18, le=100)
    expected_partner_height: Optional[str] = Field(None, max_length=20)
    expected_partner_weight: Optional[str] = Field(None, max_length=20)
    mobile_number: Optional[str] = Field(None, max_length=20)


class BiodataCreateInput(BiodataInput):
    """First save of a biodata: name and biodataType are required"""
    name: str = Field(..., min_length=1, max_length=120)
    biodata_type: Literal['Male', 'Female']


class BiodataFilters(RequestSchema):
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)
    type: Optional[Literal['Male', 'Female']] = None
    division: Optional[str] = None
    age_min: Optional[int] = Field(None, ge=0)
    age_max: Optional[int] = Field(None, ge=0)
    sort: Optional[Literal['ascending', 'descending']] = None


class PremiumRequestInput(RequestSchema):
    biodata_id: int = Field(..., ge=1)
    user_email: Email
    user_name: str = Field(..., min_length=1, max_length=120)


# Users

class FavouriteInput(RequestSchema):
    user_email: Email
    biodata_id: int = Field(..., ge=1)
    name: Optional[str] = Field(None, max_length=120)
    permanent_address: Optional[str] = Field(None, max_length=120)
    occupation: Optional[str] = Field(None, max_length=120)


class PageParams(RequestSchema):
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)


class UserSearchParams(PageParams):
    search: Optional[str] = Field(None, max_length=120)


class ContactRequestFilters(PageParams):
    status: Optional[Literal['pending', 'approved']] = None


# Payment

class PaymentIntentInput(RequestSchema):
    price: float = Field(..., gt=0, le=10000)


class SavePaymentInput(RequestSchema):
    biodata_id: int = Field(..., ge=1)
    user_email: Email
    transaction_id: str = Field(..., min_length=1, max_length=255)


# Success stories

class SuccessStoryInput(RequestSchema):
    self_biodata_id: int = Field(..., ge=1)
    partner_biodata_id: int = Field(..., ge=1)
    couple_image: str = Field(..., min_length=1, max_length=500)
    success_story_text: str = Field(..., min_length=1)
    marriage_date: Optional[date] = None
    review_star: int = Field(5, ge=1, le=5)


def parse_json(schema):
    """Validate the JSON body of the current request; raises pydantic.ValidationError"""
    return schema.model_validate(request.get_json(silent=True) or {})


def parse_args(schema):
    """Validate the query string of the current request, ignoring empty values"""
    args = {key: value for key, value in request.args.items() if value != ''}
    return schema.model_validate(args)
