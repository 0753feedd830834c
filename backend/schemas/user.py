# backend/schemas/user.py
import uuid
from datetime import date, datetime
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from config import settings


# Fields shared by registration and profile updates
class UserBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    username: str
    birthdate: date
    address: str
    phone_number: str = Field(..., description="Expected format: +56911223344")


# Schema for user registration requests
class UserCreate(UserBase):
    password: str


# Schema for profile updates; editable fields are replaced, password is optional
class UserUpdate(UserBase):
    password: Optional[str] = Field(None, description="Only updated when provided")


# Schema for user authentication credentials
class UserLogin(BaseModel):
    email: EmailStr
    password: str


# Outward view of an account; never carries the password hash
class UserResponse(BaseModel):
    id: uuid.UUID
    full_name: str
    email: str
    username: str
    is_active: bool
    birthdate: date
    address: str
    phone_number: str
    created_at: datetime


# Payload returned after a successful login
class LoginResponse(BaseModel):
    id: uuid.UUID
    username: str
    first_name: str
    last_name: str
    email: str


# Filters, sort key and page window for the user listing
class UserQuery(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    is_active: Optional[bool] = None
    sort_by: Optional[str] = None
    descending: bool = False
    page_number: int = 1
    page_size: int = settings.DEFAULT_PAGE_SIZE


# Paginated user list response
class PaginatedUsersResponse(BaseModel):
    items: List[UserResponse]
    total_count: int
    total_pages: int
    page: int
    page_size: int


# A single rejected field from request validation
class FieldViolation(BaseModel):
    field: str
    message: str
