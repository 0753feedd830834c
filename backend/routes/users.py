# backend/routes/users.py
import uuid
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from config import settings
from database import UserStore, get_store
from schemas.user import (
    LoginResponse, PaginatedUsersResponse, UserCreate, UserLogin, UserQuery,
    UserResponse, UserUpdate,
)
from services.users import UserService
from utils.audit import write_log
from utils.errors import Conflict, InvalidArgument, NotFound, Unauthorized
from utils.mappers import to_login_view, to_view
from utils.query import total_pages
from utils.validation import validate_user_create, validate_user_update

F = TypeVar("F", bound=Callable[..., Any])

router = APIRouter(prefix="/user", tags=["Users"])


def translate_service_errors(fn: F) -> F:
    """Turn user service errors into HTTPExceptions, keeping the endpoint signature for FastAPI."""

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except NotFound as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
        except Conflict as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
        except Unauthorized as e:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
        except InvalidArgument as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return cast(F, wrapper)


def get_user_service(store: UserStore = Depends(get_store)) -> UserService:
    return UserService(store)


def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def _reject_violations(violations):
    if violations:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[v.model_dump() for v in violations],
        )


# Register a new user
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@translate_service_errors
def create_user(
    payload: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    _reject_violations(validate_user_create(payload))

    try:
        user = service.register(payload)
    except Conflict as e:
        write_log(user_id=None, action="REGISTER", resource="user", status="FAIL",
                  ip=_client_ip(request), meta={"email": str(payload.email), "reason": e.message})
        raise

    write_log(user_id=user.id, action="REGISTER", resource="user",
              ip=_client_ip(request), meta={"email": user.email})

    response.headers["Location"] = f"/user/{user.id}"
    return to_view(user)


# Authenticate a user by email and password
@router.post("/login", response_model=LoginResponse)
@translate_service_errors
def login(
    payload: UserLogin,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    try:
        user = service.authenticate(str(payload.email), payload.password)
    except Unauthorized:
        write_log(user_id=None, action="LOGIN", resource="user", status="FAIL",
                  ip=_client_ip(request), meta={"email": str(payload.email)})
        raise

    write_log(user_id=user.id, action="LOGIN", resource="user",
              ip=_client_ip(request), meta={"email": user.email})
    return to_login_view(user)


# Retrieve a list of users with filtering, sorting, and pagination
@router.get("", response_model=PaginatedUsersResponse)
@translate_service_errors
def list_users(
    first_name: Optional[str] = Query(None, description="Search by first name"),
    last_name: Optional[str] = Query(None, description="Search by last name"),
    email: Optional[str] = Query(None, description="Search by email"),
    username: Optional[str] = Query(None, description="Search by username"),
    is_active: Optional[bool] = Query(None, description="Filter by active status"),
    sort_by: Optional[str] = Query(None, description="first_name, last_name, email, username or created_at"),
    descending: bool = Query(False),
    page_number: int = Query(1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE),
    request_user_id: Optional[uuid.UUID] = Query(None, alias="requestUserId"),
    service: UserService = Depends(get_user_service),
):
    # Listing is only available to a signed-in caller
    if request_user_id is None or request_user_id.int == 0:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="You must be signed in to list users")

    query = UserQuery(
        first_name=first_name,
        last_name=last_name,
        email=email,
        username=username,
        is_active=is_active,
        sort_by=sort_by,
        descending=descending,
        page_number=page_number,
        page_size=page_size,
    )
    users, total = service.list_users(query)

    return {
        "items": [to_view(u) for u in users],
        "total_count": total,
        "total_pages": total_pages(total, page_size),
        "page": max(page_number, 1),
        "page_size": page_size,
    }


# Retrieve a single user
@router.get("/{user_id}", response_model=UserResponse)
@translate_service_errors
def get_user(user_id: uuid.UUID, service: UserService = Depends(get_user_service)):
    return to_view(service.get_user(user_id))


# Update a user's profile (only the owner may edit it)
@router.patch("/{user_id}", response_model=UserResponse)
@translate_service_errors
def update_user(
    user_id: uuid.UUID,
    payload: UserUpdate,
    request: Request,
    request_user_id: Optional[uuid.UUID] = Query(None, alias="requestUserId"),
    service: UserService = Depends(get_user_service),
):
    if request_user_id != user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="You are not allowed to edit this profile")

    _reject_violations(validate_user_update(payload))

    user = service.update_user(user_id, payload)
    write_log(user_id=user.id, action="USER_UPDATE", resource="user",
              ip=_client_ip(request), meta={"password_changed": bool(payload.password)})
    return to_view(user)


# Soft delete a user (marks the account inactive)
@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
@translate_service_errors
def delete_user(
    user_id: uuid.UUID,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    service.soft_delete(user_id)
    write_log(user_id=user_id, action="USER_DELETE", resource="user", ip=_client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
