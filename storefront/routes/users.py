"""User API routes"""

from fastapi import APIRouter, Depends

from ..models.user import AuthResponse, LoginRequest, RegisterRequest, User, UserResponse
from ..security.auth import require_user
from ..services.user_service import UserService, get_user_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: UserService = Depends(get_user_service),
):
    """Create an account and return it with a bearer token"""
    user, token = service.register(request)
    return AuthResponse(user=user, token=token, message="User created successfully")


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: UserService = Depends(get_user_service),
):
    """Exchange email and password for a bearer token"""
    user, token = service.login(request)
    return AuthResponse(user=user, token=token, message="User logged in successfully")


@router.get("/current-user", response_model=UserResponse)
async def get_current_user(user: User = Depends(require_user)):
    """The user resolved from the bearer token"""
    return UserResponse(user=user, message="User fetched successfully")
