from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.exceptions import DuplicateKeyError
from app.services.user_crud import user_crud
from app.schemas.user_schema import UserCreate, UserOut, UserUpdate, UserLogin, LoginResponse
from app.database import get_db
from app.security.auth import create_access_token, get_current_user
from app.models.user_model import User
from app.logger import get_logger

user_router = APIRouter()
logger = get_logger(__name__)


# AUTH ENDPOINTS

@user_router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Registering user: {user.username}")
        db_user = user_crud.create_user(db, user)
        logger.info(f"User registered successfully: {user.username}")
        return UserOut.model_validate(db_user)

    except DuplicateKeyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error registering user {user.username}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while registering user"
        )


@user_router.post("/auth/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
def login_user(user_login: UserLogin, db: Session = Depends(get_db)):
    """Exchange username and password for a bearer token"""
    logger.info(f"Login attempt for user: {user_login.username}")
    user = user_crud.authenticate(db, user_login.username, user_login.password)
    if not user:
        logger.warning(f"Failed login attempt for user: {user_login.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials (Username or Password)",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token, _ = create_access_token(data={"sub": str(user.id)})
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        user=UserOut.model_validate(user),
    )


# USER ENDPOINTS

@user_router.get("/users/me", response_model=UserOut, status_code=status.HTTP_200_OK)
def get_me(current_user: User = Depends(get_current_user)):
    return UserOut.model_validate(current_user)


@user_router.patch("/users/me", response_model=UserOut, status_code=status.HTTP_200_OK)
def update_me(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    updated_user = user_crud.update_user(db, current_user.id, user_update)
    return UserOut.model_validate(updated_user)


@user_router.get("/users/{user_id}", response_model=UserOut, status_code=status.HTTP_200_OK)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = user_crud.get_user_id(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserOut.model_validate(user)
