from typing import List, Optional
from sqlalchemy.orm import Session
from app.exceptions import DuplicateKeyError
from app.models.user_model import User
from app.schemas.user_schema import UserCreate, UserUpdate
from app.security.auth import get_password_hash, verify_password


class UserCRUD:
    @staticmethod
    def get_user_id(db: Session, user_id: int) -> Optional[User]:
        return db.get(User, user_id)

    @staticmethod
    def get_user_by_username(db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    @staticmethod
    def get_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def create_user(db: Session, user: UserCreate) -> User:
        if UserCRUD.get_user_by_username(db, user.username):
            raise DuplicateKeyError("User", user.username)

        db_user = User(
            username=user.username,
            password_hash=get_password_hash(user.password),
            full_name=user.full_name,
            phone=user.phone,
            role="client",
        )
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user

    @staticmethod
    def update_user(db: Session, user_id: int, user_update: UserUpdate) -> Optional[User]:
        db_user = db.get(User, user_id)
        if not db_user:
            return None

        for key, value in user_update.model_dump(exclude_unset=True).items():
            if key == "password":
                setattr(db_user, "password_hash", get_password_hash(value))
            else:
                setattr(db_user, key, value)

        db.commit()
        db.refresh(db_user)
        return db_user

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> Optional[User]:
        user = UserCRUD.get_user_by_username(db, username)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user


user_crud = UserCRUD()
