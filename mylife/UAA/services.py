# mylife/UAA/services.py
from typing import Optional, Tuple
import structlog
from jose import JWTError

from .models import User
from .repository import UserRepository
from .schemas import UserCreate
from . import utils
from mylife.interfaces.repositories import IProfileRepository
from mylife.models.profile import Profile

logger = structlog.get_logger(__name__)

# brute-force constants
LOGIN_ATTEMPT_WINDOW_SECONDS = 300
MAX_LOGIN_ATTEMPTS = 5
LOCKOUT_SECONDS = 300

class AuthenticationError(Exception):
    pass

class UserService:
    def __init__(self, repo: Optional[UserRepository], profile_repo: Optional[IProfileRepository]):
        self.repo = repo
        self.profile_repo = profile_repo

    async def register_user(self, user_in: UserCreate) -> Tuple[User, Profile]:
        """
        Create the account and the profile that owns the user's posts.
        Raises ValueError on password policy or uniqueness violations.
        """
        utils.assert_password_policy(user_in.password)
        existing = await self.repo.get_by_email(user_in.email)
        if existing:
            logger.debug("register_email_exists", email=user_in.email)
            raise ValueError("email already registered")

        existing_username = await self.repo.get_by_username(user_in.username)
        if existing_username:
            logger.debug("register_username_exists", username=user_in.username)
            raise ValueError("username already taken")

        hashed = utils.hash_password(user_in.password)
        user = User(email=user_in.email, username=user_in.username, hashed_password=hashed)
        created = await self.repo.create(user)
        profile = await self.profile_repo.create(Profile(user_id=created.id))
        logger.info("user_registered", user_id=str(created.id), profile_id=str(profile.id), email=created.email)
        return created, profile

    async def _is_locked(self, user_id: str) -> bool:
        return await utils.redis_client.exists(utils.login_lock_key(user_id)) == 1

    async def _record_failed_login(self, user_id: str) -> int:
        """Count a failure inside the sliding window; lock the account at the limit."""
        key = utils.login_attempts_key(user_id)
        attempts = await utils.redis_client.incr(key)
        if attempts == 1:
            await utils.redis_client.expire(key, LOGIN_ATTEMPT_WINDOW_SECONDS)
        if attempts >= MAX_LOGIN_ATTEMPTS:
            await utils.redis_client.set(utils.login_lock_key(user_id), "1", ex=LOCKOUT_SECONDS)
            logger.warning("user_locked_due_to_failed_logins", user_id=user_id)
        return attempts

    async def _clear_failed_logins(self, user_id: str) -> None:
        await utils.redis_client.delete(utils.login_attempts_key(user_id), utils.login_lock_key(user_id))

    async def authenticate_user(self, email: str, password: str) -> User:
        user = await self.repo.get_by_email(email)
        if not user:
            logger.debug("auth_failed_unknown_email", email=email)
            raise AuthenticationError("invalid credentials")

        if not user.is_active:
            logger.info("auth_failed_inactive_user", user_id=str(user.id))
            raise AuthenticationError("invalid credentials")

        if await self._is_locked(str(user.id)):
            logger.warning("auth_attempt_on_locked_user", user_id=str(user.id))
            raise AuthenticationError("account temporarily locked due to failed login attempts")

        if not utils.verify_password(password, user.hashed_password):
            attempts = await self._record_failed_login(str(user.id))
            logger.info("auth_failed_wrong_password", user_id=str(user.id), attempts=attempts)
            raise AuthenticationError("invalid credentials")

        await self._clear_failed_logins(str(user.id))
        await self.repo.update_last_login(user)
        logger.info("auth_success", user_id=str(user.id), email=user.email)
        return user

    async def _issue_for(self, subject: str) -> dict:
        access = utils.create_access_token(subject)
        refresh = utils.create_refresh_token(subject)
        await utils.store_refresh_jti(refresh["jti"], subject, refresh["exp"])
        return {"access": access, "refresh": refresh}

    async def issue_tokens(self, user: User) -> dict:
        tokens = await self._issue_for(str(user.id))
        logger.info("tokens_issued", user_id=str(user.id), access_jti=tokens["access"]["jti"], refresh_jti=tokens["refresh"]["jti"])
        return tokens

    async def refresh_tokens(self, old_refresh_token: str) -> dict:
        """Rotate: the presented refresh jti is revoked before a new pair is issued."""
        payload = self._decode_or_none(old_refresh_token)
        if payload is None:
            raise AuthenticationError("invalid refresh token")
        if payload.get("type") != "refresh":
            logger.warning("token_type_not_refresh", payload_type=payload.get("type"))
            raise AuthenticationError("invalid token type")

        old_jti = payload.get("jti")
        if not await utils.is_refresh_valid(old_jti):
            logger.warning("refresh_token_not_found_in_redis", jti=old_jti)
            raise AuthenticationError("refresh token revoked or invalid")

        await utils.revoke_refresh_jti(old_jti)
        tokens = await self._issue_for(payload.get("sub"))
        logger.info("refresh_rotated", user_id=payload.get("sub"), old_jti=old_jti, new_jti=tokens["refresh"]["jti"])
        return tokens

    async def logout(self, access_token: Optional[str] = None, refresh_token: Optional[str] = None, revoke_all: bool = False) -> None:
        if refresh_token:
            await self._revoke_refresh(refresh_token, revoke_all)
        if access_token:
            await self._revoke_access(access_token)

    async def _revoke_refresh(self, token: str, revoke_all: bool) -> None:
        payload = self._decode_or_none(token)
        if not payload or payload.get("type") != "refresh":
            return
        await utils.revoke_refresh_jti(payload.get("jti"))
        logger.info("refresh_revoked_on_logout", jti=payload.get("jti"), user_id=payload.get("sub"))
        if revoke_all and payload.get("sub"):
            await utils.revoke_all_refresh_for_user(payload["sub"])

    async def _revoke_access(self, token: str) -> None:
        payload = self._decode_or_none(token)
        if not payload or payload.get("type") != "access":
            return
        if payload.get("jti") and payload.get("exp"):
            await utils.blacklist_access_jti(payload["jti"], payload["exp"])

    @staticmethod
    def _decode_or_none(token: str) -> Optional[dict]:
        # expired or tampered tokens need no revocation
        try:
            return utils.decode_token(token)
        except JWTError:
            return None
