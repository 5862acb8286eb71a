# mylife/UAA/utils.py
import os
import uuid
from datetime import timedelta
from typing import Dict, Any, Optional

import structlog
from passlib.context import CryptContext
from jose import jwt, JWTError

from mylife.core.timestamps import utcnow
from mylife.infrastructure.redis_cache import redis_client

logger = structlog.get_logger(__name__)

# Config (env)
SECRET_KEY = os.getenv("SECRET_KEY", "change_me_now")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
REFRESH_TOKEN_EXPIRE_DAYS = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "30"))

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# --- redis key layout ---
def blacklist_key(jti: str) -> str:
    return f"bl:{jti}"

def refresh_key(jti: str) -> str:
    return f"rt:{jti}"

def user_refresh_set_key(user_id: str) -> str:
    return f"rts:{user_id}"

def login_attempts_key(user_id: str) -> str:
    return f"la:attempts:{user_id}"

def login_lock_key(user_id: str) -> str:
    return f"la:lock:{user_id}"

# --- Password utilities ---
def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError as e:
        # malformed or unknown hash
        logger.warning("password_verify_failed", error=str(e))
        return False

_PASSWORD_RULES = (
    (lambda p: len(p) >= 8, "password must be at least 8 characters"),
    (lambda p: any(c.isdigit() for c in p), "password must include a digit"),
    (lambda p: any(c.islower() for c in p), "password must include a lowercase letter"),
    (lambda p: any(c.isupper() for c in p), "password must include an uppercase letter"),
)

def assert_password_policy(password: str) -> None:
    for rule, message in _PASSWORD_RULES:
        if not rule(password):
            raise ValueError(message)

# --- JWT helpers ---
def now_ts() -> int:
    return int(utcnow().timestamp())

def seconds_until(expires_at_ts: int) -> int:
    return max(0, expires_at_ts - now_ts())

def _create_token(subject: str, token_type: str, expires_delta: timedelta) -> Dict[str, Any]:
    issued = utcnow()
    jti = str(uuid.uuid4())
    exp = int((issued + expires_delta).timestamp())
    claims = {"sub": subject, "exp": exp, "jti": jti, "type": token_type, "iat": int(issued.timestamp())}
    token = jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)
    logger.debug("token_created", sub=subject, jti=jti, type=token_type, exp=exp)
    return {"token": token, "jti": jti, "exp": exp}

def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> Dict[str, Any]:
    return _create_token(subject, "access", expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))

def create_refresh_token(subject: str, expires_delta: Optional[timedelta] = None) -> Dict[str, Any]:
    return _create_token(subject, "refresh", expires_delta or timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS))

def decode_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning("token_decode_failed", error=str(e))
        raise

# --- access token blacklist ---
async def blacklist_access_jti(jti: str, expires_at_ts: int) -> None:
    # an already expired token is rejected by decode_token anyway
    ttl = seconds_until(expires_at_ts)
    if ttl == 0:
        return
    await redis_client.set(blacklist_key(jti), "1", ex=ttl)
    logger.info("access_jti_blacklisted", jti=jti, ttl=ttl)

async def is_access_jti_blacklisted(jti: str) -> bool:
    return await redis_client.exists(blacklist_key(jti)) == 1

# --- refresh token registry: rt:<jti> -> user id, rts:<user id> -> {jti} ---
async def store_refresh_jti(jti: str, user_id: str, expires_at_ts: int) -> None:
    ttl = seconds_until(expires_at_ts)
    if ttl == 0:
        raise ValueError("refresh token already expired")
    await redis_client.set(refresh_key(jti), user_id, ex=ttl)
    await redis_client.sadd(user_refresh_set_key(user_id), jti)
    await redis_client.expire(user_refresh_set_key(user_id), ttl)
    logger.debug("refresh_jti_stored", jti=jti, user_id=user_id, ttl=ttl)

async def revoke_refresh_jti(jti: str) -> None:
    owner = await redis_client.get(refresh_key(jti))
    await redis_client.delete(refresh_key(jti))
    if owner:
        await redis_client.srem(user_refresh_set_key(owner), jti)
    logger.info("refresh_jti_revoked", jti=jti, user_id=owner)

async def is_refresh_valid(jti: str) -> bool:
    return await redis_client.exists(refresh_key(jti)) == 1

async def revoke_all_refresh_for_user(user_id: str) -> None:
    set_key = user_refresh_set_key(user_id)
    jtis = await redis_client.smembers(set_key) or set()
    if jtis:
        await redis_client.delete(*(refresh_key(j) for j in jtis))
    await redis_client.delete(set_key)
    logger.info("refresh_revoked_for_user", user_id=user_id, revoked_count=len(jtis))
