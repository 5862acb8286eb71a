# mylife/infrastructure/redis_cache.py
import os
import redis.asyncio as aioredis

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# token revocation state (refresh jti registry, access jti blacklist, login lockouts)
redis_client = aioredis.from_url(REDIS_URL, decode_responses=True)
