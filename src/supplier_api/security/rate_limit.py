"""Rate limiting configuration for security-sensitive endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from supplier_api.config import get_settings

# In-memory storage; a single process serves the API
limiter = Limiter(key_func=get_remote_address)

AUTH_VERIFY_LIMIT = f"{get_settings().rate_limit_auth_verify}/minute"
