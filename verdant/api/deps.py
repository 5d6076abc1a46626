import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, HTTPException, Request, status

from verdant.adapters.memory_backend import InMemoryBackend
from verdant.adapters.supabase_backend import SupabaseBackend
from verdant.components.layout import LayoutData, PrimeLayoutInput, run_prime_layout
from verdant.domain.entities import AuthUser
from verdant.ports.backend import BackendError, BackendPort
from verdant.rules.loader import load_rules
from verdant.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.backend = os.environ.get("VERDANT_BACKEND", "supabase")
        self.supabase_url = os.environ.get("SUPABASE_URL", "")
        self.supabase_anon_key = os.environ.get("SUPABASE_ANON_KEY", "")
        self.supabase_service_role_key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")
        self.rules_path = Path(
            os.environ.get("VERDANT_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.seed_path = os.environ.get("VERDANT_SEED_PATH")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Backend ---

# In-memory backend singleton for VERDANT_BACKEND=memory
_memory_backend_instance: InMemoryBackend | None = None


def get_memory_backend() -> InMemoryBackend:
    """Get in-memory backend singleton."""
    global _memory_backend_instance
    if _memory_backend_instance is None:
        _memory_backend_instance = InMemoryBackend()
    return _memory_backend_instance


def _connect(settings: Settings, key: str) -> BackendPort:
    if settings.backend == "memory":
        return get_memory_backend()
    try:
        return SupabaseBackend.connect(settings.supabase_url, key)
    except BackendError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Backend not configured: {e.message}",
        ) from e


def get_backend(settings: Settings = Depends(get_settings)) -> BackendPort:
    """Per-request client with the anon key, for visitor-facing reads."""
    return _connect(settings, settings.supabase_anon_key)


def get_admin_backend(settings: Settings = Depends(get_settings)) -> BackendPort:
    """Per-request client with the service role key, for the admin console."""
    return _connect(settings, settings.supabase_service_role_key)


# --- Auth / Layout ---


def get_access_token(request: Request) -> str | None:
    # 1. Cookie (HttpOnly)
    token = request.cookies.get("access_token")
    if token and token.startswith("Bearer "):
        return token.split(" ", 1)[1]
    if token:
        return token

    # 2. Authorization header
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header.split(" ", 1)[1]
    return None


def get_layout(
    access_token: str | None = Depends(get_access_token),
    backend: BackendPort = Depends(get_backend),
) -> LayoutData:
    """Root layout data, primed on every page request."""
    return run_prime_layout(PrimeLayoutInput(access_token=access_token), backend)


# --- Admin Guard ---
ADMIN_ROLE = "admin"


def require_admin(
    access_token: str | None = Depends(get_access_token),
    backend: BackendPort = Depends(get_admin_backend),
) -> AuthUser:
    """Resolve the caller and require an admin role in user_profiles."""
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = backend.get_user(access_token)
        profiles = (
            backend.select("user_profiles", "id, role", filters={"id": str(user.id)})
            if user
            else []
        )
    except BackendError as e:
        logger.warning("Admin check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not verify user",
        ) from e

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not any(p.get("role") == ADMIN_ROLE for p in profiles):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    return user
