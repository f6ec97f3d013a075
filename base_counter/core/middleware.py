from starlette.requests import Request

from base_counter.core.config import settings
from base_counter.core.exception_handlers import error_response
from base_counter.domains.auth.service import validate_auth_key


def _is_protected(request: Request) -> bool:
    if request.method in ("GET", "HEAD", "OPTIONS"):
        return False
    path = request.url.path
    return any(path.startswith(prefix) for prefix in settings.PROTECTED_PATH_PREFIXES)


async def auth_middleware(request: Request, call_next):
    if not _is_protected(request):
        return await call_next(request)

    fused_key = request.headers.get("x-fused-key")
    random_string = request.headers.get("x-random-string")
    if not fused_key or not random_string:
        return error_response(401, "Missing authentication headers")

    ip_address = request.client.host if request.client else "unknown"
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip_address = forwarded.split(",")[0].strip()

    if not await validate_auth_key(fused_key, random_string, ip_address):
        return error_response(401, "Invalid or reused authentication key")

    return await call_next(request)
