import hmac
import re
import secrets

from web3 import Web3

from ...core.config import settings

FUSED_KEY_PATTERN = re.compile(r"[0-9a-f]{64}")


def generate_random_string() -> str:
    return secrets.token_hex(16)


def create_fused_key(random_string: str, secret_key: str | None = None) -> str:
    """keccak256(secret + random) as hex without the 0x prefix."""
    secret = settings.API_SECRET_KEY if secret_key is None else secret_key
    return Web3.to_hex(Web3.keccak(text=secret + random_string))[2:]


def is_valid_fused_key(fused_key: str, random_string: str, secret_key: str | None = None) -> bool:
    if not fused_key or not random_string:
        return False
    expected = create_fused_key(random_string, secret_key)
    provided = fused_key.lower().removeprefix("0x")
    if not FUSED_KEY_PATTERN.fullmatch(provided):
        return False
    return hmac.compare_digest(expected, provided)
