"""
Mint bearer tokens the way the identity provider does.

    python tests/jwt_generation.py <user-id>
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add repository root to path so we can import community_os
sys.path.insert(0, str(Path(__file__).parent.parent))

import jwt
from community_os.config.settings import Config


def generate_jwt_token(user_id: str, expires_in: timedelta = timedelta(hours=1), **overrides) -> str:
    """Generate a valid JWT token for testing API endpoints"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + expires_in,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    payload.update(overrides)
    return jwt.encode(payload, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


if __name__ == "__main__":
    token = generate_jwt_token(sys.argv[1] if len(sys.argv) > 1 else "local-user")
    print(f"Bearer {token}")
