from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Tokens are issued and verified by the catalog service; this service only
# forwards them.
bearer_scheme = HTTPBearer(
    description="Admin access token issued by the catalog service."
)


async def get_admin_token(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> str:
    return credentials.credentials
