# backend/auth/routes.py
from fastapi import APIRouter, Depends, Header, Request

from shared.exceptions import InvalidCredential
from .controllers import CredentialService
from .models import UserRegister, UserLogin

router = APIRouter()


def get_credential_service(request: Request) -> CredentialService:
    return request.app.state.credential_service

# ------------------------------------------------------------
# 🔹 Register
# ------------------------------------------------------------
@router.post("/register", status_code=201, summary="Register a new user")
def register(data: UserRegister, service: CredentialService = Depends(get_credential_service)):
    return service.register(data)

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.post("/login", summary="Log in with email and password")
def login(data: UserLogin, service: CredentialService = Depends(get_credential_service)):
    return service.login(data)

# ------------------------------------------------------------
# 🔹 Validate token
# ------------------------------------------------------------
@router.post("/validate-token", summary="Check a bearer token and return its claims")
def validate(
    authorization: str = Header(None),
    service: CredentialService = Depends(get_credential_service),
):
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidCredential("Token required")
    claims = service.verify_token(token.strip())
    return {"valid": True, "id": claims.get("id"), "username": claims.get("username"), "email": claims.get("email")}
