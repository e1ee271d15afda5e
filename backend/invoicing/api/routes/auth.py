"""Auth Routes — credentials sign-in form endpoint.

Invariants:
    - Failure -> 401 {"message": "..."}; success -> 303 to the redirect target
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from invoicing.api.action_responses import to_response
from invoicing.api.dependencies import get_identity_provider
from invoicing.config import get_settings
from invoicing.core.action_result import NavigateTo
from invoicing.infrastructure.identity_provider import CredentialsIdentityProvider
from invoicing.services.authenticate import authenticate

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    request: Request,
    provider: CredentialsIdentityProvider = Depends(get_identity_provider),
):
    form = await request.form()
    result = await authenticate(
        provider, form, default_redirect=get_settings().sign_in_redirect,
    )
    if isinstance(result, NavigateTo):
        return to_response(result)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"message": result},
    )
