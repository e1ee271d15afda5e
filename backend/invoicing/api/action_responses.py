"""Action Responses — translates action results into HTTP responses.

Invariants:
    - NavigateTo -> 303 See Other (browser follows with GET)
    - ActionState -> 422 with {"errors": ..., "message": ...}
    - None -> 204 No Content
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from invoicing.core.action_result import ActionState, NavigateTo


def to_response(result: ActionState | NavigateTo | None) -> Response:
    if isinstance(result, NavigateTo):
        return RedirectResponse(result.path, status_code=status.HTTP_303_SEE_OTHER)
    if isinstance(result, ActionState):
        return JSONResponse(
            status_code=422,
            content=result.to_dict(),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
