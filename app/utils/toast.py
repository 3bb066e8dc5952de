from fastapi import status
from fastapi.responses import RedirectResponse

def redirect_with_toast(url: str, message_key: str = None, toast_type: str = "success") -> RedirectResponse:
    """
    Redirects after a form post, passing a one-shot message to the next page.

    The cookie holds the string-table key; the page translates it for the
    reader's locale and the page script clears it.
    """
    response = RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
    if message_key:
        response.set_cookie(key="toast_message", value=message_key)
        response.set_cookie(key="toast_type", value=toast_type)
    return response
