from fastapi import HTTPException, status


def http_not_found(detail: str) -> HTTPException:
    """
    404 Not Found response shortcut.
    """
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def http_bad_request(detail: str) -> HTTPException:
    """
    400 Bad Request response shortcut.
    """
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def view_not_open(view_id: str) -> HTTPException:
    return http_not_found(f"No open team view {view_id}")


def user_not_in_list(user_id: int, list_name: str) -> HTTPException:
    return http_not_found(f"User {user_id} is not in the {list_name} list")
