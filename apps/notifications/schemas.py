from typing import Literal, Optional
from pydantic import BaseModel


NotificationType = Literal["success", "error"]


class NotificationOut(BaseModel):
    """
    One toast shown by the console after an operator action.
    """
    type: NotificationType
    title: str
    message: Optional[str] = None
    detail: Optional[str] = None
