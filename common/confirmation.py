from typing import Protocol


class ConfirmationService(Protocol):
    async def confirm_deletion(self, prompt: str) -> bool:
        ...


class StaticConfirmation:
    """
    Confirmation whose answer is already known, e.g. sent along with the request
    after the console showed its own confirmation modal.
    """

    def __init__(self, confirmed: bool) -> None:
        self.confirmed = confirmed
        self.prompts: list[str] = []

    async def confirm_deletion(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.confirmed
