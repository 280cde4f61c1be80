class DaybookClientException(Exception):
    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class MutationPendingException(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Mutation '{name}' is already pending")
