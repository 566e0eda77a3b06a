from __future__ import annotations


class ValidationError(Exception):
    def __init__(self, fields: list[str], message: str | None = None) -> None:
        self.fields = list(dict.fromkeys(fields))
        super().__init__(message or f"invalid fields: {', '.join(self.fields)}")

    @property
    def details(self) -> dict[str, list[str]]:
        return {"fields": self.fields}


class NotFoundError(Exception):
    pass


class RestaurantNotFoundError(NotFoundError):
    pass


class RestaurantHasOrdersError(Exception):
    pass
