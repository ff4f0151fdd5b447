"""All intercepted errors"""

import typing as t

__all__ = [
    "BaseError",
    "LoadError",
    "IntegrityError",
    "NameCollisionExhausted",
]


class BaseError(Exception):
    """Common base to catch in CLI"""

    CODE: int = 101


class LoadError(BaseError):
    """Loader regular exception during load process"""

    CODE: int = 102

    def __init__(self, message: str, stack: t.List[str]) -> None:
        self.message: str = message
        self.stack: t.List[str] = stack
        text: str = message
        if stack:
            text += f"\n  Sources stack: {' -> '.join(stack)}"
        super().__init__(text)


class IntegrityError(BaseError):
    """Registry, catalog or store structure error"""

    CODE: int = 103


class NameCollisionExhausted(BaseError):
    """Unique name search gave up"""

    CODE: int = 104

    def __init__(self, prefix: str, limit: int) -> None:
        self.prefix: str = prefix
        self.limit: int = limit
        super().__init__(f"No free name found for prefix {prefix!r} within {limit} candidates")
