from typing import Any, Optional


class ScopeChainError(Exception):
    pass


class ScopeUnderflow(ScopeChainError):
    def __init__(self, message: str = "Cannot pop the root scope") -> None:
        super().__init__(message)
        self.message = message


class ScopeOverflow(ScopeChainError, RecursionError):
    def __init__(self, max_depth: int) -> None:
        self.max_depth: int = max_depth
        self.message = "Maximum scope depth exceeded (%d)" % max_depth
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.max_depth,))


class KeyNotFound(ScopeChainError, KeyError):
    def __init__(self, key: Any, message: Optional[str] = None) -> None:
        self.key: Any = key
        self.message = message or "Name %r is not defined in any scope" % (key,)
        super().__init__(self.message)

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return self.message

    def __reduce__(self):
        return (type(self), (self.key, self.message))


class NotInCurrentScope(ScopeChainError, KeyError):
    def __init__(self, key: Any, depth: int) -> None:
        self.key: Any = key
        self.depth: int = depth
        self.message = "Name %r is not defined in the current scope (depth %d)" % (key, depth)
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def __reduce__(self):
        return (type(self), (self.key, self.depth))


class IndexOutOfRange(ScopeChainError, IndexError):
    def __init__(self, index: int, depth: int) -> None:
        self.index: int = index
        self.depth: int = depth
        self.message = "Scope index %d out of range (depth %d)" % (index, depth)
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.index, self.depth))
