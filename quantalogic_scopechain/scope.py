# quantalogic_scopechain/scope.py
from typing import Any, Iterable, Optional


class Scope:
    """Enter a nested scope for the duration of a ``with`` block."""

    def __init__(self, chain: Any, frame: Optional[Iterable[Any]] = None):
        self.chain = chain
        self.frame = frame
        self.depth: Optional[int] = None

    def __enter__(self):
        self.chain.push_scope(self.frame)
        self.depth = self.chain.depth()
        return self.chain

    def __exit__(self, exc_type, exc_value, traceback):
        # The body may already have popped or reset; only unwind what is left
        while self.chain.depth() >= self.depth and self.chain.depth() > 1:
            self.chain.pop_scope()
        return False
