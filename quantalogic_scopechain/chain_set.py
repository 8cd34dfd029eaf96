import logging
from typing import AbstractSet, Any, Generic, Hashable, Iterable, Iterator, Optional, Set, TypeVar

from .exceptions import KeyNotFound, NotInCurrentScope
from .scope import Scope
from .scope_stack import ScopeStack, visible_keys

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class ScopeChainSet(Generic[K]):
    """Chained scopes recording only which names are declared."""

    def __init__(self, root: Optional[Iterable[K]] = None, max_depth: Optional[int] = None) -> None:
        self.stack: ScopeStack[Set[K]] = ScopeStack(set, root, max_depth=max_depth)

    def push_scope(self, frame: Optional[Iterable[K]] = None) -> None:
        self.stack.push_scope(frame)

    def pop_scope(self) -> Set[K]:
        return self.stack.pop_scope()

    def depth(self) -> int:
        return self.stack.depth()

    def reset(self) -> None:
        self.stack.reset()

    def scope(self, frame: Optional[Iterable[K]] = None) -> Scope:
        return Scope(self, frame)

    def add(self, key: K) -> None:
        self.stack.top().add(key)

    def add_at(self, index: int, key: K) -> None:
        self.stack.frame_at(index).add(key)

    def has(self, key: K) -> bool:
        return self.stack.find_index(key) is not None

    def has_at(self, index: int, key: K) -> bool:
        if index < 0 or index >= self.stack.depth():
            return False
        return key in self.stack.frame_at(index)

    def has_local(self, key: K) -> bool:
        return key in self.stack.top()

    def index_of(self, key: K) -> Optional[int]:
        return self.stack.find_index(key)

    def delete(self, key: K) -> None:
        for frame in self.stack.frames_from_top():
            if key in frame:
                frame.discard(key)
                return
        logger.debug("Delete of %r missed at depth %d", key, self.stack.depth())
        raise KeyNotFound(key, "Cannot delete undeclared name %r" % (key,))

    def delete_local(self, key: K) -> None:
        frame = self.stack.top()
        if key not in frame:
            logger.debug("Local delete of %r missed at depth %d", key, self.stack.depth())
            raise NotInCurrentScope(key, self.stack.depth())
        frame.discard(key)

    def frame(self, index: int) -> AbstractSet[K]:
        return frozenset(self.stack.frame_at(index))

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[K]:
        return visible_keys(self.stack.frames_from_top())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other):
        if isinstance(other, ScopeChainSet):
            return self.stack == other.stack
        return NotImplemented

    def __repr__(self):
        return "ScopeChainSet(%r)" % list(self.stack)
