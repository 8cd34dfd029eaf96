import logging
from types import MappingProxyType
from typing import Any, Dict, Generic, Hashable, Iterator, Mapping, Optional, Tuple, TypeVar

from .exceptions import KeyNotFound, NotInCurrentScope
from .scope import Scope
from .scope_stack import ScopeStack, visible_keys

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ScopeChainMap(Generic[K, V]):
    """
    Chained key/value scopes for variable environments.

    ``declare`` binds a name in the current scope, shadowing any outer binding.
    ``set`` assigns to an existing binding in whichever scope holds it.
    Lookups and deletes walk from the current scope out to the root and stop at
    the first match.
    """

    def __init__(self, root: Optional[Mapping[K, V]] = None, max_depth: Optional[int] = None) -> None:
        self.stack: ScopeStack[Dict[K, V]] = ScopeStack(dict, root, max_depth=max_depth)

    def push_scope(self, frame: Optional[Mapping[K, V]] = None) -> None:
        self.stack.push_scope(frame)

    def pop_scope(self) -> Dict[K, V]:
        return self.stack.pop_scope()

    def depth(self) -> int:
        return self.stack.depth()

    def reset(self) -> None:
        self.stack.reset()

    def scope(self, frame: Optional[Mapping[K, V]] = None) -> Scope:
        return Scope(self, frame)

    def declare(self, key: K, value: V) -> None:
        self.stack.top()[key] = value

    def declare_at(self, index: int, key: K, value: V) -> None:
        self.stack.frame_at(index)[key] = value

    def get(self, key: K) -> V:
        for frame in self.stack.frames_from_top():
            if key in frame:
                return frame[key]
        logger.debug("Lookup of %r missed at depth %d", key, self.stack.depth())
        raise KeyNotFound(key)

    def get_before(self, index: int, key: K) -> V:
        for frame in self.stack.frames_below(index):
            if key in frame:
                return frame[key]
        logger.debug("Lookup of %r below scope %d missed", key, index)
        raise KeyNotFound(key, "Name %r is not defined below scope %d" % (key, index))

    def set(self, key: K, value: V) -> None:
        for frame in self.stack.frames_from_top():
            if key in frame:
                frame[key] = value
                return
        logger.debug("Assignment to undeclared name %r", key)
        raise KeyNotFound(key, "Cannot assign to undeclared name %r" % (key,))

    def set_before(self, index: int, key: K, value: V) -> None:
        for frame in self.stack.frames_below(index):
            if key in frame:
                frame[key] = value
                return
        logger.debug("Assignment to %r below scope %d missed", key, index)
        raise KeyNotFound(key, "Cannot assign to %r, not declared below scope %d" % (key, index))

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
                del frame[key]
                return
        logger.debug("Delete of %r missed at depth %d", key, self.stack.depth())
        raise KeyNotFound(key, "Cannot delete undeclared name %r" % (key,))

    def delete_local(self, key: K) -> None:
        frame = self.stack.top()
        if key not in frame:
            logger.debug("Local delete of %r missed at depth %d", key, self.stack.depth())
            raise NotInCurrentScope(key, self.stack.depth())
        del frame[key]

    def frame(self, index: int) -> Mapping[K, V]:
        return MappingProxyType(self.stack.frame_at(index))

    def items(self) -> Iterator[Tuple[K, V]]:
        for key in self:
            yield key, self.get(key)

    def to_dict(self) -> Dict[K, V]:
        """Flatten the visible bindings into a plain dict."""
        flat: Dict[K, V] = {}
        for frame in self.stack:
            flat.update(frame)
        return flat

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.declare(key, value)

    def __delitem__(self, key: K) -> None:
        self.delete(key)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[K]:
        return visible_keys(self.stack.frames_from_top())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other):
        if isinstance(other, ScopeChainMap):
            return self.stack == other.stack
        return NotImplemented

    def __repr__(self):
        return "ScopeChainMap(%r)" % list(self.stack)
