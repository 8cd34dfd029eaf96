"""
Frame stack shared by the map and set scope chains.
"""

import logging
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .exceptions import IndexOutOfRange, ScopeOverflow, ScopeUnderflow

logger = logging.getLogger(__name__)

F = TypeVar("F")


class ScopeStack(Generic[F]):
    """
    Ordered stack of frames, index 0 being the root (global) scope and the last
    index the current scope.

    The stack does not know what a frame holds. It builds new frames with
    ``frame_factory`` and only relies on ``in``, iteration and ``len`` over them,
    so a ``dict`` and a ``set`` work equally well.
    """

    def __init__(
        self,
        frame_factory: Callable[..., F],
        root: Optional[Iterable[Any]] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be at least 1, got %d" % max_depth)
        self.frame_factory = frame_factory
        self.max_depth: Optional[int] = max_depth
        self._frames: List[F] = [self._new_frame(root)]

    def _new_frame(self, contents: Optional[Iterable[Any]] = None) -> F:
        # Always copy so that no frame is shared with the caller
        if contents is None:
            return self.frame_factory()
        return self.frame_factory(contents)

    def push_scope(self, frame: Optional[Iterable[Any]] = None) -> None:
        if self.max_depth is not None and len(self._frames) >= self.max_depth:
            logger.debug("Refusing push at depth %d, limit is %d", len(self._frames), self.max_depth)
            raise ScopeOverflow(self.max_depth)
        self._frames.append(self._new_frame(frame))
        logger.debug("Pushed scope, depth is now %d", len(self._frames))

    def pop_scope(self) -> F:
        if len(self._frames) == 1:
            logger.debug("Refusing to pop the root scope")
            raise ScopeUnderflow()
        frame = self._frames.pop()
        logger.debug("Popped scope holding %d key(s), depth is now %d", len(frame), len(self._frames))
        return frame

    def reset(self) -> None:
        """Drop every frame, leaving a single empty root."""
        self._frames = [self._new_frame()]
        logger.debug("Reset scope stack to an empty root")

    def depth(self) -> int:
        return len(self._frames)

    def top(self) -> F:
        return self._frames[-1]

    def frame_at(self, index: int) -> F:
        if index < 0 or index >= len(self._frames):
            raise IndexOutOfRange(index, len(self._frames))
        return self._frames[index]

    def frames_from_top(self) -> Iterator[F]:
        """
        Iterate frames from the current scope down to the root.

        Each call walks a snapshot of the stack taken at call time, so pushes and
        pops made while iterating are not observed.
        """
        return reversed(self._frames[:])

    def indexed_frames_from_top(self) -> Iterator[Tuple[int, F]]:
        frames = self._frames[:]
        for index in range(len(frames) - 1, -1, -1):
            yield index, frames[index]

    def frames_below(self, index: int) -> Iterator[F]:
        """
        Iterate frames strictly below ``index``, innermost first.

        An index at or past the depth selects every frame.
        """
        if index < 0:
            raise IndexOutOfRange(index, len(self._frames))
        return reversed(self._frames[:index])

    def find_index(self, key: Hashable) -> Optional[int]:
        for index, frame in self.indexed_frames_from_top():
            if key in frame:
                return index
        return None

    def __iter__(self) -> Iterator[F]:
        # Root first, the order frames were created in
        return iter(self._frames[:])

    def __eq__(self, other):
        if isinstance(other, ScopeStack):
            return self._frames == other._frames
        return NotImplemented

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._frames)


def visible_keys(frames: Iterable[Iterable[Hashable]]) -> Iterator[Hashable]:
    """
    Yield each key visible through ``frames`` exactly once.

    Args:
        frames: Frames ordered innermost first, as produced by ``frames_from_top``.

    Returns:
        Iterator over keys, innermost bindings first. A shadowed key is reported
        once, at the position of the binding that hides the others.
    """
    seen: Set[Hashable] = set()
    for frame in frames:
        for key in frame:
            if key not in seen:
                seen.add(key)
                yield key
