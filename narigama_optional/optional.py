from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from typing import Generic
from typing import TypeVar

from loguru import logger

from narigama_optional.presence import Presence
from narigama_optional.problem import IllegalState
from narigama_optional.problem import InvalidArgument


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Optional(Generic[T]):
    """A value that may or may not be present.

    Never build one directly, use Optional.of(), Optional.of_nullable() or
    Optional.empty(). Every transformation returns a new Optional, carrying
    the presence policy it was built with.
    """

    # inner value, never access it directly, instead using Optional.get_or_throw() or Optional.or_else()
    _value: T | None = None
    _present: bool = False
    _presence: Presence = field(default=Presence.NONE, compare=False, repr=False)

    def __post_init__(self):
        if self._present == (self._value is None):
            msg = "Optional({!r}, {!r}) is inconsistent. Use Optional.of(), Optional.of_nullable() or Optional.empty().".format(
                self._value, self._present
            )
            logger.bind(kind=InvalidArgument.kind).debug(msg)
            raise InvalidArgument(msg)

    @classmethod
    def of(cls, value: T, presence: Presence = Presence.NONE) -> "Optional[T]":
        """Wrap a value that must not be None, raises InvalidArgument if it is."""
        if value is None:
            msg = "Optional.of() was given None. Use Optional.of_nullable() when the value may be missing."
            logger.bind(kind=InvalidArgument.kind).debug(msg)
            raise InvalidArgument(msg)
        return cls(value, True, presence)

    @classmethod
    def of_nullable(cls, value: T | None, presence: Presence = Presence.NONE) -> "Optional[T]":
        """Wrap a value, treating it as absent when the presence policy says so.

        Under Presence.NONE only None is absent. Under Presence.DEFAULT the
        zero value of a builtin type (0, "", [], ...) is absent too."""
        if presence.is_absent(value):
            return cls.empty(presence)
        return cls(value, True, presence)

    @classmethod
    def empty(cls, presence: Presence = Presence.NONE) -> "Optional[T]":
        """An Optional without a value."""
        return cls(None, False, presence)

    def __repr__(self) -> str:
        if self._present:
            return "Optional[{}]".format(self._value)
        return "Optional.Empty"

    def __bool__(self) -> bool:
        return self._present

    def __iter__(self) -> Iterator[T]:
        if self._present:
            yield self._value

    def is_present(self) -> bool:
        """Check if the Optional contains a value or not."""
        return self._present

    def get_or_throw(self) -> T:
        """Attempt to get value, raises IllegalState if missing."""
        if not self._present:
            msg = "Optional did not contain a value. Use Optional.is_present() before attempting Optional.get_or_throw()."
            logger.bind(kind=IllegalState.kind).debug(msg)
            raise IllegalState(msg)
        return self._value

    def or_else(self, fallback: U) -> T | U:
        """Return the value, or `fallback` exactly as given (it is never called)."""
        return self._value if self._present else fallback

    def or_else_get(self, producer: Callable[[], U]) -> T | U:
        """Return the value, or the result of `producer()`.

        The producer is only called when the Optional is empty."""
        if self._present:
            return self._value
        return producer()

    def if_present(self, action: Callable[[T], object]) -> None:
        """Call `action` with the value, does nothing when empty."""
        if self._present:
            action(self._value)

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        """Map Optional[T] to Optional[U] via the provided callable.

        The result is wrapped with Optional.of_nullable() under this Optional's
        presence policy, so a mapper returning None (or, under Presence.DEFAULT,
        a zero value) gives an empty Optional. The mapper is not called on an
        empty Optional."""
        if not self._present:
            return self.empty(self._presence)
        return self.of_nullable(mapper(self._value), self._presence)

    def flat_map(self, mapper: "Callable[[T], Optional[U]]") -> "Optional[U]":
        """Like Optional.map(), but the mapper returns an Optional which is passed through untouched."""
        if not self._present:
            return self.empty(self._presence)
        return mapper(self._value)
