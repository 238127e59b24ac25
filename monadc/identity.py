"""Identity generation for abstract values."""

from __future__ import annotations

from . import constants
from .errors import IdentityExhaustedError


class IdentityGenerator:
    """Strictly increasing stream of identifiers in ``[start, limit)``.

    Iterating yields fresh identifiers until the range runs out, at which
    point ``StopIteration`` is raised (and keeps being raised).
    ``make_new_id`` is the form used by callers that cannot continue
    without one.
    """

    def __init__(
        self,
        start: int = constants.DEFAULT_IDENTITY_START,
        limit: int = constants.DEFAULT_IDENTITY_LIMIT,
    ):
        if start > limit:
            raise ValueError(f"Identity start {start} exceeds limit {limit}")
        self._next_id = start
        self._limit = limit

    def __iter__(self) -> IdentityGenerator:
        return self

    def __next__(self) -> int:
        if self._next_id >= self._limit:
            raise StopIteration
        issued = self._next_id
        self._next_id += 1
        return issued

    @property
    def remaining(self) -> int:
        return self._limit - self._next_id

    def make_new_id(self) -> int:
        try:
            return next(self)
        except StopIteration:
            raise IdentityExhaustedError(
                f"Identity range exhausted at {self._limit}"
            ) from None
