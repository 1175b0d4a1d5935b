"""By-reference argument cell."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Ref(Generic[T]):
    """Mutable cell shared between a caller and a mock callback.

    Parameters annotated ``Ref[T]`` are by-reference slots: the dispatcher hands
    the caller's cell to the stub callback unchanged, so a callback assigning
    ``ref.value`` is visible to the caller and to the recorded call.

    Example:
        def fill(self, out: Ref[list[str]]) -> None: ...

        when(repo).fill(anything()).then_call(lambda out: out.set(["a"]))
        out = Ref([])
        repo.fill(out)
        assert out.value == ["a"]
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"
