"""Tests for application/stubbing/answers.py."""

import pytest

from mockwright.application.stubbing.answers import (
    PARENT_DELEGATE,
    AnswerCollection,
    ExceptionAnswer,
    LambdaAnswer,
    NoAnswer,
    ParentDelegate,
    SmartDefaultAnswer,
    StaticAnswer,
)
from mockwright.domain.exceptions import InvalidAnswerError
from mockwright.domain.model.return_contract import ReturnContract
from tests.factories import make_method, make_surface


class TestSimpleAnswers:
    """Static, exception, lambda, none and parent answers."""

    def test_static(self) -> None:
        callback = StaticAnswer(42).get_answer_callback(None, "run")
        assert callback(1, key=2) == 42

    def test_exception_instance(self) -> None:
        callback = ExceptionAnswer(ValueError("boom")).get_answer_callback(None, "run")
        with pytest.raises(ValueError, match="boom"):
            callback()

    def test_exception_class(self) -> None:
        callback = ExceptionAnswer(KeyError).get_answer_callback(None, "run")
        with pytest.raises(KeyError):
            callback()

    def test_exception_rejects_non_exception(self) -> None:
        with pytest.raises(InvalidAnswerError, match="exception"):
            ExceptionAnswer("boom")  # type: ignore[arg-type]

    def test_lambda_gets_arguments(self) -> None:
        callback = LambdaAnswer(lambda x, y=0: x + y).get_answer_callback(None, "add")
        assert callback(1, y=2) == 3

    def test_lambda_rejects_non_callable(self) -> None:
        with pytest.raises(InvalidAnswerError, match="callable"):
            LambdaAnswer(42)  # type: ignore[arg-type]

    def test_no_answer(self) -> None:
        assert NoAnswer().get_answer_callback(None, "run")(1, 2) is None

    def test_parent_delegate_marker(self) -> None:
        assert ParentDelegate().get_answer_callback(None, "run") is PARENT_DELEGATE


class TestSmartDefaultAnswer:
    """Type-appropriate empty values."""

    @staticmethod
    def _mock_class(contract: ReturnContract, name: str = "run") -> type:
        surface = make_surface(make_method(name, returns=contract))
        return type("Generated", (), {"_mock_surface": surface})

    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            ("int", 0),
            ("float", 0.0),
            ("str", ""),
            ("bytes", b""),
            ("bool", False),
            ("list[int]", []),
            ("dict[str, int]", {}),
            ("set[str]", set()),
            ("tuple[int, ...]", ()),
            ("typing.List[int]", []),
            ("collections.abc.Mapping[str, int]", {}),
        ],
    )
    def test_value_by_annotation(self, annotation: str, expected: object) -> None:
        cls = self._mock_class(ReturnContract.value(annotation, nullable=False))
        assert SmartDefaultAnswer().get_answer_callback(cls(), "run")() == expected

    def test_fresh_container_per_call(self) -> None:
        cls = self._mock_class(ReturnContract.value("list[int]", nullable=False))
        callback = SmartDefaultAnswer().get_answer_callback(cls(), "run")
        assert callback() is not callback()

    def test_nullable_is_none(self) -> None:
        cls = self._mock_class(ReturnContract.value("int | None", nullable=True))
        assert SmartDefaultAnswer().get_answer_callback(cls(), "run")() is None

    def test_unknown_type_is_none(self) -> None:
        cls = self._mock_class(ReturnContract.value("Calculator", nullable=False))
        assert SmartDefaultAnswer().get_answer_callback(cls(), "run")() is None

    def test_class_context(self) -> None:
        cls = self._mock_class(ReturnContract.value("str", nullable=False))
        assert SmartDefaultAnswer().get_answer_callback(cls, "run")() == ""

    def test_no_surface(self) -> None:
        assert SmartDefaultAnswer().get_answer_callback(object(), "run")() is None

    def test_protocol_methods(self) -> None:
        answer = SmartDefaultAnswer()
        assert answer.get_answer_callback(None, "__len__")() == 0
        assert answer.get_answer_callback(None, "__bool__")() is True
        assert list(answer.get_answer_callback(None, "__iter__")()) == []

    def test_iterator_iterates_over_itself(self) -> None:
        surface = make_surface(make_method("__next__"), make_method("__iter__"))
        instance = type("Generated", (), {"_mock_surface": surface})()
        assert SmartDefaultAnswer().get_answer_callback(instance, "__iter__")() is instance

    def test_next_stops_iteration(self) -> None:
        with pytest.raises(StopIteration):
            SmartDefaultAnswer().get_answer_callback(None, "__next__")()

    def test_anext_stops_async_iteration(self) -> None:
        with pytest.raises(StopAsyncIteration):
            SmartDefaultAnswer().get_answer_callback(None, "__anext__")()


class TestAnswerCollection:
    """Answer cursor."""

    def test_single_answer_repeats(self) -> None:
        collection = AnswerCollection(StaticAnswer(1))
        assert [collection.get_answer_callback(None, "run")() for _ in range(3)] == [1, 1, 1]

    def test_sequence_then_last_repeats(self) -> None:
        collection = AnswerCollection(StaticAnswer(1))
        collection.add_answer(StaticAnswer(2))
        collection.add_answer(StaticAnswer(3))
        results = [collection.get_answer_callback(None, "run")() for _ in range(5)]
        assert results == [1, 2, 3, 3, 3]

    def test_raising_answer_advances(self) -> None:
        collection = AnswerCollection(ExceptionAnswer(ValueError))
        collection.add_answer(StaticAnswer("ok"))
        with pytest.raises(ValueError):
            collection.get_answer_callback(None, "run")()
        assert collection.get_answer_callback(None, "run")() == "ok"

    def test_process_answer_goes_to_current(self) -> None:
        seen: list[object] = []

        class Recording(StaticAnswer):
            __slots__ = ()

            def process_answer(self, result: object) -> None:
                seen.append(result)

        collection = AnswerCollection(Recording("a"))
        result = collection.get_answer_callback(None, "run")()
        collection.process_answer(result)
        assert seen == ["a"]

    def test_len_and_answers(self) -> None:
        collection = AnswerCollection(NoAnswer())
        collection.add_answer(NoAnswer())
        assert len(collection) == 2
        assert len(collection.answers) == 2
