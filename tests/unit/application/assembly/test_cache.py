"""Tests for application/assembly/cache.py."""

import re
import threading
import time

from mockwright.application.assembly.cache import MockClassCache, generate_class_name
from mockwright.infrastructure.reflection.extractor import TypeDescriptorExtractor
from tests.fixtures_targets import Calculator, Countable, Greeter

_extractor = TypeDescriptorExtractor()


def _descriptors(*targets: type) -> tuple:
    return tuple(_extractor.extract(t) for t in targets)


class TestGenerateClassName:
    """Unique, readable class names."""

    def test_single_target(self) -> None:
        name = generate_class_name(_descriptors(Calculator))
        assert re.fullmatch(r"Calculator_Mock[0-9a-f]{14}", name)

    def test_several_targets(self) -> None:
        name = generate_class_name(_descriptors(Calculator, Countable))
        assert re.fullmatch(r"Calculator_Mock[0-9a-f]{14}__Countable_Mock[0-9a-f]{14}", name)

    def test_unique(self) -> None:
        descriptors = _descriptors(Calculator)
        assert generate_class_name(descriptors) != generate_class_name(descriptors)


class TestMockClassCache:
    """One class per target set."""

    def test_miss_then_hit(self) -> None:
        cache = MockClassCache()
        built: list[type] = []

        def factory() -> type:
            cls = type("Built", (), {})
            built.append(cls)
            return cls

        first = cache.get_or_create(_descriptors(Calculator), factory)
        second = cache.get_or_create(_descriptors(Calculator), factory)
        assert first is second
        assert len(built) == 1

    def test_order_independent(self) -> None:
        cache = MockClassCache()
        cls = cache.get_or_create(_descriptors(Countable, Greeter), lambda: type("A", (), {}))
        assert cache.get_or_create(_descriptors(Greeter, Countable), lambda: type("B", (), {})) is cls

    def test_contains_and_clear(self) -> None:
        cache = MockClassCache()
        targets = _descriptors(Calculator)
        assert targets not in cache
        cache.get_or_create(targets, lambda: type("A", (), {}))
        assert targets in cache
        assert len(cache) == 1
        cache.clear()
        assert len(cache) == 0

    def test_same_qualified_name_different_classes(self) -> None:
        def make() -> type:
            class Local:
                def ping(self) -> int:
                    return 1

            return Local

        cache = MockClassCache()
        first = cache.get_or_create(_descriptors(make()), lambda: type("A", (), {}))
        second = cache.get_or_create(_descriptors(make()), lambda: type("B", (), {}))
        assert first is not second


class TestConcurrentAssembly:
    """Threads racing on one target set."""

    def test_one_class_per_key(self) -> None:
        """Concurrent misses assemble once and share the class."""
        cache = MockClassCache()
        targets = _descriptors(Calculator, Countable)
        thread_count = 8
        barrier = threading.Barrier(thread_count)
        built: list[type] = []
        results: list[type] = []
        errors: list[Exception] = []
        results_lock = threading.Lock()

        def factory() -> type:
            # widen the window a racing thread would need
            time.sleep(0.01)
            cls = type("Built", (), {})
            built.append(cls)
            return cls

        def worker() -> None:
            try:
                barrier.wait()
                cls = cache.get_or_create(targets, factory)
                with results_lock:
                    results.append(cls)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors, f"Errors: {errors}"
        assert len(built) == 1
        assert len(results) == thread_count
        assert all(cls is built[0] for cls in results)
        assert len(cache) == 1
