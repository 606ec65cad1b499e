"""Tests for validation steps and the predicate registry."""

import pytest
from dataknobs_common import NotFoundError, OperationError

from dataknobs_fieldchain import (
    CrossItemCheck,
    PredicateRegistry,
    ValidationStep,
    integer,
    predicates,
    string,
)


class TestValidationStep:
    """Test the step types."""

    def test_evaluate(self):
        """Test passing and failing evaluation."""
        step = ValidationStep(lambda v, k, p: v > 0, "Must be positive")
        assert step.evaluate(1, "n", {}) is None
        assert step.evaluate(0, "n", {}) == ["Must be positive"]

    def test_cross_item_check(self):
        """Test that empty check results mean success."""
        check = CrossItemCheck(lambda items: {} if len(items) < 3 else {2: ["Too many"]})
        assert check.evaluate([1, 2], "", {}) is None
        assert check.evaluate([1, 2, 3], "", {}) == {2: ["Too many"]}


class TestPredicateRegistry:
    """Test the named predicate registry."""

    @pytest.fixture
    def registry(self):
        """Create a fresh registry."""
        registry = PredicateRegistry("test")
        registry.register_predicate("even", lambda v, k, p: v % 2 == 0, "Value must be even")
        return registry

    def test_step_from_registry(self, registry):
        """Test building a step with the registered message."""
        step = registry.step("even")
        assert step.name == "even"
        assert step.evaluate(4, "", {}) is None
        assert step.evaluate(3, "", {}) == ["Value must be even"]

    def test_message_override(self, registry):
        """Test overriding the registered message."""
        assert registry.step("even", "Odd!").evaluate(3, "", {}) == ["Odd!"]

    def test_duplicate_name(self, registry):
        """Test that duplicates are rejected unless overwriting is allowed."""
        with pytest.raises(OperationError):
            registry.register_predicate("even", lambda v, k, p: True)
        registry.register_predicate("even", lambda v, k, p: True, allow_overwrite=True)
        assert registry.step("even").evaluate(3, "", {}) is None

    def test_unknown_name(self, registry):
        """Test lookup of an unregistered name."""
        with pytest.raises(NotFoundError):
            registry.step("odd")

    def test_non_callable(self, registry):
        """Test that only callables can be registered."""
        with pytest.raises(TypeError):
            registry.register_predicate("bad", "not callable")

    def test_default_message(self, registry):
        """Test the message used when none is registered."""
        registry.register_predicate("never", lambda v, k, p: False)
        assert registry.step("never").evaluate(1, "", {}) == ["Custom validation failed"]


class TestDefaultRegistry:
    """Test the shared registry used by satisfies_named()."""

    @pytest.fixture
    def slug_predicate(self):
        """Register a predicate for the duration of a test."""
        predicates.register_predicate(
            "test_slug",
            lambda value, key, payload: value.replace("-", "").isalnum(),
            "Value must be a slug",
        )
        yield "test_slug"
        predicates.unregister("test_slug")

    def test_formats_registered(self):
        """Test that the string formats are available by name."""
        for name in ("email", "url", "uuid", "ip", "ipv4", "ipv6", "hex", "base64",
                     "date", "datetime", "time", "hostname", "domain"):
            assert predicates.has(name)

    def test_satisfies_named(self, slug_predicate):
        """Test queueing a registered predicate on a validator."""
        validator = string().satisfies_named(slug_predicate)
        assert validator.validate("my-post") == "my-post"
        assert validator.try_validate("my post").errors == ["Value must be a slug"]

    def test_format_on_non_string(self):
        """Test that string formats reject non-strings on other kinds."""
        assert integer().satisfies_named("email").try_validate(5).errors == [
            "Value must be a valid email address"
        ]
