"""Test type predicates and validating casts."""

import pytest

from shapeguard import (
    FrozenArray, FrozenRecord, TypeValidationError,
    a_number, a_string, an_array, an_object, an_unknown, as_, is_,
)


def a_user():
    return an_object({"name": a_string, "tags": an_array(a_string)})


def a_named():
    return an_object({"name": a_string}, an_unknown)


@pytest.mark.unit
@pytest.mark.assertions
class TestIs:
    """Test type predicates."""

    def test_valid_value(self):
        """Test valid values are reported as True."""
        assert is_(a_string())("hello") is True

    def test_invalid_value(self):
        """Test invalid values are reported as False."""
        assert is_(a_string())(123) is False

    def test_lazy_factory(self):
        """Test factories are accepted."""
        predicate = is_(lambda: a_number())

        assert predicate(42)
        assert not predicate("hello")

    def test_never_mutates(self):
        """Test checked values are neither frozen nor branded."""
        user = {"name": "Alice", "tags": []}

        assert is_(a_user)(user)
        assert type(user) is dict
        user["name"] = "Bob"
        assert is_(a_user)(user)

    def test_rechecks_every_call(self):
        """Test the same value is checked again on each call."""
        calls = []

        def guard(value):
            calls.append(value)
            return ""

        predicate = is_(guard)
        value = {"a": 1}

        predicate(value)
        predicate(value)

        assert len(calls) == 2

    def test_none_guarding(self):
        """Test a guarding is required."""
        with pytest.raises(TypeError):
            is_(None)


@pytest.mark.unit
@pytest.mark.assertions
class TestAsValidation:
    """Test validating casts on valid and invalid input."""

    def test_primitive_returned_unchanged(self):
        """Test valid primitives come back as they are."""
        assert as_(a_string())("hello") == "hello"
        assert as_(lambda: a_number())(42) == 42

    def test_invalid_value_raises(self):
        """Test invalid values raise with the diagnostic as message."""
        with pytest.raises(TypeValidationError) as info:
            as_(a_string())(123)

        assert str(info.value) == "illegal <number> value, expected <string>"

    def test_error_is_type_error(self):
        """Test cast failures are TypeErrors."""
        with pytest.raises(TypeError):
            as_(a_user)({"name": 1, "tags": []})

    def test_nested_diagnostic(self):
        """Test nested paths reach the error message."""
        with pytest.raises(TypeValidationError, match=r"^tags: \[1\]: illegal <number> value"):
            as_(a_user)({"name": "A", "tags": ["x", 2]})

    def test_none_guarding(self):
        """Test a guarding is required."""
        with pytest.raises(TypeError):
            as_(None)


@pytest.mark.unit
@pytest.mark.assertions
class TestAsMemoization:
    """Test freezing and branding of validated values."""

    def test_returns_frozen_record(self):
        """Test records come back deep-frozen."""
        value = {"name": "Alice", "tags": ["admin"]}

        result = as_(a_user)(value)

        assert isinstance(result, FrozenRecord)
        assert result["name"] == "Alice"
        assert isinstance(result["tags"], FrozenArray)
        assert result["tags"] == ("admin",)

    def test_returns_frozen_array(self):
        """Test arrays come back as frozen tuples."""
        result = as_(an_array(a_number))([1, 2])

        assert isinstance(result, FrozenArray)
        assert result == (1, 2)

    def test_second_cast_returns_same_object(self):
        """Test casting a branded value returns it without re-validation."""
        cast = as_(an_object({"name": a_string()}))

        first = cast({"name": "Alice"})
        second = cast(first)

        assert second is first

    def test_branded_value_skips_guard(self):
        """Test the guard is not run again on a branded value."""
        calls = []

        def guard(value):
            calls.append(value)
            return ""

        cast = as_(guard)
        first = cast({"a": 1})
        cast(first)

        assert len(calls) == 1

    def test_brand_is_per_guarding(self):
        """Test casts share branding only through the same guarding."""
        first = as_(a_user)({"name": "A", "tags": []})

        assert as_(a_user)(first) is first
        assert first.guarding is a_user

    def test_other_guarding_copies(self):
        """Test a different guarding never replaces an existing brand."""
        user = as_(a_user)({"name": "A", "tags": []})

        named = as_(a_named)(user)

        assert named is not user
        assert named == user
        assert named.guarding is a_named
        assert user.guarding is a_user
        assert as_(a_named)(named) is named

    def test_record_is_immutable(self):
        """Test mutating a validated record raises and leaves it unchanged."""
        result = as_(a_user)({"name": "Alice", "tags": []})

        with pytest.raises(TypeError):
            result["name"] = "Bob"
        with pytest.raises(TypeError):
            del result["name"]
        with pytest.raises(TypeError):
            result.update(name="Bob")
        with pytest.raises(TypeError):
            result.pop("name")
        with pytest.raises(TypeError):
            result.setdefault("age", 1)
        with pytest.raises(TypeError):
            result.clear()
        with pytest.raises(TypeError):
            result |= {"name": "Bob"}

        assert result["name"] == "Alice"

    def test_brand_is_immutable(self):
        """Test the brand attribute cannot be reassigned."""
        result = as_(a_user)({"name": "Alice", "tags": []})

        with pytest.raises(TypeError):
            result._guarding = a_named

        assert result.guarding is a_user

    def test_input_left_untouched(self):
        """Test the original mutable input is not modified."""
        value = {"name": "Alice", "tags": []}

        as_(a_user)(value)

        assert type(value) is dict
        assert type(value["tags"]) is list

    def test_primitives_revalidated(self):
        """Test primitives are validated on every call."""
        calls = []

        def guard(value):
            calls.append(value)
            return ""

        cast = as_(guard)

        assert cast("hello") == "hello"
        assert cast("hello") == "hello"
        assert len(calls) == 2

    def test_bare_structure_factory(self):
        """Test an uncalled an_array is a guarding of its own."""
        cast = as_(an_array)
        result = cast([1, "x"])

        assert isinstance(result, FrozenArray)
        assert result.guarding is an_array
        assert cast(result) is result

        with pytest.raises(TypeValidationError, match="expected <array>"):
            cast({"a": 1})

    def test_frozen_values_validate_as_plain(self):
        """Test frozen results are still records and arrays to every guard."""
        user = as_(a_user)({"name": "Alice", "tags": ["x"]})

        assert an_object()(user) == ""
        assert an_array(a_string)(user["tags"]) == ""
        assert is_(a_user)(user)
