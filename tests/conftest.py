"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from custom_rule import DictTranslator, ValidatorFactory, default_callbacks
from custom_rule.config import get_config
from tests.rules import RecordingValidator

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def reset_state() -> Iterator[None]:
    """Reset process-wide registries between tests."""
    default_callbacks.clear()
    ValidatorFactory.reset()
    get_config.cache_clear()
    RecordingValidator.instances.clear()
    yield
    default_callbacks.clear()
    ValidatorFactory.reset()
    get_config.cache_clear()


@pytest.fixture
def translator() -> DictTranslator:
    return DictTranslator(
        {
            "en": {
                "not_even": "Value must be even.",
                "validation": {
                    "required": "The :attribute field is required.",
                    "type": "The :attribute field must be a valid :type.",
                    "rule": "The :attribute field is invalid.",
                    "too_short": "The :attribute is too short.",
                },
            }
        }
    )


@pytest.fixture
def session(translator: DictTranslator) -> RecordingValidator:
    """A validator session as the engine would inject it."""
    return RecordingValidator(
        translator,
        {"x": 3},
        {},
        {"x.required": "X is needed."},
        {"x": "the x value"},
    )


@pytest.fixture
def recording_engine(translator: DictTranslator) -> type[RecordingValidator]:
    """Register RecordingValidator as the default engine."""
    ValidatorFactory.register("default", RecordingValidator)  # type: ignore[arg-type]
    ValidatorFactory.set_translator(translator)
    return RecordingValidator
