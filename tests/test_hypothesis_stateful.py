"""Stateful property-based tests using Hypothesis.

Drives a rule instance and its class-level default registration through
arbitrary sequences of operations and checks the observable state after
every step.
"""

from __future__ import annotations

from typing import Any

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from custom_rule import BaseCustomRule, DictTranslator, InvalidDefaultCallbackError, default_callbacks
from tests.rules import RecordingValidator

LINES = {"en": {"a": "Message A", "b": "Message B"}}


class StatefulRule(BaseCustomRule):
    def __init__(self, label: str = "bare") -> None:
        super().__init__()
        self.label = label

    def passes(self, attribute: str, value: Any) -> bool:
        return self._fail(value)


class RuleLifecycleStateMachine(RuleBasedStateMachine):
    """State machine for message accumulation and default registration."""

    def __init__(self) -> None:
        super().__init__()
        default_callbacks.forget(StatefulRule)
        session = RecordingValidator(DictTranslator(LINES), {}, {})
        self.rule = StatefulRule().set_validator(session)
        self.expected_messages: list[str] = []
        self.expected_label = "bare"

    @rule(keys=st.lists(st.sampled_from(["a", "b", "c"]), min_size=1, max_size=3))
    def fail_with(self, keys: list[str]) -> None:
        assert self.rule.passes("field", keys) is False
        self.expected_messages.extend(LINES["en"].get(key, key) for key in keys)

    @rule()
    def reset(self) -> None:
        self.rule._reset_messages()
        self.expected_messages = []

    @rule(label=st.text(min_size=1, max_size=5))
    def register_factory(self, label: str) -> None:
        StatefulRule.defaults(lambda: StatefulRule(label))
        self.expected_label = label

    @rule(label=st.text(min_size=1, max_size=5))
    def register_instance(self, label: str) -> None:
        StatefulRule.defaults(StatefulRule(label))
        self.expected_label = label

    @rule(value=st.one_of(st.integers(), st.text()))
    def register_invalid(self, value: Any) -> None:
        try:
            StatefulRule.defaults(value)
        except InvalidDefaultCallbackError:
            return
        raise AssertionError("invalid callback was accepted")

    @rule()
    def read_and_reset(self) -> None:
        previous = StatefulRule.defaults()
        assert previous.label == self.expected_label
        self.expected_label = "bare"

    @invariant()
    def messages_match(self) -> None:
        assert self.rule.message() == self.expected_messages

    @invariant()
    def default_matches(self) -> None:
        assert StatefulRule.default().label == self.expected_label

    def teardown(self) -> None:
        default_callbacks.forget(StatefulRule)


TestRuleLifecycle = RuleLifecycleStateMachine.TestCase
TestRuleLifecycle.settings = settings(
    max_examples=50, stateful_step_count=20, suppress_health_check=[HealthCheck.too_slow]
)
