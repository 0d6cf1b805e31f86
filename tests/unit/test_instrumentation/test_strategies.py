"""
Unit tests for component classification and wrapping strategies.
"""

from unittest.mock import Mock

import pytest

from propguard.host import Component, is_stateful
from propguard.instrumentation import (
    StatefulWrapStrategy,
    StatelessWrapStrategy,
    classify,
    get_strategy,
)
from propguard.models import ComponentKind


@pytest.mark.unit
class TestClassify:
    """Test cases for picking a strategy."""

    def test_stateful_class(self, test_utils):
        assert classify(test_utils.make_stateful("Panel")) is ComponentKind.STATEFUL

    def test_function_is_stateless(self, test_utils):
        assert classify(test_utils.make_stateless("Card")) is ComponentKind.STATELESS

    def test_class_without_render_is_stateless(self):
        class Factory:
            def __init__(self, props):
                self.props = props
        assert classify(Factory) is ComponentKind.STATELESS

    @pytest.mark.parametrize("value", ["div", None, 3])
    def test_non_callables_unsupported(self, value):
        assert classify(value) is ComponentKind.UNSUPPORTED

    def test_unsupported_has_no_strategy(self):
        with pytest.raises(KeyError):
            get_strategy(ComponentKind.UNSUPPORTED)


@pytest.mark.unit
class TestStatelessWrapStrategy:
    """Test cases for the delegating wrapper."""

    def test_checks_then_delegates(self):
        calls = []

        def Card(props):
            calls.append(("render", props))
            return "rendered"
        Card.prop_types = {"title": str}

        check = Mock(side_effect=lambda component, props: calls.append(("check", props)))
        wrapper = StatelessWrapStrategy().wrap(Card, check)

        assert wrapper({"titel": 1}) == "rendered"
        check.assert_called_once_with(Card, {"titel": 1})
        assert [name for name, _ in calls] == ["check", "render"]

    def test_wrapper_metadata(self, test_utils):
        Card = test_utils.make_stateless("Card", {"title": str})

        wrapper = StatelessWrapStrategy().wrap(Card, Mock())

        assert wrapper.display_name == "PropGuard(Card)"
        assert wrapper.__wrapped__ is Card
        assert wrapper.__name__ == "Card"
        assert wrapper.prop_types == {"title": str}

    def test_class_without_render_is_wrapped_cleanly(self):
        class Factory:
            def __init__(self, props):
                self.props = props

        wrapper = StatelessWrapStrategy().wrap(Factory, Mock())

        assert isinstance(wrapper({"a": 1}), Factory)
        assert "__init__" not in wrapper.__dict__


@pytest.mark.unit
class TestStatefulWrapStrategy:
    """Test cases for lifecycle hook chaining."""

    def test_hooks_run_once_with_return_values(self):
        did_mount = Mock(return_value="mounted")
        did_update = Mock(return_value="updated")

        class Panel(Component):
            prop_types = {"open": bool}

            def component_did_mount(self):
                return did_mount()

            def component_did_update(self, prev_props):
                return did_update(prev_props)

        check = Mock()
        assert StatefulWrapStrategy().wrap(Panel, check) is Panel

        panel = Panel({"opn": True})
        assert panel.component_did_mount() == "mounted"
        assert panel.component_did_update({"x": 1}) == "updated"

        did_mount.assert_called_once_with()
        did_update.assert_called_once_with({"x": 1})
        assert check.call_count == 2
        check.assert_called_with(Panel, {"opn": True})

    def test_missing_hooks_are_tolerated(self):
        class Bare:
            def render(self):
                return None

        check = Mock()
        StatefulWrapStrategy().wrap(Bare, check)

        bare = Bare()
        bare.props = {"a": 1}
        assert bare.component_did_mount() is None
        assert bare.component_did_update() is None
        assert check.call_count == 2

    def test_hook_errors_propagate_after_check(self):
        class Failing(Component):
            def component_did_mount(self):
                raise ValueError("host failure")

        check = Mock()
        StatefulWrapStrategy().wrap(Failing, check)

        with pytest.raises(ValueError):
            Failing({}).component_did_mount()
        check.assert_called_once()

    def test_patched_subclass_checked_once(self, test_utils):
        Parent = test_utils.make_stateful("Parent", {"a": bool})
        Child = test_utils.make_stateful("Child", {"b": bool}, base=Parent)
        parent_check, child_check = Mock(), Mock()

        StatefulWrapStrategy().wrap(Parent, parent_check)
        StatefulWrapStrategy().wrap(Child, child_check)
        Child({"c": 1}).component_did_mount()

        parent_check.assert_not_called()
        child_check.assert_called_once_with(Child, {"c": 1})


@pytest.mark.unit
def test_classify_agrees_with_host(test_utils):
    class Factory:
        def __init__(self, props):
            self.props = props

    for component in (test_utils.make_stateful("Panel"), test_utils.make_stateless("Card"), Factory):
        assert (classify(component) is ComponentKind.STATEFUL) == is_stateful(component)
