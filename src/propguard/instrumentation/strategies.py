"""
Wrapping strategies.

A component is classified once, then wrapped by the strategy for its kind:

- STATELESS: callables rendering from props. Replaced by a delegating
  wrapper that checks the props of each call first.
- STATEFUL: classes with a ``render`` method. Patched in place so that the
  check runs before the bodies of ``component_did_mount`` and
  ``component_did_update``.
"""

import functools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional

from ..host.tree import is_stateful
from ..matching.eligibility import get_display_name
from ..models.components import ComponentKind

logger = logging.getLogger(__name__)

# (component, props) -> None; must not raise.
CheckFn = Callable[[Any, Optional[Mapping[str, Any]]], None]

WRAPPER_NAME_FORMAT = "PropGuard({})"

LIFECYCLE_HOOKS = ("component_did_mount", "component_did_update")


def classify(component: Any) -> ComponentKind:
    """Pick the wrapping strategy for a component value."""
    if is_stateful(component):
        return ComponentKind.STATEFUL
    if callable(component):
        return ComponentKind.STATELESS
    return ComponentKind.UNSUPPORTED


class WrapStrategy(ABC):
    """Abstract base class for wrapping one kind of component."""

    kind: ComponentKind

    @abstractmethod
    def wrap(self, component: Any, check: CheckFn) -> Any:
        """
        Instrument ``component`` so ``check`` runs on each instantiation.

        Returns:
            The value the creation entry point should use from now on.
        """


class StatelessWrapStrategy(WrapStrategy):
    """Replace the component with a delegating wrapper."""

    kind = ComponentKind.STATELESS

    def wrap(self, component: Any, check: CheckFn) -> Any:
        def wrapper(props=None, *args, **kwargs):
            check(component, props)
            return component(props, *args, **kwargs)

        # Metadata only; copying a class __dict__ onto a function is not wanted.
        functools.update_wrapper(wrapper, component, updated=())
        wrapper.display_name = WRAPPER_NAME_FORMAT.format(get_display_name(component))
        schema = getattr(component, "prop_types", None)
        if schema is not None:
            wrapper.prop_types = schema
        return wrapper


class StatefulWrapStrategy(WrapStrategy):
    """Chain the check in front of the class's lifecycle hooks."""

    kind = ComponentKind.STATEFUL

    def wrap(self, component: Any, check: CheckFn) -> Any:
        for hook_name in LIFECYCLE_HOOKS:
            original = getattr(component, hook_name, None)
            setattr(component, hook_name, self._chain(component, hook_name, original, check))
        return component

    @staticmethod
    def _chain(cls: type, hook_name: str, original: Optional[Callable], check: CheckFn) -> Callable:
        def hook(self, *args, **kwargs):
            # An inherited patched hook leaves subclasses to their own patch.
            if type(self) is cls:
                check(cls, getattr(self, "props", None))
            if original is None:
                return None
            return original(self, *args, **kwargs)

        if original is not None:
            functools.update_wrapper(hook, original)
        else:
            hook.__name__ = hook_name
        return hook


STRATEGIES: Dict[ComponentKind, WrapStrategy] = {
    ComponentKind.STATELESS: StatelessWrapStrategy(),
    ComponentKind.STATEFUL: StatefulWrapStrategy(),
}


def get_strategy(kind: ComponentKind) -> WrapStrategy:
    """
    Return the strategy for ``kind``.

    Raises:
        KeyError: For ComponentKind.UNSUPPORTED
    """
    return STRATEGIES[kind]
