"""
Element and component building blocks of the host.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass
class Element:
    """A request to instantiate ``component`` with ``props``."""

    component: Any
    props: Dict[str, Any] = field(default_factory=dict)
    key: Optional[Any] = None


class Component:
    """
    Base class for stateful components.

    Subclasses implement render() and may override the lifecycle hooks,
    which the host calls after the first render and after each update.
    """

    # Declared prop name -> descriptor. Only the keys are used by the checker.
    prop_types: Mapping[str, Any] = MappingProxyType({})
    display_name: Optional[str] = None

    def __init__(self, props: Optional[Mapping[str, Any]] = None):
        self.props: Dict[str, Any] = dict(props or {})

    def render(self) -> Any:
        return None

    def component_did_mount(self) -> None:
        pass

    def component_did_update(self, prev_props: Dict[str, Any]) -> None:
        pass


def is_stateful(component: Any) -> bool:
    """True for classes exposing a callable ``render``."""
    return isinstance(component, type) and callable(getattr(component, "render", None))
