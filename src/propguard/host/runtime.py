"""
Minimal component host.

The host owns the component creation entry point (``create_element``) and
drives rendering and the mount/update lifecycle. The entry point is a plain
attribute so that instrumentation can read, save and replace it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .tree import Component, Element, is_stateful

logger = logging.getLogger(__name__)


@dataclass
class Mounted:
    """A mounted element and what it rendered."""

    host: "Host"
    element: Element
    instance: Optional[Component] = None
    rendered: List["Mounted"] = field(default_factory=list)

    @property
    def props(self) -> Dict[str, Any]:
        if self.instance is not None:
            return self.instance.props
        return self.element.props

    def set_props(self, **props: Any) -> "Mounted":
        """Merge ``props`` into the current props and re-render."""
        merged = {**self.props, **props}
        self.host.update(self, merged)
        return self


class Host:
    """
    Owner of the creation entry point and the render loop.

    ``create_element`` is looked up on the instance on every call, so
    replacing it affects all later creations made through this host.
    """

    def create_element(self, component: Any, props: Optional[Mapping[str, Any]] = None,
                       *children: Any) -> Element:
        """Build an Element. ``key`` is split out of props; children go to ``props["children"]``."""
        element_props = dict(props or {})
        key = element_props.pop("key", None)
        if children:
            element_props["children"] = children[0] if len(children) == 1 else list(children)
        return Element(component=component, props=element_props, key=key)

    def mount(self, node: Any) -> Optional[Mounted]:
        """Render ``node`` depth-first; stateful hooks run after their subtree."""
        if isinstance(node, (list, tuple)):
            group = Mounted(host=self, element=Element(component=None))
            group.rendered = [m for m in (self.mount(child) for child in node) if m is not None]
            return group
        if not isinstance(node, Element):
            return None

        component = node.component
        mounted = Mounted(host=self, element=node)
        if is_stateful(component):
            instance = component(node.props)
            mounted.instance = instance
            self._attach(mounted, instance.render())
            instance.component_did_mount()
        elif callable(component):
            self._attach(mounted, component(node.props))
        else:
            # Host tag such as "div": only the children are mounted.
            self._attach(mounted, node.props.get("children"))
        return mounted

    def update(self, mounted: Mounted, props: Mapping[str, Any]) -> None:
        """Re-create ``mounted`` through the current entry point and re-render it."""
        element = self.create_element(mounted.element.component, props)
        element.key = mounted.element.key
        mounted.element = element
        component = element.component
        if mounted.instance is not None:
            instance = mounted.instance
            prev_props = instance.props
            instance.props = dict(element.props)
            self._attach(mounted, instance.render())
            instance.component_did_update(prev_props)
        elif callable(component):
            self._attach(mounted, component(element.props))
        else:
            self._attach(mounted, element.props.get("children"))

    def _attach(self, mounted: Mounted, output: Any) -> None:
        child = self.mount(output)
        mounted.rendered = [child] if child is not None else []


default_host = Host()


def create_element(component: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Element:
    """Create an element through the default host's current entry point."""
    return default_host.create_element(component, props, *children)


def mount(node: Any) -> Optional[Mounted]:
    """Mount ``node`` on the default host."""
    return default_host.mount(node)
