"""
Prop validation.

Given the declared schema of a component and the props supplied to one
instantiation, report likely typos of declared names and, when enabled,
props the schema does not declare. Diagnostics are emitted to the reporting
channel as they are produced and also returned to the caller.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ..matching.eligibility import get_display_name
from ..matching.patterns import matches_any
from ..matching.similarity import edit_distance
from ..models.components import ComponentDescriptor
from ..models.config import CheckerConfig
from ..models.diagnostics import Diagnostic, DiagnosticKind
from ..reporting import LoggingReporter, Reporter, emit
from ..validation import handle_check_error

logger = logging.getLogger(__name__)

SCHEMA_ATTRIBUTE = "prop_types"


def get_declared_schema(component: Any) -> Mapping[str, Any]:
    """Return the component's ``prop_types`` mapping, or an empty dict."""
    schema = getattr(component, SCHEMA_ATTRIBUTE, None)
    if schema is None:
        return {}
    if not isinstance(schema, Mapping):
        logger.debug(
            f"{get_display_name(component)}.{SCHEMA_ATTRIBUTE} is a "
            f"{type(schema).__name__}, not a mapping; treating as undeclared"
        )
        return {}
    return schema


def describe_component(component: Any) -> ComponentDescriptor:
    """Build a fresh (not yet instrumented) descriptor for ``component``."""
    return ComponentDescriptor(
        display_name=get_display_name(component),
        declared_schema=get_declared_schema(component),
    )


class PropValidator:
    """
    Checks supplied props against a component's declared schema.

    The validator holds no per-call state, so one instance can be shared by
    every wrapped component of an installation.
    """

    def __init__(self, config: CheckerConfig, reporter: Optional[Reporter] = None):
        self.config = config
        self.reporter = reporter if reporter is not None else LoggingReporter()

    def validate(
        self,
        component: Union[ComponentDescriptor, Any],
        supplied_props: Optional[Mapping[str, Any]],
    ) -> List[Diagnostic]:
        """Validate one instantiation.

        For every supplied prop missing from the declared schema:

        1. each declared key within ``max_distance`` edits gives a similarity
           diagnostic (all of them, not just the closest);
        2. if ``warn_undeclared`` is set and the schema is non-empty, a prop
           that matches no whitelist pattern gives an undeclared diagnostic.

        A component without a schema never gets an undeclared diagnostic.

        Args:
            component: A ComponentDescriptor or the component value itself.
            supplied_props: The props of this instantiation.

        Returns:
            The diagnostics, in supplied-prop order then schema order.
        """
        if isinstance(component, ComponentDescriptor):
            display_name = component.display_name
            schema = component.declared_schema or {}
        else:
            display_name = get_display_name(component)
            schema = get_declared_schema(component)

        diagnostics: List[Diagnostic] = []
        for prop in (supplied_props or {}):
            if prop in schema:
                continue

            for declared in schema:
                try:
                    distance = edit_distance(prop, declared)
                except Exception as e:
                    logger.debug(f"Cannot compare {prop!r} with {declared!r}: {e}")
                    continue
                if distance <= self.config.max_distance:
                    diagnostics.append(self._report(Diagnostic(
                        kind=DiagnosticKind.SIMILARITY,
                        component_name=display_name,
                        prop_name=prop,
                        suggestion=declared,
                    )))

            if (
                self.config.warn_undeclared
                and schema
                and not matches_any(prop, self.config.whitelist)
            ):
                diagnostics.append(self._report(Diagnostic(
                    kind=DiagnosticKind.UNDECLARED,
                    component_name=display_name,
                    prop_name=prop,
                )))

        return diagnostics

    def check(self, component: Any, supplied_props: Optional[Mapping[str, Any]]) -> None:
        """Run validate() on behalf of a wrapped component; never raises."""
        try:
            self.validate(component, supplied_props)
        except Exception as e:
            handle_check_error(e, f"for {get_display_name(component)}", logger=logger)

    def _report(self, diagnostic: Diagnostic) -> Diagnostic:
        emit(self.reporter, diagnostic.format())
        return diagnostic
