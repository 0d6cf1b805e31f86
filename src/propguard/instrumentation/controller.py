"""
Instrumentation controller.

Intercepts a host's component creation entry point and wraps each eligible
component at most once. The controller keeps a side table keyed weakly by
the component object itself; components carry no marker and a component
nothing else refers to can still be garbage collected.

Each component definition moves Unpatched -> Patched exactly once. Patches
survive uninstall(): only the interception of new creations stops.
"""

import logging
import threading
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from ..checker.validator import PropValidator, describe_component
from ..config import get_config, normalize_options
from ..host.runtime import Host, default_host
from ..matching.eligibility import get_display_name, should_instrument
from ..models.components import ComponentDescriptor, ComponentKind
from ..models.config import CheckerConfig
from ..reporting import Reporter
from ..validation import ValidationError, handle_check_error
from .strategies import CheckFn, classify, get_strategy

logger = logging.getLogger(__name__)

ConfigLike = Union[CheckerConfig, Mapping[str, Any], None]


@dataclass
class _Record:
    descriptor: ComponentDescriptor
    # Check bound at first wrap, reused if a stateless wrapper is rebuilt.
    check: CheckFn
    # Weak, so the wrapper (which holds the component) never pins the table entry.
    wrapper: Optional[weakref.ref] = None


@dataclass
class InstallHandle:
    """Returned by install(); uninstalls that installation."""

    controller: "InstrumentationController"
    config: CheckerConfig
    generation: int

    @property
    def active(self) -> bool:
        return self.controller.is_installed and self.controller.generation == self.generation

    def uninstall(self) -> None:
        """Uninstall, unless a later install() has superseded this handle."""
        if not self.active:
            logger.debug("Install handle is stale, nothing to uninstall")
            return
        self.controller.uninstall()

    def __enter__(self) -> "InstallHandle":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.uninstall()


def resolve_config(config: ConfigLike) -> CheckerConfig:
    """Turn None, an options mapping or a CheckerConfig into a CheckerConfig."""
    if config is None:
        return get_config()
    if isinstance(config, CheckerConfig):
        return config
    if isinstance(config, Mapping):
        return normalize_options(config)
    raise ValidationError(
        f"config must be a CheckerConfig or a mapping of options, got {type(config).__name__}",
        field_name="config",
        value=config,
    )


class InstrumentationController:
    """
    Owns the interception of one host's creation entry point.

    Only one installation per controller is active at a time. Installing
    again swaps the configuration used for components wrapped from then on;
    the host's real entry point is kept for uninstall().
    """

    def __init__(self, host: Optional[Host] = None, reporter: Optional[Reporter] = None):
        self.host = host if host is not None else default_host
        self.reporter = reporter
        self.config: Optional[CheckerConfig] = None
        self.validator: Optional[PropValidator] = None
        self.generation = 0
        self._original_create: Optional[Callable] = None
        # component -> record, and wrapper -> the same record
        self._records: "weakref.WeakKeyDictionary[Any, _Record]" = weakref.WeakKeyDictionary()
        self._wrappers: "weakref.WeakKeyDictionary[Any, _Record]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    @property
    def is_installed(self) -> bool:
        return self._original_create is not None

    def install(self, config: ConfigLike = None) -> InstallHandle:
        """
        Start intercepting component creation on the host.

        Args:
            config: A CheckerConfig, a mapping of options, or None for the
                process-wide configuration.

        Returns:
            A handle whose uninstall() restores the entry point.

        Raises:
            ValidationError: If the options are invalid.
        """
        checker_config = resolve_config(config)
        self.config = checker_config
        self.validator = PropValidator(checker_config, self.reporter)
        self.generation += 1

        if self._original_create is None:
            self._original_create = self.host.create_element
        else:
            logger.debug("Already installed, replacing the interception")
        self.host.create_element = self._make_interceptor(self._original_create)

        logger.info(
            f"Prop checking installed (max_distance={checker_config.max_distance}, "
            f"warn_undeclared={checker_config.warn_undeclared})"
        )
        return InstallHandle(controller=self, config=checker_config, generation=self.generation)

    def uninstall(self) -> None:
        """Restore the host's entry point. Patched components stay patched."""
        if self._original_create is None:
            return
        self.host.create_element = self._original_create
        self._original_create = None
        self.config = None
        self.validator = None
        logger.info("Prop checking uninstalled")

    def _make_interceptor(self, original: Callable) -> Callable:
        def create_element(component, *args, **kwargs):
            return original(self.instrument(component), *args, **kwargs)

        create_element.__wrapped__ = original
        return create_element

    def instrument(self, component: Any) -> Any:
        """
        Return the value to create in place of ``component``.

        Already instrumented components get their stored wrapped value;
        ineligible components are returned unchanged and not recorded.
        Never raises.
        """
        try:
            with self._lock:
                return self._instrument(component)
        except Exception as e:
            handle_check_error(e, f"instrumenting {get_display_name(component)}", logger=logger)
            return component

    def _instrument(self, component: Any) -> Any:
        kind = classify(component)
        if kind is ComponentKind.UNSUPPORTED:
            return component

        if not _is_trackable(component):
            logger.debug(f"{get_display_name(component)} cannot be weakly referenced, not instrumented")
            return component

        if component in self._wrappers:
            return component
        record = self._records.get(component)
        if record is not None:
            return self._handout(component, record)

        if self.validator is None:
            return component

        descriptor = describe_component(component)
        if not should_instrument(descriptor.display_name, self.config):
            return component

        descriptor.kind = kind
        record = _Record(descriptor=descriptor, check=self.validator.check)
        wrapped = get_strategy(kind).wrap(component, record.check)
        descriptor.mark_instrumented()
        self._records[component] = record
        if wrapped is not component:
            self._remember_wrapper(record, wrapped)

        logger.debug(f"Instrumented {descriptor.display_name} ({kind.value})")
        return wrapped

    def _handout(self, component: Any, record: _Record) -> Any:
        if record.wrapper is None:
            # Patched in place.
            return component
        wrapper = record.wrapper()
        if wrapper is None:
            # The previous wrapper was collected; the descriptor stays as is.
            wrapper = get_strategy(record.descriptor.kind).wrap(component, record.check)
            self._remember_wrapper(record, wrapper)
            logger.debug(f"Rebuilt wrapper for {record.descriptor.display_name}")
        return wrapper

    def _remember_wrapper(self, record: _Record, wrapper: Any) -> None:
        record.wrapper = weakref.ref(wrapper)
        self._wrappers[wrapper] = record

    def _lookup(self, component: Any) -> Optional[_Record]:
        if not _is_trackable(component):
            return None
        return self._records.get(component) or self._wrappers.get(component)

    def is_instrumented(self, component: Any) -> bool:
        record = self._lookup(component)
        return record is not None and record.descriptor.instrumented

    def descriptor_for(self, component: Any) -> Optional[ComponentDescriptor]:
        record = self._lookup(component)
        return record.descriptor if record is not None else None

    @property
    def instrumented_count(self) -> int:
        return len(self._records)


def _is_trackable(component: Any) -> bool:
    try:
        weakref.ref(component)
        hash(component)
    except TypeError:
        return False
    return True


# --- Process-wide installation ---

_CONTROLLER: Optional[InstrumentationController] = None


def get_controller() -> InstrumentationController:
    """Return the controller for the default host, creating it on first use."""
    global _CONTROLLER
    if _CONTROLLER is None:
        _CONTROLLER = InstrumentationController(default_host)
    return _CONTROLLER


def install(config: ConfigLike = None, *, reporter: Optional[Reporter] = None,
            **options: Any) -> InstallHandle:
    """
    Install prop checking on the default host.

    Options may be passed as keywords instead of ``config``:

        install(include=[re.compile("^App")], max_distance=1)

    Raises:
        ValidationError: If both config and keyword options are given, or
            the options are invalid.
    """
    if options:
        if config is not None:
            raise ValidationError("Pass either config or keyword options, not both", field_name="config")
        config = options
    controller = get_controller()
    if reporter is not None:
        controller.reporter = reporter
    return controller.install(config)


def uninstall() -> None:
    """Uninstall prop checking from the default host; no-op if not installed."""
    if _CONTROLLER is not None:
        _CONTROLLER.uninstall()


def reset_controller() -> None:
    """Uninstall and forget every patch record of the default host controller."""
    global _CONTROLLER
    uninstall()
    _CONTROLLER = None
