"""Host action name to entry point mapping.

Hosts name actions in camelCase (getDatePattern); entry points are Python
methods in snake_case (get_date_pattern). The registry holds the mapping.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from globalization.diagnostics import ErrorTemplate, UnsupportedOperationError

from .result import Callback

__all__ = ["ActionRegistry", "ActionSignature", "EntryPoint"]

logger = logging.getLogger(__name__)

type EntryPoint = Callable[[Callback, Callback, Sequence[str] | None, Any], None]


@dataclass(frozen=True, slots=True)
class ActionSignature:
    """Action metadata.

    Attributes:
        python_name: Method name in Python (snake_case)
        action_name: Action name used by the host (camelCase)
        callable: The bound entry point
    """

    python_name: str
    action_name: str
    callable: EntryPoint


class ActionRegistry:
    """Maps host action names to entry points.

    Supports dict-like introspection:
        - __iter__: Iterate over action names
        - __len__: Count registered actions
        - __contains__: Check if an action exists (supports 'in' operator)

    Example:
        >>> registry = ActionRegistry()
        >>> def get_locale_name(success, failure, args=None, env=None): ...
        >>> registry.register(get_locale_name)
        >>> "getLocaleName" in registry
        True
    """

    __slots__ = ("_actions",)

    def __init__(self) -> None:
        self._actions: dict[str, ActionSignature] = {}

    def register(self, func: EntryPoint, *, action_name: str | None = None) -> None:
        """Register an entry point.

        Args:
            func: Callable taking (success, failure, args, env)
            action_name: Host name (default: camelCase of func.__name__)
        """
        python_name = getattr(func, "__name__", repr(func))
        name = action_name or self._to_camel_case(python_name)
        self._actions[name] = ActionSignature(
            python_name=python_name,
            action_name=name,
            callable=func,
        )

    def call(
        self,
        action_name: str,
        success: Callback,
        failure: Callback,
        args: Sequence[str] | None = None,
        env: Any = None,
    ) -> None:
        """Invoke the entry point registered under action_name.

        Raises:
            UnsupportedOperationError: If no entry point has that name
        """
        sig = self._actions.get(action_name)
        if sig is None:
            raise UnsupportedOperationError(ErrorTemplate.unknown_action(action_name))
        logger.debug("Calling %s for action %s", sig.python_name, action_name)
        sig.callable(success, failure, args, env)

    def list_actions(self) -> list[str]:
        """Registered host action names, in registration order."""
        return list(self._actions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, action_name: object) -> bool:
        return action_name in self._actions

    def __repr__(self) -> str:
        return f"ActionRegistry(actions={len(self._actions)})"

    @staticmethod
    def _to_camel_case(snake_case: str) -> str:
        """Convert Python snake_case to host camelCase.

        Examples:
            >>> ActionRegistry._to_camel_case("get_date_pattern")
            'getDatePattern'
            >>> ActionRegistry._to_camel_case("is_day_light_savings_time")
            'isDayLightSavingsTime'
        """
        components = snake_case.split("_")
        return components[0] + "".join(comp.capitalize() for comp in components[1:])
