"""CatalogSearch Import Parameters - Form Configuration for Importers.

Declarative records describing how importer parameters are shown in a
form, and a builder that enumerates them grouped and ordered.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

# Smaller order = shown earlier. Unordered entries sort last.
LOWEST_PRECEDENCE = 2**31 - 1
HIGHEST_PRECEDENCE = -(2**31)

DEFAULT_GROUP_NAME = "Miscellaneous"


def _check_order(order: Any) -> None:
    if isinstance(order, bool) or not isinstance(order, int):
        raise TypeError(f"Order must be an int, got {type(order).__name__}")


@dataclass(frozen=True)
class ImportGroupConfig:
    """Group a parameter is shown under.

    Attributes:
        name: Group heading
        order: Group position on the page
    """

    name: str = DEFAULT_GROUP_NAME
    order: int = LOWEST_PRECEDENCE

    def __post_init__(self):
        _check_order(self.order)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "order": self.order}


@dataclass(frozen=True)
class ImportParameterConfig:
    """Display configuration for one importer parameter.

    A plain string description is stored as a single line.

    Attributes:
        description: Description lines
        display_name: Label shown in the form
        group: Group the parameter belongs to
        optional: Whether a value may be omitted
        order: Position within the group
        password: Whether the value is sensitive and should be masked
        description_join_delimiter: Separator used to join description lines
        hidden: Whether to leave the parameter out of enumeration
    """

    description: Union[Tuple[str, ...], str] = ()
    display_name: str = ""
    group: ImportGroupConfig = field(default_factory=ImportGroupConfig)
    optional: bool = False
    order: int = LOWEST_PRECEDENCE
    password: bool = False
    description_join_delimiter: str = "\n"
    hidden: bool = False

    def __post_init__(self):
        _check_order(self.order)
        if not isinstance(self.description_join_delimiter, str):
            raise TypeError("description_join_delimiter must be a str")

        if isinstance(self.description, str):
            lines: Tuple[str, ...] = (self.description,) if self.description else ()
        else:
            lines = tuple(self.description)
        object.__setattr__(self, "description", lines)

    @property
    def description_text(self) -> str:
        """Description lines joined with the configured delimiter."""
        return self.description_join_delimiter.join(self.description)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "description": self.description_text,
            "display_name": self.display_name,
            "group": self.group.to_dict(),
            "optional": self.optional,
            "order": self.order,
            "password": self.password,
            "hidden": self.hidden,
        }


@dataclass(frozen=True)
class ImportParameter:
    """A registered importer parameter."""

    name: str
    config: ImportParameterConfig = field(default_factory=ImportParameterConfig)
    value_type: type = str

    @property
    def display_name(self) -> str:
        """Configured label, falling back to the parameter name."""
        return self.config.display_name or self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = self.config.to_dict()
        data["name"] = self.name
        data["display_name"] = self.display_name
        data["type"] = self.value_type.__name__
        return data


@dataclass(frozen=True)
class ImportParameterGroup:
    """Parameters sharing a group, in display order."""

    name: str
    order: int
    parameters: Tuple[ImportParameter, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "order": self.order,
            "parameters": [p.to_dict() for p in self.parameters],
        }


def _parameter_key(parameter: ImportParameter) -> Tuple[int, str]:
    return (parameter.config.order, parameter.name)


class ImportParameterSet:
    """Builder collecting the parameters an importer accepts.

    Parameters are registered explicitly with their configuration:

        params = (
            ImportParameterSet()
            .add("folderPath", ImportParameterConfig(display_name="Folder", order=0))
            .add("apiKey", ImportParameterConfig(password=True))
        )
    """

    def __init__(self, parameters: Optional[Sequence[ImportParameter]] = None):
        self._parameters: Dict[str, ImportParameter] = {}
        for parameter in parameters or ():
            self._register(parameter)

    def add(
        self,
        name: str,
        config: Optional[ImportParameterConfig] = None,
        value_type: type = str,
    ) -> "ImportParameterSet":
        """Register a parameter.

        Args:
            name: Parameter name
            config: Display configuration, defaults if omitted
            value_type: Type of the parameter value

        Returns:
            This set, for chaining
        """
        self._register(ImportParameter(
            name=name,
            config=config or ImportParameterConfig(),
            value_type=value_type,
        ))
        return self

    def _register(self, parameter: ImportParameter) -> None:
        if not parameter.name:
            raise ValueError("Parameter name must not be empty")
        if parameter.name in self._parameters:
            raise ValueError(f"Parameter already registered: {parameter.name}")
        logger.debug(f"Registering import parameter: {parameter.name}")
        self._parameters[parameter.name] = parameter

    def get(self, name: str) -> Optional[ImportParameter]:
        """Get parameter by name."""
        return self._parameters.get(name)

    def parameters(self, include_hidden: bool = False) -> List[ImportParameter]:
        """List parameters in display order."""
        selected = [
            p for p in self._parameters.values()
            if include_hidden or not p.config.hidden
        ]
        return sorted(selected, key=_parameter_key)

    def groups(self, include_hidden: bool = False) -> List[ImportParameterGroup]:
        """List groups in display order, each with its parameters ordered.

        Groups are keyed by name; the first order seen for a name wins.
        """
        members: Dict[str, List[ImportParameter]] = {}
        orders: Dict[str, int] = {}

        for parameter in self.parameters(include_hidden=include_hidden):
            group = parameter.config.group
            orders.setdefault(group.name, group.order)
            members.setdefault(group.name, []).append(parameter)

        return [
            ImportParameterGroup(name=name, order=orders[name], parameters=tuple(members[name]))
            for name in sorted(members, key=lambda n: (orders[n], n))
        ]

    def to_dict(self, include_hidden: bool = False) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"groups": [g.to_dict() for g in self.groups(include_hidden=include_hidden)]}

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[ImportParameter]:
        return iter(self.parameters())

    def __len__(self) -> int:
        return len(self._parameters)


__all__ = [
    "DEFAULT_GROUP_NAME",
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "ImportGroupConfig",
    "ImportParameter",
    "ImportParameterConfig",
    "ImportParameterGroup",
    "ImportParameterSet",
]
