"""The documentation description file and its entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..log import get_logger
from .version import Version

DOC_PATH = "../doc.yaml"

_TRUE_WORDS = frozenset({"true", "yes", "on", "y"})
_FALSE_WORDS = frozenset({"false", "no", "off", "n"})


class ConfError(ValueError):
    """Raised when the description file cannot be decoded."""


@dataclass
class ConfArg:
    """A command-line argument of the controller image."""

    argument: str = ""
    default: str = ""
    description: str = ""
    tip: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)
    version_min: Version = Version()
    version_max: Version = Version()
    external: bool = False
    example: str = ""
    helm: str = ""


@dataclass
class ConfItem:
    """An annotation that can be set on a ConfigMap, Ingress or Service."""

    title: str = ""
    type: str = ""
    group: str = ""
    dependencies: str = ""
    default: str = ""
    description: list[str] = field(default_factory=list)
    tip: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)
    applies_to: list[str] = field(default_factory=list)
    version_min: Version = Version()
    version_max: Version = Version()
    example: list[str] = field(default_factory=list)
    example_configmap: str = ""
    example_ingress: str = ""
    example_service: str = ""


@dataclass
class ConfGroup:
    """Extra text shown around a group of annotations."""

    group: str = ""
    description: list[str] = field(default_factory=list)
    header: str = ""
    footer: str = ""


def _string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    raise ConfError(f"{key}: expected a string, got {type(value).__name__}")


def _strings(value: Any, key: str) -> list[str]:
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return [_string(item, key) for item in value]
    raise ConfError(f"{key}: expected a list of strings")


def _bool(value: Any, key: str) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    raise ConfError(f"{key}: expected a boolean, got {value!r}")


def _version(value: Any, key: str) -> Version:
    if value is None or value == "":
        return Version()
    if isinstance(value, Version):
        return value
    try:
        return Version.parse(_string(value, key))
    except ValueError as exc:
        raise ConfError(f"{key}: {exc}") from exc


def _mapping(value: Any, key: str) -> Mapping[str, Any]:
    if value is None or value == "":
        return {}
    if isinstance(value, Mapping):
        return value
    raise ConfError(f"{key}: expected a mapping")


def _list(value: Any, key: str) -> list[Any]:
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    raise ConfError(f"{key}: expected a list")


def _arg(data: Any) -> ConfArg:
    data = _mapping(data, "image_arguments")
    return ConfArg(
        argument=_string(data.get("argument"), "argument"),
        default=_string(data.get("default"), "default"),
        description=_string(data.get("description"), "description"),
        tip=_strings(data.get("tip"), "tip"),
        values=_strings(data.get("values"), "values"),
        version_min=_version(data.get("version_min"), "version_min"),
        version_max=_version(data.get("version_max"), "version_max"),
        external=_bool(data.get("external"), "external"),
        example=_string(data.get("example"), "example"),
        helm=_string(data.get("helm"), "helm"),
    )


def _item(data: Any) -> ConfItem:
    data = _mapping(data, "annotations")
    return ConfItem(
        title=_string(data.get("title"), "title"),
        type=_string(data.get("type"), "type"),
        group=_string(data.get("group"), "group"),
        dependencies=_string(data.get("dependencies"), "dependencies"),
        default=_string(data.get("default"), "default"),
        description=_strings(data.get("description"), "description"),
        tip=_strings(data.get("tip"), "tip"),
        values=_strings(data.get("values"), "values"),
        applies_to=_strings(data.get("applies_to"), "applies_to"),
        version_min=_version(data.get("version_min"), "version_min"),
        version_max=_version(data.get("version_max"), "version_max"),
        example=_strings(data.get("example"), "example"),
        example_configmap=_string(data.get("example_configmap"), "example_configmap"),
        example_ingress=_string(data.get("example_ingress"), "example_ingress"),
        example_service=_string(data.get("example_service"), "example_service"),
    )


def _group(data: Any) -> ConfGroup:
    data = _mapping(data, "groups")
    return ConfGroup(
        group=_string(data.get("group"), "group"),
        description=_strings(data.get("description"), "description"),
        header=_string(data.get("header"), "header"),
        footer=_string(data.get("footer"), "footer"),
    )


@dataclass
class Conf:
    """The whole description: active version, image arguments, groups and annotations."""

    active_version: Version = Version()
    arguments: list[ConfArg] = field(default_factory=list)
    groups: dict[str, ConfGroup] = field(default_factory=dict)
    items: list[ConfItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Conf":
        """Build from a decoded document; unknown keys are ignored."""
        data = _mapping(data, "document")
        groups = _mapping(data.get("groups"), "groups")
        return cls(
            active_version=_version(data.get("active_version"), "active_version"),
            arguments=[_arg(entry) for entry in _list(data.get("image_arguments"), "image_arguments")],
            groups={_string(name, "groups"): _group(entry) for name, entry in groups.items()},
            items=[_item(entry) for entry in _list(data.get("annotations"), "annotations")],
        )


def load_conf(path: str | Path = DOC_PATH) -> Conf:
    """Read the description file; an unreadable file is logged and treated as empty."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        get_logger().printf("yamlFile.Get err   #%s ", exc)
        text = ""
    try:
        # Scalars stay strings so that versions such as 1.10 keep their digits.
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfError(f"Unmarshal: {exc}") from exc
    if data is None or data == "":
        return Conf()
    return Conf.from_dict(data)


def applies_marker(values: list[str], key: str) -> str:
    """The table marker telling whether ``key`` is among ``values``."""
    return ":large_blue_circle:" if key in values else ":white_circle:"