"""Rendering of the controller arguments page."""

from __future__ import annotations

from .readme import DEV_NOTE, write_value
from .types import Conf, ConfArg

HEADER_CONTROLLER = """
# ![HAProxy](../assets/images/haproxy-weblogo-210x49.png "HAProxy")

## HAProxy kubernetes ingress controller

This is autogenerated from [doc.yaml](doc.yaml). Description can be found in [generator readme](gen/README.md)

Image can be run with arguments:

| Argument | Default |
| - |:-:|
"""

BACK_TO_TOP = (
    "<p align='right'><a href='#haproxy-kubernetes-ingress-controller'>:arrow_up_small: "
    "back to top</a></p>\n\n***\n\n"
)


def _row(arg: ConfArg, conf: Conf) -> str:
    dev = "" if arg.version_min.lower_or_equal(conf.active_version) else " :construction:(dev)"
    link = arg.argument.replace(".", "")
    default = f"`{arg.default}`" if arg.default else ""
    return f"| [`{arg.argument}`](#{link}){dev} | {default} |\n"


def _section(arg: ConfArg, conf: Conf) -> str:
    parts = [f"### `{arg.argument}`\n\n"]
    if not arg.version_min.lower_or_equal(conf.active_version):
        parts.append(DEV_NOTE)
    parts.append(f"  {arg.description}\n")
    parts.extend(f"\n  :information_source: {tip}\n" for tip in arg.tip)
    if arg.external and arg.argument != "--external":
        parts.append("\n:warning: this is only available in external mode\n\n")
    parts.append("\nPossible values:\n\n")
    parts.extend(f"- {write_value(value, arg.default)}\n" for value in arg.values)
    parts.append("\n")
    parts.append(f"Example:\n\n```yaml\n{arg.example}\n```\n\n")
    parts.append(BACK_TO_TOP)
    return "".join(parts)


def generate_controller_readme(conf: Conf) -> str:
    """The controller command-line arguments page as markdown."""
    shown = [arg for arg in conf.arguments if arg.version_max.lower_or_equal(conf.active_version)]
    parts = [HEADER_CONTROLLER]
    parts.extend(_row(arg, conf) for arg in shown)
    parts.append("\n\n")
    parts.extend(_section(arg, conf) for arg in shown)
    return "".join(parts)