"""Rendering of the annotations reference page."""

from __future__ import annotations

from .types import Conf, ConfItem, applies_marker

TITLE = """
# ![HAProxy](../assets/images/haproxy-weblogo-210x49.png "HAProxy")

## HAProxy kubernetes ingress controller """

HEADER = """
Options for starting controller can be found in [controller.md](controller.md)

This is autogenerated from [doc.yaml](doc.yaml). Description can be found in [generator readme](gen/README.md)

### Available annotations

> :information_source: Ingress and service annotations can have `ingress.kubernetes.io`, `haproxy.org` and `haproxy.com` prefixes
>
> Example: haproxy.com/ssl-redirect` and `haproxy.org/ssl-redirect` are same annotation

| Annotation | Type | Default | Dependencies | Config map | Ingress | Service |
| - |:-:|:-:|:-:|:-:|:-:|:-:|
"""

TABLE_FOOTER = """
> :information_source: Annotations have hierarchy: `default` <- `Configmap` <- `Ingress` <- `Service`
>
> Service annotations have highest priority. If they are not defined, controller goes one level up until it finds value.
>
> This is useful if we want, for instance, to change default behaviour, but want to keep default for some service. etc.
>
> In general annotations follow the following rules:
> - global  annotations can only be used in Configmap
> - ingress annotations can be used in Ingress and ConfigMap (to configure all ingress resources in use)
> - service annotations can be used in Service, Ingress (to configure all services used in Ingress) and ConfigMap (to configure all services in use)


### Options

#### Global Options

Global options are set via ConfigMap ([--configmap](controller.md)) annotations.
Depending on the option, it can be in Global or Default HAProxy section.

"""

DOC_FOOTER = r"""
### Secrets

#### tls-secret

- define through pod arguments
  - `--default-ssl-certificate`=\<namespace\>/\<secret\>
- Annotation `ssl-certificate` in config map
  - \<namespace\>/\<secret\>
  - this replaces default certificate
- certificate can be defined in Ingress object: `spec.tls[].secretName`
- single certificate secret can contain two items:
  - tls.key
  - tls.crt
- certificate secret with `rsa` and `ecdsa` certificates:
  - :information_source: only one certificate is also acceptable setup
  - rsa.key
  - rsa.crt
  - ecdsa.key
  - ecdsa.crt

### Data types

#### Port

- value between <0, 65535]

#### Sample expression

- Sample expressions/fetches are used to retrieve data from request/response buffer.
- Example:
  - headers: `hdr(header-name)`
  - cookies: `cookie(cookie-name)`
  - Name of the cipher used to offload SSL: `ssl_fc_cipher`
- Sample expressions are covered in depth in the HAProxy configuration manual (section 7.3), however many are out of the ingress controller's scope.

#### Time

- number + type
- in milliseconds, "s" suffix denotes seconds
- example: "1s"
"""

DEV_NOTE = (
    "\n  > :construction: this is only available from next version, "
    "currently available in dev build\n\n"
)
BACK_TO_TOP = (
    "<p align='right'><a href='#available-annotations'>:arrow_up_small: "
    "back to top</a></p>\n\n***\n\n"
)


def write_value(value: str, default_value: str) -> str:
    """A possible value, marked when it is the default."""
    if value != default_value:
        return value
    return f"{value} `default`"


def _is_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    return char.isspace()


def _title(text: str) -> str:
    """Upper-case the first letter of every word."""
    result = []
    previous = " "
    for char in text:
        result.append(char.upper() if _is_separator(previous) else char)
        previous = char
    return "".join(result)


def _fenced(label: str, body: str) -> str:
    return f"{label}:\n\n```yaml\n{body}\n```\n\n"


def select_examples(item: ConfItem) -> str:
    """The example blocks shown for an annotation."""
    overrides = sum(
        1
        for example in (item.example_configmap, item.example_ingress, item.example_service)
        if example
    )
    if overrides == 0 or (overrides == 1 and len(item.applies_to) == 1):
        if "configmap" in item.applies_to:
            body = item.example_configmap or "\n".join(item.example)
            return _fenced("Example", body)
        lines = []
        for line in item.example:
            prefix = "" if line.startswith("#") or item.title == "ingress.class" else "haproxy.org/"
            lines.append(f"{prefix}{line}\n")
        return _fenced("Example", "".join(lines))

    parts = []
    if item.example_configmap:
        parts.append(_fenced("Example (configmap)", item.example_configmap))
    if item.example_ingress and item.example_ingress == item.example_service:
        parts.append(_fenced("Example (ingress, service)", item.example_ingress))
    else:
        if item.example_ingress:
            parts.append(_fenced("Example (ingress)", item.example_ingress))
        if item.example_service:
            parts.append(_fenced("Example (service)", item.example_service))
    return "".join(parts)


def _table_row(item: ConfItem, group: str, dev: bool) -> str:
    ann_type = "[bool](#bool)" if item.type == "bool" else item.type
    default = item.default
    if ann_type != "number" and item.default:
        default = f'"{item.default}"'
    marker = " :construction:(dev)" if dev else ""
    link = group.replace(" ", "-")
    return (
        f"| [{item.title}](#{link}){marker} | {ann_type} | {default} | {item.dependencies} "
        f"|{applies_marker(item.applies_to, 'configmap')}"
        f"|{applies_marker(item.applies_to, 'ingress')}"
        f"|{applies_marker(item.applies_to, 'service')}|\n"
    )


def _item_section(item: ConfItem, conf: Conf) -> str:
    parts = [f"##### `{item.title}`\n\n"]
    if not item.version_min.lower_or_equal(conf.active_version):
        parts.append(DEV_NOTE)
    parts.extend(f"  {line}\n" for line in item.description)
    parts.append("\n  Available on:")
    parts.extend(f"  `{target}`" for target in item.applies_to)
    parts.append("\n")
    parts.extend(f"\n  :information_source: {tip}\n" for tip in item.tip)
    parts.append("\nPossible values:\n\n")
    parts.extend(f"- {write_value(value, item.default)}\n" for value in item.values)
    parts.append("\n")
    parts.append(select_examples(item))
    return "".join(parts)


def generate_readme(conf: Conf) -> str:
    """The annotations reference page as markdown."""
    active = conf.active_version
    parts = [TITLE, str(active), HEADER]

    effective: dict[int, str] = {}
    groups: set[str] = set()
    for item in conf.items:
        if not item.version_max.lower_or_equal(active):
            continue
        group = item.group or item.title
        effective[id(item)] = group
        dev = not item.version_min.lower_or_equal(active)
        parts.append(_table_row(item, group, dev))
        groups.add(group)

    parts.append(TABLE_FOOTER)

    for group in sorted(groups):
        parts.append(f"#### {_title(group).replace('-', ' ')}\n\n")
        group_data = conf.groups.get(group)
        if group_data is not None and group_data.header:
            parts.append(f"{group_data.header}\n\n")
        for item in conf.items:
            if effective.get(id(item), item.group) != group:
                continue
            parts.append(_item_section(item, conf))
        if group_data is not None and group_data.footer:
            parts.append(f"{group_data.footer}\n\n")
        parts.append(BACK_TO_TOP)

    parts.append(DOC_FOOTER)
    return "".join(parts)