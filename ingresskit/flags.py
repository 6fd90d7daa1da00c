"""Command-line options of the ingress controller and its version banner."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Sequence, TypeVar

from .helpers import parse_int
from .log import LogLevel

GIT_REPO = ""
GIT_TAG = "dev"
GIT_COMMIT = ""
GIT_DIRTY = "dirty"
BUILD_TIME = ""

_PROG = "ingresskit"

_LOG_LEVELS = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warning": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)([^0-9.]+)")

T = TypeVar("T")


class FlagError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass(frozen=True)
class NamespaceValue:
    """A ``namespace/name`` pair naming a cluster object."""

    namespace: str = ""
    name: str = ""

    @classmethod
    def parse(cls, value: str) -> "NamespaceValue":
        """Split ``namespace/name``; anything else raises ValueError."""
        parts = value.split("/")
        if len(parts) != 2:
            raise ValueError("expected two strings separated by a /")
        return cls(parts[0], parts[1])

    def marshal(self) -> str:
        return f"{self.namespace}/{self.name}"

    def __str__(self) -> str:
        if not self.namespace or not self.name:
            return ""
        return f"{self.namespace}/{self.name}"


def parse_log_level(value: str) -> LogLevel:
    """Map a level name to a LogLevel; unknown names raise ValueError."""
    try:
        return _LOG_LEVELS[value]
    except KeyError:
        raise ValueError(f"value {value} not permitted") from None


def _parse_duration(text: str) -> timedelta:
    """Parse durations such as ``5s``, ``10m``, ``1h30m`` or ``1.5s``."""
    original = text
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {original!r}")
    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        if number in ("", "."):
            raise ValueError(f"invalid duration {original!r}")
        if unit not in _DURATION_UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")
        total += float(number) * _DURATION_UNITS[unit]
        pos = match.end()
    return timedelta(seconds=sign * total)


@dataclass
class OSArgs:
    """Arguments the controller accepts on its command line."""

    help: bool = False
    version: int = 0
    default_backend_service: NamespaceValue = field(default_factory=NamespaceValue)
    default_certificate: NamespaceValue = field(default_factory=NamespaceValue)
    config_map: NamespaceValue = field(default_factory=NamespaceValue)
    config_map_tcp_services: NamespaceValue = field(default_factory=NamespaceValue)
    config_map_error_files: NamespaceValue = field(default_factory=NamespaceValue)
    config_map_pattern_files: NamespaceValue = field(default_factory=NamespaceValue)
    kube_config: str = ""
    ingress_class: str = ""
    empty_ingress_class: bool = False
    publish_service: str = ""
    namespace_whitelist: list[str] = field(default_factory=list)
    namespace_blacklist: list[str] = field(default_factory=list)
    sync_period: timedelta = timedelta(seconds=5)
    cache_resync_period: timedelta = timedelta(minutes=10)
    log_level: LogLevel = LogLevel.INFO
    pprof_enabled: bool = False
    external: bool = False
    test: bool = False
    disable_ipv4: bool = False
    disable_ipv6: bool = False
    disable_http: bool = False
    disable_https: bool = False
    http_bind_port: int = 80
    https_bind_port: int = 443
    ipv4_bind_addr: str = "0.0.0.0"
    ipv6_bind_addr: str = "::"
    program: str = ""
    cfg_dir: str = ""
    runtime_dir: str = ""
    disable_service_external_name: bool = False
    use_with_s6_overlay: bool = False
    prometheus_port: int = 0


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise FlagError(message)


def _typed(func: Callable[[str], T]) -> Callable[[str], T]:
    def convert(value: str) -> T:
        try:
            return func(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    convert.__name__ = getattr(func, "__name__", "value")
    return convert


def _build_parser() -> _Parser:
    parser = _Parser(prog=_PROG, add_help=False)
    ns = _typed(NamespaceValue.parse)
    integer = _typed(parse_int)
    duration = _typed(_parse_duration)
    flag = "store_true"

    parser.add_argument("-h", "--help", dest="help", action=flag,
                        help="show this help message")
    parser.add_argument("-v", "--version", dest="version", action="count", default=0,
                        help="version")
    namespace_options = (
        ("--default-backend-service", "default_backend_service",
         "default service to serve 404 page. If not specified HAProxy serves http 400"),
        ("--default-ssl-certificate", "default_certificate",
         "secret name of the certificate"),
        ("--configmap", "config_map", "configmap designated for HAProxy"),
        ("--configmap-tcp-services", "config_map_tcp_services",
         "configmap used to define tcp services"),
        ("--configmap-errorfiles", "config_map_error_files",
         "configmap used to define custom error pages associated to HTTP error codes"),
        ("--configmap-patternfiles", "config_map_pattern_files",
         "configmap used to provide a list of pattern files to use in haproxy configuration"),
    )
    for option, dest, text in namespace_options:
        parser.add_argument(option, dest=dest, type=ns, default=NamespaceValue(),
                            metavar="NAMESPACE/NAME", help=text)
    parser.add_argument("--kubeconfig", dest="kube_config", default="",
                        help="combined with -e. location of kube config file")
    parser.add_argument("--ingress.class", dest="ingress_class", default="",
                        help="ingress.class to monitor in multiple controllers environment")
    parser.add_argument("--empty-ingress-class", dest="empty_ingress_class", action=flag,
                        help="process ingresses without an explicit ingress class")
    parser.add_argument("--publish-service", dest="publish_service", default="",
                        help="service (namespace/name) whose endpoints address is mirrored "
                             "to the load-balancer status of ingresses")
    parser.add_argument("--namespace-whitelist", dest="namespace_whitelist",
                        action="append", default=[], help="whitelisted namespaces")
    parser.add_argument("--namespace-blacklist", dest="namespace_blacklist",
                        action="append", default=[], help="blacklisted namespaces")
    parser.add_argument("--sync-period", dest="sync_period", type=duration,
                        default=timedelta(seconds=5),
                        help="period at which the controller syncs HAProxy configuration file")
    parser.add_argument("--cache-resync-period", dest="cache_resync_period", type=duration,
                        default=timedelta(minutes=10),
                        help="resync period of the informers cache")
    parser.add_argument("--log", dest="log_level", type=_typed(parse_log_level),
                        default=LogLevel.INFO, help="level of log messages you can see")
    parser.add_argument("-p", dest="pprof_enabled", action=flag,
                        help="enable pprof over https")
    parser.add_argument("-e", "--external", dest="external", action=flag,
                        help="use as external Ingress Controller (out of k8s cluster)")
    parser.add_argument("-t", dest="test", action=flag, help="simulate running HAProxy")
    parser.add_argument("--disable-ipv4", dest="disable_ipv4", action=flag,
                        help="toggle to disable the IPv4 protocol from all frontends")
    parser.add_argument("--disable-ipv6", dest="disable_ipv6", action=flag,
                        help="toggle to disable the IPv6 protocol from all frontends")
    parser.add_argument("--disable-http", dest="disable_http", action=flag,
                        help="toggle to disable the HTTP frontend")
    parser.add_argument("--disable-https", dest="disable_https", action=flag,
                        help="toggle to disable the HTTPs frontend")
    parser.add_argument("--http-bind-port", dest="http_bind_port", type=integer, default=80,
                        help="port to listen on for HTTP traffic")
    parser.add_argument("--https-bind-port", dest="https_bind_port", type=integer,
                        default=443, help="port to listen on for HTTPS traffic")
    parser.add_argument("--ipv4-bind-address", dest="ipv4_bind_addr", default="0.0.0.0",
                        help="IPv4 address the Ingress Controller listens on (if enabled)")
    parser.add_argument("--ipv6-bind-address", dest="ipv6_bind_addr", default="::",
                        help="IPv6 address the Ingress Controller listens on (if enabled)")
    parser.add_argument("--program", dest="program", default="",
                        help="path to HAProxy program. NOTE: works only with External mode")
    parser.add_argument("--config-dir", dest="cfg_dir", default="",
                        help="path to HAProxy configuration directory. "
                             "NOTE: works only in External mode")
    parser.add_argument("--runtime-dir", dest="runtime_dir", default="",
                        help="path to HAProxy runtime directory. "
                             "NOTE: works only in External mode")
    parser.add_argument("--disable-service-external-name",
                        dest="disable_service_external_name", action=flag,
                        help="disable forwarding to ExternalName Services")
    parser.add_argument("--with-s6-overlay", dest="use_with_s6_overlay", action=flag,
                        help="use s6 overlay to start/stop/reload HAProxy")
    parser.add_argument("--enable-prometheus-port", dest="prometheus_port", type=integer,
                        default=0, help="port to listen on for Prometheus metrics")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> OSArgs:
    """Parse the command line; unknown options are ignored, bad values raise FlagError."""
    if argv is None:
        argv = sys.argv[1:]
    known, _unknown = _build_parser().parse_known_args(list(argv))
    return OSArgs(**vars(known))


def format_help() -> str:
    """The usage and option help text."""
    return _build_parser().format_help()


def version_text(args: OSArgs) -> str:
    """Build information; repeating -v adds the main configuration settings."""
    lines = [
        f"HAProxy Ingress Controller {GIT_TAG} {GIT_COMMIT}{GIT_DIRTY}",
        f"Build from: {GIT_REPO}",
        f"Build date: {BUILD_TIME}",
    ]
    if args.version > 1:
        lines.append(f"ConfigMap: {args.config_map}")
        lines.append(f"Ingress class: {args.ingress_class}")
        lines.append(f"Empty Ingress class: {str(args.empty_ingress_class).lower()}")
    return "\n".join(lines) + "\n"