# ingresskit

Building blocks for an HAProxy-based Kubernetes ingress controller: its
command-line options, a levelled logger, parsers for annotation values, an
error collector, and a generator for the annotation and argument reference
pages.

## Modules

- `ingresskit.flags`: the controller's command-line options.
  - `parse_args(argv=None)` returns an `OSArgs` dataclass. Unknown options
    are ignored; a bad value (for example `--configmap foo` or
    `--log verbose`) raises `FlagError`, a `ValueError`.
  - `NamespaceValue` holds a `namespace/name` pair: `NamespaceValue.parse`
    splits it, `marshal()` joins it again, and `str()` gives an empty string
    when either part is empty.
  - `parse_log_level` maps `trace`, `debug`, `info`, `warning`, `error` to a
    `LogLevel`.
  - `--sync-period` and `--cache-resync-period` take durations such as `5s`,
    `10m` or `1h30m` and are stored as `timedelta`.
  - `-v` may be repeated; `version_text(args)` returns the build lines
    (from `GIT_TAG`, `GIT_COMMIT`, `GIT_DIRTY`, `GIT_REPO`, `BUILD_TIME`)
    and, with `-vv`, the ConfigMap and ingress class settings as well.
  - `format_help()` returns the usage text.
- `ingresskit.log`: `get_logger()` (starts at `WARNING`) and
  `get_k8s_api_logger()` (starts at `TRACE`) return shared `Logger`
  instances. Lines are timestamped, written to standard error unless a
  `stream` is given, and, with `file_name` on, carry the caller's file and
  line. `print`/`printf` always write; `error`, `errorf`, `err`, `panic` and
  `panicf` write whatever the level; `None` arguments are skipped, so
  `logger.error(err)` only writes when there is an error. `err` returns the
  arguments that are exceptions; `panic` raises the first argument that is
  not `None` (wrapped in `LoggerPanic` if it is not an exception).
- `ingresskit.helpers`: `parse_time` (`ms`, `s`, `m`, `h`, `d` suffixes,
  result in milliseconds), `parse_size` (`k`, `m`, `g` suffixes, result in
  bytes), `parse_int` (signed 64-bit decimal), `get_bool_value` (accepts the
  usual true/false spellings, and `on`/`off`/`enabled`/`disabled` with a
  deprecation warning), `get_pod_prefix` (drops the last two dash-separated
  parts of a pod name), `hash_bytes` (FNV-1a 128-bit hex digest) and
  `home_dir`. Invalid input raises `ValueError`.
- `ingresskit.errors`: `ErrorCollector` gathers errors, ignoring `None`;
  `result()` returns an `AggregateError` whose message has one line per
  error, or `None` when nothing was collected.
- `ingresskit.docgen`: renders the annotation reference and the controller
  argument reference from a `doc.yaml` description.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ingresskit.flags import parse_args
from ingresskit.helpers import get_pod_prefix, parse_size, parse_time

args = parse_args(["--configmap", "default/haproxy-kubernetes-ingress", "--log", "debug"])
print(args.config_map.marshal())   # default/haproxy-kubernetes-ingress
print(args.http_bind_port)         # 80

print(parse_time("5s"))    # 5000
print(parse_size("2k"))    # 2048
print(get_pod_prefix("haproxy-ingress-7d9f8b-x2k4q"))   # haproxy-ingress
```

```python
from ingresskit.errors import ErrorCollector

errors = ErrorCollector()
errors.add(None, ValueError("first"), ValueError("second"))
error = errors.result()    # an AggregateError, or None if nothing was added
```

## Generating documentation

```
ingresskit-docgen
```

By default it reads `../doc.yaml` and writes `../README.md` (annotations)
and `../controller.md` (controller arguments), replacing each file
atomically. Both places can be changed:

```
ingresskit-docgen --doc path/to/doc.yaml --output-dir docs
```

Entries whose `version_max` is below the active version are left out;
entries whose `version_min` is above it are marked as available in the
development build. A description file that cannot be read is logged and
treated as empty; one that is not valid YAML makes the command exit with
status 1.

The same can be done from Python:

```python
from ingresskit.docgen.controller import generate_controller_readme
from ingresskit.docgen.readme import generate_readme
from ingresskit.docgen.types import load_conf

conf = load_conf("doc.yaml")
annotations_md = generate_readme(conf)
arguments_md = generate_controller_readme(conf)
```

## What this package does not do

It does not run an ingress controller. There is no command that starts one,
no connection to a Kubernetes cluster, no writing or reloading of an HAProxy
configuration, and no metrics endpoint. `parse_args` only turns a command
line into an `OSArgs` value; acting on those options is left to the caller.