[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ingresskit"
version = "0.1.0"
description = "Support toolkit for an HAProxy-based Kubernetes ingress controller: flags, logging, value parsing and documentation generation"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "haproxy",
    "kubernetes",
    "ingress",
    "controller",
    "documentation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ingresskit-docgen = "ingresskit.docgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ingresskit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
