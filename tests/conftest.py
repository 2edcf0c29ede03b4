"""Shared test fixtures for podlint."""

from __future__ import annotations

from pathlib import Path

import pytest

from podlint.parser.loader import ManifestLoader
from podlint.service.checker import ManifestChecker
from podlint.validation.collector import ErrorCollector

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def loader() -> ManifestLoader:
    return ManifestLoader()


@pytest.fixture
def checker() -> ManifestChecker:
    return ManifestChecker()


@pytest.fixture
def errors() -> ErrorCollector:
    return ErrorCollector()


def check(yaml: str, filename: str = "pod.yaml") -> list[str]:
    """Validate YAML text and return the rendered diagnostic lines."""
    report = ManifestChecker().check_string(yaml, filename=filename)
    return report.render().splitlines()


def with_lines(old: str, new: str) -> str:
    """VALID_POD_YAML with one exact fragment replaced."""
    assert old in VALID_POD_YAML, f"fragment not found: {old!r}"
    return VALID_POD_YAML.replace(old, new, 1)


# Line numbers are referenced by the validator tests; edit with care.
VALID_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web-app
  namespace: default
  labels:
    app: web
spec:
  os: linux
  containers:
    - name: web_server
      image: registry.bigbrother.io/team/web:1.2.3
      ports:
        - containerPort: 8080
          protocol: TCP
      readinessProbe:
        httpGet:
          path: /healthz
          port: 8080
      livenessProbe:
        httpGet:
          path: /livez
          port: 8080
      resources:
        limits:
          cpu: 2
          memory: 512Mi
        requests:
          cpu: 1
          memory: 256Mi
"""

# Three containers sharing one name, each on a known line (7, 10, 13).
DUPLICATE_NAMES_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
spec:
  containers:
    - name: app
      image: registry.bigbrother.io/app:1
      resources: {}
    - name: app
      image: registry.bigbrother.io/app:1
      resources: {}
    - name: app
      image: registry.bigbrother.io/app:1
      resources: {}
"""
