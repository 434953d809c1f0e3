from __future__ import annotations

from pathlib import Path

import pytest

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
{body}
</project>
"""


def parent_block(
    relative_path: str | None = "..",
    group: str = "com.acme",
    artifact: str = "acme-parent",
    version: str = "1.0",
) -> str:
    lines = [
        "  <parent>",
        f"    <groupId>{group}</groupId>",
        f"    <artifactId>{artifact}</artifactId>",
        f"    <version>{version}</version>",
    ]
    if relative_path is not None:
        lines.append(f"    <relativePath>{relative_path}</relativePath>")
    lines.append("  </parent>")
    return "\n".join(lines)


def modules_block(*modules: str) -> str:
    inner = "\n".join(f"    <module>{m}</module>" for m in modules)
    return f"  <modules>\n{inner}\n  </modules>"


@pytest.fixture
def write_pom():
    """Write a pom.xml with *body* inside <project> and return its path."""

    def _write(path: Path, body: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(POM_TEMPLATE.format(body=body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def aggregator(tmp_path, write_pom) -> Path:
    """An aggregator POM at ``<tmp>/parent/pom.xml`` listing module ``core``."""
    return write_pom(
        tmp_path / "parent" / "pom.xml",
        "\n".join(
            [
                "  <groupId>com.acme</groupId>",
                "  <artifactId>acme-parent</artifactId>",
                "  <version>1.0</version>",
                "  <packaging>pom</packaging>",
                modules_block("core"),
            ]
        ),
    )
