from __future__ import annotations

import logging

import pytest

from pomid.cli import main
from pomid.store.pom_xml import PomXmlStore


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_file_exits_1(workdir, capsys) -> None:
    assert main(["id"]) == 1

    assert "No such file: pom.xml" in capsys.readouterr().err
    assert not (workdir / "pom.xml").exists()


def test_set_and_show_id(workdir, capsys) -> None:
    assert main(["id", "com.acme:widget:1.0"]) == 0
    assert main(["id"]) == 0

    expected = "jar com.acme:widget:1.0\n"
    assert capsys.readouterr().out == expected * 2


def test_options(workdir, capsys) -> None:
    path = workdir / "sub" / "project.xml"
    path.parent.mkdir()

    assert main(["id", "com.acme:.:2.0", "--as", "pom", "-s", "-f", str(path)]) == 0

    pom = PomXmlStore().load(path)
    assert (pom.artifact_id, pom.packaging, pom.parent) == ("sub", "pom", None)
    assert capsys.readouterr().out == "pom com.acme:sub:2.0\n"


def test_no_add_module_flag(workdir) -> None:
    assert main(["id", "com.acme:widget:1.0", "--no-add-module"]) == 0


def test_default_file_from_config(workdir) -> None:
    (workdir / ".pomid.toml").write_text(
        '[pomid]\nfile = "project.xml"\n', encoding="utf-8"
    )

    assert main(["id", "com.acme:widget:1.0"]) == 0

    assert (workdir / "project.xml").exists()
    assert not (workdir / "pom.xml").exists()


def test_read_error_exits_1(workdir, caplog) -> None:
    (workdir / "pom.xml").write_text("not xml", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="pomid"):
        assert main(["id"]) == 1

    assert "malformed XML" in caplog.text


def test_empty_identity_exits_1(workdir, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="pomid"):
        assert main(["id", ""]) == 1

    assert "identity must not be empty" in caplog.text
    assert not (workdir / "pom.xml").exists()


def test_subcommand_required(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
