import re

from click.testing import CliRunner
import pytest

from translint.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "no-config")


def test_check_passes(runner, no_config, write_translations):
    folder = write_translations({"en": {"k": "Hi $name$"}, "de": {"k": "Hallo $name$"}})

    result = runner.invoke(cli, ["check", "--config-folder", no_config, str(folder)])

    assert result.exit_code == 0
    assert "[de]" not in result.output


def test_check_fails_on_findings(runner, no_config, write_translations):
    folder = write_translations({"en": {"k": "Hi $name$"}, "de": {"k": "Hallo"}})

    result = runner.invoke(cli, ["check", "--config-folder", no_config, str(folder)])

    assert result.exit_code == 1
    assert "[de]" in result.output
    assert "    mismatch in variables: Hi $name$ ⇒ Hallo" in result.output


def test_check_reference_option(runner, no_config, write_translations):
    folder = write_translations(
        {"en": {"k": ""}, "de": {"k": "Hallo $name$"}, "fr": {"k": "Salut $name$"}}
    )

    default = runner.invoke(cli, ["check", "--config-folder", no_config, str(folder)])
    override = runner.invoke(
        cli, ["check", "--config-folder", no_config, "--reference", "de", str(folder)]
    )

    assert default.exit_code == 1
    assert override.exit_code == 0


def test_check_reference_option_checks_former_reference(
    runner, no_config, write_translations
):
    folder = write_translations(
        {"en": {"k": "Hi"}, "de": {"k": "Hallo $name$"}, "fr": {"k": "Salut $name$"}}
    )

    result = runner.invoke(
        cli, ["check", "--config-folder", no_config, "--reference", "de", str(folder)]
    )

    assert result.exit_code == 1
    assert "[en]\n    mismatch in variables: Hallo $name$ ⇒ Hi\n" in result.output
    assert "[fr]" not in result.output


def test_check_rejects_empty_marker(runner, no_config, write_translations):
    folder = write_translations({"en": {"k": "Hi $name$"}, "de": {"k": "Hallo $name$"}})

    result = runner.invoke(
        cli, ["check", "--config-folder", no_config, "--marker", "", str(folder)]
    )

    assert result.exit_code == 1


def test_check_rejects_empty_marker_in_config(tmp_path, runner, write_translations):
    folder = write_translations({"en": {"k": "Hi $name$"}, "de": {"k": "Hallo $name$"}})
    config_folder = tmp_path / "config"
    config_folder.mkdir()
    (config_folder / "config.yml").write_text("check:\n  marker: ''\n", "utf-8")

    result = runner.invoke(
        cli, ["check", "--config-folder", str(config_folder), str(folder)]
    )

    assert result.exit_code == 1
    assert not isinstance(result.exception, re.error)


def test_check_reads_config(tmp_path, runner, write_translations):
    folder = write_translations({"de": {"k": "Hallo %name%"}, "fr": {"k": "Salut %nom%"}})
    config_folder = tmp_path / "config"
    config_folder.mkdir()
    (config_folder / "config.yml").write_text(
        "logging:\n  level: WARNING\ncheck:\n  reference: de\n  marker: '%'\n",
        "utf-8",
    )

    result = runner.invoke(
        cli, ["check", "--config-folder", str(config_folder), str(folder)]
    )

    assert result.exit_code == 1
    assert "mismatch in variables: Hallo %name% ⇒ Salut %nom%" in result.output


def test_check_missing_reference(runner, no_config, write_translations):
    folder = write_translations({"de": {"k": "Hallo"}})

    result = runner.invoke(cli, ["check", "--config-folder", no_config, str(folder)])

    assert result.exit_code == 1


def test_check_invalid_json(runner, no_config, write_translations):
    folder = write_translations({"en": {"k": "Hi"}})
    (folder / "de.json").write_text('{"k": ', "utf-8")

    result = runner.invoke(cli, ["check", "--config-folder", no_config, str(folder)])

    assert result.exit_code == 1


def test_check_invalid_config(tmp_path, runner, write_translations):
    folder = write_translations({"en": {"k": "Hi"}})
    config_folder = tmp_path / "config"
    config_folder.mkdir()
    (config_folder / "config.yml").write_text("logging: [\n", "utf-8")

    result = runner.invoke(
        cli, ["check", "--config-folder", str(config_folder), str(folder)]
    )

    assert result.exit_code == 1


def test_check_requires_existing_folder(tmp_path, runner, no_config):
    result = runner.invoke(
        cli, ["check", "--config-folder", no_config, str(tmp_path / "missing")]
    )

    assert result.exit_code == 2
