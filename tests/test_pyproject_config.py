import textwrap

import pytest

from adapters.pyproject_config import find_config_file, load_config_file, locate_and_parse
from core.domain.models import FormatOptions
from core.errors import ConfigFileError


def write(path, content):
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_full_section(tmp_path):
    path = write(
        tmp_path / "pyproject.toml",
        """
        [tool.black]
        line-length = 80
        target-version = ['py36', 'py37']
        """,
    )

    assert load_config_file(path) == FormatOptions(line_length=80, target_versions=("py36", "py37"))


def test_load_partial_section(tmp_path):
    path = write(
        tmp_path / "pyproject.toml",
        """
        [tool.black]
        line-length = 120
        """,
    )

    options = load_config_file(path)

    assert options.line_length == 120
    assert options.target_versions is None


def test_load_empty_file(tmp_path):
    path = write(tmp_path / "pyproject.toml", "")

    assert load_config_file(path) == FormatOptions()


def test_other_tools_are_ignored(tmp_path):
    path = write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.ruff]
        line-length = 100

        [tool.black]
        skip-string-normalization = true
        """,
    )

    assert load_config_file(path) == FormatOptions()


def test_invalid_toml_raises(tmp_path):
    path = write(tmp_path / "pyproject.toml", "[tool.black\nline-length = ")

    with pytest.raises(ConfigFileError) as excinfo:
        load_config_file(path)

    assert excinfo.value.path == path


def test_wrong_type_raises(tmp_path):
    path = write(
        tmp_path / "pyproject.toml",
        """
        [tool.black]
        line-length = "wide"
        """,
    )

    with pytest.raises(ConfigFileError, match="line-length"):
        load_config_file(path)


def test_find_walks_up_from_start_dir(tmp_path):
    config = write(tmp_path / "pyproject.toml", "")
    nested = tmp_path / "pkg" / "sub"
    nested.mkdir(parents=True)

    assert find_config_file(nested) == config.resolve()


def test_find_prefers_nearest(tmp_path):
    write(tmp_path / "pyproject.toml", "")
    nested = tmp_path / "pkg"
    nested.mkdir()
    nearest = write(nested / "pyproject.toml", "")

    assert find_config_file(nested) == nearest.resolve()


def test_find_checks_start_dir_itself(tmp_path):
    config = write(tmp_path / "pyproject.toml", "")

    assert find_config_file(tmp_path) == config.resolve()


def test_locate_and_parse_custom_filename(tmp_path):
    write(
        tmp_path / "black-settings.toml",
        """
        [tool.black]
        target-version = ["py312"]
        """,
    )
    nested = tmp_path / "src"
    nested.mkdir()

    options = locate_and_parse(nested, "black-settings.toml")

    assert options == FormatOptions(target_versions=("py312",))


def test_locate_and_parse_absent_is_none(tmp_path):
    assert locate_and_parse(tmp_path, "blackd-client-test-absent.toml") is None


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_bytes(b"[tool.black]\nline-length = 88 # \xff\n")

    with pytest.raises(ConfigFileError) as excinfo:
        load_config_file(path)

    assert excinfo.value.path == path


@pytest.mark.parametrize("value", ["true", "88.0"])
def test_non_integer_line_length_raises(tmp_path, value):
    path = write(
        tmp_path / "pyproject.toml",
        f"""
        [tool.black]
        line-length = {value}
        """,
    )

    with pytest.raises(ConfigFileError, match="line-length"):
        load_config_file(path)
