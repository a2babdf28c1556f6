import pytest

from sigfield.config import Settings, load_settings, parse_log_level
from sigfield.errors import InvalidArgumentsError


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.ini") == Settings()


def test_load_settings(tmp_path):
    config = tmp_path / "config.ini"
    config.write_text(
        "[logging]\nlevel = debug\n"
        "[pdf]\nstrict = no\n"
        "[output]\nmake_parents = false\n"
        "[field]\ntooltip = Sign here\n"
    )
    assert load_settings(config) == Settings(
        log_level="DEBUG", strict=False, make_parents=False, tooltip="Sign here"
    )


def test_blank_tooltip_is_none(tmp_path):
    config = tmp_path / "config.ini"
    config.write_text("[field]\ntooltip =\n")
    assert load_settings(config).tooltip is None


@pytest.mark.parametrize(
    "content",
    [
        "[pdf]\nstrict = sometimes\n",
        "[output]\nmake_parents = 2\n",
        "[logging]\nlevel = chatty\n",
        "no section header\n",
    ],
)
def test_invalid_config(tmp_path, content):
    config = tmp_path / "config.ini"
    config.write_text(content)
    with pytest.raises(InvalidArgumentsError):
        load_settings(config)


def test_parse_log_level():
    assert parse_log_level(" info ") == "INFO"
    with pytest.raises(InvalidArgumentsError):
        parse_log_level("verbose")
