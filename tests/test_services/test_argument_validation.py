"""Tests for argument, source and destination validation."""

from pathlib import Path

import pytest

from gsend.config import Config
from gsend.errors import (
    DestinationNotFoundError,
    InvalidDestinationError,
    InvalidUsageError,
    SourceNotFoundError,
)
from gsend.models import Location
from gsend.services.validation import parse_args, select_location, validate_source


@pytest.fixture
def config() -> Config:
    return Config(
        username="alice",
        locations={"D": Location(path="/remote/dir", host="h", port=2222)},
    )


class TestParseArgs:
    """Tests for parse_args."""

    def test_two_arguments(self) -> None:
        """Source and destination name are returned."""
        assert parse_args(["a.txt", "D"]) == ("a.txt", "D")

    def test_extra_arguments_ignored(self) -> None:
        """Arguments after the second are ignored."""
        assert parse_args(["a.txt", "D", "extra"]) == ("a.txt", "D")

    @pytest.mark.parametrize("argv", [[], ["a.txt"]])
    def test_too_few_prints_usage(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Fewer than two arguments prints usage to stdout."""
        with pytest.raises(InvalidUsageError) as exc_info:
            parse_args(argv)

        assert capsys.readouterr().out == "USAGE:\ngsend <src> <dest>\n"
        assert exc_info.value.exit_code == 2


class TestValidateSource:
    """Tests for validate_source."""

    def test_existing_file(self, tmp_path: Path) -> None:
        """An existing file is accepted."""
        source = tmp_path / "a.txt"
        source.write_text("hi")
        assert validate_source(str(source)) == source

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is rejected."""
        with pytest.raises(SourceNotFoundError, match="source file not found"):
            validate_source(str(tmp_path / "missing.txt"))

    def test_directory_rejected(self, tmp_path: Path) -> None:
        """A directory is not an uploadable file."""
        with pytest.raises(SourceNotFoundError):
            validate_source(str(tmp_path))


class TestSelectLocation:
    """Tests for select_location."""

    def test_known_destination(self, config: Config) -> None:
        """Known names return their location."""
        assert select_location(config, "D") == config.locations["D"]

    def test_unknown_destination(self, config: Config) -> None:
        """Unknown names list what is available."""
        with pytest.raises(DestinationNotFoundError) as exc_info:
            select_location(config, "E")

        assert exc_info.value.available == ["D"]
        assert "Available: D" in str(exc_info.value)

    def test_unknown_destination_empty_config(self) -> None:
        """Empty config says nothing is configured."""
        with pytest.raises(DestinationNotFoundError, match="none configured"):
            select_location(Config(), "D")

    @pytest.mark.parametrize(
        "location",
        [
            Location(path="/p", host="", port=22),
            Location(path="/p", host="h", port=0),
            Location(path="/p", host="h", port=70000),
            Location(path="/p", host="h;rm -rf", port=22),
        ],
    )
    def test_invalid_destination(self, location: Location) -> None:
        """Unusable host or port is rejected before connecting."""
        config = Config(username="alice", locations={"bad": location})

        with pytest.raises(InvalidDestinationError, match="destination 'bad'"):
            select_location(config, "bad")
