from __future__ import annotations

from fontrun.core.exceptions import (
    ConfigError,
    FontContractError,
    FontrunError,
    NoSuitableFontError,
    exception_hint,
    exception_messages,
)


def test_no_suitable_font_names_the_character() -> None:
    error = NoSuitableFontError("é")

    assert error.char == "é"
    assert str(error) == "no suitable font for character 'é' (U+00E9)"


def test_contract_faults_are_not_recoverable_errors() -> None:
    assert not issubclass(FontContractError, FontrunError)
    assert issubclass(FontContractError, AssertionError)


def test_message_chain_follows_causes() -> None:
    try:
        try:
            raise ValueError("bad unitsPerEm\nsecond line")
        except ValueError as exc:
            raise ConfigError("cannot load manifest") from exc
    except ConfigError as error:
        assert exception_messages(error) == ["cannot load manifest", "bad unitsPerEm"]
        assert exception_hint(error) == "bad unitsPerEm"

    assert exception_hint(RuntimeError("")) is None
