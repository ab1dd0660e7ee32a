from __future__ import annotations

import pytest

from lib_tagged_config.domain.errors import (
    ConfigurationMissing,
    ConfigurationStoreNotSet,
    FileSettingsNotSet,
    InvalidFormat,
    InvalidKey,
    KeyNotFound,
    MachineNameNotMapped,
    NotFound,
    TaggedConfigError,
    TagNotFound,
    TagStrategyNotSet,
)


def test_error_hierarchy() -> None:
    for error_cls in (
        ConfigurationMissing,
        FileSettingsNotSet,
        InvalidFormat,
        InvalidKey,
        KeyNotFound,
        MachineNameNotMapped,
        NotFound,
        TagNotFound,
    ):
        assert issubclass(error_cls, TaggedConfigError)
    assert issubclass(TagStrategyNotSet, ConfigurationMissing)
    assert issubclass(ConfigurationStoreNotSet, ConfigurationMissing)


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (InvalidKey("key"), ValueError),
        (KeyNotFound("Dev.Setting"), LookupError),
        (TagNotFound("FixedTagStrategy"), LookupError),
        (MachineNameNotMapped("host-b"), LookupError),
    ],
)
def test_errors_keep_builtin_semantics(error: Exception, builtin: type[Exception]) -> None:
    assert isinstance(error, builtin)


def test_errors_carry_diagnostic_details() -> None:
    assert KeyNotFound("Dev.Setting").qualified_key == "Dev.Setting"
    assert MachineNameNotMapped("host-b").machine_name == "host-b"
    assert TagNotFound("TextFileTagStrategy").strategy == "TextFileTagStrategy"
    assert TagNotFound("FixedTagStrategy", "Setting").key == "Setting"
    assert "'Setting'" in str(TagNotFound("FixedTagStrategy", "Setting"))
    assert InvalidKey("name").argument == "name"
    assert "host-b" in str(MachineNameNotMapped("host-b"))
