# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for environment-driven diagnostic logging."""

from __future__ import annotations

import io
import logging

import pytest

from asmq.diagnostics import LOG_ENV_VAR, build_diagnostic_logger, null_logger, parse_level
from asmq.errors import ConfigurationError


def test_unset_variable_yields_disabled_logger() -> None:
    logger = build_diagnostic_logger({})

    assert logger.disabled
    assert not logger.isEnabledFor(logging.CRITICAL)


@pytest.mark.parametrize(
    ("raw", "level"),
    [("trace", logging.DEBUG), ("DEBUG", logging.DEBUG), (" warn ", logging.WARNING), ("error", logging.ERROR)],
)
def test_parse_level(raw: str, level: int) -> None:
    assert parse_level(raw) == level


def test_invalid_level_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match=LOG_ENV_VAR):
        build_diagnostic_logger({LOG_ENV_VAR: "loud"})


def test_records_go_to_the_given_stream() -> None:
    stream = io.StringIO()
    logger = build_diagnostic_logger({LOG_ENV_VAR: "info"}, stream=stream)

    logger.debug("hidden")
    logger.info("config source=%s", "defaults")

    assert stream.getvalue() == "INFO config source=defaults\n"


def test_loggers_are_not_registered_globally() -> None:
    logger = build_diagnostic_logger({LOG_ENV_VAR: "debug"}, stream=io.StringIO())

    assert logging.getLogger(logger.name) is not logger
    assert null_logger() is not null_logger()
