import asyncio
import json

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagecap.errors import (EXIT_CODES, ActionError, EnvironmentBuildError, ErrorKind, classify_error,
                            exit_code_for, kind_for_exit_code)


class TestErrorClassification:
    """Test cases for error classification"""

    @pytest.mark.parametrize("error, kind", [
        (PlaywrightTimeoutError("Timeout 30000ms exceeded."), ErrorKind.NAVIGATION_TIMEOUT),
        (asyncio.TimeoutError(), ErrorKind.NAVIGATION_TIMEOUT),
        (PlaywrightError("net::ERR_CONNECTION_REFUSED"), ErrorKind.NAVIGATION_FAILED),
        (PlaywrightError("Element is not attached to the DOM"), ErrorKind.SELECTOR_NOT_FOUND),
        (json.JSONDecodeError("Expecting value", "", 0), ErrorKind.UNKNOWN),
        (UnicodeDecodeError("ascii", b"Caf\xc3\xa9", 3, 4, "ordinal not in range(128)"), ErrorKind.UNKNOWN),
        (ActionError("gone", ErrorKind.SELECTOR_NOT_FOUND), ErrorKind.SELECTOR_NOT_FOUND),
        (EnvironmentBuildError("apt failed"), ErrorKind.ENVIRONMENT_BUILD),
        (RuntimeError("?"), ErrorKind.UNKNOWN),
    ])
    def test_classify(self, error, kind):
        assert classify_error(error) is kind

    def test_exit_codes_round_trip(self):
        for kind, code in EXIT_CODES.items():
            assert exit_code_for(kind) == code
            assert kind_for_exit_code(code) is kind

    def test_exit_codes_are_distinct_and_non_zero(self):
        codes = list(EXIT_CODES.values())
        assert len(set(codes)) == len(codes)
        assert 0 not in codes

    def test_unmapped_codes(self):
        assert exit_code_for(ErrorKind.CONTAINER_ERROR) == 1
        assert kind_for_exit_code(137) is ErrorKind.CONTAINER_ERROR

    def test_action_error_default_kind(self):
        assert ActionError("x").kind is ErrorKind.UNKNOWN
