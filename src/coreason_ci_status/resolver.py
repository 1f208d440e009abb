# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ci_status

"""
Maps a combined CI status to console output and a process exit code.
"""

from enum import IntEnum
from typing import Dict, Optional

from coreason_ci_status.domain.status import CheckStatus, CIState, CombinedResult
from coreason_ci_status.exceptions import UnrecognizedStateError
from coreason_ci_status.ui.console import ERROR, SUCCESS, WARNING, StatusConsole, Symbol
from coreason_ci_status.utils.logger import logger


class ExitCode(IntEnum):
    PASSED = 0
    ERROR = 1
    FAILED = 2
    PENDING = 3
    INSUFFICIENT_CHECKS = 4


STATE_SYMBOLS: Dict[CIState, Symbol] = {
    CIState.SUCCESS: SUCCESS,
    CIState.PENDING: WARNING,
    CIState.ERROR: WARNING,
    CIState.FAILURE: ERROR,
}


class OutcomeResolver:
    """
    Decides the outcome of a CI run from its combined status.

    Every check is printed in reporting order before the combined state is
    evaluated. A check in an unknown state stops the run with ExitCode.ERROR,
    since the classification can no longer be trusted. A successful combined
    state only passes once at least `required_checks` checks have reported.
    """

    def __init__(
        self,
        required_checks: int = 1,
        console: Optional[StatusConsole] = None,
        symbols: Optional[Dict[CIState, Symbol]] = None,
    ) -> None:
        if required_checks < 0:
            raise ValueError(f"required_checks must not be negative, got {required_checks}")
        self.required_checks = required_checks
        self.console = console or StatusConsole()
        self.symbols = {**STATE_SYMBOLS, **(symbols or {})}

    def _classify(self, state: str) -> CIState:
        parsed = CIState.parse(state)
        if parsed is None:
            raise UnrecognizedStateError(state)
        return parsed

    def _print_check(self, check: CheckStatus) -> None:
        state = self._classify(check.state)
        self.console.line(self.symbols[state], check.description)

    def resolve(self, result: CombinedResult) -> ExitCode:
        """
        Prints one line per check and a summary line, and returns the exit code.

        Args:
            result: The combined status reported for the commit.

        Returns:
            PASSED, ERROR, FAILED, PENDING or INSUFFICIENT_CHECKS.
        """
        try:
            for check in result.statuses:
                self._print_check(check)
            state = self._classify(result.state)
        except UnrecognizedStateError as e:
            logger.info(f"Unrecognized CI state '{e.state}'")
            self.console.error(str(e))
            return ExitCode.ERROR

        symbol = self.symbols[state]
        count = result.check_count

        if state is CIState.ERROR:
            self.console.line(symbol, "CI tests errored", colored=True, stderr=True)
            return ExitCode.ERROR
        if state is CIState.FAILURE:
            self.console.line(symbol, "CI tests failed", colored=True, stderr=True)
            return ExitCode.FAILED
        if state is CIState.PENDING:
            self.console.line(symbol, "CI still pending", colored=True, stderr=True)
            return ExitCode.PENDING

        if count < self.required_checks:
            logger.info(f"Only {count} of {self.required_checks} required checks reported")
            self.console.warning(f"The required number of tests weren't run ({count} vs {self.required_checks})")
            return ExitCode.INSUFFICIENT_CHECKS

        self.console.line(symbol, "CI tests passed", colored=True)
        return ExitCode.PASSED
