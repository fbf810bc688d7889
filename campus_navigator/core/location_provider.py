"""LiveLocationProvider - One-shot position lookup from the host.

Each request asks the host position source once. Success yields a
UserPosition; failure raises LocationError with a reason. There is no
retry, no cached fallback and no deduplication: calling again while a
request is pending simply starts a second, independent request.

Host sources:
- TermuxPositionSource: Android device location via the `termux-location`
  command (Termux:API), run as an async subprocess
- None: host without location support, requests fail immediately
"""

import asyncio
import json
import logging
import shutil
from abc import ABC, abstractmethod
from enum import Enum

from campus_navigator.constants import LocationConfig
from campus_navigator.model.user_position import UserPosition

logger = logging.getLogger(__name__)


class LocationFailure(str, Enum):
    """Why a location request failed."""

    DENIED = "denied"  # Permission refused / provider error
    UNSUPPORTED = "unsupported"  # Host has no location service at all
    TIMEOUT = "timeout"  # No fix within the time limit
    UNAVAILABLE = "unavailable"  # Host answered without a usable fix


class LocationError(Exception):
    """A location request ended without a position."""

    def __init__(self, reason: LocationFailure, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"Location request failed ({reason.value}){': ' + detail if detail else ''}")


class PositionSource(ABC):
    """Host location service."""

    @abstractmethod
    async def current_position(self) -> UserPosition:
        """Return one position reading or raise LocationError."""


class TermuxPositionSource(PositionSource):
    """Device location through Termux:API (`termux-location -p gps -r once`)."""

    def __init__(
        self,
        command: str = LocationConfig.TERMUX_COMMAND,
        provider: str = LocationConfig.TERMUX_PROVIDER,
        timeout_s: float = LocationConfig.TIMEOUT_S,
    ) -> None:
        self.command = command
        self.provider = provider
        self.timeout_s = timeout_s

    async def current_position(self) -> UserPosition:
        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                "-p",
                self.provider,
                "-r",
                "once",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise LocationError(LocationFailure.UNSUPPORTED, f"{self.command} not installed") from e
        except OSError as e:
            raise LocationError(LocationFailure.UNSUPPORTED, f"cannot run {self.command}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout_s)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise LocationError(LocationFailure.TIMEOUT, f"no fix within {self.timeout_s:.0f}s") from e

        if process.returncode != 0:
            error_msg = stderr.decode(errors="replace").strip() or "unknown error"
            raise LocationError(LocationFailure.DENIED, error_msg)

        return self._parse(stdout.decode(errors="replace"))

    @staticmethod
    def _parse(output: str) -> UserPosition:
        """Parse termux-location JSON output."""
        if not output.strip():
            raise LocationError(LocationFailure.UNAVAILABLE, "empty response")
        try:
            data = json.loads(output)
            return UserPosition(
                latitude=float(data["latitude"]),
                longitude=float(data["longitude"]),
                accuracy_m=float(data["accuracy"]) if data.get("accuracy") is not None else None,
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise LocationError(LocationFailure.UNAVAILABLE, f"unreadable response: {e}") from e


def default_position_source() -> PositionSource | None:
    """Termux source when the command is installed, else None (unsupported host)."""
    if shutil.which(LocationConfig.TERMUX_COMMAND):
        return TermuxPositionSource()
    return None


class LiveLocationProvider:
    """Single-shot location requests against a host source.

    Example:
        provider = LiveLocationProvider(source=default_position_source())
        try:
            position = await provider.request_position()
        except LocationError as e:
            LocationFailedMessage(reason=e.reason.value).display()
    """

    def __init__(self, source: PositionSource | None) -> None:
        self.source = source
        self.requests_issued = 0

    @property
    def is_supported(self) -> bool:
        return self.source is not None

    async def request_position(self) -> UserPosition:
        """Ask the host for the current position once.

        Raises:
            LocationError: UNSUPPORTED immediately when there is no source,
                otherwise whatever the source reports.
        """
        self.requests_issued += 1
        request_no = self.requests_issued
        if self.source is None:
            logger.warning(f"[LOCATION] Request #{request_no}: location not supported on this host")
            raise LocationError(LocationFailure.UNSUPPORTED, "no location service available")

        logger.info(f"[LOCATION] Request #{request_no}: asking {type(self.source).__name__}")
        try:
            position = await self.source.current_position()
        except LocationError as e:
            logger.error(f"[LOCATION] Request #{request_no} failed: {e}")
            raise
        logger.info(f"[LOCATION] Request #{request_no}: {position}")
        return position
