"""Decoding of explorer responses into wallet payloads."""

import json
from typing import Any

from xrpl_wallet.domain.errors import ApplicationFailure, DecodeFailure
from xrpl_wallet.domain.models import ExplorerResponse, WalletPayload
from xrpl_wallet.infrastructure.logging.logger import get_app_logger


class ResponseDecoder:
    """Turn a raw explorer reply into a ``WalletPayload``.

    A body that does not parse is always a ``DecodeFailure``, even when the
    status is 2xx. Only when parsing succeeds is the status consulted.
    """

    def __init__(self, logger=None) -> None:
        """Initialize the decoder.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def decode(self, response: ExplorerResponse) -> WalletPayload:
        """Decode the response.

        Args:
            response: Status and raw body returned by the explorer.

        Returns:
            WalletPayload: Decoded wallet data.

        Raises:
            DecodeFailure: If the body is not valid JSON, or a 2xx body is
                not a JSON object.
            ApplicationFailure: If the body parsed but the status is not 2xx.
        """
        try:
            data = json.loads(response.raw_body)
        except (TypeError, ValueError) as exc:
            self._logger.error(
                f"JSON parse error: {exc}; response was: {response.raw_body!r}"
            )
            raise DecodeFailure() from exc

        if not response.ok:
            message = self._extract_message(data)
            self._logger.warning(
                f"Explorer returned status {response.status}: {message}"
            )
            raise ApplicationFailure(message, status=response.status)

        if not isinstance(data, dict):
            self._logger.error(
                f"Expected a JSON object, got {type(data).__name__}"
            )
            raise DecodeFailure()

        return WalletPayload(
            address=self._optional_text(data.get("address")),
            balance_xrp=self._optional_text(data.get("balanceXRP")),
            usd_value=self._optional_text(data.get("usdValue")),
            transactions=self._transactions(data.get("transactions")),
        )

    @staticmethod
    def _extract_message(data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        message = data.get("message")
        if not message:
            return None
        return str(message)

    @staticmethod
    def _optional_text(value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    def _transactions(self, value: Any) -> tuple[Any, ...]:
        if value is None:
            return ()
        if not isinstance(value, list):
            self._logger.warning(
                "Ignoring non-list transactions field of type "
                f"{type(value).__name__}"
            )
            return ()
        return tuple(value)


__all__ = ["ResponseDecoder"]
