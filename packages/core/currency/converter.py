from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Union

import httpx

from ..config import optional_float_env


EXCHANGE_RATE_URL = "https://open.er-api.com/v6/latest/{base}"

ERROR_INVALID_CODE = "invalid_currency_code"
ERROR_RATE_FETCH = "rate_fetch_failed"
ERROR_UNKNOWN_TARGET = "unknown_target_currency"

SUCCESS_PREFIX = "✔"
ERROR_PREFIX = "✖"

_logger = logging.getLogger("agent_lab.currency")


@dataclass(frozen=True)
class Conversion:
    amount: float
    from_currency: str
    to_currency: str
    converted: float
    rate: float


@dataclass(frozen=True)
class ConversionError:
    kind: str
    message: str
    currency: str


ConversionResult = Union[Conversion, ConversionError]


class RateFetchError(RuntimeError):
    pass


def normalize_currency_code(code: str) -> str:
    return code.strip().upper()


def _is_currency_code(code: str) -> bool:
    return len(code) == 3 and code.isalpha()


def fetch_rates(base: str) -> Dict[str, Any]:
    """Return the rate table for ``base`` from the public exchange-rate API."""
    url = EXCHANGE_RATE_URL.format(base=base)
    try:
        response = httpx.get(url, timeout=optional_float_env("EXCHANGE_RATE_TIMEOUT_SECONDS"))
    except httpx.HTTPError as exc:
        raise RateFetchError(f"Failed to fetch exchange rate for {base}") from exc
    if not response.is_success:
        raise RateFetchError(f"Failed to fetch exchange rate for {base}")
    try:
        payload = response.json()
    except ValueError as exc:
        raise RateFetchError(f"Failed to fetch exchange rate for {base}") from exc
    rates = payload.get("rates") if isinstance(payload, dict) else None
    return rates if isinstance(rates, dict) else {}


def convert_currency(amount: float, from_currency: str, to_currency: str) -> ConversionResult:
    source = normalize_currency_code(from_currency)
    target = normalize_currency_code(to_currency)
    for code in (source, target):
        if not _is_currency_code(code):
            return ConversionError(
                kind=ERROR_INVALID_CODE,
                message=f"Invalid currency code: {code or '<empty>'}",
                currency=code,
            )

    try:
        rates = fetch_rates(source)
    except RateFetchError as exc:
        _logger.warning("rate_fetch_failed base=%s error=%s", source, exc.__cause__ or exc)
        return ConversionError(kind=ERROR_RATE_FETCH, message=str(exc), currency=source)

    rate = rates.get(target)
    if not rate or isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return ConversionError(
            kind=ERROR_UNKNOWN_TARGET,
            message=f"Invalid target currency: {target}",
            currency=target,
        )

    return Conversion(
        amount=amount,
        from_currency=source,
        to_currency=target,
        converted=round(amount * rate, 2),
        rate=rate,
    )


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_conversion(result: ConversionResult) -> str:
    if isinstance(result, ConversionError):
        return f"{ERROR_PREFIX} Error occurred: {result.message}"
    return (
        f"{SUCCESS_PREFIX} Converted {_format_number(result.amount)} {result.from_currency} "
        f"→ {result.converted:.2f} {result.to_currency}\n"
        f"(Exchange Rate: 1 {result.from_currency} = {_format_number(result.rate)} "
        f"{result.to_currency})"
    )
