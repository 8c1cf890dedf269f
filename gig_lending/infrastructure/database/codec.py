"""JSON encoding of domain values stored in ledger_entry.value"""

from dataclasses import asdict
from typing import Any, Callable, Dict

from gig_lending.domain.models import CreditProfile, DataKey, LiquidityDeposit, Loan


def _encode_profile(profile: CreditProfile) -> Dict[str, Any]:
    data = asdict(profile)
    data["gig_platforms"] = list(profile.gig_platforms)
    return data


def _decode_profile(data: Dict[str, Any]) -> CreditProfile:
    return CreditProfile(**{**data, "gig_platforms": tuple(data["gig_platforms"])})


def _encode_rates(rates: Dict[int, int]) -> Dict[str, int]:
    # JSON object keys are always strings
    return {str(threshold): rate for threshold, rate in rates.items()}


def _decode_rates(data: Dict[str, int]) -> Dict[int, int]:
    return {int(threshold): rate for threshold, rate in data.items()}


_ENCODERS: Dict[DataKey, Callable[[Any], Any]] = {
    DataKey.LOANS: asdict,
    DataKey.CREDIT_PROFILES: _encode_profile,
    DataKey.LIQUIDITY_POOLS: lambda deposits: [asdict(d) for d in deposits],
    DataKey.INTEREST_RATES: _encode_rates,
}

_DECODERS: Dict[DataKey, Callable[[Any], Any]] = {
    DataKey.LOANS: lambda data: Loan(**data),
    DataKey.CREDIT_PROFILES: _decode_profile,
    DataKey.LIQUIDITY_POOLS: lambda data: tuple(LiquidityDeposit(**d) for d in data),
    DataKey.INTEREST_RATES: _decode_rates,
}


def encode_value(key: DataKey, value: Any) -> Any:
    """Domain value -> JSON-compatible value; scalars pass through"""
    encoder = _ENCODERS.get(key)
    return encoder(value) if encoder else value


def decode_value(key: DataKey, data: Any) -> Any:
    """JSON value -> domain value; scalars pass through"""
    decoder = _DECODERS.get(key)
    return decoder(data) if decoder else data
