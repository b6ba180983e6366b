"""Routing of rule field names to their value decoders."""

from types import MappingProxyType
from typing import Callable

from .decoders import (
    decode_byweekday,
    decode_freq,
    decode_int,
    decode_int_list,
    decode_until,
    decode_wkst,
)
from .errors import UnknownParameterError
from .options import RuleOptionsBuilder

Decoder = Callable[[RuleOptionsBuilder, str, str], None]

FIELD_DECODERS: "MappingProxyType[str, Decoder]" = MappingProxyType(
    {
        "FREQ": decode_freq,
        "UNTIL": decode_until,
        "WKST": decode_wkst,
        "BYDAY": decode_byweekday,
        "BYWEEKDAY": decode_byweekday,
        "INTERVAL": decode_int,
        "COUNT": decode_int,
        "BYSETPOS": decode_int_list,
        "BYMONTH": decode_int_list,
        "BYMONTHDAY": decode_int_list,
        "BYYEARDAY": decode_int_list,
        "BYEASTER": decode_int_list,
        "BYWEEKNO": decode_int_list,
        "BYHOUR": decode_int_list,
        "BYMINUTE": decode_int_list,
        "BYSECOND": decode_int_list,
    }
)

# Extracted from the whole line before fields are dispatched
SKIPPED_PARAMETERS = frozenset({"DTSTART", "TZID"})


def dispatch_field(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    """
    Decode one ``NAME=VALUE`` pair of a rule into the builder.

    Args:
        builder: Options being accumulated for the current rule
        name: Field name, any case
        value: Raw field value, any case

    Raises:
        UnknownParameterError: If no decoder is registered for the name
    """
    name = name.upper()
    if name in SKIPPED_PARAMETERS:
        return
    value = value.upper()
    decoder = FIELD_DECODERS.get(name)
    if decoder is None:
        raise UnknownParameterError(name, value)
    decoder(builder, name, value)
