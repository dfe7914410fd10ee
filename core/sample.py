from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from core.errors import InsufficientData

# Ordinal positions of the reported receive/transmit octet counters among
# the valid lines of a snmp6 counter file (Ip6InMcastOctets /
# Ip6OutMcastOctets in /proc/net/snmp6). Fixed, not configurable.
RX_INDEX = 24
TX_INDEX = 25

TYPE_IF_OCTETS = "if_octets"


@dataclass(frozen=True)
class TrafficSample:
    """Receive/transmit octet counters for one scope."""
    plugin: str
    scope: str
    rx: int
    tx: int
    type: str = TYPE_IF_OCTETS

    def to_record(self) -> Dict[str, Any]:
        return {
            "plugin": self.plugin,
            "plugin_instance": self.scope,
            "type": self.type,
            "values": [self.rx, self.tx],
        }


def build_sample(sequence: Sequence[int], scope: str, plugin: str) -> TrafficSample:
    """
    Pick the octet counters out of a parsed counter sequence.

    Raises:
        InsufficientData: if the sequence does not reach TX_INDEX
    """
    needed = TX_INDEX + 1
    if len(sequence) < needed:
        raise InsufficientData(scope, len(sequence), needed)
    return TrafficSample(plugin=plugin, scope=scope, rx=sequence[RX_INDEX], tx=sequence[TX_INDEX])
