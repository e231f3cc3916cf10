"""Topology compiler, warp dispatcher and zone table"""

from gapbridge.topology.compiler import zones_compile
from gapbridge.topology.dispatcher import warp_dispatch
from gapbridge.topology.table import Topology, ZoneTable

__all__ = ["zones_compile", "warp_dispatch", "Topology", "ZoneTable"]
