from truthbot.analyzer.base import Analyzer
from truthbot.analyzer.simulated import SimulatedAnalyzer

__all__ = [
    "Analyzer",
    "SimulatedAnalyzer",
]
