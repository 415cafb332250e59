from unitgraph.conversions.enumerator import (
    ConversionFact,
    ConversionIndex,
    enumerate_conversions,
)

__all__ = ["ConversionFact", "ConversionIndex", "enumerate_conversions"]
