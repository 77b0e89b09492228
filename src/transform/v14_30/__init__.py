"""
DSTU2016May (1.4) <-> STU3 (3.0) conversion.

Importing this package registers its resource converters.
"""

from src.transform.v14_30.value_set import value_set_14_to_30, value_set_30_to_14

__all__ = ["value_set_14_to_30", "value_set_30_to_14"]
