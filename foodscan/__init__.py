"""
FoodScan barcode verdict core.

Turns a camera barcode reading into a dietary-safety verdict for a
stored dietary profile.

Structure:
- domain/: Scan state machine, product and dietary models, rules
- infrastructure/: External concerns (OpenFoodFacts API, code sources)
- application/: Use cases wiring scan trigger and product lookup
- scripts/: Command line entry points
- tests/: Test suite (unit, integration)
"""

__version__ = "1.0.0"
