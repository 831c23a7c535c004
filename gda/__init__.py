"""
Discrete Gradual Dutch Auction (GDA)

Pricing and settlement for auctions of enumerable units where:
- Price rises geometrically with units already sold
- Price decays continuously with time since auction start
- All pricing runs in 18-decimal fixed-point arithmetic
"""

__version__ = "0.1.0"
