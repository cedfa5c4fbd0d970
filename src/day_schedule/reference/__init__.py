"""Static reference data: fixed tables the analysis layer looks values up in.

Modules:
  - dayphases: the 24 named phases of a day (12 night + 12 day)
  - seasons: season names, meteorological month ranges, phenological anchors
  - geography: region in which the phenological estimate is valid
"""
