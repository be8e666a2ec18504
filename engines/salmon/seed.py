"""
Salmon Supply Chain — Sample Ledger Data
==========================================
Argument tuples for recordSalmon used by initLedger, in seeding order.
"""

SAMPLE_SALMON = (
    ("1", "Vessel #1", "2014-01-01", "Viet Nam", "Nha Hoang"),
    ("2", "Vessel #2", "2016-04-22", "US", "Thanh Dong"),
    ("3", "Vessel #3", "2017-11-13", "Korea", "Duy Nguyen"),
)
