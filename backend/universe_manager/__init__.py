"""
Wrestling Universe Manager

Championship title ledger and exclusive show roster engine.
"""
