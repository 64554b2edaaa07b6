"""argguard utility modules."""
