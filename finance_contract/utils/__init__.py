"""
Utility functions module.

Common utilities for time handling and bounded calculated quantities.

Time Semantics:
- All instants are timezone-aware UTC datetimes
- Contract arithmetic works on whole epoch seconds
- utc_now() is the only wall-clock source and is the seam tests patch
"""
