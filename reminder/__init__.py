"""
reminder
--------
Personal task/reminder tracker: notes organized under tags, with comments,
completion status and (optionally recurring) due dates, persisted as a
single JSON data file.
"""
__version__ = "0.1.0"
