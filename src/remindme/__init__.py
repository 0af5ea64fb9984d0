"""
remindme: tiny reminders for the terminal.

Notes live one per line in ~/.reminders:
- add a note
- list pending notes
- acknowledge (remove) a note by its index
"""

__version__ = "0.1.0"
