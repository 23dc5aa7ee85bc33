"""
Event Timetable – venue x time scheduling board for the terminal.
"""
